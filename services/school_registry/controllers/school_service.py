# services/school_registry/controllers/school_service.py

import logging
from typing import Any, Iterable, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.school_registry.geo import haversine_km, parse_coordinate
from services.school_registry.models.schools import School
from services.school_registry.schemas.schools import (
    SchoolCreateResponse,
    SchoolListResponse,
    SchoolOut,
    SchoolWithDistance,
    parse_school_payload,
)
from shared.db import get_db
from shared.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Schools"])


def rank_by_distance(schools: Iterable[School], lat: float, lon: float) -> List[SchoolWithDistance]:
    """Attach distance_km to every school and sort nearest first.

    Rows whose stored coordinates don't parse keep a null distance and go last.
    """
    ranked = []
    for school in schools:
        school_lat = parse_coordinate(school.latitude)
        school_lon = parse_coordinate(school.longitude)

        distance_km = None
        if school_lat is not None and school_lon is not None:
            distance_km = haversine_km(lat, lon, school_lat, school_lon)

        ranked.append(SchoolWithDistance(
            id=school.id,
            name=school.name,
            address=school.address,
            latitude=school_lat,
            longitude=school_lon,
            distance_km=distance_km,
        ))

    ranked.sort(key=lambda s: (s.distance_km is None, s.distance_km or 0.0))
    return ranked


# --- REGISTER SCHOOL ---
@router.post("/addSchool", response_model=SchoolCreateResponse, status_code=status.HTTP_201_CREATED)
async def add_school(
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db)
):
    school_data = parse_school_payload(payload)

    new_school = School(
        name=school_data.name,
        address=school_data.address,
        latitude=school_data.latitude,
        longitude=school_data.longitude
    )

    db.add(new_school)
    try:
        await db.commit()
        await db.refresh(new_school)
    except SQLAlchemyError as exc:
        await db.rollback()
        raise StorageError(original_error=exc)

    logger.info("Registered school %s (%s)", new_school.id, new_school.name)
    return SchoolCreateResponse(data=SchoolOut.model_validate(new_school))


# --- LIST SCHOOLS BY PROXIMITY ---
@router.get("/listSchools", response_model=SchoolListResponse)
async def list_schools(
    lat: Optional[str] = Query(None),
    lon: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    user_lat = parse_coordinate(lat)
    user_lon = parse_coordinate(lon)
    if user_lat is None or user_lon is None:
        raise ValidationError("Query params lat and lon are required and must be valid numbers")

    try:
        result = await db.execute(select(School))
        schools = result.scalars().all()
    except SQLAlchemyError as exc:
        raise StorageError(original_error=exc)

    ranked = rank_by_distance(schools, user_lat, user_lon)
    logger.debug("Listing %d schools around (%s, %s)", len(ranked), user_lat, user_lon)
    return SchoolListResponse(count=len(ranked), data=ranked)
