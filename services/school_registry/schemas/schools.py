# services/school_registry/schemas/schools.py

from pydantic import BaseModel, Field, field_validator, ValidationError as PydanticValidationError
from typing import Any, List, Optional

from shared.exceptions import ValidationError, format_validation_errors


class SchoolCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=500)
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)

    class Config:
        str_strip_whitespace = True

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        # JSON true/false would otherwise coerce to 1.0 / 0.0
        if isinstance(value, bool):
            raise ValueError("must be a number")
        return value


class SchoolOut(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float

    class Config:
        from_attributes = True


class SchoolWithDistance(BaseModel):
    id: int
    name: str
    address: str
    latitude: Optional[float]
    longitude: Optional[float]
    distance_km: Optional[float]


class SchoolCreateResponse(BaseModel):
    success: bool = True
    data: SchoolOut


class SchoolListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[SchoolWithDistance]


def parse_school_payload(raw: Any) -> SchoolCreate:
    """Validate an arbitrary request body into a normalized SchoolCreate.

    Raises ValidationError describing the first violated constraint.
    """
    try:
        return SchoolCreate.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_errors(exc.errors()))
