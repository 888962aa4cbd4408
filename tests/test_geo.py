"""Unit tests for the haversine distance helpers."""

import math

import pytest

from services.school_registry.geo import EARTH_RADIUS_KM, haversine_km, parse_coordinate


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(12.97, 77.59, 12.97, 77.59) == 0

    def test_symmetric(self):
        a = (28.6139, 77.2090)
        b = (19.0760, 72.8777)
        assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a))

    def test_one_degree_longitude_on_equator(self):
        assert haversine_km(0, 0, 0, 1) == pytest.approx(111.19, abs=0.01)

    def test_antipodal_points_half_circumference(self):
        assert haversine_km(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_crossing_antimeridian(self):
        assert haversine_km(0, 179.5, 0, -179.5) == pytest.approx(111.19, abs=0.01)


class TestParseCoordinate:
    @pytest.mark.parametrize("value, expected", [
        (12.5, 12.5),
        (-90, -90.0),
        ("77.5946", 77.5946),
        ("  10 ", 10.0),
    ])
    def test_numeric_values(self, value, expected):
        assert parse_coordinate(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "abc", "nan", "inf", float("nan"), True, [], {}])
    def test_unparseable_values(self, value):
        assert parse_coordinate(value) is None
