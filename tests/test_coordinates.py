import math

import pytest

from flysafe.models import PointModel, ProjectedPoint
from flysafe.services.coordinates import (
    is_valid_coordinate,
    is_within_norway,
    to_geographic,
    to_projected
)


def test_central_meridian_projects_to_false_easting():
    """15°E is the central meridian of UTM zone 33"""
    projected = to_projected(PointModel(lat=60.0, lon=15.0))
    assert projected.easting == pytest.approx(500000.0, abs=1.0)


def test_equator_on_central_meridian_projects_to_zero_northing():
    projected = to_projected(PointModel(lat=0.0, lon=15.0))
    assert projected.easting == pytest.approx(500000.0, abs=1.0)
    assert projected.northing == pytest.approx(0.0, abs=1.0)


def test_gardermoen_axis_order():
    """Latitude-first input must reach pyproj as longitude-first.

    Gardermoen is ~3.9° west of 15°E at ~60°N, so about 216 km west of
    the 500 km false easting. Swapped axes would land thousands of km away.
    """
    projected = to_projected(PointModel(lat=60.1939, lon=11.1004))
    assert 282_500 < projected.easting < 285_000
    assert 6_677_000 < projected.northing < 6_682_000


def test_west_of_central_meridian_has_smaller_easting():
    west = to_projected(PointModel(lat=62.0, lon=10.0))
    east = to_projected(PointModel(lat=62.0, lon=20.0))
    assert west.easting < 500000 < east.easting


def test_northing_grows_with_latitude():
    south = to_projected(PointModel(lat=58.0, lon=8.0))
    north = to_projected(PointModel(lat=70.0, lon=8.0))
    assert north.northing > south.northing


@pytest.mark.parametrize("lat,lon", [
    (60.1939, 11.1004),  # Gardermoen
    (59.9139, 10.7522),  # Oslo
    (69.6833, 18.9167),  # Tromsø
    (58.2044, 8.0853),   # Kristiansand
    (70.0653, 29.8447),  # Vadsø
])
def test_round_trip(lat, lon):
    point = to_geographic(to_projected(PointModel(lat=lat, lon=lon)))
    assert point.lat == pytest.approx(lat, abs=1e-5)
    assert point.lon == pytest.approx(lon, abs=1e-5)


def test_to_geographic_returns_lat_first():
    point = to_geographic(ProjectedPoint(easting=500000.0, northing=6651411.0))
    assert point.lon == pytest.approx(15.0, abs=1e-5)
    assert point.lat == pytest.approx(60.0, abs=0.01)


@pytest.mark.parametrize("lat,lon,expected", [
    (60.0, 10.0, True),
    (-90.0, -180.0, True),
    (90.0, 180.0, True),
    (90.1, 10.0, False),
    (60.0, -180.5, False),
    (math.nan, 10.0, False),
    (60.0, math.inf, False),
    (None, 10.0, False),
])
def test_is_valid_coordinate(lat, lon, expected):
    assert is_valid_coordinate(lat, lon) is expected


@pytest.mark.parametrize("lat,lon,expected", [
    (60.1939, 11.1004, True),
    (57.0, 4.0, True),    # corners are inclusive
    (72.0, 32.0, True),
    (56.99, 10.0, False),
    (60.0, 3.99, False),
    (78.2461, 15.4656, False),  # Svalbard is outside the box
    (0.0, 0.0, False),
])
def test_is_within_norway(lat, lon, expected):
    assert is_within_norway(lat, lon) is expected
