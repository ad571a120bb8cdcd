"""
Airport proximity - great-circle distance and nearest airport search
"""
from typing import NamedTuple, Sequence

from haversine import haversine, Unit

from flysafe.core.config import SAFETY_CONFIG
from flysafe.core.exceptions import EmptyInputError
from flysafe.core.utils import round_distance
from flysafe.models import Airport, PointModel

EARTH_RADIUS_KM = SAFETY_CONFIG["earth_radius_km"]


class NearestResult(NamedTuple):
    airport: Airport
    distance_km: float


def great_circle_distance_km(a: PointModel, b: PointModel) -> float:
    """
    Haversine distance in kilometers on a sphere of radius 6371 km

    The haversine package uses its own mean Earth radius, so the central
    angle is taken in radians and scaled here.
    """
    angle = haversine((a.lat, a.lon), (b.lat, b.lon), unit=Unit.RADIANS)
    return angle * EARTH_RADIUS_KM


def find_nearest(point: PointModel, candidates: Sequence[Airport]) -> NearestResult:
    """
    Find the nearest airport by linear scan

    Ties keep the earlier candidate. The returned distance is rounded
    to 2 decimals.
    """
    if len(candidates) == 0:
        raise EmptyInputError("No airports provided")

    nearest = candidates[0]
    min_distance = great_circle_distance_km(point, nearest.location)

    for airport in candidates[1:]:
        distance = great_circle_distance_km(point, airport.location)
        if distance < min_distance:
            min_distance = distance
            nearest = airport

    return NearestResult(
        airport=nearest,
        distance_km=round_distance(min_distance, SAFETY_CONFIG["distance_decimals"]),
    )


def is_within_radius(point: PointModel, candidates: Sequence[Airport], radius_km: float) -> bool:
    """Check if any airport is within radius_km of point (inclusive)"""
    return any(
        great_circle_distance_km(point, airport.location) <= radius_km
        for airport in candidates
    )
