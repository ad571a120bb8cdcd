"""
Location safety service

Decides whether a location is safe for flying RC planes and drones:
1. Airport proximity - red zone within 5 km of any airport
2. Protected nature areas - red zone inside a verneområde

Only static data is checked. Temporary restrictions (NOTAMs) are not,
so the NOTAM disclaimer must always be shown next to a verdict.
"""
from typing import Optional, Sequence

from flysafe.core.config import SAFETY_CONFIG
from flysafe.core.exceptions import EmptyInputError
from flysafe.core.utils import get_logger
from flysafe.data.airports import AIRPORTS
from flysafe.models import (
    Airport,
    NearestAirport,
    PointModel,
    SafetyStatus,
    SafetyVerdict
)
from flysafe.services.coordinates import is_valid_coordinate, is_within_norway
from flysafe.services.protected_area_service import ProtectedAreaService
from flysafe.services.proximity import find_nearest

logger = get_logger("safety_service")

RED_ZONE_RADIUS_KM = SAFETY_CONFIG["red_zone_radius_km"]

UNKNOWN_AIRPORT = NearestAirport(name="Unknown", code="", distance_km=0.0)

INVALID_COORDINATES_WARNING = "Invalid coordinates"
OUTSIDE_REGION_WARNING = "Coordinates are outside Norway"
CHECK_FAILED_WARNING = "Safety check could not be completed"

NOTAM_DISCLAIMER = """This tool only checks STATIC data (airports and protected nature areas).
You MUST always check the following BEFORE flying:

1. Temporary restrictions (NOTAMs): https://ippc.no
2. The Avinor Avidrone app
3. Weather forecast and wind conditions
4. That you hold the required certificates (A1/A2/A3)
5. That your drone is registered at flydrone.no

This tool does NOT replace the pilot's responsibility to check all restrictions!"""


def _rejected(warning: str) -> SafetyVerdict:
    return SafetyVerdict(
        status=SafetyStatus.UNSAFE,
        nearest_airport=UNKNOWN_AIRPORT,
        warnings=[warning],
    )


class SafetyService:
    """Combines airport proximity and protected area lookups into a verdict"""

    def __init__(
        self,
        airports: Sequence[Airport] = AIRPORTS,
        protected_area_service: Optional[ProtectedAreaService] = None
    ):
        if len(airports) == 0:
            raise EmptyInputError("Airport registry is empty")
        self.airports = airports
        self.protected_area_service = protected_area_service or ProtectedAreaService()

    async def check_safety(self, lat: float, lon: float) -> SafetyVerdict:
        """
        Check location safety for flying

        Invalid or out-of-region coordinates are UNSAFE without any lookups.
        A failed protected area lookup does not change the status; it is
        reported in `query_error`. Never raises.
        """
        try:
            if not is_valid_coordinate(lat, lon):
                logger.info(f"Rejected invalid coordinates ({lat}, {lon})")
                return _rejected(INVALID_COORDINATES_WARNING)

            if not is_within_norway(lat, lon):
                logger.info(f"Rejected coordinates outside Norway ({lat}, {lon})")
                return _rejected(OUTSIDE_REGION_WARNING)

            point = PointModel(lat=lat, lon=lon)

            # Airport proximity (local, fast)
            airport, distance_km = find_nearest(point, self.airports)
            near_airport = distance_km <= RED_ZONE_RADIUS_KM

            # Protected areas (remote)
            protected_area = await self.protected_area_service.query_protected_area(point)

            unsafe = near_airport or protected_area.is_protected
            status = SafetyStatus.UNSAFE if unsafe else SafetyStatus.SAFE

            warnings = []
            if near_airport:
                warnings.append(
                    f"Within {RED_ZONE_RADIUS_KM:g} km of {airport.name} ({distance_km:.1f} km)"
                )
            if protected_area.is_protected:
                warnings.append(f"Inside protected nature area: {protected_area.name}")

            logger.info("Safety check complete", extra={
                "lat": lat,
                "lon": lon,
                "status": status.value,
                "nearest_airport": airport.code,
                "distance_km": distance_km,
                "query_error": protected_area.query_error
            })

            return SafetyVerdict(
                status=status,
                nearest_airport=NearestAirport(
                    name=airport.name,
                    code=airport.code,
                    distance_km=distance_km
                ),
                protected_area=protected_area,
                warnings=warnings,
                query_error=protected_area.query_error
            )

        except Exception as e:
            logger.error(f"Safety check failed for ({lat}, {lon}): {e}", exc_info=True)
            return _rejected(CHECK_FAILED_WARNING)


def status_message(verdict: SafetyVerdict) -> str:
    """Human-readable one-line status"""
    if verdict.status == SafetyStatus.UNSAFE:
        return "RED ZONE - Not safe to fly here"
    return "GREEN ZONE - Safe to fly (remember to check NOTAMs)"


def requires_notam_check() -> bool:
    """NOTAMs must always be checked, whatever the verdict"""
    return True


def notam_disclaimer() -> str:
    return NOTAM_DISCLAIMER


# Built once at import, holds no per-request state
default_safety_service = SafetyService()


async def check_safety(lat: float, lon: float) -> SafetyVerdict:
    """Check a location with the default service"""
    return await default_safety_service.check_safety(lat, lon)
