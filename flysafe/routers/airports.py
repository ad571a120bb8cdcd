"""
Airport router - read-only access to the airport registry
"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from flysafe.core.exceptions import EmptyInputError
from flysafe.core.utils import get_logger
from flysafe.data.airports import AIRPORTS, airport_stats
from flysafe.models import (
    AirportListResponse,
    AirportStats,
    NearestAirport,
    PointModel,
    invalid_coordinates_error
)
from flysafe.services.coordinates import is_valid_coordinate
from flysafe.services.proximity import find_nearest

logger = get_logger("airports_router")
router = APIRouter()


@router.get("/airports", response_model=AirportListResponse)
async def get_airports():
    """Get all registered airports"""
    return AirportListResponse(airports=list(AIRPORTS), count=len(AIRPORTS))


@router.get("/airports/stats", response_model=AirportStats)
async def get_airport_stats():
    """Get airport counts per class"""
    return airport_stats()


@router.get("/airports/nearest", response_model=NearestAirport)
async def get_nearest_airport(lat: float, lon: float):
    """Get the nearest airport to a point and its distance in km"""
    if not is_valid_coordinate(lat, lon):
        error = invalid_coordinates_error(lat, lon)
        return JSONResponse(status_code=error.status_code, content=error.model_dump())

    try:
        airport, distance_km = find_nearest(PointModel(lat=lat, lon=lon), AIRPORTS)
        return NearestAirport(name=airport.name, code=airport.code, distance_km=distance_km)
    except EmptyInputError as e:
        logger.error("Airport registry is empty", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
