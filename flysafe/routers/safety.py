"""
Safety router - location safety check endpoints
"""
from fastapi import APIRouter, HTTPException

from flysafe.core.utils import get_logger
from flysafe.models import DisclaimerResponse, SafetyCheckRequest, SafetyCheckResponse
from flysafe.services.safety_service import (
    default_safety_service,
    notam_disclaimer,
    requires_notam_check,
    status_message
)

logger = get_logger("safety_router")
router = APIRouter()

# Initialize service
safety_service = default_safety_service


@router.post("/safety/check", response_model=SafetyCheckResponse)
async def check_location(request: SafetyCheckRequest):
    """
    Check whether a location is safe for flying.

    Returns:
    - SAFE / UNSAFE verdict with warnings
    - Nearest airport and distance
    - Protected nature area, if any
    - query_error when the protected area lookup failed
    """
    try:
        verdict = await safety_service.check_safety(request.lat, request.lon)
        return SafetyCheckResponse(
            verdict=verdict,
            message=status_message(verdict),
            requires_notam_check=requires_notam_check()
        )
    except Exception as e:
        logger.error("Error checking location", extra={
            "lat": request.lat,
            "lon": request.lon,
            "error": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/safety/disclaimer", response_model=DisclaimerResponse)
async def get_disclaimer():
    """NOTAM disclaimer to show with every verdict"""
    return DisclaimerResponse(
        disclaimer=notam_disclaimer(),
        requires_notam_check=requires_notam_check()
    )
