"""
Aircraft router - CG/MAC calculator
"""
from fastapi import APIRouter, HTTPException

from flysafe.core.utils import get_logger
from flysafe.models import PlaneCalculation, PlaneDimensions
from flysafe.services.aircraft_service import calculate_plane_data

logger = get_logger("aircraft_router")
router = APIRouter()


@router.post("/aircraft/calculate", response_model=PlaneCalculation)
async def calculate(dimensions: PlaneDimensions):
    """Calculate wing area, MAC and recommended CG range"""
    try:
        return calculate_plane_data(dimensions)
    except Exception as e:
        logger.error("Error calculating plane data", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
