"""
Error models for consistent API error responses
"""
from pydantic import BaseModel
from typing import Optional, List


class ErrorDetail(BaseModel):
    """Individual error detail"""
    field: Optional[str] = None
    message: str
    code: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response format"""
    error: str
    message: str
    details: Optional[List[ErrorDetail]] = None
    status_code: int


def invalid_coordinates_error(lat: float, lon: float) -> ErrorResponse:
    """Build the error body returned for out-of-range coordinates"""
    return ErrorResponse(
        error="invalid_coordinates",
        message=f"Coordinates ({lat}, {lon}) are not valid WGS84 coordinates",
        details=[
            ErrorDetail(field="lat", message="Latitude must be between -90 and 90", code="range"),
            ErrorDetail(field="lon", message="Longitude must be between -180 and 180", code="range"),
        ],
        status_code=400,
    )
