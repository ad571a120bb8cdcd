"""
Centralized model imports for easy access across the application
"""

# Common models
from .common import (
    PointModel,
    ProjectedPoint,
    HealthResponse,
    ApiInfoResponse
)

# Airport models
from .airports import (
    AirportClass,
    Airport,
    NearestAirport,
    AirportListResponse,
    AirportStats
)

# Safety models
from .safety import (
    SafetyStatus,
    ProtectedAreaResult,
    SafetyVerdict,
    SafetyCheckRequest,
    SafetyCheckResponse,
    DisclaimerResponse
)

# Aircraft models
from .aircraft import (
    PlaneDimensions,
    CGRange,
    PlaneCalculation,
    PlaneWithCalculations
)

# Error models
from .errors import (
    ErrorDetail,
    ErrorResponse,
    invalid_coordinates_error
)

# Export all models for easy importing
__all__ = [
    # Common
    "PointModel",
    "ProjectedPoint",
    "HealthResponse",
    "ApiInfoResponse",

    # Airports
    "AirportClass",
    "Airport",
    "NearestAirport",
    "AirportListResponse",
    "AirportStats",

    # Safety
    "SafetyStatus",
    "ProtectedAreaResult",
    "SafetyVerdict",
    "SafetyCheckRequest",
    "SafetyCheckResponse",
    "DisclaimerResponse",

    # Aircraft
    "PlaneDimensions",
    "CGRange",
    "PlaneCalculation",
    "PlaneWithCalculations",

    # Errors
    "ErrorDetail",
    "ErrorResponse",
    "invalid_coordinates_error",
]
