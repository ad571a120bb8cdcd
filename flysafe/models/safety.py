"""
Safety check related models
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from .airports import NearestAirport


class SafetyStatus(str, Enum):
    """Binary safety verdict"""
    SAFE = "SAFE"
    UNSAFE = "UNSAFE"


class ProtectedAreaResult(BaseModel):
    """Outcome of a protected nature area lookup"""
    model_config = ConfigDict(frozen=True)

    is_protected: bool
    name: Optional[str] = None
    boundary: Optional[Dict[str, Any]] = None
    query_error: Optional[str] = None


class SafetyVerdict(BaseModel):
    """Result of a single safety check"""
    model_config = ConfigDict(frozen=True)

    status: SafetyStatus
    nearest_airport: NearestAirport
    protected_area: Optional[ProtectedAreaResult] = None
    warnings: List[str] = []
    query_error: Optional[str] = None

    @property
    def is_safe(self) -> bool:
        return self.status == SafetyStatus.SAFE


class SafetyCheckRequest(BaseModel):
    """Request to check a location.

    Coordinates are not range-checked here: out-of-range input is
    classified UNSAFE by the safety service rather than rejected.
    """
    lat: float
    lon: float


class SafetyCheckResponse(BaseModel):
    """Safety check response for API endpoints"""
    verdict: SafetyVerdict
    message: str
    requires_notam_check: bool


class DisclaimerResponse(BaseModel):
    """NOTAM disclaimer text"""
    disclaimer: str
    requires_notam_check: bool
