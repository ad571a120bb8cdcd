"""
Airport-related Pydantic models
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict

from .common import PointModel


class AirportClass(str, Enum):
    """Classification tier of an airport"""
    PRIMARY = "primary"
    REGIONAL = "regional"
    PRIVATE = "private"


class Airport(BaseModel):
    """A named airport location. `code` is a display label, not a key."""
    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    location: PointModel
    airport_class: AirportClass


class NearestAirport(BaseModel):
    """Nearest airport summary as reported on a verdict"""
    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    distance_km: float


class AirportListResponse(BaseModel):
    """Response containing the airport registry"""
    airports: List[Airport]
    count: int


class AirportStats(BaseModel):
    """Airport counts per class"""
    primary: int
    regional: int
    private: int
    total: int
