"""
Common/Base models used across multiple domains
"""
from pydantic import BaseModel, ConfigDict


class PointModel(BaseModel):
    """Geographic point (WGS84) with latitude and longitude in degrees"""
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class ProjectedPoint(BaseModel):
    """Point in UTM zone 33N, easting and northing in meters"""
    model_config = ConfigDict(frozen=True)

    easting: float
    northing: float


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: str


class ApiInfoResponse(BaseModel):
    """API information response"""
    message: str
    version: str
    status: str
