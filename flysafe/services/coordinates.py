"""
Coordinate utilities - WGS84 <-> UTM zone 33N and input validation

The protected area service only accepts metric coordinates in
ETRS89 / UTM zone 33N (EPSG:25833). Querying it with WGS84 degrees
returns wrong or empty results, so every point is projected first.
"""
import math

from pyproj import Transformer

from flysafe.core.config import NorwayBounds, PROJECTION_CONFIG
from flysafe.models import PointModel, ProjectedPoint

# always_xy: pyproj takes (lon, lat) / (easting, northing), x first,
# regardless of the axis order declared by the EPSG definition.
_TO_PROJECTED = Transformer.from_crs(
    PROJECTION_CONFIG["geographic_epsg"],
    PROJECTION_CONFIG["projected_epsg"],
    always_xy=True,
)
_TO_GEOGRAPHIC = Transformer.from_crs(
    PROJECTION_CONFIG["projected_epsg"],
    PROJECTION_CONFIG["geographic_epsg"],
    always_xy=True,
)


def to_projected(point: PointModel) -> ProjectedPoint:
    """
    Transform a WGS84 point to UTM zone 33N

    Example: Oslo Gardermoen (60.1939, 11.1004) lies west of the zone's
    central meridian (15°E), so its easting is below 500000 m.
    """
    easting, northing = _TO_PROJECTED.transform(point.lon, point.lat)
    return ProjectedPoint(easting=easting, northing=northing)


def to_geographic(projected: ProjectedPoint) -> PointModel:
    """Transform a UTM zone 33N point back to WGS84"""
    lon, lat = _TO_GEOGRAPHIC.transform(projected.easting, projected.northing)
    return PointModel(lat=lat, lon=lon)


def is_valid_coordinate(lat: float, lon: float) -> bool:
    """Check that lat/lon are finite and inside the WGS84 ranges"""
    if lat is None or lon is None:
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def is_within_norway(lat: float, lon: float) -> bool:
    """
    Check if coordinates are inside the supported bounding box

    Approximate bounds for mainland Norway: 57°N-72°N, 4°E-32°E.
    """
    return (
        NorwayBounds.MIN_LAT <= lat <= NorwayBounds.MAX_LAT
        and NorwayBounds.MIN_LON <= lon <= NorwayBounds.MAX_LON
    )
