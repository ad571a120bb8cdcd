"""
Application configuration and constants
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Hard upper bound for the protected-area query
MAX_QUERY_TIMEOUT_SECONDS = 10.0


# Supported region (mainland Norway, approximate)
class NorwayBounds:
    MIN_LAT = 57.0
    MAX_LAT = 72.0
    MIN_LON = 4.0
    MAX_LON = 32.0


# Safety policy
SAFETY_CONFIG = {
    "red_zone_radius_km": 5.0,
    "earth_radius_km": 6371.0,
    "distance_decimals": 2,
}

# Coordinate reference systems
PROJECTION_CONFIG = {
    "geographic_epsg": 4326,   # WGS84, lat/lon in degrees
    "projected_epsg": 25833,   # ETRS89 / UTM zone 33N, meters
}


def _query_timeout() -> float:
    raw = os.getenv("PROTECTED_AREA_TIMEOUT")
    if not raw:
        return MAX_QUERY_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        return MAX_QUERY_TIMEOUT_SECONDS
    if value <= 0:
        return MAX_QUERY_TIMEOUT_SECONDS
    return min(value, MAX_QUERY_TIMEOUT_SECONDS)


# Miljødirektoratet ArcGIS service, layer 0 = protected nature areas
PROTECTED_AREA_CONFIG = {
    "url": os.getenv(
        "PROTECTED_AREA_URL",
        "https://kart.miljodirektoratet.no/arcgis/rest/services/vern/MapServer/0/query",
    ),
    "timeout_seconds": _query_timeout(),
    "out_fields": ["navn", "offisieltNavn", "verneform", "iucn", "kommune"],
    "unknown_name": "Unknown protected area",
}

# Allowed frontend origins
CORS_ORIGINS = [
    os.getenv("FRONTEND_URL", "http://localhost:3000"),
    "http://localhost:5173",  # Vite dev
]

# API configuration
API_CONFIG = {
    "title": "FlySafe API",
    "version": "1.0.0",
    "description": "API for checking whether a location in Norway is safe for flying RC planes and drones"
}
