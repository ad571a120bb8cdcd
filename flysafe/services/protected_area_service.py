"""
Protected area service - nature reserve lookup against Miljødirektoratet

Checks whether a point lies inside a Norwegian protected nature area
(verneområde) using the ArcGIS REST MapServer, layer 0.

The service expects geometry in UTM zone 33N (EPSG:25833). Geometry is
requested back in WGS84 so the boundary can be drawn on a map.

Failures never raise: a timeout or a broken response becomes
`is_protected=False` with `query_error` set, so the airport half of the
safety check still produces an answer. A matched feature with missing or
odd attributes is still reported as protected.
"""
import asyncio
from typing import Any, Dict, List, Optional, Sequence

import requests

from flysafe.core.config import MAX_QUERY_TIMEOUT_SECONDS, PROJECTION_CONFIG, PROTECTED_AREA_CONFIG
from flysafe.core.utils import get_logger
from flysafe.models import PointModel, ProjectedPoint, ProtectedAreaResult
from flysafe.services.coordinates import to_projected

logger = get_logger("protected_area_service")

TIMEOUT_ERROR = "timeout"
UNAVAILABLE_ERROR = "unavailable"
INVALID_RESPONSE_ERROR = "invalid_response"


class InvalidServiceResponse(ValueError):
    """The service answered, but not with a usable feature set"""
    pass


class ProtectedAreaService:
    """Client for the protected area (verneområder) query endpoint"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.session = session or requests.Session()
        self.url = url or PROTECTED_AREA_CONFIG["url"]
        self.timeout = min(timeout or PROTECTED_AREA_CONFIG["timeout_seconds"], MAX_QUERY_TIMEOUT_SECONDS)

    def build_params(self, projected: ProjectedPoint, include_geometry: bool = True) -> Dict[str, str]:
        """Build ArcGIS query parameters for a point intersection"""
        return {
            # Point in UTM33N
            "geometry": f"{projected.easting},{projected.northing}",
            "geometryType": "esriGeometryPoint",
            "inSR": str(PROJECTION_CONFIG["projected_epsg"]),
            # Boundary comes back in WGS84 for map display
            "outSR": str(PROJECTION_CONFIG["geographic_epsg"]),
            "spatialRel": "esriSpatialRelIntersects",
            "outFields": ",".join(PROTECTED_AREA_CONFIG["out_fields"]),
            "f": "json",
            "returnGeometry": "true" if include_geometry else "false",
            "returnIdsOnly": "false",
            "returnCountOnly": "false",
        }

    def _fetch(self, params: Dict[str, str]) -> Dict[str, Any]:
        """Blocking HTTP call, run in a worker thread"""
        response = self.session.get(self.url, params=params, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise InvalidServiceResponse(f"Expected a JSON object, got {type(data).__name__}")
        if "error" in data:
            # ArcGIS reports query errors with HTTP 200 and an error body
            raise InvalidServiceResponse(f"Service error: {data['error']}")
        return data

    def parse_response(self, data: Dict[str, Any], include_geometry: bool = True) -> ProtectedAreaResult:
        """Turn an ArcGIS feature set into a ProtectedAreaResult

        A matched feature always counts as protected. Badly typed name or
        geometry fields fall back to the placeholder name and no boundary.
        """
        features = data.get("features") or []
        if not isinstance(features, list):
            raise InvalidServiceResponse("'features' is not a list")

        if not features:
            return ProtectedAreaResult(is_protected=False)

        feature = features[0]
        if not isinstance(feature, dict):
            raise InvalidServiceResponse("feature is not an object")

        attributes = feature.get("attributes")
        if not isinstance(attributes, dict):
            attributes = {}

        name = PROTECTED_AREA_CONFIG["unknown_name"]
        for field in ("offisieltNavn", "navn"):
            value = attributes.get(field)
            if isinstance(value, str) and value.strip():
                name = value
                break

        boundary = feature.get("geometry") if include_geometry else None
        if not isinstance(boundary, dict):
            boundary = None

        return ProtectedAreaResult(is_protected=True, name=name, boundary=boundary)

    async def query_protected_area(self, point: PointModel, include_geometry: bool = True) -> ProtectedAreaResult:
        """
        Check if a point is inside a protected nature area

        Args:
            point: WGS84 point
            include_geometry: Whether to return the area boundary

        Returns:
            ProtectedAreaResult. Errors are reported in `query_error`,
            never raised.
        """
        try:
            projected = to_projected(point)
            params = self.build_params(projected, include_geometry)

            logger.info(f"Querying protected areas at ({point.lat}, {point.lon}) -> {params['geometry']}")
            data = await asyncio.wait_for(
                asyncio.to_thread(self._fetch, params),
                timeout=self.timeout
            )

            result = self.parse_response(data, include_geometry)
            if result.is_protected:
                logger.info(f"Point is inside protected area: {result.name}")
            return result

        except (asyncio.TimeoutError, requests.Timeout):
            logger.warning(f"Protected area query timed out after {self.timeout}s")
            return ProtectedAreaResult(is_protected=False, query_error=TIMEOUT_ERROR)

        except requests.JSONDecodeError as e:
            logger.warning(f"Protected area service returned invalid JSON: {e}")
            return ProtectedAreaResult(is_protected=False, query_error=INVALID_RESPONSE_ERROR)

        except requests.RequestException as e:
            # InvalidURL and InvalidHeader are also ValueErrors, handled here
            logger.warning(f"Protected area service unavailable: {e}")
            return ProtectedAreaResult(is_protected=False, query_error=UNAVAILABLE_ERROR)

        except ValueError as e:
            logger.warning(f"Invalid response from protected area service: {e}")
            return ProtectedAreaResult(is_protected=False, query_error=INVALID_RESPONSE_ERROR)

        except Exception as e:
            logger.error(f"Unexpected error querying protected areas: {e}", exc_info=True)
            return ProtectedAreaResult(is_protected=False, query_error=UNAVAILABLE_ERROR)

    async def query_many(self, points: Sequence[PointModel]) -> List[ProtectedAreaResult]:
        """Check several points concurrently, results in input order"""
        return list(await asyncio.gather(
            *(self.query_protected_area(point) for point in points)
        ))
