import asyncio

import pytest
import requests

from conftest import RING, feature_payload
from flysafe.models import PointModel
from flysafe.services.coordinates import to_projected
from flysafe.services.protected_area_service import ProtectedAreaService

POINT = PointModel(lat=60.1, lon=7.5)


def _query(service, point=POINT, **kwargs):
    return asyncio.run(service.query_protected_area(point, **kwargs))


def test_query_parameters(make_session):
    session = make_session({"features": []})
    service = ProtectedAreaService(session=session, url="http://test/query")

    _query(service)

    call = session.calls[0]
    params = call["params"]
    projected = to_projected(POINT)
    assert call["url"] == "http://test/query"
    assert call["timeout"] == 10.0
    assert params["geometry"] == f"{projected.easting},{projected.northing}"
    assert params["geometryType"] == "esriGeometryPoint"
    assert params["inSR"] == "25833"
    assert params["outSR"] == "4326"
    assert params["spatialRel"] == "esriSpatialRelIntersects"
    assert params["outFields"] == "navn,offisieltNavn,verneform,iucn,kommune"
    assert params["f"] == "json"
    assert params["returnGeometry"] == "true"


def test_official_name_wins(make_session):
    payload = feature_payload({"navn": "Vidda", "offisieltNavn": "Hardangervidda nasjonalpark"}, RING)
    result = _query(ProtectedAreaService(session=make_session(payload)))

    assert result.is_protected
    assert result.name == "Hardangervidda nasjonalpark"
    assert result.boundary == RING
    assert result.query_error is None


def test_falls_back_to_common_name(make_session):
    payload = feature_payload({"navn": "Vidda", "offisieltNavn": None})
    result = _query(ProtectedAreaService(session=make_session(payload)))
    assert result.name == "Vidda"


def test_falls_back_to_placeholder(make_session):
    payload = {"features": [{"geometry": RING}]}
    result = _query(ProtectedAreaService(session=make_session(payload)))
    assert result.is_protected
    assert result.name == "Unknown protected area"


@pytest.mark.parametrize("attributes,expected", [
    ({"offisieltNavn": 12345, "navn": "Vidda"}, "Vidda"),
    ({"offisieltNavn": "", "navn": "Vidda"}, "Vidda"),
    ({"offisieltNavn": ["x"], "navn": None}, "Unknown protected area"),
    ("not an object", "Unknown protected area"),
])
def test_odd_name_fields_keep_the_match(make_session, attributes, expected):
    payload = {"features": [{"attributes": attributes, "geometry": RING}]}
    result = _query(ProtectedAreaService(session=make_session(payload)))

    assert result.is_protected
    assert result.name == expected
    assert result.boundary == RING
    assert result.query_error is None


@pytest.mark.parametrize("geometry", [[1, 2], "POLYGON", 42])
def test_odd_geometry_keeps_the_match(make_session, geometry):
    payload = {"features": [{"attributes": {"navn": "Vidda"}, "geometry": geometry}]}
    result = _query(ProtectedAreaService(session=make_session(payload)))

    assert result.is_protected
    assert result.name == "Vidda"
    assert result.boundary is None
    assert result.query_error is None


def test_first_feature_is_used(make_session):
    payload = {"features": [
        {"attributes": {"offisieltNavn": "First"}},
        {"attributes": {"offisieltNavn": "Second"}},
    ]}
    result = _query(ProtectedAreaService(session=make_session(payload)))
    assert result.name == "First"


def test_without_geometry(make_session):
    session = make_session(feature_payload({"navn": "Vidda"}, RING))
    result = _query(ProtectedAreaService(session=session), include_geometry=False)

    assert session.calls[0]["params"]["returnGeometry"] == "false"
    assert result.boundary is None


@pytest.mark.parametrize("payload", [{"features": []}, {}, {"features": None}])
def test_no_features_is_not_protected(make_session, payload):
    result = _query(ProtectedAreaService(session=make_session(payload)))
    assert not result.is_protected
    assert result.name is None
    assert result.query_error is None


def test_requests_timeout(make_session):
    session = make_session(error=requests.Timeout("read timed out"))
    result = _query(ProtectedAreaService(session=session))
    assert not result.is_protected
    assert result.query_error == "timeout"


def test_slow_service_is_cut_off(make_session):
    session = make_session({"features": []}, delay=0.5)
    result = _query(ProtectedAreaService(session=session, timeout=0.05))
    assert not result.is_protected
    assert result.query_error == "timeout"


def test_connection_error(make_session):
    session = make_session(error=requests.ConnectionError("no route to host"))
    result = _query(ProtectedAreaService(session=session))
    assert not result.is_protected
    assert result.query_error == "unavailable"


def test_http_error(make_session):
    result = _query(ProtectedAreaService(session=make_session({}, status_code=503)))
    assert result.query_error == "unavailable"


@pytest.mark.parametrize("kwargs", [
    {"json_error": ValueError("No JSON object could be decoded")},
    {"payload": ["not", "an", "object"]},
    {"payload": {"error": {"code": 400, "message": "Invalid geometry"}}},
    {"payload": {"features": "nope"}},
    {"payload": {"features": ["not a feature"]}},
    {"json_error": requests.JSONDecodeError("Expecting value", "<html>", 0)},
])
def test_invalid_response(make_session, kwargs):
    result = _query(ProtectedAreaService(session=make_session(**kwargs)))
    assert not result.is_protected
    assert result.query_error == "invalid_response"


def test_timeout_is_capped():
    assert ProtectedAreaService(timeout=60).timeout == 10.0
    assert ProtectedAreaService(timeout=2).timeout == 2


def test_query_many_keeps_order(make_session):
    service = ProtectedAreaService(session=make_session(feature_payload({"navn": "Vidda"})))
    points = [POINT, PointModel(lat=61.0, lon=8.0), PointModel(lat=62.0, lon=9.0)]

    results = asyncio.run(service.query_many(points))

    assert len(results) == 3
    assert all(result.is_protected for result in results)
    geometries = [call["params"]["geometry"] for call in service.session.calls]
    assert sorted(geometries) == sorted(
        f"{p.easting},{p.northing}" for p in map(to_projected, points)
    )


@pytest.mark.parametrize("error", [
    requests.exceptions.InvalidURL("bad url"),
    requests.exceptions.InvalidHeader("bad header"),
])
def test_request_setup_errors_are_unavailable(make_session, error):
    result = _query(ProtectedAreaService(session=make_session(error=error)))
    assert not result.is_protected
    assert result.query_error == "unavailable"
