import time

import pytest
import requests

from flysafe.models import ProtectedAreaResult


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """Stands in for requests.Session, records every GET"""

    def __init__(self, response=None, error=None, delay=0.0):
        self.response = response
        self.error = error
        self.delay = delay
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response


class StubProtectedAreaService:
    """Returns a fixed result without touching the network"""

    def __init__(self, result=None, error=None):
        self.result = result or ProtectedAreaResult(is_protected=False)
        self.error = error
        self.calls = []

    async def query_protected_area(self, point, include_geometry=True):
        self.calls.append(point)
        if self.error is not None:
            raise self.error
        return self.result


def feature_payload(attributes, geometry=None):
    feature = {"attributes": attributes}
    if geometry is not None:
        feature["geometry"] = geometry
    return {"features": [feature]}


RING = {"rings": [[[7.5, 60.1], [7.6, 60.1], [7.6, 60.2], [7.5, 60.1]]]}


@pytest.fixture
def make_session():
    def _make(payload=None, status_code=200, json_error=None, error=None, delay=0.0):
        response = FakeResponse(payload, status_code=status_code, json_error=json_error)
        return FakeSession(response=response, error=error, delay=delay)
    return _make


@pytest.fixture
def not_protected():
    return StubProtectedAreaService()


@pytest.fixture
def protected():
    return StubProtectedAreaService(
        ProtectedAreaResult(is_protected=True, name="Hardangervidda nasjonalpark", boundary=RING)
    )


@pytest.fixture
def timed_out():
    return StubProtectedAreaService(ProtectedAreaResult(is_protected=False, query_error="timeout"))
