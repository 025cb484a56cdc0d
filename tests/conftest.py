# tests/conftest.py
import pytest
import requests
from fastapi.testclient import TestClient

from incident_tables.main import app
from incident_tables.normalizers.geocode import GeocodeCache, GeocodeEnricher
from incident_tables.services import get_enricher, get_extractor


class FakeProvider:
    """Geocoder stand-in that counts lookups. `fail` makes every call raise."""
    def __init__(self, results=None, fail=None):
        self.results = results or {}
        self.fail = fail
        self.calls = []

    def geocode(self, query):
        self.calls.append(query)
        if self.fail is not None:
            raise self.fail
        return self.results.get(query)


class FakeExtractor:
    """Returns a canned extractor result instead of fetching a page."""
    def __init__(self, frame=None, error=None):
        self.frame = frame if frame is not None else {}
        self.error = error
        self.calls = []

    def extract(self, url, spec, root_key):
        self.calls.append((url, root_key))
        if self.error is not None:
            raise self.error
        return self.frame


@pytest.fixture
def provider():
    return FakeProvider(results={
        "Austin, Texas": {"latitude": 30.2672, "longitude": -97.7431, "address": "Austin, TX"},
    })


@pytest.fixture
def enricher(provider):
    return GeocodeEnricher(provider, GeocodeCache())


@pytest.fixture
def extractor():
    return FakeExtractor()


# --- Override the app-owned collaborators so tests never hit the network ---
@pytest.fixture(autouse=True)
def override_services(enricher, extractor):
    app.dependency_overrides[get_enricher] = lambda: enricher
    app.dependency_overrides[get_extractor] = lambda: extractor
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fetch_error():
    return requests.ConnectionError("connection refused")


def raw_row(date="March 5, 2019", location="Austin, Texas", deaths="2", injuries="1",
            description="Shooting at a high school.[3]", **extra):
    row = {"date": date, "location": location, "deaths": deaths,
           "injuries": injuries, "description": description}
    row.update(extra)
    return row
