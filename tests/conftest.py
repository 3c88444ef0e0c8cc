"""
Pytest configuration and fixtures for the youth houses site tests.
"""

from concurrent.futures import Future
from typing import Any, Dict, List
from unittest.mock import Mock

import pytest

from components.cms.models import LocationRecord, SiteConfigRecord, parse_record


def make_raw_youth_house(slug: str = "maison-des-jeunes", **metadata) -> Dict[str, Any]:
    """Raw Cosmic object for a youth house, as returned by the objects endpoint."""
    fields = {
        "name": "Maison des Jeunes",
        "address": "Rue Haute 12\n1000 Bruxelles",
        "latitude": "50.8400",
        "longitude": "4.3500",
        "description": "<p>A place for <strong>young people</strong> to meet.</p>",
        "neighborhood": "Marolles",
        "age_range": "12-25",
        "phone": "+32 2 123 45 67",
        "email": "info@mdj.be",
        "website": "https://mdj.be",
    }
    fields.update(metadata)
    return {
        "id": f"id-{slug}",
        "slug": slug,
        "title": fields["name"] or slug,
        "type": "youth-houses",
        "metadata": fields,
    }


def make_youth_house(slug: str = "maison-des-jeunes", **metadata) -> LocationRecord:
    record = parse_record(make_raw_youth_house(slug, **metadata))
    assert isinstance(record, LocationRecord)
    return record


class ManualBackend:
    """
    Map backend whose initialization completes only when the test says so.

    Markers are plain dicts; every call is recorded.
    """

    def __init__(self, fail_on_initialize: bool = False, fail_on_add_for: tuple = ()):
        self.fail_on_initialize = fail_on_initialize
        self.fail_on_add_for = set(fail_on_add_for)
        self.futures: List[Future] = []
        self.initialize_calls = 0
        self.added: List[Dict[str, Any]] = []
        self.removed: List[Dict[str, Any]] = []
        self.released = []
        self.recentered = []

    def initialize(self, config, access_token):
        self.initialize_calls += 1
        if self.fail_on_initialize:
            raise RuntimeError("backend unavailable")
        future = Future()
        self.futures.append(future)
        return future

    def resolve(self, map_obj=None):
        map_obj = map_obj if map_obj is not None else {"map": len(self.futures)}
        self.futures[-1].set_result(map_obj)
        return map_obj

    def fail(self, error: Exception):
        self.futures[-1].set_exception(error)

    def add_marker(self, map_obj, spec):
        if spec.record.slug in self.fail_on_add_for:
            raise ValueError(f"cannot draw {spec.record.slug}")
        marker = {"slug": spec.record.slug, "location": spec.point.location}
        self.added.append(marker)
        return marker

    def remove_marker(self, map_obj, marker):
        self.removed.append(marker)

    def recenter(self, map_obj, config):
        self.recentered.append(config)

    def release(self, map_obj):
        self.released.append(map_obj)

    @property
    def live_markers(self) -> List[Dict[str, Any]]:
        return [m for m in self.added if not any(m is r for r in self.removed)]


@pytest.fixture
def youth_house_factory():
    """Build LocationRecords from metadata overrides."""
    return make_youth_house


@pytest.fixture
def raw_youth_house_factory():
    return make_raw_youth_house


@pytest.fixture
def youth_houses():
    """Three youth houses, the second without usable coordinates."""
    return [
        make_youth_house("mdj-marolles", name="MDJ Marolles", latitude="50.8400", longitude="4.3500"),
        make_youth_house("no-coordinates", name="Nowhere House", latitude="", longitude=""),
        make_youth_house("mdj-schaerbeek", name="MDJ Schaerbeek", latitude="50.8670", longitude="4.3780",
                         neighborhood="Schaerbeek"),
    ]


@pytest.fixture
def site_settings():
    record = parse_record({
        "id": "site",
        "slug": "site-settings",
        "title": "Site Settings",
        "type": "site-settings",
        "metadata": {
            "site_title": "Entree Brussels",
            "site_description": "Youth houses across Brussels.",
            "hero_title": "Find your place",
            "contact_email": "hello@entree.brussels",
            "contact_phone": "+32 2 000 00 00",
            "social_media": {"instagram": "https://instagram.com/entree", "facebook": ""},
            "map_center_lat": "50.85",
            "map_center_lng": "4.35",
            "map_zoom": 13,
        },
    })
    assert isinstance(record, SiteConfigRecord)
    return record


@pytest.fixture
def backend_factory():
    """ManualBackend class, for tests that need custom failure settings."""
    return ManualBackend


@pytest.fixture
def manual_backend():
    return ManualBackend()


@pytest.fixture
def mock_session():
    """requests.Session stand-in; set .get.return_value or .get.side_effect per test."""
    return Mock()


def make_response(status_code: int = 200, payload: Any = None, json_error: bool = False) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if json_error:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def response_factory():
    return make_response


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
