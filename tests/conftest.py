"""
Fixtures and test configuration for the meetupdata test suite.
"""

import logging
import tempfile
from pathlib import Path

import httpx
import pytest

from meetupdata.data.fetch.fetcher_base import FetchOptions, GroupConfig
from meetupdata.settings import Settings


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and levels set by CLI invocations."""
    logger = logging.getLogger("meetupdata")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def test_settings(temp_dir):
    """Create test settings rooted in a temporary directory."""
    return Settings(
        root_dir=temp_dir,
        log_level="DEBUG",
        retry_delay=0,
        request_timeout=5,
    )


@pytest.fixture
def fast_options():
    """Fetch options without a retry delay."""
    return FetchOptions(timeout=5, retries=3, retry_delay=0)


@pytest.fixture
def group_factory(temp_dir):
    """Build a GroupConfig writing under the temporary directory."""

    def make(slug, endpoint=None):
        return GroupConfig(
            slug=slug,
            endpoint=endpoint or f"https://api.test/c/{slug}",
            output_path=temp_dir / "data" / slug / "events.json",
        )

    return make


@pytest.fixture
def sample_events():
    """A payload shaped like the meetup.mu API response."""
    return {
        "id": "42",
        "name": "Python Mauritius User Group",
        "slug": "pymug",
        "events": [
            {"id": "1", "title": "Monthly meetup", "date": "2024-05-04"},
            {"id": "2", "title": "Workshop", "date": "2024-06-01", "attendees": 30},
        ],
    }


@pytest.fixture
def route_transport():
    """
    Build an httpx.MockTransport from a {url: handler-or-response} mapping.
    Requests are recorded on ``transport.calls``.
    """

    def make(routes):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            calls.append(url)
            route = routes.get(url)
            if route is None:
                return httpx.Response(404, json={"error": "not found"})
            if callable(route):
                return route(request)
            return httpx.Response(
                route.status_code, headers=route.headers, content=route.content
            )

        transport = httpx.MockTransport(handler)
        transport.calls = calls
        return transport

    return make
