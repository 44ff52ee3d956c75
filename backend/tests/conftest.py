"""
Pytest configuration and fixtures for gym listings tests.
"""

from __future__ import annotations

import os

import httpx
import pytest

# Set test environment variables before importing config
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("GYMS_API_URL", "http://upstream.test/gyms")

from backend.config import Settings  # noqa: E402
from backend.main import create_api_app, create_web_app  # noqa: E402
from backend.services.gym_client import GymClient  # noqa: E402
from backend.tests.mock_upstream import UPSTREAM_URL  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(ENVIRONMENT="development", GYMS_API_URL=UPSTREAM_URL, HTTPS_REDIRECT=False)


@pytest.fixture
async def api_client(test_settings):
    """Async HTTP client against the listing API."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=create_api_app(test_settings)),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def make_web_client(test_settings):
    """Build an async client against a web app whose listing API is mocked."""

    def _make(transport: httpx.MockTransport) -> httpx.AsyncClient:
        gym_client = GymClient(url=UPSTREAM_URL, timeout=5.0, transport=transport)
        app = create_web_app(test_settings, gym_client=gym_client)
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")

    return _make
