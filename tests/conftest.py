"""
Pytest configuration and shared fixtures.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.config import AUTH_MODE_FILTER, AUTH_MODE_MIDDLEWARE, Settings
from src.api.main import create_app

TEST_API_KEY = "abc123"


@pytest.fixture
def api_key() -> str:
    """The API key configured for test apps."""
    return TEST_API_KEY


@pytest.fixture
def middleware_settings(api_key: str) -> Settings:
    """Settings for the global middleware mode."""
    return Settings(api_key=api_key, auth_mode=AUTH_MODE_MIDDLEWARE)


@pytest.fixture
def filter_settings(api_key: str) -> Settings:
    """Settings for the per-route filter mode."""
    return Settings(api_key=api_key, auth_mode=AUTH_MODE_FILTER)


@pytest.fixture
def middleware_app(middleware_settings: Settings) -> FastAPI:
    return create_app(middleware_settings)


@pytest.fixture
def filter_app(filter_settings: Settings) -> FastAPI:
    return create_app(filter_settings)


@pytest.fixture
async def middleware_client(middleware_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app protected by the global middleware."""
    async with AsyncClient(
        transport=ASGITransport(app=middleware_app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def filter_client(filter_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client for an app protected by the per-route filter."""
    async with AsyncClient(
        transport=ASGITransport(app=filter_app),
        base_url="http://test",
    ) as client:
        yield client
