"""
Rocks API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── rock_service: RockService over a small known collection
    ├── calculator: fresh CalculatorService
    └── test_client: HTTPX AsyncClient bound to the FastAPI app
"""

import os

# Override settings for testing BEFORE any application imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.setdefault("PORT", "3000")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from rocks_api.services.calculator_service import CalculatorService
from rocks_api.services.rock_service import RockService


@pytest.fixture
def rock_service():
    """RockService over a three-element collection, independent of ROCKS."""
    return RockService(["granite", "basalt", "obsidian"])


@pytest.fixture
def calculator():
    return CalculatorService()


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient configured to talk to the FastAPI app in-process.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from rocks_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
