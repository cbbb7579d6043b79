"""API test fixtures — FastAPI app over an in-process ASGI transport.

Invariants:
    - Every test gets a client with settings overridden per test when needed
    - dependency_overrides cleared after each test

Design Decisions:
    - httpx ASGITransport: no network, no server process
"""

import pytest
from httpx import ASGITransport, AsyncClient

from formalisms.config import Settings, get_settings
from formalisms.main import app


@pytest.fixture
def settings():
    return Settings(log_format="text", max_request_args=4, conformance_fail_fast=False)


@pytest.fixture
async def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
