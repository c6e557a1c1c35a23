"""API test fixtures - FastAPI app with explicit settings + httpx client.

Invariants:
    - Each test gets a fresh app built from explicit Settings
    - Extra routes used to provoke failures are added per test via `app`
"""

import pytest
from httpx import ASGITransport, AsyncClient

from service_template.config import Settings
from service_template.main import create_app


@pytest.fixture
def settings():
    return Settings(app_version="1.0.0", log_format="text")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    # raise_app_exceptions=False: the catch-all handler's response is returned
    # instead of the re-raised exception
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
