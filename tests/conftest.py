import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("AMADEUS_ACCESS_TOKEN", "test-token")
    monkeypatch.setenv("AMADEUS_BASE_URL", "https://test.api.amadeus.com")
    monkeypatch.setenv("HOTELBEDS_HOTELS_API_KEY", "test-hb-key")
    monkeypatch.setenv("HOTELBEDS_HOTELS_SECRET", "test-hb-secret")
    monkeypatch.setenv("HOTELBEDS_ACTIVITIES_API_KEY", "test-act-key")
    monkeypatch.setenv("HOTELBEDS_ACTIVITIES_SECRET", "test-act-secret")
    monkeypatch.setenv("HOTELBEDS_TRANSFERS_API_KEY", "test-trf-key")
    monkeypatch.setenv("HOTELBEDS_TRANSFERS_SECRET", "test-trf-secret")
    monkeypatch.setenv("HOTELBEDS_BASE_URL", "https://api.test.hotelbeds.com")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
