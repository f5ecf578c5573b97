"""Service test fixtures — content providers, a recording relay, FastAPI test client.

Invariants:
    - No test touches the network: the relay runs on httpx.MockTransport
    - Each test builds its own app via create_app() with injected collaborators
    - Settings are handed to create_app(); only get_today is overridden, so output is deterministic

Design Decisions:
    - ASGITransport does not run the lifespan, so collaborators are passed to
      create_app() directly
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from resume_site.api.dependencies import get_today
from resume_site.config import Settings
from resume_site.main import create_app
from resume_site.services.contact_service import ContactService
from resume_site.services.content_provider import ContentProvider
from tests.services.mock_relay import RELAY_URL, RecordingRelay

TODAY = date(2026, 3, 14)


@pytest.fixture
def relay():
    return RecordingRelay()


@pytest.fixture
def provider(resume_data):
    return ContentProvider.from_data(resume_data)


@pytest.fixture
def settings():
    return Settings(site_url="https://jane.dev/", contact_endpoint=RELAY_URL)


@pytest.fixture
async def make_client(settings):
    """Factory: async test client for an app wired with the given collaborators."""
    clients: list[AsyncClient] = []

    async def _make(provider, contact_service, app_settings=None):
        app_settings = app_settings or settings
        app = create_app(app_settings, provider=provider, contact_service=contact_service)
        app.dependency_overrides[get_today] = lambda: TODAY
        c = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(c)
        return c

    yield _make
    for c in clients:
        await c.aclose()


@pytest.fixture
async def client(make_client, provider, relay):
    return await make_client(provider, ContactService(relay.client()))
