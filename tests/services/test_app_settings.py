"""App Settings — an app serves the Settings it was built with, not the environment's."""

import pytest
from httpx import ASGITransport, AsyncClient

from resume_site.config import Settings
from resume_site.main import create_app
from resume_site.services.contact_service import ContactService
from resume_site.services.content_provider import ContentProvider

SITE = "https://alt.example"


@pytest.fixture
async def plain_client(monkeypatch, resume_data):
    monkeypatch.setenv("SITE_URL", "https://from-env.example")
    app = create_app(
        Settings(_env_file=None, site_url=SITE + "/"),
        provider=ContentProvider.from_data(resume_data),
        contact_service=ContactService(None),
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


async def test_sitemap_uses_app_settings(plain_client):
    body = (await plain_client.get("/sitemap.xml")).text
    assert f"<loc>{SITE}</loc>" in body
    assert "from-env.example" not in body
    assert "localhost" not in body


async def test_robots_uses_app_settings(plain_client):
    body = (await plain_client.get("/robots.txt")).text
    assert f"Sitemap: {SITE}/sitemap.xml" in body


async def test_page_canonical_uses_app_settings(plain_client):
    html = (await plain_client.get("/")).text
    assert f'<link rel="canonical" href="{SITE}' in html
    assert "from-env.example" not in html


def test_settings_stored_on_app_state():
    settings = Settings(_env_file=None, site_url=SITE)
    app = create_app(settings, provider=ContentProvider.from_data({}))
    assert app.state.settings is settings
