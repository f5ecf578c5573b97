"""App Lifespan — collaborators built once at startup from settings."""

import json
import logging

from resume_site.config import Settings
from resume_site.infrastructure.observability import JSONFormatter, setup_logging
from resume_site.main import build_contact_service, create_app, lifespan
from resume_site.services.content_provider import ContentProvider
from resume_site.core.domain_types import ContentState


async def test_lifespan_keeps_injected_provider(resume_data):
    provider = ContentProvider.from_data(resume_data)
    app = create_app(Settings(_env_file=None), provider=provider)
    async with lifespan(app):
        assert app.state.content_provider is provider
        assert provider.state == ContentState.LOADED
        assert app.state.contact_service is not None


async def test_lifespan_survives_invalid_content(resume_data):
    del resume_data["meta"]
    provider = ContentProvider.from_data(resume_data)
    app = create_app(Settings(_env_file=None), provider=provider)
    async with lifespan(app):
        assert provider.state == ContentState.FAILED


def test_contact_service_disabled_without_endpoint():
    service = build_contact_service(Settings(_env_file=None, contact_endpoint="  "))
    assert service.relay is None


def test_contact_service_uses_configured_endpoint():
    service = build_contact_service(
        Settings(_env_file=None, contact_endpoint="https://relay.test/f/x", contact_timeout_seconds=3),
    )
    assert service.relay.endpoint == "https://relay.test/f/x"
    assert service.relay.timeout_seconds == 3


def test_json_formatter_surfaces_extra_fields():
    record = logging.LogRecord("resume_site", logging.ERROR, __file__, 1, "boom", None, None)
    record.error_code = "CONTENT_INVALID"
    record.path = "/"
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "boom"
    assert payload["error_code"] == "CONTENT_INVALID"
    assert payload["path"] == "/"
    assert "status_code" not in payload


def test_setup_logging_replaces_its_own_handler():
    before = len(logging.root.handlers)
    setup_logging("INFO", "text")
    setup_logging("DEBUG", "json")
    ours = [h for h in logging.root.handlers if isinstance(h.formatter, JSONFormatter)]
    assert len(logging.root.handlers) <= before + 1
    assert len(ours) == 1
    assert logging.root.level == logging.DEBUG
    setup_logging("INFO", "text")
