"""Resume Site — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - create_app() owns its Settings (app.state.settings); the lifespan and routes read
      them from there, get_settings() is only the default
    - ContentProvider and ContactService built once per app in the lifespan
    - Resume content validated at startup; a failure is logged, page routes then fail
      with ContentValidationError and readiness reports not_ready
    - CORS configured from settings (not hardcoded)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from resume_site.api.error_handlers import register_error_handlers
from resume_site.api.routes import contact, health, og_image, pages, seo
from resume_site.config import Settings, get_settings
from resume_site.infrastructure.form_relay import FormRelayClient
from resume_site.infrastructure.observability import setup_logging
from resume_site.services.contact_service import ContactService
from resume_site.services.content_provider import ContentProvider

logger = logging.getLogger(__name__)

_STATIC_DIR = Path(__file__).parent / "static"


def build_contact_service(settings: Settings) -> ContactService:
    relay = None
    if settings.contact_endpoint:
        relay = FormRelayClient(
            settings.contact_endpoint,
            timeout_seconds=settings.contact_timeout_seconds,
        )
    return ContactService(relay)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    # tests may pre-seed app.state before startup
    if not hasattr(app.state, "content_provider"):
        app.state.content_provider = ContentProvider(settings.resume_content_path)
    if not hasattr(app.state, "contact_service"):
        app.state.contact_service = build_contact_service(settings)
    if app.state.content_provider.safe_load() is None:
        logger.critical("Resume content is invalid; the page will not render")
    logger.info("Resume site started")
    yield
    logger.info("Resume site shutting down")


def create_app(
    settings: Settings | None = None,
    provider: ContentProvider | None = None,
    contact_service: ContactService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Resume Site", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    if provider is not None:
        app.state.content_provider = provider
    if contact_service is not None:
        app.state.contact_service = contact_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(contact.router)
    app.include_router(og_image.router)
    app.include_router(seo.router)
    app.include_router(pages.router)

    app.mount("/static", StaticFiles(directory=_STATIC_DIR), name="static")
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run("resume_site.main:app", host=settings.host, port=settings.port)
