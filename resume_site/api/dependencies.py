"""Route Dependencies — hand the app-owned collaborators to route handlers.

Invariants:
    - ContentProvider and ContactService are created once in the lifespan and
      stored on app.state; routes never construct their own
    - Settings come from app.state.settings, set by create_app(); routes never
      read the environment themselves
    - get_today() is the only clock routes read (overridable in tests)
"""

from datetime import date

from fastapi import Request

from resume_site.config import Settings
from resume_site.services.contact_service import ContactService
from resume_site.services.content_provider import ContentProvider


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_content_provider(request: Request) -> ContentProvider:
    return request.app.state.content_provider


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def get_today() -> date:
    return date.today()
