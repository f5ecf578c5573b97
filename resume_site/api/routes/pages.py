"""Page Routes — the rendered resume page and its no-JavaScript contact form post.

Invariants:
    - GET / fails with ContentValidationError when the resume does not validate
    - POST /contact always re-renders the page (200) with a notification;
      field values survive a failed submission
"""

import logging
from datetime import date
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from resume_site.api.dependencies import (
    get_app_settings, get_contact_service, get_content_provider, get_today,
)
from resume_site.config import Settings
from resume_site.schemas.contact import ContactForm, Notification
from resume_site.services.contact_service import ContactService
from resume_site.services.content_provider import ContentProvider
from resume_site.services.page_service import build_page_context

logger = logging.getLogger(__name__)
router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=Path(__file__).resolve().parents[2] / "templates")


def _render(
    request: Request,
    provider: ContentProvider,
    settings: Settings,
    today: date,
    contact: ContactService,
    form: ContactForm | None = None,
    notification: Notification | None = None,
) -> HTMLResponse:
    context = build_page_context(
        provider,
        site_url=settings.site_url,
        today=today,
        verification=settings.google_site_verification,
        contact_enabled=contact.relay is not None,
        form=form,
        notification=notification,
    )
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/", response_class=HTMLResponse)
async def resume_page(
    request: Request,
    provider: ContentProvider = Depends(get_content_provider),
    contact: ContactService = Depends(get_contact_service),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    return _render(request, provider, settings, today, contact)


@router.post("/contact", response_class=HTMLResponse)
async def submit_contact_form(
    request: Request,
    form: Annotated[ContactForm, Form()],
    provider: ContentProvider = Depends(get_content_provider),
    contact: ContactService = Depends(get_contact_service),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    result, _ = await contact.submit(form)
    return _render(
        request, provider, settings, today, contact,
        form=result.form, notification=result.notification,
    )
