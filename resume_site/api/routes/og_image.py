"""OG Image Route — social preview PNG for link unfurls.

Invariants:
    - 200 image/png on success
    - Pillow failure → 500 plain text "Failed to generate the image"
    - Resume content failure propagates as ContentValidationError
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse, Response

from resume_site.api.dependencies import get_content_provider
from resume_site.core.domain_types import SectionKey
from resume_site.infrastructure.og_image import OgImageError, render_og_image
from resume_site.services.content_provider import ContentProvider

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/og", tags=["og"])


@router.get("")
async def og_image(
    title: str | None = Query(None, max_length=200),
    description: str | None = Query(None, max_length=400),
    provider: ContentProvider = Depends(get_content_provider),
):
    name = provider.section(SectionKey.NAME)
    resume_title = provider.section(SectionKey.TITLE)
    try:
        png = await run_in_threadpool(
            render_og_image, name, title or resume_title, description or None,
        )
    except OgImageError as e:
        logger.error(f"Failed to generate OG image: {e}")
        return PlainTextResponse("Failed to generate the image", status_code=500)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Cache-Control": "public, max-age=3600"},
    )
