"""SEO Routes — sitemap.xml and robots.txt.

Invariants:
    - Neither route reads resume content; both depend only on site_url and the date
"""

from datetime import date

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from resume_site.api.dependencies import get_app_settings, get_today
from resume_site.config import Settings
from resume_site.core.seo_documents import build_robots, build_sitemap

router = APIRouter(tags=["seo"])


@router.get("/sitemap.xml")
async def sitemap(
    settings: Settings = Depends(get_app_settings), today: date = Depends(get_today),
):
    return Response(
        content=build_sitemap(settings.site_url, today), media_type="application/xml",
    )


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(settings: Settings = Depends(get_app_settings)):
    return PlainTextResponse(build_robots(settings.site_url))
