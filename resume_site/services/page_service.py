"""Page Service — assembles the template context for the resume page.

Invariants:
    - Section content comes from ContentProvider.load(); a content error fails the render
    - Metadata uses safe_load() and falls back to generic values
    - JSON-LD is omitted (None) when it cannot be built
    - Every sequence handed to the template is already filtered
"""

import json
import logging
from datetime import date

from resume_site.core.content_views import key_strengths, visible_contact_details
from resume_site.core.domain_types import PAGE_SECTIONS
from resume_site.core.highlights import role_badges
from resume_site.core.page_metadata import build_page_metadata
from resume_site.core.structured_data import build_person_schema
from resume_site.schemas.contact import ContactForm, Notification
from resume_site.services.content_provider import ContentProvider

logger = logging.getLogger(__name__)

SOCIAL_ICON_LABELS = ("github", "linkedin")


def _summary_paragraphs(summary: str) -> list[str]:
    return [p.strip() for p in summary.split("\n\n") if p.strip()]


def build_json_ld(provider: ContentProvider, site_url: str, today: date) -> str | None:
    content = provider.safe_load()
    if content is None:
        logger.warning("Skipping JSON-LD: resume content unavailable")
        return None
    person = build_person_schema(content, site_url, today.year)
    # "</" must not close the surrounding <script> element
    return json.dumps(person, indent=2, ensure_ascii=False).replace("</", "<\\/")


def build_page_context(
    provider: ContentProvider,
    *,
    site_url: str,
    today: date,
    verification: str | None = None,
    contact_enabled: bool = True,
    form: ContactForm | None = None,
    notification: Notification | None = None,
) -> dict:
    metadata = build_page_metadata(provider.safe_load(), site_url, verification)
    content = provider.load()
    links = provider.valid_contact_links()
    skills = provider.skills_with_content()

    return {
        "metadata": metadata,
        "json_ld": build_json_ld(provider, site_url, today),
        "sections": PAGE_SECTIONS,
        "name": content.name,
        "title": content.title,
        "summary_paragraphs": _summary_paragraphs(content.summary),
        "social_links": [
            link for link in links if link.label.lower() in SOCIAL_ICON_LABELS
        ],
        "links": links,
        "key_strengths": key_strengths(content.skills),
        "experience": [
            {"entry": exp, "badges": role_badges(exp.highlights)}
            for exp in content.experience
        ],
        "skills": skills,
        "education": content.education,
        "contact_details": visible_contact_details(content),
        "email": content.contacts.email,
        "location": content.contacts.location,
        "contact_enabled": contact_enabled,
        "form": form or ContactForm(),
        "notification": notification,
        "current_year": today.year,
    }
