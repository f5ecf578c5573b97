"""Page Metadata — title, description, OpenGraph and Twitter tags for the page head.

Invariants:
    - content=None (safe load failed) yields the generic fallback, never an error
    - OpenGraph image is always <site_url>/api/og at 1200x630
    - Twitter creator is set only when a twitter/x labelled link has a url
"""

from dataclasses import dataclass, field

from resume_site.schemas.resume import ResumeContent

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630

FALLBACK_TITLE = "Resume Site"
FALLBACK_DESCRIPTION = "Personal resume website"


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    canonical_url: str
    keywords: tuple[str, ...] = ()
    author: str | None = None
    robots: str = "index, follow"
    og: dict[str, str] = field(default_factory=dict)
    twitter: dict[str, str] = field(default_factory=dict)
    verification: str | None = None
    is_fallback: bool = False


def _twitter_handle(content: ResumeContent) -> str | None:
    for link in content.contacts.links:
        label = link.label.lower()
        if ("twitter" in label or "x" in label) and link.url.strip():
            return "@" + "".join(content.name.lower().split())
    return None


def build_page_metadata(
    content: ResumeContent | None,
    site_url: str,
    verification: str | None = None,
) -> PageMetadata:
    if content is None:
        return PageMetadata(
            title=FALLBACK_TITLE,
            description=FALLBACK_DESCRIPTION,
            canonical_url=site_url,
            verification=verification,
            is_fallback=True,
        )

    meta = content.meta
    og_image = f"{site_url}/api/og"
    twitter = {
        "card": "summary_large_image",
        "title": meta.og_title,
        "description": meta.og_desc,
        "image": og_image,
    }
    creator = _twitter_handle(content)
    if creator:
        twitter["creator"] = creator

    return PageMetadata(
        title=meta.og_title,
        description=meta.og_desc,
        canonical_url=site_url,
        keywords=meta.keywords,
        author=content.name,
        robots="index, follow, max-image-preview:large, max-snippet:-1, max-video-preview:-1",
        og={
            "type": "website",
            "locale": "en_US",
            "url": site_url,
            "title": meta.og_title,
            "description": meta.og_desc,
            "site_name": f"{content.name} - Resume Portfolio",
            "image": og_image,
            "image:width": str(OG_IMAGE_WIDTH),
            "image:height": str(OG_IMAGE_HEIGHT),
            "image:alt": f"{content.name} - {meta.og_desc}",
        },
        twitter=twitter,
        verification=verification,
    )
