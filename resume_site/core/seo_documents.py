"""SEO Documents — sitemap.xml and robots.txt bodies.

Invariants:
    - Sitemap lists the site root first, then every page section anchor
    - lastmod is the ISO date (YYYY-MM-DD) passed in by the caller
    - robots.txt never disallows "/" and always links the sitemap
"""

from datetime import date
from xml.sax.saxutils import escape

from resume_site.core.domain_types import PAGE_SECTIONS, SiteUrl

# anchor → (changefreq, priority); sections without an entry use the default
_SECTION_CRAWL = {
    "about": ("monthly", "0.8"),
    "experience": ("monthly", "0.9"),
    "skills": ("monthly", "0.8"),
    "education": ("yearly", "0.7"),
    "contact": ("monthly", "0.9"),
}
_DEFAULT_CRAWL = ("monthly", "0.5")

# anchor ("" = site root), changefreq, priority
SITEMAP_ENTRIES: tuple[tuple[str, str, str], ...] = (
    ("", "monthly", "1.0"),
    *((anchor, *_SECTION_CRAWL.get(anchor, _DEFAULT_CRAWL)) for anchor, _ in PAGE_SECTIONS),
)

DISALLOWED_PATHS = ("/api/", "/static/", "/admin/", "/private/")


def normalize_site_url(url: str) -> SiteUrl:
    return SiteUrl(url.rstrip("/"))


def build_sitemap(site_url: str, today: date) -> str:
    base = normalize_site_url(site_url)
    lastmod = today.isoformat()
    urls = []
    for anchor, changefreq, priority in SITEMAP_ENTRIES:
        loc = f"{base}#{anchor}" if anchor else base
        urls.append(
            "  <url>\n"
            f"    <loc>{escape(loc)}</loc>\n"
            f"    <lastmod>{lastmod}</lastmod>\n"
            f"    <changefreq>{changefreq}</changefreq>\n"
            f"    <priority>{priority}</priority>\n"
            "  </url>"
        )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        + "\n".join(urls)
        + "\n</urlset>\n"
    )


def build_robots(site_url: str) -> str:
    base = normalize_site_url(site_url)
    lines = [
        "User-agent: *",
        "Allow: /",
        "",
        "# Sitemap",
        f"Sitemap: {base}/sitemap.xml",
        "",
        "Crawl-delay: 1",
        "",
        "# Block common bot traps",
    ]
    lines.extend(f"Disallow: {path}" for path in DISALLOWED_PATHS)
    return "\n".join(lines) + "\n"
