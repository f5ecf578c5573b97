"""Domain Types — enums and value types shared across the resume site.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - SectionKey values are the top-level keys of the resume JSON document

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

SiteUrl = NewType("SiteUrl", str)   # absolute, no trailing slash


# ─── Enums ───────────────────────────────────────────────────────

class SectionKey(str, Enum):
    """Top-level fields of the resume document."""
    NAME = "name"
    TITLE = "title"
    SUMMARY = "summary"
    CONTACTS = "contacts"
    SKILLS = "skills"
    EDUCATION = "education"
    EXPERIENCE = "experience"
    META = "meta"
    SETTINGS = "settings"


class ContentState(str, Enum):
    """Content provider lifecycle. No transition out of LOADED or FAILED."""
    UNLOADED = "unloaded"
    LOADED = "loaded"
    FAILED = "failed"


class NotificationKind(str, Enum):
    """User-visible contact form notification kinds."""
    SUCCESS = "success"
    ERROR = "error"


class MetricKind(str, Enum):
    """Impact metric categories detected in experience highlights."""
    PERCENTAGE = "percentage"
    GROWTH = "growth"
    PERFORMANCE = "performance"
    EFFICIENCY = "efficiency"
    TEAM = "team"


# ─── Page anchors ────────────────────────────────────────────────

# (anchor, label) pairs in page order; shared by nav, footer and sitemap
PAGE_SECTIONS: tuple[tuple[str, str], ...] = (
    ("about", "About"),
    ("experience", "Experience"),
    ("skills", "Skills"),
    ("education", "Education"),
    ("contact", "Contact"),
)
