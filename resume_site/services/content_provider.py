"""Content Provider — single load point and typed access for the resume document.

Invariants:
    - Loaded at most once; the first outcome (document or error) is kept
    - UNLOADED → LOADED | FAILED, never back; a process restart is the only recovery
    - load() and section() raise ContentValidationError; safe_load() returns None instead
    - Returned values are frozen models and tuples; callers cannot mutate shared state

Design Decisions:
    - Constructed explicitly and owned by the application (app.state), injected
      into routes; there is no module-level instance
"""

import json
import logging
from pathlib import Path
from typing import Any

from resume_site.core.content_views import skills_with_content, valid_contact_links
from resume_site.core.domain_types import ContentState, SectionKey
from resume_site.core.errors import ContentValidationError, ErrorContext
from resume_site.schemas.resume import ContactLink, ResumeContent, parse_resume_data

logger = logging.getLogger(__name__)

_UNSET = object()


class ContentProvider:
    """Owns the resume document for the lifetime of the process."""

    def __init__(self, source: Path | str | None = None, *, data: Any = _UNSET):
        if source is None and data is _UNSET:
            raise ValueError("ContentProvider needs a source path or decoded data")
        self.source = Path(source) if source is not None else None
        self._raw = data
        self._content: ResumeContent | None = None
        self._error: ContentValidationError | None = None

    @classmethod
    def from_data(cls, data: Any) -> "ContentProvider":
        """Provider over an already-decoded value (tests, embedding)."""
        return cls(data=data)

    @property
    def state(self) -> ContentState:
        if self._content is not None:
            return ContentState.LOADED
        if self._error is not None:
            return ContentState.FAILED
        return ContentState.UNLOADED

    def load(self) -> ResumeContent:
        """Return the validated document, loading it on first call."""
        if self._content is not None:
            return self._content
        if self._error is not None:
            raise self._error
        try:
            self._content = parse_resume_data(self._read_raw())
        except ContentValidationError as e:
            self._error = e
            logger.error(
                f"Resume content failed validation: {e.message}",
                extra={"error_code": e.code, "path": str(self.source or "<data>")},
            )
            raise
        logger.info(
            "Resume content loaded",
            extra={"path": str(self.source or "<data>")},
        )
        return self._content

    def safe_load(self) -> ResumeContent | None:
        """load() for call sites with a fallback: None instead of an error."""
        try:
            return self.load()
        except ContentValidationError:
            return None

    def section(self, key: SectionKey | str) -> Any:
        """Named top-level field of the document (JSON key, e.g. "contacts")."""
        try:
            section_key = SectionKey(key)
        except ValueError:
            raise KeyError(f"Unknown resume section: {key!r}") from None
        return getattr(self.load(), section_key.value)

    def valid_contact_links(self) -> tuple[ContactLink, ...]:
        return valid_contact_links(self.load().contacts.links)

    def skills_with_content(self) -> dict[str, tuple[str, ...]]:
        return skills_with_content(self.load().skills)

    def _read_raw(self) -> Any:
        if self._raw is not _UNSET:
            return self._raw
        if self.source is None:
            raise ValueError("ContentProvider has neither a source path nor data")
        ctx = ErrorContext(source=str(self.source))
        try:
            text = self.source.read_text(encoding="utf-8")
        except OSError as e:
            raise ContentValidationError(
                f"Cannot read resume content at {self.source}: {e}",
                context=ctx,
            ) from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ContentValidationError(
                f"Resume content at {self.source} is not valid JSON: {e}",
                context=ctx,
            ) from e
