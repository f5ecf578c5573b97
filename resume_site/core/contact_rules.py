"""Contact Rules — pre-send checks for a contact form submission.

Invariants:
    - Honeypot is checked first; a filled honeypot rejects before any other check
    - Required fields are name, email, message; blank after trimming counts as missing
    - Length limits are checked last, against the untrimmed values
    - Pure: raises, never sends
"""

from resume_site.core.errors import (
    FieldTooLongError, MissingFieldsError, SpamRejectionError,
)
from resume_site.schemas.contact import ContactForm

REQUIRED_FIELDS = ("name", "email", "message")
FIELD_LIMITS = {"name": 200, "email": 320, "message": 10_000}


def is_spam(form: ContactForm) -> bool:
    return form.honeypot != ""


def missing_fields(form: ContactForm) -> list[str]:
    return [f for f in REQUIRED_FIELDS if not getattr(form, f).strip()]


def overlong_fields(form: ContactForm) -> list[str]:
    return [f for f, limit in FIELD_LIMITS.items() if len(getattr(form, f)) > limit]


def check_submission(form: ContactForm) -> None:
    """Raise SpamRejectionError, MissingFieldsError or FieldTooLongError; return None if sendable."""
    if is_spam(form):
        raise SpamRejectionError()
    missing = missing_fields(form)
    if missing:
        raise MissingFieldsError(missing)
    overlong = overlong_fields(form)
    if overlong:
        raise FieldTooLongError(overlong)
