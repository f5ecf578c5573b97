"""Contact Schemas — form payload, notifications and submission outcome.

Invariants:
    - Every form field defaults to "" so a partial post still parses
    - No length limits here; contact_rules enforces them so an overlong post
      still comes back as a notification with its values
    - honeypot never appears in the relay payload
    - ContactResult.form carries the values to show after submission
      (cleared on success, retained on failure)
"""

from pydantic import BaseModel

from resume_site.core.domain_types import NotificationKind


class ContactForm(BaseModel):
    """What the visitor typed. honeypot is the hidden decoy field."""
    name: str = ""
    email: str = ""
    message: str = ""
    honeypot: str = ""

    def relay_payload(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email, "message": self.message}


class Notification(BaseModel):
    kind: NotificationKind
    message: str


class ContactResult(BaseModel):
    ok: bool
    notification: Notification
    form: ContactForm
    error_code: str | None = None
