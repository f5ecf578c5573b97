"""Contact Service — runs a contact form submission end to end.

Invariants:
    - Spam, missing fields and missing configuration never reach the network
    - A sendable form produces exactly one relay POST
    - Success clears the form; every failure returns the form as submitted
    - No ResumeSiteError escapes submit(); outcomes become notifications
"""

import logging

from resume_site.core.contact_rules import check_submission
from resume_site.core.domain_types import NotificationKind
from resume_site.core.errors import (
    ContactNotConfiguredError, FieldTooLongError, MissingFieldsError,
    ResumeSiteError, SpamRejectionError, SubmissionError,
)
from resume_site.infrastructure.form_relay import FormRelayClient
from resume_site.schemas.contact import ContactForm, ContactResult, Notification

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Message sent successfully! I'll get back to you soon."


class ContactService:

    def __init__(self, relay: FormRelayClient | None):
        self.relay = relay

    async def submit(self, form: ContactForm) -> tuple[ContactResult, int]:
        """Return the outcome and the HTTP status that describes it."""
        try:
            check_submission(form)
            if self.relay is None:
                raise ContactNotConfiguredError()
            await self.relay.send(form.relay_payload())
        except SpamRejectionError as e:
            logger.info("Contact submission rejected as spam", extra={"error_code": e.code})
            return self._failure(form, e), e.http_status
        except (MissingFieldsError, FieldTooLongError) as e:
            return self._failure(form, e), e.http_status
        except ContactNotConfiguredError as e:
            logger.warning("Contact form submitted but no relay endpoint is configured")
            return self._failure(form, e), e.http_status
        except SubmissionError as e:
            logger.error(e.message, extra={"error_code": e.code})
            return self._failure(form, e), e.http_status

        return ContactResult(
            ok=True,
            notification=Notification(kind=NotificationKind.SUCCESS, message=SUCCESS_MESSAGE),
            form=ContactForm(),
        ), 200

    @staticmethod
    def _failure(form: ContactForm, error: ResumeSiteError) -> ContactResult:
        return ContactResult(
            ok=False,
            notification=Notification(
                kind=NotificationKind.ERROR,
                message=error.context.user_message or error.message,
            ),
            form=form,
            error_code=error.code,
        )
