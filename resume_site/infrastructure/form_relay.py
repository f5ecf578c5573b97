"""Form Relay Client — posts contact messages to the third-party form relay.

Invariants:
    - Exactly one POST per send(); no retry (the visitor resubmits)
    - Body is JSON {name, email, message}; Accept: application/json
    - Any non-2xx status, timeout or transport error is mapped to SubmissionError

Design Decisions:
    - Wrapper over raw httpx: isolates error mapping from the contact service
    - transport is injectable so tests can substitute httpx.MockTransport
"""

import logging

import httpx

from resume_site.core.errors import ErrorContext, SubmissionError

logger = logging.getLogger(__name__)


class FormRelayClient:
    """Thin async client for a Formspree-style JSON endpoint."""

    def __init__(
        self,
        endpoint: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def send(self, payload: dict[str, str]) -> None:
        ctx = ErrorContext(source=self.endpoint)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport,
            ) as client:
                response = await client.post(
                    self.endpoint,
                    json=payload,
                    headers={"Accept": "application/json"},
                )
        except httpx.TimeoutException as e:
            raise SubmissionError(f"timeout: {e}", context=ctx) from e
        except httpx.HTTPError as e:
            raise SubmissionError(f"transport error: {e}", context=ctx) from e

        if not response.is_success:
            logger.warning(
                f"Form relay rejected message with HTTP {response.status_code}",
                extra={"endpoint": self.endpoint, "status_code": response.status_code},
            )
            raise SubmissionError(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
                context=ctx,
            )
        logger.info(
            "Form relay accepted message",
            extra={"endpoint": self.endpoint, "status_code": response.status_code},
        )
