"""Resend Client — thin async wrapper over Resend's REST API (POST /emails).

Invariants:
    - One HTTP call per send; no retry, no backoff
    - Timeouts, connection failures, non-2xx replies and malformed bodies all
      surface as EmailProviderError (core/errors.py)
    - The provider's error body is passed through as client-safe details;
      the API key never appears in logs or errors

Design Decisions:
    - httpx.AsyncClient per call: the route is stateless and low-volume
    - `transport` injectable so tests can swap in httpx.MockTransport
"""

import logging
from typing import Any

import httpx

from app.core.errors import EmailProviderError

logger = logging.getLogger(__name__)


class ResendClient:
    """Sends transactional email through Resend."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.resend.com",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def send(
        self,
        *,
        from_email: str,
        to: str | list[str],
        subject: str,
        html: str,
        text: str | None = None,
    ) -> str:
        """Send one email. Returns the provider's message id."""
        payload: dict[str, Any] = {
            "from": from_email,
            "to": to if isinstance(to, list) else [to],
            "subject": subject,
            "html": html,
        }
        if text:
            payload["text"] = text

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout_seconds,
                transport=self._transport,
                headers={"Authorization": f"Bearer {self.api_key}"},
            ) as client:
                resp = await client.post("/emails", json=payload)
        except httpx.TimeoutException as e:
            raise EmailProviderError("request timed out", "timeout") from e
        except httpx.RequestError as e:
            raise EmailProviderError(str(e) or e.__class__.__name__, "connection") from e

        if resp.status_code >= 400:
            body = _safe_json(resp)
            message = body.get("message") if isinstance(body, dict) else None
            logger.warning(
                f"Resend rejected email: {message or resp.reason_phrase}",
                extra={"status_code": resp.status_code},
            )
            raise EmailProviderError(
                message or f"HTTP {resp.status_code}", "rejected", details=body,
            )

        body = _safe_json(resp)
        email_id = body.get("id") if isinstance(body, dict) else None
        if not email_id:
            raise EmailProviderError("response has no message id", "invalid_response")
        return email_id


def _safe_json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return {"message": resp.text} if resp.text else None
