"""Email Sending — /api/email/send via the Resend transactional API.

Invariants:
    - POST with RESEND_API_KEY unset → 500 EMAIL_NOT_CONFIGURED, provider never called,
      whatever the body (malformed JSON included)
    - GET reports configuration via a `configured` flag and never fails on it
    - Provider failures → 500 EMAIL_PROVIDER_ERROR with the provider's error body

Design Decisions:
    - POST reads the raw body itself: FastAPI parses declared JSON bodies before
      dependencies run, which would let a bad body mask missing configuration
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from app.api.error_handlers import as_request_validation_error
from app.config import Settings, get_settings
from app.core.errors import EmailNotConfiguredError
from app.infrastructure.email_client import ResendClient
from app.schemas.email import (
    EmailStatusResponse, SendEmailRequest, SendEmailResponse,
)
from app.services.email_sender import EmailClient, send_email

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/email", tags=["email"])

NOT_CONFIGURED_MESSAGE = "Email service not configured. Add RESEND_API_KEY to .env"


def require_email_configured(
    settings: Settings = Depends(get_settings),
) -> Settings:
    if not settings.email_configured:
        raise EmailNotConfiguredError()
    return settings


def get_email_client(
    settings: Settings = Depends(require_email_configured),
) -> EmailClient:
    return ResendClient(
        api_key=settings.resend_api_key,
        base_url=settings.resend_base_url,
        timeout_seconds=settings.resend_timeout_seconds,
    )


async def read_send_request(request: Request) -> SendEmailRequest:
    try:
        return SendEmailRequest.model_validate_json(await request.body())
    except ValidationError as e:
        raise as_request_validation_error(e, "body")


@router.post(
    "/send",
    response_model=SendEmailResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": SendEmailRequest.model_json_schema()},
            },
        },
    },
)
async def send(
    request: Request,
    settings: Settings = Depends(require_email_configured),
    client: EmailClient = Depends(get_email_client),
):
    """Send a templated or custom-HTML email."""
    body = await read_send_request(request)
    email_id = await send_email(client, body, settings.resend_from_email)
    return SendEmailResponse(id=email_id)


@router.get("/send", response_model=EmailStatusResponse)
async def email_status(settings: Settings = Depends(get_settings)):
    """Report whether the email provider is configured."""
    configured = settings.email_configured
    return EmailStatusResponse(
        configured=configured,
        message=(
            "Email service is configured and ready"
            if configured else NOT_CONFIGURED_MESSAGE
        ),
        from_email=settings.resend_from_email,
    )
