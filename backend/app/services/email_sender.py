"""Email Sender — picks the email body for a request and hands it to the provider.

Invariants:
    - `custom` uses the caller's html verbatim and has no text part
    - `custom` without html, or a named template with no renderer, raises
      InvalidTemplateError (400)
    - Exactly one provider call per send
"""

import logging
from typing import Protocol

from app.core.email_templates import EmailContent, TEMPLATE_NAMES, render_template
from app.core.errors import InvalidTemplateError
from app.schemas.email import SendEmailRequest

logger = logging.getLogger(__name__)


class EmailClient(Protocol):
    async def send(
        self, *, from_email: str, to: str | list[str], subject: str,
        html: str, text: str | None = None,
    ) -> str: ...


def compose_email(request: SendEmailRequest) -> EmailContent:
    if request.template == "custom":
        if not request.html:
            raise InvalidTemplateError(request.template)
        return EmailContent(html=request.html)
    if request.template not in TEMPLATE_NAMES:
        raise InvalidTemplateError(request.template)
    return render_template(request.template, request.data)


async def send_email(
    client: EmailClient, request: SendEmailRequest, from_email: str,
) -> str:
    """Render and send. Returns the provider message id."""
    content = compose_email(request)
    email_id = await client.send(
        from_email=from_email,
        to=request.to,
        subject=request.subject,
        html=content.html,
        text=content.text,
    )
    logger.info(
        "Email sent",
        extra={"template": request.template, "email_id": email_id},
    )
    return email_id
