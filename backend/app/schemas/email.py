"""Email Schemas — request/response contracts for /api/email/send.

Invariants:
    - `to` is one address or a non-empty list of addresses, each a valid email
    - subject non-empty after stripping
    - template is one of welcome | notification | reset-password | custom
    - Whether `custom` carries html is checked by the email service, not here,
      so the caller gets INVALID_TEMPLATE rather than a generic field error
"""

from typing import Any, Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

TemplateName = Literal["welcome", "notification", "reset-password", "custom"]


class SendEmailRequest(BaseModel):
    to: EmailStr | list[EmailStr]
    subject: str
    template: TemplateName
    data: dict[str, Any] | None = None
    html: str | None = None

    @field_validator("to")
    @classmethod
    def recipients_not_empty(cls, v: str | list[str]) -> str | list[str]:
        if isinstance(v, list) and not v:
            raise ValueError("At least one recipient is required")
        return v

    @field_validator("subject")
    @classmethod
    def subject_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Subject is required")
        return v


class SendEmailResponse(BaseModel):
    success: bool = True
    message: str = "Email sent successfully"
    id: str


class EmailStatusResponse(BaseModel):
    """Configuration status — reported, never raised."""
    configured: bool
    message: str
    from_email: str = Field(serialization_alias="from")
