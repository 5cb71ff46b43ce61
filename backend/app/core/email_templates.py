"""Email Templates — static transactional templates rendered from a data mapping.

Invariants:
    - Every template returns both an HTML and a plain-text body
    - Values interpolated into HTML are escaped; the text body is left verbatim
    - Missing keys fall back to fixed defaults, never raise

Design Decisions:
    - Plain functions in a name → renderer table: the route only needs
      "does this name exist" and "give me the body"
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from html import escape
from typing import Any, Callable, Mapping

DEFAULT_URL = "https://example.com"


@dataclass(frozen=True)
class EmailContent:
    html: str
    text: str | None = None


def _get(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if not value:
        return default
    return str(value)


def render_welcome(data: Mapping[str, Any]) -> EmailContent:
    name = _get(data, "name", "there")
    url = _get(data, "url", DEFAULT_URL)
    year = datetime.now(timezone.utc).year
    html = f"""<!DOCTYPE html>
<html>
  <head>
    <style>
      body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
      .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
      .header {{ background: #4f46e5; color: white; padding: 20px; text-align: center; }}
      .content {{ padding: 30px 20px; background: #f9fafb; }}
      .button {{
        display: inline-block;
        padding: 12px 24px;
        background: #4f46e5;
        color: white;
        text-decoration: none;
        border-radius: 6px;
        margin: 20px 0;
      }}
      .footer {{ text-align: center; padding: 20px; color: #6b7280; font-size: 14px; }}
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h1>Welcome to Our Platform!</h1>
      </div>
      <div class="content">
        <p>Hi {escape(name)},</p>
        <p>We're excited to have you on board! Thank you for joining our platform.</p>
        <p>To get started, explore our features and customize your experience.</p>
        <a href="{escape(url)}" class="button">Get Started</a>
        <p>If you have any questions, feel free to reach out to our support team.</p>
      </div>
      <div class="footer">
        <p>&copy; {year} Your Company. All rights reserved.</p>
      </div>
    </div>
  </body>
</html>
"""
    text = (
        "Welcome to Our Platform!\n\n"
        f"Hi {name},\n\n"
        "We're excited to have you on board! Thank you for joining our platform.\n\n"
        f"To get started, visit: {url}\n\n"
        "If you have any questions, feel free to reach out to our support team."
    )
    return EmailContent(html=html, text=text)


def render_notification(data: Mapping[str, Any]) -> EmailContent:
    title = _get(data, "title", "Notification")
    message = _get(data, "message", "You have a new notification.")
    action_url = _get(data, "actionUrl")
    button = ""
    if action_url:
        button = (
            f'<a href="{escape(action_url)}" style="display: inline-block; '
            "padding: 10px 20px; background: #4f46e5; color: white; "
            'text-decoration: none; border-radius: 5px;">View Details</a>'
        )
    html = f"""<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif;">
    <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
      <h2>{escape(title)}</h2>
      <p>{escape(message)}</p>
      {button}
    </div>
  </body>
</html>
"""
    text = f"{title}\n\n{message}\n\n"
    if action_url:
        text += f"View details: {action_url}"
    return EmailContent(html=html, text=text)


def render_reset_password(data: Mapping[str, Any]) -> EmailContent:
    name = _get(data, "name", "there")
    reset_url = _get(data, "resetUrl")
    expiry_hours = _get(data, "expiryHours", "24")
    html = f"""<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif;">
    <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
      <h2>Reset Your Password</h2>
      <p>Hi {escape(name)},</p>
      <p>We received a request to reset your password. Click the button below to create a new password:</p>
      <a href="{escape(reset_url)}" style="display: inline-block; padding: 12px 24px; background: #4f46e5; color: white; text-decoration: none; border-radius: 6px; margin: 20px 0;">Reset Password</a>
      <p>This link will expire in {escape(expiry_hours)} hours.</p>
      <p>If you didn't request this, please ignore this email.</p>
    </div>
  </body>
</html>
"""
    text = (
        "Reset Your Password\n\n"
        f"Hi {name},\n\n"
        "We received a request to reset your password.\n\n"
        f"Reset your password here: {reset_url}\n\n"
        f"This link will expire in {expiry_hours} hours.\n\n"
        "If you didn't request this, please ignore this email."
    )
    return EmailContent(html=html, text=text)


TEMPLATES: dict[str, Callable[[Mapping[str, Any]], EmailContent]] = {
    "welcome": render_welcome,
    "notification": render_notification,
    "reset-password": render_reset_password,
}

TEMPLATE_NAMES = frozenset(TEMPLATES)


def render_template(name: str, data: Mapping[str, Any] | None = None) -> EmailContent:
    """Render a named template. Raises KeyError for unknown names."""
    return TEMPLATES[name](data or {})
