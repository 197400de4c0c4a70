"""
Email delivery.

The reset-code email is sent through the Resend HTTP API.  Without an API
key a logging sender is used instead, which writes the code to the log so
the flow stays usable in development.
"""

from __future__ import annotations

import logging
import uuid
from abc import abstractmethod
from typing import Protocol

import requests

from app.core.config import settings
from app.core.errors import DeliveryError

LOGGER = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "[IGC Fitness] 비밀번호 재설정 인증 코드"

_RESET_EMAIL_HTML = """\
<div style="font-family: 'Apple SD Gothic Neo', sans-serif; max-width: 600px; margin: 0 auto; padding: 40px 20px;">
  <div style="text-align: center; margin-bottom: 30px;">
    <h1 style="color: #2563EB; margin: 0;">IGC Fitness</h1>
  </div>
  <div style="background: linear-gradient(135deg, #3B82F6 0%, #10B981 100%); border-radius: 16px; padding: 30px; \
text-align: center; margin-bottom: 30px;">
    <p style="color: #fff; font-size: 16px; margin: 0 0 16px 0;">비밀번호 재설정 인증 코드</p>
    <div style="background: #fff; border-radius: 12px; padding: 20px; display: inline-block;">
      <span style="font-size: 32px; font-weight: bold; letter-spacing: 8px; color: #1F2937;">{code}</span>
    </div>
  </div>
  <div style="color: #6B7280; font-size: 14px; line-height: 1.6;">
    <p>이 인증 코드는 <strong>{ttl_minutes}분 후에 만료</strong>됩니다.</p>
    <p>본인이 요청하지 않은 경우 이 이메일을 무시해주세요.</p>
  </div>
</div>
"""


def build_reset_email(code: str, ttl_minutes: int = settings.RESET_CODE_TTL_MINUTES) -> tuple[str, str]:
    """Return ``(subject, html_body)`` for a reset-code email."""
    return RESET_EMAIL_SUBJECT, _RESET_EMAIL_HTML.format(code=code, ttl_minutes=ttl_minutes)


class EmailSender(Protocol):
    """Outbound email collaborator."""

    @abstractmethod
    def send(self, to_address: str, subject: str, html_body: str) -> str:
        """Send a message and return the provider's message id.

        Raises:
            DeliveryError: If the provider rejects or cannot be reached.
        """
        ...


class ResendEmailSender(EmailSender):
    """Sends through https://resend.com with a plain HTTP POST."""

    def __init__(
        self,
        *,
        api_key: str,
        sender: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._sender = sender
        self._api_url = api_url
        self._timeout = timeout

    def send(self, to_address: str, subject: str, html_body: str) -> str:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        body = {"from": self._sender, "to": [to_address], "subject": subject, "html": html_body}
        try:
            resp = requests.post(self._api_url, headers=headers, json=body, timeout=self._timeout)
        except requests.RequestException as exc:
            LOGGER.error("Email API unreachable: %s", exc)
            raise DeliveryError() from exc

        if resp.status_code >= 400:
            LOGGER.error("Email API rejected message (%s): %s", resp.status_code, resp.text[:500])
            raise DeliveryError()

        try:
            message_id = resp.json().get("id")
        except ValueError:
            message_id = None
        if not message_id:
            LOGGER.error("Email API returned no message id")
            raise DeliveryError()
        return message_id


class LoggingEmailSender(EmailSender):
    """Development sender: logs the message instead of delivering it."""

    def send(self, to_address: str, subject: str, html_body: str) -> str:
        message_id = f"log-{uuid.uuid4().hex}"
        LOGGER.warning(
            {
                "event": "email_not_sent",
                "to": to_address,
                "subject": subject,
                "message_id": message_id,
                "body": html_body,
            }
        )
        return message_id


def get_email_sender() -> EmailSender:
    """Pick the sender from settings."""
    if settings.RESEND_API_KEY:
        return ResendEmailSender(
            api_key=settings.RESEND_API_KEY,
            sender=settings.MAIL_FROM,
            api_url=settings.RESEND_API_URL,
            timeout=settings.MAIL_TIMEOUT_SECONDS,
        )
    return LoggingEmailSender()
