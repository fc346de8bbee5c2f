"""Outbound email for verification codes.

Two notifiers share one protocol:
- LoggingNotifier writes the message to the log (development default)
- MailAPIClient posts it to an HTTP mail gateway, retrying with backoff

Delivery is fire-and-forget: callers never see a transport error.
"""

import time
from typing import Protocol

import httpx
import structlog

from homedirect.config import Settings, get_settings

logger = structlog.get_logger(__name__)

VERIFICATION_SUBJECT = "Verify your email for HomeDirect"


def format_verification_message(first_name: str, code: str, ttl_minutes: int) -> str:
    """Plain-text body of the verification email."""
    lines = [
        f"Hello {first_name},",
        "",
        "Thank you for registering with HomeDirect!",
        "",
        f"Your verification code is: {code}",
        "",
        "Please use this code to verify your email address.",
    ]
    if ttl_minutes > 0:
        lines.append(f"This code will expire in {ttl_minutes} minutes.")
    lines.extend([
        "",
        "If you did not create an account, please ignore this email.",
        "",
        "Best regards,",
        "The HomeDirect Team",
    ])
    return "\n".join(lines)


class Notifier(Protocol):
    def send(self, to: str, subject: str, body: str) -> None:
        ...


class LoggingNotifier:
    """Writes outgoing mail to the log instead of delivering it."""

    def send(self, to: str, subject: str, body: str) -> None:
        logger.info("Email (not delivered)", to=to, subject=subject, body=body)


class MailAPIClient:
    """Client for a JSON mail gateway (POST {base_url}/send)."""

    def __init__(self, settings: Settings | None = None, transport: httpx.BaseTransport | None = None):
        settings = settings or get_settings()
        self.transport = transport
        self.base_url = settings.MAIL_API_URL.rstrip("/")
        self.sender = settings.MAIL_FROM
        self.headers = {
            "Authorization": f"Bearer {settings.MAIL_API_KEY}",
            "Content-Type": "application/json",
        }
        self.max_retries = 3
        self.retry_delay = 1  # seconds
        self.timeout = 10

    def send(self, to: str, subject: str, body: str) -> None:
        """Deliver one message. Failures are logged, never raised."""
        url = f"{self.base_url}/send"
        payload = {"from": self.sender, "to": to, "subject": subject, "text": body}

        for attempt in range(1, self.max_retries + 1):
            try:
                with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                    response = client.post(url, json=payload, headers=self.headers)
                    response.raise_for_status()
                logger.info("Email sent", to=to, subject=subject, attempt=attempt)
                return
            except httpx.HTTPStatusError as e:
                logger.warning(
                    "Mail API error",
                    to=to,
                    attempt=attempt,
                    max_retries=self.max_retries,
                    status_code=e.response.status_code,
                    response=e.response.text[:200],
                )
                # Client errors other than rate limiting will not improve on retry
                if e.response.status_code < 500 and e.response.status_code != 429:
                    break
            except httpx.HTTPError as e:
                logger.warning(
                    "Mail API connection error",
                    to=to,
                    attempt=attempt,
                    max_retries=self.max_retries,
                    error=str(e),
                )

            if attempt < self.max_retries:
                time.sleep(self.retry_delay * attempt)

        logger.error("Email delivery failed", to=to, subject=subject)


def build_notifier(settings: Settings | None = None) -> Notifier:
    settings = settings or get_settings()
    if settings.NOTIFIER == "http":
        return MailAPIClient(settings)
    return LoggingNotifier()
