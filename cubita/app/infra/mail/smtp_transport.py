# cubita/app/infra/mail/smtp_transport.py
"""
SMTP mail transport implementation.
Sends through any SMTP server with optional STARTTLS, using aiosmtplib.
"""
from __future__ import annotations

import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib

from cubita.app.domain.errors import MailConfigurationError
from cubita.app.infra.mail.base import MailTransport, OutgoingEmail

logger = logging.getLogger(__name__)

DEFAULT_SMTP_TIMEOUT_SECONDS = 30.0


class SMTPMailTransport(MailTransport):
    """
    SMTP backend.

    Configuration (from Settings):
    - SMTP_HOST: required
    - SMTP_PORT: defaults to 587
    - SMTP_USER / SMTP_PASS: optional credentials
    - SMTP_USE_TLS: STARTTLS, defaults to True
    """

    def __init__(
        self,
        host: Optional[str],
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout_seconds: float = DEFAULT_SMTP_TIMEOUT_SECONDS,
    ):
        if not host:
            raise MailConfigurationError(["SMTP_HOST is required"])

        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout_seconds = timeout_seconds

    @staticmethod
    def build_message(email: OutgoingEmail) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["From"] = email.from_address
        message["To"] = email.to
        message["Subject"] = email.subject
        if email.reply_to:
            message["Reply-To"] = email.reply_to
        message.attach(MIMEText(email.html, "html", "utf-8"))
        return message

    async def send(self, email: OutgoingEmail) -> bool:
        try:
            await aiosmtplib.send(
                self.build_message(email),
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                start_tls=self.use_tls,
                timeout=self.timeout_seconds,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.error("SMTP send to %s failed: %s", email.to, exc.__class__.__name__)
            return False

        logger.info("Email sent via SMTP to %s", email.to)
        return True
