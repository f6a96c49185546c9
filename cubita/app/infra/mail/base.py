# cubita/app/infra/mail/base.py
"""
Abstract base class for mail transports.
Backends: console (dev) and SMTP.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutgoingEmail:
    from_address: str  # "Display Name <address>"
    to: str
    subject: str
    html: str
    reply_to: Optional[str] = None


class MailTransport(ABC):
    """
    Abstract interface for sending one email.

    Implementations:
    - ConsoleMailTransport: logs instead of sending
    - SMTPMailTransport: aiosmtplib
    """

    @abstractmethod
    async def send(self, email: OutgoingEmail) -> bool:
        """
        Send an email.

        Args:
            email: The rendered message

        Returns:
            True if the transport accepted the message, False otherwise
        """
        pass


class ConsoleMailTransport(MailTransport):
    """Logs emails instead of sending them. Useful for local development."""

    async def send(self, email: OutgoingEmail) -> bool:
        logger.info("=" * 80)
        logger.info("EMAIL (Console Backend)")
        logger.info("From: %s", email.from_address)
        logger.info("To: %s", email.to)
        if email.reply_to:
            logger.info("Reply-To: %s", email.reply_to)
        logger.info("Subject: %s", email.subject)
        logger.info("-" * 80)
        logger.info(email.html)
        logger.info("=" * 80)
        return True
