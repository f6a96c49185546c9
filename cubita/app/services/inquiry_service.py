# cubita/app/services/inquiry_service.py
"""
Booking inquiry dispatch.

Validates a submitted inquiry, renders the agency notification and the
requester confirmation, and sends them in that order. Every user-supplied
field is HTML-escaped by the template environment.
"""
from __future__ import annotations

import logging
from email.utils import formataddr
from pathlib import Path
from typing import Any, Iterable, Mapping

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape
from pydantic import ValidationError

from cubita.app.domain.errors import InquiryValidationError, MailTransportError
from cubita.app.infra.mail.base import MailTransport, OutgoingEmail
from cubita.app.schemas.inquiry import InquiryPayload

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"

SUCCESS_MESSAGE = "Solicitud enviada exitosamente"
FAILURE_MESSAGE = "Error al procesar la solicitud"
VALIDATION_MESSAGE = "Faltan datos obligatorios en la solicitud"

DATE_PLACEHOLDER = "No especificada"
ARTIST_PLACEHOLDER = "No especificado"

NOTIFICATION_LEG = "notification"
CONFIRMATION_LEG = "confirmation"


def nl2br(value: Any) -> Markup:
    """Escape text and turn its line breaks into <br> tags."""
    text = str(value or "").replace("\r\n", "\n").replace("\r", "\n")
    return Markup("<br>").join(escape(text).split("\n"))


def _header_text(value: str) -> str:
    return " ".join(value.split())


def build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["nl2br"] = nl2br
    return env


def field_errors(errors: Iterable[Mapping[str, Any]], strip_prefix: str = "") -> dict[str, str]:
    """Collapse pydantic error entries into one message per field name."""
    fields: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if strip_prefix and loc[:1] == [strip_prefix] and len(loc) > 1:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        message = error.get("msg", "invalid")
        if error.get("type") == "missing":
            message = "is required"
        fields.setdefault(field, message)
    return fields


def validate_inquiry(raw: Mapping[str, Any]) -> InquiryPayload:
    """
    Validate a raw inquiry body.

    Raises:
        InquiryValidationError: with one message per invalid field
    """
    try:
        return InquiryPayload.model_validate(dict(raw))
    except ValidationError as exc:
        raise InquiryValidationError(field_errors(exc.errors())) from exc


class InquiryDispatcher:
    """
    Sends the two inquiry emails through a MailTransport.

    The notification goes first; the confirmation is only attempted once the
    notification was accepted. Either failure raises MailTransportError naming
    the leg that failed.
    """

    def __init__(
        self,
        transport: MailTransport,
        agency_inbox: str,
        sender_address: str,
        site_name: str = "Cubita Producciones",
        environment: Environment | None = None,
    ):
        self._transport = transport
        self.agency_inbox = agency_inbox
        self.sender_address = sender_address
        self.site_name = site_name
        self._env = environment or build_environment()

    def render_notification(self, inquiry: InquiryPayload) -> OutgoingEmail:
        name = _header_text(inquiry.name)
        subject = f"Solicitud de booking de {name}"
        if inquiry.artist:
            subject += f" - {_header_text(inquiry.artist)}"

        html = self._env.get_template("booking_notification.html").render(
            inquiry=inquiry,
            date_placeholder=DATE_PLACEHOLDER,
            artist_placeholder=ARTIST_PLACEHOLDER,
        )
        return OutgoingEmail(
            from_address=formataddr((name, self.sender_address)),
            to=self.agency_inbox,
            reply_to=formataddr((name, inquiry.email)),
            subject=subject,
            html=html,
        )

    def render_confirmation(self, inquiry: InquiryPayload) -> OutgoingEmail:
        html = self._env.get_template("booking_confirmation.html").render(
            inquiry=inquiry,
            site_name=self.site_name,
        )
        return OutgoingEmail(
            from_address=formataddr((self.site_name, self.sender_address)),
            to=inquiry.email,
            subject=f"Hemos recibido tu solicitud - {self.site_name}",
            html=html,
        )

    async def _send(self, leg: str, email: OutgoingEmail) -> None:
        try:
            accepted = await self._transport.send(email)
        except Exception as exc:
            logger.error("Inquiry %s email failed: %s", leg, exc)
            raise MailTransportError(leg, str(exc)) from exc

        if not accepted:
            logger.error("Inquiry %s email rejected by transport", leg)
            raise MailTransportError(leg, "rejected by transport")

    async def submit(self, inquiry: InquiryPayload) -> str:
        """
        Dispatch both emails for an already validated inquiry.

        Returns:
            The success message shown to the requester

        Raises:
            MailTransportError: if either email could not be sent
        """
        logger.info(
            "Booking inquiry received: country=%s, artist=%s",
            inquiry.country,
            inquiry.artist or "-",
        )
        await self._send(NOTIFICATION_LEG, self.render_notification(inquiry))
        await self._send(CONFIRMATION_LEG, self.render_confirmation(inquiry))
        return SUCCESS_MESSAGE
