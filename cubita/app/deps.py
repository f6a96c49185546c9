# cubita/app/deps.py (client singleton, per-request content scope)

from __future__ import annotations

from fastapi import Depends

from cubita.app.config import settings
from cubita.app.infra.cms.base import ContentClient
from cubita.app.infra.cms.strapi_client import StrapiContentClient
from cubita.app.infra.mail.base import ConsoleMailTransport, MailTransport
from cubita.app.infra.mail.smtp_transport import SMTPMailTransport
from cubita.app.services.content_service import ContentScope, ContentService
from cubita.app.services.inquiry_service import InquiryDispatcher

_content_client: ContentClient | None = None


def get_content_client() -> ContentClient:
    global _content_client
    if _content_client is None:
        _content_client = StrapiContentClient(
            base_url=settings.cms_base_url,
            api_token=settings.CMS_API_TOKEN,
            timeout_seconds=settings.CMS_TIMEOUT_SECONDS,
            revalidate_seconds=settings.CMS_REVALIDATE_SECONDS,
        )
    return _content_client


async def close_content_client() -> None:
    global _content_client
    if _content_client is not None:
        await _content_client.aclose()
        _content_client = None


def get_content_service(
    client: ContentClient = Depends(get_content_client),
) -> ContentService:
    """One memoization scope per request; never shared across requests."""
    return ContentService(client, ContentScope())


def get_mail_transport() -> MailTransport:
    if settings.MAIL_BACKEND.lower() == "console":
        return ConsoleMailTransport()
    return SMTPMailTransport(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASS,
        use_tls=settings.SMTP_USE_TLS,
    )


def get_inquiry_dispatcher(
    transport: MailTransport = Depends(get_mail_transport),
) -> InquiryDispatcher:
    return InquiryDispatcher(
        transport=transport,
        agency_inbox=settings.EMAIL_TO,
        sender_address=settings.EMAIL_FROM,
        site_name=settings.SITE_NAME,
    )
