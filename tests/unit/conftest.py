from __future__ import annotations

import asyncio
from typing import Any

import pytest

from cubita.app.infra.cms.base import ContentClient, FetchResult
from cubita.app.infra.mail.base import MailTransport, OutgoingEmail


class ContentClientStub(ContentClient):
    def __init__(self, base_url: str = "https://cms.test") -> None:
        self.base_url = base_url
        self.responses: dict[str, Any] = {}
        self.failing: set[str] = set()
        self.calls: list[str] = []
        self.delay_seconds = 0.0

    async def fetch_content(self, resource_path: str) -> FetchResult:
        self.calls.append(resource_path)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if resource_path in self.failing or resource_path not in self.responses:
            return FetchResult.failed(resource_path, "stubbed failure")
        return FetchResult.success(self.responses[resource_path])


class MailTransportStub(MailTransport):
    def __init__(self) -> None:
        self.sent: list[OutgoingEmail] = []
        self.errors: dict[int, Exception] = {}
        self.rejected_calls: set[int] = set()

    async def send(self, email: OutgoingEmail) -> bool:
        call_index = len(self.sent)
        self.sent.append(email)
        if call_index in self.errors:
            raise self.errors[call_index]
        return call_index not in self.rejected_calls


@pytest.fixture
def content_client() -> ContentClientStub:
    return ContentClientStub()


@pytest.fixture
def mail_transport() -> MailTransportStub:
    return MailTransportStub()


@pytest.fixture
def inquiry_body() -> dict[str, str]:
    return {
        "name": "John Doe",
        "email": "john@example.com",
        "country": "Spain",
        "eventDate": "2025-12-25",
        "artist": "Test Artist",
        "message": "Hello",
    }


@pytest.fixture
def raw_artist() -> dict[str, Any]:
    return {
        "id": 7,
        "documentId": "abc123",
        "name": "Wildey",
        "slug": "wildey",
        "genre": "salsa",
        "bioEs": "Una de las voces más potentes de la salsa cubana.",
        "bioEn": "One of the most powerful voices in Cuban salsa.",
        "availabilityStart": "2025-03-06",
        "availabilityEnd": "2025-03-22",
        "image": {"url": "/uploads/wildey.jpg"},
        "instagram": "https://instagram.com/wildey",
        "travelParty": 8,
        "seo": {
            "metaTitleEs": "Wildey - Booking",
            "keywords": "salsa, cuba",
            "ogImage": {"url": "https://cdn.test/wildey-og.jpg"},
            "noIndex": False,
        },
    }
