from __future__ import annotations

import dataclasses

from cubita.app.domain.models import Locale
from cubita.app.services.defaults import DEFAULT_SITE_SETTINGS
from cubita.app.services.normalizer import normalize_artist
from cubita.app.services.structured_data import (
    artist_json_ld,
    breadcrumb_json_ld,
    organization_json_ld,
)


class TestOrganizationJsonLd:
    def test_defaults(self) -> None:
        document = organization_json_ld(DEFAULT_SITE_SETTINGS, Locale.EN)

        assert document["@context"] == "https://schema.org"
        assert document["@type"] == "Organization"
        assert document["url"] == "https://cubitaproducciones.com"
        assert document["logo"] == "https://cubitaproducciones.com/logo.jpeg"
        assert document["description"] == "Cuban artists booking agency"
        assert document["email"] == DEFAULT_SITE_SETTINGS.email
        assert document["sameAs"] == []
        assert document["contactPoint"]["availableLanguage"] == [
            "Spanish", "English", "French", "Italian",
        ]

    def test_uses_cms_logo_and_social_links(self) -> None:
        settings = dataclasses.replace(
            DEFAULT_SITE_SETTINGS,
            logo="https://cms.test/uploads/logo.png",
            facebook="https://facebook.com/cubita",
        )
        document = organization_json_ld(settings, Locale.ES, site_url="https://staging.test/")

        assert document["logo"] == "https://cms.test/uploads/logo.png"
        assert document["sameAs"] == ["https://facebook.com/cubita"]
        assert document["@id"] == "https://staging.test/#organization"


class TestBreadcrumbJsonLd:
    def test_positions_start_at_one(self) -> None:
        document = breadcrumb_json_ld([
            ("Inicio", "https://cubitaproducciones.com/es"),
            ("Artistas", "https://cubitaproducciones.com/es/artistas"),
        ])
        items = document["itemListElement"]
        assert [item["position"] for item in items] == [1, 2]
        assert items[1]["name"] == "Artistas"
        assert items[1]["item"] == "https://cubitaproducciones.com/es/artistas"


class TestArtistJsonLd:
    def test_artist_document(self, raw_artist: dict) -> None:
        artist = normalize_artist(raw_artist, "https://cms.test")
        assert artist is not None

        document = artist_json_ld(artist, Locale.EN, "https://cubitaproducciones.com/en/artistas/wildey")

        assert document["@type"] == "MusicGroup"
        assert document["name"] == "Wildey"
        assert document["genre"] == "salsa"
        assert document["description"] == "One of the most powerful voices in Cuban salsa."
        assert document["image"] == "https://cms.test/uploads/wildey.jpg"
        assert document["sameAs"] == ["https://instagram.com/wildey"]

    def test_without_image(self, raw_artist: dict) -> None:
        del raw_artist["image"]
        artist = normalize_artist(raw_artist)
        assert artist is not None
        assert "image" not in artist_json_ld(artist, Locale.ES, "https://x.test")
