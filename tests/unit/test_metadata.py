from __future__ import annotations

import pytest

from cubita.app.domain.models import Genre, Locale, LocalizedText, SEO
from cubita.app.services.metadata import (
    DEFAULT_OG_IMAGE,
    PAGE_FALLBACKS,
    PageFallback,
    artist_fallback,
    build_metadata,
    page_url,
)
from cubita.app.services.normalizer import normalize_artist

FALLBACK = PageFallback(title="Fallback Title", description="Fallback description")


def _seo(**overrides) -> SEO:
    values = dict(
        meta_title=LocalizedText(es="Título ES", en="Title EN", fr="Titre FR", it="Titolo IT"),
        meta_description=LocalizedText(
            es="Descripción ES", en="Description EN", fr="Description FR", it="Descrizione IT"
        ),
    )
    values.update(overrides)
    return SEO(**values)


class TestPageUrl:
    def test_home(self) -> None:
        assert page_url(Locale.EN) == "https://cubitaproducciones.com/en"

    def test_path_without_leading_slash(self) -> None:
        assert page_url("fr", "artistas") == "https://cubitaproducciones.com/fr/artistas"

    def test_custom_site(self) -> None:
        assert page_url(Locale.IT, "/contacto", "https://staging.test/") == (
            "https://staging.test/it/contacto"
        )


class TestBuildMetadataFallbacks:
    def test_no_seo_uses_fallback(self) -> None:
        metadata = build_metadata(None, Locale.ES, FALLBACK)

        assert metadata["title"] == "Fallback Title"
        assert metadata["description"] == "Fallback description"
        assert metadata["openGraph"]["title"] == "Fallback Title"
        assert metadata["twitter"]["description"] == "Fallback description"
        assert metadata["openGraph"]["images"][0]["url"] == DEFAULT_OG_IMAGE
        assert "keywords" not in metadata

    def test_uses_locale_specific_seo(self) -> None:
        metadata = build_metadata(_seo(), Locale.IT, FALLBACK)
        assert metadata["title"] == "Titolo IT"
        assert metadata["description"] == "Descrizione IT"
        assert metadata["openGraph"]["locale"] == "it"

    def test_empty_strings_count_as_absent(self) -> None:
        seo = _seo(
            meta_title=LocalizedText(es="Título ES", en=""),
            meta_description=LocalizedText(),
        )
        metadata = build_metadata(seo, Locale.EN, FALLBACK)
        assert metadata["title"] == "Fallback Title"
        assert metadata["description"] == "Fallback description"

    def test_unknown_locale_reads_spanish(self) -> None:
        metadata = build_metadata(_seo(), "de", FALLBACK)
        assert metadata["title"] == "Título ES"
        assert metadata["alternates"]["canonical"] == "https://cubitaproducciones.com/es"


class TestBuildMetadataLinks:
    def test_alternates_cover_all_locales(self) -> None:
        metadata = build_metadata(None, Locale.ES, FALLBACK, "/artistas")
        assert metadata["alternates"]["languages"] == {
            "es": "https://cubitaproducciones.com/es/artistas",
            "en": "https://cubitaproducciones.com/en/artistas",
            "fr": "https://cubitaproducciones.com/fr/artistas",
            "it": "https://cubitaproducciones.com/it/artistas",
        }

    def test_canonical_defaults_to_page_url(self) -> None:
        metadata = build_metadata(None, Locale.FR, FALLBACK, "/contacto")
        assert metadata["alternates"]["canonical"] == "https://cubitaproducciones.com/fr/contacto"
        assert metadata["openGraph"]["url"] == "https://cubitaproducciones.com/fr/contacto"

    def test_canonical_override(self) -> None:
        seo = _seo(canonical_url="https://cubitaproducciones.com/es/artistas/wildey")
        metadata = build_metadata(seo, Locale.EN, FALLBACK, "/artistas/wildey")
        assert metadata["alternates"]["canonical"] == (
            "https://cubitaproducciones.com/es/artistas/wildey"
        )

    def test_site_values_are_injectable(self) -> None:
        metadata = build_metadata(
            None,
            Locale.EN,
            FALLBACK,
            site_url="https://staging.test",
            site_name="Staging",
            default_og_image="https://staging.test/og.jpg",
        )
        assert metadata["openGraph"]["siteName"] == "Staging"
        assert metadata["openGraph"]["url"] == "https://staging.test/en"
        assert metadata["twitter"]["images"] == ["https://staging.test/og.jpg"]


class TestBuildMetadataImagesAndRobots:
    def test_og_image_from_seo(self) -> None:
        metadata = build_metadata(_seo(og_image="https://cdn.test/og.jpg"), Locale.ES, FALLBACK)
        image = metadata["openGraph"]["images"][0]
        assert image == {
            "url": "https://cdn.test/og.jpg",
            "width": 1200,
            "height": 630,
            "alt": "Título ES",
        }
        assert metadata["twitter"]["card"] == "summary_large_image"

    def test_indexable_by_default(self) -> None:
        robots = build_metadata(_seo(), Locale.ES, FALLBACK)["robots"]
        assert robots["index"] is True
        assert robots["follow"] is True
        assert robots["googleBot"]["max-image-preview"] == "large"
        assert robots["googleBot"]["max-snippet"] == -1

    def test_no_index(self) -> None:
        robots = build_metadata(_seo(no_index=True), Locale.ES, FALLBACK)["robots"]
        assert robots["index"] is False
        assert robots["follow"] is False
        assert robots["googleBot"]["index"] is False
        assert robots["googleBot"]["follow"] is False
        assert robots["googleBot"]["max-snippet"] == 0
        assert robots["googleBot"]["max-image-preview"] == "none"

    @pytest.mark.parametrize("keywords", ["salsa, cuba", ""])
    def test_keywords_present_when_set(self, keywords: str) -> None:
        metadata = build_metadata(_seo(keywords=keywords), Locale.ES, FALLBACK)
        assert metadata["keywords"] == keywords


class TestPageFallbacks:
    def test_known_pages(self) -> None:
        assert set(PAGE_FALLBACKS) == {"home", "artists", "about", "contact"}
        for fallback in PAGE_FALLBACKS.values():
            assert fallback.title
            assert fallback.description


class TestArtistFallback:
    def test_uses_plain_bio(self, raw_artist: dict) -> None:
        raw_artist["bioEn"] = "**Wildey** is a *Cuban* singer."
        artist = normalize_artist(raw_artist)
        assert artist is not None

        fallback = artist_fallback(artist, Locale.EN)

        assert fallback.title == "Wildey - Cubita Producciones"
        assert fallback.description == "Wildey is a Cuban singer."

    def test_long_bio_is_truncated(self, raw_artist: dict) -> None:
        raw_artist["bioEs"] = "palabra " * 60
        artist = normalize_artist(raw_artist)
        assert artist is not None

        description = artist_fallback(artist, Locale.ES).description

        assert len(description) <= 160
        assert description.endswith("...")

    def test_missing_bio(self, raw_artist: dict) -> None:
        raw_artist["genre"] = "reggaeton"
        artist = normalize_artist(raw_artist)
        assert artist is not None
        assert artist.genre == Genre.REGGAETON

        fallback = artist_fallback(artist, Locale.FR, site_name="Cubita")

        assert fallback.title == "Wildey - Cubita"
        assert fallback.description == "Booking de Wildey, artista cubano de reggaeton."
