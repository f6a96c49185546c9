from __future__ import annotations

import dataclasses

import pytest

from cubita.app.domain.models import (
    DEFAULT_LOCALE,
    LOCALES,
    Genre,
    Locale,
    LocalizedText,
    SiteSettings,
)
from cubita.app.services.defaults import DEFAULT_ARTISTS_PAGE, DEFAULT_SITE_SETTINGS


class TestLocale:
    def test_values(self) -> None:
        assert [locale.value for locale in LOCALES] == ["es", "en", "fr", "it"]

    def test_is_string_enum(self) -> None:
        assert isinstance(Locale.EN, str)
        assert Locale.EN == "en"

    @pytest.mark.parametrize("raw,expected", [
        ("en", Locale.EN),
        ("FR", Locale.FR),
        ("it-IT", Locale.IT),
        ("fr_FR", Locale.FR),
        (" EN ", Locale.EN),
        (Locale.ES, Locale.ES),
    ])
    def test_parse_known(self, raw: object, expected: Locale) -> None:
        assert Locale.parse(raw) == expected

    @pytest.mark.parametrize("raw", ["de", "", None, 42, "english", "frog", "items"])
    def test_parse_unknown_falls_back_to_spanish(self, raw: object) -> None:
        assert Locale.parse(raw) == DEFAULT_LOCALE == Locale.ES


class TestLocalizedText:
    def test_missing_entries_are_empty(self) -> None:
        text = LocalizedText(es="Hola")
        assert text.en == ""
        assert text.fr == ""
        assert text.it == ""

    def test_lookup_by_locale(self) -> None:
        text = LocalizedText(es="Hola", en="Hello", fr="Bonjour", it="Ciao")
        assert text[Locale.FR] == "Bonjour"
        assert text.get("it") == "Ciao"

    def test_unknown_locale_reads_spanish(self) -> None:
        text = LocalizedText(es="Hola", en="Hello")
        assert text.get("de") == "Hola"

    def test_uniform(self) -> None:
        text = LocalizedText.uniform("Email")
        assert [value for _, value in text.items()] == ["Email"] * 4

    def test_is_immutable(self) -> None:
        text = LocalizedText(es="Hola")
        with pytest.raises(dataclasses.FrozenInstanceError):
            text.es = "Adiós"  # type: ignore[misc]


class TestArtistsPage:
    def test_genre_label(self) -> None:
        assert DEFAULT_ARTISTS_PAGE.genre_label(Genre.REGGAETON, Locale.ES) == "Reguetón"
        assert DEFAULT_ARTISTS_PAGE.genre_label(Genre.REGGAETON, Locale.EN) == "Reggaeton"
        assert DEFAULT_ARTISTS_PAGE.genre_label(Genre.SALSA, Locale.IT) == "Salsa"


class TestSiteSettings:
    def test_social_links_skip_missing(self) -> None:
        settings = dataclasses.replace(
            DEFAULT_SITE_SETTINGS,
            instagram="https://instagram.com/cubita",
            youtube="https://youtube.com/@cubita",
        )
        assert isinstance(settings, SiteSettings)
        assert settings.social_links == [
            "https://instagram.com/cubita",
            "https://youtube.com/@cubita",
        ]

    def test_defaults_have_no_social_links(self) -> None:
        assert DEFAULT_SITE_SETTINGS.social_links == []
