# cubita/app/services/normalizer.py
"""
Normalization of raw Strapi records into the localized content model.

Each content type has an explicit field table mapping a logical field to the
four upstream keys that carry it (one per locale). Tables are validated when
the module is imported, so a missing locale key fails at import time instead
of silently producing an empty field.

None of the functions here raise: malformed input degrades to defaults.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from cubita.app.domain.models import (
    LOCALES,
    AboutPage,
    Artist,
    ArtistsPage,
    ContactPage,
    FormLabels,
    Genre,
    HomePage,
    Locale,
    LocalizedText,
    NavLabels,
    SEO,
    Service,
    SiteSettings,
    Stats,
)
from cubita.app.infra.cms.base import media_url
from cubita.app.services.defaults import (
    AVAILABILITY_PLACEHOLDER,
    DEFAULT_ABOUT_PAGE,
    DEFAULT_ARTISTS_PAGE,
    DEFAULT_CONTACT_PAGE,
    DEFAULT_HOME_PAGE,
    DEFAULT_SITE_SETTINGS,
)

logger = logging.getLogger(__name__)

LOCALE_SUFFIXES: Mapping[Locale, str] = {
    Locale.ES: "Es",
    Locale.EN: "En",
    Locale.FR: "Fr",
    Locale.IT: "It",
}

SPANISH_MONTHS = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)

EMPTY_TEXT = LocalizedText()


@dataclass(frozen=True)
class LocalizedField:
    """The upstream key holding a logical field for each locale."""
    keys: Mapping[Locale, str]

    def __post_init__(self) -> None:
        missing = [locale.value for locale in LOCALES if not self.keys.get(locale)]
        if missing:
            raise ValueError(f"Localized field is missing keys for: {', '.join(missing)}")

    @classmethod
    def from_base(cls, base: str) -> "LocalizedField":
        return cls({locale: f"{base}{suffix}" for locale, suffix in LOCALE_SUFFIXES.items()})


def localized(base: str) -> LocalizedField:
    return LocalizedField.from_base(base)


# ============ FIELD TABLES ============

SEO_FIELDS = {
    "meta_title": localized("metaTitle"),
    "meta_description": localized("metaDescription"),
}

ARTIST_FIELDS = {
    "bio": localized("bio"),
}

HOME_PAGE_FIELDS = {
    "hero_title": localized("heroTitle"),
    "hero_subtitle": localized("heroSubtitle"),
    "about_title": localized("aboutTitle"),
    "about_text": localized("aboutText"),
    "cta_text": localized("ctaText"),
}

STATS_KEYS = {
    "years": "statsYears",
    "artists": "statsArtists",
    "festivals": "statsFestivals",
    "countries": "statsCountries",
}

ABOUT_PAGE_FIELDS = {
    "title": localized("title"),
    "subtitle": localized("subtitle"),
    "mission_title": localized("missionTitle"),
    "mission_text": localized("missionText"),
}

ABOUT_SERVICE_FIELDS = (
    {"title": localized("service1Title"), "text": localized("service1Text")},
    {"title": localized("service2Title"), "text": localized("service2Text")},
    {"title": localized("service3Title"), "text": localized("service3Text")},
)

CONTACT_PAGE_FIELDS = {
    "title": localized("title"),
    "subtitle": localized("subtitle"),
    "response_time_title": localized("responseTimeTitle"),
    "response_time_text": localized("responseTimeText"),
    "success_message": localized("formSuccessMessage"),
    "error_message": localized("formErrorMessage"),
}

CONTACT_FORM_LABEL_FIELDS = {
    "name": localized("formNameLabel"),
    "email": localized("formEmailLabel"),
    "country": localized("formCountryLabel"),
    "date": localized("formDateLabel"),
    "artist": localized("formArtistLabel"),
    "message": localized("formMessageLabel"),
    "submit": localized("formSubmitButton"),
}

ARTISTS_PAGE_FIELDS = {
    "title": localized("title"),
    "subtitle": localized("subtitle"),
    "view_details_button": localized("viewDetailsButton"),
    "cta_title": localized("ctaTitle"),
    "cta_subtitle": localized("ctaSubtitle"),
    "salsa_label": localized("salsaLabel"),
    "reggaeton_label": localized("reggaetonLabel"),
}

SITE_SETTINGS_FIELDS = {
    "footer_description": localized("footerDescription"),
    "footer_copyright": localized("footerCopyright"),
}

NAV_FIELDS = {
    "home": localized("navHome"),
    "artists": localized("navArtists"),
    "about": localized("navAbout"),
    "contact": localized("navContact"),
}


# ============ HELPERS ============

def first_non_empty(candidate: Any, fallback: str) -> str:
    """Return `candidate` unless it is missing, not a string, or the empty string."""
    if isinstance(candidate, str) and candidate != "":
        return candidate
    return fallback


def _optional_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value != "":
        return value
    return None


def _count(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if (isinstance(value, float) and not math.isfinite(value)) or value <= 0:
        return default
    return int(value)


def localize(raw: Mapping[str, Any], field: LocalizedField, default: LocalizedText) -> LocalizedText:
    """Read the four locale keys of a field, each falling back to the default for that locale."""
    return LocalizedText(
        **{
            locale.value: first_non_empty(raw.get(field.keys[locale]), default.get(locale))
            for locale in LOCALES
        }
    )


def _localize_table(
    raw: Mapping[str, Any],
    table: Mapping[str, LocalizedField],
    defaults: Any,
) -> dict[str, LocalizedText]:
    return {name: localize(raw, field, getattr(defaults, name)) for name, field in table.items()}


def _parse_day(value: Any) -> Optional[date]:
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def format_availability(start: Any, end: Any) -> str:
    """
    Render an availability window as "<d> <month> - <d> <month> <year>".

    Month names are Spanish. Either date missing or unparsable yields the
    locale-invariant placeholder.
    """
    start_day = _parse_day(start)
    end_day = _parse_day(end)
    if start_day is None or end_day is None:
        return AVAILABILITY_PLACEHOLDER

    start_label = f"{start_day.day} {SPANISH_MONTHS[start_day.month - 1]}"
    end_label = f"{end_day.day} {SPANISH_MONTHS[end_day.month - 1]}"
    return f"{start_label} - {end_label} {end_day.year}"


# ============ NORMALIZERS ============

def normalize_seo(raw: Any, base_url: str = "") -> Optional[SEO]:
    if not isinstance(raw, dict) or not raw:
        return None

    texts = _localize_table(raw, SEO_FIELDS, SEO())
    return SEO(
        meta_title=texts["meta_title"],
        meta_description=texts["meta_description"],
        keywords=_optional_text(raw.get("keywords")),
        og_image=media_url(raw.get("ogImage"), base_url),
        canonical_url=_optional_text(raw.get("canonicalUrl")),
        no_index=raw.get("noIndex") is True,
    )


def normalize_artist(raw: Any, base_url: str = "") -> Optional[Artist]:
    """Map one raw artist entry. Returns None for entries that are not objects."""
    if not isinstance(raw, dict):
        return None

    raw_id = raw.get("id")
    fallback_id = str(raw_id) if raw_id is not None else ""

    genre_value = raw.get("genre")
    genre = Genre(genre_value) if genre_value in {g.value for g in Genre} else Genre.SALSA

    return Artist(
        id=first_non_empty(raw.get("documentId"), fallback_id),
        name=first_non_empty(raw.get("name"), ""),
        slug=first_non_empty(raw.get("slug"), ""),
        genre=genre,
        bio=localize(raw, ARTIST_FIELDS["bio"], EMPTY_TEXT),
        availability=format_availability(raw.get("availabilityStart"), raw.get("availabilityEnd")),
        image=media_url(raw.get("image"), base_url),
        instagram=_optional_text(raw.get("instagram")),
        youtube=_optional_text(raw.get("youtube")),
        travel_party=_count(raw.get("travelParty"), 0),
        seo=normalize_seo(raw.get("seo"), base_url),
    )


def normalize_artists(raw: Any, base_url: str = "") -> list[Artist]:
    """Map a raw artist collection, keeping the first entry for each slug."""
    if not isinstance(raw, list):
        return []

    artists: list[Artist] = []
    seen: set[str] = set()
    for item in raw:
        artist = normalize_artist(item, base_url)
        if artist is None or not artist.slug:
            continue
        if artist.slug in seen:
            logger.warning("Duplicate artist slug skipped: %s", artist.slug)
            continue
        seen.add(artist.slug)
        artists.append(artist)
    return artists


def _stats(raw: Mapping[str, Any], defaults: Stats) -> Stats:
    return Stats(
        **{name: _count(raw.get(key), getattr(defaults, name)) for name, key in STATS_KEYS.items()}
    )


def normalize_home_page(
    raw: Any,
    defaults: HomePage = DEFAULT_HOME_PAGE,
    base_url: str = "",
) -> HomePage:
    if not isinstance(raw, dict):
        return defaults

    return HomePage(
        **_localize_table(raw, HOME_PAGE_FIELDS, defaults),
        stats=_stats(raw, defaults.stats),
        seo=normalize_seo(raw.get("seo"), base_url),
    )


def normalize_about_page(
    raw: Any,
    defaults: AboutPage = DEFAULT_ABOUT_PAGE,
    base_url: str = "",
) -> AboutPage:
    if not isinstance(raw, dict):
        return defaults

    services = tuple(
        Service(**_localize_table(raw, table, default_service))
        for table, default_service in zip(ABOUT_SERVICE_FIELDS, defaults.services)
    )
    return AboutPage(
        **_localize_table(raw, ABOUT_PAGE_FIELDS, defaults),
        stats=_stats(raw, defaults.stats),
        services=services,
        seo=normalize_seo(raw.get("seo"), base_url),
    )


def normalize_contact_page(
    raw: Any,
    defaults: ContactPage = DEFAULT_CONTACT_PAGE,
    base_url: str = "",
) -> ContactPage:
    if not isinstance(raw, dict):
        return defaults

    return ContactPage(
        **_localize_table(raw, CONTACT_PAGE_FIELDS, defaults),
        email=first_non_empty(raw.get("email"), defaults.email),
        phone=first_non_empty(raw.get("phone"), defaults.phone),
        location=first_non_empty(raw.get("location"), defaults.location),
        form_labels=FormLabels(
            **_localize_table(raw, CONTACT_FORM_LABEL_FIELDS, defaults.form_labels)
        ),
        seo=normalize_seo(raw.get("seo"), base_url),
    )


def normalize_artists_page(
    raw: Any,
    defaults: ArtistsPage = DEFAULT_ARTISTS_PAGE,
    base_url: str = "",
) -> ArtistsPage:
    if not isinstance(raw, dict):
        return defaults

    return ArtistsPage(
        **_localize_table(raw, ARTISTS_PAGE_FIELDS, defaults),
        seo=normalize_seo(raw.get("seo"), base_url),
    )


def normalize_site_settings(
    raw: Any,
    defaults: SiteSettings = DEFAULT_SITE_SETTINGS,
    base_url: str = "",
) -> SiteSettings:
    if not isinstance(raw, dict):
        return defaults

    return SiteSettings(
        company_name=first_non_empty(raw.get("companyName"), defaults.company_name),
        logo=media_url(raw.get("logo"), base_url),
        email=first_non_empty(raw.get("email"), defaults.email),
        phone=first_non_empty(raw.get("phone"), defaults.phone),
        location=first_non_empty(raw.get("location"), defaults.location),
        nav=NavLabels(**_localize_table(raw, NAV_FIELDS, defaults.nav)),
        **_localize_table(raw, SITE_SETTINGS_FIELDS, defaults),
        instagram=_optional_text(raw.get("instagram")),
        facebook=_optional_text(raw.get("facebook")),
        youtube=_optional_text(raw.get("youtube")),
    )
