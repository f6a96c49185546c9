# cubita/app/domain/models.py
"""
Domain models for the localized site content.
These are pure, immutable data structures with no infrastructure dependencies.
Every record is produced by the normalizer and never mutated afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class Locale(str, Enum):
    """Supported display languages."""
    ES = "es"
    EN = "en"
    FR = "fr"
    IT = "it"

    @classmethod
    def parse(cls, value: object) -> "Locale":
        """Resolve a raw locale code, falling back to Spanish for unknown values."""
        if isinstance(value, Locale):
            return value
        if isinstance(value, str):
            code = value.strip().lower().replace("_", "-").split("-", 1)[0]
            for locale in cls:
                if locale.value == code:
                    return locale
        return DEFAULT_LOCALE


DEFAULT_LOCALE = Locale.ES
LOCALES: tuple[Locale, ...] = (Locale.ES, Locale.EN, Locale.FR, Locale.IT)


class Genre(str, Enum):
    SALSA = "salsa"
    REGGAETON = "reggaeton"


class ArtistLookup(str, Enum):
    """Signals returned by a slug lookup that did not produce an artist."""
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


ARTIST_NOT_FOUND = ArtistLookup.NOT_FOUND
ARTIST_UNAVAILABLE = ArtistLookup.UNAVAILABLE


@dataclass(frozen=True)
class LocalizedText:
    """A complete per-locale string mapping. Missing entries are empty strings."""
    es: str = ""
    en: str = ""
    fr: str = ""
    it: str = ""

    @classmethod
    def uniform(cls, text: str) -> "LocalizedText":
        return cls(es=text, en=text, fr=text, it=text)

    def get(self, locale: Locale | str) -> str:
        return getattr(self, Locale.parse(locale).value)

    def __getitem__(self, locale: Locale | str) -> str:
        return self.get(locale)

    def items(self) -> Iterator[tuple[Locale, str]]:
        for locale in LOCALES:
            yield locale, getattr(self, locale.value)


@dataclass(frozen=True)
class SEO:
    """Search and share metadata attached to a page or artist."""
    meta_title: LocalizedText = field(default_factory=LocalizedText)
    meta_description: LocalizedText = field(default_factory=LocalizedText)
    keywords: Optional[str] = None
    og_image: Optional[str] = None  # absolute URL
    canonical_url: Optional[str] = None
    no_index: bool = False


@dataclass(frozen=True)
class Artist:
    id: str
    name: str
    slug: str
    genre: Genre
    bio: LocalizedText
    availability: str
    image: Optional[str] = None
    instagram: Optional[str] = None
    youtube: Optional[str] = None
    travel_party: int = 0
    seo: Optional[SEO] = None


@dataclass(frozen=True)
class Stats:
    years: int
    artists: int
    festivals: int
    countries: int


@dataclass(frozen=True)
class HomePage:
    hero_title: LocalizedText
    hero_subtitle: LocalizedText
    stats: Stats
    about_title: LocalizedText
    about_text: LocalizedText
    cta_text: LocalizedText
    seo: Optional[SEO] = None


@dataclass(frozen=True)
class Service:
    title: LocalizedText
    text: LocalizedText


@dataclass(frozen=True)
class AboutPage:
    title: LocalizedText
    subtitle: LocalizedText
    mission_title: LocalizedText
    mission_text: LocalizedText
    stats: Stats
    services: tuple[Service, Service, Service]
    seo: Optional[SEO] = None


@dataclass(frozen=True)
class FormLabels:
    name: LocalizedText
    email: LocalizedText
    country: LocalizedText
    date: LocalizedText
    artist: LocalizedText
    message: LocalizedText
    submit: LocalizedText


@dataclass(frozen=True)
class ContactPage:
    title: LocalizedText
    subtitle: LocalizedText
    email: str
    phone: str
    location: str
    response_time_title: LocalizedText
    response_time_text: LocalizedText
    form_labels: FormLabels
    success_message: LocalizedText
    error_message: LocalizedText
    seo: Optional[SEO] = None


@dataclass(frozen=True)
class ArtistsPage:
    title: LocalizedText
    subtitle: LocalizedText
    view_details_button: LocalizedText
    cta_title: LocalizedText
    cta_subtitle: LocalizedText
    salsa_label: LocalizedText
    reggaeton_label: LocalizedText
    seo: Optional[SEO] = None

    def genre_label(self, genre: Genre, locale: Locale) -> str:
        label = self.reggaeton_label if genre == Genre.REGGAETON else self.salsa_label
        return label.get(locale)


@dataclass(frozen=True)
class NavLabels:
    home: LocalizedText
    artists: LocalizedText
    about: LocalizedText
    contact: LocalizedText


@dataclass(frozen=True)
class SiteSettings:
    company_name: str
    logo: Optional[str]
    email: str
    phone: str
    location: str
    nav: NavLabels
    footer_description: LocalizedText
    footer_copyright: LocalizedText
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    youtube: Optional[str] = None

    @property
    def social_links(self) -> list[str]:
        return [link for link in (self.instagram, self.facebook, self.youtube) if link]
