# cubita/app/services/metadata.py
"""
Page metadata generation (title, description, Open Graph, Twitter card,
canonical/alternate links, robots directives).

`build_metadata` is a pure function: no settings lookup, no I/O. Site-wide
values are keyword arguments with production defaults.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from cubita.app.domain.models import LOCALES, Artist, Locale, SEO
from cubita.app.services.normalizer import first_non_empty
from cubita.app.services.text import strip_markdown, truncate_text

SITE_URL = "https://cubitaproducciones.com"
SITE_NAME = "Cubita Producciones"
DEFAULT_OG_IMAGE = f"{SITE_URL}/og-image.jpg"

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630
DESCRIPTION_MAX_LENGTH = 160


@dataclass(frozen=True)
class PageFallback:
    title: str
    description: str


PAGE_FALLBACKS: dict[str, PageFallback] = {
    "home": PageFallback(
        title="Cubita Producciones - Booking de Artistas Cubanos",
        description="Agencia de booking de artistas cubanos de salsa y regueton para festivales y eventos en Europa.",
    ),
    "artists": PageFallback(
        title="Artistas - Cubita Producciones",
        description="Descubre los mejores artistas cubanos de salsa y regueton disponibles para booking en Europa.",
    ),
    "about": PageFallback(
        title="Sobre Nosotros - Cubita Producciones",
        description="Mas de 30 anos de experiencia conectando el talento cubano con escenarios de todo el mundo.",
    ),
    "contact": PageFallback(
        title="Contacto - Cubita Producciones",
        description="Contacta con Cubita Producciones para el booking de artistas cubanos en Europa.",
    ),
}

ARTIST_NOT_FOUND_TITLE = "Artista no encontrado - Cubita Producciones"


def artist_fallback(artist: Artist, locale: Locale, site_name: str = SITE_NAME) -> PageFallback:
    """Fallback title/description for an artist page, built from the localized bio."""
    bio = truncate_text(strip_markdown(artist.bio.get(locale)), DESCRIPTION_MAX_LENGTH)
    return PageFallback(
        title=f"{artist.name} - {site_name}",
        description=bio or f"Booking de {artist.name}, artista cubano de {artist.genre.value}.",
    )


def page_url(locale: Locale | str, path: str = "", site_url: str = SITE_URL) -> str:
    if path and not path.startswith("/"):
        path = f"/{path}"
    return f"{site_url.rstrip('/')}/{Locale.parse(locale).value}{path}"


def _robots(no_index: bool) -> dict[str, Any]:
    if no_index:
        return {
            "index": False,
            "follow": False,
            "googleBot": {
                "index": False,
                "follow": False,
                "max-image-preview": "none",
                "max-snippet": 0,
            },
        }
    return {
        "index": True,
        "follow": True,
        "googleBot": {
            "index": True,
            "follow": True,
            "max-image-preview": "large",
            "max-snippet": -1,
        },
    }


def build_metadata(
    seo: Optional[SEO],
    locale: Locale | str,
    fallback: PageFallback,
    path: str = "",
    *,
    site_url: str = SITE_URL,
    site_name: str = SITE_NAME,
    default_og_image: str = DEFAULT_OG_IMAGE,
) -> dict[str, Any]:
    """
    Build the metadata bundle for one page.

    Empty SEO strings count as unset, so the fallback title/description apply.
    Language alternates always cover all four locales; the canonical URL can be
    overridden by the SEO record.
    """
    locale = Locale.parse(locale)
    title = first_non_empty(seo.meta_title.get(locale) if seo else None, fallback.title)
    description = first_non_empty(
        seo.meta_description.get(locale) if seo else None,
        fallback.description,
    )
    url = page_url(locale, path, site_url)
    og_image = first_non_empty(seo.og_image if seo else None, default_og_image)

    metadata: dict[str, Any] = {
        "title": title,
        "description": description,
        "openGraph": {
            "title": title,
            "description": description,
            "url": url,
            "type": "website",
            "siteName": site_name,
            "locale": locale.value,
            "images": [
                {
                    "url": og_image,
                    "width": OG_IMAGE_WIDTH,
                    "height": OG_IMAGE_HEIGHT,
                    "alt": title,
                }
            ],
        },
        "twitter": {
            "card": "summary_large_image",
            "title": title,
            "description": description,
            "images": [og_image],
        },
        "alternates": {
            "canonical": first_non_empty(seo.canonical_url if seo else None, url),
            "languages": {other.value: page_url(other, path, site_url) for other in LOCALES},
        },
        "robots": _robots(bool(seo and seo.no_index)),
    }

    if seo and seo.keywords is not None:
        metadata["keywords"] = seo.keywords

    return metadata
