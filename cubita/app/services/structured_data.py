# cubita/app/services/structured_data.py
"""
schema.org JSON-LD documents for the public pages.
"""
from __future__ import annotations

from typing import Any

from cubita.app.domain.models import Artist, Locale, SiteSettings
from cubita.app.services.metadata import SITE_NAME, SITE_URL

SCHEMA_CONTEXT = "https://schema.org"
LANGUAGES = ["Spanish", "English", "French", "Italian"]


def organization_json_ld(
    settings: SiteSettings,
    locale: Locale,
    site_url: str = SITE_URL,
    site_name: str = SITE_NAME,
) -> dict[str, Any]:
    site_url = site_url.rstrip("/")
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "@id": f"{site_url}/#organization",
        "name": site_name,
        "url": site_url,
        "logo": settings.logo or f"{site_url}/logo.jpeg",
        "description": settings.footer_description.get(locale) or settings.footer_description.es,
        "email": settings.email,
        "telephone": settings.phone,
        "address": {
            "@type": "PostalAddress",
            "addressLocality": settings.location,
            "addressCountry": "IT",
        },
        "sameAs": settings.social_links,
        "contactPoint": {
            "@type": "ContactPoint",
            "telephone": settings.phone,
            "email": settings.email,
            "contactType": "booking inquiries",
            "availableLanguage": LANGUAGES,
        },
    }


def breadcrumb_json_ld(items: list[tuple[str, str]]) -> dict[str, Any]:
    """`items` are (name, url) pairs from the root to the current page."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": index,
                "name": name,
                "item": url,
            }
            for index, (name, url) in enumerate(items, start=1)
        ],
    }


def artist_json_ld(artist: Artist, locale: Locale, url: str) -> dict[str, Any]:
    document: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "MusicGroup",
        "name": artist.name,
        "description": artist.bio.get(locale),
        "genre": artist.genre.value,
        "url": url,
        "sameAs": [link for link in (artist.instagram, artist.youtube) if link],
        "member": {
            "@type": "OrganizationRole",
            "member": {"@type": "Person", "name": artist.name},
        },
    }
    if artist.image:
        document["image"] = artist.image
    return document
