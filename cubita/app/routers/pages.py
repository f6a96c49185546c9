# cubita/app/routers/pages.py
"""
Page bundles for the front end: every record a page renders, its metadata
and its JSON-LD, loaded concurrently inside one request scope.
"""
from __future__ import annotations

import asyncio
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from cubita.app.config import settings
from cubita.app.deps import get_content_service
from cubita.app.domain.errors import ArtistNotFoundError
from cubita.app.domain.models import (
    ARTIST_NOT_FOUND,
    ARTIST_UNAVAILABLE,
    Locale,
    SEO,
)
from cubita.app.routers.content import ARTIST_UNAVAILABLE_DETAIL
from cubita.app.schemas.content import to_api
from cubita.app.services.content_service import ContentService
from cubita.app.services.metadata import (
    PAGE_FALLBACKS,
    PageFallback,
    artist_fallback,
    build_metadata,
    page_url,
)
from cubita.app.services.structured_data import (
    artist_json_ld,
    breadcrumb_json_ld,
    organization_json_ld,
)

router = APIRouter(prefix="/api/pages", tags=["pages"])

HOME_PATH = ""
ARTISTS_PATH = "/artistas"
ABOUT_PATH = "/sobre-nosotros"
CONTACT_PATH = "/contacto"


def _metadata(seo: Optional[SEO], locale: Locale, fallback: PageFallback, path: str) -> dict[str, Any]:
    return build_metadata(
        seo,
        locale,
        fallback,
        path,
        site_url=settings.site_base_url,
        site_name=settings.SITE_NAME,
        default_og_image=settings.default_og_image,
    )


def _organization(site_settings, locale: Locale) -> dict[str, Any]:
    return organization_json_ld(
        site_settings,
        locale,
        site_url=settings.site_base_url,
        site_name=settings.SITE_NAME,
    )


@router.get("/{locale}/home")
async def home_bundle(locale: str, content: ContentService = Depends(get_content_service)) -> Any:
    lang = Locale.parse(locale)
    page, site_settings = await asyncio.gather(
        content.get_home_page(),
        content.get_site_settings(),
    )
    return {
        "locale": lang.value,
        "content": to_api(page),
        "settings": to_api(site_settings),
        "metadata": _metadata(page.seo, lang, PAGE_FALLBACKS["home"], HOME_PATH),
        "jsonLd": [_organization(site_settings, lang)],
    }


@router.get("/{locale}/artists")
async def artists_bundle(locale: str, content: ContentService = Depends(get_content_service)) -> Any:
    lang = Locale.parse(locale)
    page, artists, site_settings = await asyncio.gather(
        content.get_artists_page(),
        content.get_artists(),
        content.get_site_settings(),
    )
    return {
        "locale": lang.value,
        "content": to_api(page),
        "artists": to_api(artists),
        "settings": to_api(site_settings),
        "metadata": _metadata(page.seo, lang, PAGE_FALLBACKS["artists"], ARTISTS_PATH),
        "jsonLd": [_organization(site_settings, lang)],
    }


@router.get("/{locale}/about")
async def about_bundle(locale: str, content: ContentService = Depends(get_content_service)) -> Any:
    lang = Locale.parse(locale)
    page, site_settings = await asyncio.gather(
        content.get_about_page(),
        content.get_site_settings(),
    )
    return {
        "locale": lang.value,
        "content": to_api(page),
        "settings": to_api(site_settings),
        "metadata": _metadata(page.seo, lang, PAGE_FALLBACKS["about"], ABOUT_PATH),
        "jsonLd": [_organization(site_settings, lang)],
    }


@router.get("/{locale}/contact")
async def contact_bundle(locale: str, content: ContentService = Depends(get_content_service)) -> Any:
    lang = Locale.parse(locale)
    page, artists, site_settings = await asyncio.gather(
        content.get_contact_page(),
        content.get_artists(),
        content.get_site_settings(),
    )
    return {
        "locale": lang.value,
        "content": to_api(page),
        "artistNames": [artist.name for artist in artists],
        "settings": to_api(site_settings),
        "metadata": _metadata(page.seo, lang, PAGE_FALLBACKS["contact"], CONTACT_PATH),
        "jsonLd": [_organization(site_settings, lang)],
    }


@router.get("/{locale}/artists/{slug}")
async def artist_bundle(
    locale: str,
    slug: str,
    content: ContentService = Depends(get_content_service),
) -> Any:
    lang = Locale.parse(locale)
    artist, page, site_settings = await asyncio.gather(
        content.get_artist_by_slug(slug),
        content.get_artists_page(),
        content.get_site_settings(),
    )
    if artist is ARTIST_NOT_FOUND:
        raise ArtistNotFoundError(slug)
    if artist is ARTIST_UNAVAILABLE:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=ARTIST_UNAVAILABLE_DETAIL,
        )

    path = f"{ARTISTS_PATH}/{slug}"
    url = page_url(lang, path, settings.site_base_url)
    breadcrumbs = [
        (site_settings.nav.home.get(lang), page_url(lang, HOME_PATH, settings.site_base_url)),
        (site_settings.nav.artists.get(lang), page_url(lang, ARTISTS_PATH, settings.site_base_url)),
        (artist.name, url),
    ]
    return {
        "locale": lang.value,
        "artist": to_api(artist),
        "genreLabel": page.genre_label(artist.genre, lang),
        "content": to_api(page),
        "settings": to_api(site_settings),
        "metadata": _metadata(
            artist.seo,
            lang,
            artist_fallback(artist, lang, settings.SITE_NAME),
            path,
        ),
        "jsonLd": [artist_json_ld(artist, lang, url), breadcrumb_json_ld(breadcrumbs)],
    }
