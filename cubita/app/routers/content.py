from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from cubita.app.deps import get_content_service
from cubita.app.domain.errors import ArtistNotFoundError
from cubita.app.domain.models import ARTIST_NOT_FOUND, ARTIST_UNAVAILABLE
from cubita.app.schemas.content import to_api
from cubita.app.services.content_service import ContentService

router = APIRouter(prefix="/api/content", tags=["content"])

ARTIST_UNAVAILABLE_DETAIL = "Artist catalog temporarily unavailable"


@router.get("/artists")
async def list_artists(content: ContentService = Depends(get_content_service)) -> list[Any]:
    return to_api(await content.get_artists())


@router.get("/artists/slugs")
async def list_artist_slugs(content: ContentService = Depends(get_content_service)) -> list[str]:
    return await content.get_all_artist_slugs()


@router.get("/artists/{slug}")
async def get_artist(slug: str, content: ContentService = Depends(get_content_service)) -> Any:
    artist = await content.get_artist_by_slug(slug)
    if artist is ARTIST_NOT_FOUND:
        raise ArtistNotFoundError(slug)
    if artist is ARTIST_UNAVAILABLE:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=ARTIST_UNAVAILABLE_DETAIL,
        )
    return to_api(artist)


@router.get("/home-page")
async def get_home_page(content: ContentService = Depends(get_content_service)) -> Any:
    return to_api(await content.get_home_page())


@router.get("/about-page")
async def get_about_page(content: ContentService = Depends(get_content_service)) -> Any:
    return to_api(await content.get_about_page())


@router.get("/contact-page")
async def get_contact_page(content: ContentService = Depends(get_content_service)) -> Any:
    return to_api(await content.get_contact_page())


@router.get("/artists-page")
async def get_artists_page(content: ContentService = Depends(get_content_service)) -> Any:
    return to_api(await content.get_artists_page())


@router.get("/site-settings")
async def get_site_settings(content: ContentService = Depends(get_content_service)) -> Any:
    return to_api(await content.get_site_settings())
