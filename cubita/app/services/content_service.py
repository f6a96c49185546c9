# cubita/app/services/content_service.py
"""
Content resolvers.
Fetch a resource through the ContentClient, normalize it, and memoize the
result for the lifetime of one request.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Hashable, Optional, TypeVar, Union

from cubita.app.domain.models import (
    ARTIST_NOT_FOUND,
    ARTIST_UNAVAILABLE,
    AboutPage,
    Artist,
    ArtistLookup,
    ArtistsPage,
    ContactPage,
    HomePage,
    SiteSettings,
)
from cubita.app.infra.cms.base import (
    ABOUT_PAGE_PATH,
    ARTIST_SLUGS_PATH,
    ARTISTS_PAGE_PATH,
    ARTISTS_PATH,
    CONTACT_PAGE_PATH,
    HOME_PAGE_PATH,
    SITE_SETTINGS_PATH,
    ContentClient,
    artist_by_slug_path,
)
from cubita.app.services import normalizer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContentScope:
    """
    Memoization scope for one request/render pass.

    The first caller for a key starts the load; concurrent callers for the
    same key await the same task. A new scope starts empty.
    """

    def __init__(self) -> None:
        self._tasks: dict[Hashable, asyncio.Future[Any]] = {}

    async def memoize(self, key: Hashable, factory: Callable[[], Awaitable[T]]) -> T:
        task = self._tasks.get(key)
        if task is None:
            task = asyncio.ensure_future(factory())
            self._tasks[key] = task
        return await asyncio.shield(task)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)


class ContentService:
    """
    Resolves normalized content records.

    Record getters always return a complete record (defaults stand in when the
    CMS fails); list getters return an empty list on failure. Upstream errors
    are logged here and never raised.
    """

    def __init__(self, client: ContentClient, scope: Optional[ContentScope] = None):
        self._client = client
        self._scope = scope or ContentScope()

    @property
    def scope(self) -> ContentScope:
        return self._scope

    async def _fetch(self, resource_path: str, label: str) -> Any:
        result = await self._client.fetch_content(resource_path)
        if not result.ok:
            logger.info("Serving default %s: %s", label, result.failure)
            return None
        return result.data

    # ---- artists ----

    async def get_artists(self) -> list[Artist]:
        artists = await self._scope.memoize(("artists",), self._load_artists)
        return list(artists)

    async def _load_artists(self) -> list[Artist]:
        data = await self._fetch(ARTISTS_PATH, "artist list")
        return normalizer.normalize_artists(data, self._client.base_url)

    async def get_artist_by_slug(self, slug: str) -> Union[Artist, ArtistLookup]:
        """
        Look up one artist by slug.

        Returns:
            The Artist, ARTIST_NOT_FOUND when the CMS answered but nothing
            matched, or ARTIST_UNAVAILABLE when the CMS could not be reached.
        """
        return await self._scope.memoize(("artist", slug), lambda: self._load_artist(slug))

    async def _load_artist(self, slug: str) -> Union[Artist, ArtistLookup]:
        if not slug:
            return ARTIST_NOT_FOUND

        result = await self._client.fetch_content(artist_by_slug_path(slug))
        if not result.ok:
            logger.info("Artist lookup unavailable for slug=%s: %s", slug, result.failure)
            return ARTIST_UNAVAILABLE

        for artist in normalizer.normalize_artists(result.data, self._client.base_url):
            if artist.slug == slug:
                return artist
        return ARTIST_NOT_FOUND

    async def get_all_artist_slugs(self) -> list[str]:
        slugs = await self._scope.memoize(("artist_slugs",), self._load_artist_slugs)
        return list(slugs)

    async def _load_artist_slugs(self) -> list[str]:
        data = await self._fetch(ARTIST_SLUGS_PATH, "artist slugs")
        if not isinstance(data, list):
            return []
        slugs: list[str] = []
        for item in data:
            slug = item.get("slug") if isinstance(item, dict) else None
            if isinstance(slug, str) and slug and slug not in slugs:
                slugs.append(slug)
        return slugs

    # ---- single types ----

    async def get_home_page(self) -> HomePage:
        return await self._scope.memoize(("home_page",), self._load_home_page)

    async def _load_home_page(self) -> HomePage:
        data = await self._fetch(HOME_PAGE_PATH, "home page")
        return normalizer.normalize_home_page(data, base_url=self._client.base_url)

    async def get_about_page(self) -> AboutPage:
        return await self._scope.memoize(("about_page",), self._load_about_page)

    async def _load_about_page(self) -> AboutPage:
        data = await self._fetch(ABOUT_PAGE_PATH, "about page")
        return normalizer.normalize_about_page(data, base_url=self._client.base_url)

    async def get_contact_page(self) -> ContactPage:
        return await self._scope.memoize(("contact_page",), self._load_contact_page)

    async def _load_contact_page(self) -> ContactPage:
        data = await self._fetch(CONTACT_PAGE_PATH, "contact page")
        return normalizer.normalize_contact_page(data, base_url=self._client.base_url)

    async def get_artists_page(self) -> ArtistsPage:
        return await self._scope.memoize(("artists_page",), self._load_artists_page)

    async def _load_artists_page(self) -> ArtistsPage:
        data = await self._fetch(ARTISTS_PAGE_PATH, "artists page")
        return normalizer.normalize_artists_page(data, base_url=self._client.base_url)

    async def get_site_settings(self) -> SiteSettings:
        return await self._scope.memoize(("site_settings",), self._load_site_settings)

    async def _load_site_settings(self) -> SiteSettings:
        data = await self._fetch(SITE_SETTINGS_PATH, "site settings")
        return normalizer.normalize_site_settings(data, base_url=self._client.base_url)
