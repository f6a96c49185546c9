# cubita/app/infra/cms/base.py
"""
Abstract base class for content providers.
This interface allows swapping the headless CMS (Strapi today) or adding
retry/backoff without touching the resolvers that call it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional
from urllib.parse import quote

from cubita.app.domain.errors import UpstreamUnavailableError


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single content fetch: parsed `data` or an explicit failure."""
    data: Any = None
    failure: Optional[UpstreamUnavailableError] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, data: Any) -> "FetchResult":
        return cls(data=data)

    @classmethod
    def failed(cls, path: str, reason: str) -> "FetchResult":
        return cls(failure=UpstreamUnavailableError(path, reason))


class AttemptPolicy(ABC):
    """Decides how many times, and how, a fetch is attempted."""

    @abstractmethod
    async def run(
        self,
        attempt: Callable[[str], Awaitable[FetchResult]],
        resource_path: str,
    ) -> FetchResult:
        pass


class SingleAttemptPolicy(AttemptPolicy):
    """One attempt, no retry. The failure of that attempt is the result."""

    async def run(
        self,
        attempt: Callable[[str], Awaitable[FetchResult]],
        resource_path: str,
    ) -> FetchResult:
        return await attempt(resource_path)


class ContentClient(ABC):
    """
    Abstract interface for reading structured content.

    Implementations:
    - StrapiContentClient: Strapi REST API over httpx
    """

    base_url: str = ""

    @abstractmethod
    async def fetch_content(self, resource_path: str) -> FetchResult:
        """
        Fetch a resource relative to the CMS API root.

        Args:
            resource_path: Path including query string, e.g. "/home-page?populate=*"

        Returns:
            FetchResult with the envelope's `data`, or a failure. Never raises.
        """
        pass

    async def aclose(self) -> None:
        return None


def media_url(media: Any, base_url: str) -> Optional[str]:
    """Resolve a CMS media reference to an absolute URL, or None when absent."""
    if isinstance(media, dict):
        media = media.get("url")
    if not isinstance(media, str) or not media:
        return None
    if media.startswith("http"):
        return media
    return f"{base_url.rstrip('/')}{media}"


# Endpoints consumed by the resolvers

ARTISTS_PATH = "/artists?populate=*&sort=name:asc"
ARTIST_SLUGS_PATH = "/artists?fields[0]=slug"
HOME_PAGE_PATH = "/home-page?populate=*"
ABOUT_PAGE_PATH = "/about-page?populate=*"
CONTACT_PAGE_PATH = "/contact-page?populate=*"
ARTISTS_PAGE_PATH = "/artists-page?populate=*"
SITE_SETTINGS_PATH = "/site-setting?populate=logo"


def artist_by_slug_path(slug: str) -> str:
    return f"/artists?filters[slug][$eq]={quote(slug, safe='')}&populate=*"
