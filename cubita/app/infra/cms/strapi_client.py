# cubita/app/infra/cms/strapi_client.py
"""
Strapi content client implementation.
Talks to the Strapi REST API with httpx and keeps successful responses in a
short-lived cache (soft TTL) so repeated page renders do not hammer the CMS.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from cubita.app.infra.cms.base import (
    AttemptPolicy,
    ContentClient,
    FetchResult,
    SingleAttemptPolicy,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_REVALIDATE_SECONDS = 60


class StrapiContentClient(ContentClient):
    """
    Strapi REST client.

    Every response is read from the `{"data": ...}` envelope. Any non-2xx
    status, transport error, timeout, invalid JSON or missing `data` is turned
    into a failed FetchResult; nothing is raised to the caller.
    """

    def __init__(
        self,
        base_url: str,
        api_token: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        revalidate_seconds: int = DEFAULT_REVALIDATE_SECONDS,
        policy: Optional[AttemptPolicy] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.timeout_seconds = timeout_seconds
        self.revalidate_seconds = revalidate_seconds
        self._policy = policy or SingleAttemptPolicy()
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)
        self._cache: dict[str, tuple[float, Any]] = {}

        logger.info(
            "StrapiContentClient initialized: base_url=%s, authenticated=%s, ttl=%ds",
            self.base_url,
            bool(api_token),
            revalidate_seconds,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    def _cached(self, resource_path: str) -> Optional[FetchResult]:
        if self.revalidate_seconds <= 0:
            return None
        entry = self._cache.get(resource_path)
        if entry is None:
            return None
        stored_at, data = entry
        if time.monotonic() - stored_at > self.revalidate_seconds:
            self._cache.pop(resource_path, None)
            return None
        return FetchResult.success(data)

    async def fetch_content(self, resource_path: str) -> FetchResult:
        cached = self._cached(resource_path)
        if cached is not None:
            return cached

        result = await self._policy.run(self._attempt, resource_path)

        if result.ok:
            if self.revalidate_seconds > 0:
                self._cache[resource_path] = (time.monotonic(), result.data)
        else:
            logger.warning("Strapi fetch error: %s", result.failure)
        return result

    async def _attempt(self, resource_path: str) -> FetchResult:
        url = f"{self.base_url}/api{resource_path}"
        try:
            response = await self._http.get(
                url,
                headers=self._headers(),
                timeout=self.timeout_seconds,
            )
        except httpx.TimeoutException:
            return FetchResult.failed(resource_path, f"timeout after {self.timeout_seconds}s")
        except httpx.HTTPError as exc:
            return FetchResult.failed(resource_path, f"network error: {exc.__class__.__name__}")

        if not response.is_success:
            return FetchResult.failed(
                resource_path,
                f"{response.status_code} {response.reason_phrase}",
            )

        try:
            payload = response.json()
        except ValueError:
            return FetchResult.failed(resource_path, "invalid JSON")

        if not isinstance(payload, dict) or payload.get("data") is None:
            return FetchResult.failed(resource_path, "response without data")

        return FetchResult.success(payload["data"])

    def clear_cache(self) -> None:
        self._cache.clear()

    async def aclose(self) -> None:
        await self._http.aclose()
