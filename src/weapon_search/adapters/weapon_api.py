"""HTTP adapter for the weapon lookup service."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx
from pydantic import ValidationError

from weapon_search.config import Settings
from weapon_search.domain.weapon import SearchResponse
from weapon_search.errors import WeaponLookupError


logger = logging.getLogger(__name__)


class WeaponLookup(Protocol):
    """Anything that can answer a weapon name query."""

    async def search(self, query: str) -> SearchResponse: ...


class WeaponSearchClient:
    """Query ``GET {weapon_api_url}/search?q=<query>``.

    The client owns its ``httpx.AsyncClient`` unless one is passed in. Use it
    as an async context manager or call ``aclose`` when done.
    """

    def __init__(self, settings: Settings | None = None, *, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings or Settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(float(self.settings.http_timeout)),
            headers={"Accept": "application/json"},
            follow_redirects=True,
        )

    async def __aenter__(self) -> WeaponSearchClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def search(self, query: str) -> SearchResponse:
        """Fetch weapons matching ``query`` in relevance order.

        Raises:
            WeaponLookupError: On transport errors, non-2xx responses or a
                payload that does not match the expected shape
        """
        endpoint = self.settings.search_endpoint()
        try:
            resp = await self._client.get(endpoint, params={"q": query})
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Weapon lookup for %r failed: %s", query, exc)
            raise WeaponLookupError(f"Lookup for {query!r} failed: {exc}") from exc

        try:
            response = SearchResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            logger.error("Unexpected search payload for %r: %s", query, exc)
            raise WeaponLookupError(f"Malformed search response for {query!r}") from exc

        logger.debug("Lookup for %r returned %d result(s)", query, len(response.results))
        return response
