"""Domain-authority lookups through a SerpApi-style search endpoint."""

from __future__ import annotations

from typing import Protocol

import httpx

from core.providers.errors import ProviderError


class SearchBackend(Protocol):
    async def total_results(self, domain: str) -> int:
        ...


class SerpApiSearch:
    def __init__(self, client: httpx.AsyncClient, endpoint: str, api_key: str, timeout: float):
        self.client, self.endpoint, self.api_key = client, endpoint, api_key
        self.timeout = timeout

    async def total_results(self, domain: str) -> int:
        """Return the approximate number of indexed pages for ``site:<domain>``.

        A response without ``search_information.total_results`` counts as zero
        results, the same as an unknown site.
        """
        params = {"q": f"site:{domain}", "api_key": self.api_key}
        try:
            response = await self.client.get(self.endpoint, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            raise ProviderError("search", str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            raise ProviderError("search", f"invalid JSON body ({exc})") from exc
        if not isinstance(data, dict):
            raise ProviderError("search", "response body is not an object")
        info = data.get("search_information") or {}
        if not isinstance(info, dict):
            raise ProviderError("search", "search_information is not an object")
        count = info.get("total_results") or 0
        if isinstance(count, bool) or not isinstance(count, (int, float)):
            raise ProviderError("search", f"total_results is not numeric: {count!r}")
        return int(count)
