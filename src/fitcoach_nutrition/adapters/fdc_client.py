"""USDA FoodData Central API client."""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Protocol

import httpx

SEARCH_DATA_TYPES = "Foundation,SR Legacy,Survey (FNDDS),Branded"


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(
        self, query: str, page_size: int = 10, page_number: int = 1
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client with a minimum spacing between requests."""

    api_key: str | None
    base_url: str
    http_client: httpx.AsyncClient
    min_interval_seconds: float = 0.1
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    _last_request_at: float = field(default=0.0, init=False, repr=False)

    @classmethod
    def create(
        cls, api_key: str | None, base_url: str, min_interval_seconds: float = 0.1
    ) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            min_interval_seconds=min_interval_seconds,
        )

    async def search_foods(
        self, query: str, page_size: int = 10, page_number: int = 1
    ) -> dict[str, object]:
        """Search foods by query across the standard data types."""
        return await self._get(
            "/foods/search",
            {
                "query": query,
                "pageSize": page_size,
                "pageNumber": page_number,
                "dataType": SEARCH_DATA_TYPES,
            },
        )

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id."""
        return await self._get(f"/food/{fdc_id}", {})

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(self, path: str, params: dict[str, object]) -> dict[str, object]:
        if not self.api_key:
            raise RuntimeError("USDA API key is required but not configured")
        await self._throttle()
        response = await self.http_client.get(
            f"{self.base_url}{path}",
            params={**params, "api_key": self.api_key},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def _throttle(self) -> None:
        """Wait until the minimum interval since the last request has passed."""
        async with self._lock:
            elapsed = time.monotonic() - self._last_request_at
            if elapsed < self.min_interval_seconds:
                await asyncio.sleep(self.min_interval_seconds - elapsed)
            self._last_request_at = time.monotonic()
