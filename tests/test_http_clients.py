"""Tests for HTTP-based adapters."""

import asyncio
import time
from collections.abc import Callable

import httpx
import pytest

from fitcoach_nutrition.adapters.fdc_client import SEARCH_DATA_TYPES, HttpxFdcClient


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
    min_interval_seconds: float = 0,
) -> HttpxFdcClient:
    return HttpxFdcClient(
        api_key="key",
        base_url="https://api.test/fdc/v1",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        min_interval_seconds=min_interval_seconds,
    )


def test_fdc_client_search_and_get() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/foods/search"):
            return httpx.Response(200, json={"foods": [], "totalHits": 0})
        return httpx.Response(200, json={"fdcId": 1, "foodNutrients": []})

    client = _client(handler)

    search = asyncio.run(client.search_foods("rice", page_size=5, page_number=2))
    food = asyncio.run(client.get_food(1))

    assert search == {"foods": [], "totalHits": 0}
    assert food["fdcId"] == 1
    search_params = seen[0].url.params
    assert search_params["query"] == "rice"
    assert search_params["pageSize"] == "5"
    assert search_params["pageNumber"] == "2"
    assert search_params["dataType"] == SEARCH_DATA_TYPES
    assert search_params["api_key"] == "key"
    assert seen[1].url.path == "/fdc/v1/food/1"


def test_fdc_client_raises_for_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "rate limited"})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_food(1))


def test_fdc_client_requires_api_key() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    client = _client(handler)
    client.api_key = None

    with pytest.raises(RuntimeError, match="API key"):
        asyncio.run(client.search_foods("apple"))
    assert calls == []


def test_fdc_client_spaces_out_requests() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"fdcId": 1})

    client = _client(handler, min_interval_seconds=0.05)

    async def fetch_twice() -> None:
        await client.get_food(1)
        await client.get_food(1)

    started = time.monotonic()
    asyncio.run(fetch_twice())

    assert time.monotonic() - started >= 0.04
