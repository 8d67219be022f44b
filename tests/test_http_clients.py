"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from usda_nutrition.adapters.fdc_client import HttpxFdcClient


def test_fdc_client_search_and_get() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/foods/search"):
            return httpx.Response(200, json={"foods": [{"fdcId": 1}]})
        return httpx.Response(200, json={"fdcId": 1, "foodNutrients": []})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxFdcClient(
        api_key="key",
        base_url="https://api.test",
        http_client=async_client,
    )

    search = asyncio.run(client.search_foods("rice"))
    food = asyncio.run(client.get_food(1))

    assert search == {"foods": [{"fdcId": 1}]}
    assert food["fdcId"] == 1
    assert seen[0].url.params["query"] == "rice"
    assert seen[0].url.params["pageSize"] == "1"
    assert seen[0].url.params["api_key"] == "key"
    assert seen[1].url.path == "/food/1"


def test_fdc_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": "API_KEY_INVALID"})

    client = HttpxFdcClient(
        api_key="bad",
        base_url="https://api.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        asyncio.run(client.search_foods("rice"))
    assert excinfo.value.response.status_code == 403
