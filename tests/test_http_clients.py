"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from menu_ranker.adapters.nutritionix_client import HttpxNutritionixClient
from menu_ranker.domain.nutrition import NutritionSource
from menu_ranker.services.nutrition import LookupUnavailableError, NutritionResolver


def test_nutritionix_client_posts_query_with_credentials() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"foods": [{"nf_protein": 12.0}]})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxNutritionixClient(
        app_id="app-id",
        app_key="app-key",
        base_url="https://api.test/v2",
        http_client=async_client,
    )

    payload = asyncio.run(client.natural_nutrients("Taco Bell Crunchwrap"))

    assert payload == {"foods": [{"nf_protein": 12.0}]}
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v2/natural/nutrients"
    assert request.headers["x-app-id"] == "app-id"
    assert request.headers["x-app-key"] == "app-key"
    assert json.loads(request.content.decode()) == {"query": "Taco Bell Crunchwrap"}


def test_nutritionix_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "unauthorized"})

    transport = httpx.MockTransport(handler)
    client = HttpxNutritionixClient(
        app_id="app-id",
        app_key="bad-key",
        base_url="https://api.test/v2",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.natural_nutrients("rice"))


def test_resolver_treats_error_status_as_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "couldn't match any foods"})

    transport = httpx.MockTransport(handler)
    client = HttpxNutritionixClient(
        app_id="app-id",
        app_key="app-key",
        base_url="https://api.test/v2",
        http_client=httpx.AsyncClient(transport=transport),
    )
    resolver = NutritionResolver(lookup_client=client)

    with pytest.raises(LookupUnavailableError, match="status=404"):
        asyncio.run(resolver.lookup("xyzzy"))


def test_resolver_treats_invalid_json_as_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    transport = httpx.MockTransport(handler)
    client = HttpxNutritionixClient(
        app_id="app-id",
        app_key="app-key",
        base_url="https://api.test/v2",
        http_client=httpx.AsyncClient(transport=transport),
    )
    resolver = NutritionResolver(lookup_client=client)

    resolved = asyncio.run(resolver.resolve("Chicken Taco", "Taco Bell", ""))

    assert resolved.profile.protein == 8 + 13


def test_resolver_treats_infinite_nutrient_as_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=b'{"foods": [{"nf_protein": 1e999, "nf_calories": 100}]}',
            headers={"content-type": "application/json"},
        )

    transport = httpx.MockTransport(handler)
    client = HttpxNutritionixClient(
        app_id="app-id",
        app_key="app-key",
        base_url="https://api.test/v2",
        http_client=httpx.AsyncClient(transport=transport),
    )
    resolver = NutritionResolver(lookup_client=client)

    resolved = asyncio.run(resolver.resolve("Chicken Taco", "Taco Bell", ""))

    assert resolved.source == NutritionSource.CHAIN_ESTIMATE
    assert resolved.profile.protein == 8 + 13
