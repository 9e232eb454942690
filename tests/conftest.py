"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from menu_ranker.adapters.nutritionix_client import NutritionixClient
from menu_ranker.config import Settings
from menu_ranker.containers import AppContainer
from menu_ranker.services.cache import InMemoryCache
from menu_ranker.services.nutrition import NutritionResolver
from menu_ranker.services.scans import ScanRegistry, ScanService


@dataclass
class FakeNutritionixClient(NutritionixClient):
    """Fake Nutritionix client returning canned foods per query."""

    foods: dict[str, dict[str, object]] = field(default_factory=dict)
    error: Exception | None = None
    queries: list[str] = field(default_factory=list)

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        food = self.foods.get(query)
        return {"foods": [food] if food else []}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        nutritionix_app_id="app-id",
        nutritionix_app_key="app-key",
        lookup_concurrency=2,
    )


@pytest.fixture
def lookup_client() -> FakeNutritionixClient:
    return FakeNutritionixClient()


@pytest.fixture
def failing_lookup_client() -> FakeNutritionixClient:
    request = httpx.Request("POST", "https://api.test/natural/nutrients")
    return FakeNutritionixClient(
        error=httpx.HTTPStatusError(
            "server error",
            request=request,
            response=httpx.Response(500, request=request),
        )
    )


@pytest.fixture
def container(
    settings: Settings, lookup_client: FakeNutritionixClient
) -> AppContainer:
    resolver = NutritionResolver(lookup_client=lookup_client, cache=InMemoryCache())
    registry = ScanRegistry()
    scan_service = ScanService(
        resolver=resolver,
        registry=registry,
        concurrency=settings.lookup_concurrency,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_resolver=resolver,
        scan_registry=registry,
        scan_service=scan_service,
        close_resources=close_resources,
    )
