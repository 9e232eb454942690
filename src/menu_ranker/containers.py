"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from menu_ranker.adapters.nutritionix_client import HttpxNutritionixClient
from menu_ranker.config import Settings, parse_placeholder_names
from menu_ranker.services.cache import InMemoryCache
from menu_ranker.services.nutrition import NutritionResolver
from menu_ranker.services.scans import ScanRegistry, ScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_resolver: NutritionResolver
    scan_registry: ScanRegistry
    scan_service: ScanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    lookup_client = None
    if resolved_settings.lookup_enabled:
        lookup_client = HttpxNutritionixClient.create(
            app_id=resolved_settings.nutritionix_app_id or "",
            app_key=resolved_settings.nutritionix_app_key or "",
            base_url=resolved_settings.nutritionix_base_url,
            timeout_seconds=resolved_settings.lookup_timeout_seconds,
        )
    nutrition_resolver = NutritionResolver(
        lookup_client=lookup_client,
        cache=InMemoryCache(),
        placeholder_names=parse_placeholder_names(
            resolved_settings.placeholder_restaurant_names
        ),
        cache_ttl_seconds=resolved_settings.lookup_cache_ttl_seconds,
        debug=resolved_settings.nutrition_debug,
    )
    scan_registry = ScanRegistry()
    scan_service = ScanService(
        resolver=nutrition_resolver,
        registry=scan_registry,
        concurrency=resolved_settings.lookup_concurrency,
    )

    async def close_resources() -> None:
        if lookup_client is not None:
            await lookup_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_resolver=nutrition_resolver,
        scan_registry=scan_registry,
        scan_service=scan_service,
        close_resources=close_resources,
    )
