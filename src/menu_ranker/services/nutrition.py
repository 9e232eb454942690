"""Nutrition resolver: external lookup with heuristic fallbacks."""

import logging
import math
from dataclasses import dataclass, field

import httpx

from menu_ranker.adapters.nutritionix_client import NutritionixClient
from menu_ranker.domain.nutrition import (
    NutritionProfile,
    NutritionSource,
    ResolvedNutrition,
    round_half_up,
)
from menu_ranker.services.cache import InMemoryCache, LookupCache
from menu_ranker.services.estimators import (
    Estimator,
    chain_estimator,
    generic_estimator,
    is_chain_restaurant,
)

DEFAULT_PLACEHOLDER_NAMES = frozenset({"DoorDash Restaurant"})

_NUTRIENT_FIELDS = {
    "protein": "nf_protein",
    "carbs": "nf_total_carbohydrate",
    "fat": "nf_total_fat",
    "calories": "nf_calories",
}

_logger = logging.getLogger(__name__)


class LookupUnavailableError(Exception):
    """Raised when the external lookup yields no usable nutrition data."""


def build_lookup_query(
    item_name: str,
    restaurant_name: str,
    placeholder_names: frozenset[str] = DEFAULT_PLACEHOLDER_NAMES,
) -> str:
    """Prefix the item with its restaurant unless the restaurant is unknown."""
    restaurant = restaurant_name.strip()
    if restaurant and restaurant not in placeholder_names:
        return f"{restaurant} {item_name}"
    return item_name


@dataclass
class NutritionResolver:
    """Resolves nutrition for menu items via lookup, chain and generic estimates.

    ``resolve`` never raises: any lookup failure falls through to the
    heuristic estimators. Lookups are attempted once, without retry.
    """

    lookup_client: NutritionixClient | None = None
    cache: LookupCache = field(default_factory=InMemoryCache)
    chain: Estimator = field(default_factory=chain_estimator)
    generic: Estimator = field(default_factory=generic_estimator)
    placeholder_names: frozenset[str] = DEFAULT_PLACEHOLDER_NAMES
    cache_ttl_seconds: int = 3600
    debug: bool = False

    async def resolve(
        self, item_name: str, restaurant_name: str, description: str
    ) -> ResolvedNutrition:
        """Return a nutrition profile for one item, tagged with its source."""
        query = build_lookup_query(item_name, restaurant_name, self.placeholder_names)
        try:
            profile = await self.lookup(query)
        except LookupUnavailableError as exc:
            if self.debug:
                _logger.warning("Nutrition lookup failed, falling back: %s", exc)
        else:
            return ResolvedNutrition(profile=profile, source=NutritionSource.LOOKUP)

        if is_chain_restaurant(restaurant_name):
            return ResolvedNutrition(
                profile=self.chain.estimate(item_name, description),
                source=NutritionSource.CHAIN_ESTIMATE,
            )
        return ResolvedNutrition(
            profile=self.generic.estimate(item_name, description),
            source=NutritionSource.GENERIC_ESTIMATE,
        )

    async def lookup(self, query: str) -> NutritionProfile:
        """Fetch a profile from the external service, raising on any failure."""
        if self.lookup_client is None:
            raise LookupUnavailableError("lookup disabled")
        cached = self.cache.get(query)
        if cached is not None:
            return cached

        try:
            payload = await self.lookup_client.natural_nutrients(query)
        except (httpx.HTTPError, ValueError) as exc:
            raise LookupUnavailableError(
                f"query={query!r} status={_status_code_from_exception(exc)}: {exc}"
            ) from exc

        profile = _profile_from_payload(payload, query)
        self.cache.set(query, profile, ttl_seconds=self.cache_ttl_seconds)
        if self.debug:
            _logger.info("Nutrition lookup: query=%s profile=%s", query, profile)
        return profile


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _profile_from_payload(payload: object, query: str) -> NutritionProfile:
    """Read rounded macros from the first matched food."""
    foods = payload.get("foods") if isinstance(payload, dict) else None
    if not isinstance(foods, list) or not foods:
        raise LookupUnavailableError(f"no nutrition data found for {query!r}")
    food = foods[0]
    if not isinstance(food, dict):
        raise LookupUnavailableError(f"malformed food entry for {query!r}")

    values: dict[str, int] = {}
    for name, field_name in _NUTRIENT_FIELDS.items():
        amount = food.get(field_name)
        if amount is None:
            values[name] = 0
            continue
        try:
            grams = float(amount)
        except (TypeError, ValueError) as exc:
            raise LookupUnavailableError(
                f"invalid {field_name} for {query!r}: {amount!r}"
            ) from exc
        if not math.isfinite(grams):
            raise LookupUnavailableError(
                f"non-finite {field_name} for {query!r}: {amount!r}"
            )
        values[name] = max(0, round_half_up(grams))

    return NutritionProfile(
        protein=values["protein"],
        carbs=values["carbs"],
        fat=values["fat"],
        calories=values["calories"],
    )
