"""Tests for the lookup cache."""

from menu_ranker.domain.nutrition import NutritionProfile
from menu_ranker.services.cache import InMemoryCache


def test_cache_roundtrip_is_case_insensitive() -> None:
    cache = InMemoryCache()
    profile = NutritionProfile.from_macros(protein=20, carbs=10, fat=5)

    cache.set("Taco Bell Chalupa", profile, ttl_seconds=60)

    assert cache.get(" taco bell chalupa ") == profile
    assert len(cache) == 1


def test_cache_expires_entries() -> None:
    cache = InMemoryCache()
    cache.set("rice", NutritionProfile.empty(), ttl_seconds=0)

    assert cache.get("rice") is None
    assert len(cache) == 0


def test_cache_set_sweeps_expired_entries() -> None:
    cache = InMemoryCache()
    cache.set("one-off query", NutritionProfile.empty(), ttl_seconds=0)
    cache.set("another one-off", NutritionProfile.empty(), ttl_seconds=0)

    cache.set("steak", NutritionProfile.empty(), ttl_seconds=60)

    assert len(cache) == 1
    assert cache.get("steak") == NutritionProfile.empty()


def test_cache_miss() -> None:
    assert InMemoryCache().get("nothing") is None
