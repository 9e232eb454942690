"""Simple cache abstractions."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from menu_ranker.domain.nutrition import NutritionProfile


class LookupCache(Protocol):
    """Cache interface for lookup results keyed by query."""

    def get(self, query: str) -> NutritionProfile | None:
        """Return a cached profile if present and not expired."""

    def set(self, query: str, profile: NutritionProfile, ttl_seconds: int) -> None:
        """Store a profile with a TTL in seconds."""


@dataclass
class _CacheEntry:
    profile: NutritionProfile
    expires_at: datetime


@dataclass
class InMemoryCache(LookupCache):
    """Process-local lookup cache, keyed case-insensitively."""

    _entries: dict[str, _CacheEntry]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, query: str) -> NutritionProfile | None:
        """Return a cached profile if it hasn't expired."""
        key = _cache_key(query)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.profile

    def set(self, query: str, profile: NutritionProfile, ttl_seconds: int) -> None:
        """Store a profile with a TTL, dropping entries that have expired."""
        now = datetime.now(tz=UTC)
        self._entries = {
            key: entry for key, entry in self._entries.items() if entry.expires_at > now
        }
        expires_at = now + timedelta(seconds=ttl_seconds)
        self._entries[_cache_key(query)] = _CacheEntry(
            profile=profile, expires_at=expires_at
        )

    def __len__(self) -> int:
        return len(self._entries)


def _cache_key(query: str) -> str:
    return f"nutritionix:{query.strip().lower()}"
