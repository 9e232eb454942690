"""Ranking of scored menu items for presentation."""

from collections.abc import Iterable

from menu_ranker.domain.menu import MenuItem
from menu_ranker.domain.nutrition import round_half_up


def rank_items(items: Iterable[MenuItem]) -> list[MenuItem]:
    """Return items by descending protein efficiency, ties in input order."""
    return sorted(items, key=lambda item: item.protein_efficiency, reverse=True)


def efficiency_label(score: float) -> str:
    """Format a score the way the popup shows it."""
    return f"{round_half_up(score)}% better than average"
