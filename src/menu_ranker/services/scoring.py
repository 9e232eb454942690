"""Protein efficiency scoring against category baselines."""

import math

from menu_ranker.domain.categories import baseline_for, classify_restaurant
from menu_ranker.domain.nutrition import NutritionProfile


def protein_efficiency(
    restaurant_name: str, description: str, nutrition: NutritionProfile
) -> float:
    """Return the item's protein-per-calorie as a percentage of its baseline's.

    Items without calories score 0.0 so the result is always finite.
    """
    if nutrition.calories <= 0:
        return 0.0
    baseline = baseline_for(classify_restaurant(restaurant_name, description))
    item_ratio = nutrition.protein / nutrition.calories
    score = item_ratio / baseline.protein_ratio * 100
    return score if math.isfinite(score) else 0.0
