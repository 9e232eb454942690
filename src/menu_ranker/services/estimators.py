"""Keyword heuristics for estimating macros when no lookup data is available."""

from dataclasses import dataclass
from typing import Protocol

from menu_ranker.domain.nutrition import NutritionProfile

CHAIN_IDENTIFIER = "taco bell"


class Estimator(Protocol):
    """Interface for text-based macro estimators."""

    def estimate(self, name: str, description: str) -> NutritionProfile:
        """Estimate a nutrition profile from an item's name and description."""


@dataclass(frozen=True)
class KeywordRule:
    """Grams added to each macro when a keyword appears."""

    keyword: str
    protein: int = 0
    carbs: int = 0
    fat: int = 0


GENERIC_RULES: tuple[KeywordRule, ...] = (
    KeywordRule("chicken", protein=25),
    KeywordRule("beef", protein=22),
    KeywordRule("fish", protein=20),
    KeywordRule("pork", protein=22),
    KeywordRule("tofu", protein=10),
    KeywordRule("egg", protein=12),
    KeywordRule("protein", protein=20),
    KeywordRule("rice", carbs=45),
    KeywordRule("pasta", carbs=50),
    KeywordRule("bread", carbs=15),
    KeywordRule("potato", carbs=30),
    KeywordRule("noodle", carbs=40),
    KeywordRule("pizza", carbs=35),
    KeywordRule("bun", carbs=20),
    KeywordRule("tortilla", carbs=25),
    KeywordRule("wrap", carbs=20),
    KeywordRule("cheese", fat=10),
    KeywordRule("bacon", fat=12),
    KeywordRule("avocado", fat=15),
    KeywordRule("butter", fat=10),
    KeywordRule("oil", fat=14),
    KeywordRule("fried", fat=15),
)

# Combo carbs cover the sides and drink.
CHAIN_RULES: tuple[KeywordRule, ...] = (
    KeywordRule("chalupa", protein=14, carbs=25, fat=16),
    KeywordRule("taco", protein=8, carbs=12, fat=7),
    KeywordRule("supreme", protein=2, carbs=3, fat=2),
    KeywordRule("chicken", protein=13, carbs=0, fat=3),
    KeywordRule("beef", protein=8, carbs=1, fat=6),
    KeywordRule("combo", protein=5, carbs=30, fat=5),
)


@dataclass(frozen=True)
class KeywordEstimator(Estimator):
    """Sums the increments of every rule whose keyword appears in the text.

    A keyword matches when it is a substring of the lower-cased name or of the
    lower-cased description. Matches accumulate without a cap.
    """

    rules: tuple[KeywordRule, ...]

    def estimate(self, name: str, description: str) -> NutritionProfile:
        """Estimate macros and derive calories from them."""
        lower_name = name.lower()
        lower_desc = description.lower()
        protein = carbs = fat = 0
        for rule in self.rules:
            if rule.keyword in lower_name or rule.keyword in lower_desc:
                protein += rule.protein
                carbs += rule.carbs
                fat += rule.fat
        return NutritionProfile.from_macros(protein, carbs, fat)


def generic_estimator() -> KeywordEstimator:
    """Return the estimator used for arbitrary restaurants."""
    return KeywordEstimator(GENERIC_RULES)


def chain_estimator() -> KeywordEstimator:
    """Return the estimator tuned to the chain's menu vocabulary."""
    return KeywordEstimator(CHAIN_RULES)


def is_chain_restaurant(restaurant_name: str) -> bool:
    """Return True when the restaurant is the chain with its own estimator."""
    return CHAIN_IDENTIFIER in restaurant_name.lower()
