"""Nutrition domain models."""

import re
from dataclasses import dataclass
from enum import StrEnum

PROTEIN_KCAL_PER_GRAM = 4
CARBS_KCAL_PER_GRAM = 4
FAT_KCAL_PER_GRAM = 9

_LISTED_CALORIES = re.compile(r"\((\d+(?:-\d+)?)\s*cal(?:ories)?\)", re.IGNORECASE)


class NutritionSource(StrEnum):
    """Which step of the fallback chain produced a profile."""

    LOOKUP = "lookup"
    CHAIN_ESTIMATE = "chain_estimate"
    GENERIC_ESTIMATE = "generic_estimate"


def calories_from_macros(protein: int, carbs: int, fat: int) -> int:
    """Return energy in kcal derived from macro grams."""
    return (
        protein * PROTEIN_KCAL_PER_GRAM
        + carbs * CARBS_KCAL_PER_GRAM
        + fat * FAT_KCAL_PER_GRAM
    )


@dataclass(frozen=True)
class NutritionProfile:
    """Macronutrient profile for a menu item."""

    protein: int
    carbs: int
    fat: int
    calories: int

    @classmethod
    def from_macros(cls, protein: int, carbs: int, fat: int) -> "NutritionProfile":
        """Build a profile whose calories follow the 4/4/9 identity."""
        return cls(
            protein=protein,
            carbs=carbs,
            fat=fat,
            calories=calories_from_macros(protein, carbs, fat),
        )

    @classmethod
    def empty(cls) -> "NutritionProfile":
        """Return the all-zero profile."""
        return cls(protein=0, carbs=0, fat=0, calories=0)


@dataclass(frozen=True)
class ResolvedNutrition:
    """A nutrition profile tagged with where it came from."""

    profile: NutritionProfile
    source: NutritionSource


def extract_listed_calories(description: str) -> int | None:
    """Parse a printed calorie hint such as "(800 cal)" or "(800-900 calories)".

    Ranges resolve to their rounded average.
    """
    if not description:
        return None
    match = _LISTED_CALORIES.search(description)
    if match is None:
        return None
    value = match.group(1)
    if "-" in value:
        low, high = (int(part) for part in value.split("-"))
        return round_half_up((low + high) / 2)
    return int(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
