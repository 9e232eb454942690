"""Tests for nutrition domain helpers."""

import pytest

from menu_ranker.domain.nutrition import (
    NutritionProfile,
    calories_from_macros,
    extract_listed_calories,
    round_half_up,
)


def test_calories_from_macros() -> None:
    assert calories_from_macros(protein=25, carbs=45, fat=10) == 370


def test_from_macros_derives_calories() -> None:
    profile = NutritionProfile.from_macros(protein=29, carbs=28, fat=21)

    assert profile.calories == 417


@pytest.mark.parametrize(
    ("description", "expected"),
    [
        ("Crispy shell (800 cal)", 800),
        ("Served hot (450 Calories)", 450),
        ("Family size (800-900 cal)", 850),
        ("Small (301-302 cal)", 302),
        ("No hint here", None),
        ("", None),
    ],
)
def test_extract_listed_calories(description: str, expected: int | None) -> None:
    assert extract_listed_calories(description) == expected


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
