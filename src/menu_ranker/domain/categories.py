"""Cuisine categories, keyword rules and reference baselines."""

from dataclasses import dataclass
from enum import StrEnum


class Category(StrEnum):
    """Restaurant cuisine category."""

    FAST_FOOD = "Fast Food"
    MEXICAN = "Mexican"
    ITALIAN = "Italian"
    ASIAN = "Asian"
    AMERICAN = "American"
    DEFAULT = "Default"


@dataclass(frozen=True)
class CategoryRule:
    """Keywords that place a restaurant in a category."""

    category: Category
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class ReferenceBaseline:
    """National-average macros for a typical item in a category."""

    protein: int
    calories: int
    carbs: int
    fat: int

    @property
    def protein_ratio(self) -> float:
        """Protein grams per kcal."""
        return self.protein / self.calories


# Order matters: the first matching rule wins.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        Category.FAST_FOOD,
        ("mcdonalds", "burger king", "wendys", "taco bell", "subway", "chick-fil-a"),
    ),
    CategoryRule(
        Category.MEXICAN, ("mexican", "taco", "burrito", "chipotle", "qdoba")
    ),
    CategoryRule(Category.ITALIAN, ("pizza", "pasta", "italian", "olive garden")),
    CategoryRule(
        Category.ASIAN,
        ("chinese", "japanese", "thai", "vietnamese", "sushi", "asian"),
    ),
    CategoryRule(Category.AMERICAN, ("american", "diner", "grill", "steakhouse")),
)

BASELINES: dict[Category, ReferenceBaseline] = {
    Category.FAST_FOOD: ReferenceBaseline(protein=25, calories=450, carbs=45, fat=20),
    Category.MEXICAN: ReferenceBaseline(protein=28, calories=550, carbs=60, fat=25),
    Category.ITALIAN: ReferenceBaseline(protein=22, calories=600, carbs=70, fat=30),
    Category.ASIAN: ReferenceBaseline(protein=26, calories=500, carbs=55, fat=22),
    Category.AMERICAN: ReferenceBaseline(protein=30, calories=650, carbs=50, fat=35),
    Category.DEFAULT: ReferenceBaseline(protein=25, calories=500, carbs=50, fat=25),
}


def classify_restaurant(restaurant_name: str, description: str) -> Category:
    """Return the first category whose keywords appear in the text."""
    search_text = f"{restaurant_name} {description}".lower()
    for rule in CATEGORY_RULES:
        if any(keyword in search_text for keyword in rule.keywords):
            return rule.category
    return Category.DEFAULT


def baseline_for(category: Category) -> ReferenceBaseline:
    """Return the reference baseline for a category."""
    return BASELINES.get(category, BASELINES[Category.DEFAULT])
