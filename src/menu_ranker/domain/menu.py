"""Menu item domain models."""

from dataclasses import dataclass

from menu_ranker.domain.nutrition import NutritionProfile, NutritionSource


@dataclass(frozen=True)
class ScrapedItem:
    """Raw text fields extracted from a restaurant page."""

    name: str
    restaurant_name: str = ""
    description: str = ""
    price: str = ""
    image_url: str = ""


@dataclass(frozen=True)
class MenuItem:
    """A scraped item enriched with nutrition and a protein efficiency score."""

    name: str
    restaurant_name: str
    description: str
    price: str
    image_url: str
    nutrition: NutritionProfile
    source: NutritionSource
    protein_efficiency: float
    listed_calories: int | None = None
