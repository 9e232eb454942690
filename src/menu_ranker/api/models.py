"""Pydantic models for scan request and response payloads."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from menu_ranker.domain.menu import MenuItem, ScrapedItem
from menu_ranker.services.ranking import efficiency_label
from menu_ranker.services.scans import ScanBatch


class ScrapedItemPayload(BaseModel):
    """Menu item text extracted by the page scraper."""

    name: str
    description: str = ""
    price: str = ""
    image_url: str = ""


class ScanRequest(BaseModel):
    """A restaurant page's scraped menu."""

    restaurant_name: str = ""
    items: list[ScrapedItemPayload] = Field(default_factory=list)

    def to_scraped_items(self) -> list[ScrapedItem]:
        """Convert payload items to domain items."""
        return [
            ScrapedItem(
                name=item.name.strip(),
                restaurant_name=self.restaurant_name.strip(),
                description=item.description.strip(),
                price=item.price.strip(),
                image_url=item.image_url,
            )
            for item in self.items
        ]


class MenuItemPayload(BaseModel):
    """A ranked menu item ready for display."""

    name: str
    restaurant_name: str
    description: str
    price: str
    image_url: str
    protein: int
    carbs: int
    fat: int
    calories: int
    source: str
    protein_efficiency: float
    efficiency_label: str
    listed_calories: int | None = None

    @classmethod
    def from_item(cls, item: MenuItem) -> "MenuItemPayload":
        """Flatten a domain menu item."""
        return cls(
            name=item.name,
            restaurant_name=item.restaurant_name,
            description=item.description,
            price=item.price,
            image_url=item.image_url,
            protein=item.nutrition.protein,
            carbs=item.nutrition.carbs,
            fat=item.nutrition.fat,
            calories=item.nutrition.calories,
            source=item.source.value,
            protein_efficiency=item.protein_efficiency,
            efficiency_label=efficiency_label(item.protein_efficiency),
            listed_calories=item.listed_calories,
        )


class ScanResponse(BaseModel):
    """A scan batch and its ranked items."""

    scan_id: UUID
    started_at: datetime
    status: str
    processed: int
    failed: int
    items: list[MenuItemPayload]

    @classmethod
    def from_batch(cls, batch: ScanBatch) -> "ScanResponse":
        """Build a response from a batch's current state."""
        return cls(
            scan_id=batch.id,
            started_at=batch.started_at,
            status=batch.status,
            processed=len(batch.completed),
            failed=batch.failed,
            items=[MenuItemPayload.from_item(item) for item in batch.ranked()],
        )
