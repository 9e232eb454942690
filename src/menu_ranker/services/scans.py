"""Menu scan batches: resolve, score and rank scraped items."""

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from menu_ranker.domain.menu import MenuItem, ScrapedItem
from menu_ranker.domain.nutrition import extract_listed_calories
from menu_ranker.services.nutrition import NutritionResolver
from menu_ranker.services.ranking import rank_items
from menu_ranker.services.scoring import protein_efficiency

_logger = logging.getLogger(__name__)

_sequence = itertools.count(1)


@dataclass
class ScanBatch:
    """State for a single scrape of a restaurant page."""

    items: list[ScrapedItem]
    id: UUID = field(default_factory=uuid4)
    sequence: int = field(default_factory=lambda: next(_sequence))
    started_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    completed: dict[int, MenuItem] = field(default_factory=dict)
    failed: int = 0
    complete: bool = False

    @property
    def results(self) -> list[MenuItem]:
        """Return processed items in scrape order."""
        return [self.completed[index] for index in sorted(self.completed)]

    @property
    def status(self) -> str:
        """Return "complete" once every item was processed, else "running"."""
        return "complete" if self.complete else "running"

    def ranked(self) -> list[MenuItem]:
        """Return the results processed so far, best first."""
        return rank_items(self.results)


@dataclass
class ScanRegistry:
    """Keeps the newest scan batch; older batches never replace newer ones."""

    latest: ScanBatch | None = None

    def publish(self, batch: ScanBatch) -> bool:
        """Make ``batch`` the latest unless a newer batch already exists."""
        if self.latest is not None and self.latest.sequence > batch.sequence:
            _logger.info(
                "Discarding stale scan %s (latest is %s)", batch.id, self.latest.id
            )
            return False
        self.latest = batch
        return True


@dataclass
class ScanService:
    """Runs scan batches with bounded lookup concurrency."""

    resolver: NutritionResolver
    registry: ScanRegistry = field(default_factory=ScanRegistry)
    concurrency: int = 4

    def start(self, items: list[ScrapedItem]) -> ScanBatch:
        """Create a batch for named items and register it as the latest."""
        named = [item for item in items if item.name.strip()]
        batch = ScanBatch(items=named)
        self.registry.publish(batch)
        return batch

    async def run(self, batch: ScanBatch) -> list[MenuItem]:
        """Process every item in the batch and return them ranked."""
        semaphore = asyncio.Semaphore(max(1, self.concurrency))
        _logger.info("Scanning %s menu items (scan %s)", len(batch.items), batch.id)

        async def process(index: int, item: ScrapedItem) -> None:
            async with semaphore:
                try:
                    batch.completed[index] = await self.score_item(item)
                except Exception:
                    batch.failed += 1
                    _logger.exception("Failed to process menu item %r", item.name)

        await asyncio.gather(
            *(process(index, item) for index, item in enumerate(batch.items))
        )
        batch.complete = True
        _logger.info(
            "Processed %s menu items (%s failed) in scan %s",
            len(batch.results),
            batch.failed,
            batch.id,
        )
        self.registry.publish(batch)
        return batch.ranked()

    async def scan(self, items: list[ScrapedItem]) -> ScanBatch:
        """Start and run a batch in one step."""
        batch = self.start(items)
        await self.run(batch)
        return batch

    async def score_item(self, item: ScrapedItem) -> MenuItem:
        """Resolve nutrition for one item and compute its efficiency score."""
        resolved = await self.resolver.resolve(
            item.name, item.restaurant_name, item.description
        )
        return MenuItem(
            name=item.name,
            restaurant_name=item.restaurant_name,
            description=item.description,
            price=item.price,
            image_url=item.image_url,
            nutrition=resolved.profile,
            source=resolved.source,
            protein_efficiency=protein_efficiency(
                item.restaurant_name, item.description, resolved.profile
            ),
            listed_calories=extract_listed_calories(item.description),
        )
