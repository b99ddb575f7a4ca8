"""
Read-only data store for the heritage catalog.

The ``HERITAGE_ITEMS`` and ``REGIONS`` lists are populated at import
time from the JSON files in ``indiaaura/data``. Callers never touch
those lists directly: they go through the ``HeritageRepository``
protocol, whose only implementation today is
``InMemoryHeritageRepository``. To serve the catalog from a database
instead, write another class with the same methods and return it from
``get_repository()``.

All lookups are case-insensitive. Absence is signalled by ``None`` or
an empty list, never by an exception.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional

from typing_extensions import Protocol

from ..config import settings
from .schemas import HeritageItem, PopularState, Region


logger = logging.getLogger(__name__)

ITEMS_FILE = "heritage_items.json"
REGIONS_FILE = "regions.json"

# Delay in milliseconds per operation when latency simulation is on
SIMULATED_DELAYS_MS = {
    "search": 300,
    "popular_states": 300,
    "by_id": 500,
    "by_category": 500,
    "featured": 500,
    "by_state": 800,
    "by_region": 800,
}


def _load_json_list(path: Path) -> List[dict]:
    """Read a JSON array from ``path``.

    Returns an empty list when the file is missing or does not hold an
    array, so a broken data directory degrades to an empty catalog.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        logger.error("Could not load %s: %s", path, exc)
        return []
    if not isinstance(raw, list):
        logger.error("Expected a JSON array in %s", path)
        return []
    return [entry for entry in raw if isinstance(entry, dict)]


def load_heritage_items(data_dir: Path) -> List[HeritageItem]:
    items: List[HeritageItem] = []
    seen = set()
    for entry in _load_json_list(data_dir / ITEMS_FILE):
        try:
            item = HeritageItem.model_validate(entry)
        except ValueError as exc:
            logger.warning("Skipping invalid heritage record %r: %s", entry.get("id"), exc)
            continue
        if item.id in seen:
            logger.warning("Skipping duplicate heritage id %r", item.id)
            continue
        seen.add(item.id)
        items.append(item)
    return items


def load_regions(data_dir: Path) -> List[Region]:
    regions: List[Region] = []
    for entry in _load_json_list(data_dir / REGIONS_FILE):
        try:
            regions.append(Region.model_validate(entry))
        except ValueError as exc:
            logger.warning("Skipping invalid region %r: %s", entry.get("id"), exc)
    return regions


# In-memory reference data, loaded once and never mutated
HERITAGE_ITEMS: List[HeritageItem] = load_heritage_items(settings.DATA_DIR)
REGIONS: List[Region] = load_regions(settings.DATA_DIR)


def _norm(s: Optional[str]) -> str:
    """Lowercase and strip a string; ``None`` becomes ``""``."""
    return (s or "").strip().lower()


def slug_to_state_name(slug: str) -> str:
    """Turn a URL slug into a display name: ``tamil-nadu`` -> ``Tamil Nadu``.

    Only the first character of each segment is upper-cased; the rest
    is left as given.
    """
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def state_to_slug(state: str) -> str:
    return "-".join(state.strip().lower().split())


class HeritageRepository(Protocol):
    """Read-only access to heritage items and regions."""

    def by_id(self, item_id: str) -> Optional[HeritageItem]: ...

    def by_state(self, state_slug: str) -> List[HeritageItem]: ...

    def by_region(self, region: str) -> List[HeritageItem]: ...

    def by_category(self, category: str) -> List[HeritageItem]: ...

    def search(self, query: str) -> List[HeritageItem]: ...

    def featured(self, limit: int = 8) -> List[HeritageItem]: ...

    def popular_states(self, limit: int = 6) -> List[PopularState]: ...

    def list_regions(self) -> List[Region]: ...

    def get_region(self, region_id: str) -> Optional[Region]: ...


class InMemoryHeritageRepository:
    """Repository over static lists of items and regions.

    Parameters
    ----------
    items : List[HeritageItem]
        Catalog records in their declared order. That order is what
        ``popular_states`` uses to pick each state's image and to break
        ties.
    regions : List[Region]
        The fixed region list.
    simulate_latency : bool
        Sleep before each query to imitate a remote backend.
    """

    def __init__(
        self,
        items: List[HeritageItem],
        regions: Optional[List[Region]] = None,
        simulate_latency: bool = False,
    ) -> None:
        self._items = tuple(items)
        self._regions = tuple(regions or ())
        self._simulate_latency = simulate_latency

    def _delay(self, operation: str) -> None:
        if self._simulate_latency:
            time.sleep(SIMULATED_DELAYS_MS[operation] / 1000)

    def all(self) -> List[HeritageItem]:
        return list(self._items)

    def by_id(self, item_id: str) -> Optional[HeritageItem]:
        self._delay("by_id")
        return next((item for item in self._items if item.id == item_id), None)

    def by_state(self, state_slug: str) -> List[HeritageItem]:
        self._delay("by_state")
        state_name = _norm(slug_to_state_name(state_slug))
        return [item for item in self._items if _norm(item.state) == state_name]

    def by_region(self, region: str) -> List[HeritageItem]:
        # Containment, not equality: "south" matches "South India"
        self._delay("by_region")
        fragment = (region or "").lower()
        return [item for item in self._items if fragment in item.region.lower()]

    def by_category(self, category: str) -> List[HeritageItem]:
        self._delay("by_category")
        wanted = _norm(category)
        return [item for item in self._items if _norm(item.category) == wanted]

    def search(self, query: str) -> List[HeritageItem]:
        """Case-insensitive substring search.

        Title, description, state, category and tags are matched. A
        blank query returns nothing rather than the whole catalog.
        """
        self._delay("search")
        if not query or not query.strip():
            return []
        needle = query.lower()

        def _matches(item: HeritageItem) -> bool:
            fields = [item.title, item.description, item.state, item.category]
            if any(needle in value.lower() for value in fields):
                return True
            return any(needle in tag.lower() for tag in item.tags)

        return [item for item in self._items if _matches(item)]

    def featured(self, limit: int = 8) -> List[HeritageItem]:
        self._delay("featured")
        items = [item for item in self._items if item.is_featured]
        items.sort(key=lambda item: item.rating or 0.0, reverse=True)
        return items[: max(0, limit)]

    def popular_states(self, limit: int = 6) -> List[PopularState]:
        """States ordered by how many items they hold.

        Each state's image is the image of its first item in catalog
        order. States with equal counts keep first-seen order.
        """
        self._delay("popular_states")
        counts: Dict[str, int] = {}
        images: Dict[str, str] = {}
        for item in self._items:
            counts[item.state] = counts.get(item.state, 0) + 1
            if not images.get(item.state):
                images[item.state] = item.image
        ranked = sorted(counts.items(), key=lambda entry: entry[1], reverse=True)
        return [
            PopularState(state=state, slug=state_to_slug(state), count=count, image=images[state])
            for state, count in ranked[: max(0, limit)]
        ]

    def list_regions(self) -> List[Region]:
        return list(self._regions)

    def get_region(self, region_id: str) -> Optional[Region]:
        return next((region for region in self._regions if region.id == region_id), None)


_repository = InMemoryHeritageRepository(
    HERITAGE_ITEMS, REGIONS, simulate_latency=settings.SIMULATE_LATENCY
)


def get_repository() -> HeritageRepository:
    """FastAPI dependency returning the process-wide repository."""
    return _repository
