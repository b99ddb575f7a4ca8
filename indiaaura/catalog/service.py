"""
Page-level operations used by the routes: search, listings, detail
lookup with Wikipedia enrichment, and bookmark resolution.
"""

from __future__ import annotations

from typing import Optional

from ..config import settings
from .bookmarks import BookmarkStore
from .enrichment import SummaryLookup, enrich_item
from .schemas import BookmarkList, HeritageDetails, ItemsResponse
from .store import HeritageRepository
from .wikipedia_service import fetch_wikipedia_summary

NOT_FOUND_ERROR = "Item not found"


def get_summary_lookup() -> Optional[SummaryLookup]:
    """FastAPI dependency returning the enrichment lookup, if enabled."""
    if not settings.ENRICHMENT_ENABLED:
        return None
    return fetch_wikipedia_summary


def search_heritage(repository: HeritageRepository, query: Optional[str]) -> ItemsResponse:
    if not query or query.strip() == "":
        return ItemsResponse(items=[])
    return ItemsResponse(items=repository.search(query))


def get_state_heritage(repository: HeritageRepository, state_slug: str) -> ItemsResponse:
    return ItemsResponse(items=repository.by_state(state_slug))


def get_region_heritage(repository: HeritageRepository, region: str) -> ItemsResponse:
    return ItemsResponse(items=repository.by_region(region))


def get_category_heritage(repository: HeritageRepository, category: str) -> ItemsResponse:
    return ItemsResponse(items=repository.by_category(category))


def get_heritage_details(
    repository: HeritageRepository,
    item_id: str,
    lookup: Optional[SummaryLookup] = None,
) -> HeritageDetails:
    """Resolve one item and try to fill its missing detail text."""
    item = repository.by_id(item_id)
    if item is None:
        return HeritageDetails(item=None, error=NOT_FOUND_ERROR)
    return HeritageDetails(item=enrich_item(item, lookup))


def get_bookmarked_items(repository: HeritageRepository, store: BookmarkStore) -> BookmarkList:
    return BookmarkList(bookmarks=store.resolve(repository))
