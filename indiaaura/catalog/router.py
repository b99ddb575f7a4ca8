"""
Route definitions for the heritage API.

Endpoints under /api:
- GET    /heritage/search                : free-text search of the catalog
- GET    /heritage/featured              : featured items by rating
- GET    /heritage/popular-states        : states with the most items
- GET    /heritage/state/{state_slug}    : items of one state
- GET    /heritage/region/{region}       : items whose region contains the text
- GET    /heritage/category/{category}   : items of one category
- GET    /heritage/items/{item_id}       : one item, enriched from Wikipedia
- GET    /heritage/external-search       : Wikipedia search
- GET    /regions                        : the five regions
- GET    /regions/{region_id}            : one region
- GET    /bookmarks                      : bookmarked items (cookie)
- POST   /bookmarks/{item_id}            : add a bookmark
- DELETE /bookmarks/{item_id}            : remove a bookmark
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from .bookmarks import BookmarkStore, get_bookmark_store
from .enrichment import SummaryLookup
from .schemas import (
    BookmarkList,
    BookmarkUpdate,
    HeritageDetails,
    HeritageItem,
    ItemsResponse,
    PopularState,
    Region,
    SearchHitsResponse,
)
from .service import (
    get_bookmarked_items,
    get_category_heritage,
    get_heritage_details,
    get_region_heritage,
    get_state_heritage,
    get_summary_lookup,
    search_heritage,
)
from .store import HeritageRepository, get_repository
from .wikipedia_service import search_wikipedia

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["heritage"])


@router.get("/heritage/search", response_model=ItemsResponse)
def search_items(
    q: Optional[str] = Query(default=None, description="Text to look for"),
    repository: HeritageRepository = Depends(get_repository),
) -> ItemsResponse:
    return search_heritage(repository, q)


@router.get("/heritage/featured", response_model=List[HeritageItem])
def featured_items(
    limit: int = Query(default=8, ge=1, le=100),
    repository: HeritageRepository = Depends(get_repository),
) -> List[HeritageItem]:
    return repository.featured(limit)


@router.get("/heritage/popular-states", response_model=List[PopularState])
def popular_states(
    limit: int = Query(default=6, ge=1, le=50),
    repository: HeritageRepository = Depends(get_repository),
) -> List[PopularState]:
    return repository.popular_states(limit)


@router.get("/heritage/state/{state_slug}", response_model=ItemsResponse)
def state_items(
    state_slug: str, repository: HeritageRepository = Depends(get_repository)
) -> ItemsResponse:
    return get_state_heritage(repository, state_slug)


@router.get("/heritage/region/{region}", response_model=ItemsResponse)
def region_items(
    region: str, repository: HeritageRepository = Depends(get_repository)
) -> ItemsResponse:
    return get_region_heritage(repository, region)


@router.get("/heritage/category/{category}", response_model=ItemsResponse)
def category_items(
    category: str, repository: HeritageRepository = Depends(get_repository)
) -> ItemsResponse:
    return get_category_heritage(repository, category)


@router.get("/heritage/items/{item_id}", response_model=HeritageDetails)
def item_details(
    item_id: str,
    repository: HeritageRepository = Depends(get_repository),
    lookup: Optional[SummaryLookup] = Depends(get_summary_lookup),
) -> HeritageDetails:
    details = get_heritage_details(repository, item_id, lookup)
    if details.item is None:
        raise HTTPException(status_code=404, detail=details.error)
    return details


@router.get("/heritage/external-search", response_model=SearchHitsResponse)
def external_search(
    q: Optional[str] = Query(default=None, description="Text to look for on Wikipedia"),
    limit: int = Query(default=10, ge=1, le=50),
) -> SearchHitsResponse:
    return SearchHitsResponse(items=search_wikipedia(q or "", limit=limit))


@router.get("/regions", response_model=List[Region])
def list_regions(repository: HeritageRepository = Depends(get_repository)) -> List[Region]:
    return repository.list_regions()


@router.get("/regions/{region_id}", response_model=Region)
def get_region(
    region_id: str, repository: HeritageRepository = Depends(get_repository)
) -> Region:
    region = repository.get_region(region_id)
    if region is None:
        raise HTTPException(status_code=404, detail="Region not found")
    return region


# ---------------------------------------------------------------------------
# Bookmark endpoints
#
# The bookmark set is carried by the browser in a cookie; every
# mutation returns the updated id list and rewrites the cookie with a
# fresh expiry, whether or not the set changed.

@router.get("/bookmarks", response_model=BookmarkList)
def list_bookmarks(
    bookmarks: BookmarkStore = Depends(get_bookmark_store),
    repository: HeritageRepository = Depends(get_repository),
) -> BookmarkList:
    return get_bookmarked_items(repository, bookmarks)


@router.post("/bookmarks/{item_id}", response_model=BookmarkUpdate)
def add_bookmark(
    item_id: str,
    response: Response,
    bookmarks: BookmarkStore = Depends(get_bookmark_store),
) -> BookmarkUpdate:
    ids = bookmarks.add(item_id)
    bookmarks.write_cookie(response)
    logger.debug("Bookmarked %s (%d total)", item_id, len(ids))
    return BookmarkUpdate(success=True, bookmarks=ids)


@router.delete("/bookmarks/{item_id}", response_model=BookmarkUpdate)
def remove_bookmark(
    item_id: str,
    response: Response,
    bookmarks: BookmarkStore = Depends(get_bookmark_store),
) -> BookmarkUpdate:
    ids = bookmarks.remove(item_id)
    bookmarks.write_cookie(response)
    return BookmarkUpdate(success=True, bookmarks=ids)
