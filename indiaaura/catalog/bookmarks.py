"""
Cookie-backed bookmarks.

Bookmarks live entirely in the browser: a single cookie holds a JSON
array of heritage ids. A ``BookmarkStore`` is built per request from the
incoming cookie, mutated in memory, and written back onto the response
with a fresh expiry. There is no locking, so two concurrent writes from
the same browser can lose an update (last write wins).
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from fastapi import Request, Response

from ..config import settings
from .schemas import HeritageItem
from .store import HeritageRepository


logger = logging.getLogger(__name__)


def _parse_ids(raw: Optional[str]) -> List[str]:
    """Decode the cookie payload into an ordered list of unique ids.

    Anything that is not a JSON array counts as no bookmarks.
    """
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        logger.debug("Ignoring malformed bookmarks cookie: %r", raw)
        return []
    if not isinstance(data, list):
        logger.debug("Ignoring non-list bookmarks cookie: %r", raw)
        return []
    ids: List[str] = []
    for entry in data:
        if isinstance(entry, bool) or not isinstance(entry, (str, int)):
            continue
        bid = str(entry)
        if bid not in ids:
            ids.append(bid)
    return ids


class BookmarkStore:
    """The bookmark set of one browser."""

    def __init__(self, raw: Optional[str] = None) -> None:
        self._ids = _parse_ids(raw)

    @classmethod
    def from_request(cls, request: Request) -> "BookmarkStore":
        return cls(request.cookies.get(settings.BOOKMARK_COOKIE_NAME))

    @property
    def ids(self) -> List[str]:
        return list(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def add(self, item_id: str) -> List[str]:
        bid = str(item_id)
        if bid not in self._ids:
            self._ids.append(bid)
        return self.ids

    def remove(self, item_id: str) -> List[str]:
        bid = str(item_id)
        self._ids = [existing for existing in self._ids if existing != bid]
        return self.ids

    def resolve(self, repository: HeritageRepository) -> List[HeritageItem]:
        """Look up each stored id, in stored order, dropping unknown ones."""
        items: List[HeritageItem] = []
        for bid in self._ids:
            item = repository.by_id(bid)
            if item is not None:
                items.append(item)
        return items

    def cookie_value(self) -> str:
        return json.dumps(self._ids, separators=(",", ":"))

    def write_cookie(self, response: Response) -> None:
        """Persist the whole set, resetting the expiry."""
        response.set_cookie(
            key=settings.BOOKMARK_COOKIE_NAME,
            value=self.cookie_value(),
            max_age=settings.BOOKMARK_MAX_AGE,
            path="/",
            domain=settings.BOOKMARK_COOKIE_DOMAIN,
            samesite="lax",
        )


def get_bookmark_store(request: Request) -> BookmarkStore:
    """FastAPI dependency building the store from the request cookie."""
    return BookmarkStore.from_request(request)
