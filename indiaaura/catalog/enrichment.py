"""
Fill-only merge of external data into catalog records.

A local value always wins unless it is empty (``None`` or
whitespace-only), in which case the external value is used. Identity,
title and provenance fields are never part of the merge.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .schemas import HeritageEnrichment, HeritageItem


logger = logging.getLogger(__name__)

ENRICHABLE_FIELDS = (
    "description",
    "long_description",
    "image",
    "significance",
    "source_url",
)

SummaryLookup = Callable[[str], Optional[HeritageEnrichment]]


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def needs_enrichment(item: HeritageItem) -> bool:
    """Only Wikipedia-sourced items missing detail text are looked up."""
    if item.source != "wikipedia":
        return False
    return _is_empty(item.long_description) or _is_empty(item.significance)


def merge_enrichment(item: HeritageItem, enrichment: HeritageEnrichment) -> HeritageItem:
    """Return ``item`` with its empty fields filled from ``enrichment``.

    Neither argument is modified. When nothing needs filling the
    original object is returned.
    """
    updates = {}
    for field in ENRICHABLE_FIELDS:
        local = getattr(item, field)
        remote = getattr(enrichment, field)
        if _is_empty(local) and not _is_empty(remote):
            updates[field] = remote
    if not updates:
        return item
    return item.model_copy(update=updates)


def enrich_item(item: HeritageItem, lookup: Optional[SummaryLookup]) -> HeritageItem:
    """Best-effort enrichment of ``item`` through ``lookup``.

    Any failure of the lookup leaves the record as it was.
    """
    if lookup is None or not needs_enrichment(item):
        return item
    try:
        enrichment = lookup(item.title)
    except Exception as exc:
        logger.warning("Enrichment lookup for %r failed: %s", item.title, exc)
        return item
    if enrichment is None:
        logger.info("No enrichment available for %r", item.title)
        return item
    return merge_enrichment(item, enrichment)
