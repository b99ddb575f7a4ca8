"""
Pydantic schema definitions for the heritage catalog.

``HeritageItem`` describes one monument, festival or art form as it is
served to the front‑end. Catalog records are loaded once and never
mutated, so the model is frozen; the enrichment step produces a copy
rather than editing a record in place. ``HeritageEnrichment`` is the
partial record returned by the Wikipedia summary lookup, with every
field optional. The remaining models wrap the payloads returned by the
HTTP routes.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing_extensions import Literal


HeritageSource = Literal["wikipedia", "incredibleindia", "ministryofculture", "local"]

SOURCE_LABELS = {
    "wikipedia": "Wikipedia",
    "incredibleindia": "Incredible India",
    "ministryofculture": "Ministry of Culture",
}


def source_label(source: Optional[str]) -> str:
    """Attribution label shown next to the source link."""
    return SOURCE_LABELS.get(source or "", "Local")


class RelatedItem(BaseModel):
    """Lightweight reference to another catalog entry."""

    id: str
    title: str
    image: str = ""
    category: str = ""


class HeritageItem(BaseModel):
    """A single heritage entry.

    ``id``, ``title``, ``description``, ``image``, ``category``,
    ``state``, ``region`` and ``location`` are always present. The rest
    are optional and may be filled later from Wikipedia when ``source``
    is ``"wikipedia"``. ``category`` is an open string in practice
    (Monuments, History, Art & Craft, Music, Dance, Festivals).
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    image: str
    category: str
    state: str
    region: str
    location: str
    source: HeritageSource = "local"
    long_description: Optional[str] = None
    gallery: List[str] = Field(default_factory=list)
    period: Optional[str] = None
    significance: Optional[str] = None
    source_url: Optional[str] = None
    related_items: List[RelatedItem] = Field(default_factory=list)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    visit_count: Optional[int] = Field(default=None, ge=0)
    is_featured: bool = False
    tags: List[str] = Field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @computed_field  # type: ignore[misc]
    @property
    def source_label(self) -> str:
        return source_label(self.source)


class HeritageEnrichment(BaseModel):
    """Partial record returned by the external summary lookup."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    long_description: Optional[str] = None
    image: Optional[str] = None
    significance: Optional[str] = None
    source_url: Optional[str] = None


class WikipediaSearchHit(BaseModel):
    id: str
    title: str
    description: str = ""
    source: HeritageSource = "wikipedia"
    source_url: str = ""


class Region(BaseModel):
    """One of the five fixed regions and the states it owns."""

    id: str
    name: str
    states: List[str] = Field(default_factory=list)
    description: str = ""
    image: str = ""


class PopularState(BaseModel):
    state: str
    slug: str
    count: int
    image: str = ""


class ItemsResponse(BaseModel):
    items: List[HeritageItem] = Field(default_factory=list)


class SearchHitsResponse(BaseModel):
    items: List[WikipediaSearchHit] = Field(default_factory=list)


class HeritageDetails(BaseModel):
    """Result of a detail lookup; ``error`` is set when ``item`` is ``None``."""

    item: Optional[HeritageItem] = None
    error: Optional[str] = None


class BookmarkUpdate(BaseModel):
    success: bool = True
    bookmarks: List[str] = Field(default_factory=list)


class BookmarkList(BaseModel):
    bookmarks: List[HeritageItem] = Field(default_factory=list)
