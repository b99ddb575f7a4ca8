"""
Catalog package for the heritage browsing API.

This package contains the schemas, the read-only data store and the
route definitions used to browse India's cultural heritage by state,
region and category, search it, view one entry with details pulled
from Wikipedia, and keep a per-browser list of bookmarks in a cookie.
The data store reads bundled JSON files; should your needs evolve, you
can add another ``HeritageRepository`` implementation backed by a
database and return it from ``store.get_repository``.
"""

from .router import router as catalog_router  # noqa: F401
