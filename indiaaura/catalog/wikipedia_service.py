"""
Wikipedia integration for the heritage catalogue.  It exposes two
functions:

* ``fetch_wikipedia_summary()``: look up the REST summary of a page by
  title and map it into a ``HeritageEnrichment``.

* ``search_wikipedia()``: full-text search of Wikipedia restricted to
  heritage-flavoured results, mapped into ``WikipediaSearchHit``.

Both are best effort.  Any network error, non-200 response or
unexpected payload is logged and reported as ``None`` (or an empty
list) so that the calling page can render with local data only.
Nothing is cached and nothing is retried: every detail view asks
Wikipedia again.  Only the Python standard library is used for HTTP
requests.
"""

from __future__ import annotations

import json
import logging
import re
import urllib.parse
import urllib.request
from typing import List, Optional

from ..config import settings
from .schemas import HeritageEnrichment, WikipediaSearchHit


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

_HIGHLIGHT_RE = re.compile(r"</?span[^>]*>")


def _http_get_json(url: str) -> Optional[dict]:
    """Perform an HTTP GET and return parsed JSON or ``None`` on failure.

    Wikipedia asks API clients to identify themselves, so the configured
    User-Agent is always sent.  Network errors are logged and ``None``
    is returned.
    """
    try:
        request = urllib.request.Request(
            url,
            headers={
                'User-Agent': settings.USER_AGENT,
                'Accept': 'application/json',
            },
        )
        with urllib.request.urlopen(request, timeout=settings.HTTP_TIMEOUT) as response:
            if response.status != 200:
                logger.warning(
                    "Wikipedia request to %s returned status %s", url, response.status
                )
                return None
            data = response.read().decode('utf-8', errors='ignore')
            return json.loads(data)
    except Exception as exc:
        logger.error("Error fetching %s: %s", url, exc)
        return None


def _clean(value: object) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _summary_to_enrichment(data: dict) -> HeritageEnrichment:
    """Map a REST summary payload into the fields the catalog knows about.

    The plain ``extract`` doubles as the significance text, since the
    summary endpoint has no dedicated field for it.
    """
    extract = _clean(data.get('extract'))
    thumbnail = data.get('thumbnail')
    image = _clean(thumbnail.get('source')) if isinstance(thumbnail, dict) else None
    source_url = None
    content_urls = data.get('content_urls')
    if isinstance(content_urls, dict):
        desktop = content_urls.get('desktop')
        if isinstance(desktop, dict):
            source_url = _clean(desktop.get('page'))
    return HeritageEnrichment(
        title=_clean(data.get('title')),
        description=extract,
        long_description=_clean(data.get('extract_html')),
        image=image,
        significance=extract,
        source_url=source_url,
    )


def fetch_wikipedia_summary(title: str) -> Optional[HeritageEnrichment]:
    """Return the Wikipedia summary for ``title`` or ``None`` on failure."""
    if not title or not title.strip():
        return None
    url = f"{settings.WIKIPEDIA_SUMMARY_URL}{urllib.parse.quote(title.strip(), safe='')}"
    data = _http_get_json(url)
    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning("Unexpected Wikipedia summary payload for %r", title)
        return None
    return _summary_to_enrichment(data)


def search_wikipedia(query: str, limit: int = 10) -> List[WikipediaSearchHit]:
    """Search Wikipedia for heritage pages matching ``query``.

    The query is suffixed with ``india heritage`` to keep results on
    topic.  Search snippets come back with ``<span>`` highlight markup,
    which is stripped.
    """
    if not query or not query.strip():
        return []
    params = {
        'action': 'query',
        'list': 'search',
        'srsearch': f"{query.strip()} india heritage",
        'format': 'json',
        'srlimit': max(1, int(limit)),
        'origin': '*',
    }
    url = f"{settings.WIKIPEDIA_SEARCH_URL}?{urllib.parse.urlencode(params)}"
    data = _http_get_json(url)
    if not isinstance(data, dict):
        return []
    results = (data.get('query') or {}).get('search') or []
    hits: List[WikipediaSearchHit] = []
    for result in results:
        if not isinstance(result, dict):
            continue
        page_id = result.get('pageid')
        title = result.get('title')
        if page_id is None or not isinstance(title, str):
            continue
        snippet = result.get('snippet') or ''
        hits.append(
            WikipediaSearchHit(
                id=str(page_id),
                title=title,
                description=_HIGHLIGHT_RE.sub('', snippet),
                source_url=f"https://en.wikipedia.org/wiki/{urllib.parse.quote(title)}",
            )
        )
    return hits
