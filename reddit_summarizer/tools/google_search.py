from __future__ import annotations

import httpx

from reddit_summarizer.config import settings
from reddit_summarizer.errors import UpstreamTransportError
from reddit_summarizer.tools.tavily_search import SearchResult
from reddit_summarizer.tools.web_utils import get_json

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
PROVIDER = "Google"

# The Custom Search API caps `num` at 10 per page.
MAX_RESULTS_PER_REQUEST = 10


async def search(query: str, *, max_results: int = 10) -> list[SearchResult]:
    """Run a Google Custom Search query and normalize the items."""
    params = {
        "key": settings.google_api_key,
        "cx": settings.google_cse_id,
        "q": query,
        "num": max(1, min(max_results, MAX_RESULTS_PER_REQUEST)),
    }

    async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
        payload = await get_json(client, GOOGLE_SEARCH_URL, PROVIDER, params=params)

    if not isinstance(payload, dict):
        raise UpstreamTransportError(PROVIDER, "Google Search API returned a malformed response")

    # No "items" key means the search ran but matched nothing.
    items = payload.get("items") or []
    if not isinstance(items, list):
        raise UpstreamTransportError(PROVIDER, "Google Search API returned malformed items")

    total = max(len(items), 1)
    results: list[SearchResult] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            continue
        results.append(
            SearchResult(
                title=item.get("title", "") or "",
                url=item.get("link", "") or "",
                content=item.get("snippet", "") or "",
                # Google ranks but does not score; keep rank order as a score.
                score=max(0.0, 1.0 - (idx / total)),
            )
        )
    return results
