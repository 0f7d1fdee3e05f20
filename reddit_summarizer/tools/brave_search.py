from __future__ import annotations

from typing import Any

import httpx

from reddit_summarizer.config import settings
from reddit_summarizer.errors import UpstreamTransportError
from reddit_summarizer.tools.tavily_search import SearchResult
from reddit_summarizer.tools.web_utils import get_json

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"
PROVIDER = "Brave"


async def search(query: str, *, max_results: int = 10) -> list[SearchResult]:
    """Execute a Brave web search and normalize results."""
    params: dict[str, Any] = {
        "q": query,
        "count": max_results,
    }

    async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
        payload = await get_json(
            client,
            BRAVE_SEARCH_URL,
            PROVIDER,
            params=params,
            headers={
                "Accept": "application/json",
                "X-Subscription-Token": settings.brave_api_key,
            },
        )

    if not isinstance(payload, dict):
        raise UpstreamTransportError(PROVIDER, "Brave returned a malformed response")

    raw_results = (payload.get("web") or {}).get("results", []) or []
    total = max(len(raw_results), 1)
    mapped: list[SearchResult] = []
    for idx, item in enumerate(raw_results):
        snippets = item.get("extra_snippets", []) or []
        description = item.get("description", "") or ""
        mapped.append(
            SearchResult(
                title=item.get("title", ""),
                url=item.get("url", ""),
                content=description.strip() or " ".join(snippets).strip(),
                score=max(0.0, 1.0 - (idx / total)),
            )
        )
    return mapped
