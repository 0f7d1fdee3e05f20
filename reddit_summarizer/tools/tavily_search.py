from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tavily import AsyncTavilyClient
from tavily.errors import InvalidAPIKeyError, MissingAPIKeyError

from reddit_summarizer.config import settings
from reddit_summarizer.errors import UpstreamAuthError, UpstreamTransportError

PROVIDER = "Tavily"


# Shared result shape for every search provider. Discovery only reads `url`;
# `content` and `score` keep provider output comparable across fallbacks.
@dataclass
class SearchResult:
    title: str
    url: str
    content: str
    score: float


async def search(
    query: str,
    *,
    max_results: int = 10,
    include_domains: list[str] | None = None,
) -> list[SearchResult]:
    """Execute a Tavily web search and return structured results."""
    kwargs: dict[str, Any] = {
        "query": query,
        "search_depth": "basic",
        "max_results": max_results,
        "timeout": int(settings.search_timeout_seconds),
    }
    if include_domains:
        kwargs["include_domains"] = include_domains

    try:
        client = AsyncTavilyClient(api_key=settings.tavily_api_key)
        response = await client.search(**kwargs)
    except (InvalidAPIKeyError, MissingAPIKeyError) as exc:
        raise UpstreamAuthError(PROVIDER, str(exc)) from exc
    except Exception as exc:
        raise UpstreamTransportError(PROVIDER, f"Tavily search failed: {exc}") from exc

    if not isinstance(response, dict) or not isinstance(response.get("results", []), list):
        raise UpstreamTransportError(PROVIDER, "Tavily returned a malformed response")

    return [
        SearchResult(
            title=r.get("title", ""),
            url=r.get("url", ""),
            content=r.get("content", ""),
            score=r.get("score", 0.0),
        )
        for r in response.get("results", [])
        if isinstance(r, dict)
    ]
