from __future__ import annotations

from dataclasses import dataclass

from reddit_summarizer.config import settings
from reddit_summarizer.errors import UpstreamTransportError
from reddit_summarizer.tools import brave_search, google_search, tavily_search
from reddit_summarizer.tools.tavily_search import SearchResult

REDDIT_DOMAIN = "reddit.com"


@dataclass
class SearchResponse:
    results: list[SearchResult]
    provider: str
    fallback_from: str | None = None
    fallback_reason: str | None = None


async def _search_tavily(query: str, max_results: int) -> list[SearchResult]:
    return await tavily_search.search(
        query=query,
        max_results=max_results,
        include_domains=[REDDIT_DOMAIN],
    )


async def search(query: str, *, max_results: int = 10) -> SearchResponse:
    """Search with the configured provider.

    Authentication failures always propagate. Transport failures fall back to
    Tavily only when ``search_fallback_to_tavily`` is enabled.
    """
    provider = settings.search_provider.lower().strip()
    use_fallback = settings.search_fallback_to_tavily

    if provider == "tavily":
        results = await _search_tavily(query, max_results)
        return SearchResponse(results=results, provider="tavily")

    if provider == "google":
        primary = google_search.search
    elif provider == "brave":
        primary = brave_search.search
    else:
        raise ValueError(f"Unsupported SEARCH_PROVIDER: {settings.search_provider}")

    try:
        results = await primary(query, max_results=max_results)
    except UpstreamTransportError as e:
        if not use_fallback:
            raise
        fallback_results = await _search_tavily(query, max_results)
        return SearchResponse(
            results=fallback_results,
            provider="tavily",
            fallback_from=provider,
            fallback_reason=str(e),
        )
    return SearchResponse(results=results, provider=provider)
