from __future__ import annotations

import re

from reddit_summarizer.services import logger as log_service
from reddit_summarizer.tools import search_provider, web_utils

FORUM_HINT = "reddit"
REDDIT_DOMAIN = search_provider.REDDIT_DOMAIN

SUBMISSION_ID_RE = re.compile(
    r"reddit\.com/r/[^/]+/comments/([a-z0-9]{6,10})(/|$)",
    re.IGNORECASE,
)


def build_search_query(question: str) -> str:
    return f"{question} {FORUM_HINT}"


def extract_submission_id(url: str) -> str | None:
    """Return the submission id of a `/r/<sub>/comments/<id>/...` link, else None."""
    match = SUBMISSION_ID_RE.search(url)
    return match.group(1) if match else None


def collect_submission_ids(links: list[str], *, max_threads: int) -> list[str]:
    """Extract unique submission ids from links, in link order, up to max_threads."""
    found: dict[str, None] = {}
    limit = max(max_threads, 1)
    for link in links:
        if isinstance(link, str) and REDDIT_DOMAIN in link and web_utils.is_valid_url(link):
            submission_id = extract_submission_id(link)
            if submission_id:
                found.setdefault(submission_id, None)
                log_service.logger.info(f"Found Reddit link: {link} (ID: {submission_id})")
            else:
                log_service.logger.info(f"Reddit link without a submission id: {link}")
        if len(found) >= limit:
            break
    return list(found)


async def discover_thread_ids(
    question: str,
    *,
    max_results: int,
    max_threads: int,
) -> list[str]:
    """Search for Reddit threads about the question.

    Search failures propagate; an empty list means nothing matched.
    """
    query = build_search_query(question)
    log_service.logger.info(f'Searching for: "{query}"')
    response = await search_provider.search(query, max_results=max_results)
    if response.fallback_from:
        log_service.log_event(
            event_type="search_fallback",
            message=f"Search fell back from {response.fallback_from} to {response.provider}",
            reason=response.fallback_reason,
        )
    ids = collect_submission_ids([r.url for r in response.results], max_threads=max_threads)
    log_service.logger.info(f"Found {len(ids)} unique Reddit submission IDs via {response.provider}.")
    return ids
