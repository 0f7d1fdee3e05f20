from __future__ import annotations

from collections.abc import Iterable, Sequence

from reddit_summarizer.config import DEFAULT_IRRELEVANT_MARKERS
from reddit_summarizer.models.thread import ThreadSummary


def is_summary_relevant(summary: str, markers: Iterable[str] = DEFAULT_IRRELEVANT_MARKERS) -> bool:
    """A summary is relevant unless it contains one of the irrelevance markers."""
    lowered = summary.lower()
    return not any(marker.lower() in lowered for marker in markers if marker)


def filter_relevant(
    summaries: Sequence[ThreadSummary],
    markers: Iterable[str] = DEFAULT_IRRELEVANT_MARKERS,
) -> list[ThreadSummary]:
    marker_list = list(markers)
    return [s for s in summaries if is_summary_relevant(s.summary, marker_list)]
