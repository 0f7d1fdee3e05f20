from __future__ import annotations

import pytest

from reddit_summarizer.config import DEFAULT_IRRELEVANT_MARKERS
from reddit_summarizer.models.thread import ThreadSummary
from reddit_summarizer.services.relevance import filter_relevant, is_summary_relevant


@pytest.mark.parametrize("marker", DEFAULT_IRRELEVANT_MARKERS)
def test_each_marker_excludes_summary(marker):
    assert not is_summary_relevant(f"Overall, this thread {marker.upper()} here.")


def test_is_not_about_excluded_regardless_of_surrounding_text():
    text = "Great tips on tents. Note the thread Is Not About hiking boots, but it helps."
    assert is_summary_relevant(text) is False


def test_summary_without_markers_is_kept():
    assert is_summary_relevant("Users recommend Obsidian for offline notes and Notion for teams.")


def test_custom_markers_replace_defaults():
    assert is_summary_relevant("This thread is not about that.", markers=["off topic"])
    assert not is_summary_relevant("Mostly off topic chatter.", markers=["off topic"])


def test_filter_relevant_preserves_order():
    summaries = [
        ThreadSummary(summary="Use a VPN.", source_link="https://reddit.com/a"),
        ThreadSummary(summary="This thread has nothing to do with VPNs.", source_link="https://reddit.com/b"),
        ThreadSummary(summary="WireGuard is fast.", source_link="https://reddit.com/c"),
    ]
    kept = filter_relevant(summaries)
    assert [s.source_link for s in kept] == ["https://reddit.com/a", "https://reddit.com/c"]
