from __future__ import annotations

from reddit_summarizer.agents.orchestrator import SummarizeOrchestrator


def get_orchestrator() -> SummarizeOrchestrator:
    """A fresh orchestrator per request; only the settings are shared."""
    return SummarizeOrchestrator()
