from __future__ import annotations

from dataclasses import dataclass, field

REDDIT_BASE_URL = "https://reddit.com"


@dataclass(slots=True)
class ThreadComment:
    body: str
    score: int | float | None = 0


@dataclass(slots=True)
class ThreadContent:
    submission_id: str
    title: str
    body: str | None = None
    permalink: str = ""
    comments: list[ThreadComment] | None = field(default_factory=list)

    @property
    def source_link(self) -> str:
        if self.permalink:
            return f"{REDDIT_BASE_URL}{self.permalink}"
        return f"{REDDIT_BASE_URL}/comments/{self.submission_id}/"


@dataclass(slots=True)
class ThreadSummary:
    summary: str
    source_link: str


@dataclass(slots=True)
class FinalAnswer:
    final_summary: str
    sources: list[str] = field(default_factory=list)
    confidence_score: int = 0
