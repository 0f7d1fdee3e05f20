from __future__ import annotations

from reddit_summarizer.models.thread import ThreadComment


def comment_score(comment: ThreadComment) -> float:
    return comment.score or 0


def select_top_comments(comments: list[ThreadComment], limit: int = 3) -> list[ThreadComment]:
    """Highest-scored comments first, ties in input order, at most `limit`."""
    if limit <= 0:
        return []
    # sorted() is stable, so equal scores keep their original order.
    return sorted(comments, key=comment_score, reverse=True)[:limit]


def format_comments(comments: list[ThreadComment]) -> str:
    return "\n".join(f"{index}. {comment.body}" for index, comment in enumerate(comments, 1))
