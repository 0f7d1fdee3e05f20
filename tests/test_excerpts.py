from __future__ import annotations

from reddit_summarizer.models.thread import ThreadComment
from reddit_summarizer.services.excerpts import format_comments, select_top_comments


def test_select_top_comments_orders_by_score_descending():
    comments = [
        ThreadComment(body="low", score=1),
        ThreadComment(body="high", score=40),
        ThreadComment(body="mid", score=7),
        ThreadComment(body="lowest", score=-3),
    ]
    top = select_top_comments(comments, 3)
    assert [c.body for c in top] == ["high", "mid", "low"]


def test_missing_scores_count_as_zero_and_ties_keep_input_order():
    comments = [
        ThreadComment(body="first", score=None),
        ThreadComment(body="negative", score=-1),
        ThreadComment(body="second", score=0),
        ThreadComment(body="third", score=None),
    ]
    top = select_top_comments(comments, 3)
    assert [c.body for c in top] == ["first", "second", "third"]


def test_select_top_comments_returns_all_when_fewer_than_limit():
    comments = [ThreadComment(body="only", score=2)]
    assert select_top_comments(comments, 3) == comments


def test_select_top_comments_empty_input():
    assert select_top_comments([], 3) == []


def test_format_comments_is_one_indexed():
    comments = [ThreadComment(body="alpha", score=2), ThreadComment(body="beta", score=1)]
    assert format_comments(comments) == "1. alpha\n2. beta"
