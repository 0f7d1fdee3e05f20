"""Reddit API client for fetching a submission with its top-level comments.

Authenticates as a Reddit "script" app with the password grant. A client is
meant to live for one summarize request: the access token is fetched lazily
on first use and dropped with the client.
"""
from __future__ import annotations

import asyncio
from typing import Any

import httpx

from reddit_summarizer.config import Settings, settings as default_settings
from reddit_summarizer.errors import UpstreamAuthError, UpstreamTransportError
from reddit_summarizer.models.thread import ThreadComment, ThreadContent
from reddit_summarizer.tools.web_utils import check_response, get_json

PROVIDER = "Reddit"

# 403 from Reddit means a private or quarantined subreddit, not bad credentials.
REDDIT_AUTH_STATUS_CODES = frozenset({401})


def _comment_from_child(child: Any) -> ThreadComment | None:
    # "more" placeholders are pagination stubs, not comments.
    if not isinstance(child, dict) or child.get("kind") != "t1":
        return None
    data = child.get("data")
    if not isinstance(data, dict):
        return None
    score = data.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        score = None
    return ThreadComment(body=str(data.get("body") or ""), score=score)


def parse_thread(submission_id: str, payload: Any) -> ThreadContent:
    """Normalize the `/comments/<id>` listing pair into ThreadContent.

    Any deviation from the listing shape is an UpstreamTransportError so the
    caller can skip this submission.
    """
    if not isinstance(payload, list) or not payload:
        raise UpstreamTransportError(PROVIDER, f"Unexpected response shape for submission {submission_id}")

    try:
        post = payload[0]["data"]["children"][0]["data"]
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise UpstreamTransportError(
            PROVIDER, f"Submission {submission_id} missing from response"
        ) from exc
    if not isinstance(post, dict):
        raise UpstreamTransportError(PROVIDER, f"Submission {submission_id} has no post data")

    comments: list[ThreadComment] | None = None
    if len(payload) > 1:
        listing = payload[1].get("data") if isinstance(payload[1], dict) else None
        if listing is not None and not isinstance(listing, dict):
            raise UpstreamTransportError(PROVIDER, f"Comment listing for {submission_id} is malformed")
        children = listing.get("children") if listing else None
        if isinstance(children, list):
            comments = [c for c in map(_comment_from_child, children) if c is not None]

    return ThreadContent(
        submission_id=submission_id,
        title=str(post.get("title") or ""),
        body=post.get("selftext") or None,
        permalink=str(post.get("permalink") or ""),
        comments=comments,
    )


class RedditClient:
    def __init__(self, config: Settings | None = None, http_client: httpx.AsyncClient | None = None):
        self.config = config or default_settings
        self._http = http_client or httpx.AsyncClient(
            timeout=self.config.reddit_timeout_seconds,
            headers={"User-Agent": self.config.reddit_agent},
        )
        self._token: str | None = None
        self._token_lock = asyncio.Lock()

    async def __aenter__(self) -> "RedditClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _access_token(self) -> str:
        async with self._token_lock:
            if self._token:
                return self._token

            try:
                response = await self._http.post(
                    self.config.reddit_auth_url,
                    auth=(self.config.reddit_client_id, self.config.reddit_client_secret),
                    data={
                        "grant_type": "password",
                        "username": self.config.reddit_username,
                        "password": self.config.reddit_password,
                    },
                )
            except httpx.HTTPError as exc:
                raise UpstreamTransportError(PROVIDER, f"Reddit token request failed: {exc}") from exc

            payload = check_response(response, PROVIDER, auth_status_codes=REDDIT_AUTH_STATUS_CODES)
            # Reddit answers 200 with {"error": "invalid_grant"} for a bad password.
            token = payload.get("access_token") if isinstance(payload, dict) else None
            if not token:
                detail = payload.get("error") if isinstance(payload, dict) else None
                raise UpstreamAuthError(PROVIDER, str(detail or "no access token returned"))
            self._token = token
            return token

    async def fetch_thread(self, submission_id: str) -> ThreadContent:
        """Fetch title, body, permalink and top-level comments for one submission."""
        token = await self._access_token()
        payload = await get_json(
            self._http,
            f"{self.config.reddit_api_base.rstrip('/')}/comments/{submission_id}",
            PROVIDER,
            auth_status_codes=REDDIT_AUTH_STATUS_CODES,
            params={"raw_json": 1},
            headers={"Authorization": f"bearer {token}"},
        )
        return parse_thread(submission_id, payload)
