from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

import httpx

from reddit_summarizer.errors import (
    AUTH_STATUS_CODES,
    UpstreamAuthError,
    UpstreamTransportError,
)


def is_valid_url(url: str) -> bool:
    """Basic URL validation."""
    try:
        result = urlparse(url)
        return all([result.scheme in ("http", "https"), result.netloc])
    except ValueError:
        return False


def error_message(payload: Any, status_code: int) -> str:
    """Pull a provider error message out of a JSON error body."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str) and error:
            return error
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return f"request failed with status {status_code}"


def check_response(
    response: httpx.Response,
    provider: str,
    *,
    auth_status_codes: frozenset[int] = AUTH_STATUS_CODES,
) -> Any:
    """Return the decoded JSON body or raise the matching upstream error."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if response.status_code in auth_status_codes:
        raise UpstreamAuthError(provider, error_message(payload, response.status_code))
    if response.is_error:
        message = error_message(payload, response.status_code)
        raise UpstreamTransportError(
            provider,
            f"{provider} API failed with status {response.status_code}: {message}",
        )
    if payload is None:
        raise UpstreamTransportError(provider, f"{provider} API returned a non-JSON response")
    return payload


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    provider: str,
    *,
    auth_status_codes: frozenset[int] = AUTH_STATUS_CODES,
    **kwargs: Any,
) -> Any:
    """GET a JSON document, mapping network failures to UpstreamTransportError."""
    try:
        response = await client.get(url, **kwargs)
    except httpx.HTTPError as exc:
        raise UpstreamTransportError(provider, f"{provider} request failed: {exc}") from exc
    return check_response(response, provider, auth_status_codes=auth_status_codes)
