"""Error taxonomy for the summarize pipeline.

Each error carries the HTTP status the API layer answers with and a message
that is safe to show to the caller.
"""
from __future__ import annotations


class SummarizerError(Exception):
    status_code: int = 500
    default_message: str = "Failed to process request."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(SummarizerError):
    status_code = 400
    default_message = "Invalid question provided"


class ConfigurationError(SummarizerError):
    status_code = 500
    default_message = "Server configuration error."

    def __init__(self, missing: list[str] | None = None):
        self.missing = list(missing or [])
        super().__init__()


class UpstreamAuthError(SummarizerError):
    """A provider rejected our credentials. Always fatal for the request."""

    status_code = 401

    def __init__(self, provider: str, detail: str | None = None):
        self.provider = provider
        self.detail = detail
        super().__init__(f"{provider} authentication failed.")


class UpstreamTransportError(SummarizerError):
    """Network, quota or malformed-response failure from a provider."""

    status_code = 500

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(message)


AUTH_STATUS_CODES = frozenset({401, 403})
