"""LLM client factory for OpenAI-compatible chat completion endpoints (Groq by default)."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

import openai

from reddit_summarizer.config import settings
from reddit_summarizer.errors import UpstreamAuthError, UpstreamTransportError
from reddit_summarizer.services import logger as log_service

PROVIDER = "LLM"


@dataclass
class Usage:
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass
class Completion:
    text: str
    usage: Usage


class ChatCompletionsAdapter:
    """Single-prompt completions with provider errors mapped to our taxonomy."""

    def __init__(self, openai_client: Any):
        self._client = openai_client

    @staticmethod
    def _from_openai_response(response: Any) -> Completion:
        choices = getattr(response, "choices", None) or []
        text = ""
        if choices:
            message = getattr(choices[0], "message", None)
            text = (getattr(message, "content", None) or "").strip()

        usage = getattr(response, "usage", None)
        return Completion(
            text=text,
            usage=Usage(
                input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
                output_tokens=getattr(usage, "completion_tokens", 0) or 0,
            ),
        )

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        max_tokens: int,
        temperature: float,
        caller: str = "llm",
    ) -> Completion:
        t0 = time.monotonic()
        try:
            response = await self._client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            log_service.log_llm_call(
                model=model,
                caller=caller,
                duration_ms=int((time.monotonic() - t0) * 1000),
                status="auth_error",
                error=str(exc),
            )
            raise UpstreamAuthError(PROVIDER, str(exc)) from exc
        except openai.OpenAIError as exc:
            log_service.log_llm_call(
                model=model,
                caller=caller,
                duration_ms=int((time.monotonic() - t0) * 1000),
                status="error",
                error=str(exc),
            )
            raise UpstreamTransportError(PROVIDER, str(exc)) from exc

        completion = self._from_openai_response(response)
        log_service.log_llm_call(
            model=model,
            caller=caller,
            input_tokens=completion.usage.input_tokens,
            output_tokens=completion.usage.output_tokens,
            duration_ms=int((time.monotonic() - t0) * 1000),
        )
        return completion


def get_client() -> ChatCompletionsAdapter:
    """Build the chat client from settings. No retries: failures surface immediately."""
    base_url = settings.llm_base_url.strip() or "https://api.groq.com/openai/v1"
    openai_client = openai.AsyncOpenAI(
        api_key=settings.llm_api_key,
        base_url=base_url,
        timeout=settings.llm_timeout_seconds,
        max_retries=max(int(settings.llm_max_retries), 0),
    )
    return ChatCompletionsAdapter(openai_client)


def get_model() -> str:
    return settings.default_model


def get_summary_model() -> str:
    return settings.summary_model.strip() or get_model()


def get_synthesis_model() -> str:
    return settings.synthesis_model.strip() or get_model()


_client: ChatCompletionsAdapter | None = None


def client() -> ChatCompletionsAdapter:
    """Get or create the LLM client."""
    global _client
    if _client is None:
        _client = get_client()
    return _client
