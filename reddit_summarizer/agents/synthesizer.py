from __future__ import annotations

from reddit_summarizer.config import settings
from reddit_summarizer.errors import UpstreamTransportError
from reddit_summarizer.llm_client import ChatCompletionsAdapter, client as llm_client, get_synthesis_model
from reddit_summarizer.models.thread import ThreadSummary
from reddit_summarizer.services import logger as log_service
from reddit_summarizer.services.prompt_store import get_template, render_prompt

EMPTY_SYNTHESIS_MESSAGE = "Could not synthesize a final answer."
SYNTHESIS_ERROR_MESSAGE = "Error occurred while synthesizing the final answer."


def build_synthesis_prompt(question: str, summaries: list[ThreadSummary]) -> str:
    separator = get_template("synthesizer.summary_separator").template
    combined = separator.join(
        render_prompt(
            "synthesizer.summary_block",
            index=index,
            source_link=s.source_link,
            summary=s.summary,
        )
        for index, s in enumerate(summaries, 1)
    )
    return render_prompt("synthesizer.answer_prompt", question=question, summaries=combined)


class SynthesizerAgent:
    """Merges the relevant per-thread summaries into one markdown answer."""

    name = "synthesizer"

    def __init__(
        self,
        model: str | None = None,
        client: ChatCompletionsAdapter | None = None,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ):
        self.model = model or get_synthesis_model()
        self.client = client
        self.max_tokens = max_tokens if max_tokens is not None else settings.synthesis_max_tokens
        self.temperature = temperature if temperature is not None else settings.synthesis_temperature

    async def synthesize(self, question: str, summaries: list[ThreadSummary]) -> str:
        """Return the answer text, or a fixed failure message on transport errors.

        Authentication failures still propagate.
        """
        active_client = self.client or llm_client()
        try:
            completion = await active_client.complete(
                build_synthesis_prompt(question, summaries),
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                caller=self.name,
            )
        except UpstreamTransportError as e:
            log_service.log_event(
                event_type="synthesis_error",
                message="Error during final summary synthesis",
                error=str(e),
                model=self.model,
            )
            return SYNTHESIS_ERROR_MESSAGE

        return completion.text.strip() or EMPTY_SYNTHESIS_MESSAGE
