from __future__ import annotations

from reddit_summarizer.config import settings
from reddit_summarizer.llm_client import ChatCompletionsAdapter, client as llm_client, get_summary_model
from reddit_summarizer.models.thread import ThreadComment, ThreadContent, ThreadSummary
from reddit_summarizer.services.excerpts import format_comments
from reddit_summarizer.services.prompt_store import render_prompt


def build_summary_prompt(question: str, thread: ThreadContent, comments: list[ThreadComment]) -> str:
    return render_prompt(
        "summarizer.thread_prompt",
        question=question,
        title=thread.title,
        body=thread.body or "N/A",
        comments=format_comments(comments),
    )


class SummarizerAgent:
    """Condenses one Reddit thread into a short, question-focused summary.

    The model is told to say so plainly when the thread does not answer the
    question; the relevance filter relies on that wording.
    """

    name = "summarizer"

    def __init__(
        self,
        model: str | None = None,
        client: ChatCompletionsAdapter | None = None,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ):
        self.model = model or get_summary_model()
        self.client = client
        self.max_tokens = max_tokens if max_tokens is not None else settings.summary_max_tokens
        self.temperature = temperature if temperature is not None else settings.summary_temperature

    async def summarize(
        self,
        question: str,
        thread: ThreadContent,
        comments: list[ThreadComment],
    ) -> ThreadSummary | None:
        """Return the summary, or None when the model produced no text.

        Provider failures propagate as UpstreamAuthError / UpstreamTransportError.
        """
        active_client = self.client or llm_client()
        completion = await active_client.complete(
            build_summary_prompt(question, thread, comments),
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            caller=f"{self.name}.{thread.submission_id}",
        )
        text = completion.text.strip()
        if not text:
            return None
        return ThreadSummary(summary=text, source_link=thread.source_link)
