from __future__ import annotations

import asyncio
import time
from typing import Any, Callable
from uuid import uuid4

from reddit_summarizer.agents.summarizer import SummarizerAgent
from reddit_summarizer.agents.synthesizer import SynthesizerAgent
from reddit_summarizer.config import Settings, settings
from reddit_summarizer.errors import (
    ConfigurationError,
    InvalidInputError,
    UpstreamAuthError,
    UpstreamTransportError,
)
from reddit_summarizer.models.thread import FinalAnswer, ThreadSummary
from reddit_summarizer.services import logger as log_service
from reddit_summarizer.services.confidence import calculate_confidence
from reddit_summarizer.services.discovery import discover_thread_ids
from reddit_summarizer.services.excerpts import select_top_comments
from reddit_summarizer.services.relevance import is_summary_relevant
from reddit_summarizer.tools.reddit_client import RedditClient

NOT_FOUND_MESSAGE = "Could not find relevant Reddit discussions via Google for this question."
UNANSWERABLE_MESSAGE = "Found some Reddit discussions via Google, but couldn't extract direct answers."


class SummarizeOrchestrator:
    """Answers a question from Reddit discussions.

    Flow:
      1. Discover candidate submission ids via web search
      2. For each id (bounded concurrency): fetch thread, pick top comments, summarize
      3. Drop summaries that say the thread is irrelevant
      4. Synthesize the rest into one markdown answer
      5. Score confidence from the number of relevant sources

    Any per-thread failure other than authentication skips that thread.
    Authentication failures abort the whole request.
    """

    def __init__(
        self,
        config: Settings | None = None,
        *,
        reddit_client_factory: Callable[[], Any] | None = None,
        summarizer: SummarizerAgent | None = None,
        synthesizer: SynthesizerAgent | None = None,
    ):
        self.config = config or settings
        self.max_results = max(int(self.config.search_max_results), 1)
        self.max_threads = max(int(self.config.max_threads), 1)
        self.max_comments = max(int(self.config.max_comments_per_thread), 1)
        self.max_parallel = max(int(self.config.thread_max_parallel), 1)
        self.markers = list(self.config.irrelevant_summary_markers)
        self.reddit_client_factory = reddit_client_factory or (lambda: RedditClient(self.config))
        self.summarizer = summarizer or SummarizerAgent()
        self.synthesizer = synthesizer or SynthesizerAgent()

    def _check_config(self) -> None:
        missing = self.config.missing_credentials()
        if missing:
            log_service.logger.error(
                f"Missing required configuration: {', '.join(missing)}"
            )
            raise ConfigurationError(missing)

    async def _process_thread(
        self,
        request_id: str,
        question: str,
        submission_id: str,
        reddit: Any,
        semaphore: asyncio.Semaphore,
    ) -> ThreadSummary | None:
        async with semaphore:
            try:
                thread = await reddit.fetch_thread(submission_id)
            except UpstreamAuthError:
                raise
            except Exception as e:
                log_service.log_pipeline_step(
                    request_id, "extract", "skipped",
                    {"submission_id": submission_id, "error": str(e), "error_type": type(e).__name__},
                )
                return None

            if not isinstance(thread.comments, list) or not thread.comments:
                log_service.log_pipeline_step(
                    request_id, "extract", "skipped",
                    {"submission_id": submission_id, "reason": "no comments"},
                )
                return None

            top_comments = select_top_comments(thread.comments, self.max_comments)
            if not top_comments:
                log_service.log_pipeline_step(
                    request_id, "select", "skipped",
                    {"submission_id": submission_id, "reason": "no top comments"},
                )
                return None

            try:
                summary = await self.summarizer.summarize(question, thread, top_comments)
            except UpstreamAuthError:
                raise
            except Exception as e:
                log_service.log_pipeline_step(
                    request_id, "summarize", "skipped",
                    {"submission_id": submission_id, "error": str(e), "error_type": type(e).__name__},
                )
                return None

            if summary is None:
                log_service.log_pipeline_step(
                    request_id, "summarize", "skipped",
                    {"submission_id": submission_id, "reason": "empty summary"},
                )
                return None

            log_service.log_pipeline_step(
                request_id, "summarize", "completed",
                {"submission_id": submission_id, "source_link": summary.source_link},
            )
            return summary

    async def _summarize_threads(
        self,
        request_id: str,
        question: str,
        submission_ids: list[str],
    ) -> list[ThreadSummary]:
        """Summaries in discovery order, whatever order the tasks finish in."""
        semaphore = asyncio.Semaphore(self.max_parallel)
        async with self.reddit_client_factory() as reddit:
            tasks = [
                asyncio.create_task(
                    self._process_thread(request_id, question, submission_id, reddit, semaphore)
                )
                for submission_id in submission_ids
            ]
            try:
                results = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
        return [summary for summary in results if summary is not None]

    def _filter_relevant(self, request_id: str, summaries: list[ThreadSummary]) -> list[ThreadSummary]:
        relevant: list[ThreadSummary] = []
        for summary in summaries:
            keep = is_summary_relevant(summary.summary, self.markers)
            log_service.logger.info(
                f"Filtering summary from {summary.source_link}: Relevant = {keep}"
            )
            if keep:
                relevant.append(summary)
        log_service.log_pipeline_step(
            request_id, "filter", "completed",
            {"summaries": len(summaries), "relevant": len(relevant)},
        )
        return relevant

    async def run(self, question: Any) -> FinalAnswer:
        """Execute the full pipeline for one question."""
        if not isinstance(question, str) or not question.strip():
            raise InvalidInputError()
        self._check_config()

        request_id = uuid4().hex[:12]
        started_at = time.monotonic()
        log_service.log_event(
            event_type="summarize_started",
            message="Received question",
            request_id=request_id,
            question=question[:100],
        )

        try:
            submission_ids = await discover_thread_ids(
                question,
                max_results=self.max_results,
                max_threads=self.max_threads,
            )
        except (UpstreamAuthError, UpstreamTransportError) as e:
            log_service.log_pipeline_step(request_id, "discover", "failed", {"error": str(e)})
            raise
        log_service.log_pipeline_step(
            request_id, "discover", "completed", {"submission_ids": submission_ids}
        )

        if not submission_ids:
            return FinalAnswer(final_summary=NOT_FOUND_MESSAGE, sources=[], confidence_score=0)

        try:
            summaries = await self._summarize_threads(request_id, question, submission_ids)
        except UpstreamAuthError as e:
            log_service.log_pipeline_step(
                request_id, "summarize", "failed", {"error": str(e), "provider": e.provider}
            )
            raise

        relevant = self._filter_relevant(request_id, summaries)
        if not relevant:
            return FinalAnswer(
                final_summary=UNANSWERABLE_MESSAGE,
                sources=[],
                confidence_score=self.config.confidence_no_relevant,
            )

        sources = [s.source_link for s in relevant]
        log_service.logger.info(f"Sources for final summary: {', '.join(sources)}")
        final_summary = await self.synthesizer.synthesize(question, relevant)

        confidence = calculate_confidence(
            len(sources),
            base=self.config.confidence_base,
            increment=self.config.confidence_increment,
            ceiling=self.config.confidence_ceiling,
        )
        log_service.log_pipeline_step(
            request_id, "synthesize", "completed",
            {
                "sources": len(sources),
                "confidence": confidence,
                "runtime_ms": int((time.monotonic() - started_at) * 1000),
            },
        )
        return FinalAnswer(final_summary=final_summary, sources=sources, confidence_score=confidence)
