from __future__ import annotations

import pytest

from reddit_summarizer.agents.summarizer import SummarizerAgent, build_summary_prompt
from reddit_summarizer.agents.synthesizer import (
    EMPTY_SYNTHESIS_MESSAGE,
    SYNTHESIS_ERROR_MESSAGE,
    SynthesizerAgent,
    build_synthesis_prompt,
)
from reddit_summarizer.errors import UpstreamAuthError, UpstreamTransportError
from reddit_summarizer.models.thread import ThreadComment, ThreadSummary
from tests.fakes import FakeLLM, make_thread


class TestSummarizer:
    def test_prompt_contains_question_thread_and_numbered_comments(self):
        thread = make_thread("abc123", title="Which VPN for travel?")
        comments = [ThreadComment(body="Mullvad", score=9), ThreadComment(body="Proton", score=4)]

        prompt = build_summary_prompt("best vpn for travel", thread, comments)

        assert '"best vpn for travel"' in prompt
        assert "Post Title: Which VPN for travel?" in prompt
        assert "Post Body: N/A" in prompt
        assert "1. Mullvad\n2. Proton" in prompt
        assert "irrelevant to the question" in prompt
        assert prompt.rstrip().endswith("Summary:")

    @pytest.mark.asyncio
    async def test_summarize_returns_summary_linked_to_thread(self):
        llm = FakeLLM(summaries={"abc123": "  Mullvad is the favourite.  "})
        agent = SummarizerAgent(model="m", client=llm, max_tokens=200, temperature=0.4)
        thread = make_thread("abc123")

        summary = await agent.summarize("best vpn", thread, thread.comments)

        assert summary == ThreadSummary(
            summary="Mullvad is the favourite.",
            source_link="https://reddit.com/r/test/comments/abc123/slug/",
        )
        assert llm.calls[0]["max_tokens"] == 200
        assert llm.calls[0]["temperature"] == 0.4

    @pytest.mark.asyncio
    async def test_empty_response_produces_no_summary(self):
        agent = SummarizerAgent(model="m", client=FakeLLM(summaries={"abc123": "   "}))
        thread = make_thread("abc123")
        assert await agent.summarize("q", thread, thread.comments) is None

    @pytest.mark.asyncio
    async def test_provider_errors_propagate(self):
        llm = FakeLLM(summaries={"abc123": UpstreamTransportError("LLM", "timeout")})
        agent = SummarizerAgent(model="m", client=llm)
        thread = make_thread("abc123")
        with pytest.raises(UpstreamTransportError):
            await agent.summarize("q", thread, thread.comments)


class TestSynthesizer:
    SUMMARIES = [
        ThreadSummary(summary="Use Mullvad.", source_link="https://reddit.com/r/vpn/comments/aaa111/x/"),
        ThreadSummary(summary="Proton has a free tier.", source_link="https://reddit.com/r/vpn/comments/bbb222/y/"),
    ]

    def test_prompt_labels_each_summary_with_index_and_link(self):
        prompt = build_synthesis_prompt("best vpn", self.SUMMARIES)

        assert "Relevant Summary From Source 1 (https://reddit.com/r/vpn/comments/aaa111/x/):\nUse Mullvad." in prompt
        assert "Relevant Summary From Source 2 (https://reddit.com/r/vpn/comments/bbb222/y/)" in prompt
        assert "\n\n---\n\n" in prompt
        assert 'The user asked: "best vpn"' in prompt
        assert "Final Answer (in Markdown):" in prompt

    @pytest.mark.asyncio
    async def test_synthesize_returns_trimmed_answer(self):
        llm = FakeLLM(synthesis="\n## VPNs\n\n* Mullvad\n")
        agent = SynthesizerAgent(model="m", client=llm, max_tokens=600, temperature=0.6)

        answer = await agent.synthesize("best vpn", self.SUMMARIES)

        assert answer == "## VPNs\n\n* Mullvad"
        assert llm.calls[0]["caller"] == "synthesizer"
        assert llm.calls[0]["max_tokens"] == 600

    @pytest.mark.asyncio
    async def test_empty_answer_uses_fixed_message(self):
        agent = SynthesizerAgent(model="m", client=FakeLLM(synthesis=""))
        assert await agent.synthesize("q", self.SUMMARIES) == EMPTY_SYNTHESIS_MESSAGE

    @pytest.mark.asyncio
    async def test_transport_error_degrades_to_error_message(self):
        agent = SynthesizerAgent(model="m", client=FakeLLM(synthesis=UpstreamTransportError("LLM", "503")))
        assert await agent.synthesize("q", self.SUMMARIES) == SYNTHESIS_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_auth_error_propagates(self):
        agent = SynthesizerAgent(model="m", client=FakeLLM(synthesis=UpstreamAuthError("LLM")))
        with pytest.raises(UpstreamAuthError):
            await agent.synthesize("q", self.SUMMARIES)
