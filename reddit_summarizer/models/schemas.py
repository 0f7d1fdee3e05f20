from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic.alias_generators import to_camel

from reddit_summarizer.models.thread import FinalAnswer


# --- Requests ---


class SummarizeRequest(BaseModel):
    question: StrictStr


# --- Responses ---


class SummarizeResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    final_summary: str
    sources: list[str]
    confidence_score: int

    @classmethod
    def from_answer(cls, answer: FinalAnswer) -> "SummarizeResponse":
        return cls(
            final_summary=answer.final_summary,
            sources=list(answer.sources),
            confidence_score=answer.confidence_score,
        )


class ErrorResponse(BaseModel):
    error: str
