from __future__ import annotations

from fastapi import APIRouter, Depends

from reddit_summarizer.agents.orchestrator import SummarizeOrchestrator
from reddit_summarizer.api.deps import get_orchestrator
from reddit_summarizer.models.schemas import ErrorResponse, SummarizeRequest, SummarizeResponse

router = APIRouter(prefix="/api/summarize", tags=["summarize"])


@router.post(
    "",
    response_model=SummarizeResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def summarize(
    request: SummarizeRequest,
    orchestrator: SummarizeOrchestrator = Depends(get_orchestrator),
):
    """Answer a question from Reddit discussions found via web search."""
    answer = await orchestrator.run(request.question)
    return SummarizeResponse.from_answer(answer)
