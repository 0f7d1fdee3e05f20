"""Reddit Summarizer - answer a question from Reddit discussions.

Simple CLI for running one question through the pipeline.
"""

import argparse
import asyncio
import sys

from reddit_summarizer.agents.orchestrator import SummarizeOrchestrator
from reddit_summarizer.errors import SummarizerError


async def run_summarize(question: str) -> int:
    """Run the pipeline for one question and print the answer."""
    print(f"Question: {question}")
    print("-" * 50)

    orchestrator = SummarizeOrchestrator()
    try:
        answer = await orchestrator.run(question)
    except SummarizerError as e:
        print(f"\n[!] Error: {e.message}", file=sys.stderr)
        return 1

    print(answer.final_summary)
    if answer.sources:
        print(f"\n{'=' * 50}")
        print("Sources:")
        for i, source in enumerate(answer.sources, 1):
            print(f"  [{i}] {source}")
    print(f"\nConfidence: {answer.confidence_score}%")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Reddit Summarizer")
    parser.add_argument("--question", "-q", required=True, help="Question to answer")

    args = parser.parse_args()

    raise SystemExit(asyncio.run(run_summarize(args.question)))


if __name__ == "__main__":
    main()
