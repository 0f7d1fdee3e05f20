"""Answer questions from Reddit discussions.

Pipeline: web search for Reddit threads, fetch top comments, summarize each
thread, drop irrelevant summaries, synthesize one answer with a confidence
score and source list.
"""
