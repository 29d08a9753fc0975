"""Prompt templates for the query-framing classifier."""

from __future__ import annotations

BIAS_LABELS = ("Neutral", "Biased")

BIAS_PROMPT_TEMPLATE = (
    "Analyze the following user query for bias. Is it a neutral, informational query "
    "(e.g., 'what are the features of X'), or does it contain leading or commercially "
    "biased language (e.g., 'why is X superior to Y')? "
    "Respond with a single word: '{neutral}' or '{biased}'. Query: \"{query}\""
)


def build_bias_prompt(query: str) -> str:
    neutral, biased = BIAS_LABELS
    return BIAS_PROMPT_TEMPLATE.format(neutral=neutral, biased=biased, query=query)
