"""Query-framing analysis: does the user's phrasing presuppose a conclusion?"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from core.analyzers.outcome import NEUTRAL_SCORE, AnalyzerOutcome, Degraded, DegradedReason, Success
from core.analyzers.prompts import build_bias_prompt
from core.providers.classifier import TextClassifier
from core.providers.errors import ProviderError

logger = logging.getLogger(__name__)

BIASED_SCORE = 50
SKIPPED_DETAILS = "Analysis skipped: API Key not configured."
FAILED_DETAILS = "Analysis could not be performed."


def parse_classification(completion: str) -> Tuple[str, bool]:
    """Return ``(label, is_biased)`` for a raw completion.

    Any completion containing "biased" counts as biased, so "unbiased" does too.
    """
    label = (completion or "").strip().lower()
    return label, "biased" in label


async def analyze_query_framing(query: str, classifier: Optional[TextClassifier]) -> AnalyzerOutcome:
    logger.info("Analyzing query framing")
    if classifier is None:
        return Degraded(DegradedReason.UNCONFIGURED, SKIPPED_DETAILS, {"isBiased": False})
    try:
        completion = await classifier.classify(build_bias_prompt(query))
    except ProviderError as exc:
        logger.warning("Query framing analysis failed: %s", exc)
        return Degraded(DegradedReason.PROVIDER_FAILURE, FAILED_DETAILS, {"isBiased": False})

    label, is_biased = parse_classification(completion)
    return Success(
        score=BIASED_SCORE if is_biased else NEUTRAL_SCORE,
        details=f"Query was classified as: {label}",
        extras={"isBiased": is_biased},
    )
