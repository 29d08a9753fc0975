"""Fixed-weight fusion of analyzer scores into one overall trust score."""

from __future__ import annotations

import math
from typing import Dict, Mapping, Tuple

from app.schemas.common import RiskTier

TRUST_WEIGHTS: Dict[str, float] = {
    "queryFraming": 0.10,
    "networkAnalysis": 0.50,
    "simplifiedEEAT": 0.40,
}

HIGH_RISK_BELOW = 60
LOW_RISK_FROM = 85

MEDIUM_RISK_SUMMARY = "Medium risk detected. Please review sources with caution."
LOW_RISK_SUMMARY = "Low risk detected. The sources appear generally trustworthy."
HIGH_RISK_PREFIX = "High risk of manipulation detected. "


def round_half_up(value: float) -> int:
    """Round .5 upwards, unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def clamp_score(score: float) -> int:
    return max(0, min(100, int(score)))


def weighted_trust_score(metrics: Mapping[str, Mapping], weights: Mapping[str, float] = TRUST_WEIGHTS) -> int:
    """Blend the three analyzer scores into an integer in [0, 100]."""
    total = (
        metrics["queryFraming"]["score"] * weights["queryFraming"]
        + metrics["networkAnalysis"]["score"] * weights["networkAnalysis"]
        + metrics["simplifiedEEAT"]["score"] * weights["simplifiedEEAT"]
    )
    return clamp_score(round_half_up(total))


def risk_tier(overall_score: int) -> RiskTier:
    if overall_score < HIGH_RISK_BELOW:
        return RiskTier.HIGH
    if overall_score < LOW_RISK_FROM:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def build_summary(overall_score: int, metrics: Mapping[str, Mapping]) -> str:
    tier = risk_tier(overall_score)
    if tier is RiskTier.MEDIUM:
        return MEDIUM_RISK_SUMMARY
    if tier is RiskTier.LOW:
        return LOW_RISK_SUMMARY
    summary = HIGH_RISK_PREFIX
    network = metrics["networkAnalysis"]
    authority = metrics["simplifiedEEAT"]
    if network["score"] < HIGH_RISK_BELOW:
        summary += network["details"]
    if authority["score"] < HIGH_RISK_BELOW:
        summary += " " + authority["details"]
    return summary


def synthesize_score(metrics: Mapping[str, Mapping]) -> Tuple[int, str]:
    """Return ``(overall_score, summary)`` for the three analyzer metrics."""
    overall = weighted_trust_score(metrics)
    return overall, build_summary(overall, metrics)
