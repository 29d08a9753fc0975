"""Trust analysis service: fan out to the three analyzers and fuse their scores."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Dict, List, Mapping

from app.utils.fusion import synthesize_score
from app.utils.tracing import traced_span
from core.analyzers.authority import analyze_authority
from core.analyzers.network import analyze_network
from core.analyzers.outcome import AnalyzerOutcome
from core.analyzers.query_framing import analyze_query_framing
from core.providers.loader import Providers

logger = logging.getLogger(__name__)

ALTERNATIVE_ANSWER_PLACEHOLDER = (
    "The Alternative Answer feature is in development. It will show a corrected response here."
)


async def _traced(name: str, pending: Awaitable[AnalyzerOutcome], **attributes) -> AnalyzerOutcome:
    with traced_span(name, **attributes):
        return await pending


async def run_analyzers(user_query: str, cited_sources: List[Mapping], providers: Providers) -> Dict[str, AnalyzerOutcome]:
    """Run the three analyzers concurrently and return their outcomes by metric name."""
    framing, network, authority = await asyncio.gather(
        _traced("analyze.query_framing", analyze_query_framing(user_query, providers.classifier)),
        _traced(
            "analyze.network",
            analyze_network(cited_sources, providers.resolver, providers.max_concurrency),
            sources=len(cited_sources),
        ),
        _traced(
            "analyze.authority",
            analyze_authority(cited_sources, providers.search, providers.max_concurrency),
            sources=len(cited_sources),
        ),
    )
    return {"queryFraming": framing, "networkAnalysis": network, "simplifiedEEAT": authority}


async def analyze(user_query: str, cited_sources: List[Mapping], providers: Providers) -> Dict:
    """Main entry point used by the API and CLI to score a query and its cited sources."""
    logger.info("Received analysis request with %d cited sources", len(cited_sources or []))
    outcomes = await run_analyzers(user_query, list(cited_sources or []), providers)
    for name, outcome in outcomes.items():
        if outcome.degraded:
            logger.info("%s ran in degraded mode: %s", name, outcome.reason.value)

    metrics = {name: outcome.to_metric() for name, outcome in outcomes.items()}
    overall_score, summary = synthesize_score(metrics)
    logger.info("Analysis complete. Overall score: %s", overall_score)
    return {
        "overallScore": overall_score,
        "summary": summary,
        "alternativeAnswer": ALTERNATIVE_ANSWER_PLACEHOLDER,
        "metrics": metrics,
    }
