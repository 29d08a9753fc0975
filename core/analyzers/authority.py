"""Simplified authority (E-E-A-T) estimate from each domain's indexed-page count."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Mapping, Optional, Tuple

from app.utils.authority import authority_from_count
from app.utils.fusion import round_half_up
from core.analyzers.domains import extract_domains
from core.analyzers.outcome import NEUTRAL_SCORE, AnalyzerOutcome, Degraded, DegradedReason, Success
from core.config import DEFAULT_MAX_CONCURRENCY
from core.providers.errors import ProviderError
from core.providers.search import SearchBackend

logger = logging.getLogger(__name__)

SKIPPED_DETAILS = "Analysis skipped: API Key not configured."
NO_SOURCES_DETAILS = "No sources to analyze."


async def lookup_result_counts(
    domains: List[str],
    search: SearchBackend,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> List[Tuple[str, Optional[int]]]:
    """Fetch result counts per domain; a failed lookup yields ``(domain, None)``."""
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _lookup(domain: str) -> Tuple[str, Optional[int]]:
        async with semaphore:
            try:
                return domain, await search.total_results(domain)
            except ProviderError as exc:
                logger.warning("Error checking authority for %s: %s", domain, exc)
                return domain, None

    return list(await asyncio.gather(*(_lookup(domain) for domain in domains)))


async def analyze_authority(
    sources: Iterable[Mapping],
    search: Optional[SearchBackend],
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> AnalyzerOutcome:
    logger.info("Analyzing authority")
    if search is None:
        return Degraded(DegradedReason.UNCONFIGURED, SKIPPED_DETAILS)
    domains = extract_domains(sources)
    if not domains:
        return Success(NEUTRAL_SCORE, NO_SOURCES_DETAILS, {"lowAuthorityCount": 0})

    counts = await lookup_result_counts(domains, search, max_concurrency)
    total_points = 0
    low_authority = 0
    for _domain, count in counts:
        tier, points = authority_from_count(count)
        total_points += points
        if tier == "low":
            low_authority += 1

    return Success(
        score=round_half_up(total_points / len(domains)),
        details=f"{low_authority} domains have very low authority.",
        extras={"lowAuthorityCount": low_authority},
    )
