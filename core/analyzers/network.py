"""Network correlation: flag cited domains that resolve to a shared IP address.

Distinct domains hosted on the same address are a weak signal of common
ownership.  Resolutions run concurrently; the IP clustering is a single pass
over the results in domain order, so no shared state is written concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from core.analyzers.domains import extract_domains
from core.analyzers.outcome import NEUTRAL_SCORE, AnalyzerOutcome, Success
from core.config import DEFAULT_MAX_CONCURRENCY
from core.providers.errors import ProviderError
from core.providers.resolver import Resolver

logger = logging.getLogger(__name__)

SHARED_IP_PENALTY = 20
NO_SOURCES_DETAILS = "No sources to analyze."


def cluster_by_ip(resolved: Iterable[Tuple[str, Optional[str]]]) -> Tuple[Dict[str, List[str]], Set[str]]:
    """Group domains by address and collect every domain in a cluster of two or more.

    Pairs whose address is ``None`` (unresolved) are ignored.
    """
    clusters: Dict[str, List[str]] = {}
    shared: Set[str] = set()
    for domain, address in resolved:
        if address is None:
            continue
        members = clusters.setdefault(address, [])
        members.append(domain)
        if len(members) > 1:
            shared.update(members)
    return clusters, shared


def network_score(shared_count: int) -> int:
    return max(0, NEUTRAL_SCORE - SHARED_IP_PENALTY * shared_count)


async def resolve_domains(
    domains: List[str],
    resolver: Resolver,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> List[Tuple[str, Optional[str]]]:
    """Resolve every domain; a failed lookup yields ``(domain, None)``."""
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _resolve(domain: str) -> Tuple[str, Optional[str]]:
        async with semaphore:
            try:
                return domain, await resolver.resolve(domain)
            except ProviderError as exc:
                logger.warning("Could not resolve IP for %s: %s", domain, exc)
                return domain, None

    return list(await asyncio.gather(*(_resolve(domain) for domain in domains)))


async def analyze_network(
    sources: Iterable[Mapping],
    resolver: Resolver,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> AnalyzerOutcome:
    logger.info("Analyzing network")
    domains = extract_domains(sources)
    if not domains:
        return Success(NEUTRAL_SCORE, NO_SOURCES_DETAILS, {"sharedIpDomains": [], "unresolvedDomains": []})

    resolved = await resolve_domains(domains, resolver, max_concurrency)
    _clusters, shared = cluster_by_ip(resolved)
    unresolved = [domain for domain, address in resolved if address is None]
    return Success(
        score=network_score(len(shared)),
        details=f"{len(shared)} domains may be part of a shared network.",
        extras={"sharedIpDomains": sorted(shared), "unresolvedDomains": unresolved},
    )
