"""Assemble the external capabilities the analyzers need from a TrustConfig."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from core.config import DEFAULT_MAX_CONCURRENCY, TrustConfig
from core.providers.classifier import OpenAICompatClassifier, TextClassifier
from core.providers.resolver import Resolver, SystemResolver
from core.providers.search import SearchBackend, SerpApiSearch

logger = logging.getLogger(__name__)


@dataclass
class Providers:
    """Capabilities handed to the analyzers; ``None`` means unconfigured."""

    resolver: Resolver
    classifier: Optional[TextClassifier] = None
    search: Optional[SearchBackend] = None
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY


def load_providers(config: TrustConfig, client: httpx.AsyncClient) -> Providers:
    classifier: Optional[TextClassifier] = None
    search: Optional[SearchBackend] = None
    if config.classifier_enabled:
        classifier = OpenAICompatClassifier(
            client,
            config.classifier_endpoint,
            config.classifier_api_key or "",
            config.classifier_model,
            config.timeout_seconds,
        )
    else:
        logger.info("Classifier API key not found; query framing runs in degraded mode")
    if config.search_enabled:
        search = SerpApiSearch(client, config.search_endpoint, config.search_api_key or "", config.timeout_seconds)
    else:
        logger.info("Search API key not found; authority analysis runs in degraded mode")
    return Providers(
        resolver=SystemResolver(config.timeout_seconds),
        classifier=classifier,
        search=search,
        max_concurrency=config.max_concurrency,
    )
