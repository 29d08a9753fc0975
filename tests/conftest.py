from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from core.providers.errors import ProviderError
from core.providers.loader import Providers


class FakeResolver:
    def __init__(self, addresses: Dict[str, str]):
        self.addresses = addresses
        self.calls: List[str] = []

    async def resolve(self, hostname: str) -> str:
        self.calls.append(hostname)
        if hostname not in self.addresses:
            raise ProviderError("dns", f"could not resolve {hostname}")
        return self.addresses[hostname]


class FakeSearch:
    def __init__(self, counts: Dict[str, int]):
        self.counts = counts
        self.calls: List[str] = []

    async def total_results(self, domain: str) -> int:
        self.calls.append(domain)
        if domain not in self.counts:
            raise ProviderError("search", f"lookup failed for {domain}")
        return self.counts[domain]


class FakeClassifier:
    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def classify(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply or ""


@pytest.fixture
def make_providers():
    def _build(
        addresses: Optional[Dict[str, str]] = None,
        counts: Optional[Dict[str, int]] = None,
        reply: Optional[str] = None,
        classifier_error: Optional[Exception] = None,
    ) -> Providers:
        classifier = None
        if reply is not None or classifier_error is not None:
            classifier = FakeClassifier(reply, classifier_error)
        return Providers(
            resolver=FakeResolver(addresses or {}),
            classifier=classifier,
            search=FakeSearch(counts) if counts is not None else None,
            max_concurrency=4,
        )

    return _build
