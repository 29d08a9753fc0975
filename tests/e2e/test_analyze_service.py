from __future__ import annotations

import asyncio

from app.services.analyze_service import ALTERNATIVE_ANSWER_PLACEHOLDER, analyze
from core.providers.errors import ProviderError


def test_single_source_without_credentials_is_low_risk(make_providers):
    providers = make_providers(addresses={"a.example.com": "203.0.113.5"})
    result = asyncio.run(
        analyze("what are the features of X", [{"url": "http://a.example.com"}], providers)
    )
    metrics = result["metrics"]
    assert metrics["queryFraming"]["score"] == 100
    assert metrics["networkAnalysis"]["score"] == 100
    assert metrics["simplifiedEEAT"]["score"] == 100
    assert result["overallScore"] == 100
    assert result["summary"].startswith("Low risk detected.")
    assert result["alternativeAnswer"] == ALTERNATIVE_ANSWER_PLACEHOLDER


def test_shared_ip_pair_without_credentials_is_medium_risk(make_providers):
    providers = make_providers(addresses={"one.example": "198.51.100.7", "two.example": "198.51.100.7"})
    sources = [{"url": "https://one.example/a"}, {"url": "https://two.example/b"}]
    result = asyncio.run(analyze("best product", sources, providers))
    assert result["metrics"]["networkAnalysis"]["score"] == 60
    assert result["overallScore"] == 80
    assert result["summary"] == "Medium risk detected. Please review sources with caution."


def test_empty_sources_with_search_configured(make_providers):
    providers = make_providers(counts={}, reply="Neutral")
    result = asyncio.run(analyze("query", [], providers))
    for name in ("networkAnalysis", "simplifiedEEAT"):
        assert result["metrics"][name]["score"] == 100
        assert result["metrics"][name]["details"] == "No sources to analyze."


def test_high_risk_combines_failing_details(make_providers):
    hosts = ["a.test", "b.test", "c.test", "d.test", "e.test"]
    providers = make_providers(
        addresses={host: "192.0.2.1" for host in hosts},
        counts={host: 12 for host in hosts},
        reply="Biased",
    )
    sources = [{"url": f"https://{host}/"} for host in hosts]
    result = asyncio.run(analyze("why is X superior to Y", sources, providers))
    # 50 * 0.1 + 0 * 0.5 + 20 * 0.4
    assert result["overallScore"] == 13
    assert result["summary"] == (
        "High risk of manipulation detected. 5 domains may be part of a shared network."
        " 5 domains have very low authority."
    )
    assert result["metrics"]["queryFraming"]["isBiased"] is True


def test_total_provider_outage_still_returns_complete_result(make_providers):
    providers = make_providers(
        addresses={},
        counts={},
        classifier_error=ProviderError("classifier", "connection refused"),
    )
    sources = [{"url": "https://a.example/"}, {"url": "https://b.example/"}, {"url": "::bad::"}]
    result = asyncio.run(analyze("query", sources, providers))
    assert set(result) == {"overallScore", "summary", "alternativeAnswer", "metrics"}
    assert result["metrics"]["queryFraming"]["details"] == "Analysis could not be performed."
    assert result["metrics"]["networkAnalysis"]["score"] == 100
    assert result["metrics"]["simplifiedEEAT"]["score"] == 50
    assert 0 <= result["overallScore"] <= 100
    assert isinstance(result["overallScore"], int)
