from __future__ import annotations

from core.analyzers.domains import extract_domains, hostname_of


def test_dedups_by_hostname_in_first_seen_order():
    sources = [
        {"url": "https://b.example.com/page-1"},
        {"url": "https://a.example.com/"},
        {"url": "http://b.example.com/page-2?x=1"},
    ]
    assert extract_domains(sources) == ["b.example.com", "a.example.com"]


def test_hostnames_are_lower_cased():
    assert hostname_of("https://News.Example.ORG/story") == "news.example.org"


def test_malformed_urls_are_skipped(caplog):
    sources = [
        {"url": "not a url"},
        {"url": "http://[::1"},
        {"url": None},
        {},
        {"url": "https://ok.example.net"},
    ]
    with caplog.at_level("WARNING"):
        assert extract_domains(sources) == ["ok.example.net"]
    assert "malformed URL" in caplog.text


def test_empty_and_missing_sources():
    assert extract_domains([]) == []
    assert extract_domains(None) == []
