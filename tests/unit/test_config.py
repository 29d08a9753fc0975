from __future__ import annotations

import asyncio

import httpx
import pytest

from core.config import DEFAULT_TIMEOUT_SECONDS, load_config
from core.providers.classifier import OpenAICompatClassifier
from core.providers.loader import load_providers
from core.providers.search import SerpApiSearch

TRUST_CFG = {
    "classifier": {"endpoint": "https://llm.test/", "model": "m1", "api_key_env": "LLM_KEY"},
    "search": {"endpoint": "https://search.test", "api_key_env": "SEARCH_KEY"},
    "limits": {"timeout_seconds": 3, "max_concurrency": 2},
}


def test_credentials_come_from_named_env_vars():
    config = load_config(TRUST_CFG, {"LLM_KEY": "abc", "SEARCH_KEY": "def"})
    assert config.classifier_enabled and config.search_enabled
    assert config.classifier_endpoint == "https://llm.test"
    assert config.classifier_model == "m1"
    assert config.timeout_seconds == 3.0
    assert config.max_concurrency == 2


def test_empty_credentials_count_as_absent():
    config = load_config(TRUST_CFG, {"LLM_KEY": "", "SEARCH_KEY": ""})
    assert not config.classifier_enabled
    assert not config.search_enabled


def test_defaults_without_yaml():
    config = load_config({}, {"DEEPSEEK_API_KEY": "k"})
    assert config.classifier_api_key == "k"
    assert config.search_api_key is None
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS


def test_env_overrides_limits():
    config = load_config(TRUST_CFG, {"CITEGUARD_TIMEOUT": "1.5", "CITEGUARD_MAX_CONCURRENCY": "16"})
    assert config.timeout_seconds == 1.5
    assert config.max_concurrency == 16


def test_invalid_limits_are_rejected():
    with pytest.raises(ValueError):
        load_config(TRUST_CFG, {"CITEGUARD_TIMEOUT": "-1"})
    with pytest.raises(ValueError):
        load_config({"limits": {"max_concurrency": 0}}, {})


def test_load_providers_respects_missing_credentials():
    async def _go(env):
        async with httpx.AsyncClient() as client:
            return load_providers(load_config(TRUST_CFG, env), client)

    bare = asyncio.run(_go({}))
    assert bare.classifier is None
    assert bare.search is None
    assert bare.max_concurrency == 2

    full = asyncio.run(_go({"LLM_KEY": "abc", "SEARCH_KEY": "def"}))
    assert isinstance(full.classifier, OpenAICompatClassifier)
    assert isinstance(full.search, SerpApiSearch)
