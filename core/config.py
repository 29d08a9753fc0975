"""Explicit runtime configuration shared by the analyzers' providers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

DEFAULT_CLASSIFIER_ENDPOINT = "https://api.deepseek.com"
DEFAULT_CLASSIFIER_MODEL = "deepseek-chat"
DEFAULT_SEARCH_ENDPOINT = "https://serpapi.com/search.json"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_CONCURRENCY = 8


@dataclass(frozen=True)
class TrustConfig:
    """Credentials, endpoints and call limits; read-only once built."""

    classifier_api_key: Optional[str] = None
    search_api_key: Optional[str] = None
    classifier_endpoint: str = DEFAULT_CLASSIFIER_ENDPOINT
    classifier_model: str = DEFAULT_CLASSIFIER_MODEL
    search_endpoint: str = DEFAULT_SEARCH_ENDPOINT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY

    @property
    def classifier_enabled(self) -> bool:
        return bool(self.classifier_api_key)

    @property
    def search_enabled(self) -> bool:
        return bool(self.search_api_key)


def load_config(cfg: Dict | None = None, environ: Mapping[str, str] | None = None) -> TrustConfig:
    """Build a TrustConfig from the YAML settings and the process environment.

    Credentials are looked up through the ``api_key_env`` names in the YAML
    (``DEEPSEEK_API_KEY`` / ``SEARCH_API_KEY`` by default).  An empty value
    counts as absent.  ``CITEGUARD_TIMEOUT`` and ``CITEGUARD_MAX_CONCURRENCY``
    override the ``limits`` section.
    """
    cfg = cfg or {}
    environ = os.environ if environ is None else environ
    classifier_cfg = cfg.get("classifier", {}) or {}
    search_cfg = cfg.get("search", {}) or {}
    limits_cfg = cfg.get("limits", {}) or {}

    classifier_key_env = classifier_cfg.get("api_key_env") or "DEEPSEEK_API_KEY"
    search_key_env = search_cfg.get("api_key_env") or "SEARCH_API_KEY"

    timeout = float(environ.get("CITEGUARD_TIMEOUT") or limits_cfg.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS))
    concurrency = int(
        environ.get("CITEGUARD_MAX_CONCURRENCY") or limits_cfg.get("max_concurrency", DEFAULT_MAX_CONCURRENCY)
    )
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")
    if concurrency < 1:
        raise ValueError(f"max_concurrency must be at least 1, got {concurrency}")

    return TrustConfig(
        classifier_api_key=environ.get(classifier_key_env) or None,
        search_api_key=environ.get(search_key_env) or None,
        classifier_endpoint=classifier_cfg.get("endpoint", DEFAULT_CLASSIFIER_ENDPOINT).rstrip("/"),
        classifier_model=classifier_cfg.get("model", DEFAULT_CLASSIFIER_MODEL),
        search_endpoint=search_cfg.get("endpoint", DEFAULT_SEARCH_ENDPOINT),
        timeout_seconds=timeout,
        max_concurrency=concurrency,
    )
