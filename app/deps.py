from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict

import yaml
from dotenv import load_dotenv
from fastapi import Request

from core.config import TrustConfig, load_config
from core.providers.loader import Providers

ROOT = Path(__file__).resolve().parent.parent


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


@dataclass
class AppState:
    trust_cfg: Dict
    config: TrustConfig


@lru_cache(maxsize=1)
def get_app_state() -> AppState:
    load_dotenv(ROOT / ".env")
    config_path = Path(os.getenv("CITEGUARD_CONFIG", ROOT / "config" / "trust.yaml"))
    trust_cfg = _load_yaml(config_path)
    return AppState(trust_cfg=trust_cfg, config=load_config(trust_cfg))


def get_config() -> TrustConfig:
    return get_app_state().config


def get_providers(request: Request) -> Providers:
    return request.app.state.providers
