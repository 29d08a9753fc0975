from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app import __version__
from app.deps import get_config
from core.providers.loader import load_providers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config = get_config()
    async with httpx.AsyncClient(timeout=config.timeout_seconds) as client:
        app.state.providers = load_providers(config, client)
        logger.info(
            "Providers ready (classifier=%s, search=%s)",
            config.classifier_enabled,
            config.search_enabled,
        )
        yield


def create_app() -> FastAPI:
    app = FastAPI(title="CiteGuard API", version=__version__, lifespan=lifespan)

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    from app.routes import analyze  # noqa: WPS433

    app.include_router(analyze.router)
    return app


app = create_app()
