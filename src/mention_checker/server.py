# src/mention_checker/server.py
from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mention_checker.config import Settings, settings as default_settings
from mention_checker.models import BaseLLMClient, try_get_llm_client
from mention_checker.routes import check as check_routes
from mention_checker.routes import llm as llm_routes

logger = logging.getLogger(__name__)

_UNSET = object()


def create_app(settings: Optional[Settings] = None, llm_client=_UNSET) -> FastAPI:
    """
    :param settings: configuration (lue dans l'environnement par défaut)
    :param llm_client: client déjà construit (tests) ; sinon Gemini via settings,
                       None si GEMINI_API_KEY est absente
    """
    settings = settings or default_settings
    client: Optional[BaseLLMClient] = (
        try_get_llm_client(settings) if llm_client is _UNSET else llm_client
    )

    app = FastAPI(title="Gemini Brand Mention Checker API")
    app.state.settings = settings
    app.state.llm_client = client

    # CORS pour le front
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.ALLOWED_ORIGINS),
        allow_credentials="*" not in settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Routers
    app.include_router(check_routes.router)
    app.include_router(llm_routes.router)

    @app.get("/")
    def root():
        return {
            "status": "ok",
            "message": "Gemini Brand Mention Checker API",
            "model": settings.MODEL_NAME,
            "temperature": settings.TEMPERATURE,
        }

    @app.get("/health")
    def health():
        return {"ok": True}

    logger.info("Model: %s, Temperature: %s", settings.MODEL_NAME, settings.TEMPERATURE)
    logger.info("API Key: %s", "Configured" if settings.api_key_configured else "Not configured")
    return app
