# src/mention_checker/models/__init__.py
from __future__ import annotations
import logging
from typing import Optional

from mention_checker.config import Settings
from mention_checker.errors import LLMNotConfiguredError
from mention_checker.models.base import BaseLLMClient
from mention_checker.models.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


def get_llm_client(settings: Settings) -> GeminiClient:
    """
    Construit le client Gemini à partir de la configuration.
    Lève LLMNotConfiguredError si GEMINI_API_KEY est absente.
    """
    return GeminiClient(
        api_key=settings.GEMINI_API_KEY,
        model=settings.MODEL_NAME,
        temperature=settings.TEMPERATURE,
        max_output_tokens=settings.MAX_OUTPUT_TOKENS,
    )


def try_get_llm_client(settings: Settings) -> Optional[BaseLLMClient]:
    """Comme get_llm_client, mais None (avec un warning) si la clé manque."""
    try:
        return get_llm_client(settings)
    except LLMNotConfiguredError as e:
        logger.warning("⚠️ %s : /api/check renverra le résultat neutre", e)
        return None


__all__ = ["BaseLLMClient", "GeminiClient", "get_llm_client", "try_get_llm_client"]
