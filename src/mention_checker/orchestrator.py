from __future__ import annotations
import logging
from typing import Optional, Tuple

from mention_checker.brand.brand_models import CheckResponse, MatchResult, SentimentResult
from mention_checker.brand.detector import locate
from mention_checker.errors import API_ERROR, MentionCheckerError, describe_error, log_call
from mention_checker.models.base import BaseLLMClient
from mention_checker.sentiment import analyze_sentiment

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "GEMINI_API_KEY not configured on server"


def analyze_answer(text: str, brand: str, prompt: str = "") -> Tuple[MatchResult, SentimentResult]:
    """Coeur d'analyse : position de la marque + sentiment, sur un texte déjà généré."""
    return locate(text, brand, prompt), analyze_sentiment(text, brand)


def build_response(prompt: str, brand: str, text: str) -> CheckResponse:
    match, sentiment = analyze_answer(text, brand, prompt)
    return CheckResponse(
        prompt=prompt,
        brand=brand,
        mentioned=match.mentioned,
        position=match.position,
        sentiment=sentiment.label,
        sentiment_score=sentiment.score,
        sentiment_confidence=sentiment.confidence,
        sentiment_contexts=sentiment.contexts,
        raw=text,
    )


def fallback_response(prompt: str, brand: str, error: str) -> CheckResponse:
    """Résultat neutre renvoyé quand le modèle n'a pas pu répondre."""
    return CheckResponse(prompt=prompt, brand=brand, raw=API_ERROR, error=error)


@log_call
async def generate(client: BaseLLMClient, prompt: str) -> str:
    return await client.answer_async(prompt)


async def check_brand(prompt: str, brand: str, client: Optional[BaseLLMClient]) -> CheckResponse:
    """
    1) Pose le prompt au modèle
    2) Analyse la réponse (mention, position, sentiment)
    Toute erreur côté modèle => résultat neutre + message d'erreur, jamais d'exception.
    """
    if client is None:
        return fallback_response(prompt, brand, NOT_CONFIGURED)

    try:
        text = await generate(client, prompt)
    except MentionCheckerError as e:
        logger.error("Gemini API error: %s", e)
        return fallback_response(prompt, brand, describe_error(e))

    return build_response(prompt, brand, text)
