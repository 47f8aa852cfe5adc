"""
Erreurs de la couche "frontière" (config / appel du modèle).
Le coeur d'analyse ne lève jamais : entrée vide => résultat neutre.
"""
import logging
import time
from functools import wraps
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

API_ERROR = "API_ERROR"

T = TypeVar("T")


class MentionCheckerError(Exception):
    """Base de toutes les erreurs du service."""


class LLMNotConfiguredError(MentionCheckerError, ValueError):
    """Clé API absente : le modèle ne peut pas être appelé."""


class LLMCallError(MentionCheckerError):
    """L'appel au modèle génératif a échoué (réseau, quota, réponse bloquée...)."""


def describe_error(exc: BaseException) -> str:
    """Message lisible renvoyé au front (API_ERROR si l'exception n'a pas de message)."""
    message = str(exc).strip()
    return message or API_ERROR


def log_call(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """
    Journalise la durée d'un appel async ; en cas d'échec, log détaillé puis
    l'exception est re-levée enveloppée dans LLMCallError.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs) -> T:
        start_time = time.time()
        try:
            result = await func(*args, **kwargs)
        except MentionCheckerError:
            raise
        except Exception as e:
            execution_time = time.time() - start_time
            logger.error(
                "❌ %s a échoué après %.2fs: %s: %s",
                func.__name__, execution_time, type(e).__name__, e,
            )
            raise LLMCallError(describe_error(e)) from e
        logger.info("✅ %s réussi en %.2fs", func.__name__, time.time() - start_time)
        return result

    return wrapper
