# src/mention_checker/routes/llm.py
from fastapi import APIRouter, Request

router = APIRouter(prefix="/llm", tags=["llm"])

@router.get("/status")
def llm_status(request: Request):
    """
    Statut du modèle configuré (sans l'appeler).
    """
    settings = request.app.state.settings
    client = request.app.state.llm_client
    return {
        "gemini": {
            "available": client is not None,
            "api_key_set": settings.api_key_configured,
        },
        "current_config": {
            "provider": "gemini",
            "model": settings.MODEL_NAME,
            "temperature": settings.TEMPERATURE,
            "max_output_tokens": settings.MAX_OUTPUT_TOKENS,
        },
    }
