# src/mention_checker/routes/check.py
from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request
from pydantic import ValidationError

from mention_checker.brand.brand_models import CheckRequest, CheckResponse
from mention_checker.orchestrator import check_brand

router = APIRouter(prefix="/api", tags=["check"])

def _parse_body(payload: Any) -> CheckRequest:
    # corps absent / mal typé => traité comme des champs manquants (400, pas 422)
    try:
        return CheckRequest.model_validate(payload or {})
    except ValidationError:
        return CheckRequest()

@router.post("/check", response_model=CheckResponse, response_model_exclude_none=True)
async def check(request: Request, payload: Any = Body(None)):
    """
    ➜ 1 prompt → réponse Gemini → mention / position / sentiment de la marque.
    Si le modèle n'est pas configuré ou échoue : résultat neutre + "error".
    """
    body = _parse_body(payload)
    if not body.prompt or not body.brand:
        raise HTTPException(status_code=400, detail="Both prompt and brand are required")
    return await check_brand(body.prompt, body.brand, request.app.state.llm_client)
