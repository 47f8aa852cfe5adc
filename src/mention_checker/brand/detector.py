# src/mention_checker/brand/detector.py
from __future__ import annotations
from typing import List, Optional, Tuple
import logging

from mention_checker.brand.brand_models import ListItem, MatchResult
from mention_checker.brand.fuzzy import fuzzy_match
from mention_checker.brand.tokens import count_words, extract_words, normalize, tokenize
from mention_checker.parse_ranked import extract_list_items, is_recommendation_prompt

logger = logging.getLogger(__name__)

# texte brut examiné après le début d'un item de liste
ITEM_SPAN_CHARS = 500

def _item_span(text: str, items: List[ListItem], i: int) -> str:
    start = items[i].start_index
    end = items[i + 1].start_index if i + 1 < len(items) else len(text)
    return text[start: min(start + ITEM_SPAN_CHARS, end)].lower()

def _item_matches(item: ListItem, span: str, brand: str, brand_tokens: List[str]) -> bool:
    content = item.content
    if len(brand_tokens) > 1:
        return (
            all(t in content for t in brand_tokens)
            or all(t in span for t in brand_tokens)
            or brand in content
            or brand in span
        )
    return brand in content or brand in span or fuzzy_match(content, brand)

def rank_in_list(
    text: str, brand: str, brand_tokens: List[str], items: List[ListItem]
) -> Tuple[Optional[int], Optional[int]]:
    """
    Parcourt les items dans l'ordre du document.
    Retourne (rang, position_mot) du 1er item qui cite la marque, sinon (None, None).
    """
    for i, item in enumerate(items):
        span = _item_span(text, items, i)
        if not _item_matches(item, span, brand, brand_tokens):
            continue
        word_position = count_words(text[: item.start_index]) + 1
        idx = span.find(brand)
        if idx != -1:
            word_position += count_words(span[:idx])
        return item.number, word_position
    return None, None

def _phrase_position(text_lower: str, brand: str) -> Optional[int]:
    idx = text_lower.find(brand)
    if idx == -1:
        return None
    return count_words(text_lower[:idx]) + 1

def word_position(text: str, brand: str, brand_tokens: List[str]) -> Optional[int]:
    """Index (1-based) du 1er mot qui correspond à la marque (fenêtre glissante si multi-mots)."""
    words = extract_words(text)
    if len(brand_tokens) > 1:
        n = len(brand_tokens)
        for i in range(len(words) - n + 1):
            if all(fuzzy_match(words[i + j], brand_tokens[j]) for j in range(n)):
                return i + 1
        # fallback: phrase exacte
        return _phrase_position(text.lower(), brand)
    for i, w in enumerate(words):
        if fuzzy_match(w, brand):
            return i + 1
    return None

def locate(text: str, brand: str, prompt: str = "") -> MatchResult:
    """
    Position de la marque dans la réponse.
    Pour un prompt de type "recommandation", la position = rang dans la liste numérotée
    (1er, 2e, 3e conseillé) ; sinon l'index du premier mot qui cite la marque.
    """
    if not text or not brand or not brand.strip():
        return MatchResult(mentioned=False, position=0)

    brand_lower = normalize(brand)
    text_lower = text.lower()
    brand_tokens = tokenize(brand_lower)

    recommendation = is_recommendation_prompt(prompt)
    list_rank: Optional[int] = None
    position: Optional[int] = None

    if recommendation:
        items = extract_list_items(text)
        if items:
            list_rank, position = rank_in_list(text, brand_lower, brand_tokens, items)

    if list_rank is None:
        position = word_position(text, brand_lower, brand_tokens)

    if position is None:
        position = _phrase_position(text_lower, brand_lower)

    if recommendation and list_rank is not None:
        logger.debug("marque '%s' au rang %s de la liste", brand_lower, list_rank)
        return MatchResult(mentioned=True, position=list_rank)
    if position is not None:
        return MatchResult(mentioned=True, position=position)
    return MatchResult(mentioned=False, position=0)

