# src/mention_checker/brand/fuzzy.py
from __future__ import annotations
from collections import Counter
from rapidfuzz.distance import Levenshtein
from mention_checker.brand.tokens import normalize, SPACE_RE

# Seuils du matching flou
MAX_EDIT_DISTANCE = 2
MAX_RELATIVE_DISTANCE = 0.3
MIN_SIMILARITY = 0.7

def levenshtein_distance(a: str, b: str) -> int:
    """Distance d'édition exacte (insertion / suppression / substitution = 1)."""
    return Levenshtein.distance(a, b)

def _bigrams(s: str) -> Counter:
    return Counter(s[i:i + 2] for i in range(len(s) - 1))

def dice_coefficient(a: str, b: str) -> float:
    """
    Coefficient de Dice sur les bigrammes de caractères (multiset), blancs retirés.
    1.0 si identiques, 0.0 si l'une des chaînes fait moins de 2 caractères.
    """
    a = SPACE_RE.sub("", a)
    b = SPACE_RE.sub("", b)
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0
    common = sum((_bigrams(a) & _bigrams(b)).values())
    return (2.0 * common) / (len(a) + len(b) - 2)

def fuzzy_match(a: str, b: str) -> bool:
    """
    Deux chaînes désignent-elles le même token ?
    exact -> sous-chaîne -> Levenshtein (<= 2 ou relatif <= 0.3) -> Dice >= 0.7
    """
    s1 = normalize(a)
    s2 = normalize(b)

    if s1 == s2:
        return True
    # une chaîne vide ne matche qu'une autre chaîne vide
    if not s1 or not s2:
        return False

    if s1 in s2 or s2 in s1:
        return True

    distance = levenshtein_distance(s1, s2)
    relative = distance / max(len(s1), len(s2))
    if distance <= MAX_EDIT_DISTANCE or relative <= MAX_RELATIVE_DISTANCE:
        return True

    return dice_coefficient(s1, s2) >= MIN_SIMILARITY
