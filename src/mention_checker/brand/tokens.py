from __future__ import annotations
from typing import List
import re

WORD_RE = re.compile(r"\b\w+\b")
SPACE_RE = re.compile(r"\s+")

def normalize(s: str) -> str:
    return s.lower().strip()

def tokenize(text: str) -> List[str]:
    """Minuscules + découpage sur les blancs (tokens vides retirés)."""
    return [t for t in SPACE_RE.split(text.lower()) if t]

def extract_words(text: str) -> List[str]:
    """
    Mots au sens \\b\\w+\\b : la ponctuation ne compte jamais comme un mot.
    Sert au calcul des positions (1-based) dans la réponse.
    """
    return WORD_RE.findall(text.lower())

def count_words(text: str) -> int:
    return len(extract_words(text))
