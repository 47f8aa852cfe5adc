"""
Extraction des listes numérotées (Top N) depuis la réponse d'un LLM.
Retourne des ListItem {number, content, start_index} triés par offset.
Heuristiques:
- lignes "1. ..." (avec ou sans **gras** et ":" final)
- énumérations sur une seule ligne "1. A 2. B 3. C" (numéros consécutifs depuis 1)
- dédoublonnage: même numéro à moins de 10 caractères = même item, puis 1er item par numéro
"""

from __future__ import annotations
from typing import Dict, Iterator, List, Tuple
import re

from mention_checker.brand.brand_models import ListItem

RECOMMENDATION_KEYWORDS = ("recommend", "list", "best", "top", "suggest", "compare", "options")

LINE_ITEM_RE = re.compile(r"^\s*(\d+)\.\s+(.*)$")
INLINE_MARKER_RE = re.compile(r"(?<!\S)(\d+)\.\s+")
MAX_EMPHASIS = 3
SAME_ITEM_WINDOW = 10

def is_recommendation_prompt(prompt: str) -> bool:
    """Le prompt demande-t-il une liste / des recommandations ?"""
    p = (prompt or "").lower()
    return any(k in p for k in RECOMMENDATION_KEYWORDS)

def _strip_emphasis(s: str) -> str:
    lead = len(s) - len(s.lstrip("*"))
    s = s[min(lead, MAX_EMPHASIS):]
    trail = len(s) - len(s.rstrip("*"))
    if trail:
        s = s[: len(s) - min(trail, MAX_EMPHASIS)]
    return s

def clean_content(raw: str) -> str:
    s = _strip_emphasis(raw.strip()).strip()
    if s.endswith(":"):
        s = s[:-1]
    # le markdown restant (ex: "**Acme**:") part aussi
    s = s.replace("*", "").lower().strip()
    if s.endswith(":"):
        s = s[:-1].rstrip()
    return s

def _lines(text: str) -> Iterator[Tuple[int, str]]:
    offset = 0
    for line in text.split("\n"):
        yield offset, line.rstrip("\r")
        offset += len(line) + 1

def _inline_chain(line: str) -> List[re.Match]:
    """
    Suite de marqueurs consécutifs (1, 2, 3...) d'une ligne, au moins 2, en une passe.
    Seul le 1er "1." compte : s'il n'a pas de "2." après lui, aucun "1." suivant n'en a.
    """
    chain: List[re.Match] = []
    for m in INLINE_MARKER_RE.finditer(line):
        n = int(m.group(1))
        if not chain:
            if n == 1:
                chain.append(m)
        elif n == int(chain[-1].group(1)) + 1:
            chain.append(m)
    return chain if len(chain) >= 2 else []

def _candidates(text: str) -> Iterator[ListItem]:
    for offset, line in _lines(text):
        m = LINE_ITEM_RE.match(line)
        if m:
            yield ListItem(number=int(m.group(1)), content=clean_content(m.group(2)), start_index=offset)
            continue
        chain = _inline_chain(line)
        for i, marker in enumerate(chain):
            end = chain[i + 1].start() if i + 1 < len(chain) else len(line)
            yield ListItem(
                number=int(marker.group(1)),
                content=clean_content(line[marker.end():end]),
                start_index=offset + marker.start(),
            )

def extract_list_items(text: str) -> List[ListItem]:
    """
    :param text: réponse LLM brute
    :return: items uniques (1 par numéro), dans l'ordre du document
    """
    found: List[ListItem] = []
    # les candidats arrivent par offset croissant : le dernier item gardé par numéro suffit
    last_start: Dict[int, int] = {}
    for item in _candidates(text or ""):
        if not item.content or item.number < 1:
            continue
        prev = last_start.get(item.number)
        if prev is not None and item.start_index - prev < SAME_ITEM_WINDOW:
            continue
        last_start[item.number] = item.start_index
        found.append(item)

    found.sort(key=lambda it: it.start_index)

    seen = set()
    out: List[ListItem] = []
    for item in found:
        if item.number not in seen:
            seen.add(item.number)
            out.append(item)
    return out
