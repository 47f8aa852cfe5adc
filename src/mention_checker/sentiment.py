"""
Sentiment autour des mentions de marque.

Score lexical (lexique + négations de VADER) calculé sur chaque contexte qui cite la
marque (phrases, puis extraits de paragraphes), puis moyenné et converti en label.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
import math
import re

from vaderSentiment.vaderSentiment import NEGATE, SentimentIntensityAnalyzer

from mention_checker.brand.brand_models import SentimentContext, SentimentLabel, SentimentResult
from mention_checker.brand.tokens import normalize, tokenize

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT_RE = re.compile(r"\n\n+")
PUNCT_RE = re.compile(r"[^\w\s']+")

SNIPPET_RADIUS = 100
MAX_CONTEXT_CHARS = 200
MAX_CONTEXTS = 5


@dataclass
class LexiconScore:
    score: float
    comparative: float
    tokens: List[str] = field(default_factory=list)
    words: List[str] = field(default_factory=list)
    positive: List[str] = field(default_factory=list)
    negative: List[str] = field(default_factory=list)


class LexiconScorer:
    """
    Somme des valences du lexique, signe inversé si le token précédent est une négation.
    comparative = score / nombre de tokens.
    """

    def __init__(self, lexicon: Optional[Dict[str, float]] = None, negators: Optional[Iterable[str]] = None) -> None:
        self.lexicon = lexicon if lexicon is not None else SentimentIntensityAnalyzer().lexicon
        self.negators = frozenset(negators if negators is not None else NEGATE)

    def tokenize(self, text: str) -> List[str]:
        return tokenize(PUNCT_RE.sub(" ", text))

    def analyze(self, text: str) -> LexiconScore:
        tokens = self.tokenize(text)
        out = LexiconScore(score=0.0, comparative=0.0, tokens=tokens)
        for i, tok in enumerate(tokens):
            valence = self.lexicon.get(tok)
            if valence is None:
                continue
            if i > 0 and tokens[i - 1] in self.negators:
                valence = -valence
            out.score += valence
            out.words.append(tok)
            if valence > 0:
                out.positive.append(tok)
            elif valence < 0:
                out.negative.append(tok)
        out.comparative = out.score / len(tokens) if tokens else 0.0
        return out


_default_scorer: Optional[LexiconScorer] = None

def get_scorer() -> LexiconScorer:
    global _default_scorer
    if _default_scorer is None:
        _default_scorer = LexiconScorer()
    return _default_scorer


def round2(x: float) -> float:
    # arrondi "half up" à 2 décimales
    return math.floor(x * 100 + 0.5) / 100

def label_for(score: float) -> SentimentLabel:
    if score > 2:
        return SentimentLabel.VERY_POSITIVE
    if score > 0.5:
        return SentimentLabel.POSITIVE
    if score < -2:
        return SentimentLabel.VERY_NEGATIVE
    if score < -0.5:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL

def _cites(fragment_lower: str, brand: str, brand_tokens: List[str]) -> bool:
    return brand in fragment_lower or any(t in fragment_lower for t in brand_tokens)

def extract_contexts(text: str, brand: str) -> List[str]:
    """
    Contextes qui citent la marque : phrases d'abord, puis un extrait de ~100 caractères
    de part et d'autre de la marque pour chaque paragraphe. Texte entier si rien trouvé.
    """
    brand_lower = normalize(brand)
    brand_tokens = tokenize(brand_lower)
    contexts: List[str] = []

    sentences = [s for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]
    paragraphs = [p for p in PARAGRAPH_SPLIT_RE.split(text) if p.strip()]

    for sentence in sentences:
        if _cites(sentence.lower(), brand_lower, brand_tokens):
            contexts.append(sentence.strip())

    for paragraph in paragraphs:
        para_lower = paragraph.lower()
        if not _cites(para_lower, brand_lower, brand_tokens):
            continue
        idx = para_lower.find(brand_lower)
        if idx == -1:
            continue
        start = max(0, idx - SNIPPET_RADIUS)
        end = min(len(paragraph), idx + len(brand_lower) + SNIPPET_RADIUS)
        snippet = paragraph[start:end].strip()
        if snippet and snippet not in contexts:
            contexts.append(snippet)

    if not contexts:
        contexts.append(text)
    return contexts

def _display(text: str) -> str:
    if len(text) > MAX_CONTEXT_CHARS:
        return text[:MAX_CONTEXT_CHARS] + "..."
    return text

def analyze_sentiment(text: str, brand: str, scorer: Optional[LexiconScorer] = None) -> SentimentResult:
    """Label + score moyen du sentiment exprimé autour de la marque."""
    if not text or not brand or not brand.strip():
        return SentimentResult()

    scorer = scorer or get_scorer()
    contexts = extract_contexts(text, brand)

    scored: List[SentimentContext] = []
    for ctx in contexts:
        res = scorer.analyze(ctx)
        scored.append(
            SentimentContext(
                text=_display(ctx),
                score=res.score,
                comparative=res.comparative,
                tokens=res.tokens,
                words=res.words,
                positive=res.positive,
                negative=res.negative,
            )
        )

    avg_score = sum(c.score for c in scored) / len(scored)
    avg_comparative = sum(c.comparative for c in scored) / len(scored)

    return SentimentResult(
        label=label_for(avg_score),
        score=round2(avg_score),
        comparative=round2(avg_comparative),
        confidence=round2(abs(avg_comparative)),
        context_count=len(scored),
        contexts=scored[:MAX_CONTEXTS],
    )
