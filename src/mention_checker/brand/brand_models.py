from __future__ import annotations
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

class MatchResult(BaseModel):
    mentioned: bool = False
    position: int = Field(default=0, ge=0)  # rang dans la liste OU index de mot (1-based)

    @model_validator(mode="after")
    def _position_iff_mentioned(self) -> "MatchResult":
        if self.mentioned != (self.position > 0):
            raise ValueError("position doit être > 0 si et seulement si mentioned=True")
        return self

class ListItem(BaseModel):
    number: int
    content: str        # minuscules, sans markdown
    start_index: int

class SentimentLabel(str, Enum):
    VERY_POSITIVE = "very_positive"
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    VERY_NEGATIVE = "very_negative"

class SentimentContext(BaseModel):
    text: str
    score: float
    comparative: float
    tokens: List[str] = []
    words: List[str] = []
    positive: List[str] = []
    negative: List[str] = []

class SentimentResult(BaseModel):
    label: SentimentLabel = SentimentLabel.NEUTRAL
    score: float = 0.0
    comparative: float = 0.0
    confidence: float = Field(default=0.0, ge=0)
    context_count: int = 0
    contexts: List[SentimentContext] = []

# ---------- API ----------
class CheckRequest(BaseModel):
    prompt: str = ""
    brand: str = ""

class CheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    brand: str
    mentioned: bool = False
    position: int = 0
    sentiment: SentimentLabel = SentimentLabel.NEUTRAL
    sentiment_score: float = Field(default=0.0, alias="sentimentScore")
    sentiment_confidence: float = Field(default=0.0, alias="sentimentConfidence")
    sentiment_contexts: List[SentimentContext] = Field(default_factory=list, alias="sentimentContexts")
    raw: str = "API_ERROR"
    error: Optional[str] = None
