from mention_checker.brand.brand_models import SentimentLabel, SentimentResult
from mention_checker.sentiment import (
    LexiconScorer,
    analyze_sentiment,
    extract_contexts,
    label_for,
    round2,
)

POSITIVE = {SentimentLabel.POSITIVE, SentimentLabel.VERY_POSITIVE}
NEGATIVE = {SentimentLabel.NEGATIVE, SentimentLabel.VERY_NEGATIVE}

def _toy_scorer():
    return LexiconScorer(lexicon={"good": 2.0, "bad": -2.0}, negators={"not"})

def test_positive_mention():
    res = analyze_sentiment("I really love Acme products, they are fantastic!", "Acme")
    assert res.label in POSITIVE
    assert res.score > 0

def test_negative_mention():
    res = analyze_sentiment("Acme is terrible and unreliable.", "Acme")
    assert res.label in NEGATIVE
    assert res.score < 0

def test_empty_inputs_are_neutral():
    for text, brand in [("", "Acme"), ("Acme is great", ""), ("Acme is great", " ")]:
        res = analyze_sentiment(text, brand)
        assert res == SentimentResult()
        assert res.label == SentimentLabel.NEUTRAL
        assert res.score == 0 and res.confidence == 0 and res.contexts == []

def test_lexicon_scorer_negation():
    out = _toy_scorer().analyze("Acme is NOT good!")
    assert out.tokens == ["acme", "is", "not", "good"]
    assert out.score == -2.0
    assert out.comparative == -0.5
    assert out.words == ["good"]
    assert out.negative == ["good"] and out.positive == []

def test_lexicon_scorer_empty():
    out = _toy_scorer().analyze("...")
    assert out.score == 0 and out.comparative == 0 and out.tokens == []

def test_aggregation_with_toy_lexicon():
    res = analyze_sentiment("Acme is good. Acme is not bad.", "Acme", scorer=_toy_scorer())
    # phrases (2, 2) + extrait du paragraphe (4) -> moyenne 2.67
    assert res.context_count == 3
    assert res.score == 2.67
    assert res.label == SentimentLabel.VERY_POSITIVE
    assert res.comparative == 0.58
    assert res.confidence == 0.58

def test_contexts_sentences_then_paragraph_snippets():
    text = "Acme is great. Acme ships fast.\n\nOther stuff."
    assert extract_contexts(text, "Acme") == [
        "Acme is great",
        "Acme ships fast",
        "Acme is great. Acme ships fast.",
    ]

def test_whole_text_when_brand_absent():
    assert extract_contexts("Nothing relevant here.", "Acme") == ["Nothing relevant here."]

def test_contexts_capped_and_truncated():
    text = ". ".join(f"Acme feature {i} works" for i in range(8)) + ". Acme " + "x" * 300
    res = analyze_sentiment(text, "Acme")
    assert res.context_count >= 9
    assert len(res.contexts) == 5
    assert all(len(c.text) <= 203 for c in res.contexts)
    assert res.contexts[0].text == "Acme feature 0 works"

def test_long_context_gets_ellipsis():
    text = "Acme " + "y" * 250
    res = analyze_sentiment(text, "Acme")
    assert res.contexts[0].text.endswith("...")
    assert len(res.contexts[0].text) == 203

def test_label_thresholds():
    assert label_for(2.5) == SentimentLabel.VERY_POSITIVE
    assert label_for(2) == SentimentLabel.POSITIVE
    assert label_for(0.5) == SentimentLabel.NEUTRAL
    assert label_for(-0.5) == SentimentLabel.NEUTRAL
    assert label_for(-0.6) == SentimentLabel.NEGATIVE
    assert label_for(-2) == SentimentLabel.NEGATIVE
    assert label_for(-2.1) == SentimentLabel.VERY_NEGATIVE

def test_round2_half_up():
    assert round2(0.125) == 0.13
    assert round2(-0.125) == -0.12
    assert round2(1.0) == 1.0

def test_idempotent():
    text = "Acme is good but Globex is bad."
    assert analyze_sentiment(text, "Acme") == analyze_sentiment(text, "Acme")
