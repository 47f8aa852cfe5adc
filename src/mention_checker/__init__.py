from mention_checker.brand.detector import locate
from mention_checker.brand.fuzzy import fuzzy_match, levenshtein_distance
from mention_checker.sentiment import analyze_sentiment

__all__ = ["locate", "fuzzy_match", "levenshtein_distance", "analyze_sentiment"]
