"""Sentiment lexicon used to tag word frequencies."""

POSITIVE_WORDS = frozenset([
    "amazing", "perfect", "delicious", "incredible", "fantastic", "excellent",
    "beautiful", "wonderful", "outstanding", "phenomenal", "spectacular",
    "addictive", "crispy", "fresh", "fluffy", "creamy", "rich", "tender",
    "juicy", "flavorful", "tasty", "yummy", "divine", "heavenly", "approved",
    "must", "best", "love", "hit", "delivered", "dangerous", "fire", "problem",
])

NEGATIVE_WORDS = frozenset([
    "bad", "terrible", "awful", "horrible", "disappointing", "bland",
    "dry", "soggy", "cold", "overcooked", "undercooked", "burnt",
    "greasy", "salty", "bitter", "sour", "stale", "mushy", "rubbery",
])

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"


def word_sentiment(word: str) -> str:
    """Classify a single word as positive, negative or neutral."""
    w = word.lower()
    if w in POSITIVE_WORDS:
        return POSITIVE
    if w in NEGATIVE_WORDS:
        return NEGATIVE
    return NEUTRAL
