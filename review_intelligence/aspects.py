"""
Aspect-Based Sentiment Analysis (ABSA).

Approach:
1. For each business aspect (Service, Price, ...), find every occurrence
   of its keywords using word-boundary patterns.
2. Cut a +/-40 character window around each occurrence.
3. Score the window with the phrase tables and word lexicon only.  No
   negation or intensifier handling: windows are too short for the
   token context to mean much.
4. Average the window scores per aspect and classify at +/-0.3.
"""

from . import config
from .lexicon import ASPECT_KEYWORDS, word_score
from .preprocessing import (
    NEGATIVE_PHRASE_PATTERNS,
    POSITIVE_PHRASE_PATTERNS,
    compile_keyword_pattern,
    phrase_hits,
    scoring_tokens,
)


_ASPECT_PATTERNS = [
    (aspect, compile_keyword_pattern(keywords))
    for aspect, keywords in ASPECT_KEYWORDS
]


def quick_score(text: str) -> float:
    """Context-free lexicon + phrase score for a short lowercase snippet."""
    score = sum(word_score(word) for word in scoring_tokens(text))
    for _, weight in phrase_hits(text, NEGATIVE_PHRASE_PATTERNS):
        score += weight
    for _, weight in phrase_hits(text, POSITIVE_PHRASE_PATTERNS):
        score += weight
    return score


def extract_aspects(text: str) -> list[dict]:
    """
    Return one {aspect, sentiment, score} entry per aspect mentioned.

    Aspects come back in the fixed taxonomy order.
    """
    if not text or not text.strip():
        return []

    lower = text.lower()
    window = config.ASPECT_CONTEXT_CHARS
    threshold = config.ASPECT_POLARITY_THRESHOLD
    results = []

    for aspect, pattern in _ASPECT_PATTERNS:
        scores = []
        for match in pattern.finditer(lower):
            context = lower[max(0, match.start() - window):match.end() + window]
            scores.append(quick_score(context))
        if not scores:
            continue

        avg = sum(scores) / len(scores)
        if avg > threshold:
            sentiment = "positive"
        elif avg < -threshold:
            sentiment = "negative"
        else:
            sentiment = "neutral"

        results.append({
            "aspect": aspect,
            "sentiment": sentiment,
            "score": round(avg, 2),
        })

    return results
