"""
Overall sentiment classification using a hybrid lexicon/rule approach.

Pipeline for a review with text:
1. Fixed multi-word phrases ("bait and switch", "highly recommend") add
   their weight directly.  Single-word lexicons miss idiomatic meaning.
2. Each token is scored from the word lexicon (domain table first, VADER
   fallback), modulated by negation in the 3 preceding tokens (x -0.8),
   an intensifier before it (x1.1-1.5) or a diminisher (x0.4-0.8).
3. Surface cues: 1-3 exclamation marks push the total further in the
   direction it already leans; some ALL-CAPS words (not the whole text)
   add a fixed +/-0.5.
4. Rating fusion: the star rating is blended in.  It dominates when it
   contradicts the text, carries most of the weight when the text is
   near neutral, and adds a small confirmation when both agree.
5. The clamped total is squashed into a compound in [-1, 1] with
   s / sqrt(s^2 + 15), the VADER normalisation.

Label contract:
  compound >= 0.05 → POSITIVE, <= -0.05 → NEGATIVE, otherwise MIXED when
  both polarities have evidence, else NEUTRAL.
  Rating 1 is always NEGATIVE; rating 2 is never NEUTRAL.
"""

import math
import re

from . import config
from .aspects import extract_aspects
from .lexicon import (
    DIMINISHERS,
    EMOTION_KEYWORDS,
    INTENSIFIERS,
    NEGATORS,
    word_score,
)
from .preprocessing import (
    NEGATIVE_PHRASE_PATTERNS,
    POSITIVE_PHRASE_PATTERNS,
    compile_keyword_table,
    has_text,
    phrase_hits,
    scoring_tokens,
)

POSITIVE = "POSITIVE"
NEGATIVE = "NEGATIVE"
NEUTRAL = "NEUTRAL"
MIXED = "MIXED"

_EMOTION_PATTERNS = compile_keyword_table(EMOTION_KEYWORDS)
_CAPS_LETTER = re.compile(r"[A-Z]")


def classify_sentiment(text: str | None, rating: int | None = None) -> dict:
    """
    Classify a single review's sentiment.

    Returns a dict with:
      score           – clamped additive total in [-5, 5]
      compound        – normalised score in [-1, 1]
      label           – POSITIVE / NEGATIVE / NEUTRAL / MIXED
      confidence      – 0-1, grows with evidence words and a known rating
      positive_words  – phrases and words that pushed the score up
      negative_words  – phrases and words that pushed the score down
      emotion         – dominant emotion category
      aspects         – per-aspect sentiment (see aspects.py)
    """
    if not has_text(text):
        return _sentiment_from_rating(rating)

    lower = text.lower()
    total = 0.0
    pos_words: list[str] = []
    neg_words: list[str] = []

    # Step 1: phrases
    for phrase, weight in phrase_hits(lower, NEGATIVE_PHRASE_PATTERNS):
        total += weight
        neg_words.append(phrase)
    for phrase, weight in phrase_hits(lower, POSITIVE_PHRASE_PATTERNS):
        total += weight
        pos_words.append(phrase)

    # Step 2: words in context
    tokens = scoring_tokens(lower)
    for i, word in enumerate(tokens):
        base = word_score(word)
        if base == 0:
            continue
        adjusted = base * _context_modifier(tokens, i)
        total += adjusted
        if adjusted > 0:
            pos_words.append(word)
        elif adjusted < 0:
            neg_words.append(word)

    # Step 3: surface cues
    total = _apply_surface_cues(total, text)

    # Step 4: rating fusion
    if rating is not None:
        total = _fuse_rating(total, rating)

    score = max(-config.SCORE_BOUND, min(config.SCORE_BOUND, total))
    compound = score / math.sqrt(score * score + config.COMPOUND_ALPHA)

    label = _label(compound, bool(pos_words), bool(neg_words), rating)

    evidence = len(pos_words) + len(neg_words)
    confidence = min(
        1.0,
        evidence * config.CONFIDENCE_PER_EVIDENCE
        + (config.CONFIDENCE_RATING_BONUS if rating is not None else 0.0),
    )

    return {
        "score": round(score, 3),
        "compound": round(compound, 4),
        "label": label,
        "confidence": round(confidence, 2),
        "positive_words": _unique(pos_words)[:config.MAX_EVIDENCE_WORDS],
        "negative_words": _unique(neg_words)[:config.MAX_EVIDENCE_WORDS],
        "emotion": detect_emotion(text, rating),
        "aspects": extract_aspects(text),
    }


def _sentiment_from_rating(rating: int | None) -> dict:
    """Rating-only sentiment for reviews without text.  Low confidence."""
    if rating is None:
        return {
            "score": 0.0, "compound": 0.0, "label": NEUTRAL, "confidence": 0.0,
            "positive_words": [], "negative_words": [],
            "emotion": "Neutral", "aspects": [],
        }

    score = (rating - 3) * config.RATING_ONLY_SCALE
    if rating >= 4:
        label, emotion = POSITIVE, "Satisfaction"
    elif rating <= 2:
        label, emotion = NEGATIVE, "Dissatisfaction"
    else:
        label, emotion = NEUTRAL, "Neutral"

    return {
        "score": score,
        "compound": max(-1.0, min(1.0, score / 4)),
        "label": label,
        "confidence": config.RATING_ONLY_CONFIDENCE,
        "positive_words": [],
        "negative_words": [],
        "emotion": emotion,
        "aspects": [],
    }


def _context_modifier(tokens: list[str], i: int) -> float:
    modifier = 1.0

    for j in range(max(0, i - config.NEGATION_WINDOW), i):
        if tokens[j] in NEGATORS:
            modifier *= config.NEGATION_MULTIPLIER
            break

    if i > 0:
        prev = tokens[i - 1]
        modifier *= INTENSIFIERS.get(prev, 1.0)
        modifier *= DIMINISHERS.get(prev, 1.0)
        if i > 1:
            modifier *= DIMINISHERS.get(f"{tokens[i - 2]} {prev}", 1.0)

    return modifier


def _apply_surface_cues(total: float, text: str) -> float:
    if total == 0:
        return total

    exclamations = text.count("!")
    if 0 < exclamations <= config.EXCLAMATION_MAX:
        if total > 0:
            total += config.EXCLAMATION_POSITIVE_BOOST * exclamations
        else:
            total -= config.EXCLAMATION_NEGATIVE_BOOST * exclamations

    words = text.split()
    caps = [
        w for w in words
        if len(w) >= config.CAPS_MIN_WORD_LENGTH
        and w == w.upper()
        and _CAPS_LETTER.search(w)
    ]
    if caps and len(caps) < len(words) * config.CAPS_MAX_SHARE:
        total += config.CAPS_BOOST if total > 0 else -config.CAPS_BOOST

    return total


def _fuse_rating(total: float, rating: int) -> float:
    signal = (rating - 3) * config.RATING_SIGNAL_SCALE
    conflict = (total > 0 and rating <= 2) or (total < 0 and rating >= 4)

    if conflict:
        return (total * config.RATING_CONFLICT_TEXT_WEIGHT
                + signal * config.RATING_CONFLICT_RATING_WEIGHT)
    if abs(total) < config.RATING_AMBIGUOUS_ZONE:
        return total + signal * config.RATING_AMBIGUOUS_WEIGHT
    return total + signal * config.RATING_AGREEMENT_WEIGHT


def _label(compound: float, has_pos: bool, has_neg: bool, rating: int | None) -> str:
    if compound >= config.POSITIVE_THRESHOLD:
        label = POSITIVE
    elif compound <= config.NEGATIVE_THRESHOLD:
        label = NEGATIVE
    elif has_pos and has_neg:
        label = MIXED
    else:
        label = NEUTRAL

    # A 1-star review is never anything but negative, and a 2-star review
    # with no clear text signal is not neutral.
    if rating is not None:
        if rating == 1 or (rating <= 2 and label == NEUTRAL):
            label = NEGATIVE
    return label


def detect_emotion(text: str, rating: int | None = None) -> str:
    """
    Pick the emotion category with the most keyword hits.

    Falls back to Satisfaction / Dissatisfaction / Neutral by rating when
    no category matches.  Ties go to the category listed first.
    """
    best, best_count = "Neutral", 0
    for emotion, patterns in _EMOTION_PATTERNS:
        count = sum(1 for _, pattern in patterns if pattern.search(text))
        if count > best_count:
            best, best_count = emotion, count

    if best_count == 0 and rating is not None:
        if rating >= 4:
            return "Satisfaction"
        if rating <= 2:
            return "Dissatisfaction"
    return best


def _unique(words: list[str]) -> list[str]:
    return list(dict.fromkeys(words))
