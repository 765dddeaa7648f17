"""
Fake-review likelihood scoring.

Each rule is a (name, predicate, points, reason) entry evaluated in order
against the review and its sentiment result.  Every triggered rule adds
its points and its human-readable reason, so every flag can be traced to
a cause.  The sum is clamped to [0, 100].

Mutually exclusive pairs (no text / short text, single-review / few
reviews) are written with disjoint predicates rather than else-branches.
"""

import logging

from . import config
from .lexicon import GENERIC_REVIEW_TEXTS
from .sentiment import NEGATIVE, POSITIVE

logger = logging.getLogger(__name__)


def _text(review: dict) -> str:
    return review.get("review_text") or ""


def _no_text(review, sentiment) -> bool:
    return not _text(review).strip()


def _short_text(review, sentiment) -> bool:
    text = _text(review)
    return bool(text.strip()) and len(text) < config.SHORT_TEXT_CHARS


def _not_local_guide(review, sentiment) -> bool:
    return not review.get("local_guide_level")


def _single_review_account(review, sentiment) -> bool:
    count = review.get("review_count")
    return count is not None and count <= 1


def _few_reviews_account(review, sentiment) -> bool:
    count = review.get("review_count")
    return count is not None and 1 < count <= 3


def _no_photos(review, sentiment) -> bool:
    # Absent photo count means "never verified as having photos".
    return not review.get("photo_count")


def _extreme_rating_minimal_text(review, sentiment) -> bool:
    return (review["rating"] in (1, 5)
            and len(_text(review)) < config.MINIMAL_TEXT_CHARS)


def _all_caps(review, sentiment) -> bool:
    text = _text(review)
    return (len(text) > config.CAPS_TEXT_MIN_CHARS
            and text == text.upper()
            and any(c.isalpha() for c in text))


def _generic_text(review, sentiment) -> bool:
    lower = _text(review).lower().strip()
    if not lower:
        return False
    return (lower in GENERIC_REVIEW_TEXTS
            or (len(lower) < config.GENERIC_TEXT_CHARS and review["rating"] == 5))


def _five_star_negative_text(review, sentiment) -> bool:
    return bool(_text(review)) and review["rating"] == 5 and sentiment["label"] == NEGATIVE


def _one_star_positive_text(review, sentiment) -> bool:
    return bool(_text(review)) and review["rating"] == 1 and sentiment["label"] == POSITIVE


def _repetitive_text(review, sentiment) -> bool:
    words = _text(review).lower().split()
    if len(words) <= config.REPETITIVE_MIN_WORDS:
        return False
    return len(set(words)) / len(words) < config.REPETITIVE_UNIQUE_RATIO


TRUST_RULES = (
    ("no_text", _no_text, 15, "No review text provided"),
    ("short_text", _short_text, 10, "Extremely short review text"),
    ("not_local_guide", _not_local_guide, 10, "Not a Local Guide"),
    ("single_review_account", _single_review_account, 20,
     "Single-review account (first/only review)"),
    ("few_reviews_account", _few_reviews_account, 10,
     "Very few total reviews on account"),
    ("no_photos", _no_photos, 5, "No photos ever uploaded"),
    ("extreme_rating_minimal_text", _extreme_rating_minimal_text, 10,
     "Extreme rating with minimal text"),
    ("all_caps", _all_caps, 5, "Entire review in ALL CAPS"),
    ("generic_text", _generic_text, 15, "Generic/boilerplate review text"),
    ("five_star_negative_text", _five_star_negative_text, 15,
     "5-star rating but negative text sentiment (inconsistent)"),
    ("one_star_positive_text", _one_star_positive_text, 15,
     "1-star rating but positive text sentiment (inconsistent)"),
    ("repetitive_text", _repetitive_text, 10, "Highly repetitive text"),
)


def score_review(review: dict, sentiment: dict) -> dict:
    """
    Score how likely a review is to be inauthentic.

    Returns {"score": int 0-100, "reasons": [str, ...]}.
    """
    score = 0
    reasons = []
    fired = []

    for name, predicate, points, reason in TRUST_RULES:
        if predicate(review, sentiment):
            score += points
            reasons.append(reason)
            fired.append(name)

    score = max(0, min(100, score))
    logger.debug(
        "Trust score %d for %s (%s)",
        score, review.get("reviewer_name"), ", ".join(fired) or "no rules",
    )
    return {"score": score, "reasons": reasons}


def is_likely_fake(fake_score: int) -> bool:
    return fake_score >= config.FAKE_SCORE_THRESHOLD
