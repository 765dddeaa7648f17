"""
Responses block: how often, how fast and how well the owner replies.

Quality score (0-100):
    0.30 * empathy rate
  + 0.20 * personalization rate
  + 0.20 * min(avg response length / 5, 20)
  + 0.15 * (100 - template rate)
  + 0.15 * (100 - defensive rate)

A response counts as a template when its first 100 lowercased characters
are shared by more than two responses.
"""

from .. import config
from ..lexicon import DEFENSIVE_WORDS, EMPATHY_WORDS, RESOLUTION_WORDS
from .stats import first_name, has_response, mean, pct, recency_key

_UNRESPONDED_TEXT_CHARS = 200


def empty_responses() -> dict:
    return {
        "total_responses": 0,
        "response_rate": 0,
        "response_rate_negative": 0,
        "response_rate_positive": 0,
        "negative_review_count": 0,
        "average_response_length": 0,
        "template_detection_rate": 0,
        "empathy_score": 0,
        "resolution_language_rate": 0,
        "defensive_language_rate": 0,
        "personalized_rate": 0,
        "responded_by_rating": [
            {"rating": rating, "response_rate": 0} for rating in range(1, 6)
        ],
        "unresponded_negatives": [],
        "average_response_time": "N/A",
        "response_quality_score": 0,
    }


def compute_responses(reviews: list[dict]) -> dict:
    if not reviews:
        return empty_responses()

    responded = [r for r in reviews if has_response(r)]
    negatives = [r for r in reviews if r["rating"] <= 2]
    positives = [r for r in reviews if r["rating"] >= 4]
    n_responded = len(responded)

    avg_len = mean(len(r["response_text"]) for r in responded)

    prefix_counts: dict[str, int] = {}
    for r in responded:
        prefix = r["response_text"].lower().strip()[:config.TEMPLATE_PREFIX_CHARS]
        prefix_counts[prefix] = prefix_counts.get(prefix, 0) + 1
    template_count = sum(
        c for c in prefix_counts.values() if c >= config.TEMPLATE_MIN_REUSE
    )

    # Stem matching: "apologize" also catches "apologized".
    empathy = resolution = defensive = personalized = 0
    for r in responded:
        lower = r["response_text"].lower()
        if any(w in lower for w in EMPATHY_WORDS):
            empathy += 1
        if any(w in lower for w in RESOLUTION_WORDS):
            resolution += 1
        if any(w in lower for w in DEFENSIVE_WORDS):
            defensive += 1
        name = first_name(r["reviewer_name"]).lower()
        if name and name in lower:
            personalized += 1

    template_rate = pct(template_count, n_responded)
    empathy_rate = pct(empathy, n_responded)
    personalized_rate = pct(personalized, n_responded)
    defensive_rate = pct(defensive, n_responded)

    weights = config.RESPONSE_QUALITY_WEIGHTS
    quality = round(
        empathy_rate * weights["empathy"]
        + personalized_rate * weights["personalization"]
        + min(avg_len / config.RESPONSE_LENGTH_DIVISOR, config.RESPONSE_LENGTH_CAP)
        * weights["length"]
        + (100 - template_rate) * weights["non_template"]
        + (100 - defensive_rate) * weights["non_defensive"]
    )

    responded_by_rating = []
    for rating in range(1, 6):
        for_rating = [r for r in reviews if r["rating"] == rating]
        rate = pct(sum(1 for r in for_rating if has_response(r)), len(for_rating))
        responded_by_rating.append({"rating": rating, "response_rate": round(rate, 1)})

    unresponded = sorted(
        (r for r in negatives if not has_response(r)),
        key=recency_key,
    )[:config.MAX_UNRESPONDED_LISTED]

    return {
        "total_responses": n_responded,
        "response_rate": round(pct(n_responded, len(reviews)), 1),
        "response_rate_negative": round(
            pct(sum(1 for r in negatives if has_response(r)), len(negatives)), 1
        ),
        "response_rate_positive": round(
            pct(sum(1 for r in positives if has_response(r)), len(positives)), 1
        ),
        "negative_review_count": len(negatives),
        "average_response_length": round(avg_len),
        "template_detection_rate": round(template_rate, 1),
        "empathy_score": round(empathy_rate),
        "resolution_language_rate": round(pct(resolution, n_responded), 1),
        "defensive_language_rate": round(defensive_rate, 1),
        "personalized_rate": round(personalized_rate, 1),
        "responded_by_rating": responded_by_rating,
        "unresponded_negatives": [
            {
                "reviewer": r["reviewer_name"],
                "text": (r.get("review_text") or "No text")[:_UNRESPONDED_TEXT_CHARS],
                "rating": r["rating"],
                "date": r.get("published_date") or "Unknown",
            }
            for r in unresponded
        ],
        "average_response_time": _average_response_time(responded),
        "response_quality_score": max(0, min(100, quality)),
    }


def _average_response_time(responded: list[dict]) -> str:
    """
    Mean days between review and response, when both dates resolve.

    Both dates are relative phrases ("3 weeks ago"), so this is an
    estimate at the precision of the coarser phrase.
    """
    lags = [
        (r["responded_at"] - r["published_at"]).days
        for r in responded
        if r.get("published_at") and r.get("responded_at")
        and r["responded_at"] >= r["published_at"]
    ]
    if not lags:
        return "N/A"
    days = mean(lags)
    if days < 1:
        return "Same day"
    return f"{days:.0f} day(s)"
