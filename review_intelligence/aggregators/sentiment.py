"""
Sentiment block: label counts, intensities, emotions, aspects, and how
well star ratings agree with the text.
"""

from .. import sentiment as classifier
from ..dates import dated_months
from .stats import compound, has_text, label, mean, pct

_EXAMPLE_CHARS = 300
_ALIGNMENT_MIN_TEXT_CHARS = 10


def empty_sentiment() -> dict:
    return {
        "overall_score": 0,
        "overall_label": "N/A",
        "positive_count": 0,
        "negative_count": 0,
        "neutral_count": 0,
        "mixed_count": 0,
        "average_positive_intensity": 0,
        "average_negative_intensity": 0,
        "sentiment_trend": [],
        "most_positive_review": None,
        "most_negative_review": None,
        "emotion_breakdown": [],
        "sentiment_by_rating": [],
        "rating_text_alignment": 0,
        "sarcasm_suspect_count": 0,
        "aspect_sentiments": [],
    }


def compute_sentiment(reviews: list[dict]) -> dict:
    if not reviews:
        return empty_sentiment()

    n = len(reviews)
    by_label = {
        lbl: [r for r in reviews if label(r) == lbl]
        for lbl in (classifier.POSITIVE, classifier.NEGATIVE,
                    classifier.NEUTRAL, classifier.MIXED)
    }
    avg_pos = mean(compound(r) for r in by_label[classifier.POSITIVE])
    avg_neg = mean(abs(compound(r)) for r in by_label[classifier.NEGATIVE])

    if avg_pos > avg_neg:
        overall_label = classifier.POSITIVE
    elif avg_neg > avg_pos:
        overall_label = classifier.NEGATIVE
    else:
        overall_label = classifier.NEUTRAL

    text_reviews = [r for r in reviews if has_text(r)]
    most_positive = most_negative = None
    if text_reviews:
        most_positive = _example(max(text_reviews, key=compound))
        most_negative = _example(min(text_reviews, key=compound))

    emotion_counts: dict[str, int] = {}
    for r in reviews:
        emotion = r["sentiment"]["emotion"]
        emotion_counts[emotion] = emotion_counts.get(emotion, 0) + 1
    emotion_breakdown = [
        {"emotion": emotion, "count": count, "percentage": round(pct(count, n), 1)}
        for emotion, count in sorted(emotion_counts.items(), key=lambda x: -x[1])
    ]

    by_rating: dict[int, list[float]] = {}
    for r in reviews:
        by_rating.setdefault(r["rating"], []).append(compound(r))
    sentiment_by_rating = [
        {"rating": rating, "avg_sentiment": round(mean(scores), 3)}
        for rating, scores in sorted(by_rating.items())
    ]

    # Alignment only makes sense where there is enough text to judge.
    judged = [
        r for r in reviews
        if len(r.get("review_text") or "") > _ALIGNMENT_MIN_TEXT_CHARS
    ]
    aligned = sum(1 for r in judged if _aligned(r))
    sarcasm = sum(1 for r in judged if _contradicts(r))

    aspect_tally: dict[str, dict] = {}
    for r in reviews:
        for aspect in r["sentiment"]["aspects"]:
            tally = aspect_tally.setdefault(
                aspect["aspect"], {"positive": 0, "negative": 0, "neutral": 0}
            )
            tally[aspect["sentiment"]] += 1
    aspect_sentiments = [
        {"aspect": aspect, **tally} for aspect, tally in aspect_tally.items()
    ]

    sentiment_trend = [
        {"period": month, "score": round(mean(compound(r) for r in group), 3)}
        for month, group in dated_months(reviews).items()
    ]

    return {
        "overall_score": round(mean(compound(r) for r in reviews), 3),
        "overall_label": overall_label,
        "positive_count": len(by_label[classifier.POSITIVE]),
        "negative_count": len(by_label[classifier.NEGATIVE]),
        "neutral_count": len(by_label[classifier.NEUTRAL]),
        "mixed_count": len(by_label[classifier.MIXED]),
        "average_positive_intensity": round(avg_pos, 3),
        "average_negative_intensity": round(avg_neg, 3),
        "sentiment_trend": sentiment_trend,
        "most_positive_review": most_positive,
        "most_negative_review": most_negative,
        "emotion_breakdown": emotion_breakdown,
        "sentiment_by_rating": sentiment_by_rating,
        "rating_text_alignment": round(pct(aligned, len(judged))),
        "sarcasm_suspect_count": sarcasm,
        "aspect_sentiments": aspect_sentiments,
    }


def _example(review: dict) -> dict:
    return {
        "text": review["review_text"][:_EXAMPLE_CHARS],
        "score": compound(review),
        "reviewer": review["reviewer_name"],
    }


def _aligned(review: dict) -> bool:
    rating, lbl = review["rating"], label(review)
    if rating >= 4:
        return lbl == classifier.POSITIVE
    if rating <= 2:
        return lbl == classifier.NEGATIVE
    return lbl in (classifier.NEUTRAL, classifier.MIXED)


def _contradicts(review: dict) -> bool:
    rating, lbl = review["rating"], label(review)
    return ((rating >= 4 and lbl == classifier.NEGATIVE)
            or (rating <= 2 and lbl == classifier.POSITIVE))
