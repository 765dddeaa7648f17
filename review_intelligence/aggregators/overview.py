"""
Overview block: headline numbers, composite scores, health grade.

Composite scores:
  NPS          = %rating>=4 - %rating<=2
  CSI          = avg rating / 5 * 100
  Authenticity = 100 - fake %
  Engagement   = 0.5 * response rate + 0.5 * % reviews with >10 chars text
  Health       = 50
                 + (avg rating - 3) * 10
                 + avg compound * 15            (capped at +/-12)
                 + response rate / 4            (capped at 12)
                 - fake % / 4
                 + NPS / 10                     (capped at +/-8)
                 clamped to [0, 100]
"""

import statistics

from .. import config
from ..dates import dated_months
from ..trust import is_likely_fake
from .stats import band_label, compound, has_response, mean, pct


def empty_overview() -> dict:
    return {
        "total_reviews": 0,
        "average_rating": 0,
        "rating_median": 0,
        "sentiment_score": 0,
        "response_rate": 0,
        "fake_review_percentage": 0,
        "net_promoter_score": 0,
        "customer_satisfaction_index": 0,
        "review_authenticity_score": 0,
        "engagement_score": 0,
        "health_score": 0,
        "grade_label": "N/A",
        "strengths_summary": [],
        "weaknesses_summary": ["No reviews to analyze"],
        "risk_alerts": [],
        "reputation_momentum": "STABLE",
    }


def compute_overview(reviews: list[dict]) -> dict:
    if not reviews:
        return empty_overview()

    n = len(reviews)
    ratings = [r["rating"] for r in reviews]
    avg_rating = mean(ratings)
    avg_sentiment = mean(compound(r) for r in reviews)
    response_rate = pct(sum(1 for r in reviews if has_response(r)), n)
    fake_pct = pct(sum(1 for r in reviews if is_likely_fake(r["fake_score"])), n)

    promoters = pct(sum(1 for x in ratings if x >= 4), n)
    detractors = pct(sum(1 for x in ratings if x <= 2), n)
    nps = round(promoters - detractors)

    csi = round(avg_rating / 5 * 100)
    authenticity = round(100 - fake_pct)

    text_rate = pct(
        sum(1 for r in reviews
            if len(r.get("review_text") or "") > config.ENGAGEMENT_TEXT_MIN_CHARS),
        n,
    )
    engagement = round(response_rate * 0.5 + text_rate * 0.5)

    health = _health_score(avg_rating, avg_sentiment, response_rate, fake_pct, nps)

    strengths = []
    if avg_rating >= 4.5:
        strengths.append("Exceptional average rating")
    elif avg_rating >= 4.0:
        strengths.append("Strong average rating")
    if response_rate > 80:
        strengths.append("Excellent response rate")
    elif response_rate > 50:
        strengths.append("Good response rate")
    if avg_sentiment > 0.15:
        strengths.append("Highly positive sentiment in reviews")
    if fake_pct < 5:
        strengths.append("Very authentic review base")
    if nps > 50:
        strengths.append("Outstanding Net Promoter Score")
    if text_rate > 70:
        strengths.append("High review detail (most reviews have text)")

    weaknesses = []
    if avg_rating < 3.5:
        weaknesses.append("Below-average rating")
    if response_rate < 30:
        weaknesses.append("Low response rate to reviews")
    if avg_sentiment < -0.05:
        weaknesses.append("Overall negative sentiment")
    if nps < 0:
        weaknesses.append("Negative Net Promoter Score")
    if text_rate < 30:
        weaknesses.append("Most reviews lack detail (no text)")

    risks = []
    if fake_pct > 20:
        risks.append(f"{fake_pct:.0f}% of reviews flagged as potentially fake")
    if detractors > 20:
        risks.append(f"{detractors:.0f}% of reviews are 1-2 stars")
    unresponded_negatives = sum(
        1 for r in reviews if r["rating"] <= 2 and not has_response(r)
    )
    if unresponded_negatives > 3:
        risks.append(f"{unresponded_negatives} negative reviews without owner response")

    return {
        "total_reviews": n,
        "average_rating": round(avg_rating, 2),
        "rating_median": statistics.median(ratings),
        "sentiment_score": round(avg_sentiment, 3),
        "response_rate": round(response_rate, 1),
        "fake_review_percentage": round(fake_pct, 1),
        "net_promoter_score": nps,
        "customer_satisfaction_index": csi,
        "review_authenticity_score": authenticity,
        "engagement_score": engagement,
        "health_score": round(health),
        "grade_label": band_label(health, config.GRADE_BANDS),
        "strengths_summary": strengths,
        "weaknesses_summary": weaknesses,
        "risk_alerts": risks,
        "reputation_momentum": _momentum(reviews),
    }


def _health_score(avg_rating, avg_sentiment, response_rate, fake_pct, nps) -> float:
    sentiment_cap = config.HEALTH_SENTIMENT_CAP
    nps_cap = config.HEALTH_NPS_CAP

    health = config.HEALTH_BASE
    health += (avg_rating - 3) * config.HEALTH_RATING_WEIGHT
    health += max(-sentiment_cap,
                  min(sentiment_cap, avg_sentiment * config.HEALTH_SENTIMENT_WEIGHT))
    health += min(response_rate / config.HEALTH_RESPONSE_DIVISOR,
                  config.HEALTH_RESPONSE_CAP)
    health -= fake_pct / config.HEALTH_FAKE_DIVISOR
    health += max(-nps_cap, min(nps_cap, nps / config.HEALTH_NPS_DIVISOR))
    return max(0.0, min(100.0, health))


def _momentum(reviews: list[dict]) -> str:
    """Last 3 dated months vs the 3 before; needs 6 dated months."""
    window = config.MOMENTUM_WINDOW_MONTHS
    monthly = dated_months(reviews)
    if len(monthly) < window * 2:
        return "STABLE"

    month_avgs = [mean(r["rating"] for r in group) for group in monthly.values()]
    recent = mean(month_avgs[-window:])
    older = mean(month_avgs[-2 * window:-window])

    if recent > older + config.MOMENTUM_THRESHOLD:
        return "RISING"
    if recent < older - config.MOMENTUM_THRESHOLD:
        return "FALLING"
    return "STABLE"
