"""
Ratings block: distribution, spread, trend and robust averages.

Monthly series use dated reviews only; the number left out is reported
as undated_reviews.

Bayesian average (IMDB formula):
    (v / (v + m)) * R + (m / (v + m)) * C
with C = 3.5 prior mean and m = 10 pseudo-votes, so a handful of
5-star reviews does not read as a perfect 5.0.
"""

import math

from .. import config
from ..dates import dated_months
from .stats import mean, pct, shannon_entropy


def empty_ratings() -> dict:
    return {
        "distribution": [
            {"rating": rating, "count": 0, "percentage": 0} for rating in range(1, 6)
        ],
        "standard_deviation": 0,
        "rating_trend": [],
        "rating_velocity": 0,
        "improving_or_declining": "N/A",
        "five_star_ratio": 0,
        "one_star_ratio": 0,
        "polarization_index": 0,
        "recent_vs_overall_delta": 0,
        "anomaly_periods": [],
        "weighted_rating": 0,
        "bayesian_average": 0,
        "rating_entropy": 0,
        "undated_reviews": 0,
    }


def bayesian_average(ratings: list[int]) -> float:
    v = len(ratings)
    m = config.BAYESIAN_MIN_VOTES
    return (v / (v + m)) * mean(ratings) + (m / (v + m)) * config.BAYESIAN_PRIOR_MEAN


def compute_ratings(reviews: list[dict]) -> dict:
    if not reviews:
        return empty_ratings()

    n = len(reviews)
    ratings = [r["rating"] for r in reviews]
    counts = {rating: 0 for rating in range(1, 6)}
    for rating in ratings:
        counts[rating] += 1

    distribution = [
        {"rating": rating, "count": count, "percentage": round(pct(count, n), 1)}
        for rating, count in counts.items()
    ]

    avg = mean(ratings)
    std_dev = math.sqrt(mean((x - avg) ** 2 for x in ratings))

    monthly = dated_months(reviews)
    dated_count = sum(len(group) for group in monthly.values())
    rating_trend = [
        {
            "period": month,
            "avg_rating": round(mean(r["rating"] for r in group), 2),
            "count": len(group),
        }
        for month, group in monthly.items()
    ]
    velocity = dated_count / (len(monthly) or 1)

    window = config.TREND_WINDOW_MONTHS
    recent = rating_trend[-window:]
    older = rating_trend[:max(1, len(rating_trend) - window)]
    recent_avg = mean(m["avg_rating"] for m in recent) if recent else avg
    older_avg = mean(m["avg_rating"] for m in older) if older else avg
    delta = recent_avg - older_avg

    if delta > config.RATING_TREND_THRESHOLD:
        trend = "IMPROVING"
    elif delta < -config.RATING_TREND_THRESHOLD:
        trend = "DECLINING"
    else:
        trend = "STABLE"

    anomalies = []
    for month in rating_trend:
        if month["count"] > velocity * config.RATING_SPIKE_MULTIPLIER:
            anomalies.append({
                "period": month["period"],
                "reason": f"Spike: {month['count']} reviews (avg: {velocity:.0f})",
            })
        if month["avg_rating"] < avg - config.RATING_DROP_MARGIN:
            anomalies.append({
                "period": month["period"],
                "reason": f"Rating drop: {month['avg_rating']} (avg: {avg:.1f})",
            })

    return {
        "distribution": distribution,
        "standard_deviation": round(std_dev, 2),
        "rating_trend": rating_trend,
        "rating_velocity": round(velocity, 1),
        "improving_or_declining": trend,
        "five_star_ratio": round(pct(counts[5], n), 1),
        "one_star_ratio": round(pct(counts[1], n), 1),
        "polarization_index": round((counts[1] + counts[5]) / n, 2),
        "recent_vs_overall_delta": round(delta, 2),
        "anomaly_periods": anomalies,
        "weighted_rating": round(_recency_weighted(reviews, list(monthly)), 2),
        "bayesian_average": round(bayesian_average(ratings), 2),
        "rating_entropy": round(shannon_entropy(counts.values()), 3),
        "undated_reviews": n - dated_count,
    }


def _recency_weighted(reviews: list[dict], months: list[str]) -> float:
    """
    Average rating where later months weigh more: 1 + month_index / n_months.

    Undated reviews get the base weight of 1.
    """
    index = {month: i for i, month in enumerate(months)}
    span = len(months) or 1

    weighted_sum = weight_sum = 0.0
    for r in reviews:
        weight = 1 + index.get(r["month"], 0) / span
        weighted_sum += r["rating"] * weight
        weight_sum += weight
    return weighted_sum / weight_sum if weight_sum else 0.0
