"""
Temporal block: review volume over time.

All series are built from dated reviews; reviews whose date could not be
resolved are counted in undated_reviews instead.
"""

from .. import config
from ..dates import dated_months, months_between
from .stats import mean


def empty_temporal() -> dict:
    return {
        "reviews_per_month": [],
        "average_reviews_per_month": 0,
        "busiest_month": "N/A",
        "slowest_month": "N/A",
        "longest_gap": None,
        "recent_trend": "N/A",
        "recency_score": 0,
        "burst_periods": [],
        "first_review_date": "N/A",
        "last_review_date": "N/A",
        "review_lifespan": 0,
        "growth_rate": 0,
        "undated_reviews": 0,
    }


def compute_temporal(reviews: list[dict]) -> dict:
    if not reviews:
        return empty_temporal()

    monthly = dated_months(reviews)
    per_month = [{"month": m, "count": len(group)} for m, group in monthly.items()]
    dated_count = sum(m["count"] for m in per_month)
    undated = len(reviews) - dated_count

    if not per_month:
        block = empty_temporal()
        block["undated_reviews"] = undated
        return block

    counts = [m["count"] for m in per_month]
    avg_per_month = mean(counts)

    busiest = max(per_month, key=lambda m: m["count"])
    slowest = min(per_month, key=lambda m: m["count"])

    window = config.TREND_WINDOW_MONTHS
    recent_avg = mean(counts[-window:])
    previous = counts[-2 * window:-window]
    previous_avg = mean(previous)

    if recent_avg > previous_avg * config.ACCELERATION_RATIO:
        recent_trend = "ACCELERATING"
    elif recent_avg < previous_avg * config.DECELERATION_RATIO:
        recent_trend = "DECELERATING"
    else:
        recent_trend = "STEADY"

    bursts = [
        {"period": m["month"], "count": m["count"],
         "avg_monthly": round(avg_per_month, 1)}
        for m in per_month
        if m["count"] > avg_per_month * config.BURST_MULTIPLIER
    ]

    growth = (recent_avg - previous_avg) / previous_avg * 100 if previous_avg else 0.0
    first, last = per_month[0]["month"], per_month[-1]["month"]

    return {
        "reviews_per_month": per_month,
        "average_reviews_per_month": round(avg_per_month, 1),
        "busiest_month": busiest["month"],
        "slowest_month": slowest["month"],
        "longest_gap": _longest_gap(list(monthly)),
        "recent_trend": recent_trend,
        "recency_score": recency_score(recent_avg),
        "burst_periods": bursts,
        "first_review_date": first,
        "last_review_date": last,
        "review_lifespan": months_between(first, last) + 1,
        "growth_rate": round(growth, 1),
        "undated_reviews": undated,
    }


def recency_score(recent_avg: float) -> int:
    """Coarse 30/50/80/95 banding by recent monthly volume."""
    scores = config.RECENCY_SCORES
    if recent_avg > config.RECENCY_BUSY_VOLUME:
        return scores["busy"]
    if recent_avg > config.RECENCY_ACTIVE_VOLUME:
        return scores["active"]
    if recent_avg < config.RECENCY_QUIET_VOLUME:
        return scores["quiet"]
    return config.RECENCY_DEFAULT


def _longest_gap(months: list[str]) -> dict | None:
    """Largest distance between consecutive months that have reviews."""
    if len(months) < 2:
        return None
    start, end = max(zip(months, months[1:]), key=lambda p: months_between(*p))
    return {"from": start, "to": end, "months": months_between(start, end)}
