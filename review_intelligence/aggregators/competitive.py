"""
Competitive block: the overview measured against industry averages for
local businesses.
"""

from .. import config
from .stats import band_label


def empty_competitive() -> dict:
    return {
        "industry_benchmark": [],
        "strengths_vs_competitors": [],
        "weaknesses_vs_competitors": [],
        "market_positioning": "Unknown",
    }


def _row(metric: str, yours: float, benchmark: float, verdict: str) -> dict:
    return {"metric": metric, "yours": yours, "benchmark": benchmark, "verdict": verdict}


def compute_competitive(reviews: list[dict], overview: dict) -> dict:
    if not reviews:
        return empty_competitive()

    rating = overview["average_rating"]
    response_rate = overview["response_rate"]
    authenticity = overview["review_authenticity_score"]
    nps = overview["net_promoter_score"]
    engagement = overview["engagement_score"]

    if nps >= config.BENCHMARK_NPS:
        nps_verdict = "Strong"
    elif nps >= 0:
        nps_verdict = "Average"
    else:
        nps_verdict = "Weak"

    benchmarks = [
        _row("Average Rating", rating, config.BENCHMARK_AVERAGE_RATING,
             "Above Average" if rating >= config.BENCHMARK_AVERAGE_RATING else "Below Average"),
        _row("Response Rate", response_rate, config.BENCHMARK_RESPONSE_RATE,
             "Above Average" if response_rate >= config.BENCHMARK_RESPONSE_RATE else "Below Average"),
        _row("Review Authenticity", authenticity, config.BENCHMARK_AUTHENTICITY,
             "Healthy" if authenticity >= config.BENCHMARK_AUTHENTICITY else "Needs Attention"),
        _row("Net Promoter Score", nps, config.BENCHMARK_NPS, nps_verdict),
        _row("Engagement Score", engagement, config.BENCHMARK_ENGAGEMENT,
             "Good" if engagement >= config.BENCHMARK_ENGAGEMENT else "Needs Improvement"),
    ]

    strengths = []
    weaknesses = []
    for b in benchmarks:
        yours, benchmark = b["yours"], b["benchmark"]
        if yours >= benchmark * config.BENCHMARK_STRENGTH_RATIO:
            strengths.append(
                f"{b['metric']} is {(yours / benchmark - 1) * 100:.0f}% above industry average"
            )
        if yours < benchmark * config.BENCHMARK_WEAKNESS_RATIO:
            weaknesses.append(
                f"{b['metric']} is {(1 - yours / benchmark) * 100:.0f}% below industry average"
            )

    return {
        "industry_benchmark": benchmarks,
        "strengths_vs_competitors": strengths,
        "weaknesses_vs_competitors": weaknesses,
        "market_positioning": band_label(overview["health_score"], config.POSITIONING_BANDS),
    }
