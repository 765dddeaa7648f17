"""
Legitimacy block: how trustworthy the review base looks as a whole.

Reviewer diversity is the Shannon entropy of reviewer-name frequencies
normalised by log2(distinct reviewers): 1.0 means every review comes from
a different person, values near 0 mean a few names dominate.
"""

import math

from .. import config
from ..dates import dated_months
from ..trust import is_likely_fake
from .stats import has_text, mean, pct, shannon_entropy

_SUSPICIOUS_TEXT_CHARS = 200


def empty_legitimacy() -> dict:
    return {
        "overall_trust_score": 0,
        "total_suspicious": 0,
        "suspicious_percentage": 0,
        "local_guide_count": 0,
        "local_guide_percentage": 0,
        "local_guide_levels": [],
        "one_review_only": 0,
        "one_review_percentage": 0,
        "low_effort_reviews": 0,
        "low_effort_percentage": 0,
        "rating_only_reviews": 0,
        "rating_only_percentage": 0,
        "photoless_reviewers": 0,
        "photoless_percentage": 0,
        "velocity_spikes": [],
        "suspicious_patterns": [],
        "fake_score_distribution": [
            {"range": band, "count": 0} for _, band in config.FAKE_SCORE_BANDS
        ],
        "top_suspicious_reviews": [],
        "reviewer_diversity_index": 0,
        "duplicate_content_count": 0,
        "average_reviewer_experience": 0,
    }


def compute_legitimacy(reviews: list[dict]) -> dict:
    if not reviews:
        return empty_legitimacy()

    n = len(reviews)
    suspicious = [r for r in reviews if is_likely_fake(r["fake_score"])]
    single_review = [
        r for r in reviews
        if r.get("review_count") is not None and r["review_count"] <= 1
    ]
    no_text = [r for r in reviews if not has_text(r)]
    low_effort = [r for r in reviews if r["word_count"] < config.LOW_EFFORT_WORDS]
    photoless = [r for r in reviews if not r.get("photo_count")]
    local_guides = [r for r in reviews if r.get("local_guide_level")]

    guide_levels: dict[int, int] = {}
    for r in local_guides:
        level = r["local_guide_level"]
        guide_levels[level] = guide_levels.get(level, 0) + 1

    # Velocity spikes over dated months only.
    monthly = dated_months(reviews)
    dated_count = sum(len(group) for group in monthly.values())
    avg_monthly = dated_count / max(len(monthly), 1)
    spikes = [
        {"period": month, "count": len(group), "normal": round(avg_monthly)}
        for month, group in monthly.items()
        if len(group) > avg_monthly * config.VELOCITY_SPIKE_MULTIPLIER
    ]

    prefix_counts: dict[str, int] = {}
    for r in reviews:
        text = r.get("review_text") or ""
        if len(text) > config.DUPLICATE_MIN_TEXT_CHARS:
            prefix = text.lower().strip()[:config.DUPLICATE_PREFIX_CHARS]
            prefix_counts[prefix] = prefix_counts.get(prefix, 0) + 1
    duplicate_count = sum(c for c in prefix_counts.values() if c > 1)

    patterns = []
    single_share = len(single_review) / n
    if single_share > config.SINGLE_REVIEW_PATTERN_SHARE:
        patterns.append(f"{single_share * 100:.0f}% of reviewers have only 1 review")
    no_text_share = len(no_text) / n
    if no_text_share > config.NO_TEXT_PATTERN_SHARE:
        patterns.append(f"{no_text_share * 100:.0f}% of reviews have no text")
    if len(spikes) > 2:
        patterns.append(f"{len(spikes)} unusual review volume spikes detected")
    if duplicate_count > 2:
        patterns.append(f"{duplicate_count} reviews with duplicate/near-duplicate text")

    reviewer_counts: dict[str, int] = {}
    for r in reviews:
        name = r["reviewer_name"]
        reviewer_counts[name] = reviewer_counts.get(name, 0) + 1
    diversity = 0.0
    if len(reviewer_counts) > 1:
        diversity = shannon_entropy(reviewer_counts.values()) / math.log2(len(reviewer_counts))

    experience = [r["review_count"] for r in reviews if r.get("review_count") is not None]

    ranked = sorted(reviews, key=lambda r: -r["fake_score"])[:config.TOP_SUSPICIOUS]
    top_suspicious = [
        {
            "reviewer": r["reviewer_name"],
            "rating": r["rating"],
            "text": (r.get("review_text") or "No text")[:_SUSPICIOUS_TEXT_CHARS],
            "score": r["fake_score"],
            "reasons": list(r["fake_reasons"]),
        }
        for r in ranked
        if r["fake_score"] >= config.SUSPICIOUS_LISTING_MIN_SCORE
    ]

    suspicious_pct = pct(len(suspicious), n)

    return {
        "overall_trust_score": round(max(0.0, min(100.0, 100 - suspicious_pct))),
        "total_suspicious": len(suspicious),
        "suspicious_percentage": round(suspicious_pct, 1),
        "local_guide_count": len(local_guides),
        "local_guide_percentage": round(pct(len(local_guides), n), 1),
        "local_guide_levels": [
            {"level": level, "count": count}
            for level, count in sorted(guide_levels.items())
        ],
        "one_review_only": len(single_review),
        "one_review_percentage": round(pct(len(single_review), n), 1),
        "low_effort_reviews": len(low_effort),
        "low_effort_percentage": round(pct(len(low_effort), n), 1),
        "rating_only_reviews": len(no_text),
        "rating_only_percentage": round(pct(len(no_text), n), 1),
        "photoless_reviewers": len(photoless),
        "photoless_percentage": round(pct(len(photoless), n), 1),
        "velocity_spikes": spikes,
        "suspicious_patterns": patterns,
        "fake_score_distribution": _fake_score_distribution(reviews),
        "top_suspicious_reviews": top_suspicious,
        "reviewer_diversity_index": round(diversity, 3),
        "duplicate_content_count": duplicate_count,
        "average_reviewer_experience": round(mean(experience), 1),
    }


def _fake_score_distribution(reviews: list[dict]) -> list[dict]:
    counts = {band: 0 for _, band in config.FAKE_SCORE_BANDS}
    for r in reviews:
        for upper, band in config.FAKE_SCORE_BANDS:
            if r["fake_score"] <= upper:
                counts[band] += 1
                break
    return [{"range": band, "count": count} for band, count in counts.items()]
