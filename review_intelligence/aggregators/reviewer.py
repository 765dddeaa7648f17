"""
Reviewer block: who writes the reviews.
"""

from .stats import mean

_TOP_REVIEWERS = 10


def empty_reviewer() -> dict:
    return {
        "average_reviews_per_reviewer": 0,
        "average_photos_per_reviewer": 0,
        "top_reviewers": [],
        "returning_reviewers": 0,
        "reviewer_loyalty_indicators": [],
    }


def compute_reviewer(reviews: list[dict]) -> dict:
    if not reviews:
        return empty_reviewer()

    profiles: dict[str, dict] = {}
    for r in reviews:
        profile = profiles.setdefault(r["reviewer_name"], {
            "count": 0, "total_rating": 0, "review_count": None, "local_guide": False,
        })
        profile["count"] += 1
        profile["total_rating"] += r["rating"]
        if r.get("review_count") is not None:
            profile["review_count"] = max(profile["review_count"] or 0, r["review_count"])
        if r.get("local_guide_level"):
            profile["local_guide"] = True

    avg_per_reviewer = len(reviews) / len(profiles)
    # Unknown photo counts are left out rather than read as zero.
    avg_photos = mean(r["photo_count"] for r in reviews if r.get("photo_count") is not None)

    ranked = sorted(
        profiles.items(),
        key=lambda item: (-item[1]["count"], -(item[1]["review_count"] or 0)),
    )[:_TOP_REVIEWERS]
    top_reviewers = [
        {
            "name": name,
            "review_count": p["count"],
            "profile_review_count": p["review_count"],
            "avg_rating": round(p["total_rating"] / p["count"], 1),
            "is_local_guide": p["local_guide"],
        }
        for name, p in ranked
    ]

    returning = sum(1 for p in profiles.values() if p["count"] > 1)

    indicators = []
    if returning > 0:
        indicators.append(f"{returning} reviewer(s) left multiple reviews (updated or returned)")
    if avg_per_reviewer > 1.1:
        indicators.append("Some reviewers have visited multiple times")

    return {
        "average_reviews_per_reviewer": round(avg_per_reviewer, 2),
        "average_photos_per_reviewer": round(avg_photos, 1),
        "top_reviewers": top_reviewers,
        "returning_reviewers": returning,
        "reviewer_loyalty_indicators": indicators,
    }
