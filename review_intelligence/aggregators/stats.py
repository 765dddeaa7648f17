"""
Small numeric helpers shared by the aggregators.

Every ratio is zero-guarded: an empty denominator yields 0, never a
ZeroDivisionError, NaN or infinity.
"""

import math
from datetime import datetime

_EPOCH = datetime(1970, 1, 1)


def pct(part: float, whole: float) -> float:
    return part / whole * 100 if whole else 0.0


def mean(values) -> float:
    values = list(values)
    return sum(values) / len(values) if values else 0.0


def shannon_entropy(counts) -> float:
    """Shannon entropy (bits) of a frequency distribution."""
    counts = [c for c in counts if c > 0]
    total = sum(counts)
    if not total:
        return 0.0
    return -sum((c / total) * math.log2(c / total) for c in counts)


def band_label(value: float, bands: list[tuple[float, str]]) -> str:
    """First label whose minimum the value reaches, checked top-down."""
    for minimum, label in bands:
        if value >= minimum:
            return label
    return bands[-1][1]


def compound(review: dict) -> float:
    return review["sentiment"]["compound"]


def label(review: dict) -> str:
    return review["sentiment"]["label"]


def has_text(review: dict) -> bool:
    text = review.get("review_text")
    return bool(text and text.strip())


def has_response(review: dict) -> bool:
    text = review.get("response_text")
    return bool(text and text.strip())


def first_name(reviewer_name: str) -> str:
    parts = reviewer_name.split()
    return parts[0] if parts else ""


def recency_key(review: dict) -> tuple:
    """Sort key: most recent first, undated last, input order breaks ties."""
    published = review.get("published_at")
    if published is None:
        return (1, 0.0)
    return (0, -(published - _EPOCH).total_seconds())
