"""Shared fixtures: raw review factory and single-review enrichment."""

from __future__ import annotations

from datetime import datetime

import pytest

from review_intelligence.enrichment import enrich_review

FIXED_NOW = datetime(2026, 1, 29, 14, 0, 0)


def _raw_review(**overrides) -> dict:
    review = {
        "reviewer_name": "Jordan Lee",
        "rating": 5,
        "review_text": "Lovely little bakery with friendly staff and great coffee.",
        "published_date": "2 weeks ago",
        "response_text": None,
        "response_date": None,
        "review_count": 25,
        "photo_count": 4,
        "local_guide_level": 3,
    }
    review.update(overrides)
    return review


@pytest.fixture
def make_review():
    """Factory for a well-formed raw review; keyword arguments override fields."""
    return _raw_review


@pytest.fixture
def enrich():
    """Factory returning an enriched review, dates resolved against FIXED_NOW."""
    def _enrich(**overrides) -> dict:
        return enrich_review(_raw_review(**overrides), FIXED_NOW)
    return _enrich
