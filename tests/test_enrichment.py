"""Tests for the enrichment stage."""

from __future__ import annotations

from datetime import datetime, timedelta

from review_intelligence.dates import UNKNOWN
from review_intelligence.enrichment import enrich_review, enrich_reviews

FIXED_NOW = datetime(2026, 1, 29, 14, 0, 0)


def test_enrich_adds_derived_fields(make_review):
    raw = make_review(response_text="Thanks Jordan!", response_date="a week ago")
    enriched = enrich_review(raw, FIXED_NOW)

    assert enriched["sentiment"]["label"] == "POSITIVE"
    assert enriched["word_count"] == 9
    assert 0 <= enriched["fake_score"] <= 100
    assert isinstance(enriched["fake_reasons"], list)
    assert enriched["published_at"] == FIXED_NOW - timedelta(weeks=2)
    assert enriched["responded_at"] == FIXED_NOW - timedelta(weeks=1)
    assert enriched["month"] == "2026-01"


def test_enrich_does_not_mutate_raw(make_review):
    raw = make_review()
    enrich_review(raw, FIXED_NOW)
    assert "sentiment" not in raw


def test_enrich_unparseable_date(make_review):
    enriched = enrich_review(make_review(published_date="last summer"), FIXED_NOW)
    assert enriched["published_at"] is None
    assert enriched["month"] == UNKNOWN


def test_enrich_rating_only_review(make_review):
    enriched = enrich_review(make_review(review_text=None, rating=2), FIXED_NOW)
    assert enriched["word_count"] == 0
    assert enriched["sentiment"]["label"] == "NEGATIVE"


# --- Progress reporting tests ---

def test_progress_callback_every_fifty_and_at_end(make_review):
    reviews = [make_review(reviewer_name=f"Reviewer {i}") for i in range(120)]
    calls = []
    enrich_reviews(reviews, now=FIXED_NOW, progress_callback=lambda d, t: calls.append((d, t)))
    assert calls == [(50, 120), (100, 120), (120, 120)]


def test_progress_callback_not_repeated_on_exact_multiple(make_review):
    reviews = [make_review(reviewer_name=f"Reviewer {i}") for i in range(100)]
    calls = []
    enrich_reviews(reviews, now=FIXED_NOW, progress_callback=lambda d, t: calls.append((d, t)))
    assert calls == [(50, 100), (100, 100)]


def test_enrich_reviews_empty():
    assert enrich_reviews([], now=FIXED_NOW) == []
