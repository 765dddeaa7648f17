"""Tests for input coercion and deduplication."""

from __future__ import annotations

import logging

import pytest

from review_intelligence.normalizer import (
    ReviewValidationError,
    coerce_review,
    fingerprint,
    normalize,
)


# --- Coercion tests ---

def test_coerce_maps_source_field_names():
    """camelCase source fields are renamed to the engine's field names."""
    review = coerce_review({
        "reviewerName": "Ana Ruiz",
        "rating": 4,
        "text": "Solid service.",
        "publishedDate": "a week ago",
        "reviewCount": 12,
        "localGuideLevel": 2,
    })
    assert review["reviewer_name"] == "Ana Ruiz"
    assert review["review_text"] == "Solid service."
    assert review["published_date"] == "a week ago"
    assert review["review_count"] == 12
    assert review["local_guide_level"] == 2


def test_coerce_missing_optionals_are_none():
    """Absent optional fields come back as None, never zero."""
    review = coerce_review({"reviewer_name": "Ana", "rating": 3})
    assert review["photo_count"] is None
    assert review["review_count"] is None
    assert review["response_text"] is None


def test_coerce_does_not_mutate_input():
    record = {"reviewerName": "Ana", "rating": 3}
    coerce_review(record)
    assert record == {"reviewerName": "Ana", "rating": 3}


@pytest.mark.parametrize("record", [
    {"rating": 5},
    {"reviewer_name": "   ", "rating": 5},
    {"reviewer_name": "Ana", "rating": 0},
    {"reviewer_name": "Ana", "rating": 6},
    {"reviewer_name": "Ana", "rating": "5"},
    {"reviewer_name": "Ana", "rating": True},
    {"reviewer_name": "Ana", "rating": 5, "review_count": "12"},
])
def test_coerce_rejects_contract_violations(record):
    with pytest.raises(ReviewValidationError):
        coerce_review(record)


def test_validation_error_names_the_record():
    with pytest.raises(ReviewValidationError, match=r"review\[7\]"):
        coerce_review({"reviewer_name": "Ana", "rating": 9}, index=7)


# --- Deduplication tests ---

def test_fingerprint_ignores_case_and_outer_whitespace(make_review):
    a = make_review(reviewer_name="John Smith ", review_text="Great Service here")
    b = make_review(reviewer_name="john smith", review_text="great service here")
    assert fingerprint(a) == fingerprint(b)


def test_normalize_keeps_first_occurrence(make_review):
    """Same name, rating and 50-char prefix: the first record wins."""
    prefix = "The technician arrived on time and fixed the leak quickly, "
    first = make_review(review_text=prefix + "very happy.", response_text="first")
    second = make_review(review_text=prefix + "would use again.", response_text="second")
    result = normalize([first, second])
    assert len(result) == 1
    assert result[0]["response_text"] == "first"


def test_normalize_distinguishes_rating(make_review):
    reviews = [make_review(rating=5), make_review(rating=4)]
    assert len(normalize(reviews)) == 2


def test_normalize_preserves_input_order(make_review):
    reviews = [make_review(reviewer_name=name) for name in ("Cy", "Al", "Bo", "Al")]
    assert [r["reviewer_name"] for r in normalize(reviews)] == ["Cy", "Al", "Bo"]


def test_normalize_is_idempotent(make_review):
    reviews = [
        make_review(reviewer_name="Al"),
        make_review(reviewer_name="Al"),
        make_review(reviewer_name="Bo", review_text=None),
        make_review(reviewer_name="Bo", review_text=""),
    ]
    once = normalize(reviews)
    assert normalize(once) == once
    assert len(once) == 2


def test_normalize_logs_duplicate_count(make_review, caplog):
    reviews = [make_review(), make_review(), make_review()]
    with caplog.at_level(logging.WARNING, logger="review_intelligence.normalizer"):
        normalize(reviews)
    assert "Deduplicated 2 duplicate review(s)" in caplog.text


def test_normalize_empty():
    assert normalize([]) == []


def test_normalize_accepts_source_field_names():
    """camelCase source records are coerced before fingerprinting."""
    record = {"reviewerName": "Ann", "rating": 5, "text": "Great service!"}
    result = normalize([record, dict(record)])
    assert len(result) == 1
    assert result[0]["reviewer_name"] == "Ann"
    assert result[0]["review_text"] == "Great service!"


def test_normalize_rejects_invalid_records():
    with pytest.raises(ReviewValidationError):
        normalize([{"reviewerName": "Ann", "rating": 0}])
