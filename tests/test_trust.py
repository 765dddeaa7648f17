"""Tests for fake-review likelihood scoring."""

from __future__ import annotations

from review_intelligence.sentiment import NEGATIVE, POSITIVE, classify_sentiment
from review_intelligence.trust import is_likely_fake, score_review


def _score(review: dict, label: str | None = None) -> dict:
    sentiment = classify_sentiment(review.get("review_text"), review["rating"])
    if label is not None:
        sentiment = {**sentiment, "label": label}
    return score_review(review, sentiment)


# --- Rule tests ---

def test_established_reviewer_scores_zero(make_review):
    review = make_review(
        rating=4,
        review_text="Booked a last-minute appointment and they fitted us in the same afternoon.",
        review_count=120,
        photo_count=40,
        local_guide_level=6,
    )
    result = _score(review)
    assert result == {"score": 0, "reasons": []}


def test_rating_only_single_review_account(make_review):
    """No text, first-ever review, no photos: likely fake with traceable reasons."""
    review = make_review(
        review_text=None, review_count=1, photo_count=0, local_guide_level=None,
    )
    result = _score(review)
    assert result["score"] >= 40
    assert is_likely_fake(result["score"])
    assert "No review text provided" in result["reasons"]
    assert "Single-review account (first/only review)" in result["reasons"]
    assert "No photos ever uploaded" in result["reasons"]
    assert "Not a Local Guide" in result["reasons"]


def test_no_text_and_short_text_are_exclusive(make_review):
    result = _score(make_review(review_text=None))
    assert "Extremely short review text" not in result["reasons"]
    result = _score(make_review(review_text="Ok."))
    assert "Extremely short review text" in result["reasons"]
    assert "No review text provided" not in result["reasons"]


def test_few_reviews_account(make_review):
    result = _score(make_review(review_count=3))
    assert "Very few total reviews on account" in result["reasons"]
    assert "Single-review account (first/only review)" not in result["reasons"]


def test_unknown_review_count_is_not_penalised(make_review):
    result = _score(make_review(review_count=None))
    assert "Very few total reviews on account" not in result["reasons"]
    assert "Single-review account (first/only review)" not in result["reasons"]


def test_generic_text(make_review):
    result = _score(make_review(review_text="Great place"))
    assert "Generic/boilerplate review text" in result["reasons"]


def test_all_caps(make_review):
    result = _score(make_review(rating=1, review_text="WORST PLUMBER IN THE COUNTY"))
    assert "Entire review in ALL CAPS" in result["reasons"]


def test_rating_text_inconsistency(make_review):
    five = _score(make_review(rating=5), label=NEGATIVE)
    assert "5-star rating but negative text sentiment (inconsistent)" in five["reasons"]
    one = _score(make_review(rating=1), label=POSITIVE)
    assert "1-star rating but positive text sentiment (inconsistent)" in one["reasons"]


def test_repetitive_text(make_review):
    result = _score(make_review(review_text="good good good good good good good nice"))
    assert "Highly repetitive text" in result["reasons"]


# --- Bounds tests ---

def test_score_is_clamped(make_review):
    worst = make_review(
        rating=5,
        review_text="GOOD GOOD GOOD GOOD GOOD GOOD",
        review_count=1,
        photo_count=None,
        local_guide_level=None,
    )
    result = _score(worst, label=NEGATIVE)
    assert 0 <= result["score"] <= 100


def test_threshold():
    assert not is_likely_fake(49)
    assert is_likely_fake(50)
