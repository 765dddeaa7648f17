"""Tests for the metric aggregators."""

from __future__ import annotations

import pytest

from review_intelligence.aggregators import (
    compute_competitive,
    compute_content,
    compute_legitimacy,
    compute_overview,
    compute_ratings,
    compute_responses,
    compute_reviewer,
    compute_sentiment,
    compute_temporal,
    empty_competitive,
    empty_content,
    empty_legitimacy,
    empty_overview,
    empty_ratings,
    empty_responses,
    empty_reviewer,
    empty_sentiment,
    empty_temporal,
)
from review_intelligence.aggregators.content import compute_readability
from review_intelligence.aggregators.ratings import bayesian_average
from review_intelligence.aggregators.stats import band_label, pct, shannon_entropy
from review_intelligence.aggregators.temporal import recency_score
from review_intelligence import config


# --- Helper tests ---

def test_pct_zero_denominator():
    assert pct(3, 0) == 0.0


def test_shannon_entropy_uniform():
    assert shannon_entropy([5, 5]) == pytest.approx(1.0)
    assert shannon_entropy([]) == 0.0


def test_band_label():
    assert band_label(95, config.GRADE_BANDS) == "A+"
    assert band_label(65, config.GRADE_BANDS) == "B"
    assert band_label(0, config.GRADE_BANDS) == "F"


# --- Empty input tests ---

@pytest.mark.parametrize("compute, empty", [
    (compute_overview, empty_overview),
    (compute_sentiment, empty_sentiment),
    (compute_ratings, empty_ratings),
    (compute_responses, empty_responses),
    (compute_legitimacy, empty_legitimacy),
    (compute_content, empty_content),
    (compute_temporal, empty_temporal),
    (compute_reviewer, empty_reviewer),
])
def test_empty_input_returns_empty_block(compute, empty):
    assert compute([]) == empty()


def test_empty_competitive():
    assert compute_competitive([], empty_overview()) == empty_competitive()
    assert empty_competitive()["market_positioning"] == "Unknown"


def test_empty_overview_labels():
    block = empty_overview()
    assert block["grade_label"] == "N/A"
    assert block["weaknesses_summary"] == ["No reviews to analyze"]


# --- Overview tests ---

def test_nps_balanced_is_zero(enrich):
    reviews = [enrich(reviewer_name=f"Fan {i}", rating=5) for i in range(5)]
    reviews += [
        enrich(reviewer_name=f"Critic {i}", rating=1,
               review_text="Terrible experience, rude staff and a dirty waiting room.")
        for i in range(5)
    ]
    overview = compute_overview(reviews)
    assert overview["net_promoter_score"] == 0
    assert overview["average_rating"] == 3.0
    assert overview["rating_median"] == 3.0
    assert overview["customer_satisfaction_index"] == 60


def test_overview_health_is_bounded_and_graded(enrich):
    reviews = [enrich(reviewer_name=f"Fan {i}") for i in range(8)]
    overview = compute_overview(reviews)
    assert 0 <= overview["health_score"] <= 100
    assert overview["grade_label"] in {grade for _, grade in config.GRADE_BANDS}
    assert "Exceptional average rating" in overview["strengths_summary"]


def test_overview_momentum_needs_six_dated_months(enrich):
    reviews = [enrich(reviewer_name=f"R{i}", published_date=f"{i} months ago") for i in range(1, 4)]
    assert compute_overview(reviews)["reputation_momentum"] == "STABLE"


def test_overview_momentum_rising(enrich):
    old = [enrich(reviewer_name=f"Old {i}", rating=2, published_date=f"{i} months ago")
           for i in range(4, 7)]
    new = [enrich(reviewer_name=f"New {i}", rating=5, published_date=f"{i} months ago")
           for i in range(1, 4)]
    assert compute_overview(old + new)["reputation_momentum"] == "RISING"


# --- Ratings tests ---

def test_bayesian_average_ten_five_stars():
    assert bayesian_average([5] * 10) == pytest.approx(4.25)


def test_ratings_distribution_and_polarization(enrich):
    reviews = [enrich(reviewer_name=f"R{i}", rating=r) for i, r in enumerate([5, 5, 1, 3])]
    ratings = compute_ratings(reviews)
    counts = {d["rating"]: d["count"] for d in ratings["distribution"]}
    assert counts == {1: 1, 2: 0, 3: 1, 4: 0, 5: 2}
    assert ratings["five_star_ratio"] == 50.0
    assert ratings["polarization_index"] == 0.75
    assert ratings["undated_reviews"] == 0


def test_ratings_undated_reviews_counted(enrich):
    reviews = [enrich(reviewer_name="A"), enrich(reviewer_name="B", published_date=None)]
    ratings = compute_ratings(reviews)
    assert ratings["undated_reviews"] == 1
    assert sum(m["count"] for m in ratings["rating_trend"]) == 1


# --- Sentiment tests ---

def test_sentiment_counts_sum_to_total(enrich):
    reviews = [
        enrich(reviewer_name="A"),
        enrich(reviewer_name="B", rating=1,
               review_text="Rude staff and a terrible attitude at the front desk."),
        enrich(reviewer_name="C", rating=3, review_text=None),
    ]
    block = compute_sentiment(reviews)
    total = sum(block[f"{k}_count"] for k in ("positive", "negative", "neutral", "mixed"))
    assert total == 3
    assert block["most_negative_review"]["reviewer"] == "B"
    assert block["rating_text_alignment"] == 100
    assert block["sarcasm_suspect_count"] == 0


# --- Responses tests ---

def test_empathetic_personal_responses(enrich):
    names = ["Maria Lopez", "Tom Baker", "Aisha Khan", "Leo Park"]
    reviews = [
        enrich(
            reviewer_name=name,
            rating=1,
            review_text="Waited an hour and nobody apologised for the delay.",
            response_text=f"Sorry {name.split()[0]}, we will look into this right away.",
        )
        for name in names
    ]
    block = compute_responses(reviews)
    assert block["response_rate_negative"] == 100.0
    assert block["empathy_score"] == 100
    assert block["personalized_rate"] == 100.0
    assert block["defensive_language_rate"] == 0.0
    assert block["template_detection_rate"] == 0.0
    assert block["unresponded_negatives"] == []


def test_template_responses_detected(enrich):
    reviews = [
        enrich(reviewer_name=f"R{i}", response_text="Thank you for your feedback!")
        for i in range(3)
    ]
    assert compute_responses(reviews)["template_detection_rate"] == 100.0


def test_unresponded_negatives_most_recent_first(enrich):
    reviews = [
        enrich(reviewer_name="Older", rating=1, published_date="5 months ago"),
        enrich(reviewer_name="Undated", rating=2, published_date=None),
        enrich(reviewer_name="Newer", rating=2, published_date="3 days ago"),
    ]
    listed = compute_responses(reviews)["unresponded_negatives"]
    assert [u["reviewer"] for u in listed] == ["Newer", "Older", "Undated"]


def test_average_response_time(enrich):
    reviews = [enrich(published_date="3 weeks ago", response_text="Thanks!",
                      response_date="2 weeks ago")]
    assert compute_responses(reviews)["average_response_time"] == "7 day(s)"


def test_response_time_unknown_without_dates(enrich):
    reviews = [enrich(response_text="Thanks!", response_date=None)]
    assert compute_responses(reviews)["average_response_time"] == "N/A"


# --- Legitimacy tests ---

def test_legitimacy_basics(enrich):
    copy = "Best dentist in town, painless cleaning and very gentle staff."
    reviews = [
        enrich(reviewer_name="A", review_text=copy, local_guide_level=5),
        enrich(reviewer_name="B", review_text=copy, local_guide_level=None),
        enrich(reviewer_name="C", review_text=None, review_count=1, photo_count=0,
               local_guide_level=None),
    ]
    block = compute_legitimacy(reviews)
    assert block["local_guide_count"] == 1
    assert block["local_guide_levels"] == [{"level": 5, "count": 1}]
    assert block["duplicate_content_count"] == 2
    assert block["rating_only_reviews"] == 1
    assert block["one_review_only"] == 1
    assert block["reviewer_diversity_index"] == 1.0
    assert sum(b["count"] for b in block["fake_score_distribution"]) == 3
    assert 0 <= block["overall_trust_score"] <= 100


def test_top_suspicious_lists_high_scores_only(enrich):
    reviews = [
        enrich(reviewer_name="Solid", review_count=80, photo_count=10),
        enrich(reviewer_name="Ghost", review_text=None, review_count=1,
               photo_count=0, local_guide_level=None),
    ]
    top = compute_legitimacy(reviews)["top_suspicious_reviews"]
    assert [t["reviewer"] for t in top] == ["Ghost"]
    assert top[0]["text"] == "No text"


# --- Content tests ---

def test_complaint_and_praise_themes(enrich):
    reviews = [
        enrich(reviewer_name="A", rating=1, review_text="The receptionist was rude to my mother."),
        enrich(reviewer_name="B", rating=2, review_text="Rude manager, we waited forever."),
        enrich(reviewer_name="C", rating=5, review_text="Friendly and helpful team."),
    ]
    block = compute_content(reviews)
    complaints = {t["theme"]: t["count"] for t in block["complaint_themes"]}
    assert complaints["Customer Service"] == 2
    assert block["complaint_themes"][0]["theme"] == "Customer Service"
    assert "Staff" in {t["theme"] for t in block["praise_themes"]}


def test_staff_names_need_three_mentions(enrich):
    reviews = [
        enrich(reviewer_name=f"R{i}", review_text=f"Priya sorted everything out, visit {i}.")
        for i in range(3)
    ]
    reviews.append(enrich(reviewer_name="R9", review_text="Marcus was okay."))
    staff = compute_content(reviews)["mentioned_staff"]
    assert "Priya" in staff
    assert "Marcus" not in staff


def test_competitor_mentions(enrich):
    reviews = [enrich(review_text="Much better than Joe's Diner, honestly.")]
    assert compute_content(reviews)["competitor_mentions"] == ["Joe's Diner"]


def test_readability_empty_text():
    assert compute_readability("") == {
        "flesch_kincaid": 0, "avg_sentence_length": 0, "avg_word_length": 0,
    }


# --- Temporal tests ---

def test_temporal_series_and_gap(enrich):
    reviews = [
        enrich(reviewer_name="A", published_date="2025-06-01"),
        enrich(reviewer_name="B", published_date="2025-06-15"),
        enrich(reviewer_name="C", published_date="2025-09-01"),
        enrich(reviewer_name="D", published_date=None),
    ]
    block = compute_temporal(reviews)
    assert block["reviews_per_month"] == [
        {"month": "2025-06", "count": 2},
        {"month": "2025-09", "count": 1},
    ]
    assert block["busiest_month"] == "2025-06"
    assert block["longest_gap"] == {"from": "2025-06", "to": "2025-09", "months": 3}
    assert block["review_lifespan"] == 4
    assert block["undated_reviews"] == 1


def test_temporal_all_undated(enrich):
    reviews = [enrich(reviewer_name=n, published_date=None) for n in ("A", "B")]
    block = compute_temporal(reviews)
    assert block["reviews_per_month"] == []
    assert block["recent_trend"] == "N/A"
    assert block["undated_reviews"] == 2


def test_recency_score_bands():
    assert recency_score(6) == 95
    assert recency_score(3) == 80
    assert recency_score(1.5) == 50
    assert recency_score(0.5) == 30


# --- Competitive and reviewer tests ---

def test_competitive_benchmarks(enrich):
    reviews = [enrich(reviewer_name=f"Fan {i}") for i in range(5)]
    overview = compute_overview(reviews)
    block = compute_competitive(reviews, overview)
    assert [b["metric"] for b in block["industry_benchmark"]] == [
        "Average Rating", "Response Rate", "Review Authenticity",
        "Net Promoter Score", "Engagement Score",
    ]
    assert block["industry_benchmark"][0]["verdict"] == "Above Average"
    assert any(s.startswith("Average Rating") for s in block["strengths_vs_competitors"])
    assert any(w.startswith("Response Rate") for w in block["weaknesses_vs_competitors"])


def test_reviewer_returning_and_top(enrich):
    reviews = [
        enrich(reviewer_name="Sam", review_text="First visit, lovely."),
        enrich(reviewer_name="Sam", review_text="Came back, still lovely."),
        enrich(reviewer_name="Kim", photo_count=None),
    ]
    block = compute_reviewer(reviews)
    assert block["returning_reviewers"] == 1
    assert block["top_reviewers"][0]["name"] == "Sam"
    assert block["top_reviewers"][0]["review_count"] == 2
    assert block["average_photos_per_reviewer"] == 4.0
    assert block["average_reviews_per_reviewer"] == 1.5
