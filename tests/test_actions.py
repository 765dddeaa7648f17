"""Tests for action rules, suggested responses and response drafts."""

from __future__ import annotations

from review_intelligence import config
from review_intelligence.aggregators import (
    compute_actions,
    compute_content,
    compute_legitimacy,
    compute_overview,
    compute_ratings,
    compute_responses,
    compute_sentiment,
    compute_temporal,
    empty_actions,
)
from review_intelligence.aggregators.actions import suggest_responses
from review_intelligence.response_drafts import draft_response, specific_issue


def _metrics(reviews: list[dict]) -> dict:
    return {
        "overview": compute_overview(reviews),
        "sentiment": compute_sentiment(reviews),
        "ratings": compute_ratings(reviews),
        "responses": compute_responses(reviews),
        "legitimacy": compute_legitimacy(reviews),
        "content": compute_content(reviews),
        "temporal": compute_temporal(reviews),
    }


def _issue_names(actions: dict) -> list[str]:
    return [i["issue"] for i in actions["priority_issues"]]


# --- Rule tests ---

def test_no_reviews():
    assert compute_actions([], {}) == empty_actions()


def test_unanswered_negatives_raise_high_issue(enrich):
    reviews = [enrich(reviewer_name=f"Fan {i}") for i in range(6)]
    reviews += [
        enrich(reviewer_name=f"Critic {i}", rating=2,
               review_text="The waiting room was dirty and the staff were rude.")
        for i in range(2)
    ]
    actions = compute_actions(reviews, _metrics(reviews))
    issue = next(i for i in actions["priority_issues"]
                 if i["issue"] == "Low negative review response rate")
    assert issue["severity"] == "HIGH"
    assert "0.0%" in issue["evidence"]
    assert "Respond to all unanswered negative reviews this week" in actions["quick_wins"]


def test_no_negative_reviews_no_response_gap_issue(enrich):
    reviews = [enrich(reviewer_name=f"Fan {i}") for i in range(4)]
    actions = compute_actions(reviews, _metrics(reviews))
    assert "Low negative review response rate" not in _issue_names(actions)


def test_issues_ranked_by_severity(enrich):
    reviews = [
        enrich(reviewer_name=f"Critic {i}", rating=1,
               review_text="Rude staff, dirty floors and they overcharged us.")
        for i in range(4)
    ]
    reviews.append(enrich(reviewer_name="Fan"))
    metrics = _metrics(reviews)
    metrics["ratings"]["improving_or_declining"] = "DECLINING"
    metrics["ratings"]["recent_vs_overall_delta"] = -0.8

    actions = compute_actions(reviews, metrics)
    severities = [i["severity"] for i in actions["priority_issues"]]
    assert severities[0] == "CRITICAL"
    assert severities == sorted(severities, key=config.SEVERITY_ORDER.get)
    assert actions["priority_issues"][0]["evidence"].startswith("Recent ratings 0.80 points")


def test_recurring_complaint_uses_top_theme(enrich):
    reviews = [
        enrich(reviewer_name=f"Critic {i}", rating=1,
               review_text="The manager was rude and dismissive on the phone.")
        for i in range(3)
    ]
    actions = compute_actions(reviews, _metrics(reviews))
    assert "Recurring complaint: Customer Service" in _issue_names(actions)
    assert "Create action plan to address Customer Service" in actions["long_term_strategies"]


def test_always_on_recommendations(enrich):
    reviews = [enrich()]
    actions = compute_actions(reviews, _metrics(reviews))
    names = [a["action"] for a in actions["recommended_actions"]]
    assert "Encourage happy customers to leave reviews" in names
    assert actions["quick_wins"][-1] == "Ask your top 5 most recent satisfied customers for a review"


def test_overall_recommendation_follows_health(enrich):
    reviews = [enrich(reviewer_name=f"Fan {i}", response_text=f"Thank you Fan {i}!")
               for i in range(10)]
    metrics = _metrics(reviews)
    actions = compute_actions(reviews, metrics)
    assert metrics["overview"]["health_score"] >= 80
    assert actions["overall_recommendation"].startswith("Your review profile is strong")


# --- Suggested response tests ---

def test_suggested_responses_most_recent_unanswered_first(enrich):
    reviews = [
        enrich(reviewer_name=f"Critic {days}", rating=1, published_date=f"{days} days ago",
               review_text="Nobody called me back about the broken heater.")
        for days in (40, 2, 30, 10, 20, 5, 60)
    ]
    reviews.append(enrich(reviewer_name="Answered", rating=1, published_date="1 day ago",
                          response_text="We are sorry, please call us."))
    reviews.append(enrich(reviewer_name="Happy", rating=5, published_date="1 day ago"))

    suggested = suggest_responses(reviews)
    assert [s["reviewer_name"] for s in suggested] == [
        "Critic 2", "Critic 5", "Critic 10", "Critic 20", "Critic 30",
    ]
    assert all(s["rating"] <= 2 for s in suggested)


# --- Draft tests ---

def test_specific_issue_prefers_worst_aspect():
    sentiment = {
        "aspects": [
            {"aspect": "Service", "sentiment": "negative", "score": -2.0},
            {"aspect": "Wait Time", "sentiment": "negative", "score": -4.0},
            {"aspect": "Price", "sentiment": "positive", "score": 2.0},
        ],
        "negative_words": ["slow"],
    }
    assert specific_issue(sentiment) == "wait time"


def test_specific_issue_falls_back_to_keyword():
    assert specific_issue({"aspects": [], "negative_words": ["cold", "late"]}) == "cold"
    assert specific_issue({"aspects": [], "negative_words": []}) is None


def test_draft_for_negative_review(enrich):
    review = enrich(reviewer_name="Maria Lopez", rating=1,
                    review_text="terrible rude service at the counter")
    draft = draft_response(review)
    assert draft.startswith("Dear Maria,")
    assert "regarding service" in draft
    assert "\u2014" not in draft


def test_draft_for_neutral_and_positive(enrich):
    middling = draft_response(enrich(reviewer_name="Sam Ortiz", rating=3,
                                     review_text="Average visit."))
    assert middling.startswith("Thank you for your honest feedback, Sam.")

    happy = draft_response(enrich(reviewer_name="Ana", rating=5))
    assert happy == ("Thank you for your review, Ana! We appreciate your feedback "
                     "and are glad you chose us.")


def test_draft_is_deterministic(enrich):
    review = enrich(reviewer_name="Lee", rating=2, review_text="Cold food and slow service.")
    assert draft_response(review) == draft_response(review)
