"""
Actions block: turn the metric blocks into a prioritized to-do list.

Rules live in ACTION_RULES and are evaluated uniformly, in order, against
the dict of metric blocks.  A rule may contribute any of:
  issue       – entry for priority_issues (issue, severity, evidence, suggestion)
  action      – entry for recommended_actions (action, priority, impact)
  quick_win   – string for quick_wins
  long_term   – string for long_term_strategies
Text fields are either plain strings or callables taking the metrics dict.

Issues are then ranked CRITICAL > HIGH > MEDIUM > LOW; the sort is stable
so rule order breaks ties.
"""

import logging

from .. import config
from ..response_drafts import draft_response
from .stats import has_response, recency_key

logger = logging.getLogger(__name__)


def _top_complaint(m: dict) -> dict:
    return m["content"]["complaint_themes"][0]


ACTION_RULES = (
    {
        "name": "negative_response_gap",
        "when": lambda m: (
            m["responses"]["negative_review_count"] > 0
            and m["responses"]["response_rate_negative"] < config.NEGATIVE_RESPONSE_RATE_MIN
        ),
        "issue": {
            "issue": "Low negative review response rate",
            "severity": "HIGH",
            "evidence": lambda m: (
                f"Only {m['responses']['response_rate_negative']}% of 1-2 star "
                "reviews have responses"
            ),
            "suggestion": (
                "Respond to all negative reviews within 24 hours with "
                "personalized, empathetic messages."
            ),
        },
        "action": {
            "action": "Set up daily review monitoring",
            "priority": "HIGH",
            "impact": "Improves perception and may recover lost customers",
        },
        "quick_win": "Respond to all unanswered negative reviews this week",
    },
    {
        "name": "template_responses",
        "when": lambda m: m["responses"]["template_detection_rate"] > config.TEMPLATE_RATE_MAX,
        "issue": {
            "issue": "Too many template responses",
            "severity": "MEDIUM",
            "evidence": lambda m: (
                f"{m['responses']['template_detection_rate']}% of responses "
                "appear copy-pasted"
            ),
            "suggestion": "Reference specific details from each review in your response.",
        },
        "quick_win": "Rewrite template responses with personalized touches",
    },
    {
        "name": "defensive_responses",
        "when": lambda m: m["responses"]["defensive_language_rate"] > config.DEFENSIVE_RATE_MAX,
        "issue": {
            "issue": "Defensive language in responses",
            "severity": "HIGH",
            "evidence": lambda m: (
                f"{m['responses']['defensive_language_rate']}% of responses "
                "contain defensive tone"
            ),
            "suggestion": "Lead with empathy and acknowledgment, not correction.",
        },
    },
    {
        "name": "one_star_concentration",
        "when": lambda m: m["ratings"]["one_star_ratio"] > config.ONE_STAR_RATIO_MAX,
        "issue": {
            "issue": "High 1-star concentration",
            "severity": "HIGH",
            "evidence": lambda m: f"{m['ratings']['one_star_ratio']}% of reviews are 1-star",
            "suggestion": (
                "Analyze 1-star reviews for recurring themes and address root causes."
            ),
        },
        "long_term": "Conduct root cause analysis of all 1-star reviews",
    },
    {
        "name": "declining_trend",
        "when": lambda m: m["ratings"]["improving_or_declining"] == "DECLINING",
        "issue": {
            "issue": "Rating trend declining",
            "severity": "CRITICAL",
            "evidence": lambda m: (
                f"Recent ratings {abs(m['ratings']['recent_vs_overall_delta']):.2f} points "
                "lower than earlier months"
            ),
            "suggestion": "Investigate recent operational changes causing quality drops.",
        },
        "action": {
            "action": "Conduct internal quality audit",
            "priority": "URGENT",
            "impact": "May halt further decline",
        },
    },
    {
        "name": "suspicious_activity",
        "when": lambda m: m["legitimacy"]["suspicious_percentage"] > config.SUSPICIOUS_PERCENT_MAX,
        "issue": {
            "issue": "Suspicious review activity",
            "severity": "MEDIUM",
            "evidence": lambda m: (
                f"{m['legitimacy']['suspicious_percentage']}% flagged as "
                "potentially inauthentic"
            ),
            "suggestion": "Report suspicious reviews to the review platform.",
        },
    },
    {
        "name": "recurring_complaint",
        "when": lambda m: bool(m["content"]["complaint_themes"]),
        "issue": {
            "issue": lambda m: f"Recurring complaint: {_top_complaint(m)['theme']}",
            "severity": "MEDIUM",
            "evidence": lambda m: f"Mentioned in {_top_complaint(m)['count']} negative reviews",
            "suggestion": lambda m: f'Address "{_top_complaint(m)["theme"]}" systematically.',
        },
        "long_term": lambda m: f"Create action plan to address {_top_complaint(m)['theme']}",
    },
    {
        "name": "low_response_rate",
        "when": lambda m: m["overview"]["response_rate"] < config.OVERVIEW_RESPONSE_RATE_MIN,
        "action": {
            "action": "Aim to respond to 100% of reviews",
            "priority": "HIGH",
            "impact": "Shows engagement to potential customers",
        },
    },
    {
        "name": "weak_nps",
        "when": lambda m: m["overview"]["net_promoter_score"] < config.NPS_IMPROVEMENT_THRESHOLD,
        "long_term": "Implement customer satisfaction program to improve NPS",
    },
    {
        "name": "rating_text_mismatch",
        "when": lambda m: m["sentiment"]["rating_text_alignment"] < config.ALIGNMENT_MIN,
        "issue": {
            "issue": "Low rating-text alignment",
            "severity": "LOW",
            "evidence": lambda m: (
                f"Only {m['sentiment']['rating_text_alignment']}% of ratings match "
                "text sentiment"
            ),
            "suggestion": "This may indicate review manipulation or sarcasm in reviews.",
        },
    },
    {
        "name": "always",
        "when": lambda m: True,
        "action": [
            {
                "action": "Encourage happy customers to leave reviews",
                "priority": "MEDIUM",
                "impact": "Dilutes negative reviews",
            },
            {
                "action": "Share positive reviews on social media",
                "priority": "LOW",
                "impact": "Builds social proof",
            },
        ],
        "quick_win": "Ask your top 5 most recent satisfied customers for a review",
        "long_term": "Build systematic review request process into customer journey",
    },
)


def empty_actions() -> dict:
    return {
        "priority_issues": [],
        "recommended_actions": [],
        "suggested_responses": [],
        "overall_recommendation": "No reviews available for analysis.",
        "quick_wins": [],
        "long_term_strategies": [],
    }


def _render(value, metrics: dict):
    return value(metrics) if callable(value) else value


def compute_actions(reviews: list[dict], metrics: dict) -> dict:
    """
    metrics must hold the overview, sentiment, ratings, responses,
    legitimacy, content and temporal blocks.
    """
    if not reviews:
        return empty_actions()

    issues = []
    actions = []
    quick_wins = []
    long_term = []

    for rule in ACTION_RULES:
        if not rule["when"](metrics):
            continue
        logger.debug("Action rule fired: %s", rule["name"])

        if "issue" in rule:
            issues.append({k: _render(v, metrics) for k, v in rule["issue"].items()})
        if "action" in rule:
            entries = rule["action"]
            if isinstance(entries, dict):
                entries = [entries]
            actions.extend(dict(entry) for entry in entries)
        if "quick_win" in rule:
            quick_wins.append(_render(rule["quick_win"], metrics))
        if "long_term" in rule:
            long_term.append(_render(rule["long_term"], metrics))

    issues.sort(key=lambda i: config.SEVERITY_ORDER[i["severity"]])

    return {
        "priority_issues": issues,
        "recommended_actions": actions,
        "suggested_responses": suggest_responses(reviews),
        "overall_recommendation": _overall_recommendation(metrics["overview"]["health_score"]),
        "quick_wins": quick_wins,
        "long_term_strategies": long_term,
    }


def suggest_responses(reviews: list[dict]) -> list[dict]:
    """Drafts for the most recent unresponded 1-2 star reviews."""
    pending = sorted(
        (r for r in reviews if r["rating"] <= 2 and not has_response(r)),
        key=recency_key,
    )[:config.MAX_SUGGESTED_RESPONSES]

    return [
        {
            "reviewer_name": r["reviewer_name"],
            "review_text": r.get("review_text") or "No text",
            "rating": r["rating"],
            "sentiment": r["sentiment"]["label"],
            "suggested_response": draft_response(r),
        }
        for r in pending
    ]


def _overall_recommendation(health_score: int) -> str:
    if health_score >= 80:
        return ("Your review profile is strong. Focus on maintaining quality "
                "and encouraging more reviews.")
    if health_score >= 60:
        return ("Room for improvement. Prioritize responding to negatives and "
                "addressing recurring complaints.")
    return ("Urgent attention needed. Focus on service quality, responding to "
            "all reviews, and fixing identified issues.")
