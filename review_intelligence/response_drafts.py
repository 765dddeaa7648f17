"""
Templated owner-response drafting.

Drafts are picked by rating band (1-2, 3, 4-5) and personalised with the
reviewer's first name and, when the classifier found one, the specific
issue the reviewer complained about.  Deterministic: no free-form
generation, the same review always gets the same draft.
"""

import logging

logger = logging.getLogger(__name__)


def specific_issue(sentiment: dict) -> str | None:
    """
    The most negative aspect (lowercased), else the first negative keyword.
    """
    negative_aspects = [a for a in sentiment.get("aspects", []) if a["sentiment"] == "negative"]
    if negative_aspects:
        worst = min(negative_aspects, key=lambda a: a["score"])
        return worst["aspect"].lower()
    negative_words = sentiment.get("negative_words", [])
    return negative_words[0] if negative_words else None


def draft_response(review: dict) -> str:
    """Draft an owner response to an enriched review."""
    parts = review["reviewer_name"].split()
    name = parts[0] if parts else "there"
    issue = specific_issue(review.get("sentiment") or {})
    rating = review["rating"]

    if rating <= 2:
        text = (
            f"Dear {name}, thank you for bringing this to our attention. "
            "We sincerely apologize for your experience"
        )
        if issue:
            text += f" regarding {issue}"
        text += (
            ". This falls short of the standards we hold ourselves to. "
            "We take your feedback very seriously and are already looking into "
            "this matter. We would greatly appreciate the opportunity to make "
            "things right, so please contact us directly at your earliest "
            "convenience so we can address your concerns personally. "
            "Your satisfaction is our top priority."
        )
    elif rating == 3:
        text = (
            f"Thank you for your honest feedback, {name}. We appreciate you "
            "taking the time to share your experience. We're always looking to "
            "improve"
        )
        if issue:
            text += f" and will review your comments about {issue}"
        text += ". We hope to exceed your expectations on your next visit."
    else:
        text = (
            f"Thank you for your review, {name}! We appreciate your feedback "
            "and are glad you chose us."
        )

    logger.debug("Drafted %d-star response for %s (issue: %s)", rating, name, issue)
    return text
