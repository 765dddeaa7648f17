"""
Metric aggregators.

Each compute_* function is a pure reduction over the enriched review list
and returns a JSON-ready dict; each empty_* returns the block for zero
reviews.  Competitive additionally needs the overview block and Actions
needs all the others.
"""

from .actions import compute_actions, empty_actions
from .competitive import compute_competitive, empty_competitive
from .content import compute_content, empty_content
from .legitimacy import compute_legitimacy, empty_legitimacy
from .overview import compute_overview, empty_overview
from .ratings import compute_ratings, empty_ratings
from .responses import compute_responses, empty_responses
from .reviewer import compute_reviewer, empty_reviewer
from .sentiment import compute_sentiment, empty_sentiment
from .temporal import compute_temporal, empty_temporal

__all__ = [
    "compute_actions", "empty_actions",
    "compute_competitive", "empty_competitive",
    "compute_content", "empty_content",
    "compute_legitimacy", "empty_legitimacy",
    "compute_overview", "empty_overview",
    "compute_ratings", "empty_ratings",
    "compute_responses", "empty_responses",
    "compute_reviewer", "empty_reviewer",
    "compute_sentiment", "empty_sentiment",
    "compute_temporal", "empty_temporal",
]
