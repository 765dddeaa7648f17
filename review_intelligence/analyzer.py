"""
Entry point for the review intelligence engine.

Pipeline order:
    1. Coerce, validate (fail fast on type violations) and deduplicate
    2. Enrich: sentiment, trust score, word count, month bucket
    3. Aggregate: overview, sentiment, ratings, responses, legitimacy,
       content, temporal
    4. Competitive (needs overview), reviewer
    5. Actions (needs everything above)
"""

import logging
from datetime import datetime
from typing import Callable

from .aggregators import (
    compute_actions,
    compute_competitive,
    compute_content,
    compute_legitimacy,
    compute_overview,
    compute_ratings,
    compute_responses,
    compute_reviewer,
    compute_sentiment,
    compute_temporal,
    empty_actions,
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
from .enrichment import enrich_reviews
from .normalizer import normalize

logger = logging.getLogger(__name__)


def empty_analysis() -> dict:
    return {
        "overview": empty_overview(),
        "sentiment": empty_sentiment(),
        "ratings": empty_ratings(),
        "responses": empty_responses(),
        "legitimacy": empty_legitimacy(),
        "content": empty_content(),
        "temporal": empty_temporal(),
        "actions": empty_actions(),
        "competitive": empty_competitive(),
        "reviewer": empty_reviewer(),
    }


def analyze_reviews(
    reviews: list[dict],
    now: datetime | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> dict:
    """
    Analyze one business's raw reviews and return the full report.

    `now` pins the reference time for relative dates ("3 months ago");
    it defaults to the current time.  Raises ReviewValidationError for
    records that break the input contract; never raises for well-typed
    input, including an empty list.
    """
    if not reviews:
        logger.info("No reviews to analyze")
        return empty_analysis()

    if now is None:
        now = datetime.now()

    unique = normalize(reviews)
    logger.info("%d reviews -> %d after dedup", len(reviews), len(unique))

    enriched = enrich_reviews(unique, now=now, progress_callback=progress_callback)
    logger.info("Enriched %d reviews", len(enriched))

    metrics = {
        "overview": compute_overview(enriched),
        "sentiment": compute_sentiment(enriched),
        "ratings": compute_ratings(enriched),
        "responses": compute_responses(enriched),
        "legitimacy": compute_legitimacy(enriched),
        "content": compute_content(enriched),
        "temporal": compute_temporal(enriched),
    }
    competitive = compute_competitive(enriched, metrics["overview"])
    reviewer = compute_reviewer(enriched)
    actions = compute_actions(enriched, metrics)

    logger.info(
        "Analysis complete: health %s (%s), %d priority issue(s)",
        metrics["overview"]["health_score"],
        metrics["overview"]["grade_label"],
        len(actions["priority_issues"]),
    )

    return {
        **metrics,
        "actions": actions,
        "competitive": competitive,
        "reviewer": reviewer,
    }


analyze = analyze_reviews
