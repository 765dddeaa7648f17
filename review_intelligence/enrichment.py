"""
Enrichment stage: attach sentiment, trust score, word count and the
resolved publication month to every normalized review.
"""

import logging
from datetime import datetime
from typing import Callable

from . import config
from .dates import month_bucket, resolve_date
from .preprocessing import clean_text, word_count
from .sentiment import classify_sentiment
from .trust import score_review

logger = logging.getLogger(__name__)


def enrich_review(review: dict, now: datetime | None = None) -> dict:
    """Return a new dict: the raw fields plus the derived ones."""
    text = clean_text(review.get("review_text"))
    sentiment = classify_sentiment(text, review["rating"])
    trust = score_review(review, sentiment)

    enriched = dict(review)
    enriched.update({
        "sentiment": sentiment,
        "word_count": word_count(text),
        "fake_score": trust["score"],
        "fake_reasons": trust["reasons"],
        "published_at": resolve_date(review.get("published_date"), now),
        "responded_at": resolve_date(review.get("response_date"), now),
        "month": month_bucket(review.get("published_date"), now),
    })
    return enriched


def enrich_reviews(
    reviews: list[dict],
    now: datetime | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> list[dict]:
    """
    Enrich a normalized review batch.

    progress_callback, if given, is called with (done, total) every
    ENRICH_PROGRESS_EVERY reviews and once at the end.
    """
    if now is None:
        now = datetime.now()

    total = len(reviews)
    enriched = []
    for i, review in enumerate(reviews):
        enriched.append(enrich_review(review, now))

        done = i + 1
        if done % config.ENRICH_PROGRESS_EVERY == 0:
            logger.info("Enriched %d / %d reviews", done, total)
            if progress_callback is not None:
                progress_callback(done, total)

    if progress_callback is not None and total % config.ENRICH_PROGRESS_EVERY:
        progress_callback(total, total)

    return enriched
