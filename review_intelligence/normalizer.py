"""
Input coercion and deduplication.

DEDUPLICATION STRATEGY:
- Fingerprint: (lowercased trimmed reviewer name, rating, lowercased first
  50 characters of the text with whitespace collapsed).
- Policy: first-seen wins.  Later duplicates are discarded silently; the
  count is logged at WARNING so operators can investigate the source.
- Rationale: review sources return the same review multiple times across
  paginated scroll loads.  A short text prefix tolerates trailing-text
  drift from incremental loads while still catching true duplicates.
  The flip side is that two different short reviews from same-named
  reviewers with the same rating and opening ("Great service!") merge.
  That precision/recall trade-off is accepted.
"""

import logging

from . import config
from .preprocessing import collapse_whitespace

logger = logging.getLogger(__name__)


class ReviewValidationError(ValueError):
    """A raw review violates the input contract (name, rating 1-5)."""


# Review Source field names → engine field names.
_FIELD_ALIASES = {
    "reviewerName": "reviewer_name",
    "text": "review_text",
    "publishedDate": "published_date",
    "review_date": "published_date",
    "responseText": "response_text",
    "responseDate": "response_date",
    "reviewCount": "review_count",
    "photoCount": "photo_count",
    "localGuideLevel": "local_guide_level",
}

_OPTIONAL_FIELDS = (
    "review_text", "published_date", "response_text", "response_date",
    "review_count", "photo_count", "local_guide_level",
)
_INT_FIELDS = ("review_count", "photo_count", "local_guide_level")


def coerce_review(record: dict, index: int = 0) -> dict:
    """
    Map a source record onto the engine's RawReview shape.

    Returns a new dict; the input is not modified.  Optional fields that
    are missing come back as None (unknown), never as zero.

    Raises ReviewValidationError for a missing reviewer name or a rating
    outside 1..5.
    """
    review = {}
    for key, value in record.items():
        review[_FIELD_ALIASES.get(key, key)] = value

    name = review.get("reviewer_name")
    if not isinstance(name, str) or not name.strip():
        raise ReviewValidationError(
            f"review[{index}]: reviewer_name must be a non-empty string"
        )

    rating = review.get("rating")
    if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
        raise ReviewValidationError(
            f"review[{index}]: rating must be an integer 1-5, got {rating!r}"
        )

    for field in _OPTIONAL_FIELDS:
        review.setdefault(field, None)
    for field in _INT_FIELDS:
        value = review[field]
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise ReviewValidationError(
                f"review[{index}]: {field} must be an integer or None, got {value!r}"
            )

    return review


def coerce_reviews(records: list[dict]) -> list[dict]:
    return [coerce_review(record, i) for i, record in enumerate(records)]


def fingerprint(review: dict) -> tuple[str, int, str]:
    text = (review.get("review_text") or "").lower().strip()
    prefix = collapse_whitespace(text[:config.DEDUP_TEXT_PREFIX])
    return (review["reviewer_name"].lower().strip(), review["rating"], prefix)


def normalize(reviews: list[dict]) -> list[dict]:
    """
    Coerce and deduplicate a raw review batch, keeping the first occurrence
    of each fingerprint in input order.

    Accepts source field names ("reviewerName", "text", ...) as well as the
    engine's own; returns coerced copies.  Raises ReviewValidationError for
    records that break the input contract.
    """
    seen = set()
    unique = []

    for review in coerce_reviews(reviews):
        key = fingerprint(review)
        if key in seen:
            continue
        seen.add(key)
        unique.append(review)

    dupe_count = len(reviews) - len(unique)
    if dupe_count > 0:
        logger.warning(
            "Deduplicated %d duplicate review(s), %d unique reviews remain",
            dupe_count, len(unique),
        )

    return unique
