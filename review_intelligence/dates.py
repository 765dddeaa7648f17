"""
Relative date resolution.

Review sources publish dates as relative phrases ("3 months ago",
"a year ago", "Edited 2 weeks ago").  These are resolved against a
reference time and bucketed by month.  Anything that cannot be parsed
lands in the UNKNOWN bucket; it never raises.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

_RELATIVE = re.compile(
    r"(\d+)\s+(second|minute|hour|day|week|month|year)s?\b"
)
_ARTICLE = re.compile(r"\ban?\b")
_ISO_LIKE = re.compile(r"^\d{4}-\d{2}(-\d{2})?")

_SAME_DAY = ("just now", "today", "moments ago")


def resolve_date(phrase: str | None, now: datetime | None = None) -> datetime | None:
    """
    Convert a relative or ISO date string to a datetime.

    Returns None when the string cannot be interpreted.
    """
    if not phrase or not phrase.strip():
        return None
    if now is None:
        now = datetime.now()
    # Everything is compared as naive local time.
    now = now.replace(tzinfo=None)

    text = phrase.strip().lower()

    if _ISO_LIKE.match(text):
        try:
            return date_parser.isoparse(phrase.strip()).replace(tzinfo=None)
        except (ValueError, OverflowError):
            logger.debug("Could not parse ISO date: %s", phrase)
            return None

    if any(marker in text for marker in _SAME_DAY):
        return now
    if "yesterday" in text:
        return now - timedelta(days=1)

    text = _ARTICLE.sub("1", text)
    match = _RELATIVE.search(text)
    if not match:
        logger.debug("Could not parse relative date: %s", phrase)
        return None

    amount = int(match.group(1))
    unit = match.group(2)

    try:
        return now - _offset(amount, unit)
    except (ValueError, OverflowError):
        logger.debug("Relative date out of range: %s", phrase)
        return None


def _offset(amount: int, unit: str) -> timedelta | relativedelta:
    if unit == "month":
        return relativedelta(months=amount)
    if unit == "year":
        return relativedelta(years=amount)
    return timedelta(**{f"{unit}s": amount})


def month_bucket(phrase: str | None, now: datetime | None = None) -> str:
    """Resolve a date phrase to a "YYYY-MM" bucket, or UNKNOWN."""
    resolved = resolve_date(phrase, now)
    if resolved is None:
        return UNKNOWN
    return f"{resolved.year:04d}-{resolved.month:02d}"


def group_by_month(reviews: list[dict]) -> dict[str, list[dict]]:
    """
    Group enriched reviews by their "month" field.

    Dated months come back in chronological order; UNKNOWN, if present,
    is always last.
    """
    groups: dict[str, list[dict]] = {}
    for review in reviews:
        groups.setdefault(review["month"], []).append(review)
    ordered = {m: groups[m] for m in sorted(m for m in groups if m != UNKNOWN)}
    if UNKNOWN in groups:
        ordered[UNKNOWN] = groups[UNKNOWN]
    return ordered


def dated_months(reviews: list[dict]) -> dict[str, list[dict]]:
    """Like group_by_month() but without the UNKNOWN bucket."""
    groups = group_by_month(reviews)
    groups.pop(UNKNOWN, None)
    return groups


def months_between(start: str, end: str) -> int:
    """Whole months from one "YYYY-MM" bucket to another."""
    sy, sm = (int(p) for p in start.split("-"))
    ey, em = (int(p) for p in end.split("-"))
    return (ey - sy) * 12 + (em - sm)
