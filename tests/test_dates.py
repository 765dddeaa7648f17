"""Tests for relative date resolution and month bucketing."""

from __future__ import annotations

from datetime import datetime, timedelta

from review_intelligence.dates import (
    UNKNOWN,
    group_by_month,
    month_bucket,
    months_between,
    resolve_date,
)

FIXED_NOW = datetime(2026, 1, 29, 14, 0, 0)


# --- Relative date parsing tests ---

def test_parse_days_ago():
    assert resolve_date("3 days ago", FIXED_NOW) == FIXED_NOW - timedelta(days=3)


def test_parse_weeks_ago():
    assert resolve_date("2 weeks ago", FIXED_NOW) == FIXED_NOW - timedelta(weeks=2)


def test_parse_an_hour_ago():
    assert resolve_date("an hour ago", FIXED_NOW) == FIXED_NOW - timedelta(hours=1)


def test_parse_a_month_ago():
    """'a month ago' should parse as 1 month."""
    assert month_bucket("a month ago", FIXED_NOW) == "2025-12"


def test_parse_a_year_ago():
    assert month_bucket("a year ago", FIXED_NOW) == "2025-01"


def test_parse_edited_prefix():
    """Sources prefix edited reviews with 'Edited'."""
    assert resolve_date("Edited 2 weeks ago", FIXED_NOW) == FIXED_NOW - timedelta(weeks=2)


def test_parse_yesterday_and_today():
    assert resolve_date("yesterday", FIXED_NOW) == FIXED_NOW - timedelta(days=1)
    assert resolve_date("just now", FIXED_NOW) == FIXED_NOW


def test_parse_iso_date():
    assert resolve_date("2025-06-14", FIXED_NOW) == datetime(2025, 6, 14)
    assert month_bucket("2025-06-14T09:30:00+05:30", FIXED_NOW) == "2025-06"


def test_unparseable_is_unknown():
    """Unparseable strings land in the Unknown bucket and never raise."""
    assert resolve_date("sometime last spring", FIXED_NOW) is None
    assert month_bucket("sometime last spring", FIXED_NOW) == UNKNOWN
    assert month_bucket(None, FIXED_NOW) == UNKNOWN
    assert month_bucket("   ", FIXED_NOW) == UNKNOWN


# --- Grouping tests ---

def test_group_by_month_orders_chronologically_unknown_last():
    reviews = [{"month": m} for m in ("2025-11", UNKNOWN, "2025-02", "2025-11")]
    groups = group_by_month(reviews)
    assert list(groups) == ["2025-02", "2025-11", UNKNOWN]
    assert len(groups["2025-11"]) == 2


def test_months_between_crosses_year_boundary():
    assert months_between("2025-11", "2026-02") == 3
    assert months_between("2025-06", "2025-06") == 0


def test_out_of_range_phrase_is_unknown():
    """Phrases that parse but land outside the calendar are Unknown, not errors."""
    assert resolve_date("99999 years ago", FIXED_NOW) is None
    assert month_bucket("99999 years ago", FIXED_NOW) == UNKNOWN
    assert month_bucket("999999999 days ago", FIXED_NOW) == UNKNOWN
    assert month_bucket("9999999999999 weeks ago", FIXED_NOW) == UNKNOWN
