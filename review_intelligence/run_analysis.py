"""
Command-line runner for the review intelligence engine.

Usage:
    review-intelligence reviews.json
    review-intelligence reviews.csv --output-dir out/ --log-level DEBUG
    python -m review_intelligence.run_analysis reviews.json --now 2026-01-15

Steps:
    1. Load raw reviews (JSON array or CSV)
    2. analyze_reviews(): dedup → enrich → aggregate → actions
    3. Save the report as JSON
    4. Print a short summary
"""

import argparse
import os
import sys
from datetime import datetime

from . import config
from .analyzer import analyze_reviews
from .normalizer import ReviewValidationError
from .utils import ensure_output_dir, load_reviews, save_json, setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Analyse a business's customer reviews: health, sentiment, "
                    "trust, themes and recommended actions."
    )
    parser.add_argument("input", help="Path to a JSON array or CSV of raw reviews")
    parser.add_argument(
        "--output-dir",
        default=config.OUTPUT_DIR,
        help="Directory for the report (default: %(default)s)",
    )
    parser.add_argument(
        "--now",
        default=None,
        help="Reference date for relative review dates, ISO format (default: today)",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logger = setup_logging(args.log_level)
    logger.info("Starting review analysis")

    try:
        now = datetime.fromisoformat(args.now) if args.now else None
    except ValueError:
        logger.error("Invalid --now value %r: expected an ISO date", args.now)
        return 1

    try:
        reviews = load_reviews(args.input)
    except ValueError as e:
        logger.error("Could not load %s: %s", args.input, e)
        return 1
    logger.info("Loaded %d reviews from %s", len(reviews), args.input)

    try:
        result = analyze_reviews(reviews, now=now)
    except ReviewValidationError as e:
        logger.error("Invalid input: %s", e)
        return 1

    ensure_output_dir(args.output_dir)
    json_path = os.path.join(args.output_dir, "review_analysis.json")
    save_json(result, json_path)
    logger.info("Report saved to %s", json_path)

    _print_summary(result)
    return 0


def _print_summary(result: dict) -> None:
    """Print a quick summary of the analysis to stdout."""
    overview = result["overview"]
    sentiment = result["sentiment"]
    actions = result["actions"]

    print("\n" + "=" * 50)
    print("REVIEW INTELLIGENCE SUMMARY")
    print("=" * 50)
    print(f"Total reviews analysed: {overview['total_reviews']}")
    print(f"Health score:           {overview['health_score']} ({overview['grade_label']})")
    print(f"Average rating:         {overview['average_rating']}")
    print(f"Net Promoter Score:     {overview['net_promoter_score']}")
    print(f"Momentum:               {overview['reputation_momentum']}")
    print()
    print("Sentiment distribution:")
    total = overview["total_reviews"]
    for label in ("positive", "negative", "neutral", "mixed"):
        count = sentiment[f"{label}_count"]
        pct = count / total * 100 if total else 0
        print(f"  {label.capitalize():10s}: {count:4d}  ({pct:.1f}%)")
    print()
    if actions["priority_issues"]:
        print("Priority issues:")
        for issue in actions["priority_issues"]:
            print(f"  [{issue['severity']:8s}] {issue['issue']}")
        print()
    print(actions["overall_recommendation"])
    print("=" * 50)


if __name__ == "__main__":
    sys.exit(main())
