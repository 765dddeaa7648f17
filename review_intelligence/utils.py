"""
Shared utilities for file I/O and logging.
"""

import csv
import json
import logging
import os
from typing import Any

_CSV_INT_FIELDS = (
    "rating", "review_count", "photo_count", "local_guide_level",
    "reviewCount", "photoCount", "localGuideLevel",
)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure and return the package logger."""
    logger = logging.getLogger("review_intelligence")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    return logger


def load_reviews(filepath: str) -> list[dict]:
    """
    Load raw reviews from a JSON array or a CSV file.

    CSV cells are strings, so numeric columns are converted to int and
    empty cells become None (unknown) rather than "" or 0.  Handles the
    UTF-8-BOM that Excel sometimes adds.  Raises ValueError for a
    non-integer numeric cell, naming the file line.
    """
    if os.path.splitext(filepath)[1].lower() == ".json":
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{filepath}: expected a JSON array of reviews")
        return data

    reviews = []
    with open(filepath, encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        for line, row in enumerate(reader, start=2):
            review = {k: (v if v != "" else None) for k, v in row.items()}
            for field in _CSV_INT_FIELDS:
                if review.get(field) is None:
                    continue
                try:
                    review[field] = int(review[field])
                except ValueError:
                    raise ValueError(
                        f"{filepath}:{line}: {field} must be an integer, got {review[field]!r}"
                    ) from None
            reviews.append(review)
    return reviews


def ensure_output_dir(output_dir: str) -> None:
    """Create output directory if it does not exist."""
    os.makedirs(output_dir, exist_ok=True)


def save_json(result: Any, filepath: str) -> None:
    """Save a result to JSON with UTF-8 encoding and pretty formatting."""
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(result, f, ensure_ascii=False, indent=2, default=str)
