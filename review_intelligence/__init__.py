"""
Review intelligence engine: deduplicate, classify and score a business's
customer reviews and reduce them into a multi-facet report.
"""

from .analyzer import analyze, analyze_reviews, empty_analysis
from .normalizer import ReviewValidationError, normalize
from .sentiment import classify_sentiment

__all__ = [
    "analyze",
    "analyze_reviews",
    "classify_sentiment",
    "empty_analysis",
    "normalize",
    "ReviewValidationError",
]
