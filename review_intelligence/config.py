"""
Central configuration for the review intelligence engine.

All thresholds, weights, and benchmarks live here so that tuning the
engine means editing one file, not hunting through modules.  The keyword
tables themselves live in lexicon.py.
"""

import os

# ---------------------------------------------------------------------------
# Runtime
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("REVIEW_INTEL_LOG_LEVEL", "INFO")
OUTPUT_DIR = os.getenv("REVIEW_INTEL_OUTPUT_DIR", "output")

# Enrichment logs a progress line every N reviews.
ENRICH_PROGRESS_EVERY = 50

# ---------------------------------------------------------------------------
# Deduplication
# ---------------------------------------------------------------------------
# Review sources return the same review several times across paginated
# scroll loads, sometimes with a little trailing text missing.  A short
# prefix catches those while tolerating the drift.
DEDUP_TEXT_PREFIX = 50

# ---------------------------------------------------------------------------
# Sentiment classifier
# ---------------------------------------------------------------------------
# Compound thresholds (VADER convention).
POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05

# Rating-only reviews: score = (rating - 3) * RATING_ONLY_SCALE
RATING_ONLY_SCALE = 1.5
RATING_ONLY_CONFIDENCE = 0.3

# Rating fusion.  The star rating is a stronger, less noisy signal than
# free text, so it wins outright when the two contradict each other.
RATING_SIGNAL_SCALE = 0.8
RATING_CONFLICT_TEXT_WEIGHT = 0.4
RATING_CONFLICT_RATING_WEIGHT = 0.6
RATING_AMBIGUOUS_ZONE = 0.5      # |text total| below this counts as near-neutral
RATING_AMBIGUOUS_WEIGHT = 0.7
RATING_AGREEMENT_WEIGHT = 0.3

NEGATION_WINDOW = 3              # preceding tokens scanned for a negator
NEGATION_MULTIPLIER = -0.8

EXCLAMATION_MAX = 3
EXCLAMATION_POSITIVE_BOOST = 0.3
EXCLAMATION_NEGATIVE_BOOST = 0.2
CAPS_MIN_WORD_LENGTH = 3
CAPS_MAX_SHARE = 0.8             # all-caps text is shouting, not emphasis
CAPS_BOOST = 0.5

SCORE_BOUND = 5.0
COMPOUND_ALPHA = 15              # compound = s / sqrt(s^2 + alpha)

CONFIDENCE_PER_EVIDENCE = 0.15
CONFIDENCE_RATING_BONUS = 0.3
MAX_EVIDENCE_WORDS = 10

# Words missing from the domain lexicon fall back to VADER's general-purpose
# lexicon.  Kept at half weight: VADER was tuned on social media, not on
# local business reviews, and the domain table should dominate.
VADER_FALLBACK_WEIGHT = 0.5

# Aspect windows.
ASPECT_CONTEXT_CHARS = 40
ASPECT_POLARITY_THRESHOLD = 0.3

# ---------------------------------------------------------------------------
# Trust scorer
# ---------------------------------------------------------------------------
FAKE_SCORE_THRESHOLD = 50        # >= this → "likely fake"
SHORT_TEXT_CHARS = 20
MINIMAL_TEXT_CHARS = 30
GENERIC_TEXT_CHARS = 15
CAPS_TEXT_MIN_CHARS = 10
REPETITIVE_MIN_WORDS = 5
REPETITIVE_UNIQUE_RATIO = 0.5

# ---------------------------------------------------------------------------
# Overview / health score
# ---------------------------------------------------------------------------
HEALTH_BASE = 50
HEALTH_RATING_WEIGHT = 10
HEALTH_SENTIMENT_WEIGHT = 15
HEALTH_SENTIMENT_CAP = 12
HEALTH_RESPONSE_DIVISOR = 4
HEALTH_RESPONSE_CAP = 12
HEALTH_FAKE_DIVISOR = 4
HEALTH_NPS_DIVISOR = 10
HEALTH_NPS_CAP = 8

# (minimum health score, grade), checked top-down.
GRADE_BANDS = [
    (90, "A+"),
    (80, "A"),
    (70, "B+"),
    (60, "B"),
    (50, "C"),
    (40, "D"),
    (0, "F"),
]

ENGAGEMENT_TEXT_MIN_CHARS = 10
MOMENTUM_WINDOW_MONTHS = 3
MOMENTUM_THRESHOLD = 0.2

# ---------------------------------------------------------------------------
# Ratings
# ---------------------------------------------------------------------------
BAYESIAN_PRIOR_MEAN = 3.5
BAYESIAN_MIN_VOTES = 10
RATING_TREND_THRESHOLD = 0.2
RATING_SPIKE_MULTIPLIER = 3
RATING_DROP_MARGIN = 1.0

# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
TEMPLATE_PREFIX_CHARS = 100
TEMPLATE_MIN_REUSE = 3           # a prefix seen more than twice is a template
MAX_UNRESPONDED_LISTED = 10

RESPONSE_QUALITY_WEIGHTS = {
    "empathy": 0.3,
    "personalization": 0.2,
    "length": 0.2,
    "non_template": 0.15,
    "non_defensive": 0.15,
}
RESPONSE_LENGTH_DIVISOR = 5
RESPONSE_LENGTH_CAP = 20

# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------
TOP_KEYWORDS = 40
TOP_BIGRAMS = 20
TOP_TRIGRAMS = 15
MIN_NGRAM_COUNT = 2
MIN_CONTENT_WORD_LENGTH = 3
KEYWORD_POLARITY_THRESHOLD = 0.5
THEME_MAX_EXAMPLES = 3
THEME_EXAMPLE_CHARS = 150
LONG_REVIEW_WORDS = 100
SHORT_REVIEW_WORDS = 10
STAFF_MIN_MENTIONS = 3
STAFF_MAX_NAME_LENGTH = 15
MAX_STAFF_NAMES = 10
SERVICE_MIN_MENTIONS = 2
SERVICE_POLARITY_THRESHOLD = 0.3
MAX_COMPETITOR_MENTIONS = 10

# ---------------------------------------------------------------------------
# Legitimacy
# ---------------------------------------------------------------------------
VELOCITY_SPIKE_MULTIPLIER = 2.5
DUPLICATE_PREFIX_CHARS = 80
DUPLICATE_MIN_TEXT_CHARS = 20
LOW_EFFORT_WORDS = 5
TOP_SUSPICIOUS = 10
SUSPICIOUS_LISTING_MIN_SCORE = 35
SINGLE_REVIEW_PATTERN_SHARE = 0.4
NO_TEXT_PATTERN_SHARE = 0.3

# (upper bound inclusive, label)
FAKE_SCORE_BANDS = [
    (20, "0-20 (Likely Real)"),
    (40, "21-40 (Low Risk)"),
    (60, "41-60 (Medium Risk)"),
    (80, "61-80 (High Risk)"),
    (100, "81-100 (Likely Fake)"),
]

# ---------------------------------------------------------------------------
# Temporal
# ---------------------------------------------------------------------------
TREND_WINDOW_MONTHS = 3
ACCELERATION_RATIO = 1.2
DECELERATION_RATIO = 0.8
BURST_MULTIPLIER = 2

# Recency score banding by the average monthly volume of the last
# TREND_WINDOW_MONTHS dated months.
RECENCY_DEFAULT = 50
RECENCY_BUSY_VOLUME = 5          # > this → 95
RECENCY_ACTIVE_VOLUME = 2        # > this → 80
RECENCY_QUIET_VOLUME = 1         # < this → 30
RECENCY_SCORES = {"busy": 95, "active": 80, "quiet": 30}

# ---------------------------------------------------------------------------
# Competitive benchmarks (industry averages for local businesses)
# ---------------------------------------------------------------------------
BENCHMARK_AVERAGE_RATING = 4.2
BENCHMARK_RESPONSE_RATE = 30
BENCHMARK_AUTHENTICITY = 85
BENCHMARK_NPS = 30
BENCHMARK_ENGAGEMENT = 50
BENCHMARK_STRENGTH_RATIO = 1.1
BENCHMARK_WEAKNESS_RATIO = 0.8

POSITIONING_BANDS = [
    (80, "Market Leader"),
    (60, "Competitive"),
    (40, "Average"),
    (0, "Below Market"),
]

# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------
NEGATIVE_RESPONSE_RATE_MIN = 50
TEMPLATE_RATE_MAX = 30
DEFENSIVE_RATE_MAX = 20
ONE_STAR_RATIO_MAX = 15
SUSPICIOUS_PERCENT_MAX = 15
OVERVIEW_RESPONSE_RATE_MIN = 50
NPS_IMPROVEMENT_THRESHOLD = 20
ALIGNMENT_MIN = 60
MAX_SUGGESTED_RESPONSES = 5

SEVERITY_ORDER = {"CRITICAL": 0, "HIGH": 1, "MEDIUM": 2, "LOW": 3}
