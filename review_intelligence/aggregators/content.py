"""
Content block: what reviewers actually talk about.

Keywords, bigrams and trigrams come from a stop-word filtered token
stream.  Themes match fixed complaint (1-2 star) and praise (4-5 star)
taxonomies with word-boundary patterns and keep a few verbatim examples.
Staff names are capitalized words that recur across reviews and are not
ordinary vocabulary.
"""

import re
import statistics
from collections import Counter

from .. import config
from ..lexicon import (
    ASPECT_KEYWORDS,
    COMPETITOR_INDICATORS,
    COMPLAINT_THEMES,
    NON_NAME_WORDS,
    PRAISE_THEMES,
    SERVICE_KEYWORDS,
    STOP_WORDS,
    WORD_SCORES,
)
from ..preprocessing import (
    compile_keyword_pattern,
    content_tokens,
    count_syllables,
    split_sentences,
)
from .stats import compound, has_text, mean, pct

_NAME_PATTERN = re.compile(r"\b([A-Z][a-z]{2,})\b")
_EMOJI = re.compile(
    "[\U0001F600-\U0001F64F\U0001F300-\U0001F5FF\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF\u2600-\u26FF\u2700-\u27BF]"
)
_SHOUTING = re.compile(r"[!?]{3,}")
_COMPETITOR_NAME_SPLIT = re.compile(r"[,.!?\n]")

_COMPLAINT_PATTERNS = [
    (theme, compile_keyword_pattern(kws)) for theme, kws in COMPLAINT_THEMES
]
_PRAISE_PATTERNS = [
    (theme, compile_keyword_pattern(kws)) for theme, kws in PRAISE_THEMES
]
_SERVICE_PATTERNS = [
    (service, compile_keyword_pattern(kws)) for service, kws in SERVICE_KEYWORDS
]
_ASPECT_WORDS = frozenset(kw for _, kws in ASPECT_KEYWORDS for kw in kws)


def empty_content() -> dict:
    return {
        "top_keywords": [],
        "top_phrases": [],
        "trigrams": [],
        "complaint_themes": [],
        "praise_themes": [],
        "average_word_count": 0,
        "median_word_count": 0,
        "long_reviews_count": 0,
        "short_reviews_count": 0,
        "language_quality_score": 0,
        "question_count": 0,
        "emoji_usage_rate": 0,
        "mentioned_staff": [],
        "readability_score": 0,
        "average_sentence_length": 0,
        "unique_word_ratio": 0,
        "services_mentioned": [],
        "competitor_mentions": [],
    }


def compute_content(reviews: list[dict]) -> dict:
    text_reviews = [r for r in reviews if has_text(r)]
    if not text_reviews:
        return empty_content()

    keyword_counts: Counter = Counter()
    keyword_sentiment: dict[str, float] = {}
    bigrams: Counter = Counter()
    trigrams: Counter = Counter()
    all_words = []

    for r in text_reviews:
        words = content_tokens(r["review_text"])
        all_words.extend(words)
        for w in words:
            keyword_counts[w] += 1
            keyword_sentiment[w] = keyword_sentiment.get(w, 0.0) + compound(r)
        bigrams.update(" ".join(words[i:i + 2]) for i in range(len(words) - 1))
        trigrams.update(" ".join(words[i:i + 3]) for i in range(len(words) - 2))

    top_keywords = [
        {"word": w, "count": c, "sentiment": _polarity(keyword_sentiment[w],
                                                       config.KEYWORD_POLARITY_THRESHOLD)}
        for w, c in keyword_counts.most_common(config.TOP_KEYWORDS)
    ]

    word_counts = [r["word_count"] for r in text_reviews]
    readability = compute_readability(". ".join(r["review_text"] for r in text_reviews))

    return {
        "top_keywords": top_keywords,
        "top_phrases": _frequent(bigrams, config.TOP_BIGRAMS),
        "trigrams": _frequent(trigrams, config.TOP_TRIGRAMS),
        "complaint_themes": extract_themes(
            [r for r in text_reviews if r["rating"] <= 2], _COMPLAINT_PATTERNS
        ),
        "praise_themes": extract_themes(
            [r for r in text_reviews if r["rating"] >= 4], _PRAISE_PATTERNS
        ),
        "average_word_count": round(mean(word_counts)),
        "median_word_count": round(statistics.median(word_counts)),
        "long_reviews_count": sum(1 for c in word_counts if c > config.LONG_REVIEW_WORDS),
        "short_reviews_count": sum(1 for c in word_counts if c < config.SHORT_REVIEW_WORDS),
        "language_quality_score": round(mean(_language_quality(r) for r in text_reviews)),
        "question_count": sum(1 for r in text_reviews if "?" in r["review_text"]),
        "emoji_usage_rate": round(
            pct(sum(1 for r in text_reviews if _EMOJI.search(r["review_text"])),
                len(text_reviews)),
            1,
        ),
        "mentioned_staff": _staff_mentions(text_reviews),
        "readability_score": readability["flesch_kincaid"],
        "average_sentence_length": readability["avg_sentence_length"],
        "unique_word_ratio": round(len(set(all_words)) / len(all_words), 3) if all_words else 0,
        "services_mentioned": _service_mentions(text_reviews),
        "competitor_mentions": _competitor_mentions(text_reviews),
    }


def compute_readability(text: str) -> dict:
    """
    Flesch-Kincaid grade level:
        0.39 * words/sentence + 11.8 * syllables/word - 15.59
    floored at 0.
    """
    sentences = split_sentences(text)
    words = text.split()
    if not words:
        return {"flesch_kincaid": 0, "avg_sentence_length": 0, "avg_word_length": 0}

    avg_sentence_len = len(words) / len(sentences) if sentences else len(words)
    avg_syllables = sum(count_syllables(w) for w in words) / len(words)
    grade = 0.39 * avg_sentence_len + 11.8 * avg_syllables - 15.59

    return {
        "flesch_kincaid": round(max(0.0, grade), 1),
        "avg_sentence_length": round(avg_sentence_len, 1),
        "avg_word_length": round(mean(len(w) for w in words), 1),
    }


def extract_themes(reviews: list[dict], patterns) -> list[dict]:
    """Count reviews per theme, most frequent first, with a few examples."""
    themes = []
    for theme, pattern in patterns:
        matching = [r for r in reviews if pattern.search(r["review_text"])]
        if not matching:
            continue
        themes.append({
            "theme": theme,
            "count": len(matching),
            "examples": [
                r["review_text"][:config.THEME_EXAMPLE_CHARS]
                for r in matching[:config.THEME_MAX_EXAMPLES]
            ],
        })
    themes.sort(key=lambda t: -t["count"])
    return themes


def _polarity(total: float, threshold: float) -> str:
    if total > threshold:
        return "positive"
    if total < -threshold:
        return "negative"
    return "neutral"


def _frequent(counter: Counter, limit: int) -> list[dict]:
    return [
        {"phrase": phrase, "count": count}
        for phrase, count in counter.most_common()
        if count >= config.MIN_NGRAM_COUNT
    ][:limit]


def _language_quality(review: dict) -> int:
    text = review["review_text"]
    words = review["word_count"]
    quality = 50
    if words > 20:
        quality += 15
    if words > 50:
        quality += 10
    if "." in text or "," in text:
        quality += 10
    if text != text.upper():
        quality += 5
    if _SHOUTING.search(text):
        quality -= 10
    return max(0, min(100, quality))


def _is_name_candidate(word: str) -> bool:
    lower = word.lower()
    return (
        word not in NON_NAME_WORDS
        and len(word) < config.STAFF_MAX_NAME_LENGTH
        and lower not in STOP_WORDS
        and lower not in WORD_SCORES
        and lower not in _ASPECT_WORDS
    )


def _staff_mentions(reviews: list[dict]) -> list[str]:
    names: Counter = Counter()
    for r in reviews:
        names.update(
            w for w in _NAME_PATTERN.findall(r["review_text"]) if _is_name_candidate(w)
        )
    return [
        name for name, count in names.most_common()
        if count >= config.STAFF_MIN_MENTIONS
    ][:config.MAX_STAFF_NAMES]


def _service_mentions(reviews: list[dict]) -> list[dict]:
    results = []
    for service, pattern in _SERVICE_PATTERNS:
        matching = [r for r in reviews if pattern.search(r["review_text"])]
        if len(matching) < config.SERVICE_MIN_MENTIONS:
            continue
        results.append({
            "service": service,
            "count": len(matching),
            "sentiment": _polarity(sum(compound(r) for r in matching),
                                   config.SERVICE_POLARITY_THRESHOLD),
        })
    results.sort(key=lambda s: -s["count"])
    return results


def _competitor_mentions(reviews: list[dict]) -> list[str]:
    """Text following comparison phrases like "better than" or "switched from"."""
    mentions = []
    for r in reviews:
        text = r["review_text"]
        lower = text.lower()
        for indicator in COMPETITOR_INDICATORS:
            idx = lower.find(indicator)
            if idx == -1:
                continue
            start = idx + len(indicator)
            after = text[start:start + 40].strip()
            name = _COMPETITOR_NAME_SPLIT.split(after)[0].strip()
            if 2 < len(name) < 30 and name not in mentions:
                mentions.append(name)
    return mentions[:config.MAX_COMPETITOR_MENTIONS]
