"""
Text preprocessing helpers shared by the classifier and the aggregators.

Design decisions:
- Scoring tokens keep apostrophes and hyphens so that negators like
  "don't" and compounds like "top-notch" survive tokenization.
- Content tokens (keywords, n-grams) drop everything but letters and
  filter stop words, which is what keyword counting needs.
- Keyword matching is word-boundary based to avoid false positives like
  "priceless" matching "price".
"""

import re
import unicodedata

from .lexicon import NEGATIVE_PHRASES, POSITIVE_PHRASES, STOP_WORDS
from . import config


_SCORING_STRIP = re.compile(r"[^a-z'\s-]")
_CONTENT_STRIP = re.compile(r"[^a-z\s]")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def clean_text(text: str | None) -> str:
    """
    NFC-normalise and trim review text.

    Returns an empty string for None so callers never branch on it.
    """
    if not text:
        return ""
    return unicodedata.normalize("NFC", text).strip()


def has_text(text: str | None) -> bool:
    return bool(text and text.strip())


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text)


def scoring_tokens(lowered: str) -> list[str]:
    """Tokens for lexicon scoring: letters, apostrophes, hyphens; len > 1."""
    stripped = _SCORING_STRIP.sub("", lowered)
    return [w for w in stripped.split() if len(w) > 1]


def content_tokens(text: str) -> list[str]:
    """Lowercased, letters-only, stop-word filtered tokens for keyword mining."""
    stripped = _CONTENT_STRIP.sub("", text.lower())
    return [
        w for w in stripped.split()
        if len(w) >= config.MIN_CONTENT_WORD_LENGTH and w not in STOP_WORDS
    ]


def word_count(text: str | None) -> int:
    return len(text.split()) if has_text(text) else 0


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def count_syllables(word: str) -> int:
    """
    Approximate English syllable count.

    Strips silent endings ("-es", "-ed", trailing "e") and counts vowel
    groups.  Good enough for readability grading, not for poetry.
    """
    word = re.sub(r"[^a-z]", "", word.lower())
    if len(word) <= 2:
        return 1
    word = re.sub(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$", "", word)
    word = re.sub(r"^y", "", word)
    groups = re.findall(r"[aeiouy]{1,2}", word)
    return len(groups) if groups else 1


def compile_keyword_pattern(keywords) -> re.Pattern:
    """
    Build one case-insensitive word-boundary regex for a keyword list.

    Sorted longest-first so multi-word keywords win over their prefixes.
    """
    ordered = sorted(keywords, key=len, reverse=True)
    return re.compile(
        r"\b(" + "|".join(re.escape(k) for k in ordered) + r")\b",
        re.IGNORECASE,
    )


def compile_keyword_table(table) -> list[tuple[str, list[tuple[str, re.Pattern]]]]:
    """
    Compile a (category, keywords) table into per-keyword patterns.

    Per-keyword patterns let callers count how many distinct keywords of a
    category appear, not just whether any does.
    """
    compiled = []
    for category, keywords in table:
        compiled.append((
            category,
            [(kw, compile_keyword_pattern([kw])) for kw in keywords],
        ))
    return compiled


def compile_phrase_table(phrases) -> list[tuple[str, float, re.Pattern]]:
    """
    Compile (phrase, weight) pairs into word-bounded patterns, so that
    "sue" does not fire inside "issue".
    """
    return [
        (phrase, weight,
         re.compile(r"(?<![a-z0-9])" + re.escape(phrase) + r"(?![a-z0-9])"))
        for phrase, weight in phrases
    ]


NEGATIVE_PHRASE_PATTERNS = compile_phrase_table(NEGATIVE_PHRASES)
POSITIVE_PHRASE_PATTERNS = compile_phrase_table(POSITIVE_PHRASES)


def phrase_hits(lowered: str, table) -> list[tuple[str, float]]:
    """(phrase, weight) for every phrase of a compiled table found in the text."""
    return [(phrase, weight) for phrase, weight, pattern in table if pattern.search(lowered)]
