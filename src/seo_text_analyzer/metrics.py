"""
Text metrics: word and sentence counts, readability and keyword density.

The readability figure is a simplified Flesch-Kincaid proxy based only on
average sentence length. It is kept formula-compatible with the reports
already produced for existing consumers.
"""

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from .models import Keyword, round_half_up

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")

# Word boundary where only [A-Za-z0-9_] are word characters
_ASCII_BOUNDARY = (
    r"(?:(?<=[A-Za-z0-9_])(?![A-Za-z0-9_])|(?<![A-Za-z0-9_])(?=[A-Za-z0-9_]))"
)


def count_words(text: str) -> int:
    """
    Count words by splitting on runs of whitespace.

    Leading or trailing whitespace yields an empty piece that is still
    counted, so the result is at least 1 for any string.
    """
    return len(_WHITESPACE_RE.split(text))


def count_sentences(text: str) -> int:
    """Count non-blank fragments between runs of '.', '!' and '?'."""
    return len([s for s in _SENTENCE_END_RE.split(text) if s.strip()])


def readability_score(word_count: int, sentence_count: int) -> int:
    """
    Compute a 0-100 readability score from average sentence length.

    Args:
        word_count: Number of words.
        sentence_count: Number of sentences; 0 treats the text as one sentence.

    Returns:
        Score clamped to [0, 100] and rounded to the nearest integer.
    """
    if sentence_count > 0:
        avg_words_per_sentence = word_count / sentence_count
    else:
        avg_words_per_sentence = word_count

    score = max(0.0, min(100.0, 100 - (avg_words_per_sentence - 10) * 5))
    return int(round_half_up(score))


def keyword_density(
    text: str,
    keywords: Sequence[Keyword],
    word_count: Optional[int] = None,
) -> float:
    """
    Calculate the density of the primary keyword as a percentage.

    Only the first (highest-relevance) keyword is measured. Matches are
    whole-word and case-insensitive.

    Args:
        text: Original text.
        keywords: Ranked keyword list.
        word_count: Precomputed word count; computed from text when omitted.

    Returns:
        Density rounded to 2 decimal places, or 0 for an empty keyword list.
    """
    if not keywords:
        return 0.0

    if word_count is None:
        word_count = count_words(text)

    primary = keywords[0].text.lower()
    pattern = re.compile(f"{_ASCII_BOUNDARY}{re.escape(primary)}{_ASCII_BOUNDARY}", re.IGNORECASE)
    matches = len(pattern.findall(text))

    # Ties on the exact binary value round up
    density = Decimal((matches / word_count) * 100)
    return float(density.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
