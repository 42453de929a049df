"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of the index structures so they can be
unit tested on their own before being wired into ingestion and ranking.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
import math


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Return the arithmetic mean of ``ratings`` truncated toward zero.

    An empty sequence rates 0.
    """

    if not ratings:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient


def compute_term_frequencies(words: Sequence[str]) -> dict[str, float]:
    """Return each word's share of ``words``.

    Frequencies are computed once at ingestion time; an empty sequence yields
    an empty mapping.
    """

    if not words:
        return {}
    inv_word_count = 1.0 / len(words)
    return {word: count * inv_word_count for word, count in Counter(words).items()}


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return ``ln(total_docs / doc_freq)``.

    Words that no live document contains have no IDF; callers skip them, so a
    non-positive ``doc_freq`` yields 0.0 here.
    """

    if doc_freq <= 0 or total_docs <= 0:
        return 0.0
    return math.log(total_docs / doc_freq)
