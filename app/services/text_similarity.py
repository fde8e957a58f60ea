"""Bag-of-words cosine similarity between free-text strings."""

from __future__ import annotations

import math
import re
from collections import Counter

# Tokens of this length or shorter ("ai", "on", "a") carry no signal.
MAX_IGNORED_TOKEN_LENGTH = 2

_NON_WORD = re.compile(r"\W+", re.ASCII)


def analyze_text(text: str) -> Counter:
    """Lowercase word-frequency map of `text`, ignoring short tokens."""
    words = _NON_WORD.split((text or "").lower())
    return Counter(word for word in words if len(word) > MAX_IGNORED_TOKEN_LENGTH)


def compute_similarity(text_a: str, text_b: str) -> float:
    """
    Cosine similarity of the raw term-frequency vectors of two texts.

    Returns a value in [0, 1]; 0.0 when either text has no meaningful tokens.
    """
    freq_a = analyze_text(text_a)
    freq_b = analyze_text(text_b)

    dot_product = 0
    mag_a = 0
    mag_b = 0
    for word in freq_a.keys() | freq_b.keys():
        f_a = freq_a[word]
        f_b = freq_b[word]
        dot_product += f_a * f_b
        mag_a += f_a * f_a
        mag_b += f_b * f_b

    # Counts are integers, so sqrt(mag_a * mag_b) keeps identical texts at exactly 1.0
    denominator = math.sqrt(mag_a * mag_b) or 1
    return dot_product / denominator
