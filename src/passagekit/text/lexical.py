"""Word-level helpers."""

from __future__ import annotations

import math
from typing import List


def split_words(text: str) -> List[str]:
    """Whitespace tokenisation; empty or blank text yields no words."""

    if not text:
        return []
    return text.split()


def lexical_diversity(text: str) -> float:
    """Share of distinct lowercase tokens among all tokens (0.0 for empty text)."""

    tokens = split_words(text)
    if not tokens:
        return 0.0
    return len({token.lower() for token in tokens}) / len(tokens)


def round_half_up(value: float, digits: int = 0) -> float:
    # Python's round() is banker's rounding; scores use half-up.
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
