"""Shared builders for passagekit tests."""
from __future__ import annotations

from typing import List

from passagekit.types import TextBlock, WeightedBlock


def make_words(count: int, prefix: str = "w") -> List[str]:
    return [f"{prefix}{idx}" for idx in range(count)]


def make_text(count: int, prefix: str = "w") -> str:
    return " ".join(make_words(count, prefix))


def weighted(text: str, weight: float = 1.0, *, heading: bool = False, tag: str = "p") -> WeightedBlock:
    return WeightedBlock(block=TextBlock(text=text, is_heading=heading, tag=tag), semantic_weight=weight)


def heading(text: str, tag: str = "h2") -> WeightedBlock:
    return weighted(text, 2.5, heading=True, tag=tag)
