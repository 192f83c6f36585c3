"""Precompiled whole-word keyword matchers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import regex as re

from ..config import ScoringConfig


class KeywordMatcher:
    """Case-insensitive, whole-word match against a fixed vocabulary."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words = tuple(words)
        if not self.words:
            raise ValueError("KeywordMatcher requires at least one word")
        alternation = "|".join(re.escape(word) for word in self.words)
        self._pattern = re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)

    def search(self, text: str) -> bool:
        return self._pattern.search(text) is not None

    def __repr__(self) -> str:
        return f"KeywordMatcher({self.words!r})"


@dataclass(frozen=True, slots=True)
class MatcherTable:
    """Matchers for every vocabulary the scorers consult."""

    interrogatives: KeywordMatcher
    transitions: KeywordMatcher
    procedural: KeywordMatcher
    examples: KeywordMatcher
    benefits: KeywordMatcher
    enumerations: KeywordMatcher

    @classmethod
    def from_config(cls, config: ScoringConfig) -> "MatcherTable":
        return cls(
            interrogatives=KeywordMatcher(config.interrogatives),
            transitions=KeywordMatcher(config.transitions),
            procedural=KeywordMatcher(config.procedural),
            examples=KeywordMatcher(config.examples),
            benefits=KeywordMatcher(config.benefits),
            enumerations=KeywordMatcher(config.enumerations),
        )
