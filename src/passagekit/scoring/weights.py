"""Semantic weighting of individual text blocks."""

from __future__ import annotations

from ..config import WeightConfig
from ..text import lexical_diversity, round_half_up
from ..types import TextBlock, WeightedBlock
from .matchers import KeywordMatcher


class WeightCalculator:
    """Score how important a block is from its tag and surface text."""

    def __init__(self, config: WeightConfig, interrogatives: KeywordMatcher) -> None:
        self.config = config
        self.interrogatives = interrogatives

    def weight(self, tag: str, text: str) -> float:
        cfg = self.config
        value = 1.0 * cfg.tag_weights.get((tag or "").lower(), cfg.default_tag_weight)
        if "?" in text:
            value += cfg.question_bonus
        if self.interrogatives.search(text):
            value += cfg.interrogative_bonus
        low, high = cfg.length_bounds
        if low < len(text) < high:
            value += cfg.length_bonus
        value += lexical_diversity(text) * cfg.diversity_factor
        return round_half_up(value, 2)

    def weigh(self, block: TextBlock) -> WeightedBlock:
        return WeightedBlock(block=block, semantic_weight=self.weight(block.tag, block.text))
