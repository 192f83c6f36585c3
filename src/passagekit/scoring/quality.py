"""Vector-fitness and retrieval-fitness scores for finished passages."""

from __future__ import annotations

from ..config import SegmentationConfig
from ..text import SentenceSplitter, lexical_diversity, round_half_up
from ..types import Passage, PassageDraft
from .matchers import MatcherTable


def _clamp(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


class QualityScorer:
    """Compute the two independent 0-100 heuristics for a passage.

    Neither score is normalised across a passage set; each depends only on
    the passage's own text, word count and semantic weight.
    """

    def __init__(
        self,
        config: SegmentationConfig,
        matchers: MatcherTable,
        splitter: SentenceSplitter | None = None,
    ) -> None:
        self.config = config
        self.matchers = matchers
        self.splitter = splitter or SentenceSplitter()

    def vector_quality(self, text: str, word_count: int, semantic_weight: float) -> int:
        score = max(0, 100 - abs(word_count - self.config.target_length) * 2) * 0.4
        score += semantic_weight * 15
        sentence_count = self.splitter.count(text)
        if 1 < sentence_count < 6:
            score += 20
        if self.matchers.interrogatives.search(text):
            score += 15
        if "?" in text:
            score += 10
        score += lexical_diversity(text) * 25
        if self.matchers.transitions.search(text):
            score += 10
        return _clamp(round_half_up(score))

    def retrieval_score(self, text: str, word_count: int) -> int:
        score = 0
        if self.config.min_length <= word_count <= self.config.max_length:
            score += 30
        if self.matchers.procedural.search(text):
            score += 20
        if self.matchers.examples.search(text):
            score += 15
        if self.matchers.benefits.search(text):
            score += 15
        if "?" in text and len(text) > 100:
            score += 20
        if self.matchers.enumerations.search(text):
            score += 10
        return _clamp(score)

    def score(self, draft: PassageDraft) -> Passage:
        text = draft.text
        count = draft.word_count
        return Passage(
            id=f"P{draft.index:02d}",
            index=draft.index,
            text=text,
            word_count=count,
            section=draft.section,
            semantic_weight=draft.semantic_weight,
            vector_quality=self.vector_quality(text, count, draft.semantic_weight),
            retrieval_score=self.retrieval_score(text, count),
        )
