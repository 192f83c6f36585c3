"""Public data structures shared across the passagekit pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True, slots=True)
class TextBlock:
    """One extracted fragment in document order."""

    text: str
    is_heading: bool = False
    tag: str = "p"


@dataclass(frozen=True, slots=True)
class WeightedBlock:
    """A :class:`TextBlock` with its precomputed semantic weight."""

    block: TextBlock
    semantic_weight: float

    @property
    def text(self) -> str:
        return self.block.text

    @property
    def is_heading(self) -> bool:
        return self.block.is_heading

    @property
    def tag(self) -> str:
        return self.block.tag


@dataclass(frozen=True, slots=True)
class PassageDraft:
    """Finalized passage body before scoring."""

    index: int
    words: tuple[str, ...]
    section: str
    semantic_weight: float

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def text(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True, slots=True)
class Passage:
    """Scored, retrieval-ready passage."""

    id: str
    index: int
    text: str
    word_count: int
    section: str
    semantic_weight: float
    vector_quality: int
    retrieval_score: int

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(slots=True)
class PassageStats:
    """Aggregate statistics over a non-empty passage list."""

    total: int
    avg_words: float
    avg_vector_quality: float
    avg_retrieval_score: float
    avg_semantic_weight: float
    sections: int
    optimal_length_ratio: float


@dataclass(slots=True)
class TierPartition:
    """Passages grouped by score thresholds, preserving emission order."""

    excellent: List[Passage] = field(default_factory=list)
    good: List[Passage] = field(default_factory=list)
    needs_work: List[Passage] = field(default_factory=list)
    high: List[Passage] = field(default_factory=list)
    medium: List[Passage] = field(default_factory=list)
    low: List[Passage] = field(default_factory=list)


@dataclass(slots=True)
class PipelineResult:
    """Aggregate output from :func:`passagekit.pipeline.run_pipeline`."""

    passages: List[Passage]
    stats: Optional[PassageStats]
    tiers: TierPartition

    @property
    def total(self) -> int:
        return len(self.passages)
