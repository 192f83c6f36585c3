"""Aggregate statistics and tier partitions over scored passages."""

from __future__ import annotations

from statistics import fmean
from typing import Dict, List, Optional, Sequence

from ..config import SegmentationConfig, TierConfig
from ..text import round_half_up
from ..types import Passage, PassageStats, TierPartition


def compute_stats(passages: Sequence[Passage], config: SegmentationConfig) -> Optional[PassageStats]:
    """Return means over ``passages``, or ``None`` when there are none."""

    if not passages:
        return None
    optimal = sum(1 for p in passages if config.min_length <= p.word_count <= config.target_length)
    return PassageStats(
        total=len(passages),
        avg_words=round_half_up(fmean(p.word_count for p in passages), 2),
        avg_vector_quality=round_half_up(fmean(p.vector_quality for p in passages), 2),
        avg_retrieval_score=round_half_up(fmean(p.retrieval_score for p in passages), 2),
        avg_semantic_weight=round_half_up(fmean(p.semantic_weight for p in passages), 2),
        sections=len({p.section for p in passages}),
        optimal_length_ratio=round_half_up(optimal / len(passages), 4),
    )


def partition_tiers(passages: Sequence[Passage], config: TierConfig) -> TierPartition:
    tiers = TierPartition()
    for passage in passages:
        if passage.vector_quality >= config.quality_excellent:
            tiers.excellent.append(passage)
        elif passage.vector_quality >= config.quality_good:
            tiers.good.append(passage)
        else:
            tiers.needs_work.append(passage)
        if passage.retrieval_score >= config.retrieval_high:
            tiers.high.append(passage)
        elif passage.retrieval_score >= config.retrieval_medium:
            tiers.medium.append(passage)
        else:
            tiers.low.append(passage)
    return tiers


def primary_candidates(passages: Sequence[Passage], config: TierConfig) -> List[Passage]:
    """Passages in both the top quality and the top retrieval tier."""

    return [
        p
        for p in passages
        if p.vector_quality >= config.quality_excellent and p.retrieval_score >= config.retrieval_high
    ]


def section_groups(passages: Sequence[Passage]) -> Dict[str, List[str]]:
    groups: Dict[str, List[str]] = {}
    for passage in passages:
        groups.setdefault(passage.section, []).append(passage.id)
    return groups
