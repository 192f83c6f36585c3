"""Guardrail assertions over emitted passages."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Sequence

from ..config import SegmentationConfig
from ..types import Passage

LOGGER = logging.getLogger(__name__)


def run_audits(passages: Sequence[Passage], config: SegmentationConfig) -> None:
    _assert_contiguous_ids(passages)
    _assert_min_length(passages, config.min_length)
    _assert_score_bounds(passages)
    _assert_section_labels(passages, config.section_label_length)
    _log_section_sizes(passages)


def _assert_contiguous_ids(passages: Sequence[Passage]) -> None:
    for expected, passage in enumerate(passages):
        if passage.index != expected or passage.id != f"P{expected:02d}":
            raise AssertionError(f"Passage id {passage.id} out of sequence; expected ordinal {expected}")


def _assert_min_length(passages: Sequence[Passage], min_length: int) -> None:
    for passage in passages:
        if passage.word_count < min_length:
            raise AssertionError(f"{passage.id} has {passage.word_count} words, below {min_length}")
        if passage.word_count != len(passage.text.split()):
            raise AssertionError(f"{passage.id} word_count does not match its text")


def _assert_score_bounds(passages: Sequence[Passage]) -> None:
    for passage in passages:
        for name in ("vector_quality", "retrieval_score"):
            value = getattr(passage, name)
            if not isinstance(value, int) or not 0 <= value <= 100:
                raise AssertionError(f"{passage.id} {name}={value!r} outside [0, 100]")


def _assert_section_labels(passages: Sequence[Passage], limit: int) -> None:
    for passage in passages:
        if len(passage.section) > limit:
            raise AssertionError(f"{passage.id} section label exceeds {limit} characters")


def _log_section_sizes(passages: Sequence[Passage]) -> None:
    counter: Counter[str] = Counter(p.section for p in passages)
    LOGGER.debug("per-section passage counts: %s", dict(counter))
