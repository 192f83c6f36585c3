"""Segmentation state machine turning weighted blocks into passages.

Blocks are consumed strictly in document order. The builder keeps a rolling
word buffer per document and emits a :class:`PassageDraft` whenever one of
the following boundaries is reached:

* a heading arrives and the buffer holds at least ``min_length`` words;
* appending a block would overflow ``max_length`` (the next buffer is seeded
  with the last ``overlap`` words of the emitted one);
* the buffer reached ``target_length`` and the block closes a section (the
  next block is a heading, or there is no next block).

Blocks longer than ``max_length`` words are re-chunked on sentence
boundaries with the same overlap rule. Sentences longer than
``max_length - overlap`` words are first cut into windows of that size. A
window may still join a partial passage below ``min_length``, so an oversized
block can yield passages of up to ``min_length - 1 + max_length - overlap``
words.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..config import SegmentationConfig
from ..text import SentenceSplitter, split_words
from ..types import PassageDraft, WeightedBlock

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanState:
    """Accumulator threaded through every builder transition."""

    section: str
    buffer: List[str] = field(default_factory=list)
    weight: float = 0.0
    next_index: int = 0

    @property
    def word_count(self) -> int:
        return len(self.buffer)

    def reset(self) -> None:
        self.buffer = []
        self.weight = 0.0


def emit_and_carry_overlap(
    buffer: Sequence[str],
    overlap: int,
    seed_words: Sequence[str],
) -> Tuple[Tuple[str, ...], List[str]]:
    """Freeze ``buffer`` and start the next one from its tail plus ``seed_words``."""

    emitted = tuple(buffer)
    tail = list(emitted[-overlap:]) if overlap > 0 else []
    return emitted, tail + list(seed_words)


class PassageBuilder:
    """Pack ordered blocks into bounded passages while tracking sections."""

    def __init__(self, config: SegmentationConfig, splitter: SentenceSplitter | None = None) -> None:
        self.config = config
        self.splitter = splitter or SentenceSplitter()

    def start(self) -> ScanState:
        return ScanState(section=self.config.default_section)

    def build(self, blocks: Iterable[WeightedBlock]) -> List[PassageDraft]:
        state = self.start()
        drafts: List[PassageDraft] = []
        pending: WeightedBlock | None = None
        for block in blocks:
            if pending is not None:
                drafts.extend(self.step(state, pending, closes_section=block.is_heading))
            pending = block
        if pending is not None:
            drafts.extend(self.step(state, pending, closes_section=True))
        drafts.extend(self.finish(state))
        LOGGER.debug("Built %d passages; final section=%r", len(drafts), state.section)
        return drafts

    def step(self, state: ScanState, block: WeightedBlock, *, closes_section: bool) -> List[PassageDraft]:
        """Apply one block to ``state`` and return any passages it completes.

        ``closes_section`` is true when ``block`` is the last block of the
        document or is immediately followed by a heading.
        """

        if block.is_heading:
            return self._on_heading(state, block)
        words = split_words(block.text)
        if len(words) > self.config.max_length:
            return self._on_oversized(state, block)
        return self._on_block(state, block, words, closes_section)

    def finish(self, state: ScanState) -> List[PassageDraft]:
        if state.word_count >= self.config.min_length:
            draft = self._emit(state, state.buffer, state.weight)
            state.reset()
            return [draft]
        if state.buffer:
            LOGGER.debug("Dropping %d trailing words below min_length", state.word_count)
            state.reset()
        return []

    def _on_heading(self, state: ScanState, block: WeightedBlock) -> List[PassageDraft]:
        emitted: List[PassageDraft] = []
        if state.word_count >= self.config.min_length:
            emitted.append(self._emit(state, state.buffer, state.weight))
        elif state.buffer:
            LOGGER.debug("Discarding %d words before heading %r", state.word_count, block.text[:50])
        state.reset()
        state.section = block.text[: self.config.section_label_length]
        return emitted

    def _on_oversized(self, state: ScanState, block: WeightedBlock) -> List[PassageDraft]:
        cfg = self.config
        emitted: List[PassageDraft] = []
        if state.word_count >= cfg.min_length:
            emitted.append(self._emit(state, state.buffer, state.weight))
            state.reset()

        temp: List[str] = []
        temp_weight = 0.0
        for group in self._sentence_groups(block.text):
            if len(temp) + len(group) > cfg.max_length and len(temp) >= cfg.min_length:
                words, temp = emit_and_carry_overlap(temp, cfg.overlap, group)
                emitted.append(self._emit(state, words, temp_weight))
                temp_weight = block.semantic_weight
            else:
                temp.extend(group)
                temp_weight = max(temp_weight, block.semantic_weight)

        if len(temp) >= cfg.min_length:
            emitted.append(self._emit(state, temp, temp_weight))
        else:
            # The short remainder seeds the main buffer for the following blocks.
            state.buffer = temp
            state.weight = temp_weight
        return emitted

    def _on_block(
        self,
        state: ScanState,
        block: WeightedBlock,
        words: Sequence[str],
        closes_section: bool,
    ) -> List[PassageDraft]:
        cfg = self.config
        if state.word_count + len(words) > cfg.max_length and state.word_count >= cfg.min_length:
            previous_weight = state.weight
            emitted_words, state.buffer = emit_and_carry_overlap(state.buffer, cfg.overlap, words)
            state.weight = block.semantic_weight
            return [self._emit(state, emitted_words, previous_weight)]

        state.buffer.extend(words)
        state.weight = max(state.weight, block.semantic_weight)
        if state.word_count >= cfg.target_length and closes_section:
            draft = self._emit(state, state.buffer, state.weight)
            state.reset()
            return [draft]
        return []

    def _sentence_groups(self, text: str) -> Iterator[List[str]]:
        window = self.config.max_length - self.config.overlap
        for sentence in self.splitter.split(text):
            words = split_words(sentence)
            if len(words) <= window:
                yield words
                continue
            # Sentences with no usable split point are cut into word windows.
            for start in range(0, len(words), window):
                yield words[start : start + window]

    @staticmethod
    def _emit(state: ScanState, words: Sequence[str], weight: float) -> PassageDraft:
        draft = PassageDraft(
            index=state.next_index,
            words=tuple(words),
            section=state.section,
            semantic_weight=weight,
        )
        state.next_index += 1
        return draft
