"""Sentence splitting for oversized blocks and sentence counting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import regex as re

# A run of non-terminators closed by one or more terminators, or the
# unterminated tail of the text.
_SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+|[^.!?]+\Z")


@dataclass(frozen=True, slots=True)
class Sentences:
    """Lazy, re-iterable view over the sentences of ``text``.

    Fragments of ``min_chars`` characters or fewer (after trimming) are
    skipped. When nothing survives the view yields ``text`` itself, so the
    sequence is never empty.
    """

    text: str
    min_chars: int = 10

    def __iter__(self) -> Iterator[str]:
        emitted = False
        for match in _SENTENCE_PATTERN.finditer(self.text):
            sentence = match.group(0).strip()
            if len(sentence) > self.min_chars:
                emitted = True
                yield sentence
        if not emitted:
            yield self.text

    def __len__(self) -> int:
        return sum(1 for _ in self)


class SentenceSplitter:
    """Split text blocks into trimmed sentence strings."""

    def __init__(self, min_chars: int = 10) -> None:
        if min_chars < 0:
            raise ValueError("min_chars must be non-negative")
        self.min_chars = min_chars

    def split(self, text: str) -> Sentences:
        return Sentences(text or "", self.min_chars)

    def count(self, text: str) -> int:
        return len(self.split(text))


def split_sentences(text: str) -> Sentences:
    return Sentences(text or "")
