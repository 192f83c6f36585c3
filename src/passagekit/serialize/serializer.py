"""Serialize passages with strict order guarantees."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

import orjson

from ..types import Passage


@dataclass(slots=True)
class SerializationLog:
    """Passage ids written so far, in order."""

    ids: List[str] = field(default_factory=list)


class PassageSerializer:
    """Write passages as JSON lines, rejecting out-of-order ids."""

    def __init__(self) -> None:
        self.log = SerializationLog()
        self._last_index: int | None = None

    def serialize(self, passages: Sequence[Passage]) -> List[bytes]:
        lines: List[bytes] = []
        for passage in passages:
            if self._last_index is not None and passage.index <= self._last_index:
                raise ValueError(f"Order regression detected: {passage.index} <= {self._last_index}")
            lines.append(orjson.dumps(passage.to_dict()))
            self._last_index = passage.index
            self.log.ids.append(passage.id)
        return lines

    def write(self, passages: Sequence[Passage], path: Path) -> Path:
        lines = self.serialize(passages)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            for line in lines:
                handle.write(line + b"\n")
        return path
