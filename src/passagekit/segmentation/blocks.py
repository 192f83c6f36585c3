"""Load and normalise extracted block records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping

import orjson

from ..config import ExtractionConfig
from ..types import TextBlock

LOGGER = logging.getLogger(__name__)


def _coerce_record(record: Any, position: int, config: ExtractionConfig) -> TextBlock:
    if isinstance(record, TextBlock):
        return record
    if not isinstance(record, Mapping):
        raise ValueError(f"Block {position} must be an object, got {type(record).__name__}")
    text = record.get("text")
    if not isinstance(text, str):
        raise ValueError(f"Block {position} is missing a string 'text' field")
    tag = str(record.get("tag") or "p").strip().lower()
    heading = record.get("isHeading", record.get("is_heading"))
    if heading is None:
        heading = tag in config.heading_tags
    return TextBlock(text=text, is_heading=bool(heading), tag=tag)


def normalize_blocks(records: Iterable[Any], config: ExtractionConfig | None = None) -> List[TextBlock]:
    """Collapse whitespace and drop blocks too short to carry content."""

    cfg = config or ExtractionConfig()
    blocks: List[TextBlock] = []
    dropped = 0
    for position, record in enumerate(records):
        block = _coerce_record(record, position, cfg)
        cleaned = " ".join(block.text.split())
        if len(cleaned) <= cfg.min_block_chars:
            dropped += 1
            continue
        blocks.append(TextBlock(text=cleaned, is_heading=block.is_heading, tag=block.tag))
    if dropped:
        LOGGER.debug("Dropped %d blocks at or below %d characters", dropped, cfg.min_block_chars)
    return blocks


def load_blocks(path: Path | str, config: ExtractionConfig | None = None) -> List[TextBlock]:
    """Read block records from a JSON array or a JSONL file."""

    path = Path(path)
    raw = path.read_bytes()
    if not raw.strip():
        return []
    try:
        records = orjson.loads(raw)
    except orjson.JSONDecodeError:
        records = [orjson.loads(line) for line in raw.splitlines() if line.strip()]
    if isinstance(records, Mapping):
        records = records["blocks"] if "blocks" in records else [records]
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a list of block records")
    return normalize_blocks(records, config)
