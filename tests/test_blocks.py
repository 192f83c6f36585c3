from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from passagekit.config import ExtractionConfig
from passagekit.segmentation.blocks import load_blocks, normalize_blocks
from passagekit.types import TextBlock

LONG = "This paragraph is comfortably longer than thirty characters."


def test_normalize_collapses_whitespace_and_filters_short_blocks():
    records = [
        {"text": "  Spaced \n  out\ttext that keeps going on  ", "isHeading": False, "tag": "p"},
        {"text": "x" * 30, "isHeading": False, "tag": "p"},
        {"text": "y" * 31, "isHeading": False, "tag": "p"},
    ]
    blocks = normalize_blocks(records)
    assert [b.text for b in blocks] == ["Spaced out text that keeps going on", "y" * 31]


def test_heading_inferred_from_tag_when_flag_missing():
    blocks = normalize_blocks([{"text": LONG, "tag": "H2"}, {"text": LONG, "tag": "li"}])
    assert [(b.is_heading, b.tag) for b in blocks] == [(True, "h2"), (False, "li")]


def test_explicit_flag_wins_over_tag():
    blocks = normalize_blocks([{"text": LONG, "tag": "h3", "is_heading": False}])
    assert blocks == [TextBlock(text=LONG, is_heading=False, tag="h3")]


def test_missing_tag_defaults_to_paragraph():
    assert normalize_blocks([{"text": LONG}])[0].tag == "p"


def test_text_blocks_pass_through():
    block = TextBlock(text=LONG, is_heading=False, tag="td")
    assert normalize_blocks([block]) == [block]


def test_custom_minimum_characters():
    blocks = normalize_blocks([{"text": "short but fine"}], ExtractionConfig(min_block_chars=5))
    assert len(blocks) == 1


@pytest.mark.parametrize("record", [["not", "a", "mapping"], {"tag": "p"}, {"text": 12}])
def test_malformed_records_raise(record):
    with pytest.raises(ValueError):
        normalize_blocks([record])


def test_load_json_array(tmp_path: Path):
    path = tmp_path / "blocks.json"
    path.write_bytes(orjson.dumps([{"text": LONG, "isHeading": False, "tag": "p"}]))
    assert load_blocks(path) == [TextBlock(text=LONG, is_heading=False, tag="p")]


def test_load_jsonl(tmp_path: Path):
    path = tmp_path / "blocks.jsonl"
    lines = [orjson.dumps({"text": f"{LONG} {idx}", "tag": "p"}) for idx in range(3)]
    path.write_bytes(b"\n".join(lines) + b"\n")
    blocks = load_blocks(path)
    assert [b.text for b in blocks] == [f"{LONG} {idx}" for idx in range(3)]


def test_load_wrapped_object(tmp_path: Path):
    path = tmp_path / "doc.json"
    path.write_bytes(orjson.dumps({"url": "https://example.com", "blocks": [{"text": LONG, "tag": "h1"}]}))
    blocks = load_blocks(path)
    assert blocks[0].is_heading


def test_load_empty_file(tmp_path: Path):
    path = tmp_path / "empty.json"
    path.write_text("")
    assert load_blocks(path) == []
