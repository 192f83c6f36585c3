from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from passagekit.config import PassageKitConfig, SegmentationConfig, TierConfig, load_config

ROOT = Path(__file__).resolve().parents[1]


def test_repository_config_matches_defaults():
    config = load_config(ROOT / "configs" / "passagekit.yaml")
    assert config.to_dict() == PassageKitConfig().to_dict()


def test_load_config_without_path_uses_defaults():
    config = load_config()
    assert config.segmentation.target_length == 150
    assert config.segmentation.overlap == 30
    assert config.weights.tag_weights["h1"] == 3.0


def test_partial_yaml_overrides(tmp_path: Path):
    path = tmp_path / "custom.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "segmentation": {"target_length": 120, "overlap": 10},
                "weights": {"tag_weights": {"TD": 1.7}, "length_bounds": [50, 90]},
                "scoring": {"procedural": ["recipe"]},
            }
        )
    )
    config = load_config(path)
    assert config.segmentation.target_length == 120
    assert config.segmentation.overlap == 10
    assert config.segmentation.max_length == 250
    assert config.weights.tag_weights == {"td": 1.7}
    assert config.weights.length_bounds == (50, 90)
    assert config.scoring.procedural == ("recipe",)
    assert config.scoring.examples == ("example", "instance", "case", "sample")


def test_dict_round_trip():
    original = PassageKitConfig(tiers=TierConfig(quality_excellent=85))
    assert PassageKitConfig.from_dict(original.to_dict()) == original


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_non_mapping_yaml_raises(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_length": 0},
        {"min_length": 160},
        {"target_length": 300},
        {"overlap": -1},
        {"overlap": 250},
        {"preview_length": 0},
    ],
)
def test_segmentation_validation(overrides):
    with pytest.raises(ValueError):
        SegmentationConfig(**overrides).validate()


def test_tier_validation():
    with pytest.raises(ValueError):
        TierConfig(quality_good=90, quality_excellent=80).validate()
    with pytest.raises(ValueError):
        TierConfig(retrieval_medium=75).validate()


def test_unknown_keys_are_rejected():
    with pytest.raises(ValueError, match="chunk_size"):
        PassageKitConfig.from_dict({"segmentation": {"chunk_size": 10}})
    with pytest.raises(ValueError, match="target_len"):
        PassageKitConfig.from_dict({"segmentation": {"target_len": 1}})


@pytest.mark.parametrize(
    "data",
    [
        {"scoring": {"interrogatives": "how"}},
        {"scoring": {"benefits": ["benefit", ""]}},
        {"scoring": {"examples": [1, 2]}},
        {"extraction": {"heading_tags": "h1"}},
        {"extraction": {"heading_tags": ["h1", None]}},
    ],
)
def test_vocabularies_must_be_string_lists(data):
    with pytest.raises(ValueError):
        PassageKitConfig.from_dict(data)


def test_heading_tags_are_lowercased():
    config = PassageKitConfig.from_dict({"extraction": {"heading_tags": ["H1", "Title"]}})
    assert config.extraction.heading_tags == ("h1", "title")


def test_section_must_be_mapping():
    with pytest.raises(ValueError):
        PassageKitConfig.from_dict({"tiers": [1, 2]})
