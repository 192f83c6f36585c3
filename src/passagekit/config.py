"""Configuration primitives for the passagekit pipeline."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

LOGGER = logging.getLogger(__name__)


def _word_list(name: str, value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list of strings, got {type(value).__name__}")
    if not all(isinstance(item, str) and item.strip() for item in value):
        raise ValueError(f"{name} entries must be non-empty strings")
    return tuple(value)


def _build(section_cls: Any, name: str, values: Dict[str, Any]) -> Any:
    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown keys in configuration section {name!r}: {', '.join(unknown)}")
    return section_cls(**values)


@dataclass(slots=True)
class SegmentationConfig:
    """Word-count limits driving the passage builder."""

    target_length: int = 150
    min_length: int = 50
    max_length: int = 250
    overlap: int = 30
    preview_length: int = 300
    section_label_length: int = 50
    default_section: str = "Main Content"

    def validate(self) -> None:
        if self.min_length <= 0:
            raise ValueError("min_length must be positive")
        if not (self.min_length <= self.target_length <= self.max_length):
            raise ValueError("lengths must satisfy min_length <= target_length <= max_length")
        if not (0 <= self.overlap < self.max_length):
            raise ValueError("overlap must be within [0, max_length)")
        if self.preview_length <= 0:
            raise ValueError("preview_length must be positive")
        if self.section_label_length <= 0:
            raise ValueError("section_label_length must be positive")


def _default_tag_weights() -> Dict[str, float]:
    return {
        "h1": 3.0,
        "h2": 2.5,
        "h3": 2.0,
        "article": 2.5,
        "section": 2.0,
        "p": 1.0,
        "li": 0.8,
        "div": 0.6,
    }


@dataclass(slots=True)
class WeightConfig:
    """Tag factors and bonuses used to weight individual blocks."""

    tag_weights: Dict[str, float] = field(default_factory=_default_tag_weights)
    default_tag_weight: float = 1.0
    question_bonus: float = 0.3
    interrogative_bonus: float = 0.2
    length_bonus: float = 0.2
    length_bounds: Tuple[int, int] = (100, 200)
    diversity_factor: float = 0.5

    def validate(self) -> None:
        if any(value < 0 for value in self.tag_weights.values()) or self.default_tag_weight < 0:
            raise ValueError("tag weights must be non-negative")
        for name in ("question_bonus", "interrogative_bonus", "length_bonus", "diversity_factor"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        low, high = self.length_bounds
        if low >= high:
            raise ValueError("length_bounds must be an increasing pair")


@dataclass(slots=True)
class ScoringConfig:
    """Keyword vocabularies matched as whole words by the scorers."""

    interrogatives: Tuple[str, ...] = ("how", "what", "why", "when", "where", "who")
    transitions: Tuple[str, ...] = ("first", "second", "third", "finally", "however", "therefore", "because")
    procedural: Tuple[str, ...] = ("step", "method", "process", "guide", "tutorial")
    examples: Tuple[str, ...] = ("example", "instance", "case", "sample")
    benefits: Tuple[str, ...] = ("benefit", "advantage", "feature", "solution")
    enumerations: Tuple[str, ...] = ("include", "such as", "for example", "namely")

    def validate(self) -> None:
        for name in ("interrogatives", "transitions", "procedural", "examples", "benefits", "enumerations"):
            if not getattr(self, name):
                raise ValueError(f"scoring.{name} must not be empty")


@dataclass(slots=True)
class TierConfig:
    """Thresholds partitioning passages by score."""

    quality_excellent: int = 80
    quality_good: int = 60
    retrieval_high: int = 70
    retrieval_medium: int = 40

    def validate(self) -> None:
        if not (0 <= self.quality_good <= self.quality_excellent <= 100):
            raise ValueError("quality tiers must satisfy 0 <= good <= excellent <= 100")
        if not (0 <= self.retrieval_medium <= self.retrieval_high <= 100):
            raise ValueError("retrieval tiers must satisfy 0 <= medium <= high <= 100")


@dataclass(slots=True)
class ExtractionConfig:
    """Normalisation rules applied to raw block records."""

    min_block_chars: int = 30
    heading_tags: Tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

    def validate(self) -> None:
        if self.min_block_chars < 0:
            raise ValueError("min_block_chars must be non-negative")


@dataclass(slots=True)
class AnalysisConfig:
    """Settings for the external narrative-analysis service."""

    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-1.5-flash"
    api_key_env: str = "GEMINI_API_KEY"
    temperature: float = 0.1
    max_output_tokens: int = 8192
    top_p: float = 0.8
    top_k: int = 40
    timeout_s: float = 60.0
    max_retries: int = 3
    backoff_base: float = 1.6

    def validate(self) -> None:
        if self.max_output_tokens <= 0:
            raise ValueError("max_output_tokens must be positive")
        if not (0.0 <= self.top_p <= 1.0):
            raise ValueError("top_p must be between 0 and 1")
        if self.timeout_s <= 0:
            raise ValueError("timeout_s must be positive")
        if self.max_retries < 1:
            raise ValueError("max_retries must be >= 1")


@dataclass(slots=True)
class PassageKitConfig:
    """Top-level configuration object."""

    segmentation: SegmentationConfig = field(default_factory=SegmentationConfig)
    weights: WeightConfig = field(default_factory=WeightConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    tiers: TierConfig = field(default_factory=TierConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PassageKitConfig":
        """Build a :class:`PassageKitConfig` from a nested mapping."""

        def section(name: str) -> Dict[str, Any]:
            raw = data.get(name, {})
            if raw is None:
                return {}
            if not isinstance(raw, Mapping):
                raise ValueError(f"Configuration section {name!r} must be a mapping")
            return dict(raw)

        weights = section("weights")
        if "length_bounds" in weights:
            weights["length_bounds"] = tuple(weights["length_bounds"])
        if "tag_weights" in weights:
            weights["tag_weights"] = {str(k).lower(): float(v) for k, v in weights["tag_weights"].items()}
        scoring = {key: _word_list(f"scoring.{key}", value) for key, value in section("scoring").items()}
        extraction = section("extraction")
        if "heading_tags" in extraction:
            extraction["heading_tags"] = tuple(
                tag.lower() for tag in _word_list("extraction.heading_tags", extraction["heading_tags"])
            )

        config = cls(
            segmentation=_build(SegmentationConfig, "segmentation", section("segmentation")),
            weights=_build(WeightConfig, "weights", weights),
            scoring=_build(ScoringConfig, "scoring", scoring),
            tiers=_build(TierConfig, "tiers", section("tiers")),
            extraction=_build(ExtractionConfig, "extraction", extraction),
            analysis=_build(AnalysisConfig, "analysis", section("analysis")),
        )
        config.validate()
        return config

    def validate(self) -> None:
        self.segmentation.validate()
        self.weights.validate()
        self.scoring.validate()
        self.tiers.validate()
        self.extraction.validate()
        self.analysis.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration into a serialisable mapping."""

        payload = asdict(self)
        payload["weights"]["length_bounds"] = list(self.weights.length_bounds)
        payload["scoring"] = {key: list(value) for key, value in payload["scoring"].items()}
        payload["extraction"]["heading_tags"] = list(self.extraction.heading_tags)
        return payload


def load_config(path: Optional[Path | str] = None) -> PassageKitConfig:
    """Load configuration from YAML, defaulting to the repository defaults."""

    if path is None:
        base = Path(__file__).resolve()
        candidates = [
            base.parent.parent.parent / "configs" / "passagekit.yaml",
            Path.cwd() / "configs" / "passagekit.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break
        else:
            LOGGER.debug("No configuration file found; using built-in defaults")
            return PassageKitConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError("Configuration YAML must produce a mapping")
    return PassageKitConfig.from_dict(data)
