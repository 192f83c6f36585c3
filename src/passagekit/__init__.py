"""passagekit: segment extracted text into scored retrieval passages."""

from .config import (
    AnalysisConfig,
    ExtractionConfig,
    PassageKitConfig,
    ScoringConfig,
    SegmentationConfig,
    TierConfig,
    WeightConfig,
    load_config,
)
from .pipeline import PassagePipeline, run_pipeline
from .types import Passage, PassageStats, PipelineResult, TextBlock, TierPartition, WeightedBlock

__all__ = [
    "AnalysisConfig",
    "ExtractionConfig",
    "Passage",
    "PassageKitConfig",
    "PassagePipeline",
    "PassageStats",
    "PipelineResult",
    "ScoringConfig",
    "SegmentationConfig",
    "TextBlock",
    "TierConfig",
    "TierPartition",
    "WeightConfig",
    "WeightedBlock",
    "load_config",
    "run_pipeline",
]
