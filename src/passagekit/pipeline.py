"""High-level orchestration: blocks in, scored passages out."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List

from .audit.guards import run_audits
from .config import PassageKitConfig, load_config
from .logging_utils import log_event
from .scoring.matchers import MatcherTable
from .scoring.quality import QualityScorer
from .scoring.weights import WeightCalculator
from .segmentation.blocks import normalize_blocks
from .segmentation.builder import PassageBuilder
from .telemetry.metrics import compute_stats, partition_tiers
from .text import SentenceSplitter
from .types import Passage, PipelineResult, TextBlock

LOGGER = logging.getLogger(__name__)


class PassagePipeline:
    """Weight, segment and score one document's blocks.

    Instances hold configuration only, so one pipeline can serve any number
    of documents, including from several threads.
    """

    def __init__(self, config: PassageKitConfig | None = None) -> None:
        self.config = config or PassageKitConfig()
        self.config.validate()
        splitter = SentenceSplitter()
        matchers = MatcherTable.from_config(self.config.scoring)
        self.weights = WeightCalculator(self.config.weights, matchers.interrogatives)
        self.builder = PassageBuilder(self.config.segmentation, splitter)
        self.scorer = QualityScorer(self.config.segmentation, matchers, splitter)

    def passages(self, blocks: Iterable[TextBlock]) -> List[Passage]:
        weighted = (self.weights.weigh(block) for block in blocks)
        passages = [self.scorer.score(draft) for draft in self.builder.build(weighted)]
        run_audits(passages, self.config.segmentation)
        return passages

    def run(self, blocks: Iterable[TextBlock]) -> PipelineResult:
        passages = self.passages(blocks)
        stats = compute_stats(passages, self.config.segmentation)
        tiers = partition_tiers(passages, self.config.tiers)
        log_event(
            "passages_built",
            passages=len(passages),
            sections=stats.sections if stats else 0,
            avg_vector_quality=stats.avg_vector_quality if stats else None,
            avg_retrieval_score=stats.avg_retrieval_score if stats else None,
        )
        return PipelineResult(passages=passages, stats=stats, tiers=tiers)


def run_pipeline(
    blocks: Iterable[TextBlock | Any],
    *,
    config: PassageKitConfig | None = None,
    normalize: bool = False,
) -> PipelineResult:
    """Segment and score ``blocks`` in one pass.

    With ``normalize=True`` raw records (mappings with ``text``/``isHeading``/
    ``tag``) are accepted and filtered the way the block loader filters them.
    """

    cfg = config or load_config()
    if normalize:
        blocks = normalize_blocks(blocks, cfg.extraction)
    return PassagePipeline(cfg).run(blocks)
