"""Build the structured payload handed to the analysis service."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import orjson

from ..config import TierConfig
from ..telemetry.metrics import section_groups
from ..text import round_half_up
from ..types import Passage, PassageStats
from .prompts import ANALYSIS_TEMPLATE


def preview(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def build_analysis_payload(
    passages: Sequence[Passage],
    stats: PassageStats | None,
    *,
    preview_length: int = 300,
) -> Dict[str, Any]:
    records: List[Dict[str, Any]] = [
        {
            "id": p.id,
            "section": p.section,
            "words": p.word_count,
            "vector_quality": p.vector_quality,
            "retrieval_score": p.retrieval_score,
            "semantic_weight": p.semantic_weight,
            "preview": preview(p.text, preview_length),
        }
        for p in passages
    ]
    return {
        "total": len(records),
        "avg_vector_quality": int(round_half_up(stats.avg_vector_quality)) if stats else None,
        "avg_retrieval_score": int(round_half_up(stats.avg_retrieval_score)) if stats else None,
        "passages": records,
        "sections": section_groups(passages),
    }


def _dump(value: Any) -> str:
    return orjson.dumps(value, option=orjson.OPT_INDENT_2).decode("utf-8")


def render_analysis_prompt(
    payload: Dict[str, Any],
    *,
    url: str | None = None,
    title: str | None = None,
    tiers: TierConfig | None = None,
) -> str:
    tier_cfg = tiers or TierConfig()
    return ANALYSIS_TEMPLATE.format(
        url=url or "n/a",
        title=title or "n/a",
        total=payload["total"],
        avg_vector_quality=payload["avg_vector_quality"] if payload["avg_vector_quality"] is not None else "n/a",
        avg_retrieval_score=payload["avg_retrieval_score"] if payload["avg_retrieval_score"] is not None else "n/a",
        passages_json=_dump(payload["passages"]),
        sections_json=_dump(payload["sections"]),
        quality_excellent=tier_cfg.quality_excellent,
        quality_good=tier_cfg.quality_good,
    )
