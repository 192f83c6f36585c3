"""Human-readable summary of a pipeline run."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

from .config import PassageKitConfig
from .telemetry.metrics import primary_candidates
from .text import round_half_up
from .types import Passage, PipelineResult


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _ids(passages: Sequence[Passage]) -> str:
    return ", ".join(p.id for p in passages)


def _scored_ids(passages: Sequence[Passage]) -> str:
    return ", ".join(f"{p.id}({p.retrieval_score})" for p in passages) or "None"


def _vector_status(avg: int) -> str:
    if avg >= 75:
        return "Excellent"
    if avg >= 60:
        return "Good"
    return "Needs Work"


def _section_analytics(passages: Sequence[Passage]) -> Dict[str, List[str]]:
    counts: Dict[str, int] = {}
    for passage in passages:
        counts[passage.section] = counts.get(passage.section, 0) + 1
    analytics: Dict[str, List[str]] = {}
    for p in passages:
        key = f"{p.section} ({counts[p.section]} passages)"
        analytics.setdefault(key, []).append(
            f"{p.id}[{p.word_count}w|V{p.vector_quality}|R{p.retrieval_score}|S{p.semantic_weight}]"
        )
    return analytics


def build_report(
    result: PipelineResult,
    config: PassageKitConfig | None = None,
    *,
    analysis: str | None = None,
    source_url: str | None = None,
    generated_at: str | None = None,
) -> Dict[str, Any]:
    """Format passages, statistics and tiers into a nested summary mapping."""

    cfg = config or PassageKitConfig()
    timestamp = generated_at or utc_now()
    stats = result.stats
    if stats is None:
        return {
            "Executive Summary": {
                "Analysis Date": timestamp,
                "URL": source_url,
                "Total Passages": 0,
                "Sections": 0,
                "Recommendation": "No passages met the minimum length; nothing to index",
            },
            "Analysis": analysis,
        }

    tiers = result.tiers
    passages = result.passages
    avg_vector = int(round_half_up(stats.avg_vector_quality))
    avg_retrieval = int(round_half_up(stats.avg_retrieval_score))
    prime = primary_candidates(passages, cfg.tiers)
    deploy = avg_vector >= 70 and avg_retrieval >= 60

    return {
        "Executive Summary": {
            "Analysis Date": timestamp,
            "URL": source_url,
            "Vector Optimization Status": _vector_status(avg_vector),
            "Retrieval Readiness": "Ready" if avg_retrieval >= 60 else "Needs Optimization",
            "Total Passages": stats.total,
            "Sections": stats.sections,
            "Recommendation": "Deploy to production" if deploy else "Implement optimizations first",
        },
        "Vector Quality Metrics": {
            "Average Vector Quality": f"{avg_vector}/100",
            "Average Retrieval Score": f"{avg_retrieval}/100",
            "Average Semantic Weight": stats.avg_semantic_weight,
            "Optimal Length Ratio": f"{int(round_half_up(stats.optimal_length_ratio * 100))}%",
            "Quality Distribution": (
                f"Excellent: {len(tiers.excellent)} | Good: {len(tiers.good)} | "
                f"Needs Work: {len(tiers.needs_work)}"
            ),
        },
        "Retrieval Performance": {
            "High Retrieval Potential": _scored_ids(tiers.high),
            "Medium Retrieval Potential": _scored_ids(tiers.medium),
            "Low Retrieval Potential": _scored_ids(tiers.low),
            "Primary Index Candidates": _ids(prime) or "None identified",
        },
        "Passage Analytics": _section_analytics(passages),
        "Analysis": analysis,
        "Quick Implementation": {
            "1. Immediate Fixes": (
                f"Fix {len(tiers.needs_work)} passages with Vector Quality <{cfg.tiers.quality_good}: "
                f"{_ids(tiers.needs_work) or 'None'}"
            ),
            "2. High-Impact Optimizations": (
                f"Optimize {len(prime)} prime passages "
                f"(V{cfg.tiers.quality_excellent}+ R{cfg.tiers.retrieval_high}+): {_ids(prime) or 'None identified'}"
            ),
            "3. Content Structure": "Apply the merge/split recommendations from the analysis",
            "4. Content Gaps": f"Create missing query-intent content for {stats.sections} sections",
            "5. Vector Index Deployment": (
                f"Deploy {len(tiers.excellent) + len(tiers.good)} optimized passages to the vector index"
            ),
            "6. Performance Monitoring": f"Track retrieval performance across {stats.total} passages",
        },
        "Complete Passage Map": " | ".join(
            f'{p.id}[{p.word_count}w] V:{p.vector_quality} R:{p.retrieval_score} '
            f'S:{p.semantic_weight} "{p.text[:60]}..."'
            for p in passages
        ),
    }
