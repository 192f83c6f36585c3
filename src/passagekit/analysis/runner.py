"""Run the narrative analysis for a finished pipeline result."""

from __future__ import annotations

from typing import Callable, Optional

from ..config import PassageKitConfig
from ..types import PipelineResult
from .payload import build_analysis_payload, render_analysis_prompt

Analyzer = Callable[[str], str]


def analyze(
    result: PipelineResult,
    analyzer: Analyzer,
    *,
    url: Optional[str] = None,
    title: Optional[str] = None,
    config: PassageKitConfig | None = None,
) -> str:
    """Render the analysis prompt for ``result`` and return ``analyzer``'s reply.

    ``analyzer`` is any prompt-to-text callable; :class:`GeminiClient` is one.
    Errors raised by the analyzer propagate unchanged.
    """

    cfg = config or PassageKitConfig()
    payload = build_analysis_payload(
        result.passages, result.stats, preview_length=cfg.segmentation.preview_length
    )
    prompt = render_analysis_prompt(payload, url=url, title=title, tiers=cfg.tiers)
    return analyzer(prompt)
