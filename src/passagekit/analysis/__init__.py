"""Prompt building and the client for the external narrative-analysis service."""

from .client import AnalysisError, GeminiClient
from .payload import build_analysis_payload, render_analysis_prompt
from .runner import Analyzer, analyze

__all__ = [
    "AnalysisError",
    "Analyzer",
    "GeminiClient",
    "analyze",
    "build_analysis_payload",
    "render_analysis_prompt",
]
