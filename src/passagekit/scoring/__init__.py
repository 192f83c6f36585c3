"""Heuristic block weighting and passage scoring."""

from .matchers import KeywordMatcher, MatcherTable
from .quality import QualityScorer
from .weights import WeightCalculator

__all__ = ["KeywordMatcher", "MatcherTable", "QualityScorer", "WeightCalculator"]
