"""BrandLens classification + recommendation engine."""

from brandlens.engine.classifier import classify
from brandlens.engine.mapper import to_answers, to_config
from brandlens.engine.ranker import rank
from brandlens.engine.pipeline import BrandAnalysis, analyze

__all__ = [
    "classify",
    "to_answers",
    "to_config",
    "rank",
    "analyze",
    "BrandAnalysis",
]
