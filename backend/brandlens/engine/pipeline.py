"""Analysis pipeline: classify once, then map and rank off the same record."""

from __future__ import annotations

import logging
import time

from pydantic import BaseModel, Field

from brandlens.engine import tables
from brandlens.engine.classifier import classify
from brandlens.engine.mapper import to_answers, to_config
from brandlens.engine.ranker import rank
from brandlens.models.analysis import AnalysisResult
from brandlens.models.presets import ScoredPreset

logger = logging.getLogger(__name__)


class BrandAnalysis(BaseModel):
    analysis: AnalysisResult
    answers: dict[str, str | list[str]] = Field(default_factory=dict)
    config: dict[str, object] = Field(default_factory=dict)
    presets: list[ScoredPreset] = Field(default_factory=list)


def analyze(
    text: str | None,
    display_name: str = "",
    limit: int = tables.RECOMMENDATION_LIMIT,
) -> BrandAnalysis:
    """Run the full classify → {map, rank} flow on raw analysis text."""
    start = time.perf_counter()

    result = classify(text)
    bundle = BrandAnalysis(
        analysis=result,
        answers=to_answers(result, display_name),
        config=to_config(result, display_name),
        presets=rank(result, limit=limit),
    )

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Analysis complete: industry=%s style=%s top=%s (%d presets) in %.1fms",
        result.industry,
        result.style,
        bundle.presets[0].preset_id if bundle.presets else "-",
        len(bundle.presets),
        elapsed,
    )
    return bundle
