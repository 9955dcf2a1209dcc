"""Preset ranker: additive, multi-family scoring over the fixed catalog.

Families run in a fixed order over fixed table order, so the insertion order
of the score map (and therefore the tie-break) is deterministic:

1. explicit preset match (seeded with confidence)
2. industry family      (15 - 3*i)
3. style family         (8 - 2*i)
4. metallic / glow bonuses
5. pattern family       (+6 each)
6. color bonuses
7. coverage floor for DEFAULT_PRESETS
8. clamp to CEILING_SCORE, stable sort, top-N
"""

from __future__ import annotations

import logging

from brandlens.engine import tables
from brandlens.engine.catalog import has_preset
from brandlens.models.analysis import AnalysisResult
from brandlens.models.presets import ScoredPreset

logger = logging.getLogger(__name__)


class _ScoreBoard:
    """Insertion-ordered score accumulator."""

    def __init__(self) -> None:
        self.scores: dict[str, int] = {}

    def add(self, preset_id: str, points: int) -> None:
        self.scores[preset_id] = self.scores.get(preset_id, 0) + points

    def add_all(self, bonuses: tuple[tuple[str, int], ...]) -> None:
        for preset_id, points in bonuses:
            self.add(preset_id, points)

    def add_ranked(self, preset_ids: tuple[str, ...], base: int, step: int) -> None:
        for i, preset_id in enumerate(preset_ids):
            self.add(preset_id, base - i * step)


def score_presets(result: AnalysisResult) -> dict[str, int]:
    """Raw, unclamped scores keyed by preset id, in insertion order."""
    board = _ScoreBoard()

    if result.preset_match:
        if has_preset(result.preset_match):
            board.add(result.preset_match, result.confidence or tables.PRESET_MATCH_FALLBACK_SCORE)
        else:
            logger.debug("Ignoring preset match outside catalog: %s", result.preset_match)

    industry = tables.INDUSTRY_PRESETS.get(result.industry.lower(), tables.FALLBACK_INDUSTRY_PRESETS)
    board.add_ranked(industry, tables.INDUSTRY_BASE, tables.INDUSTRY_STEP)

    style = tables.STYLE_BONUS_PRESETS.get(result.style.lower(), ())
    board.add_ranked(style, tables.STYLE_BASE, tables.STYLE_STEP)

    if result.has_metallic:
        board.add_all(tables.METALLIC_BONUSES)
    if result.has_glow:
        board.add_all(tables.GLOW_BONUSES)

    if result.pattern and result.pattern != "none":
        for preset_id in tables.PATTERN_PRESETS.get(result.pattern, ()):
            board.add(preset_id, tables.PATTERN_BONUS)

    colors = set(result.colors)
    for triggers, bonuses in tables.COLOR_BONUSES:
        if colors & triggers:
            board.add_all(bonuses)

    for preset_id in tables.DEFAULT_PRESETS:
        if preset_id not in board.scores:
            board.add(preset_id, tables.FLOOR_SCORE)

    return board.scores


def rank(result: AnalysisResult, limit: int = tables.RECOMMENDATION_LIMIT) -> list[ScoredPreset]:
    """Top-``limit`` presets by clamped score; ties keep scoring order."""
    scored = [
        ScoredPreset(preset_id=preset_id, score=min(tables.CEILING_SCORE, score))
        for preset_id, score in score_presets(result).items()
    ]
    # sorted() is stable, so equal scores keep insertion order
    scored = sorted(scored, key=lambda s: s.score, reverse=True)
    return scored[: max(0, limit)]
