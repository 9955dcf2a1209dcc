"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from brandlens.models.analysis import AnalysisResult
from brandlens.models.presets import ScoredPreset


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    presets_registered: int = 0


class AnalyzeResponse(BaseModel):
    analysis: AnalysisResult
    answers: dict[str, str | list[str]] = Field(default_factory=dict)
    config: dict[str, object] = Field(default_factory=dict)
    presets: list[ScoredPreset] = Field(default_factory=list)
    processing_time_ms: float = 0.0
