"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ClassifyRequest(BaseModel):
    analysis: str = Field(..., description="Raw vision-analysis text, optionally with a fenced JSON summary")


class AnalyzeRequest(BaseModel):
    analysis: str = Field(..., description="Raw vision-analysis text, optionally with a fenced JSON summary")
    brand_name: str = Field(default="", description="User-entered brand name; wins over any extracted name")
    limit: int | None = Field(default=None, ge=1, le=20, description="Number of ranked presets to return")
