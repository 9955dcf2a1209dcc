"""Normalized brand taxonomy: the single record passed between engine stages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisResult(BaseModel):
    """Brand attributes extracted from one vision-analysis payload.

    Every field has a total default so downstream stages never see a
    partially-populated record.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    industry: str = "tech"
    style: str = "modern"
    colors: tuple[str, ...] = ("blue",)  # primary, accent, glow
    depth: str = "medium"
    effects: tuple[str, ...] = ()
    metallic: str = "none"
    glow: str = "none"
    font_style: str = "modern-geometric"
    font_weight: str = "bold"
    pattern: str = "none"
    icon_type: str = "none"
    preset_match: str | None = None
    confidence: int = Field(default=50, ge=0, le=100)

    # Brand text + frame detection (mapper only)
    brand_name: str = ""
    initials: str = ""
    text_arrangement: str = ""  # single-line, stacked, circular, curved, arc
    frame_shape: str = "none"  # circle, oval, rectangle, shield, badge, hexagon, ribbon
    frame_material: str = "none"  # chrome, gold, bronze, silver, plain

    raw_analysis: str = ""

    @property
    def has_metallic(self) -> bool:
        return self.metallic != "none" or "metallic" in self.effects

    @property
    def has_glow(self) -> bool:
        return self.glow != "none" or "glow" in self.effects
