"""Preset catalog + recommendation models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Preset(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    category: str
    icon: str = ""
    description: str = ""
    prompt_template: str = ""  # contains {{BRAND_NAME}}
    negative_prompt: str = ""
    concept: str = "modern"
    render_styles: tuple[str, ...] = ()
    color_scheme: str = ""


class PresetCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    icon: str = ""
    color: str = ""


class ScoredPreset(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    preset_id: str
    score: int = Field(ge=0, le=20)


class ColorOption(BaseModel):
    """Renderer color record."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    hex: str
