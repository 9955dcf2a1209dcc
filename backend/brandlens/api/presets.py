"""GET /api/presets: the preset catalog."""

from __future__ import annotations

from fastapi import APIRouter

from brandlens.engine.catalog import LOGO_PRESETS, PRESET_CATEGORIES, presets_by_category
from brandlens.models.presets import Preset, PresetCategory

router = APIRouter()


@router.get("/presets", response_model=list[Preset])
async def list_presets(category: str | None = None) -> list[Preset]:
    if category:
        return presets_by_category(category)
    return list(LOGO_PRESETS)


@router.get("/presets/categories", response_model=list[PresetCategory])
async def list_categories() -> list[PresetCategory]:
    return list(PRESET_CATEGORIES)
