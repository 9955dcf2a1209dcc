"""Project an AnalysisResult onto questionnaire answers and renderer config.

Both projections are pure, total functions. Category values are translated
through lookup tables; anything without an entry resolves to a documented
fallback instead of reaching the questionnaire or renderer as-is.
"""

from __future__ import annotations

from typing import Any

from brandlens.engine import tables
from brandlens.models.analysis import AnalysisResult

Answers = dict[str, str | list[str]]
ConfigRecord = dict[str, Any]


def resolve_brand_name(result: AnalysisResult, display_name: str) -> str:
    """Caller's name beats the extracted name; the extracted name beats nothing."""
    if display_name and display_name.strip():
        return display_name.strip()
    return result.brand_name.strip()


def to_answers(result: AnalysisResult, display_name: str = "") -> Answers:
    """Flat answer-set keyed by questionnaire question ids."""
    industry = tables.INDUSTRY_MAP.get(result.industry.lower(), tables.FALLBACK_INDUSTRY_ANSWER)

    colors = [c.lower() for c in result.colors if c.lower() in tables.COLOR_HEX_MAP][: tables.MAX_COLORS]

    if result.icon_type and result.icon_type != "none":
        icon = result.icon_type
    else:
        icon = tables.INDUSTRY_TO_ICON_MAP.get(industry, "none")

    return {
        "industry": industry,
        "style": tables.STYLE_MAP.get(result.style.lower(), tables.FALLBACK_STYLE_ANSWER),
        "colors": colors or [tables.DEFAULT_COLOR],
        "depth": tables.DEPTH_MAP.get(result.depth.lower(), tables.FALLBACK_DEPTH_ANSWER),
        "icon": icon,
        "brandName": resolve_brand_name(result, display_name),
    }


def to_config(result: AnalysisResult, display_name: str = "") -> ConfigRecord:
    """Partial renderer config. Keys left unset fall back to the renderer's defaults."""
    config: ConfigRecord = {
        "brandName": resolve_brand_name(result, display_name),
        "depthLevel": tables.DEPTH_LEVEL_MAP.get(result.depth.lower(), tables.FALLBACK_DEPTH_LEVEL),
    }

    # Color slots: primary -> text, second -> accent, third -> glow
    for slot, key in enumerate(("textColor", "accentColor", "glowColor")):
        if slot < len(result.colors):
            option = tables.COLOR_HEX_MAP.get(result.colors[slot].lower())
            if option is not None:
                config[key] = option.model_dump()

    finish = _metallic_finish(result)
    if finish:
        config["metallicFinish"] = finish

    glow = _glow_style(result)
    if glow:
        config["techGlowStyle"] = glow
        config["glowEffect"] = glow

    style = result.style.lower()
    if result.font_style and result.font_style != tables.DEFAULT_FONT_STYLE:
        config["fontStyle"] = result.font_style
    else:
        config["fontStyle"] = tables.STYLE_TO_FONT_MAP.get(style, tables.DEFAULT_FONT_STYLE)

    if result.font_weight and result.font_weight != tables.DEFAULT_FONT_WEIGHT:
        config["textWeight"] = result.font_weight
    else:
        config["textWeight"] = tables.STYLE_TO_WEIGHT_MAP.get(style, tables.DEFAULT_FONT_WEIGHT)

    if result.pattern and result.pattern != "none":
        mapped = tables.PATTERN_MAP.get(result.pattern)
        config["techPattern"] = mapped or result.pattern
        config["patternStyle"] = mapped or tables.FALLBACK_PATTERN_STYLE

    if result.frame_shape and result.frame_shape != "none":
        config["swooshStyle"] = tables.FRAME_TO_SWOOSH.get(result.frame_shape, tables.FALLBACK_SWOOSH)

    for effect, key, value in tables.EFFECT_CONFIG_FLAGS:
        if effect in result.effects:
            config[key] = value

    return config


def _metallic_finish(result: AnalysisResult) -> str | None:
    # explicit finish > frame material > generic effect tag
    if result.metallic and result.metallic != "none":
        return result.metallic
    if result.frame_material not in tables.NON_METALLIC_FRAMES:
        return tables.FRAME_MATERIAL_FINISH.get(result.frame_material, result.frame_material)
    if "metallic" in result.effects:
        return tables.GENERIC_METALLIC_FINISH
    return None


def _glow_style(result: AnalysisResult) -> str | None:
    if result.glow and result.glow != "none":
        return result.glow
    if "glow" in result.effects:
        return tables.GENERIC_GLOW_STYLE
    return None
