"""Parse vision-analysis output into an AnalysisResult.

Supports:
1. A fenced JSON summary block (authoritative when it parses)
2. Freeform prose (keyword scanning, best-effort)

Never raises on analysis input; the worst case is an all-default record.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any

from brandlens.engine import tables
from brandlens.models.analysis import AnalysisResult

logger = logging.getLogger(__name__)

_JSON_BLOCK = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)
_CONFIDENCE = re.compile(tables.CONFIDENCE_PATTERN)

# camelCase key in the JSON summary -> AnalysisResult field
_STRING_FIELDS = {
    "industry": "industry",
    "style": "style",
    "depth": "depth",
    "metallic": "metallic",
    "glow": "glow",
    "fontStyle": "font_style",
    "fontWeight": "font_weight",
    "pattern": "pattern",
    "iconType": "icon_type",
    "presetMatch": "preset_match",
    "frameShape": "frame_shape",
    "frameMaterial": "frame_material",
    "textArrangement": "text_arrangement",
}
# Free text, case preserved
_TEXT_FIELDS = {
    "brandName": "brand_name",
    "initials": "initials",
}
_LIST_FIELDS = {
    "colors": "colors",
    "effects": "effects",
}


def classify(text: str | None) -> AnalysisResult:
    """Classify raw analysis text into the normalized brand taxonomy."""
    text = text or ""

    structured = _extract_structured(text)
    if structured is not None:
        logger.debug("Structured summary found (%d fields)", len(structured))
        return _from_structured(structured, text)

    return _from_prose(text)


# ---------------------------------------------------------------------------
# Structured path
# ---------------------------------------------------------------------------


def _extract_structured(text: str) -> dict[str, Any] | None:
    """First fenced block whose body parses as a JSON object."""
    for match in _JSON_BLOCK.finditer(text):
        try:
            data = json.loads(match.group(1))
        except (ValueError, RecursionError) as e:
            logger.debug("Malformed JSON summary, skipping block: %s", e)
            continue
        if isinstance(data, dict):
            return data
        logger.debug("Fenced block holds %s, not an object, ignored", type(data).__name__)
    return None


def _lookup(data: dict[str, Any], camel: str, snake: str) -> Any:
    if camel in data:
        return data[camel]
    return data.get(snake)


def _from_structured(data: dict[str, Any], raw: str) -> AnalysisResult:
    fields: dict[str, Any] = {"raw_analysis": raw}

    for camel, snake in _STRING_FIELDS.items():
        value = _lookup(data, camel, snake)
        if isinstance(value, str) and value.strip():
            fields[snake] = value.strip().lower()

    for camel, snake in _TEXT_FIELDS.items():
        value = _lookup(data, camel, snake)
        if isinstance(value, str) and value.strip():
            fields[snake] = value.strip()

    for camel, snake in _LIST_FIELDS.items():
        value = _lookup(data, camel, snake)
        if isinstance(value, list):
            fields[snake] = _unique(v.strip().lower() for v in value if isinstance(v, str) and v.strip())

    colors = fields.get("colors") or (tables.DEFAULT_COLOR,)
    fields["colors"] = colors[: tables.MAX_COLORS]

    confidence = data.get("confidence")
    if isinstance(confidence, (int, float)) and not isinstance(confidence, bool) and math.isfinite(confidence):
        fields["confidence"] = _clamp_confidence(confidence)

    # A "none" preset claim is no claim
    if fields.get("preset_match") == "none":
        del fields["preset_match"]

    return AnalysisResult(**fields)


# ---------------------------------------------------------------------------
# Freeform path
# ---------------------------------------------------------------------------


def _from_prose(text: str) -> AnalysisResult:
    lower = text.lower()
    effects: list[str] = []

    metallic = _first_match(lower, tables.METALLIC_KEYWORDS, "none")
    if metallic != "none":
        effects.append("metallic")

    glow = _first_match(lower, tables.GLOW_KEYWORDS, "none")
    if glow != "none":
        effects.append("glow")

    for effect in tables.EXTRA_EFFECT_KEYWORDS:
        if effect in lower:
            effects.append(effect)

    preset_match = next((pid for pid in tables.PRESET_ID_KEYWORDS if pid in lower), None)

    fields: dict[str, Any] = {
        "industry": _best_category(lower, tables.INDUSTRY_KEYWORDS, tables.DEFAULT_INDUSTRY),
        "style": _best_category(lower, tables.STYLE_KEYWORDS, tables.DEFAULT_STYLE),
        "colors": detect_colors(lower),
        "depth": detect_depth(lower),
        "effects": _unique(effects),
        "metallic": metallic,
        "glow": glow,
        "font_style": _first_match(lower, tables.FONT_STYLE_KEYWORDS, tables.DEFAULT_FONT_STYLE),
        "font_weight": _font_weight(lower),
        "pattern": _first_match(lower, tables.PATTERN_KEYWORDS, "none"),
        "preset_match": preset_match,
        "raw_analysis": text,
    }

    confidence = _CONFIDENCE.search(lower)
    if confidence:
        digits = confidence.group(1).lstrip("0") or "0"
        # int() rejects very long digit runs; past three digits the value clamps to 100
        fields["confidence"] = _clamp_confidence(int(digits)) if len(digits) <= 3 else 100

    return AnalysisResult(**fields)


def _best_category(lower: str, table: tuple[tuple[str, tuple[str, ...]], ...], default: str) -> str:
    """Category with the most keyword hits; ties keep the earlier category."""
    best, best_hits = default, 0
    for category, keywords in table:
        hits = sum(1 for k in keywords if k in lower)
        if hits > best_hits:
            best, best_hits = category, hits
    return best


def detect_colors(lower: str) -> tuple[str, ...]:
    """Distinct color ids in table order, capped at MAX_COLORS."""
    found = _unique(color for keyword, color in tables.COLOR_KEYWORDS if keyword in lower)
    if not found:
        return (tables.DEFAULT_COLOR,)
    return found[: tables.MAX_COLORS]


def detect_depth(lower: str) -> str:
    for depth, marker_sets in tables.DEPTH_RULES:
        if any(all(m in lower for m in markers) for markers in marker_sets):
            return depth
    return tables.DEFAULT_DEPTH


def _font_weight(lower: str) -> str:
    for weight, keywords in tables.FONT_WEIGHT_KEYWORDS:
        if any(k in lower for k in keywords):
            return weight
    return tables.DEFAULT_FONT_WEIGHT


def _first_match(lower: str, table: tuple[tuple[str, str], ...], default: str) -> str:
    for keyword, value in table:
        if keyword in lower:
            return value
    return default


def _unique(values: Any) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for v in values:
        seen.setdefault(v, None)
    return tuple(seen)


def _clamp_confidence(value: float) -> int:
    return int(min(100, max(0, value)))
