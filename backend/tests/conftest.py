"""Shared test fixtures."""

from __future__ import annotations

import pytest

from brandlens.models.analysis import AnalysisResult


# Sample analysis outputs, shaped like real vision-model responses

STRUCTURED_ANALYSIS = '''### 1. INDUSTRY IDENTIFICATION
**Detected Industry:** The mark reads as a boutique brand with a crown motif.

## FINAL SUMMARY
```json
{
  "industry": "luxury",
  "style": "elegant",
  "colors": ["gold", "black"],
  "depth": "deep",
  "effects": ["metallic", "sparkle"],
  "metallic": "gold",
  "glow": "none",
  "fontStyle": "serif-elegant",
  "fontWeight": "regular",
  "pattern": "none",
  "iconType": "crown",
  "presetMatch": "luxury-crown",
  "confidence": 88,
  "brandName": "Aurum House",
  "initials": "AH",
  "textArrangement": "stacked",
  "frameShape": "shield",
  "frameMaterial": "gold"
}
```
'''

TECH_PROSE = (
    "This is a digital software logo with a circuit board pattern. "
    "Colors are electric cyan and deep purple on black. "
    "The 3D depth is [deep] with a neon glow and a soft shadow. "
    "Typography is tech-digital. Confidence: 82"
)

NATURE_PROSE = (
    "An eco-friendly organic brand: a green leaf icon with flowing, natural, earthy lines. "
    "Flat 2d rendering with no extrusion."
)

MALFORMED_JSON_ANALYSIS = '''The logo shows a bank shield with a growth arrow, navy and gold.
```json
{"industry": "finance", "colors": ["gold",
```
'''

NO_SIGNAL_TEXT = "Lorem ipsum quo vexillum mox pons."


@pytest.fixture
def structured_analysis() -> str:
    return STRUCTURED_ANALYSIS


@pytest.fixture
def tech_prose() -> str:
    return TECH_PROSE


@pytest.fixture
def nature_prose() -> str:
    return NATURE_PROSE


@pytest.fixture
def default_result() -> AnalysisResult:
    return AnalysisResult()
