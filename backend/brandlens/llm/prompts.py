"""Vision-analysis prompt templates.

These instruct the upstream vision model to describe a logo in the vocabulary
the classifier scans for, and to finish with a fenced JSON summary that the
classifier reads as authoritative. No model is called from this package.
"""

from __future__ import annotations

from brandlens.engine.catalog import LOGO_PRESETS, PRESET_CATEGORIES
from brandlens.engine.tables import COLOR_HEX_MAP


def _preset_lines() -> str:
    lines = []
    for category in PRESET_CATEGORIES:
        ids = [p.id for p in LOGO_PRESETS if p.category == category.value]
        if ids:
            lines.append(f"- {', '.join(ids)} ({category.label})")
    return "\n".join(lines)


_COLOR_MEANINGS = {
    "blue": "Tech, trust, corporate",
    "cyan": "Digital, futuristic, fresh",
    "purple": "Creative, premium, innovative",
    "gold": "Luxury, premium, classic",
    "green": "Nature, growth, eco",
    "red": "Energy, passion, urgency",
    "pink": "Creative, feminine, modern",
    "black": "Professional, bold, elegant",
}


def _color_lines() -> str:
    return "\n".join(
        f"- [{color_id}] {option.hex} - {_COLOR_MEANINGS.get(color_id, option.name)}"
        for color_id, option in COLOR_HEX_MAP.items()
    )


_QUALITY_TEMPLATE = """You are an expert logo analyst. Analyze this logo image with EXTREME PRECISION so it can be recreated.

## CRITICAL INSTRUCTIONS:
- Be SPECIFIC with exact values, not vague descriptions
- Use the EXACT option values provided in brackets
- Analyze the ACTUAL image content, don't make assumptions
- If uncertain about a value, state your confidence level

## ANALYSIS CATEGORIES:

### 1. INDUSTRY IDENTIFICATION (REQUIRED)
- [tech] - Circuit patterns, digital elements, geometric shapes, tech iconography
- [luxury] - Premium materials (gold, diamonds), elegant serif fonts, ornate details
- [nature] - Leaves, organic shapes, green tones, eco-friendly imagery
- [food] - Culinary imagery, warm colors, appetizing elements
- [finance] - Shields, growth arrows, professional styling, trust symbols
- [creative] - Artistic brushes, cameras, palettes, expressive designs
- [sports] - Dynamic motion, energy lines, athletic imagery
- [realestate] - Houses, keys, buildings, property symbols
- [corporate] - Professional, clean, business-oriented

**Detected Industry:** [industry ID]
**Reasoning:** [brief explanation]

### 2. STYLE AESTHETIC (REQUIRED)
- [modern] - Clean lines, minimalist, contemporary, geometric
- [elegant] - Sophisticated, refined, premium, luxurious
- [bold] - Strong, powerful, impactful, heavy weights
- [playful] - Fun, creative, colorful, whimsical
- [organic] - Natural, flowing, hand-drawn feel

**Detected Style:** [style ID]

### 3. COLOR ANALYSIS (REQUIRED)
{colors}

**Primary Color:** [color name and hex]
**Secondary Color:** [if present]
**Accent Color:** [if present]

### 4. 3D DEPTH & EFFECTS (REQUIRED)
- [flat] - Completely 2D, no depth
- [subtle] - Slight shadow or minimal depth
- [medium] - Clear 3D appearance, moderate extrusion
- [deep] - Strong 3D effect, significant depth
- [extreme] - Dramatic 3D, heavy extrusion

**Depth Level:** [depth ID]
**Has Shadow:** [yes/no]
**Has Bevel:** [yes/no]

### 5. METALLIC & GLOW
- Metallic finishes: [chrome/gold/bronze/rose-gold/platinum/copper/none]
- Glow: [none/soft/neon/electric/aurora]

### 6. TYPOGRAPHY (if text present)
- Font category: [sans-serif-bold/serif-elegant/modern-geometric/tech-digital/rounded-friendly/handwritten-casual]
- Font weight: [light/regular/bold/extra-bold]

### 7. PATTERN & TEXTURE
- Pattern style: [circuit/neural/grid/hexagon/dot-matrix/halftone/radial/none]

### 8. BRAND TEXT & FRAME
- Brand name: the exact text visible in the logo
- Initials: if the mark uses initials
- Text arrangement: [single-line/stacked/circular/curved/arc]
- Frame shape: [circle/oval/rectangle/shield/badge/hexagon/ribbon/none]
- Frame material: [chrome/gold/bronze/silver/plain/none]

### 9. PRESET RECOMMENDATION
Recommend the best matching preset with a confidence percentage.

Available presets:
{presets}

## FINAL SUMMARY
Provide a JSON-formatted summary with your findings:
```json
{{
  "industry": "[industry ID]",
  "style": "[style ID]",
  "colors": ["primary", "secondary", "accent"],
  "depth": "[depth ID]",
  "effects": ["metallic", "glow", "gradient", "shadow", "sparkle", "bevel"],
  "metallic": "[metallic type or none]",
  "glow": "[glow type or none]",
  "fontStyle": "[font category]",
  "fontWeight": "[weight]",
  "pattern": "[pattern type or none]",
  "iconType": "[icon type or none]",
  "presetMatch": "[best preset ID]",
  "confidence": [0-100],
  "brandName": "[exact text or empty]",
  "initials": "[initials or empty]",
  "textArrangement": "[arrangement]",
  "frameShape": "[frame shape or none]",
  "frameMaterial": "[frame material or none]"
}}
```

List only the effects that are actually present. Be thorough and precise."""

_FAST_TEMPLATE = (
    "Briefly describe this logo: colors (primary/accent), metallic finish type, 3D depth level, "
    "any dot/halftone patterns, glow effects, and overall style (tech/luxury/creative/finance). "
    "Keep it to 2-3 sentences."
)

_TEMPLATES = {
    "quality": _QUALITY_TEMPLATE.format(colors=_color_lines(), presets=_preset_lines()),
    "fast": _FAST_TEMPLATE,
}


def build_analysis_prompt(mode: str = "quality") -> str:
    """Prompt for the given analysis mode; unknown modes get the quality prompt."""
    return _TEMPLATES.get(mode, _TEMPLATES["quality"])


def get_all_templates() -> dict[str, str]:
    """Return all prompt templates keyed by mode."""
    return dict(_TEMPLATES)
