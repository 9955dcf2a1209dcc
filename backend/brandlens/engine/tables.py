"""Static keyword, lookup and scoring tables.

Pure reference data, built once at import. Table order is significant:
keyword scans resolve ties and "first match wins" rules by declaration order,
and the ranker's tie-break depends on the order presets are first scored.
"""

from __future__ import annotations

from types import MappingProxyType

from brandlens.models.analysis import AnalysisResult
from brandlens.models.presets import ColorOption

# ---------------------------------------------------------------------------
# Classifier defaults (AnalysisResult field defaults)
# ---------------------------------------------------------------------------

_FIELDS = AnalysisResult.model_fields

DEFAULT_INDUSTRY: str = _FIELDS["industry"].default
DEFAULT_STYLE: str = _FIELDS["style"].default
DEFAULT_COLOR: str = _FIELDS["colors"].default[0]
DEFAULT_DEPTH: str = _FIELDS["depth"].default
MAX_COLORS = 3

# ---------------------------------------------------------------------------
# Keyword scans (lower-case substrings)
# ---------------------------------------------------------------------------

INDUSTRY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("tech", ("tech", "digital", "circuit", "software", "data", "ai", "neural", "code")),
    ("luxury", ("luxury", "premium", "elegant", "diamond", "crown", "jewel")),
    ("nature", ("nature", "eco", "organic", "leaf", "green", "environmental", "plant")),
    ("food", ("food", "restaurant", "coffee", "cafe", "culinary", "kitchen", "chef")),
    ("finance", ("finance", "bank", "investment", "money", "growth", "shield", "trust")),
    ("creative", ("creative", "art", "design", "studio", "camera", "brush", "palette")),
    ("sports", ("sport", "fitness", "athletic", "gym", "energy", "motion")),
    ("realestate", ("real estate", "property", "house", "home", "building", "key", "realty")),
    ("corporate", ("corporate", "business", "professional", "enterprise")),
)

STYLE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("elegant", ("elegant", "sophisticated", "refined", "luxurious", "premium")),
    ("bold", ("bold", "powerful", "strong", "impactful", "heavy")),
    ("playful", ("playful", "fun", "whimsical", "colorful", "creative")),
    ("organic", ("organic", "natural", "flowing", "hand-drawn", "earthy")),
    ("modern", ("modern", "clean", "minimal", "contemporary", "geometric", "sleek")),
)

COLOR_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("blue", "blue"), ("navy", "blue"), ("azure", "blue"), ("cobalt", "blue"),
    ("cyan", "cyan"), ("teal", "cyan"), ("turquoise", "cyan"), ("aqua", "cyan"),
    ("purple", "purple"), ("violet", "purple"), ("magenta", "purple"), ("lavender", "purple"),
    ("gold", "gold"), ("yellow", "gold"), ("amber", "gold"), ("golden", "gold"),
    ("green", "green"), ("emerald", "green"), ("lime", "green"), ("forest", "green"),
    ("red", "red"), ("crimson", "red"), ("scarlet", "red"), ("ruby", "red"),
    ("pink", "pink"), ("rose", "pink"), ("coral", "pink"), ("salmon", "pink"),
    ("orange", "orange"), ("tangerine", "orange"), ("peach", "orange"),
    ("black", "black"), ("dark", "black"), ("charcoal", "black"),
    ("silver", "silver"), ("gray", "silver"), ("grey", "silver"), ("chrome", "silver"),
    ("white", "white"), ("cream", "white"), ("ivory", "white"),
)

# (depth, markers that must ALL appear); first rule with any satisfied marker set wins
DEPTH_RULES: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    ("flat", (("[flat]",), ("flat", "2d"))),
    ("subtle", (("[subtle]",), ("subtle depth",), ("slight",))),
    ("deep", (("[deep]",), ("deep 3d",), ("significant depth",))),
    ("extreme", (("[extreme]",), ("extreme",), ("dramatic 3d",))),
    ("medium", (("[medium]",), ("medium",), ("moderate",))),
)

# keyword -> metallic finish; silver reads as chrome
METALLIC_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("chrome", "chrome"),
    ("gold", "gold"),
    ("bronze", "bronze"),
    ("rose-gold", "rose-gold"),
    ("platinum", "platinum"),
    ("copper", "copper"),
    ("silver", "chrome"),
)

GLOW_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("neon", "neon"),
    ("electric", "electric"),
    ("aurora", "aurora"),
    ("soft glow", "soft"),
)

FONT_STYLE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("sans-serif-bold", "sans-serif-bold"),
    ("serif-elegant", "serif-elegant"),
    ("modern-geometric", "modern-geometric"),
    ("tech-digital", "tech-digital"),
    ("rounded-friendly", "rounded-friendly"),
    ("handwritten", "handwritten-casual"),
)

FONT_WEIGHT_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("extra-bold", ("extra-bold", "extra bold", "heavy")),
    ("bold", ("bold",)),
    ("light", ("light", "thin")),
    ("regular", ("regular", "normal")),
)

PATTERN_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("circuit", "circuit"),
    ("neural", "neural"),
    ("grid", "grid"),
    ("hexagon", "hexagon"),
    ("dot matrix", "dot-matrix"),
    ("halftone", "halftone"),
    ("radial", "radial"),
)

# Catalog ids recognised verbatim in prose, in scan order
PRESET_ID_KEYWORDS: tuple[str, ...] = (
    "tech-circuit", "tech-ai", "tech-cube",
    "luxury-crown", "luxury-diamond",
    "nature-leaf",
    "food-restaurant", "food-coffee",
    "finance-growth", "finance-shield",
    "creative-studio", "creative-camera",
    "sports-fitness",
    "real-estate-house", "real-estate-key",
    "corporate-dotmatrix", "corporate-swoosh", "corporate-globe",
)

# Effects scanned independently of the metallic/glow rules
EXTRA_EFFECT_KEYWORDS: tuple[str, ...] = ("gradient", "shadow", "sparkle", "bevel")

CONFIDENCE_PATTERN = r"confidence[:\s]+(\d+)"

# ---------------------------------------------------------------------------
# Mapper lookups (analysis vocabulary -> questionnaire / renderer vocabulary)
# ---------------------------------------------------------------------------

INDUSTRY_MAP = MappingProxyType({
    "tech": "tech", "technology": "tech", "digital": "tech", "software": "tech",
    "luxury": "luxury", "premium": "luxury", "fashion": "luxury",
    "nature": "nature", "eco": "nature", "organic": "nature", "environmental": "nature",
    "food": "food", "restaurant": "food", "coffee": "food", "cafe": "food",
    "finance": "finance", "banking": "finance", "investment": "finance", "insurance": "finance",
    "creative": "creative", "design": "creative", "art": "creative",
    "photography": "creative", "media": "creative",
    "sports": "sports", "fitness": "sports", "athletic": "sports", "gym": "sports",
    "realestate": "realestate", "real-estate": "realestate", "property": "realestate",
    "housing": "realestate", "construction": "realestate",
})
FALLBACK_INDUSTRY_ANSWER = "tech"

STYLE_MAP = MappingProxyType({
    "modern": "modern", "clean": "modern", "minimal": "modern",
    "minimalist": "modern", "contemporary": "modern",
    "elegant": "elegant", "premium": "elegant", "sophisticated": "elegant", "luxurious": "elegant",
    "bold": "bold", "powerful": "bold", "strong": "bold", "impactful": "bold",
    "playful": "playful", "creative": "playful", "fun": "playful", "artistic": "playful",
    "organic": "organic", "natural": "organic", "earthy": "organic",
})
FALLBACK_STYLE_ANSWER = "modern"

# Questionnaire depth vocabulary (coarser than the renderer's)
DEPTH_MAP = MappingProxyType({
    "flat": "flat", "2d": "flat",
    "subtle": "subtle", "slight": "subtle",
    "medium": "medium", "moderate": "medium",
    "dramatic": "dramatic", "deep": "dramatic", "extreme": "dramatic",
})
FALLBACK_DEPTH_ANSWER = "medium"

# Renderer depth levels
DEPTH_LEVEL_MAP = MappingProxyType({
    "flat": "flat",
    "subtle": "subtle",
    "medium": "medium",
    "deep": "deep",
    "dramatic": "deep",
    "extreme": "extreme",
})
FALLBACK_DEPTH_LEVEL = "medium"

COLOR_HEX_MAP = MappingProxyType({
    "blue": ColorOption(name="Blue", value="blue", hex="#3B82F6"),
    "purple": ColorOption(name="Purple", value="purple", hex="#8B5CF6"),
    "gold": ColorOption(name="Gold", value="gold", hex="#D4AF37"),
    "green": ColorOption(name="Green", value="green", hex="#22C55E"),
    "red": ColorOption(name="Red", value="red", hex="#EF4444"),
    "black": ColorOption(name="Black", value="black", hex="#000000"),
    "cyan": ColorOption(name="Cyan", value="cyan", hex="#06B6D4"),
    "pink": ColorOption(name="Pink", value="pink", hex="#EC4899"),
})

STYLE_TO_FONT_MAP = MappingProxyType({
    "modern": "modern-geometric",
    "elegant": "serif-elegant",
    "bold": "sans-serif-bold",
    "playful": "rounded-friendly",
    "organic": "handwritten-casual",
})
DEFAULT_FONT_STYLE: str = _FIELDS["font_style"].default

STYLE_TO_WEIGHT_MAP = MappingProxyType({
    "modern": "bold",
    "elegant": "regular",
    "bold": "extra-bold",
    "playful": "bold",
    "organic": "regular",
})
DEFAULT_FONT_WEIGHT: str = _FIELDS["font_weight"].default

PATTERN_MAP = MappingProxyType({
    "circuit": "circuit",
    "neural": "neural",
    "grid": "grid",
    "hexagon": "hexagon",
    "dot-matrix": "halftone",
    "halftone": "halftone",
    "radial": "radial",
})
FALLBACK_PATTERN_STYLE = "uniform"

INDUSTRY_TO_ICON_MAP = MappingProxyType({
    "tech": "tech",
    "nature": "nature",
    "creative": "abstract",
    "sports": "abstract",
})

FRAME_TO_SWOOSH = MappingProxyType({
    "circle": "circular",
    "oval": "circular",
    "rectangle": "none",
    "shield": "dynamic",
    "badge": "circular",
    "hexagon": "dynamic",
    "ribbon": "ribbon",
})
FALLBACK_SWOOSH = "circular"

# Frame materials that carry no finish
NON_METALLIC_FRAMES = frozenset({"none", "plain", ""})
FRAME_MATERIAL_FINISH = MappingProxyType({"silver": "chrome"})

# Generic effect-tag fallbacks when no explicit value was classified
GENERIC_METALLIC_FINISH = "chrome"
GENERIC_GLOW_STYLE = "soft"

# Effect tag -> (config key, value)
EFFECT_CONFIG_FLAGS: tuple[tuple[str, str, object], ...] = (
    ("gradient", "dotGradient", True),
    ("shadow", "shadowStyle", "soft-drop"),
    ("sparkle", "sparkleIntensity", "medium"),
    ("bevel", "bevelStyle", "soft"),
)

# ---------------------------------------------------------------------------
# Ranker families, hand-tuned; changing any number changes recommendations
# ---------------------------------------------------------------------------

PRESET_MATCH_FALLBACK_SCORE = 80

INDUSTRY_PRESETS = MappingProxyType({
    "tech": ("tech-circuit", "tech-ai", "tech-cube"),
    "luxury": ("luxury-crown", "luxury-diamond"),
    "nature": ("nature-leaf",),
    "food": ("food-restaurant", "food-coffee"),
    "finance": ("finance-growth", "finance-shield"),
    "creative": ("creative-studio", "creative-camera"),
    "sports": ("sports-fitness",),
    "realestate": ("real-estate-house", "real-estate-key"),
    "corporate": ("corporate-dotmatrix", "corporate-swoosh", "corporate-globe"),
})
FALLBACK_INDUSTRY_PRESETS = ("corporate-dotmatrix", "corporate-swoosh")
INDUSTRY_BASE, INDUSTRY_STEP = 15, 3

STYLE_BONUS_PRESETS = MappingProxyType({
    "modern": ("tech-cube", "corporate-dotmatrix", "tech-circuit"),
    "elegant": ("luxury-crown", "luxury-diamond", "finance-shield"),
    "bold": ("sports-fitness", "corporate-swoosh", "tech-ai"),
    "playful": ("creative-studio", "creative-camera", "food-coffee"),
    "organic": ("nature-leaf", "food-restaurant", "creative-studio"),
})
STYLE_BASE, STYLE_STEP = 8, 2

METALLIC_BONUSES: tuple[tuple[str, int], ...] = (
    ("luxury-crown", 5),
    ("luxury-diamond", 5),
    ("tech-cube", 3),
)

GLOW_BONUSES: tuple[tuple[str, int], ...] = (
    ("tech-circuit", 5),
    ("tech-ai", 5),
    ("creative-studio", 3),
)

PATTERN_PRESETS = MappingProxyType({
    "circuit": ("tech-circuit", "tech-ai"),
    "neural": ("tech-ai", "tech-circuit"),
    "grid": ("tech-cube", "corporate-dotmatrix"),
    "halftone": ("corporate-dotmatrix", "creative-studio"),
    "dot-matrix": ("corporate-dotmatrix", "corporate-swoosh"),
})
PATTERN_BONUS = 6

# (trigger colors, bonuses): a rule fires once if any trigger color is present
COLOR_BONUSES: tuple[tuple[frozenset[str], tuple[tuple[str, int], ...]], ...] = (
    (frozenset({"gold"}), (("luxury-crown", 4), ("luxury-diamond", 3), ("finance-growth", 2))),
    (frozenset({"green"}), (("nature-leaf", 5), ("finance-growth", 3))),
    (frozenset({"cyan", "blue"}), (("tech-circuit", 3), ("tech-ai", 3))),
    (frozenset({"purple", "pink"}), (("creative-studio", 4), ("creative-camera", 3))),
)

DEFAULT_PRESETS = ("corporate-dotmatrix", "tech-circuit", "luxury-crown", "creative-studio")
FLOOR_SCORE = 5
CEILING_SCORE = 20
RECOMMENDATION_LIMIT = 4
