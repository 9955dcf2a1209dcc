"""Preset catalog: fixed, read-only starting configurations for the renderer."""

from __future__ import annotations

from brandlens.models.presets import Preset, PresetCategory

BRAND_NAME_PLACEHOLDER = "{{BRAND_NAME}}"

PRESET_CATEGORIES: tuple[PresetCategory, ...] = (
    PresetCategory(value="real-estate", label="Real Estate", icon="🏠", color="#10b981"),
    PresetCategory(value="tech", label="Technology", icon="💻", color="#3b82f6"),
    PresetCategory(value="food", label="Food & Dining", icon="🍽️", color="#f97316"),
    PresetCategory(value="finance", label="Finance", icon="💰", color="#eab308"),
    PresetCategory(value="creative", label="Creative", icon="🎨", color="#ec4899"),
    PresetCategory(value="sports", label="Sports", icon="⚽", color="#ef4444"),
    PresetCategory(value="luxury", label="Luxury", icon="👑", color="#d4af37"),
    PresetCategory(value="nature", label="Nature", icon="🌿", color="#22c55e"),
    PresetCategory(value="corporate", label="Corporate", icon="🏢", color="#6366f1"),
)

LOGO_PRESETS: tuple[Preset, ...] = (
    # Real estate
    Preset(
        id="real-estate-house",
        name="Modern House",
        category="real-estate",
        icon="🏠",
        description="Clean house icon with modern typography",
        prompt_template="{{BRAND_NAME}} real estate company logo with sleek modern house icon, roofline design, property business, professional",
        negative_prompt="text only, no icon, cartoon, childish",
        concept="modern",
        render_styles=("3d-metallic",),
        color_scheme="Gold, navy blue, or slate gray",
    ),
    Preset(
        id="real-estate-key",
        name="Luxury Key",
        category="real-estate",
        icon="🔑",
        description="Elegant key design for premium properties",
        prompt_template="{{BRAND_NAME}} luxury real estate logo with ornate golden key icon, premium property agency, elegant serif typography",
        negative_prompt="cheap, basic, cartoon",
        concept="elegant",
        render_styles=("3d-metallic",),
        color_scheme="Gold and black",
    ),
    # Technology
    Preset(
        id="tech-circuit",
        name="Tech Circuit",
        category="tech",
        icon="⚡",
        description="Futuristic circuit/tech aesthetic",
        prompt_template="{{BRAND_NAME}} technology company logo with circuit board pattern, digital innovation, modern tech startup, silicon valley aesthetic",
        negative_prompt="organic, nature, vintage, old",
        concept="modern",
        render_styles=("neon", "3d-gradient"),
        color_scheme="Electric blue, cyan, purple",
    ),
    Preset(
        id="tech-ai",
        name="AI Brain",
        category="tech",
        icon="🧠",
        description="Neural network / AI themed",
        prompt_template="{{BRAND_NAME}} artificial intelligence company logo with neural network brain icon, machine learning, deep tech, futuristic",
        negative_prompt="cartoon, childish, simple",
        concept="modern",
        render_styles=("3d-gradient", "neon"),
        color_scheme="Purple, cyan gradient",
    ),
    Preset(
        id="tech-cube",
        name="Tech Cube",
        category="tech",
        icon="🔲",
        description="3D geometric cube design",
        prompt_template="{{BRAND_NAME}} tech startup logo with 3D isometric cube, geometric shapes, blockchain/data company aesthetic",
        negative_prompt="flat, 2d, organic shapes",
        concept="modern",
        render_styles=("3d-crystal", "3d-gradient"),
        color_scheme="Blue, purple, teal",
    ),
    # Food & dining
    Preset(
        id="food-restaurant",
        name="Fine Dining",
        category="food",
        icon="🍽️",
        description="Elegant restaurant branding",
        prompt_template="{{BRAND_NAME}} upscale restaurant logo with elegant fork and knife icon, fine dining, culinary excellence, gourmet",
        negative_prompt="fast food, cheap, cartoon",
        concept="elegant",
        render_styles=("3d-metallic",),
        color_scheme="Gold, burgundy, black",
    ),
    Preset(
        id="food-coffee",
        name="Coffee Shop",
        category="food",
        icon="☕",
        description="Cozy coffee house aesthetic",
        prompt_template="{{BRAND_NAME}} artisan coffee shop logo with steaming coffee cup icon, cafe, barista, warm and inviting",
        negative_prompt="corporate, cold, tech",
        concept="vintage",
        render_styles=("3d", "flat"),
        color_scheme="Brown, cream, warm tones",
    ),
    # Finance
    Preset(
        id="finance-growth",
        name="Growth Chart",
        category="finance",
        icon="📈",
        description="Investment and growth themed",
        prompt_template="{{BRAND_NAME}} investment firm logo with upward growth arrow chart, financial success, wealth management, professional",
        negative_prompt="down arrow, loss, decline, cartoon",
        concept="modern",
        render_styles=("3d-metallic", "3d-gradient"),
        color_scheme="Green, gold, navy",
    ),
    Preset(
        id="finance-shield",
        name="Secure Shield",
        category="finance",
        icon="🛡️",
        description="Trust and security focused",
        prompt_template="{{BRAND_NAME}} financial security company logo with shield icon, trust, protection, banking, institutional",
        negative_prompt="broken, weak, cartoon",
        concept="bold",
        render_styles=("3d-metallic",),
        color_scheme="Navy blue, gold, silver",
    ),
    # Creative
    Preset(
        id="creative-studio",
        name="Design Studio",
        category="creative",
        icon="🎨",
        description="Creative agency branding",
        prompt_template="{{BRAND_NAME}} creative design studio logo with abstract artistic brush stroke, innovation, creative agency",
        negative_prompt="corporate, boring, generic",
        concept="playful",
        render_styles=("3d-gradient", "neon"),
        color_scheme="Vibrant rainbow or signature colors",
    ),
    Preset(
        id="creative-camera",
        name="Photography",
        category="creative",
        icon="📷",
        description="Photography studio aesthetic",
        prompt_template="{{BRAND_NAME}} professional photography studio logo with camera lens aperture icon, visual arts, creative",
        negative_prompt="amateur, cheap, clip art",
        concept="modern",
        render_styles=("3d-metallic", "3d-crystal"),
        color_scheme="Black, silver, accent color",
    ),
    # Sports
    Preset(
        id="sports-fitness",
        name="Fitness Club",
        category="sports",
        icon="💪",
        description="Gym and fitness branding",
        prompt_template="{{BRAND_NAME}} fitness gym logo with powerful athletic icon, strength training, sports club, dynamic energy",
        negative_prompt="weak, sedentary, lazy",
        concept="bold",
        render_styles=("3d-metallic", "3d"),
        color_scheme="Red, black, orange",
    ),
    # Luxury
    Preset(
        id="luxury-crown",
        name="Royal Crown",
        category="luxury",
        icon="👑",
        description="Premium luxury branding",
        prompt_template="{{BRAND_NAME}} luxury premium brand logo with elegant crown icon, royal, exclusive, high-end fashion or jewelry",
        negative_prompt="cheap, basic, mass market",
        concept="elegant",
        render_styles=("3d-metallic", "3d-crystal"),
        color_scheme="Gold, black, deep purple",
    ),
    Preset(
        id="luxury-diamond",
        name="Diamond",
        category="luxury",
        icon="💎",
        description="Precious gem aesthetic",
        prompt_template="{{BRAND_NAME}} luxury jewelry brand logo with brilliant cut diamond icon, precious, exclusive, high fashion",
        negative_prompt="fake, cheap, plastic",
        concept="elegant",
        render_styles=("3d-crystal", "3d-metallic"),
        color_scheme="Crystal clear, platinum, blue",
    ),
    # Nature
    Preset(
        id="nature-leaf",
        name="Eco Leaf",
        category="nature",
        icon="🌿",
        description="Eco-friendly organic branding",
        prompt_template="{{BRAND_NAME}} eco-friendly sustainable brand logo with elegant leaf icon, organic, natural, green business",
        negative_prompt="industrial, polluted, toxic",
        concept="modern",
        render_styles=("3d-gradient", "3d"),
        color_scheme="Green, teal, earth tones",
    ),
    # Corporate
    Preset(
        id="corporate-dotmatrix",
        name="Dot Matrix 3D",
        category="corporate",
        icon="⚫",
        description="Halftone dots with metallic swoosh",
        prompt_template=(
            "{{BRAND_NAME}} corporate logo with 3D letters filled with DOT MATRIX halftone pattern texture, "
            "metallic chrome and purple gradient, circular swoosh arc element wrapping around letters, "
            "dramatic studio lighting, dark gradient background, professional recruitment or consulting company style"
        ),
        negative_prompt="solid fill, flat colors, no texture, simple, cartoon, 2D",
        concept="modern",
        render_styles=("3d-metallic",),
        color_scheme="Chrome, purple, dark blue",
    ),
    Preset(
        id="corporate-swoosh",
        name="Chrome Swoosh",
        category="corporate",
        icon="🌀",
        description="Dynamic arc with metallic text",
        prompt_template=(
            "{{BRAND_NAME}} corporate logo with elegant 3D chrome metallic letters, dynamic swoosh arc element "
            "circling the design, sparkle accent, premium business branding, dark professional background"
        ),
        negative_prompt="flat, 2D, cartoon, cheap",
        concept="modern",
        render_styles=("3d-metallic", "3d-crystal"),
        color_scheme="Silver, purple, blue",
    ),
    Preset(
        id="corporate-globe",
        name="Global Network",
        category="corporate",
        icon="🌐",
        description="International business aesthetic",
        prompt_template=(
            "{{BRAND_NAME}} global corporation logo with 3D globe or network icon, connected dots and lines, "
            "international business, worldwide reach, professional"
        ),
        negative_prompt="local, small, cartoon",
        concept="modern",
        render_styles=("3d-metallic", "3d-gradient"),
        color_scheme="Blue, silver, teal",
    ),
)

_BY_ID: dict[str, Preset] = {p.id: p for p in LOGO_PRESETS}


def get_preset(preset_id: str) -> Preset:
    """Look up a preset by id. Raises KeyError for ids outside the catalog."""
    return _BY_ID[preset_id]


def has_preset(preset_id: str) -> bool:
    return preset_id in _BY_ID


def presets_by_category(category: str) -> list[Preset]:
    return [p for p in LOGO_PRESETS if p.category == category]


def apply_preset_template(preset: Preset, brand_name: str) -> str:
    """Substitute the brand name into a preset's prompt template."""
    return preset.prompt_template.replace(BRAND_NAME_PLACEHOLDER, brand_name.strip(), 1)
