"""Tests for the preset catalog and its agreement with the scoring tables."""

from __future__ import annotations

import pytest

from brandlens.engine import tables
from brandlens.engine.catalog import (
    LOGO_PRESETS,
    PRESET_CATEGORIES,
    apply_preset_template,
    get_preset,
    has_preset,
    presets_by_category,
)


def test_catalog_size():
    assert len(LOGO_PRESETS) == 18
    assert len(PRESET_CATEGORIES) == 9


def test_ids_unique():
    ids = [p.id for p in LOGO_PRESETS]
    assert len(ids) == len(set(ids))


def test_every_preset_in_a_category():
    categories = {c.value for c in PRESET_CATEGORIES}
    assert all(p.category in categories for p in LOGO_PRESETS)


def test_get_preset():
    preset = get_preset("luxury-crown")
    assert preset.category == "luxury"
    assert has_preset("luxury-crown")


def test_get_unknown_preset_raises():
    assert not has_preset("mystery-logo")
    with pytest.raises(KeyError):
        get_preset("mystery-logo")


def test_presets_by_category():
    assert [p.id for p in presets_by_category("tech")] == ["tech-circuit", "tech-ai", "tech-cube"]
    assert [p.id for p in presets_by_category("real-estate")] == ["real-estate-house", "real-estate-key"]
    assert presets_by_category("aerospace") == []


def test_scoring_tables_reference_catalog():
    referenced = set(tables.PRESET_ID_KEYWORDS) | set(tables.DEFAULT_PRESETS)
    referenced |= set(tables.FALLBACK_INDUSTRY_PRESETS)
    for family in (tables.INDUSTRY_PRESETS, tables.STYLE_BONUS_PRESETS, tables.PATTERN_PRESETS):
        for ids in family.values():
            referenced |= set(ids)
    for bonuses in (tables.METALLIC_BONUSES, tables.GLOW_BONUSES):
        referenced |= {pid for pid, _ in bonuses}
    for _, bonuses in tables.COLOR_BONUSES:
        referenced |= {pid for pid, _ in bonuses}

    assert referenced <= {p.id for p in LOGO_PRESETS}


def test_prose_scan_covers_catalog():
    assert set(tables.PRESET_ID_KEYWORDS) == {p.id for p in LOGO_PRESETS}


def test_templates_carry_placeholder():
    assert all("{{BRAND_NAME}}" in p.prompt_template for p in LOGO_PRESETS)


def test_apply_preset_template():
    prompt = apply_preset_template(get_preset("real-estate-house"), "  Acme  ")
    assert prompt.startswith("Acme real estate company logo")
    assert "{{BRAND_NAME}}" not in prompt


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        tables.INDUSTRY_MAP["aerospace"] = "tech"
