"""Tests for the vision-analysis prompt templates."""

from __future__ import annotations

from brandlens.engine.catalog import LOGO_PRESETS
from brandlens.engine.tables import COLOR_HEX_MAP
from brandlens.llm.prompts import build_analysis_prompt, get_all_templates


def test_quality_prompt_lists_every_preset():
    prompt = build_analysis_prompt()
    for preset in LOGO_PRESETS:
        assert preset.id in prompt


def test_quality_prompt_lists_palette():
    prompt = build_analysis_prompt("quality")
    for color_id, option in COLOR_HEX_MAP.items():
        assert f"[{color_id}] {option.hex}" in prompt


def test_quality_prompt_requests_json_summary():
    prompt = build_analysis_prompt()
    assert "```json" in prompt
    assert '"presetMatch"' in prompt
    assert '"brandName"' in prompt
    assert "{colors}" not in prompt
    assert "{presets}" not in prompt
    assert "{{" not in prompt


def test_unknown_mode_gets_quality_prompt():
    assert build_analysis_prompt("turbo") == build_analysis_prompt("quality")


def test_fast_prompt_is_short():
    assert len(build_analysis_prompt("fast")) < len(build_analysis_prompt("quality"))


def test_get_all_templates():
    templates = get_all_templates()
    assert set(templates) == {"quality", "fast"}
    templates["quality"] = "changed"
    assert get_all_templates()["quality"] != "changed"
