"""Tests for the analysis pipeline."""

from __future__ import annotations

import logging

from brandlens.engine import analyze
from tests.conftest import NATURE_PROSE, STRUCTURED_ANALYSIS


def test_pipeline_bundles_all_projections():
    bundle = analyze(STRUCTURED_ANALYSIS, display_name="Acme")

    assert bundle.analysis.industry == "luxury"
    assert bundle.answers["industry"] == "luxury"
    assert bundle.answers["brandName"] == "Acme"
    assert bundle.config["brandName"] == "Acme"
    assert bundle.config["metallicFinish"] == "gold"
    assert [p.preset_id for p in bundle.presets][:2] == ["luxury-crown", "luxury-diamond"]


def test_pipeline_handles_empty_input():
    bundle = analyze(None)
    assert bundle.analysis.industry == "tech"
    assert bundle.answers["colors"] == ["blue"]
    assert len(bundle.presets) == 4


def test_pipeline_limit():
    assert len(analyze(NATURE_PROSE, limit=2).presets) == 2


def test_pipeline_serializes_camel_case():
    data = analyze(STRUCTURED_ANALYSIS).model_dump(by_alias=True)
    assert data["analysis"]["presetMatch"] == "luxury-crown"
    assert data["presets"][0]["presetId"] == "luxury-crown"


def test_pipeline_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="brandlens.engine.pipeline"):
        analyze(NATURE_PROSE)
    assert "industry=nature" in caplog.text
    assert "top=nature-leaf" in caplog.text
