"""Tests for vision_calibrator.reporting.formatters."""

from __future__ import annotations

from vision_calibrator.calibration.engine import calculate_recommendations
from vision_calibrator.editors.serializer import render_editor_config
from vision_calibrator.models.vision import VisualConditions
from vision_calibrator.reporting.formatters import (
    format_conditions_line,
    format_options_listing,
    format_recommendation_report,
)
from vision_calibrator.taxonomy.vision_taxonomy import ColorVisionType, EditorType


# ── format_conditions_line ────────────────────────────────────────────────────


def test_conditions_line_none(no_conditions) -> None:
    assert format_conditions_line(no_conditions) == "  Conditions: none"


def test_conditions_line_marks_auto_detected(no_conditions, high_myopia_prescription) -> None:
    result = calculate_recommendations(no_conditions, prescription=high_myopia_prescription)
    line = format_conditions_line(result.conditions, requested=no_conditions)
    assert line == "  Conditions: myopia (auto-detected: myopia)"


def test_conditions_line_without_requested() -> None:
    line = format_conditions_line(VisualConditions(eye_strain=True, myopia=True))
    assert line == "  Conditions: myopia, eye_strain"


# ── format_recommendation_report ──────────────────────────────────────────────


def test_report_baseline(baseline_result) -> None:
    config_text = render_editor_config(baseline_result.recommendation, EditorType.VSCODE)
    report = format_recommendation_report(baseline_result, EditorType.VSCODE, config_text)
    assert "=== Vision Calibration ===" in report
    assert "Font: 16px | Line Height: 1.5 | Weight: 400 | Cursor: bar" in report
    assert "[FONTS]" not in report
    assert "[THEMES]" not in report
    assert "[CONFIG] settings.json" in report
    assert '"editor.fontSize": 16' in report


def test_report_lists_fonts_themes_and_citations() -> None:
    result = calculate_recommendations(
        VisualConditions(astigmatism=True), ColorVisionType.PROTANOPIA
    )
    config_text = render_editor_config(result.recommendation, "neovim")
    report = format_recommendation_report(result, "neovim", config_text)
    assert "    1. IBM Plex Mono" in report
    assert "    4. Tokyo Night" in report
    assert "PMC6181807 - Astigmatic axis and visual acuity (2018)" in report
    assert "[CONFIG] init.lua" in report
    assert "colorscheme solarized-dark" in report


def test_report_has_no_trailing_whitespace(baseline_result) -> None:
    config_text = render_editor_config(baseline_result.recommendation, EditorType.JETBRAINS)
    report = format_recommendation_report(baseline_result, EditorType.JETBRAINS, config_text)
    for line in report.split("\n"):
        assert line == line.rstrip()


# ── format_options_listing ────────────────────────────────────────────────────


def test_options_listing_covers_everything() -> None:
    listing = format_options_listing()
    for token in (
        "eye_strain", "Blur / Ghosting", "achromatopsia", "Complete color blindness",
        "jetbrains", "Sublime Text", "Preferences.sublime-settings",
    ):
        assert token in listing
