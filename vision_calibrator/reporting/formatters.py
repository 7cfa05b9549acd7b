"""
Plain-text terminal formatters for CLI commands.

All formatters accept in-memory results and return multi-line strings
suitable for ``typer.echo()``. No third-party dependencies.

Recommendation report layout::

  === Vision Calibration ===
    Font: 18px | Line Height: 1.6 | Weight: 400 | Cursor: block
    Conditions: myopia, astigmatism (auto-detected: astigmatism)

  [FONTS]
    1. IBM Plex Mono
    ...

  [CONFIG] settings.json
    { ... }
"""

from __future__ import annotations

from vision_calibrator.calibration.engine import recommendation_summary
from vision_calibrator.editors.catalog import EDITOR_LABELS, SETTINGS_LOCATIONS, settings_location
from vision_calibrator.models.recommendation import CalibrationResult
from vision_calibrator.models.vision import VisualConditions
from vision_calibrator.taxonomy.vision_taxonomy import (
    COLOR_VISION_INFO,
    CONDITION_INFO,
    EditorType,
)


def format_conditions_line(
    conditions: VisualConditions,
    requested: VisualConditions | None = None,
) -> str:
    """Return the active conditions, noting any added by auto-detection.

    Args:
        conditions: Amended conditions from ``CalibrationResult``.
        requested:  Conditions as supplied by the user (optional).
    """
    active = conditions.active()
    if not active:
        return "  Conditions: none"

    line = "  Conditions: " + ", ".join(c.value for c in active)
    if requested is not None:
        added = [c.value for c in active if c not in requested.active()]
        if added:
            line += f" (auto-detected: {', '.join(added)})"
    return line


def format_recommendation_report(
    result:      CalibrationResult,
    editor:      EditorType | str,
    config_text: str,
    requested:   VisualConditions | None = None,
) -> str:
    """Format a full calibration result for the terminal.

    Sections with nothing to show (no fonts, no themes) are skipped.

    Args:
        result:      Output of ``calculate_recommendations()``.
        editor:      Editor the config was rendered for (label lookup only).
        config_text: Output of ``render_editor_config()``.
        requested:   Conditions before auto-detection, for the conditions line.

    Returns:
        Multi-line string.
    """
    rec = result.recommendation
    lines: list[str] = []
    lines.append("")
    lines.append("=== Vision Calibration ===")
    lines.append(f"  {recommendation_summary(rec)}")
    lines.append(format_conditions_line(result.conditions, requested))

    if rec.suggested_fonts:
        lines.append("")
        lines.append("  [FONTS]")
        for idx, font in enumerate(rec.suggested_fonts, start=1):
            lines.append(f"    {idx}. {font}")

    if rec.suggested_themes:
        lines.append("")
        lines.append("  [THEMES]")
        for idx, theme in enumerate(rec.suggested_themes, start=1):
            lines.append(f"    {idx}. {theme}")

    lines.append("")
    lines.append("  [WHY]")
    for explanation in rec.explanations:
        lines.append(f"    - {explanation}")

    lines.append("")
    lines.append("  [RESEARCH]")
    for citation in rec.research:
        lines.append(f"    - {citation.finding}")
        lines.append(f"      {citation.source} ({citation.year})")

    lines.append("")
    lines.append(f"  [CONFIG] {settings_location(editor)}")
    for config_line in config_text.split("\n"):
        lines.append(f"    {config_line}".rstrip())

    return "\n".join(lines)


def format_options_listing() -> str:
    """List every condition, color vision type and editor the CLI accepts."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Conditions ===")
    for condition, info in CONDITION_INFO.items():
        lines.append(f"  {condition.value:<20}  {info.label:<18}  {info.description}")

    lines.append("")
    lines.append("=== Color Vision ===")
    for cvd, info in COLOR_VISION_INFO.items():
        lines.append(f"  {cvd.value:<20}  {info.label:<20}  {info.description}".rstrip())

    lines.append("")
    lines.append("=== Editors ===")
    for editor, label in EDITOR_LABELS.items():
        lines.append(f"  {editor.value:<20}  {label:<14}  {SETTINGS_LOCATIONS[editor]}")

    return "\n".join(lines)
