"""
Vision Calibrator — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (calibrate, render, list).
  5. Report result to stdout.

Install and run::

    pip install -e .
    vision-calibrator --help
    vision-calibrator list-options
    vision-calibrator validate-config
    vision-calibrator recommend --astigmatism --color-vision deuteranopia --editor zed
    vision-calibrator recommend --right-sphere -4.25 --left-sphere -4.0 --json
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

app = typer.Typer(
    name="vision-calibrator",
    help="Evidence-based editor font, spacing and theme settings for your eyes.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from vision_calibrator.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, tomllib.TOMLDecodeError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config; debug mode forces DEBUG level."""
    from vision_calibrator.utils.logging import configure_logging

    logging_config = config.logging
    if config.debug:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(logging_config)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("recommend")
def recommend(
    myopia: bool = typer.Option(False, "--myopia", help="Nearsightedness."),
    hyperopia: bool = typer.Option(False, "--hyperopia", help="Farsightedness."),
    astigmatism: bool = typer.Option(False, "--astigmatism", help="Astigmatism."),
    eye_strain: bool = typer.Option(False, "--eye-strain", help="Fatigue after long sessions."),
    blur: bool = typer.Option(False, "--blur", help="Blur, double images or halos."),
    light_sensitivity: bool = typer.Option(
        False, "--light-sensitivity", help="Discomfort from bright screens."
    ),
    crowding: bool = typer.Option(False, "--crowding", help="Dense text feels overwhelming."),
    color_vision: Optional[str] = typer.Option(
        None,
        "--color-vision",
        help="normal, deuteranopia, protanopia, tritanopia or achromatopsia.",
    ),
    right_sphere: Optional[str] = typer.Option(None, "--right-sphere", help="OD sphere (D)."),
    right_cylinder: Optional[str] = typer.Option(None, "--right-cylinder", help="OD cylinder (D)."),
    right_axis: Optional[str] = typer.Option(None, "--right-axis", help="OD axis (degrees)."),
    left_sphere: Optional[str] = typer.Option(None, "--left-sphere", help="OS sphere (D)."),
    left_cylinder: Optional[str] = typer.Option(None, "--left-cylinder", help="OS cylinder (D)."),
    left_axis: Optional[str] = typer.Option(None, "--left-axis", help="OS axis (degrees)."),
    current_font_size: Optional[int] = typer.Option(
        None, "--current-font-size", help="Current editor font size (px)."
    ),
    current_line_height: Optional[float] = typer.Option(
        None, "--current-line-height", help="Current line-height multiplier."
    ),
    current_font_weight: Optional[int] = typer.Option(
        None, "--current-font-weight", help="Current font weight."
    ),
    no_compare: bool = typer.Option(
        False, "--no-compare", help="Skip the comparison with current settings."
    ),
    editor: Optional[str] = typer.Option(
        None,
        "--editor",
        "-e",
        help="vscode, zed, neovim, jetbrains or sublime. Uses config default if omitted.",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the full result as JSON instead of a report."
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rendered editor config to this file.",
    ),
    json_output: Optional[str] = typer.Option(
        None,
        "--json-output",
        help="Write the full result (conditions, recommendation, config) as JSON to this file.",
    ),
    save: bool = typer.Option(
        False,
        "--save",
        help="Write the rendered config into the configured output_dir.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Calculate display recommendations and render them for an editor.

    Prescription fields accept free text ("-2.25", "+1.00D"). If neither
    sphere parses, the prescription is ignored; other unparsable fields
    count as 0.
    """
    from vision_calibrator.calibration.engine import calculate_recommendations
    from vision_calibrator.calibration.prescription import parse_prescription
    from vision_calibrator.editors.catalog import EXPORT_FILENAMES
    from vision_calibrator.editors.serializer import render_editor_config
    from vision_calibrator.models.vision import CurrentSettings, VisualConditions
    from vision_calibrator.reporting.export import (
        export_config_text,
        export_to_json,
        result_to_dict,
    )
    from vision_calibrator.reporting.formatters import format_recommendation_report
    from vision_calibrator.taxonomy.vision_taxonomy import ColorVisionType, EditorType

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    defaults = config.calibrator

    target_editor = (editor or defaults.default_editor).lower()
    if target_editor not in {e.value for e in EditorType}:
        typer.echo(
            f"[ERROR] Unknown editor '{target_editor}'. "
            f"Choose from: {', '.join(e.value for e in EditorType)}.",
            err=True,
        )
        raise typer.Exit(code=1)

    cvd = (color_vision or defaults.default_color_vision).lower()
    if cvd not in {c.value for c in ColorVisionType}:
        typer.echo(
            f"[ERROR] Unknown color vision type '{cvd}'. "
            f"Choose from: {', '.join(c.value for c in ColorVisionType)}.",
            err=True,
        )
        raise typer.Exit(code=1)

    conditions = VisualConditions(
        myopia=myopia,
        hyperopia=hyperopia,
        astigmatism=astigmatism,
        eye_strain=eye_strain,
        blur_or_ghosting=blur,
        light_sensitivity=light_sensitivity,
        visual_crowding=crowding,
    )
    prescription = parse_prescription(
        right_sphere, right_cylinder, right_axis,
        left_sphere, left_cylinder, left_axis,
    )
    current = None
    if not no_compare:
        current = CurrentSettings(
            font_size=current_font_size if current_font_size is not None else defaults.current_font_size,
            line_height=current_line_height if current_line_height is not None else defaults.current_line_height,
            font_weight=current_font_weight if current_font_weight is not None else defaults.current_font_weight,
        )

    result = calculate_recommendations(conditions, cvd, prescription, current)
    config_text = render_editor_config(result.recommendation, target_editor)

    payload = result_to_dict(result, target_editor, config_text)
    if as_json:
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(
            format_recommendation_report(result, target_editor, config_text, requested=conditions)
        )

    targets: list[Path] = []
    if output:
        targets.append(Path(output))
    if save:
        targets.append(
            Path(config.output.output_dir) / EXPORT_FILENAMES[EditorType(target_editor)]
        )

    for target in targets:
        try:
            written = export_config_text(config_text, target)
        except OSError as exc:
            typer.echo(f"[ERROR] Could not write {target}: {exc}", err=True)
            raise typer.Exit(code=1)
        if not as_json:
            typer.echo("")
            typer.echo(f"[OK] Config written to {written}")

    if json_output:
        try:
            written = export_to_json(payload, Path(json_output))
        except OSError as exc:
            typer.echo(f"[ERROR] Could not write {json_output}: {exc}", err=True)
            raise typer.Exit(code=1)
        if not as_json:
            typer.echo(f"[OK] Result written to {written}")


@app.command("list-options")
def list_options() -> None:
    """List accepted conditions, color vision types and editors."""
    from vision_calibrator.reporting.formatters import format_options_listing

    typer.echo(format_options_listing())


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Default editor:       {config.calibrator.default_editor}")
    typer.echo(f"  Default color vision: {config.calibrator.default_color_vision}")
    typer.echo(
        f"  Current baseline:     {config.calibrator.current_font_size}px / "
        f"{config.calibrator.current_line_height} / {config.calibrator.current_font_weight}"
    )
    typer.echo(f"  Output directory:     {config.output.output_dir}")
    typer.echo(f"  Log level:            {config.logging.level}")
    typer.echo(f"  Debug mode:           {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
