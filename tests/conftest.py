"""
Shared pytest fixtures for the Vision Calibrator test suite.

Provides:
  - Sample input factories (conditions, prescriptions, current settings).
  - ``baseline_result`` / ``rich_recommendation``: precomputed outputs.
  - ``config_file``: a minimal TOML config in ``tmp_path`` for CLI tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from vision_calibrator.calibration.engine import calculate_recommendations
from vision_calibrator.models.recommendation import CalibrationResult, Recommendation
from vision_calibrator.models.vision import (
    CurrentSettings,
    EyeRefraction,
    Prescription,
    VisualConditions,
)
from vision_calibrator.taxonomy.vision_taxonomy import ColorVisionType


# ── Input factories ───────────────────────────────────────────────────────────

@pytest.fixture
def no_conditions() -> VisualConditions:
    return VisualConditions()


@pytest.fixture
def high_myopia_prescription() -> Prescription:
    """Both eyes at -7.00D, no astigmatism."""
    return Prescription(
        right_eye=EyeRefraction(sphere=-7.0),
        left_eye=EyeRefraction(sphere=-7.0),
    )


@pytest.fixture
def astigmatic_prescription() -> Prescription:
    """Mild myopia with -1.00D cylinder at a 90° (against-the-rule) axis."""
    return Prescription(
        right_eye=EyeRefraction(sphere=-1.0, cylinder=-1.0, axis=90),
        left_eye=EyeRefraction(sphere=-1.25, cylinder=-0.75, axis=90),
    )


@pytest.fixture
def stock_settings() -> CurrentSettings:
    return CurrentSettings(font_size=14, line_height=1.5, font_weight=400)


# ── Outputs ───────────────────────────────────────────────────────────────────

@pytest.fixture
def baseline_result(no_conditions) -> CalibrationResult:
    return calculate_recommendations(no_conditions, ColorVisionType.NORMAL)


@pytest.fixture
def rich_recommendation() -> Recommendation:
    """Astigmatism + deuteranopia: fonts and themes both populated."""
    result = calculate_recommendations(
        VisualConditions(astigmatism=True, eye_strain=True),
        ColorVisionType.DEUTERANOPIA,
    )
    return result.recommendation


# ── Config ────────────────────────────────────────────────────────────────────

@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A TOML config that logs only warnings and exports under ``tmp_path``."""
    path = tmp_path / "config" / "default.toml"
    path.parent.mkdir(parents=True)
    path.write_text(
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n'
        "\n"
        "[calibrator]\n"
        'default_editor = "vscode"\n'
        'default_color_vision = "normal"\n'
        "current_font_size = 14\n"
        "\n"
        "[output]\n"
        f'output_dir = "{(tmp_path / "out").as_posix()}"\n',
        encoding="utf-8",
    )
    return path
