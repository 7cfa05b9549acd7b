"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``VISION_CALIBRATOR_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The calculation core never reads configuration; only the CLI does, and it
passes plain values (editor, baseline settings) into the pure functions.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from vision_calibrator.taxonomy.vision_taxonomy import ColorVisionType, EditorType

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class CalibratorConfig(BaseModel):
    """Defaults for the ``recommend`` command.

    The ``current_*`` values describe the user's existing editor baseline;
    they only feed the comparison explanation.
    """

    model_config = ConfigDict(frozen=True)

    default_editor: str = EditorType.VSCODE.value
    default_color_vision: str = ColorVisionType.NORMAL.value
    current_font_size: int = 14
    current_line_height: float = 1.5
    current_font_weight: int = 400

    @field_validator("default_editor")
    @classmethod
    def validate_editor(cls, v: str) -> str:
        valid = {e.value for e in EditorType}
        if v.lower() not in valid:
            raise ValueError(f"default_editor must be one of {sorted(valid)}, got '{v}'.")
        return v.lower()

    @field_validator("default_color_vision")
    @classmethod
    def validate_color_vision(cls, v: str) -> str:
        valid = {c.value for c in ColorVisionType}
        if v.lower() not in valid:
            raise ValueError(
                f"default_color_vision must be one of {sorted(valid)}, got '{v}'."
            )
        return v.lower()


class OutputConfig(BaseModel):
    """Filesystem location for exported config and JSON files."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    calibrator: CalibratorConfig = CalibratorConfig()
    output: OutputConfig = OutputConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply VISION_CALIBRATOR_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply VISION_CALIBRATOR_* env vars to the raw config dict.

    Supported overrides:
      VISION_CALIBRATOR_LOG_LEVEL   → raw["logging"]["level"]
      VISION_CALIBRATOR_EDITOR      → raw["calibrator"]["default_editor"]
      VISION_CALIBRATOR_OUTPUT_DIR  → raw["output"]["output_dir"]
      VISION_CALIBRATOR_DEBUG       → raw["debug"]
    """
    if log_level := os.environ.get("VISION_CALIBRATOR_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if editor := os.environ.get("VISION_CALIBRATOR_EDITOR"):
        raw.setdefault("calibrator", {})["default_editor"] = editor

    if output_dir := os.environ.get("VISION_CALIBRATOR_OUTPUT_DIR"):
        raw.setdefault("output", {})["output_dir"] = output_dir

    if debug := os.environ.get("VISION_CALIBRATOR_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        calibrator=CalibratorConfig(**raw.get("calibrator", {})),
        output=OutputConfig(**raw.get("output", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
