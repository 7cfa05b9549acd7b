"""
File export helpers.

All functions write to disk and return the written ``Path``. Parent
directories are created if missing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from vision_calibrator.models.recommendation import CalibrationResult

logger = logging.getLogger(__name__)


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    logger.info("Wrote JSON to %s", path)
    return path


def export_config_text(text: str, path: Path) -> Path:
    """Write rendered editor configuration text, ending with a newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    logger.info("Wrote editor config to %s", path)
    return path


def result_to_dict(result: CalibrationResult, editor: str, config_text: str) -> dict:
    """Flatten a calibration result into a JSON-ready dict.

    Keys: ``conditions``, ``recommendation``, ``editor``, ``config``.
    """
    return {
        "conditions":     result.conditions.model_dump(mode="json"),
        "recommendation": result.recommendation.model_dump(mode="json"),
        "editor":         editor,
        "config":         config_text,
    }
