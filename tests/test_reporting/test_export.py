"""Tests for vision_calibrator.reporting.export."""

from __future__ import annotations

import json
from pathlib import Path

from vision_calibrator.editors.serializer import render_editor_config
from vision_calibrator.reporting.export import (
    export_config_text,
    export_to_json,
    result_to_dict,
)


def test_export_to_json_creates_parents(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "out.json"
    written = export_to_json({"a": 1}, path)
    assert written == path
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}


def test_export_config_text_appends_newline(tmp_path: Path) -> None:
    path = export_config_text("{}", tmp_path / "settings.json")
    assert path.read_text(encoding="utf-8") == "{}\n"


def test_export_config_text_keeps_existing_newline(tmp_path: Path, baseline_result) -> None:
    text = render_editor_config(baseline_result.recommendation, "neovim")
    assert text.endswith("\n")
    path = export_config_text(text, tmp_path / "init.lua")
    assert path.read_text(encoding="utf-8") == text


def test_result_to_dict(baseline_result) -> None:
    text = render_editor_config(baseline_result.recommendation, "zed")
    data = result_to_dict(baseline_result, "zed", text)
    assert set(data) == {"conditions", "recommendation", "editor", "config"}
    assert data["recommendation"]["cursor_style"] == "bar"
    assert data["conditions"]["myopia"] is False
    assert json.loads(json.dumps(data))["config"] == text
