"""
Editor configuration serializer.

``render_editor_config()`` turns a ``Recommendation`` into text an editor
understands natively. Every format derives the same six values:

    font_size, line_height, font_weight, cursor_style,
    font  = first suggested font, or ``DEFAULT_FONT``
    theme = first suggested theme, or absent

Formats
-------
vscode    : settings.json keys; weight stringified; no theme key when absent.
zed       : settings.json keys; line height nested as ``{"custom": lh}``.
neovim    : init.lua; ``linespace = round((lh - 1) * size)`` pixels;
            bar cursor → ``ver25``; colorscheme slug lowercased and hyphenated.
jetbrains : descriptive ``Key: value`` lines for the Settings dialog.
sublime   : Preferences keys; padding split evenly top/bottom;
            block cursor → ``solid`` caret, otherwise ``smooth``.
other     : generic JSON dump of the six values (theme omitted when absent).

Absent themes are omitted from JSON formats and leave a blank last line in
the line-based formats. Rounding is half-up (8.5 px → 9 px).
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Callable

from vision_calibrator.models.recommendation import Recommendation
from vision_calibrator.taxonomy.vision_taxonomy import CursorStyle, EditorType

logger = logging.getLogger(__name__)

DEFAULT_FONT = "JetBrains Mono"


def render_editor_config(recommendation: Recommendation, editor: EditorType | str) -> str:
    """Render ``recommendation`` as configuration text for ``editor``.

    Never raises: an unknown ``editor`` falls back to a generic JSON dump.

    Args:
        recommendation: Output of ``calculate_recommendations()``.
        editor:         An ``EditorType`` or its string value.

    Returns:
        Configuration text (no trailing newline for JSON formats).
    """
    try:
        editor_type = EditorType(editor)
    except ValueError:
        logger.warning("Unknown editor %r; rendering generic settings dump.", editor)
        return _render_generic(recommendation)
    return _RENDERERS[editor_type](recommendation)


# ── JSON formats ─────────────────────────────────────────────────────────────

def _render_vscode(rec: Recommendation) -> str:
    font = rec.primary_font or DEFAULT_FONT
    settings: dict[str, Any] = {
        "editor.fontSize":   rec.font_size,
        "editor.lineHeight": rec.line_height,
        "editor.fontWeight": str(rec.font_weight),
        "editor.cursorStyle": rec.cursor_style.value,
        "editor.fontFamily": f"'{font}', 'Fira Code', Consolas, monospace",
    }
    if rec.primary_theme:
        settings["workbench.colorTheme"] = rec.primary_theme
    return _to_json(settings)


def _render_zed(rec: Recommendation) -> str:
    settings: dict[str, Any] = {
        "buffer_font_size":   rec.font_size,
        "buffer_line_height": {"custom": rec.line_height},
        "buffer_font_weight": rec.font_weight,
        "cursor_shape":       rec.cursor_style.value,
        "buffer_font_family": rec.primary_font or DEFAULT_FONT,
    }
    if rec.primary_theme:
        settings["theme"] = rec.primary_theme
    return _to_json(settings)


def _render_sublime(rec: Recommendation) -> str:
    padding = _round_half_up((rec.line_height - 1) * rec.font_size / 2)
    settings: dict[str, Any] = {
        "font_face":           rec.primary_font or DEFAULT_FONT,
        "font_size":           rec.font_size,
        "line_padding_top":    padding,
        "line_padding_bottom": padding,
        "caret_style": "solid" if rec.cursor_style == CursorStyle.BLOCK else "smooth",
    }
    if rec.primary_theme:
        settings["color_scheme"] = f"Packages/Theme/{rec.primary_theme}.tmTheme"
    return _to_json(settings)


def _render_generic(rec: Recommendation) -> str:
    settings: dict[str, Any] = {
        "fontSize":    rec.font_size,
        "lineHeight":  rec.line_height,
        "fontWeight":  rec.font_weight,
        "cursorStyle": rec.cursor_style.value,
        "font":        rec.primary_font or DEFAULT_FONT,
    }
    if rec.primary_theme:
        settings["theme"] = rec.primary_theme
    return _to_json(settings)


# ── Line-based formats ───────────────────────────────────────────────────────

def _render_neovim(rec: Recommendation) -> str:
    font = rec.primary_font or DEFAULT_FONT
    linespace = _round_half_up((rec.line_height - 1) * rec.font_size)
    cursor = "ver25" if rec.cursor_style == CursorStyle.BAR else rec.cursor_style.value
    theme_line = ""
    if rec.primary_theme:
        scheme = re.sub(r"\s+", "-", rec.primary_theme.lower())
        theme_line = f'vim.cmd("colorscheme {scheme}")'
    return "\n".join([
        "-- Vision-optimized settings",
        f'vim.opt.guifont = "{font}:h{rec.font_size}"',
        f"vim.opt.linespace = {linespace}",
        f'vim.opt.guicursor = "n-v-c:{cursor}"',
        theme_line,
    ])


def _render_jetbrains(rec: Recommendation) -> str:
    theme_line = f"Theme: {rec.primary_theme}" if rec.primary_theme else ""
    return "\n".join([
        "// JetBrains IDE Settings",
        "// Settings → Editor → Font",
        f"Font: {rec.primary_font or DEFAULT_FONT}",
        f"Size: {rec.font_size}",
        f"Line spacing: {rec.line_height}",
        "// Settings → Editor → Color Scheme",
        theme_line,
    ])


_RENDERERS: dict[EditorType, Callable[[Recommendation], str]] = {
    EditorType.VSCODE:    _render_vscode,
    EditorType.ZED:       _render_zed,
    EditorType.NEOVIM:    _render_neovim,
    EditorType.JETBRAINS: _render_jetbrains,
    EditorType.SUBLIME:   _render_sublime,
}


# ── Helpers ──────────────────────────────────────────────────────────────────

def _to_json(settings: dict[str, Any]) -> str:
    return json.dumps(settings, indent=2, ensure_ascii=False)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
