"""Display labels, settings-file locations and export names for each editor."""

from __future__ import annotations

from vision_calibrator.taxonomy.vision_taxonomy import EditorType

EDITOR_LABELS: dict[EditorType, str] = {
    EditorType.VSCODE:    "VS Code",
    EditorType.ZED:       "Zed",
    EditorType.NEOVIM:    "Neovim",
    EditorType.JETBRAINS: "JetBrains",
    EditorType.SUBLIME:   "Sublime Text",
}

SETTINGS_LOCATIONS: dict[EditorType, str] = {
    EditorType.VSCODE:    "settings.json",
    EditorType.ZED:       "~/.config/zed/settings.json",
    EditorType.NEOVIM:    "init.lua",
    EditorType.JETBRAINS: "IDE Settings",
    EditorType.SUBLIME:   "Preferences.sublime-settings",
}

# File names used by ``recommend --save`` inside the configured output_dir.
EXPORT_FILENAMES: dict[EditorType, str] = {
    EditorType.VSCODE:    "vscode-settings.json",
    EditorType.ZED:       "zed-settings.json",
    EditorType.NEOVIM:    "init.lua",
    EditorType.JETBRAINS: "jetbrains-settings.txt",
    EditorType.SUBLIME:   "Preferences.sublime-settings",
}


def settings_location(editor: EditorType | str) -> str:
    """Return where ``editor`` keeps its settings, or ``"settings"`` if unknown."""
    try:
        return SETTINGS_LOCATIONS[EditorType(editor)]
    except ValueError:
        return "settings"
