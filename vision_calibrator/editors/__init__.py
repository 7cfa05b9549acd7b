"""
Editor output: serializes recommendations into native configuration syntax.

Modules
-------
serializer : render_editor_config() — pure, one renderer per EditorType.
catalog    : EDITOR_LABELS, SETTINGS_LOCATIONS and EXPORT_FILENAMES lookups.
"""
