"""
vision_calibrator.reporting — terminal formatting and file export.

Modules:
  formatters — Plain-text formatters for Typer CLI commands.
  export     — JSON and config-text file writers.
"""
