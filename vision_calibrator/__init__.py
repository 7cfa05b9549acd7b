"""Vision Calibrator: evidence-based editor display settings."""

__version__ = "0.1.0"
