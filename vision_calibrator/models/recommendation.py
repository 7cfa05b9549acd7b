"""
Calibration output models.

``Recommendation`` is the numeric result plus two append-only logs:
``explanations`` (human-readable rationale) and ``research`` (citations).
Both logs are ordered by rule evaluation order, so two calls with identical
inputs produce byte-identical records.

``CalibrationResult`` pairs the recommendation with the condition set as
amended by prescription auto-detection.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from vision_calibrator.models.vision import VisualConditions
from vision_calibrator.taxonomy.vision_taxonomy import CursorStyle


class ResearchCitation(BaseModel):
    """A literature finding backing one of the rules."""

    model_config = ConfigDict(frozen=True)

    finding: str
    source: str
    year: int


class Recommendation(BaseModel):
    """Recommended editor display parameters.

    Attributes:
        font_size: Font size in px (integer).
        line_height: Unitless line-height multiplier, one decimal.
        font_weight: CSS-style weight, 400 = regular, 500 = medium.
        cursor_style: Recommended caret shape.
        suggested_fonts: Ordered font family suggestions (may be empty).
        suggested_themes: Ordered color theme suggestions (may be empty).
        explanations: Rationale strings in rule evaluation order.
        research: Citations in rule evaluation order.
    """

    model_config = ConfigDict(frozen=True)

    font_size: int = 16
    line_height: float = 1.5
    font_weight: int = 400
    cursor_style: CursorStyle = CursorStyle.BAR
    suggested_fonts: list[str] = []
    suggested_themes: list[str] = []
    explanations: list[str] = []
    research: list[ResearchCitation] = []

    @property
    def primary_font(self) -> str | None:
        return self.suggested_fonts[0] if self.suggested_fonts else None

    @property
    def primary_theme(self) -> str | None:
        return self.suggested_themes[0] if self.suggested_themes else None


class CalibrationResult(BaseModel):
    """Amended conditions plus the recommendation computed from them."""

    model_config = ConfigDict(frozen=True)

    conditions: VisualConditions
    recommendation: Recommendation
