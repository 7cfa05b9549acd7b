"""
Calibration input models.

``VisualConditions`` is the set of seven independent, self-reported flags.
Any subset may be true at once; there is no mutual-exclusion rule.

``Prescription`` holds the refraction of both eyes. Sphere is signed
(negative = myopic, positive = hyperopic), cylinder is the astigmatic power
and axis is its orientation in degrees (0–180).

``CurrentSettings`` is the user's existing editor baseline. It only drives a
comparison explanation and never seeds the recommendation.

All models are frozen — the engine returns an amended copy of
``VisualConditions`` rather than mutating the caller's instance.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from vision_calibrator.taxonomy.vision_taxonomy import VisualCondition


class VisualConditions(BaseModel):
    """Seven independent visual condition flags, all ``False`` by default."""

    model_config = ConfigDict(frozen=True)

    myopia: bool = False
    hyperopia: bool = False
    astigmatism: bool = False
    eye_strain: bool = False
    blur_or_ghosting: bool = False
    light_sensitivity: bool = False
    visual_crowding: bool = False

    @classmethod
    def from_flags(cls, *flags: VisualCondition | str) -> "VisualConditions":
        """Build a condition set with only the named flags switched on.

        Raises:
            ValueError: If a flag is not a ``VisualCondition`` value.
        """
        return cls(**{VisualCondition(f).value: True for f in flags})

    def active(self) -> list[VisualCondition]:
        """Return the switched-on conditions in declaration order."""
        return [c for c in VisualCondition if getattr(self, c.value)]


class EyeRefraction(BaseModel):
    """Refraction of a single eye.

    Attributes:
        sphere: Principal power in diopters (negative = myopia).
        cylinder: Astigmatic power in diopters; sign is ignored downstream.
        axis: Orientation of the astigmatic correction, degrees 0–180.
    """

    model_config = ConfigDict(frozen=True)

    sphere: float = 0.0
    cylinder: float = 0.0
    axis: float = 0.0


class Prescription(BaseModel):
    """Eyeglass prescription for both eyes."""

    model_config = ConfigDict(frozen=True)

    right_eye: EyeRefraction = EyeRefraction()
    left_eye: EyeRefraction = EyeRefraction()

    @property
    def average_sphere(self) -> float:
        return (self.right_eye.sphere + self.left_eye.sphere) / 2

    @property
    def average_cylinder(self) -> float:
        """Absolute mean cylinder across both eyes."""
        return abs((self.right_eye.cylinder + self.left_eye.cylinder) / 2)

    @property
    def average_axis(self) -> float:
        # Plain arithmetic mean; 175° and 5° average to 90°.
        return (self.right_eye.axis + self.left_eye.axis) / 2


class CurrentSettings(BaseModel):
    """The user's existing editor baseline (defaults mirror a stock editor)."""

    model_config = ConfigDict(frozen=True)

    font_size: int = 14
    line_height: float = 1.5
    font_weight: int = 400
