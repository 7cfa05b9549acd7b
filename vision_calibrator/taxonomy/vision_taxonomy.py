"""
Vision and editor taxonomy for the calibrator.

Four small enumerations describe every calibration request and result:
  - ``VisualCondition``  — which self-reported condition flag is set?
  - ``ColorVisionType``  — which color channel (if any) is deficient?
  - ``CursorStyle``      — which caret shape is recommended?
  - ``EditorType``       — which editor's configuration syntax to emit?

The ``CONDITION_INFO`` and ``COLOR_VISION_INFO`` tables carry the display
labels and one-line descriptions shown by ``vision-calibrator list-options``.

Usage example::

    from vision_calibrator.taxonomy.vision_taxonomy import ColorVisionType

    cvd = ColorVisionType.DEUTERANOPIA

This module has NO imports from any other ``vision_calibrator`` package.
"""

from enum import StrEnum
from typing import NamedTuple


class VisualCondition(StrEnum):
    """Self-reported visual condition; values match ``VisualConditions`` fields."""

    MYOPIA = "myopia"
    """Nearsightedness; distant objects blur."""

    HYPEROPIA = "hyperopia"
    """Farsightedness; near work demands extra accommodation."""

    ASTIGMATISM = "astigmatism"
    """Irregular corneal curvature; blur along one axis."""

    EYE_STRAIN = "eye_strain"
    """Fatigue after long screen sessions."""

    BLUR_OR_GHOSTING = "blur_or_ghosting"
    """Double images or halos around glyphs."""

    LIGHT_SENSITIVITY = "light_sensitivity"
    """Discomfort from bright screens and heavy strokes."""

    VISUAL_CROWDING = "visual_crowding"
    """Dense text feels overwhelming; neighbouring lines interfere."""


class ColorVisionType(StrEnum):
    """Color vision deficiency subtype, named by the deficient cone type."""

    NORMAL = "normal"
    """Trichromatic vision; no theme constraints."""

    DEUTERANOPIA = "deuteranopia"
    """Green-blind; most common, ~6% of males."""

    PROTANOPIA = "protanopia"
    """Red-blind; ~1% of males."""

    TRITANOPIA = "tritanopia"
    """Blue-blind; rare, ~0.01%."""

    ACHROMATOPSIA = "achromatopsia"
    """No color perception; luminance contrast only."""


class CursorStyle(StrEnum):
    """Caret shape recommended for the editor."""

    BAR = "bar"
    BLOCK = "block"
    UNDERLINE = "underline"


class EditorType(StrEnum):
    """Editors with a native configuration renderer."""

    VSCODE = "vscode"
    ZED = "zed"
    NEOVIM = "neovim"
    JETBRAINS = "jetbrains"
    SUBLIME = "sublime"


class OptionInfo(NamedTuple):
    """Display label and description for one selectable option."""

    label: str
    description: str


CONDITION_INFO: dict[VisualCondition, OptionInfo] = {
    VisualCondition.MYOPIA: OptionInfo(
        "Myopia", "Nearsightedness - difficulty seeing distant objects"
    ),
    VisualCondition.HYPEROPIA: OptionInfo(
        "Hyperopia", "Farsightedness - difficulty focusing on close objects"
    ),
    VisualCondition.ASTIGMATISM: OptionInfo(
        "Astigmatism", "Blurred vision due to irregular cornea shape"
    ),
    VisualCondition.EYE_STRAIN: OptionInfo(
        "Eye Strain", "Fatigue after long screen sessions"
    ),
    VisualCondition.BLUR_OR_GHOSTING: OptionInfo(
        "Blur / Ghosting", "Double images or halo effects"
    ),
    VisualCondition.LIGHT_SENSITIVITY: OptionInfo(
        "Light Sensitivity", "Discomfort from bright screens"
    ),
    VisualCondition.VISUAL_CROWDING: OptionInfo(
        "Visual Crowding", "Dense text feels overwhelming"
    ),
}

COLOR_VISION_INFO: dict[ColorVisionType, OptionInfo] = {
    ColorVisionType.NORMAL:        OptionInfo("Normal Color Vision", ""),
    ColorVisionType.DEUTERANOPIA:  OptionInfo("Deuteranopia", "Green-blind (most common)"),
    ColorVisionType.PROTANOPIA:    OptionInfo("Protanopia", "Red-blind"),
    ColorVisionType.TRITANOPIA:    OptionInfo("Tritanopia", "Blue-blind (rare)"),
    ColorVisionType.ACHROMATOPSIA: OptionInfo("Achromatopsia", "Complete color blindness"),
}
