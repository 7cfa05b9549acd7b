"""
Static domain tables for the recommendation engine.

Nothing here is computed at runtime: the font list, the color-vision theme
table and the citation texts are hand-curated from the literature listed in
``vision_calibrator.calibration.engine``.

Order matters in every list — the first suggested font and theme are the
ones written into editor configuration files.
"""

from __future__ import annotations

from typing import NamedTuple

from vision_calibrator.models.recommendation import ResearchCitation
from vision_calibrator.taxonomy.vision_taxonomy import ColorVisionType

# Fonts with wide default spacing, clear letterforms and a high x-height.
ASTIGMATISM_FRIENDLY_FONTS: tuple[str, ...] = (
    "IBM Plex Mono",
    "JetBrains Mono",
    "Fira Code",
    "Input Mono",
    "Atkinson Hyperlegible Mono",
    "Source Code Pro",
)

# Visual crowding without astigmatism takes this many fonts from the list above.
CROWDING_FONT_COUNT = 3


class ThemeAdvice(NamedTuple):
    themes: tuple[str, ...]
    rationale: str


COLOR_VISION_THEMES: dict[ColorVisionType, ThemeAdvice] = {
    ColorVisionType.NORMAL: ThemeAdvice(
        (),
        "No specific theme requirements for normal color vision.",
    ),
    # Green cone deficiency: blue/yellow distinction survives
    ColorVisionType.DEUTERANOPIA: ThemeAdvice(
        ("Solarized Dark", "Solarized Light", "One Dark", "GitHub Dark", "Catppuccin Mocha"),
        "Blue/yellow color schemes work best as the blue cone pathway is intact. "
        "Avoid themes that rely on red/green distinctions for syntax highlighting.",
    ),
    # Red cone deficiency: reds appear darker
    ColorVisionType.PROTANOPIA: ThemeAdvice(
        ("Solarized Dark", "Solarized Light", "Nord", "Tokyo Night"),
        "Blue-dominant themes work well. Reds will appear very dark, so themes "
        "with strong blue/cyan accents are preferred.",
    ),
    # Blue cone deficiency: red/green distinction survives
    ColorVisionType.TRITANOPIA: ThemeAdvice(
        ("Monokai", "Dracula", "Gruvbox", "Material Theme"),
        "Warm color schemes (red/green/orange) work best as these cones are intact. "
        "Avoid themes with blue/yellow as primary differentiators.",
    ),
    # Luminance contrast only
    ColorVisionType.ACHROMATOPSIA: ThemeAdvice(
        ("High Contrast", "GitHub Light", "Paper"),
        "Maximum luminance contrast between syntax elements is critical. "
        "Monochrome or near-monochrome themes with strong brightness differences.",
    ),
}


# ── Citations ─────────────────────────────────────────────────────────────────

MYOPIA_VIEWING_DISTANCE = ResearchCitation(
    finding="Font sizes below 16pt cause viewing distances under 33cm, associated with eye strain",
    source="Wang K, et al. BMJ Open Ophthalmology",
    year=2023,
)

ASTIGMATIC_AXIS = ResearchCitation(
    finding="Astigmatic blur interacts with typography - letter shape and axis orientation affect readability",
    source="PMC6181807 - Astigmatic axis and visual acuity",
    year=2018,
)

UNCORRECTED_ASTIGMATISM = ResearchCitation(
    finding="0.5-1.0D uncorrected astigmatism significantly increases digital eye strain symptoms",
    source="Rosenfield M. Ophthalmic and Physiological Optics",
    year=2016,
)

ACCOMMODATION_LAG = ResearchCitation(
    finding="Larger font sizes significantly reduce accommodation lag and improve eye function",
    source="Nanotechnology Perceptions - Font Size and Accommodation",
    year=2024,
)

CROWDING_LINE_SPACING = ResearchCitation(
    finding="Increased line spacing reduces crowding effects and improves reading in peripheral vision",
    source="Chung STL. Optometry and Vision Science",
    year=2004,
)

CVD_PALETTES = ResearchCitation(
    finding="Blue/orange palettes work well for red-green CVD as they rely on intact blue cone pathway",
    source="WCAG 2.1 / Interaction Design Foundation",
    year=2023,
)

LINE_HEIGHT_READING_SPEED = ResearchCitation(
    finding="Reading speed and accuracy peak at 1.2-1.5× line height; eye strain reduced at 1.5×+",
    source="Nielsen Norman Group / Journal of Experimental Psychology",
    year=2023,
)
