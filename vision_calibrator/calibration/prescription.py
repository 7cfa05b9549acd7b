"""
Free-text prescription parsing.

Prescription fields arrive as whatever the user typed ("-2.25", "+1.00D",
"120°", blank). Parsing follows the leading-number rule of a browser
``parseFloat``: skip leading whitespace, read the longest valid decimal
prefix and ignore any trailing unit text.

Absence rules
-------------
  - Both spheres unparsable  → no prescription at all (``None``).
  - At least one sphere parses → every unparsable field becomes ``0.0``.
"""

from __future__ import annotations

import re

from vision_calibrator.models.vision import EyeRefraction, Prescription

_LEADING_DECIMAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_decimal(text: str | None) -> float | None:
    """Parse the leading decimal number of ``text``.

    Returns ``None`` when ``text`` is empty or does not start with a number.

    >>> parse_decimal("-2.25D")
    -2.25
    >>> parse_decimal("abc") is None
    True
    """
    if text is None:
        return None
    match = _LEADING_DECIMAL.match(text.lstrip())
    if match is None:
        return None
    return float(match.group(0))


def parse_prescription(
    right_sphere: str | None = None,
    right_cylinder: str | None = None,
    right_axis: str | None = None,
    left_sphere: str | None = None,
    left_cylinder: str | None = None,
    left_axis: str | None = None,
) -> Prescription | None:
    """Build a ``Prescription`` from six free-text fields.

    Returns:
        ``None`` if neither sphere parses, otherwise a prescription with
        unparsable fields set to ``0.0``.
    """
    rs = parse_decimal(right_sphere)
    ls = parse_decimal(left_sphere)
    if rs is None and ls is None:
        return None

    return Prescription(
        right_eye=EyeRefraction(
            sphere=rs or 0.0,
            cylinder=parse_decimal(right_cylinder) or 0.0,
            axis=parse_decimal(right_axis) or 0.0,
        ),
        left_eye=EyeRefraction(
            sphere=ls or 0.0,
            cylinder=parse_decimal(left_cylinder) or 0.0,
            axis=parse_decimal(left_axis) or 0.0,
        ),
    )
