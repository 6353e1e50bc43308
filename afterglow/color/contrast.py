# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
WCAG 2 contrast metrics for swatch tooltips.

Reports ratios and pass levels only; colours are never adjusted here.
"""

from __future__ import annotations

from enum import Enum

from afterglow.color.colorspace import hex_to_linear


class WCAGLevel(str, Enum):
    """WCAG text contrast level. Compares equal to its string value."""
    AAA = "AAA"
    AA = "AA"
    FAIL = "Fail"


def relative_luminance(hex_color: str) -> float:
    """Relative luminance of a hex colour (0 = black, 1 = white)."""
    r, g, b = hex_to_linear(hex_color)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """
    WCAG contrast ratio between two colours.

    Symmetric in its arguments. Ranges from 1.0 (identical luminance) to
    21.0 (black on white).
    """
    la = relative_luminance(hex_a)
    lb = relative_luminance(hex_b)
    lighter = max(la, lb)
    darker = min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float) -> WCAGLevel:
    """Classify a contrast ratio: >= 7 AAA, >= 4.5 AA, else Fail."""
    if ratio >= 7:
        return WCAGLevel.AAA
    if ratio >= 4.5:
        return WCAGLevel.AA
    return WCAGLevel.FAIL
