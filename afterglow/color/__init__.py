# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Color core for Afterglow.

Colour-space conversion, gamut clamping, palette generation and contrast
metrics. All operations are pure and deterministic.
"""

from afterglow.color.colorspace import InvalidColorFormat, hex_to_oklch, oklch_to_hex
from afterglow.color.contrast import WCAGLevel, contrast_ratio, relative_luminance, wcag_level
from afterglow.color.derive import apply_bright_locks, derive_bright, edit_color, regenerate_palette
from afterglow.color.gamut import clamp_to_gamut, gamut_mapped_hex
from afterglow.color.generator import generate_palette

__all__ = [
    "InvalidColorFormat",
    "hex_to_oklch",
    "oklch_to_hex",
    "clamp_to_gamut",
    "gamut_mapped_hex",
    "generate_palette",
    "relative_luminance",
    "contrast_ratio",
    "wcag_level",
    "WCAGLevel",
    "derive_bright",
    "apply_bright_locks",
    "regenerate_palette",
    "edit_color",
]
