# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Palette generation from mood controls.

Maps a PaletteControls vector (hue, warmth, saturation, contrast,
brightness) to a full 22-slot ThemeColors. All colours are designed in
OKLCH and gamut mapped before conversion to hex.

Two formula sets exist. ``brightness <= 0.5`` selects the dark set,
anything above selects the light set; the palette jumps at that boundary.
"""

from __future__ import annotations

from afterglow.color.gamut import gamut_mapped_hex
from afterglow.schema import (
    ANSI_NORMAL_SLOTS,
    NORMAL_TO_BRIGHT,
    OKLCH,
    PaletteControls,
    ThemeColors,
)

# Fixed hue anchors for the chromatic ANSI slots, in degrees
SEMANTIC_HUES = {
    "red": 25.0,
    "green": 145.0,
    "yellow": 85.0,
    "blue": 260.0,
    "magenta": 320.0,
    "cyan": 185.0,
}


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def _black_lightness(brightness: float, contrast: float, is_dark: bool) -> float:
    """
    ANSI black lightness.

    Between brightness 0.3 and 0.6 the background sits in a mid-grey band
    where the plain dark/light formulas put black too close to it, so that
    band gets its own two ramps. The breakpoints are part of the palette's
    look; keep them exact.
    """
    if 0.3 <= brightness <= 0.5:
        t = (brightness - 0.3) / 0.2
        return lerp(0.32 + contrast * 0.08, 0.55 + contrast * 0.05, t)
    if 0.5 < brightness <= 0.6:
        t = (brightness - 0.5) / 0.1
        return lerp(0.42 - contrast * 0.06, 0.35 - contrast * 0.08, t)
    if is_dark:
        return lerp(0.25, 0.35, contrast)
    return lerp(0.35, 0.25, contrast)


def generate_palette(controls: PaletteControls) -> ThemeColors:
    """
    Generate a complete palette from mood controls.

    Pure function: the same controls always give the same colours.

    Args:
        controls: The five mood controls

    Returns:
        ThemeColors with all 22 slots filled
    """
    hue = controls.hue
    warmth = controls.warmth
    sat = controls.saturation
    contrast = controls.contrast
    brightness = controls.brightness

    effective_hue = hue + warmth * 30
    is_dark = brightness <= 0.5

    # Core colors
    bg_shift = contrast * 0.06 * (1.0 if is_dark else -1.0)
    bg = OKLCH(
        clamp01(lerp(0.10, 0.95, brightness) + bg_shift),
        0.01 + sat * 0.03,
        effective_hue,
    )

    if is_dark:
        text_l = lerp(0.82, 0.95, contrast)
    else:
        text_l = lerp(0.25, 0.12, contrast)
    text = OKLCH(text_l, 0.005 + sat * 0.01, effective_hue)

    bold = OKLCH(
        clamp01(text.L + (0.05 if is_dark else -0.05)),
        text.C + 0.005,
        effective_hue,
    )
    selection = OKLCH(
        clamp01(bg.L + (0.08 if is_dark else -0.06)),
        bg.C + 0.02,
        effective_hue,
    )

    # ANSI normals
    if is_dark:
        ansi_l = lerp(0.55, 0.72, contrast * 0.5)
        chroma_boost = 1.0
    else:
        ansi_l = lerp(0.48, 0.32, contrast * 0.5)
        chroma_boost = lerp(1.0, 2.2, (brightness - 0.5) * 2)
    ansi_c = lerp(0.08, 0.22, sat) * chroma_boost

    normals: dict[str, OKLCH] = {}
    for name in ANSI_NORMAL_SLOTS:
        if name == "black":
            normals[name] = OKLCH(
                _black_lightness(brightness, contrast, is_dark), 0.01, effective_hue
            )
        elif name == "white":
            white_l = lerp(0.70, 0.80, contrast) if is_dark else lerp(0.80, 0.70, contrast)
            normals[name] = OKLCH(white_l, 0.01, effective_hue)
        else:
            normals[name] = OKLCH(ansi_l, ansi_c, SEMANTIC_HUES[name] + warmth * 15)

    # ANSI brights, shifted from the normals
    if is_dark:
        bright_shift = lerp(0.08, 0.15, contrast)
    else:
        bright_shift = lerp(-0.08, -0.13, contrast)
    brights = {
        NORMAL_TO_BRIGHT[name]: OKLCH(clamp01(c.L + bright_shift), c.C + 0.02, c.H)
        for name, c in normals.items()
    }

    background_hex = gamut_mapped_hex(bg)
    text_hex = gamut_mapped_hex(text)

    slots = {
        "background": background_hex,
        "text": text_hex,
        "bold": gamut_mapped_hex(bold),
        "selection": gamut_mapped_hex(selection),
        "cursor": text_hex,
        "cursorText": background_hex,
    }
    slots.update((name, gamut_mapped_hex(c)) for name, c in normals.items())
    slots.update((name, gamut_mapped_hex(c)) for name, c in brights.items())

    return ThemeColors.from_dict(slots)
