# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Gamut clamping by chroma bisection.

An OKLCH colour outside sRGB keeps its lightness and hue; only chroma is
reduced, to the largest value the search finds that still lands inside
the gamut. The search runs a fixed number of steps, so it always ends.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from afterglow.color.colorspace import linear_to_hex, oklch_to_linear_srgb
from afterglow.schema import OKLCH

# Tolerance on linear channels for float noise
GAMUT_EPSILON = 0.001

# 32 halvings of a 0.4 chroma range resolve to ~1e-10
BISECTION_STEPS = 32


def is_in_gamut(rgb: NDArray[np.float64] | tuple[float, float, float]) -> bool:
    """True if every linear sRGB channel lies in [-ε, 1+ε]."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return bool(np.all((rgb >= -GAMUT_EPSILON) & (rgb <= 1.0 + GAMUT_EPSILON)))


def clamp_to_gamut(color: OKLCH, steps: int = BISECTION_STEPS) -> OKLCH:
    """
    Reduce chroma until the colour fits in sRGB.

    Args:
        color: OKLCH colour, possibly out of gamut
        steps: Bisection iterations

    Returns:
        The input unchanged if already in gamut, otherwise the same L and H
        with chroma set to the lower bound of the final search interval
        (0.0 if no positive chroma fits).
    """
    if is_in_gamut(oklch_to_linear_srgb(color.L, color.C, color.H)):
        return color

    lo = 0.0
    hi = color.C
    for _ in range(steps):
        mid = (lo + hi) / 2.0
        if is_in_gamut(oklch_to_linear_srgb(color.L, mid, color.H)):
            lo = mid
        else:
            hi = mid

    return color.with_chroma(lo)


def gamut_mapped_hex(color: OKLCH) -> str:
    """Clamp to gamut, then convert to hex."""
    clamped = clamp_to_gamut(color)
    return linear_to_hex(*oklch_to_linear_srgb(clamped.L, clamped.C, clamped.H))
