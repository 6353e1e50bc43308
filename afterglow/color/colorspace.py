# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: hex → sRGB → Linear RGB → OKLab → OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- CSS Color Module Level 4 (published OKLab matrices, both directions)

Array functions take and return shape (..., 3). Scalar helpers at the end
wrap them for single colours and return plain floats.
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray


class InvalidColorFormat(ValueError):
    """Raised when a string is not a ``#RRGGBB`` hex colour."""


# =============================================================================
# Hex parsing
# =============================================================================

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """
    Parse a hex colour into 8-bit channels.

    Args:
        hex_color: Hex string like "#3355AA" or "3355aa"

    Returns:
        Tuple of (r, g, b) integers in [0, 255]

    Raises:
        InvalidColorFormat: If the string is not six hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(f"Expected hex string, got {type(hex_color).__name__}")
    m = _HEX_RE.match(hex_color)
    if not m:
        raise InvalidColorFormat(f"Invalid hex colour: {hex_color!r}")
    digits = m.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def normalize_hex(hex_color: str) -> str:
    """Canonical form: leading '#', upper-case digits."""
    r, g, b = parse_hex(hex_color)
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_srgb(hex_color: str) -> tuple[float, float, float]:
    """Hex → gamma-encoded sRGB channels in [0, 1] (byte / 255)."""
    r, g, b = parse_hex(hex_color)
    return r / 255.0, g / 255.0, b / 255.0


def srgb_to_hex(srgb: NDArray[np.float64]) -> str:
    """
    Gamma-encoded sRGB [0,1] → hex.

    Channels are scaled by 255, rounded half up, then clamped to [0, 255].
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    scaled = np.clip(np.floor(srgb * 255.0 + 0.5), 0, 255).astype(int)
    r, g, b = (int(v) for v in scaled)
    return f"#{r:02X}{g:02X}{b:02X}"


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-range input is clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS (cube-rooted) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# OKLab to LMS (cube-rooted), published inverse of _M2
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS to linear sRGB, published inverse of _M1
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    # cbrt keeps the sign for out-of-gamut input
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Results are not clipped; channels outside [0, 1] mean the colour is
    outside the sRGB gamut.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H),
        H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    # A tiny negative angle rounds up to exactly 360.0
    H = np.where(H >= 360.0, H - 360.0, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    H is in degrees and may lie outside [0, 360).
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Scalar helpers
# =============================================================================


def hex_to_linear(hex_color: str) -> tuple[float, float, float]:
    """Hex → linear sRGB components, each in [0, 1]."""
    linear = srgb_to_linear(np.array(hex_to_srgb(hex_color)))
    return float(linear[0]), float(linear[1]), float(linear[2])


def linear_to_hex(r: float, g: float, b: float) -> str:
    """
    Linear sRGB → hex.

    Applies the forward gamma curve, scales by 255, rounds and clamps.
    No gamut mapping: out-of-range channels are simply clamped.
    """
    return srgb_to_hex(linear_to_srgb(np.array([r, g, b], dtype=np.float64)))


def linear_srgb_to_oklch(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Linear sRGB → (L, C, H) with H in [0, 360)."""
    lch = oklab_to_oklch(linear_rgb_to_oklab(np.array([r, g, b], dtype=np.float64)))
    return float(lch[0]), float(lch[1]), float(lch[2])


def oklch_to_linear_srgb(L: float, C: float, H: float) -> tuple[float, float, float]:
    """(L, C, H) → linear sRGB, unclipped."""
    rgb = oklab_to_linear_rgb(oklch_to_oklab(np.array([L, C, H], dtype=np.float64)))
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


def hex_to_oklch(hex_color: str) -> tuple[float, float, float]:
    """
    Convert hex color string to OKLCH values.

    Args:
        hex_color: Hex string like "#3941C8" or "3941C8"

    Returns:
        Tuple of (L, C, H), H in degrees [0, 360)
    """
    return linear_srgb_to_oklch(*hex_to_linear(hex_color))


def oklch_to_hex(L: float, C: float, H: float) -> str:
    """
    Convert OKLCH values to hex color string without gamut mapping.

    Use ``afterglow.color.gamut.gamut_mapped_hex`` for colours that may be
    out of gamut; this function clamps channels independently, which
    shifts hue.
    """
    return linear_to_hex(*oklch_to_linear_srgb(L, C, H))
