# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Afterglow -- Terminal colour theme builder core.

Generates 22-slot terminal palettes from five mood controls, reports
WCAG contrast, and exports themes for Terminal.app, JSON and CSS.

Quick start::

    from afterglow import PaletteControls, Theme, generate_palette, export_theme

    colors = generate_palette(PaletteControls(hue=220, contrast=0.7))
    theme = Theme("my-theme", "My Theme", "", "", colors)
    artifact = export_theme(theme, "terminal")
    open(artifact.filename, "wb").write(artifact.content)
"""

from __future__ import annotations

__version__ = "1.0.0"

from afterglow.color import contrast_ratio, generate_palette, wcag_level
from afterglow.export import export_theme
from afterglow.schema import (
    PaletteControls,
    Theme,
    ThemeColors,
    ThemeSource,
)

__all__ = [
    # Core API
    "generate_palette",
    "contrast_ratio",
    "wcag_level",
    "export_theme",
    # Types (commonly needed)
    "PaletteControls",
    "Theme",
    "ThemeColors",
    "ThemeSource",
    # Version
    "__version__",
]
