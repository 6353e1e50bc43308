# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Schema definitions for terminal themes.

All types in this module are immutable (frozen dataclasses).
Serializers and palette helpers return new values instead of editing
the ones they are given.
"""

from afterglow.schema.theme import (
    ANSI_BRIGHT_SLOTS,
    ANSI_NORMAL_SLOTS,
    COLOR_SLOTS,
    CORE_SLOTS,
    NORMAL_TO_BRIGHT,
    OKLCH,
    PaletteControls,
    Theme,
    ThemeColors,
    ThemeSource,
)

__all__ = [
    # Slot tables
    "CORE_SLOTS",
    "ANSI_NORMAL_SLOTS",
    "ANSI_BRIGHT_SLOTS",
    "COLOR_SLOTS",
    "NORMAL_TO_BRIGHT",
    # Working colour value
    "OKLCH",
    # Theme types
    "ThemeColors",
    "ThemeSource",
    "Theme",
    # Generator input
    "PaletteControls",
]
