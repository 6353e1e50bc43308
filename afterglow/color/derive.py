# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Bright-slot derivation, pins and locks.

The builder lets users pin slots (keep them across regeneration) and lock
normal/bright pairs (bright follows normal). These helpers apply those
rules to an explicit snapshot and return a new ThemeColors; nothing here
holds state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

from afterglow.color.colorspace import hex_to_oklch, normalize_hex
from afterglow.color.gamut import gamut_mapped_hex
from afterglow.color.generator import generate_palette
from afterglow.schema import (
    ANSI_NORMAL_SLOTS,
    COLOR_SLOTS,
    NORMAL_TO_BRIGHT,
    OKLCH,
    PaletteControls,
    ThemeColors,
)

# Offsets from a normal colour to its bright partner
BRIGHT_LIGHTNESS_SHIFT = 0.15
BRIGHT_CHROMA_SHIFT = 0.02


def derive_bright(normal_hex: str) -> str:
    """Bright partner of a normal ANSI colour: lighter and a little more chromatic."""
    L, C, H = hex_to_oklch(normal_hex)
    return gamut_mapped_hex(
        OKLCH(L + BRIGHT_LIGHTNESS_SHIFT, C + BRIGHT_CHROMA_SHIFT, H)
    )


def _check_slots(slots: Iterable[str]) -> None:
    for slot in slots:
        if slot not in COLOR_SLOTS:
            raise KeyError(f"Unknown colour slot '{slot}'")


def apply_bright_locks(
    colors: ThemeColors,
    locks: Mapping[str, bool],
    pinned: Iterable[str] = (),
) -> ThemeColors:
    """
    Re-derive the bright partner of every locked normal slot.

    Args:
        colors: Current palette
        locks: Normal slot name → locked flag
        pinned: Slots the user pinned; a pinned bright slot is left alone

    Returns:
        New ThemeColors (``colors`` is not modified)
    """
    pinned = set(pinned)
    _check_slots(locks)
    _check_slots(pinned)

    updates = {}
    for normal in ANSI_NORMAL_SLOTS:
        if not locks.get(normal, False):
            continue
        bright = NORMAL_TO_BRIGHT[normal]
        if bright not in pinned:
            updates[bright] = derive_bright(colors.get(normal))
    return colors.replace(**updates) if updates else colors


def regenerate_palette(
    controls: PaletteControls,
    current: Optional[ThemeColors] = None,
    pinned: Iterable[str] = (),
    locks: Optional[Mapping[str, bool]] = None,
) -> ThemeColors:
    """
    Generate a palette, keep pinned slots from ``current``, then apply locks.

    Args:
        controls: Mood controls for the fresh palette
        current: Palette the pinned values come from (required if any
            slot is pinned)
        pinned: Slots to carry over unchanged
        locks: Normal slot name → locked flag

    Returns:
        The regenerated ThemeColors
    """
    pinned = set(pinned)
    _check_slots(pinned)
    if pinned and current is None:
        raise ValueError("Pinned slots need a current palette to copy from")

    colors = generate_palette(controls)
    if pinned:
        colors = colors.replace(**{slot: current.get(slot) for slot in pinned})
    if locks:
        colors = apply_bright_locks(colors, locks, pinned)
    return colors


def edit_color(
    colors: ThemeColors,
    slot: str,
    hex_color: str,
    locks: Optional[Mapping[str, bool]] = None,
) -> ThemeColors:
    """
    Set one slot. Editing a locked normal slot also re-derives its bright partner.

    Raises:
        KeyError: Unknown slot
        InvalidColorFormat: Malformed hex
    """
    _check_slots([slot])
    hex_color = normalize_hex(hex_color)
    updates = {slot: hex_color}
    if locks and locks.get(slot, False) and slot in NORMAL_TO_BRIGHT:
        updates[NORMAL_TO_BRIGHT[slot]] = derive_bright(hex_color)
    return colors.replace(**updates)
