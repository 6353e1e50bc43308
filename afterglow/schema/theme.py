# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""
Theme schema: colour slots, themes and palette controls.

Design principles:
- Immutable: All types are frozen dataclasses
- Validated: Every colour slot holds a canonical ``#RRGGBB`` string
- Serializable: ``to_dict`` / ``from_dict`` use the camelCase slot names
  shared with the browser builder and the exported JSON

Slot layout (22 slots):
- 6 core: background, text, bold, selection, cursor, cursorText
- 8 ANSI normal: black, red, green, yellow, blue, magenta, cyan, white
- 8 ANSI bright: brightBlack ... brightWhite

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.37 = max saturation in sRGB
- H (Hue): 0-360 degrees (≈25=red, ≈85=yellow, ≈145=green, ≈260=blue)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from enum import Enum


# =============================================================================
# Slot Tables
# =============================================================================

CORE_SLOTS = ("background", "text", "bold", "selection", "cursor", "cursorText")

ANSI_NORMAL_SLOTS = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
)

ANSI_BRIGHT_SLOTS = tuple(
    "bright" + name[0].upper() + name[1:] for name in ANSI_NORMAL_SLOTS
)

# Canonical slot order, used by every serializer
COLOR_SLOTS = CORE_SLOTS + ANSI_NORMAL_SLOTS + ANSI_BRIGHT_SLOTS

NORMAL_TO_BRIGHT = dict(zip(ANSI_NORMAL_SLOTS, ANSI_BRIGHT_SLOTS))

_CAMEL_RE = re.compile(r"[A-Z]")


def _slot_field(slot: str) -> str:
    """camelCase slot name -> snake_case attribute name."""
    return _CAMEL_RE.sub(lambda m: "_" + m.group(0).lower(), slot)


SLOT_FIELDS = {slot: _slot_field(slot) for slot in COLOR_SLOTS}


# =============================================================================
# Perceptual Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class OKLCH:
    """
    A colour in OKLCH space.

    Unlike exported hex values, an OKLCH triple is a working value: L may
    leave [0, 1] and H may leave [0, 360) during palette arithmetic. The
    trigonometry in the OKLCH -> OKLab step wraps hue on its own.

    Attributes:
        L: Lightness
        C: Chroma (>= 0 for meaningful colours)
        H: Hue in degrees
    """
    L: float
    C: float
    H: float

    def with_lightness(self, L: float) -> OKLCH:
        return OKLCH(L, self.C, self.H)

    def with_chroma(self, C: float) -> OKLCH:
        return OKLCH(self.L, C, self.H)


# =============================================================================
# Theme Colors
# =============================================================================


@dataclass(frozen=True, slots=True)
class ThemeColors:
    """
    The 22 colour slots of a terminal theme.

    Every slot is validated and normalised to upper-case ``#RRGGBB`` on
    construction. Attribute names are snake_case; dictionary forms use the
    camelCase slot names from ``COLOR_SLOTS``.
    """
    background: str
    text: str
    bold: str
    selection: str
    cursor: str
    cursor_text: str
    black: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str
    white: str
    bright_black: str
    bright_red: str
    bright_green: str
    bright_yellow: str
    bright_blue: str
    bright_magenta: str
    bright_cyan: str
    bright_white: str

    def __post_init__(self) -> None:
        """Validate and normalise every slot."""
        # Import here to avoid circular imports
        from afterglow.color.colorspace import normalize_hex

        for f in fields(self):
            object.__setattr__(self, f.name, normalize_hex(getattr(self, f.name)))

    def get(self, slot: str) -> str:
        """Hex value of a slot by its camelCase name."""
        if slot not in SLOT_FIELDS:
            raise KeyError(f"Unknown colour slot '{slot}'")
        return getattr(self, SLOT_FIELDS[slot])

    def items(self) -> list[tuple[str, str]]:
        """(slot, hex) pairs in canonical slot order."""
        return [(slot, getattr(self, SLOT_FIELDS[slot])) for slot in COLOR_SLOTS]

    def replace(self, **slots: str) -> ThemeColors:
        """Copy with some slots changed. Keys are camelCase slot names."""
        data = self.to_dict()
        for slot, value in slots.items():
            if slot not in SLOT_FIELDS:
                raise KeyError(f"Unknown colour slot '{slot}'")
            data[slot] = value
        return ThemeColors.from_dict(data)

    def to_dict(self) -> dict:
        """Serialize to a camelCase-keyed dictionary in slot order."""
        return dict(self.items())

    @classmethod
    def from_dict(cls, data: dict) -> ThemeColors:
        """Deserialize from a camelCase-keyed dictionary of all 22 slots."""
        unknown = set(data) - set(SLOT_FIELDS)
        if unknown:
            raise KeyError(f"Unknown colour slots: {sorted(unknown)}")
        missing = [slot for slot in COLOR_SLOTS if slot not in data]
        if missing:
            raise KeyError(f"Missing colour slots: {missing}")
        return cls(**{SLOT_FIELDS[slot]: data[slot] for slot in COLOR_SLOTS})


# =============================================================================
# Theme
# =============================================================================


class ThemeSource(Enum):
    """Where a theme came from. Never exported."""
    BUNDLED = "bundled"
    COMMUNITY = "community"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Theme:
    """
    A named terminal theme.

    Attributes:
        id: Stable identifier (e.g., "deep-ocean")
        name: Display name, also used for the exported file name
        subtitle: Short description
        emoji: Decorative emoji shown next to the name
        colors: The 22 colour slots
        source: Provenance tag (internal, excluded from exports)
    """
    id: str
    name: str
    subtitle: str
    emoji: str
    colors: ThemeColors
    source: ThemeSource = ThemeSource.CUSTOM

    def to_dict(self, include_source: bool = True) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_source: If False, omit the provenance tag
        """
        d = {
            "id": self.id,
            "name": self.name,
            "subtitle": self.subtitle,
            "emoji": self.emoji,
            "colors": self.colors.to_dict(),
        }
        if include_source:
            d["source"] = self.source.value
        return d

    @classmethod
    def from_dict(cls, data: dict, source: ThemeSource | None = None) -> Theme:
        """
        Deserialize from dictionary.

        An explicit ``source`` wins over one stored in ``data``; theme
        definition files usually carry none.
        """
        if source is None:
            source = ThemeSource(data.get("source", ThemeSource.CUSTOM.value))
        return cls(
            id=data["id"],
            name=data["name"],
            subtitle=data.get("subtitle", ""),
            emoji=data.get("emoji", ""),
            colors=ThemeColors.from_dict(data["colors"]),
            source=source,
        )


# =============================================================================
# Palette Controls
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaletteControls:
    """
    The five "mood" controls that drive palette generation.

    Values are not range-checked. Out-of-range input still produces a
    well-defined palette through the lerp/clamp arithmetic.

    Attributes:
        hue: Base hue in degrees [0, 360)
        warmth: Hue push toward warm (+) or cool (-) [-1, 1]
        saturation: Overall colourfulness [0, 1]
        contrast: Separation between background and foreground [0, 1]
        brightness: 0 = darkest background, 1 = lightest [0, 1].
            Values <= 0.5 select the dark formulas.
    """
    hue: float = 180.0
    warmth: float = 0.0
    saturation: float = 0.5
    contrast: float = 0.5
    brightness: float = 0.2

    @property
    def is_dark(self) -> bool:
        """True if the dark-mode formulas apply."""
        return self.brightness <= 0.5

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hue": self.hue,
            "warmth": self.warmth,
            "saturation": self.saturation,
            "contrast": self.contrast,
            "brightness": self.brightness,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PaletteControls:
        """Deserialize from dictionary. Missing keys take their defaults."""
        defaults = cls()
        return cls(
            hue=data.get("hue", defaults.hue),
            warmth=data.get("warmth", defaults.warmth),
            saturation=data.get("saturation", defaults.saturation),
            contrast=data.get("contrast", defaults.contrast),
            brightness=data.get("brightness", defaults.brightness),
        )
