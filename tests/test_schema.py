# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""Tests for the theme schema."""

import dataclasses

import pytest

from afterglow.color.colorspace import InvalidColorFormat
from afterglow.schema import (
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


def _colors_dict(value="#112233"):
    return {slot: value for slot in COLOR_SLOTS}


@pytest.fixture
def colors():
    data = _colors_dict()
    data["background"] = "#0b1622"
    data["brightWhite"] = "#f1f5fa"
    return ThemeColors.from_dict(data)


class TestSlotTables:

    def test_counts(self):
        assert len(CORE_SLOTS) == 6
        assert len(ANSI_NORMAL_SLOTS) == 8
        assert len(ANSI_BRIGHT_SLOTS) == 8
        assert len(COLOR_SLOTS) == 22

    def test_normal_to_bright(self):
        assert NORMAL_TO_BRIGHT["red"] == "brightRed"
        assert NORMAL_TO_BRIGHT["black"] == "brightBlack"
        assert set(NORMAL_TO_BRIGHT.values()) == set(ANSI_BRIGHT_SLOTS)


class TestThemeColors:

    def test_normalizes_hex(self, colors):
        assert colors.background == "#0B1622"
        assert colors.bright_white == "#F1F5FA"

    def test_to_dict_slot_order(self, colors):
        assert list(colors.to_dict()) == list(COLOR_SLOTS)

    def test_roundtrip(self, colors):
        assert ThemeColors.from_dict(colors.to_dict()) == colors

    def test_get_by_slot(self, colors):
        assert colors.get("cursorText") == "#112233"
        with pytest.raises(KeyError):
            colors.get("cursor_text")

    def test_invalid_hex(self):
        data = _colors_dict()
        data["red"] = "#12345"
        with pytest.raises(InvalidColorFormat):
            ThemeColors.from_dict(data)

    def test_missing_slot(self):
        data = _colors_dict()
        del data["cyan"]
        with pytest.raises(KeyError):
            ThemeColors.from_dict(data)

    def test_unknown_slot(self):
        data = _colors_dict()
        data["orange"] = "#FF8800"
        with pytest.raises(KeyError):
            ThemeColors.from_dict(data)

    def test_replace_returns_copy(self, colors):
        changed = colors.replace(cursorText="#ffffff")
        assert changed.cursor_text == "#FFFFFF"
        assert colors.cursor_text == "#112233"

    def test_replace_unknown_slot(self, colors):
        with pytest.raises(KeyError):
            colors.replace(cursor_text="#FFFFFF")

    def test_frozen(self, colors):
        with pytest.raises(dataclasses.FrozenInstanceError):
            colors.red = "#000000"


class TestTheme:

    def test_to_dict(self, colors):
        theme = Theme("noir", "Noir", "Black and white", "🎩", colors, ThemeSource.BUNDLED)
        d = theme.to_dict()
        assert d["source"] == "bundled"
        assert d["colors"]["background"] == "#0B1622"
        assert "source" not in theme.to_dict(include_source=False)

    def test_default_source_is_custom(self, colors):
        assert Theme("x", "X", "", "", colors).source is ThemeSource.CUSTOM

    def test_roundtrip(self, colors):
        theme = Theme("noir", "Noir", "Black and white", "🎩", colors, ThemeSource.COMMUNITY)
        assert Theme.from_dict(theme.to_dict()) == theme

    def test_explicit_source_wins(self, colors):
        data = Theme("noir", "Noir", "", "", colors).to_dict(include_source=False)
        theme = Theme.from_dict(data, source=ThemeSource.BUNDLED)
        assert theme.source is ThemeSource.BUNDLED


class TestPaletteControls:

    def test_defaults(self):
        c = PaletteControls()
        assert (c.hue, c.warmth, c.saturation, c.contrast, c.brightness) == (180.0, 0.0, 0.5, 0.5, 0.2)

    def test_is_dark_boundary(self):
        assert PaletteControls(brightness=0.5).is_dark
        assert not PaletteControls(brightness=0.5000001).is_dark

    def test_from_dict_fills_defaults(self):
        c = PaletteControls.from_dict({"hue": 20.0})
        assert c.hue == 20.0
        assert c.brightness == 0.2

    def test_roundtrip(self):
        c = PaletteControls(hue=10.0, warmth=-0.5, saturation=0.1, contrast=0.9, brightness=0.7)
        assert PaletteControls.from_dict(c.to_dict()) == c


class TestOKLCH:

    def test_with_helpers(self):
        c = OKLCH(0.5, 0.1, 200.0)
        assert c.with_chroma(0.0) == OKLCH(0.5, 0.0, 200.0)
        assert c.with_lightness(0.7) == OKLCH(0.7, 0.1, 200.0)
