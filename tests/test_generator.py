# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""Tests for palette generation from mood controls."""

import re

import pytest

from afterglow.color.colorspace import hex_to_oklch
from afterglow.color.generator import SEMANTIC_HUES, clamp01, generate_palette, lerp
from afterglow.schema import (
    ANSI_BRIGHT_SLOTS,
    ANSI_NORMAL_SLOTS,
    COLOR_SLOTS,
    NORMAL_TO_BRIGHT,
    PaletteControls,
    ThemeColors,
)

_HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


def _lightness(hex_color):
    return hex_to_oklch(hex_color)[0]


@pytest.fixture
def dark_palette():
    return generate_palette(PaletteControls())


@pytest.fixture
def light_palette():
    return generate_palette(PaletteControls(brightness=0.9))


class TestHelpers:

    def test_lerp(self):
        assert lerp(0.0, 10.0, 0.25) == 2.5
        assert lerp(0.25, 0.12, 0.0) == 0.25

    def test_clamp01(self):
        assert clamp01(-0.2) == 0.0
        assert clamp01(1.3) == 1.0
        assert clamp01(0.4) == 0.4

    def test_semantic_hues(self):
        assert SEMANTIC_HUES == {
            "red": 25.0, "green": 145.0, "yellow": 85.0,
            "blue": 260.0, "magenta": 320.0, "cyan": 185.0,
        }


class TestSlotCompleteness:

    def test_returns_theme_colors(self, dark_palette):
        assert isinstance(dark_palette, ThemeColors)

    def test_exactly_22_slots(self, dark_palette):
        data = dark_palette.to_dict()
        assert list(data) == list(COLOR_SLOTS)
        assert len(data) == 22

    def test_every_slot_is_hex(self, dark_palette, light_palette):
        for palette in (dark_palette, light_palette):
            for slot, value in palette.items():
                assert _HEX_RE.match(value), (slot, value)

    @pytest.mark.parametrize("brightness", [0.0, 0.3, 0.45, 0.5, 0.55, 0.6, 0.8, 1.0])
    @pytest.mark.parametrize("saturation", [0.0, 1.0])
    @pytest.mark.parametrize("contrast", [0.0, 1.0])
    def test_control_grid_produces_valid_palettes(self, brightness, saturation, contrast):
        controls = PaletteControls(
            hue=300.0, warmth=0.5, saturation=saturation,
            contrast=contrast, brightness=brightness,
        )
        palette = generate_palette(controls)
        assert all(_HEX_RE.match(v) for _, v in palette.items())

    def test_out_of_range_controls_do_not_crash(self):
        controls = PaletteControls(hue=720.0, warmth=-3.0, saturation=2.0, contrast=-1.0, brightness=1.5)
        palette = generate_palette(controls)
        assert all(_HEX_RE.match(v) for _, v in palette.items())


class TestDeterminism:

    def test_same_controls_same_palette(self):
        controls = PaletteControls(hue=42.0, warmth=-0.3, saturation=0.7, contrast=0.9, brightness=0.35)
        assert generate_palette(controls) == generate_palette(controls)
        assert generate_palette(controls).to_dict() == generate_palette(controls).to_dict()

    def test_cursor_matches_text(self, dark_palette):
        assert dark_palette.cursor == dark_palette.text
        assert dark_palette.cursor_text == dark_palette.background


class TestCoreColors:

    def test_dark_background_lightness(self):
        palette = generate_palette(PaletteControls(saturation=0.0, contrast=0.5, brightness=0.2))
        # lerp(0.10, 0.95, 0.2) + 0.5 * 0.06
        assert _lightness(palette.background) == pytest.approx(0.30, abs=0.01)

    def test_light_background_lightness(self):
        palette = generate_palette(PaletteControls(saturation=0.0, contrast=0.5, brightness=0.9))
        # lerp(0.10, 0.95, 0.9) - 0.5 * 0.06
        assert _lightness(palette.background) == pytest.approx(0.835, abs=0.01)

    def test_dark_text_lighter_than_background(self, dark_palette):
        assert _lightness(dark_palette.text) > _lightness(dark_palette.background)

    def test_light_text_darker_than_background(self, light_palette):
        assert _lightness(light_palette.text) < _lightness(light_palette.background)

    def test_bold_offset_from_text(self, dark_palette, light_palette):
        assert _lightness(dark_palette.bold) > _lightness(dark_palette.text)
        assert _lightness(light_palette.bold) < _lightness(light_palette.text)

    def test_selection_offset_from_background(self, dark_palette, light_palette):
        assert _lightness(dark_palette.selection) > _lightness(dark_palette.background)
        assert _lightness(light_palette.selection) < _lightness(light_palette.background)


class TestModeBoundary:
    """brightness <= 0.5 is dark; the palette jumps just above 0.5."""

    def test_half_is_dark(self):
        palette = generate_palette(PaletteControls(contrast=0.5, brightness=0.5))
        assert _lightness(palette.text) == pytest.approx(0.885, abs=0.01)

    def test_just_above_half_is_light(self):
        palette = generate_palette(PaletteControls(contrast=0.5, brightness=0.5000001))
        assert _lightness(palette.text) == pytest.approx(0.185, abs=0.01)

    def test_discontinuity(self):
        at = generate_palette(PaletteControls(brightness=0.5))
        above = generate_palette(PaletteControls(brightness=0.5000001))
        assert _lightness(at.text) - _lightness(above.text) > 0.5


class TestAnsiColors:

    @pytest.mark.parametrize("brightness, expected", [
        (0.1, 0.30),    # dark formula: lerp(0.25, 0.35, 0.5)
        (0.3, 0.36),    # first band start: 0.32 + 0.5 * 0.08
        (0.4, 0.4675),  # first band middle
        (0.5, 0.575),   # first band end: 0.55 + 0.5 * 0.05
        (0.55, 0.35),   # second band middle
        (0.6, 0.31),    # second band end: 0.35 - 0.5 * 0.08
        (0.8, 0.30),    # light formula: lerp(0.35, 0.25, 0.5)
    ])
    def test_black_lightness_curve(self, brightness, expected):
        palette = generate_palette(PaletteControls(contrast=0.5, brightness=brightness))
        assert _lightness(palette.black) == pytest.approx(expected, abs=0.01)

    def test_white_lightness(self, dark_palette, light_palette):
        assert _lightness(dark_palette.white) == pytest.approx(0.75, abs=0.01)
        assert _lightness(light_palette.white) == pytest.approx(0.75, abs=0.01)

    def test_dark_normals_lightness(self, dark_palette):
        # lerp(0.55, 0.72, 0.25)
        assert _lightness(dark_palette.blue) == pytest.approx(0.5925, abs=0.01)

    def test_light_normals_lightness(self, light_palette):
        # lerp(0.48, 0.32, 0.25)
        assert _lightness(light_palette.blue) == pytest.approx(0.44, abs=0.01)

    def test_warmth_shifts_semantic_hue(self):
        palette = generate_palette(PaletteControls(warmth=1.0))
        _, _, H = hex_to_oklch(palette.red)
        assert H == pytest.approx(40.0, abs=2.0)

    def test_light_mode_chroma_boost(self):
        mild = generate_palette(PaletteControls(saturation=0.0, brightness=0.55))
        strong = generate_palette(PaletteControls(saturation=0.0, brightness=1.0))
        mild_c = hex_to_oklch(mild.blue)[1]
        strong_c = hex_to_oklch(strong.blue)[1]
        assert strong_c > mild_c + 0.05

    def test_dark_brights_are_lighter(self, dark_palette):
        for normal in ANSI_NORMAL_SLOTS:
            bright = NORMAL_TO_BRIGHT[normal]
            assert _lightness(dark_palette.get(bright)) > _lightness(dark_palette.get(normal))

    def test_light_brights_are_darker(self, light_palette):
        for normal in ANSI_NORMAL_SLOTS:
            bright = NORMAL_TO_BRIGHT[normal]
            assert _lightness(light_palette.get(bright)) < _lightness(light_palette.get(normal))

    def test_bright_slots_present(self, dark_palette):
        assert [slot for slot, _ in dark_palette.items()][-8:] == list(ANSI_BRIGHT_SLOTS)
