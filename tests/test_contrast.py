# Copyright (c) 2026 Afterglow
# SPDX-License-Identifier: MIT

"""Tests for WCAG contrast metrics."""

import pytest

from afterglow.color.colorspace import InvalidColorFormat
from afterglow.color.contrast import WCAGLevel, contrast_ratio, relative_luminance, wcag_level


class TestRelativeLuminance:

    def test_white(self):
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)

    def test_black(self):
        assert relative_luminance("#000000") == 0.0

    def test_mid_gray(self):
        assert relative_luminance("#808080") == pytest.approx(0.2159, abs=1e-3)

    def test_green_dominates(self):
        assert relative_luminance("#00FF00") == pytest.approx(0.7152)

    def test_invalid_hex(self):
        with pytest.raises(InvalidColorFormat):
            relative_luminance("#XYZXYZ")


class TestContrastRatio:

    def test_black_white(self):
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0, abs=0.01)

    def test_identical_colors(self):
        assert contrast_ratio("#3355AA", "#3355AA") == pytest.approx(1.0)

    @pytest.mark.parametrize("a, b", [
        ("#000000", "#FFFFFF"),
        ("#3355AA", "#F0F0F0"),
        ("#0B1622", "#D4DDE8"),
        ("#FF0000", "#00FF00"),
    ])
    def test_symmetric(self, a, b):
        assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_case_insensitive(self):
        assert contrast_ratio("#3355aa", "#ffffff") == contrast_ratio("#3355AA", "#FFFFFF")


class TestWcagLevel:

    @pytest.mark.parametrize("ratio, level", [
        (21.0, "AAA"),
        (7.0, "AAA"),
        (6.99, "AA"),
        (4.5, "AA"),
        (4.49, "Fail"),
        (1.0, "Fail"),
    ])
    def test_thresholds(self, ratio, level):
        assert wcag_level(ratio) == level

    def test_returns_enum(self):
        assert wcag_level(21.0) is WCAGLevel.AAA
        assert wcag_level(1.0) is WCAGLevel.FAIL
