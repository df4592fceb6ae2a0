"""Tests for HSV color distance."""

from __future__ import annotations

import pytest

from aggregator.utils.color import (
    DISTANCE_SCALE,
    color_diff_hsv,
    color_distance,
    hsv_diff,
    hue_distance,
    rgb_to_hex,
    rgb_to_hsv,
)
from tests.conftest import BLACK, DARK_RED, GREEN, RED


class TestHueDistance:
    def test_wraps_around(self):
        assert hue_distance(0.95, 0.05) == pytest.approx(0.1)
        assert hue_distance(0.05, 0.95) == pytest.approx(0.1)

    def test_plain_difference(self):
        assert hue_distance(0.2, 0.3) == pytest.approx(0.1)

    def test_never_exceeds_half(self):
        assert hue_distance(0.0, 0.5) == pytest.approx(0.5)
        assert hue_distance(0.1, 0.7) == pytest.approx(0.4)


class TestColorDiff:
    def test_identical_is_zero(self):
        assert color_diff_hsv(RED, RED) == 0.0
        assert color_distance(GREEN, GREEN) == 0

    def test_red_against_black(self):
        # value 1 -> 0, saturation 1 -> 0
        assert color_diff_hsv(RED, BLACK) == pytest.approx(2.0)
        assert color_distance(RED, BLACK) == 2 * DISTANCE_SCALE

    def test_red_against_green(self):
        assert color_diff_hsv(RED, GREEN) == pytest.approx(0.5)

    def test_value_only_change(self):
        assert color_diff_hsv(RED, DARK_RED) == pytest.approx(1.25 * 55 / 255)

    def test_symmetric(self):
        assert color_diff_hsv(RED, DARK_RED) == color_diff_hsv(DARK_RED, RED)

    def test_hue_wraparound_in_weighted_sum(self):
        a = (0.95, 1.0, 1.0)
        b = (0.05, 1.0, 1.0)
        assert hsv_diff(a, b) == pytest.approx(1.5 * 0.1)

    def test_distance_truncates(self):
        diff = color_diff_hsv(RED, DARK_RED)
        assert color_distance(RED, DARK_RED) == int(diff * DISTANCE_SCALE)


class TestConversions:
    def test_rgb_to_hsv_range(self):
        h, s, v = rgb_to_hsv(0, 0, 255)
        assert h == pytest.approx(2.0 / 3.0)
        assert s == 1.0
        assert v == 1.0

    def test_rgb_to_hex(self):
        assert rgb_to_hex(DARK_RED) == "#c80000"
        assert rgb_to_hex((255, 255, 255)) == "#ffffff"
