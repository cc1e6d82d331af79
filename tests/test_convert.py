"""Tests for shade_finder.core.convert — HSL to RGB and rounding."""

from shade_finder.core.convert import hsl_to_rgb, hue_to_channel, round_half_up
from shade_finder.core.types import Colour


class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(127.5) == 128
        assert round_half_up(0.5) == 1

    def test_not_bankers_rounding(self):
        # round() would give 126 here
        assert round_half_up(126.5) == 127

    def test_below_half(self):
        assert round_half_up(0.49) == 0

    def test_negative_half_away_from_zero(self):
        assert round_half_up(-0.5) == -1
        assert round_half_up(-1.4) == -1


class TestHslToRgb:
    def test_grey_mid(self):
        assert hsl_to_rgb(0, 0, 50) == Colour(128, 128, 128)

    def test_red(self):
        assert hsl_to_rgb(0, 100, 50) == Colour(255, 0, 0)

    def test_green(self):
        assert hsl_to_rgb(120, 100, 50) == Colour(0, 255, 0)

    def test_blue(self):
        assert hsl_to_rgb(240, 100, 50) == Colour(0, 0, 255)

    def test_yellow(self):
        assert hsl_to_rgb(60, 100, 50) == Colour(255, 255, 0)

    def test_white_and_black(self):
        assert hsl_to_rgb(0, 0, 100) == Colour(255, 255, 255)
        assert hsl_to_rgb(0, 0, 0) == Colour(0, 0, 0)
        assert hsl_to_rgb(200, 100, 100) == Colour(255, 255, 255)

    def test_achromatic_ignores_hue(self):
        assert hsl_to_rgb(0, 0, 25) == hsl_to_rgb(300, 0, 25)

    def test_blue500_neighbourhood(self):
        # tailwind blue-500 is #3b82f6 = (59, 130, 246)
        assert hsl_to_rgb(217, 91, 60) == Colour(60, 131, 246)

    def test_out_of_range_input_is_clamped(self):
        # s > 100 pushes fractions outside [0, 1]; result is still a valid Colour
        assert hsl_to_rgb(0, 300, 50) == Colour(255, 0, 0)
        assert hsl_to_rgb(0, 0, 150) == Colour(255, 255, 255)

    def test_extreme_input_does_not_overflow(self):
        # intermediates overflow to inf and nan here
        assert hsl_to_rgb(0, 1e308, 1e308) == Colour(0, 0, 255)
        assert hsl_to_rgb(0, 0, 1e308) == Colour(255, 255, 255)
        # no hue wrap: a huge negative hue lands on p for every channel
        assert hsl_to_rgb(-1e308, 100, 50) == Colour(0, 0, 0)

    def test_float_input(self):
        assert hsl_to_rgb(0.0, 100.0, 50.0) == Colour(255, 0, 0)


class TestHueToChannel:
    def test_segments(self):
        p, q = 0.2, 0.8
        assert hue_to_channel(p, q, 0.0) == p
        assert hue_to_channel(p, q, 0.25) == q
        assert hue_to_channel(p, q, 0.9) == p

    def test_wraps_once(self):
        p, q = 0.0, 1.0
        assert hue_to_channel(p, q, -0.75) == hue_to_channel(p, q, 0.25)
        assert hue_to_channel(p, q, 1.25) == hue_to_channel(p, q, 0.25)
