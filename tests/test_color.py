"""Tests for Oklab color gradients."""

import math

import pytest
from coloraide import Color

from pickup_locator import config
from pickup_locator.color import (
    ColorStop,
    heat_to_color,
    oklab_to_srgb,
    parse_hex,
    srgb_to_oklab,
)

SPECTRUM = config.PALETTES["spectrum"]


class TestParseHex:
    """Tests for parse_hex function."""

    def test_channels(self):
        assert parse_hex(0x12AB34) == (0x12, 0xAB, 0x34)

    def test_black_and_white(self):
        assert parse_hex(0x000000) == (0, 0, 0)
        assert parse_hex(0xFFFFFF) == (255, 255, 255)


class TestOklab:
    """Tests for sRGB <-> Oklab conversion."""

    def test_black(self):
        assert srgb_to_oklab((0, 0, 0)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_white(self):
        """White has L=1 and no chroma."""
        assert srgb_to_oklab((255, 255, 255)) == pytest.approx((1.0, 0.0, 0.0), abs=1e-3)

    @pytest.mark.parametrize("name", sorted(config.PALETTES))
    def test_round_trip_palette_stops(self, name):
        """Every palette stop survives conversion within rounding."""
        for hex_color in config.PALETTES[name]:
            rgb = parse_hex(hex_color)
            assert oklab_to_srgb(srgb_to_oklab(rgb)) == rgb

    def test_out_of_gamut_is_clamped(self):
        r, g, b = oklab_to_srgb((1.2, 0.4, -0.4))
        assert all(0 <= c <= 255 for c in (r, g, b))


class TestHeatToColor:
    """Tests for heat_to_color function."""

    def test_zero_is_first_stop(self):
        assert heat_to_color(0.0, SPECTRUM) == parse_hex(SPECTRUM[0])

    def test_one_is_last_stop(self):
        assert heat_to_color(1.0, SPECTRUM) == parse_hex(SPECTRUM[-1])

    @pytest.mark.parametrize("name", sorted(config.PALETTES))
    def test_endpoints_for_every_palette(self, name):
        stops = config.PALETTES[name]
        assert heat_to_color(0.0, stops) == parse_hex(stops[0])
        assert heat_to_color(1.0, stops) == parse_hex(stops[-1])

    def test_interior_stop_hit_exactly(self):
        """With 7 evenly spaced stops, 1/6 is the second stop (blue)."""
        assert heat_to_color(1 / 6, SPECTRUM) == (0, 0, 255)

    def test_input_is_clamped(self):
        assert heat_to_color(-0.5, SPECTRUM) == heat_to_color(0.0, SPECTRUM)
        assert heat_to_color(3.0, SPECTRUM) == heat_to_color(1.0, SPECTRUM)

    def test_no_stops_is_black(self):
        assert heat_to_color(0.5, []) == (0, 0, 0)

    def test_single_stop(self):
        assert heat_to_color(0.7, [0x336699]) == (0x33, 0x66, 0x99)

    def test_tuple_stops(self):
        stops = [(255, 0, 0), (0, 0, 255)]
        assert heat_to_color(0.0, stops) == (255, 0, 0)
        assert heat_to_color(1.0, stops) == (0, 0, 255)

    def test_grey_midpoint_is_perceptual(self):
        """Black->white midpoint is Oklab L=0.5, darker than sRGB 128."""
        r, g, b = heat_to_color(0.5, config.PALETTES["mono"])
        assert r == g == b
        assert 95 <= r <= 103

    @pytest.mark.parametrize("heat", [0.1, 0.25, 0.5, 0.9])
    def test_matches_oklab_mix(self, heat):
        """Two-stop gradients agree with an Oklab mix of the endpoints."""
        expected = Color("srgb", [1.0, 128 / 255, 0.0]).mix(
            Color("srgb", [0.0, 64 / 255, 1.0]), heat, space="oklab"
        ).clip()
        r, g, b = heat_to_color(heat, [0xFF8000, (0, 64, 255)])
        assert r == pytest.approx(expected[0] * 255, abs=1)
        assert g == pytest.approx(expected[1] * 255, abs=1)
        assert b == pytest.approx(expected[2] * 255, abs=1)

    def test_continuous(self):
        """Small input steps give small channel steps."""
        previous = heat_to_color(0.0, SPECTRUM)
        for i in range(1, 10001):
            current = heat_to_color(i / 10000, SPECTRUM)
            assert max(abs(a - b) for a, b in zip(current, previous)) <= 12
            previous = current

    def test_nan_raises(self):
        with pytest.raises(ValueError):
            heat_to_color(math.nan, SPECTRUM)

    def test_bad_channel_count_raises(self):
        with pytest.raises(ValueError):
            heat_to_color(0.5, [(1, 2), (3, 4)])


class TestColorStops:
    """Tests for explicitly positioned gradient stops."""

    def test_pinned_offset_hit_exactly(self):
        stops = [
            ColorStop(0.0, 0x000000),
            ColorStop(0.8, 0xFF0000),
            ColorStop(1.0, 0xFFFFFF),
        ]
        assert heat_to_color(0.8, stops) == (255, 0, 0)

    def test_pinned_offsets_change_spacing(self):
        pinned = [ColorStop(0.0, 0x000000), ColorStop(0.8, 0xFF0000), ColorStop(1.0, 0xFFFFFF)]
        even = [0x000000, 0xFF0000, 0xFFFFFF]
        assert heat_to_color(0.5, pinned) != heat_to_color(0.5, even)

    def test_flat_before_first_offset(self):
        stops = [ColorStop(0.5, 0xFF0000), ColorStop(1.0, 0x0000FF)]
        assert heat_to_color(0.2, stops) == (255, 0, 0)

    def test_flat_after_last_offset(self):
        stops = [ColorStop(0.0, 0xFF0000), ColorStop(0.5, 0x0000FF)]
        assert heat_to_color(0.9, stops) == (0, 0, 255)

    def test_decreasing_offsets_raise(self):
        with pytest.raises(ValueError):
            heat_to_color(0.5, [ColorStop(0.6, 0x000000), ColorStop(0.3, 0xFFFFFF)])

    def test_offset_out_of_range_raises(self):
        with pytest.raises(ValueError):
            heat_to_color(0.5, [ColorStop(0.0, 0x000000), ColorStop(1.5, 0xFFFFFF)])


class TestAlpha:
    """Tests for RGBA stops."""

    def test_alpha_interpolated(self):
        stops = [(0, 0, 0, 0), (255, 255, 255, 255)]
        assert heat_to_color(0.0, stops) == (0, 0, 0, 0)
        assert heat_to_color(1.0, stops) == (255, 255, 255, 255)
        assert heat_to_color(0.5, stops)[3] == 128

    def test_mixed_stops_default_to_opaque(self):
        stops = [0x000000, (255, 255, 255, 0)]
        assert heat_to_color(0.0, stops) == (0, 0, 0, 255)
