"""Tests for heat map sampling."""

import pytest

from pickup_locator.harmonics import score_at
from pickup_locator.heatmap import build_heat_map, normalize_heat_map

LENGTH = 650.0
DEFAULT_WEIGHTS = [0.15, 1.5, 1.5, 1.5, 0.75, 0.75]


class TestBuildHeatMap:
    """Tests for build_heat_map function."""

    @pytest.mark.parametrize("resolution", [1, 7, 1000])
    def test_length_matches_resolution(self, resolution):
        assert len(build_heat_map(LENGTH, DEFAULT_WEIGHTS, resolution)) == resolution

    def test_default_resolution(self):
        assert len(build_heat_map(LENGTH, DEFAULT_WEIGHTS)) == 1000

    def test_endpoints_match_score_field(self):
        resolution = 1000
        heat_map = build_heat_map(LENGTH, DEFAULT_WEIGHTS, resolution)

        assert heat_map[0] == score_at(0.0, LENGTH, DEFAULT_WEIGHTS)
        assert heat_map[-1] == score_at(
            ((resolution - 1) / resolution) * LENGTH, LENGTH, DEFAULT_WEIGHTS
        )

    def test_spans_full_string(self):
        """Second harmonic alone: quarter-string samples hit node/anti-node/node/anti-node."""
        heat_map = build_heat_map(LENGTH, [1.0, 0, 0, 0, 0, 0], 4)
        assert heat_map == pytest.approx([0.0, 1.0, 0.0, 1.0], abs=1e-12)

    def test_zero_weights_give_cold_map(self):
        assert build_heat_map(LENGTH, [0.0] * 6, 10) == [0.0] * 10

    def test_invalid_resolution_raises(self):
        with pytest.raises(ValueError):
            build_heat_map(LENGTH, DEFAULT_WEIGHTS, 0)

    def test_invalid_length_raises(self):
        with pytest.raises(ValueError):
            build_heat_map(-1.0, DEFAULT_WEIGHTS, 10)


class TestNormalizeHeatMap:
    """Tests for normalize_heat_map function."""

    def test_scales_by_maximum(self):
        assert normalize_heat_map([0.0, 2.0, 4.0]) == [0.0, 0.5, 1.0]

    def test_all_zero(self):
        assert normalize_heat_map([0.0, 0.0]) == [0.0, 0.0]

    def test_empty(self):
        assert normalize_heat_map([]) == []

    def test_real_map_peaks_at_one(self):
        normalized = normalize_heat_map(build_heat_map(LENGTH, DEFAULT_WEIGHTS, 200))
        assert max(normalized) == 1.0
        assert min(normalized) >= 0.0
