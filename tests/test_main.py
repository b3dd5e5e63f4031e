"""Tests for the command-line entry point."""

import pytest

from pickup_locator import config
from pickup_locator.main import format_position, main, render_heat_strip


class TestRenderHeatStrip:
    """Tests for render_heat_strip function."""

    def test_cell_count(self):
        strip = render_heat_strip([0.0, 1.0, 2.0, 3.0], 8, config.PALETTES["mono"])
        assert strip.count("\x1b[48;2;") == 8
        assert strip.endswith("\x1b[0m")

    def test_hottest_cell_uses_last_stop(self):
        strip = render_heat_strip([0.0, 4.0], 2, config.PALETTES["mono"])
        assert strip.startswith("\x1b[48;2;0;0;0m ")
        assert "\x1b[48;2;255;255;255m " in strip

    def test_empty_map(self):
        assert render_heat_strip([], 10, config.PALETTES["mono"]) == ""

    def test_invalid_width_raises(self):
        with pytest.raises(ValueError):
            render_heat_strip([1.0], 0, config.PALETTES["mono"])


class TestFormatPosition:
    def test_mm_and_percent(self):
        assert format_position("Bridge pickup", 65.0, 650.0) == (
            "Bridge pickup: 65.00 mm from bridge (10.0%)"
        )


class TestMain:
    """Tests for the CLI."""

    def test_defaults(self, capsys):
        main([])
        out = capsys.readouterr().out
        assert "String length: 650.0 mm" in out
        assert "Search limit: 325 / 1000 samples" in out
        assert "Bridge pickup:" in out
        assert "Neck pickup:" in out

    def test_zero_weights_fall_back(self, capsys):
        main(["--weights", "0", "0", "0", "0", "0", "0"])
        out = capsys.readouterr().out
        assert "Bridge pickup: 0.00 mm from bridge (0.0%)" in out
        assert "Neck pickup: 195.00 mm from bridge (30.0%)" in out

    def test_heat_map_strip(self, capsys):
        main(["--heat-map", "--width", "20", "--palette", "ember"])
        out = capsys.readouterr().out
        assert out.count("\x1b[48;2;") == 20

    def test_invalid_length_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--length", "-5"])
        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_out_of_range_search_limit_exits(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--search-limit", "5000"])
        assert excinfo.value.code == 1

    def test_list_palettes(self, capsys):
        main(["--list-palettes"])
        out = capsys.readouterr().out
        assert "Available palettes:" in out
        for name in config.PALETTES:
            assert f"  {name}:" in out
        assert "spectrum: 7 stops (default)" in out
        assert "Bridge pickup:" not in out
