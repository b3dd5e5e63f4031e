"""State manager for the visualizer.

Holds the adjustable parameters and the results derived from them.
Every parameter change recomputes the pickup positions and the heat map.
"""

from dataclasses import dataclass, field
from typing import Optional

from pickup_locator import config as core_config
from pickup_locator.harmonics import validate_length
from pickup_locator.heatmap import build_heat_map, normalize_heat_map
from pickup_locator.search import (
    OptimalPositions,
    default_search_limit,
    find_optimal_positions,
)

from . import config

# Panel rows before the per-harmonic weight rows
LENGTH_ROW = 0
SEARCH_LIMIT_ROW = 1
FIRST_WEIGHT_ROW = 2


@dataclass
class VisualizerState:
    """Complete visualizer state."""

    string_length: float = core_config.DEFAULT_STRING_LENGTH
    weights: list[float] = field(default_factory=lambda: list(core_config.DEFAULT_WEIGHTS))
    search_limit: Optional[int] = None  # None = half the string length
    heat_map_resolution: int = core_config.HEAT_MAP_RESOLUTION
    palette_name: str = core_config.DEFAULT_PALETTE

    # Currently selected panel row
    selected: int = LENGTH_ROW

    # Derived results
    positions: Optional[OptimalPositions] = None
    heat_map: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.search_limit is None:
            self.search_limit = default_search_limit(self.string_length)
        self.recompute()

    @property
    def search_limit_max(self) -> int:
        """Upper end of the search limit control (half the length, in samples)."""
        return max(1, default_search_limit(self.string_length))

    @property
    def row_count(self) -> int:
        return FIRST_WEIGHT_ROW + len(self.weights)

    @property
    def palette(self) -> tuple[int, ...]:
        return core_config.PALETTES[self.palette_name]

    def recompute(self) -> None:
        """Recompute pickup positions and heat map from the parameters."""
        self.positions = find_optimal_positions(
            self.string_length, self.weights, self.search_limit
        )
        self.heat_map = build_heat_map(
            self.string_length, self.weights, self.heat_map_resolution
        )

    def normalized_heat_map(self) -> list[float]:
        return normalize_heat_map(self.heat_map)

    def set_string_length(self, value: float) -> None:
        """Set the string length, keeping the search limit in range.

        Raises:
            ValueError: If the value is not a finite positive number
        """
        value = validate_length(value)
        self.string_length = min(
            max(value, core_config.STRING_LENGTH_MIN), core_config.STRING_LENGTH_MAX
        )
        self.search_limit = min(self.search_limit, self.search_limit_max)
        self.recompute()

    def set_search_limit(self, value: int) -> None:
        self.search_limit = min(max(int(value), 1), self.search_limit_max)
        self.recompute()

    def set_weight(self, index: int, value: float) -> None:
        self.weights[index] = min(
            max(value, core_config.WEIGHT_MIN), core_config.WEIGHT_MAX
        )
        self.recompute()

    def select(self, delta: int) -> None:
        """Move the panel selection, wrapping around."""
        self.selected = (self.selected + delta) % self.row_count

    def adjust(self, direction: int) -> None:
        """Step the selected parameter up (+1) or down (-1)."""
        if self.selected == LENGTH_ROW:
            self.set_string_length(self.string_length + direction * config.LENGTH_STEP)
        elif self.selected == SEARCH_LIMIT_ROW:
            self.set_search_limit(self.search_limit + direction * config.SEARCH_LIMIT_STEP)
        else:
            index = self.selected - FIRST_WEIGHT_ROW
            self.set_weight(index, self.weights[index] + direction * config.WEIGHT_STEP)

    def cycle_palette(self) -> None:
        names = list(core_config.PALETTES)
        self.palette_name = names[(names.index(self.palette_name) + 1) % len(names)]

    def reset(self) -> None:
        """Restore default parameters (keeps the palette)."""
        self.string_length = core_config.DEFAULT_STRING_LENGTH
        self.weights = list(core_config.DEFAULT_WEIGHTS)
        self.search_limit = default_search_limit(self.string_length)
        self.recompute()

    def parameter_rows(self) -> list[tuple[str, str, float]]:
        """Panel rows as (label, value text, bar fill fraction)."""
        length_span = core_config.STRING_LENGTH_MAX - core_config.STRING_LENGTH_MIN
        rows = [
            (
                "String Length",
                f"{self.string_length:.1f} mm",
                (self.string_length - core_config.STRING_LENGTH_MIN) / length_span,
            ),
            (
                "Search Limit",
                f"{self.search_limit}",
                self.search_limit / self.search_limit_max,
            ),
        ]
        for i, weight in enumerate(self.weights):
            rows.append((
                f"Harmonic {core_config.FIRST_HARMONIC + i}",
                f"{weight:.2f}",
                weight / core_config.WEIGHT_MAX,
            ))
        return rows
