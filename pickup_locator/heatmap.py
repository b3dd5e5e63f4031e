"""Full-length score samples for the heat map display."""

from typing import Sequence

from . import config
from .harmonics import score_at, validate_length, validate_weights


def build_heat_map(
    length: float,
    weights: Sequence[float],
    resolution: int = config.HEAT_MAP_RESOLUTION,
    first_harmonic: int = config.FIRST_HARMONIC,
) -> list[float]:
    """Sample the score field across the whole string.

    Independent of the position search limit: sample i sits at
    (i / resolution) * length for i in 0..resolution-1.

    Args:
        length: Vibrating string length in mm
        weights: Weight for each harmonic, starting at first_harmonic
        resolution: Number of samples (>= 1)
        first_harmonic: Harmonic number of weights[0] (default: 2)

    Returns:
        List of `resolution` scores, bridge end first
    """
    if resolution < 1:
        raise ValueError(f"Heat map resolution must be >= 1, got {resolution}")
    length = validate_length(length)
    weights = validate_weights(weights)

    return [
        score_at((i / resolution) * length, length, weights, first_harmonic)
        for i in range(resolution)
    ]


def normalize_heat_map(values: Sequence[float]) -> list[float]:
    """Scale heat values into [0, 1] by the largest value.

    An empty or all-zero map normalizes to zeros.
    """
    max_heat = max(values, default=0.0)
    max_heat = max(max_heat, 0.0)
    if max_heat <= 0.0:
        return [0.0 for _ in values]
    return [value / max_heat for value in values]
