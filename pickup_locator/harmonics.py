"""Anti-node model and score field for a vibrating string.

This module implements the mathematical core of the Pickup Locator:
where each harmonic's anti-nodes sit along the string, and how close a
given position is to them, weighted per harmonic.
"""

import math
from typing import Sequence

from . import config


def validate_length(length: float) -> float:
    """Reject string lengths that would produce NaN/Inf downstream.

    Args:
        length: Vibrating string length in mm

    Returns:
        The length as a float

    Raises:
        ValueError: If the length is not a finite positive number
    """
    length = float(length)
    if not math.isfinite(length) or length <= 0:
        raise ValueError(f"String length must be positive and finite, got {length}")
    return length


def validate_weights(weights: Sequence[float]) -> list[float]:
    """Reject empty, non-finite or negative harmonic weights.

    Args:
        weights: Per-harmonic weights, lowest harmonic first

    Returns:
        The weights as a list of floats

    Raises:
        ValueError: If any weight is NaN, infinite or negative
    """
    values = [float(w) for w in weights]
    if not values:
        raise ValueError("At least one harmonic weight is required")
    for i, w in enumerate(values):
        if not math.isfinite(w) or w < 0:
            raise ValueError(f"Weight {i} must be finite and non-negative, got {w}")
    return values


def anti_nodes(length: float, harmonic: int) -> list[float]:
    """Positions of maximum amplitude for one harmonic mode.

    Harmonic n divides the string into n segments; each anti-node sits in
    the middle of a segment.

    Args:
        length: Vibrating string length in mm
        harmonic: Harmonic number (n >= 1)

    Returns:
        n positions in mm, measured from the bridge

    Examples:
        >>> anti_nodes(600.0, 2)
        [150.0, 450.0]
    """
    if harmonic < 1:
        raise ValueError(f"Harmonic number must be >= 1, got {harmonic}")
    length = validate_length(length)

    segment = length / harmonic
    return [(i + 0.5) * segment for i in range(harmonic)]


def falloff(distance: float, wavelength: float) -> float:
    """Cosine falloff from 1.0 on an anti-node to 0.0 one wavelength away.

    Distances beyond one wavelength are clamped so the result never goes
    negative.
    """
    normalized = min(distance / wavelength, 1.0)
    return math.cos(normalized * math.pi / 2.0)


def score_at(
    position: float,
    length: float,
    weights: Sequence[float],
    first_harmonic: int = config.FIRST_HARMONIC,
) -> float:
    """Weighted anti-node proximity score at a position on the string.

    For every harmonic, the distance to its nearest anti-node is passed
    through falloff() using a wavelength of length / (2n) and scaled by
    that harmonic's weight. The score is the sum over all harmonics.

    Args:
        position: Distance from the bridge in mm
        length: Vibrating string length in mm
        weights: Weight for each harmonic, starting at first_harmonic
        first_harmonic: Harmonic number of weights[0] (default: 2)

    Returns:
        Score between 0 and sum(weights)
    """
    if math.isnan(position):
        raise ValueError("Position must be a number, got NaN")
    if first_harmonic < 1:
        raise ValueError(f"First harmonic must be >= 1, got {first_harmonic}")
    length = validate_length(length)
    weights = validate_weights(weights)

    total = 0.0
    for offset, weight in enumerate(weights):
        harmonic = first_harmonic + offset
        min_dist = min(abs(position - node) for node in anti_nodes(length, harmonic))
        wavelength = length / (harmonic * 2.0)
        total += weight * falloff(min_dist, wavelength)
    return total
