"""Bridge and neck pickup position search.

The string is sampled at a fixed resolution from the bridge up to a
search limit. The highest-scoring sample becomes the bridge pickup; the
neck pickup is the best sample left once the bridge peak's surroundings
have been excluded.
"""

import operator
from dataclasses import dataclass
from typing import Sequence

from . import config
from .harmonics import score_at, validate_length, validate_weights


@dataclass(frozen=True)
class ScoreSample:
    """Score of one sampled position on the string."""
    position: float
    score: float


@dataclass(frozen=True)
class OptimalPositions:
    """Recommended pickup placements, in mm from the bridge."""
    bridge_position: float
    neck_position: float


def default_search_limit(
    length: float,
    resolution: int = config.SEARCH_RESOLUTION,
) -> int:
    """Search limit used by the interactive tools for a given length.

    Expressed in sample units, capped at the sample array size.
    """
    length = validate_length(length)
    return min(int(length * 0.5), resolution)


def sample_scores(
    length: float,
    weights: Sequence[float],
    search_limit: int,
    first_harmonic: int = config.FIRST_HARMONIC,
    resolution: int = config.SEARCH_RESOLUTION,
) -> list[ScoreSample]:
    """Evaluate the score field at samples 0..search_limit (inclusive).

    Sample i sits at (i / resolution) * length.

    Raises:
        ValueError: If search_limit is not an integer in [0, resolution]
    """
    length = validate_length(length)
    weights = validate_weights(weights)
    if resolution < 1:
        raise ValueError(f"Resolution must be >= 1, got {resolution}")
    if isinstance(search_limit, bool):
        raise ValueError(f"Search limit must be an integer, got {search_limit!r}")
    try:
        search_limit = operator.index(search_limit)
    except TypeError:
        raise ValueError(f"Search limit must be an integer, got {search_limit!r}") from None
    if not 0 <= search_limit <= resolution:
        raise ValueError(
            f"Search limit must be between 0 and {resolution}, got {search_limit}"
        )

    samples = []
    for i in range(search_limit + 1):
        position = (i / resolution) * length
        samples.append(ScoreSample(position, score_at(position, length, weights, first_harmonic)))
    return samples


def exclusion_bounds(
    samples: Sequence[ScoreSample],
    peak_index: int,
    length: float,
) -> tuple[int, int]:
    """Find the region around a peak that belongs to that peak.

    Walks left and right from the peak independently. Each step stops the
    walk in that direction when:
    1. the score rises above the previous step's score, or
    2. the sample is at least MIN_EXCLUSION_RATIO * length from the peak
       and its score has dropped below PEAK_DROP_RATIO * peak score.
    Otherwise the bound extends to that sample.

    Args:
        samples: Scored samples in position order
        peak_index: Index of the peak sample
        length: Vibrating string length in mm

    Returns:
        (left, right) indices of the excluded region, both inclusive
    """
    peak = samples[peak_index]
    min_distance = length * config.MIN_EXCLUSION_RATIO
    drop_score = peak.score * config.PEAK_DROP_RATIO

    def walk(indices) -> int:
        bound = peak_index
        prev_score = peak.score
        for i in indices:
            sample = samples[i]
            if sample.score > prev_score:
                break
            if abs(sample.position - peak.position) >= min_distance and sample.score < drop_score:
                break
            bound = i
            prev_score = sample.score
        return bound

    left = walk(range(peak_index - 1, -1, -1))
    right = walk(range(peak_index + 1, len(samples)))
    return left, right


def find_optimal_positions(
    length: float,
    weights: Sequence[float],
    search_limit: int,
    first_harmonic: int = config.FIRST_HARMONIC,
    resolution: int = config.SEARCH_RESOLUTION,
) -> OptimalPositions:
    """Recommend bridge and neck pickup positions.

    Args:
        length: Vibrating string length in mm
        weights: Weight for each harmonic, starting at first_harmonic
        search_limit: Last sample index to evaluate (0..resolution)
        first_harmonic: Harmonic number of weights[0] (default: 2)
        resolution: Samples per string length (default: 1000)

    Returns:
        OptimalPositions with both positions in [0, length]

    Raises:
        ValueError: On invalid length, weights or search limit
    """
    samples = sample_scores(length, weights, search_limit, first_harmonic, resolution)
    length = float(length)

    # max() keeps the first maximal element, so the lowest index wins ties
    bridge_idx = max(range(len(samples)), key=lambda i: samples[i].score)
    left, right = exclusion_bounds(samples, bridge_idx, length)

    candidates = list(range(0, left)) + list(range(right + 1, len(samples)))
    if candidates:
        neck_idx = max(candidates, key=lambda i: samples[i].score)
        neck_position = samples[neck_idx].position
    else:
        neck_position = length * config.NECK_FALLBACK_RATIO

    return OptimalPositions(
        bridge_position=samples[bridge_idx].position,
        neck_position=neck_position,
    )
