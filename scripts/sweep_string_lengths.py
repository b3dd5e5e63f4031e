"""Print recommended pickup positions over a range of scale lengths.

Uses the default harmonic weights and the default (half-length) search
limit for each length, like the visualizer does.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pickup_locator import config
from pickup_locator.search import default_search_limit, find_optimal_positions


def sweep_string_lengths(start=config.STRING_LENGTH_MIN, stop=config.STRING_LENGTH_MAX, step=25.0):
    print("Pickup positions for default weights "
          f"{', '.join(f'{w:.2f}' for w in config.DEFAULT_WEIGHTS)}")
    print(f"{'Length':>8} | {'Bridge (mm)':>11} {'%':>6} | {'Neck (mm)':>9} {'%':>6}")
    print("-" * 50)

    rows = {}
    length = start
    while length <= stop:
        positions = find_optimal_positions(
            length, config.DEFAULT_WEIGHTS, default_search_limit(length)
        )
        bridge = positions.bridge_position
        neck = positions.neck_position
        print(f"{length:8.1f} | {bridge:11.2f} {bridge / length * 100:5.1f}% "
              f"| {neck:9.2f} {neck / length * 100:5.1f}%")
        rows[length] = positions
        length += step

    return rows


if __name__ == "__main__":
    sweep_string_lengths()
