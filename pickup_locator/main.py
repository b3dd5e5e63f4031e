"""Command-line entry point for the Pickup Locator.

Prints the recommended bridge and neck pickup positions for a string
length and a set of harmonic weights, optionally with a colored heat map
strip rendered in the terminal.
"""

import argparse
import sys
from typing import Optional, Sequence

from . import config
from .color import heat_to_color
from .heatmap import build_heat_map, normalize_heat_map
from .midi_handler import MidiHandler
from .search import default_search_limit, find_optimal_positions


def render_heat_strip(
    heat_map: Sequence[float],
    width: int,
    stops: Sequence[int],
) -> str:
    """Render a heat map as a row of 24-bit ANSI background-colored cells.

    Args:
        heat_map: Raw heat values, bridge end first
        width: Number of terminal cells
        stops: Palette color stops

    Returns:
        One line of escape-coded text (no trailing newline)
    """
    if width < 1:
        raise ValueError(f"Strip width must be >= 1, got {width}")
    normalized = normalize_heat_map(heat_map)
    if not normalized:
        return ""

    cells = []
    for i in range(width):
        value = normalized[i * len(normalized) // width]
        r, g, b = heat_to_color(value, stops)[:3]
        cells.append(f"\x1b[48;2;{r};{g};{b}m ")
    return "".join(cells) + "\x1b[0m"


def format_position(label: str, position: float, length: float) -> str:
    """Format a pickup position the way the visualizer labels it."""
    return f"{label}: {position:.2f} mm from bridge ({position / length * 100.0:.1f}%)"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pickup Locator - Pickup placement from harmonic anti-nodes"
    )
    parser.add_argument(
        "--length",
        type=float,
        default=config.DEFAULT_STRING_LENGTH,
        help=f"Vibrating string length in mm (default: {config.DEFAULT_STRING_LENGTH})",
    )
    parser.add_argument(
        "--weights",
        type=float,
        nargs="+",
        default=list(config.DEFAULT_WEIGHTS),
        metavar="W",
        help=(
            f"Harmonic weights starting at harmonic {config.FIRST_HARMONIC} "
            f"(default: {' '.join(str(w) for w in config.DEFAULT_WEIGHTS)})"
        ),
    )
    parser.add_argument(
        "--search-limit",
        type=int,
        default=None,
        help="Last sample index to search (default: half the string length)",
    )
    parser.add_argument(
        "--heat-map",
        action="store_true",
        help="Print the heat map as a colored strip",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=80,
        help="Heat map strip width in characters (default: 80)",
    )
    parser.add_argument(
        "--palette",
        choices=sorted(config.PALETTES),
        default=config.DEFAULT_PALETTE,
        help=f"Heat map palette (default: {config.DEFAULT_PALETTE})",
    )
    parser.add_argument(
        "--list-ports",
        action="store_true",
        help="List available MIDI input ports and exit",
    )
    parser.add_argument(
        "--list-palettes",
        action="store_true",
        help="List heat map palettes and exit",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the Pickup Locator CLI."""
    args = build_parser().parse_args(argv)

    # List ports mode
    if args.list_ports:
        ports = MidiHandler.list_ports()
        print("Available MIDI input ports:")
        for i, port in enumerate(ports):
            print(f"  [{i}] {port}")
        if not ports:
            print("  (none)")
        return

    if args.list_palettes:
        print("Available palettes:")
        for name, stops in config.PALETTES.items():
            default = " (default)" if name == config.DEFAULT_PALETTE else ""
            print(f"  {name}: {len(stops)} stops{default}")
        return

    try:
        search_limit = args.search_limit
        if search_limit is None:
            search_limit = default_search_limit(args.length)

        positions = find_optimal_positions(args.length, args.weights, search_limit)
        strip = None
        if args.heat_map:
            heat_map = build_heat_map(args.length, args.weights)
            strip = render_heat_strip(heat_map, args.width, config.PALETTES[args.palette])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    harmonics = range(config.FIRST_HARMONIC, config.FIRST_HARMONIC + len(args.weights))
    print(f"String length: {args.length:.1f} mm")
    print("Weights: " + ", ".join(f"H{h}={w:.2f}" for h, w in zip(harmonics, args.weights)))
    print(f"Search limit: {search_limit} / {config.SEARCH_RESOLUTION} samples")
    print(f"✓ {format_position('Bridge pickup', positions.bridge_position, args.length)}")
    print(f"✓ {format_position('Neck pickup', positions.neck_position, args.length)}")

    if strip is not None:
        print()
        print("Heat map (bridge → nut):")
        print(strip)


if __name__ == "__main__":
    main()
