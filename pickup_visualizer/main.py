"""Main entry point for the Pickup Visualizer."""

import argparse
import signal
from typing import Optional

import mido

from pickup_locator import config as core_config
from pickup_locator.midi_handler import MidiHandler, cc_to_range

from . import config
from .state import VisualizerState


def handle_midi_message(state: VisualizerState, midi: MidiHandler, msg: mido.Message) -> bool:
    """Apply a controller message to the state.

    Returns:
        True if the message changed a parameter
    """
    if midi.is_length_control(msg):
        state.set_string_length(cc_to_range(
            msg.value, core_config.STRING_LENGTH_MIN, core_config.STRING_LENGTH_MAX
        ))
    elif midi.is_search_limit_control(msg):
        state.set_search_limit(round(cc_to_range(msg.value, 1, state.search_limit_max)))
    elif midi.weight_index(msg) is not None:
        index = midi.weight_index(msg)
        if index >= len(state.weights):
            return False
        state.set_weight(index, cc_to_range(
            msg.value, core_config.WEIGHT_MIN, core_config.WEIGHT_MAX
        ))
    elif midi.is_palette_toggle(msg):
        state.cycle_palette()
    else:
        return False
    return True


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the Pickup Visualizer CLI."""
    parser = argparse.ArgumentParser(
        description="Pickup Visualizer - Heat map of harmonic anti-node proximity"
    )
    parser.add_argument(
        "--length",
        type=float,
        default=core_config.DEFAULT_STRING_LENGTH,
        help=f"Initial string length in mm (default: {core_config.DEFAULT_STRING_LENGTH})",
    )
    parser.add_argument(
        "--palette",
        choices=sorted(core_config.PALETTES),
        default=core_config.DEFAULT_PALETTE,
        help=f"Heat map palette (default: {core_config.DEFAULT_PALETTE})",
    )
    parser.add_argument(
        "--midi",
        nargs="?",
        const="",
        default=None,
        metavar="PATTERN",
        help="Enable MIDI controller input (optionally only ports matching PATTERN)",
    )
    parser.add_argument(
        "--midi-debug",
        action="store_true",
        help="Print raw MIDI messages to console",
    )

    args = parser.parse_args(argv)

    # Create shared state
    state = VisualizerState(palette_name=args.palette)
    try:
        state.set_string_length(args.length)
    except ValueError as e:
        parser.error(str(e))

    midi: Optional[MidiHandler] = None
    if args.midi is not None:
        midi = MidiHandler(port_pattern=args.midi or None, debug=args.midi_debug)
        try:
            print(f"✓ MIDI: Connected to '{midi.open()}'")
        except RuntimeError as e:
            print(f"⚠ MIDI: {e} (keyboard control only)")
            midi = None

    from .renderer import Renderer
    renderer = Renderer(state)

    # Handle signals
    def signal_handler(sig, frame):
        renderer.running = False

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    print("Pickup Visualizer starting...")
    print("  Arrow keys to select and adjust parameters")
    print("  Press 'P' to cycle palettes, 'R' to reset")
    print("  Press ESC to quit")

    try:
        renderer.start()

        # Main loop
        while renderer.running:
            renderer.clock.tick(config.FPS)

            if not renderer.handle_events():
                break

            if midi:
                for msg in midi.poll():
                    handle_midi_message(state, midi, msg)

            renderer.render()

    except KeyboardInterrupt:
        pass
    finally:
        renderer.stop()
        if midi:
            midi.close()
        print("Visualizer stopped.")


if __name__ == "__main__":
    main()
