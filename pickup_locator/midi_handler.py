"""MIDI controller input using mido and python-rtmidi.

Lets a hardware controller (knobs/faders) drive the string length,
search limit and harmonic weights. Only Control Change messages are
handled.
"""

from dataclasses import dataclass
from typing import Optional

import mido

from . import config


@dataclass
class CCEvent:
    """Represents a Control Change event."""
    control: int
    value: int
    channel: int


def cc_to_range(value: int, low: float, high: float) -> float:
    """Map a 0-127 CC value linearly onto [low, high].

    Examples:
        >>> cc_to_range(0, 500.0, 1000.0)
        500.0
        >>> cc_to_range(127, 500.0, 1000.0)
        1000.0
    """
    value = min(max(value, 0), 127)
    return low + (high - low) * (value / 127.0)


class MidiHandler:
    """Handles MIDI input from the controller.

    Opens MIDI input ports and provides methods for polling and
    classifying incoming messages.
    """

    def __init__(
        self,
        port_pattern: Optional[str] = config.MIDI_PORT_PATTERN,
        length_cc: int = config.STRING_LENGTH_CC,
        search_limit_cc: int = config.SEARCH_LIMIT_CC,
        weight_ccs: tuple[int, ...] = config.WEIGHT_CCS,
        palette_cc: int = config.PALETTE_CC,
        debug: bool = False,
    ):
        """Initialize the MIDI handler.

        Args:
            port_pattern: Substring to match in port names, or None for all ports
            length_cc: CC number bound to the string length
            search_limit_cc: CC number bound to the search limit
            weight_ccs: CC numbers bound to each harmonic weight, in order
            palette_cc: CC number of the palette cycle button
            debug: If True, print raw MIDI messages to console
        """
        self.port_pattern = port_pattern
        self.length_cc = length_cc
        self.search_limit_cc = search_limit_cc
        self.weight_ccs = tuple(weight_ccs)
        self.palette_cc = palette_cc
        self.debug = debug
        self._ports: list[mido.ports.BaseInput] = []
        self._port_names: list[str] = []

    def open(self) -> str:
        """Open every MIDI input port matching the pattern.

        Returns:
            Comma-separated list of opened port names

        Raises:
            RuntimeError: If no MIDI ports could be opened
        """
        self._ports = []
        self._port_names = []

        for name in mido.get_input_names():
            if self.port_pattern and self.port_pattern.lower() not in name.lower():
                continue
            lower_name = name.lower()
            if "midi through" in lower_name or "rtmidi" in lower_name:
                continue

            try:
                self._ports.append(mido.open_input(name))
                self._port_names.append(name)
            except (IOError, OSError) as e:
                print(f"[MIDI] Could not open '{name}': {e}")

        if not self._ports:
            if self.port_pattern:
                raise RuntimeError(f"No MIDI input ports matching '{self.port_pattern}'")
            raise RuntimeError("No MIDI input ports available")

        return self.port_name

    def close(self) -> None:
        """Close all MIDI input ports."""
        for port in self._ports:
            port.close()
        self._ports = []
        self._port_names = []

    def poll(self) -> list[mido.Message]:
        """Poll for pending MIDI messages from all ports (non-blocking).

        Returns:
            List of pending MIDI messages
        """
        messages = []
        for port in self._ports:
            messages.extend(port.iter_pending())

        if self.debug:
            for msg in messages:
                print(f"[MIDI IN] {msg}")

        return messages

    def is_length_control(self, msg: mido.Message) -> bool:
        """Check if a message is the string length CC."""
        return msg.type == "control_change" and msg.control == self.length_cc

    def is_search_limit_control(self, msg: mido.Message) -> bool:
        """Check if a message is the search limit CC."""
        return msg.type == "control_change" and msg.control == self.search_limit_cc

    def weight_index(self, msg: mido.Message) -> Optional[int]:
        """Index of the harmonic weight a message controls, or None."""
        if msg.type != "control_change" or msg.control not in self.weight_ccs:
            return None
        return self.weight_ccs.index(msg.control)

    def is_palette_toggle(self, msg: mido.Message) -> bool:
        """Check if a message is a press of the palette cycle button."""
        return (
            msg.type == "control_change"
            and msg.control == self.palette_cc
            and msg.value > 0
        )

    def parse_cc_event(self, msg: mido.Message) -> CCEvent:
        """Parse a CC message into a CCEvent."""
        return CCEvent(
            control=msg.control,
            value=msg.value,
            channel=msg.channel,
        )

    @property
    def port_name(self) -> Optional[str]:
        """Names of currently open ports (comma separated)."""
        if not self._port_names:
            return None
        return ", ".join(self._port_names)

    @property
    def is_open(self) -> bool:
        """Whether any port is currently open."""
        return len(self._ports) > 0

    @staticmethod
    def list_ports() -> list[str]:
        """List all available MIDI input ports."""
        return mido.get_input_names()

    def __enter__(self) -> "MidiHandler":
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
