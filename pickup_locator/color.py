"""Color gradients interpolated in the Oklab perceptual color space.

Interpolating sRGB channels directly produces muddy, dark midpoints
(e.g. blue -> yellow passes through grey). Oklab keeps lightness and hue
changing evenly, so the gradient reads as a smooth heat scale.

Color space conversion and mixing are done by coloraide.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from coloraide import Color

ColorValue = Union[int, tuple[int, ...]]

BLACK = (0, 0, 0)


@dataclass(frozen=True)
class ColorStop:
    """A gradient color pinned at an explicit offset in [0, 1]."""
    offset: float
    color: ColorValue


def parse_hex(hex_color: int) -> tuple[int, int, int]:
    """Split a 0xRRGGBB integer into (r, g, b) channels."""
    return (hex_color >> 16) & 0xFF, (hex_color >> 8) & 0xFF, hex_color & 0xFF


def _to_channels(color: ColorValue) -> tuple[int, ...]:
    if isinstance(color, int):
        return parse_hex(color)
    channels = tuple(int(c) for c in color)
    if len(channels) not in (3, 4):
        raise ValueError(f"Color must have 3 or 4 channels, got {color!r}")
    return channels


# =============================================================================
# sRGB <-> Oklab
# =============================================================================

def _srgb(rgb: Sequence[int]) -> Color:
    # Opaque; alpha is interpolated separately from the color
    return Color("srgb", [c / 255.0 for c in rgb[:3]])


def _to_bytes(color: Color) -> tuple[int, int, int]:
    r, g, b = color.convert("srgb").clip()[:-1]
    return int(round(r * 255.0)), int(round(g * 255.0)), int(round(b * 255.0))


def srgb_to_oklab(rgb: Sequence[int]) -> tuple[float, float, float]:
    """Convert 8-bit sRGB channels to Oklab (L, a, b).

    Args:
        rgb: (r, g, b) channels in 0..255

    Returns:
        Oklab coordinates; L is 0.0 for black and ~1.0 for white
    """
    L, a, b = _srgb(rgb).convert("oklab")[:-1]
    return L, a, b


def oklab_to_srgb(lab: Sequence[float]) -> tuple[int, int, int]:
    """Convert Oklab (L, a, b) back to 8-bit sRGB, clipping out-of-gamut values."""
    return _to_bytes(Color("oklab", list(lab)))


# =============================================================================
# Gradient
# =============================================================================

def _stop_offsets(stops: Sequence[Union[ColorValue, ColorStop]]) -> list[float]:
    count = len(stops)
    offsets = []
    for i, stop in enumerate(stops):
        if isinstance(stop, ColorStop):
            offset = float(stop.offset)
            if not 0.0 <= offset <= 1.0:
                raise ValueError(f"Stop offset must be within [0, 1], got {offset}")
        else:
            offset = i / (count - 1)
        if offsets and offset < offsets[-1]:
            raise ValueError(f"Stop offsets must be non-decreasing, got {offset} after {offsets[-1]}")
        offsets.append(offset)
    return offsets


def heat_to_color(
    normalized_heat: float,
    stops: Sequence[Union[ColorValue, ColorStop]],
) -> tuple[int, ...]:
    """Map a heat value in [0, 1] onto a color gradient.

    Stops are colors (0xRRGGBB ints or (r, g, b[, a]) tuples), optionally
    wrapped in ColorStop to pin them at an offset. Unpinned stops are spread
    evenly. Neighbouring stops are mixed in Oklab; alpha, if any stop
    has it, is interpolated linearly.

    Args:
        normalized_heat: Value to map; clamped to [0, 1]
        stops: Ordered gradient stops, cold first

    Returns:
        (r, g, b) or (r, g, b, a) channels in 0..255. Black with no stops.
    """
    if math.isnan(normalized_heat):
        raise ValueError("Heat value must be a number, got NaN")
    heat = min(max(float(normalized_heat), 0.0), 1.0)

    if not stops:
        return BLACK

    colors = [_to_channels(s.color if isinstance(s, ColorStop) else s) for s in stops]
    has_alpha = any(len(c) == 4 for c in colors)

    def finish(rgb: tuple[int, int, int], alpha: Optional[float]) -> tuple[int, ...]:
        if not has_alpha:
            return rgb
        return (*rgb, int(round(min(max(alpha, 0.0), 255.0))))

    def alpha_of(channels: tuple[int, ...]) -> int:
        return channels[3] if len(channels) == 4 else 255

    if len(colors) == 1:
        return finish(oklab_to_srgb(srgb_to_oklab(colors[0])), alpha_of(colors[0]))

    offsets = _stop_offsets(stops)

    # Below the first or above the last pinned stop the gradient is flat
    if heat <= offsets[0]:
        lower, t = 0, 0.0
    elif heat >= offsets[-1]:
        lower, t = len(colors) - 2, 1.0
    else:
        lower = 0
        while lower < len(colors) - 2 and heat > offsets[lower + 1]:
            lower += 1
        span = offsets[lower + 1] - offsets[lower]
        t = 1.0 if span <= 0 else (heat - offsets[lower]) / span
    upper = lower + 1

    mixed = _srgb(colors[lower]).mix(_srgb(colors[upper]), t, space="oklab")

    alpha = alpha_of(colors[lower]) + (alpha_of(colors[upper]) - alpha_of(colors[lower])) * t
    return finish(_to_bytes(mixed), alpha)
