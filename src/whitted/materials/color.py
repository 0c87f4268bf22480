"""8-bit RGB colors and saturating color arithmetic.

Colors are tuples of three ints in [0, 255]. Every operation here saturates
to that range instead of wrapping, so lighting intensities above 1.0 simply
clip to full brightness.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

Color = tuple[int, int, int]

CHANNEL_MAX = 255

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
YELLOW: Color = (255, 255, 0)
MAGENTA: Color = (255, 0, 255)
CYAN: Color = (0, 255, 255)

NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
    "magenta": MAGENTA,
    "cyan": CYAN,
}


def _saturate(channels: np.ndarray) -> Color:
    clipped = np.clip(channels, 0, CHANNEL_MAX).astype(np.int64)
    return (int(clipped[0]), int(clipped[1]), int(clipped[2]))


def scale_color(color: Sequence[int], intensity: float) -> Color:
    """Scale each channel of a color by an intensity, with saturation.

    Channels are truncated toward zero and then clamped to [0, 255].

    Args:
        color: The color to scale.
        intensity: The scale factor. Values above 1.0 brighten, negative
            values clamp to black.

    Returns:
        The scaled color.
    """
    return _saturate(np.trunc(np.asarray(color, dtype=np.float64) * intensity))


def add_colors(*colors: Sequence[int]) -> Color:
    """Channel-wise sum of colors, saturating at 255."""
    total = np.zeros(3, dtype=np.int64)
    for color in colors:
        total += np.asarray(color, dtype=np.int64)
    return _saturate(total)


def parse_color(value: str | Sequence[int]) -> Color:
    """Convert a color name or an RGB triple into a validated Color.

    Args:
        value: Either a key of NAMED_COLORS or a sequence of three ints.

    Returns:
        The color as an int tuple.

    Raises:
        ValueError: If the name is unknown or a channel is out of range.
    """
    if isinstance(value, str):
        try:
            return NAMED_COLORS[value.lower()]
        except KeyError:
            raise ValueError(f"Unknown color name: {value}") from None

    try:
        channels = tuple(value)
    except TypeError:
        raise ValueError(f"Color must be a name or an RGB triple, got {value!r}") from None
    if len(channels) != 3:
        raise ValueError(f"Color must have 3 channels, got {len(channels)}")
    for channel in channels:
        try:
            valid = int(channel) == channel and 0 <= channel <= CHANNEL_MAX
        except (TypeError, ValueError):
            valid = False
        if not valid:
            raise ValueError(
                f"Color channel {channel!r} is outside [0, {CHANNEL_MAX}] or not an integer"
            )
    return (int(channels[0]), int(channels[1]), int(channels[2]))
