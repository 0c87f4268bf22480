"""In-memory pixel sink for render passes.

The tracer never owns an image. It writes through the two-method PixelSink
contract:

    put_pixel(x, y, color)   signed coordinates, origin at the grid center,
                             +x right, +y up
    publish()                make all prior put_pixel calls visible

Framebuffer implements that contract on top of a NumPy uint8 array of shape
(height, width, 3), flipping the y axis into row-major image order. Pixel
writes go to a working buffer; publish() copies it into the published frame
that presentation code reads with snapshot().

Example:
    >>> from src.whitted.preview.framebuffer import Framebuffer
    >>> fb = Framebuffer(4, 4)
    >>> fb.put_pixel(-2, 1, (255, 0, 0))   # top-left pixel
    >>> fb.publish()
    >>> fb.snapshot()[0, 0].tolist()
    [255, 0, 0]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np
import numpy.typing as npt

from src.whitted.materials.color import BLACK, Color, parse_color


@runtime_checkable
class PixelSink(Protocol):
    """Destination for rendered pixels."""

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        """Deposit a color at signed canvas coordinates."""
        ...

    def publish(self) -> None:
        """Make all prior put_pixel calls visible."""
        ...


class Framebuffer:
    """NumPy-backed pixel grid implementing PixelSink.

    Distinct columns may be written concurrently from different threads;
    each put_pixel touches a single array element.

    Attributes:
        width: Grid width in pixels.
        height: Grid height in pixels.
    """

    def __init__(self, width: int, height: int, background: Sequence[int] = BLACK) -> None:
        """Create a framebuffer filled with a background color.

        Raises:
            ValueError: If either dimension is less than 1.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Framebuffer size {width}x{height} must be at least 1x1")
        self._width = width
        self._height = height
        self._background = parse_color(tuple(background))
        self._pixels = np.empty((height, width, 3), dtype=np.uint8)
        self._pixels[:, :] = self._background
        self._published = self._pixels.copy()
        self._publish_count = 0

    @property
    def width(self) -> int:
        """Get the grid width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the grid height."""
        return self._height

    @property
    def publish_count(self) -> int:
        """Number of frames published so far."""
        return self._publish_count

    def _to_index(self, x: int, y: int) -> tuple[int, int]:
        # Top row holds the largest y; see canvas_range() for the covered span
        row = (self._height - self._height // 2) - 1 - y
        col = self._width // 2 + x
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise ValueError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} framebuffer"
            )
        return row, col

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        """Write a color at signed canvas coordinates.

        Args:
            x: Column, 0 at the center, positive right.
            y: Row, 0 at the center, positive up.
            color: 8-bit RGB color.

        Raises:
            ValueError: If the coordinates fall outside the grid.
        """
        row, col = self._to_index(x, y)
        self._pixels[row, col] = color

    def publish(self) -> None:
        """Copy the working buffer into the published frame."""
        self._published = self._pixels.copy()
        self._publish_count += 1

    def pixel(self, x: int, y: int) -> Color:
        """Read a pixel of the published frame at signed canvas coordinates."""
        row, col = self._to_index(x, y)
        r, g, b = self._published[row, col]
        return (int(r), int(g), int(b))

    def snapshot(self) -> npt.NDArray[np.uint8]:
        """Get a copy of the published frame, shape (height, width, 3)."""
        return self._published.copy()

    def clear(self) -> None:
        """Reset the working buffer to the background color."""
        self._pixels[:, :] = self._background

    def __repr__(self) -> str:
        """Return a string representation of the framebuffer state."""
        return (
            f"Framebuffer(width={self.width}, height={self.height}, "
            f"published={self.publish_count})"
        )
