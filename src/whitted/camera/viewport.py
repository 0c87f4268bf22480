"""Mapping from canvas pixels to the viewport plane.

Canvas coordinates are signed with the origin at the grid center, +x right
and +y up. For a canvas of N pixels along an axis the covered coordinates
are [-N // 2, N - N // 2).
"""

from __future__ import annotations

from src.whitted.core.settings import RenderSettings
from src.whitted.core.vector import Vec3, vec3


def canvas_range(size: int) -> range:
    """Signed pixel coordinates covering a canvas axis of the given size."""
    return range(-(size // 2), size - size // 2)


def canvas_to_viewport(x: int, y: int, settings: RenderSettings) -> Vec3:
    """Convert canvas pixel coordinates to a camera-space viewport point.

    Args:
        x: Signed column (0 at center, positive right).
        y: Signed row (0 at center, positive up).
        settings: Provides canvas resolution and viewport geometry.

    Returns:
        The point (x * Vw / Cw, y * Vh / Ch, depth).
    """
    return vec3(
        x * settings.viewport_width / settings.canvas_width,
        y * settings.viewport_height / settings.canvas_height,
        settings.viewport_depth,
    )
