"""Render configuration.

RenderSettings collects everything a render pass needs besides the scene:
canvas resolution, viewport geometry, worker count and recursion depth.
Defaults reproduce the classic 800x600 canvas with a 1.0 x 0.75 viewport at
depth 0.75.
"""

from __future__ import annotations

from dataclasses import dataclass

# Default recursion depth for reflected and refracted rays
MAX_RECURSION_DEPTH = 2

DEFAULT_WORKERS = 8


@dataclass(frozen=True)
class RenderSettings:
    """Configuration for a render pass.

    Attributes:
        canvas_width: Output width in pixels.
        canvas_height: Output height in pixels.
        viewport_width: Width of the viewport plane in camera space.
        viewport_height: Height of the viewport plane in camera space.
        viewport_depth: Distance from the eye to the viewport plane.
        workers: Number of column ranges rendered in parallel.
        max_depth: Recursion depth for reflection and refraction.
    """

    canvas_width: int = 800
    canvas_height: int = 600
    viewport_width: float = 1.0
    viewport_height: float = 0.75
    viewport_depth: float = 0.75
    workers: int = DEFAULT_WORKERS
    max_depth: int = MAX_RECURSION_DEPTH

    def __post_init__(self) -> None:
        if self.canvas_width < 1 or self.canvas_height < 1:
            raise ValueError(
                f"Canvas size {self.canvas_width}x{self.canvas_height} must be at least 1x1"
            )
        if self.viewport_width <= 0.0 or self.viewport_height <= 0.0:
            raise ValueError(
                f"Viewport size {self.viewport_width}x{self.viewport_height} must be positive"
            )
        if self.viewport_depth <= 0.0:
            raise ValueError(f"Viewport depth = {self.viewport_depth} must be positive")
        if self.workers < 1:
            raise ValueError(f"Worker count = {self.workers} must be at least 1")
        if self.max_depth < 0:
            raise ValueError(f"Recursion depth = {self.max_depth} cannot be negative")
