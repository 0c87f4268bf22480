"""Capability set shared by every renderable primitive."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from src.whitted.core.ray import Ray
from src.whitted.core.vector import Vec3
from src.whitted.materials.material import Material


@runtime_checkable
class Shape(Protocol):
    """A primitive the intersection engine can query.

    Implementations report raw hit distances; range filtering and picking
    the closest hit is the intersection engine's job.
    """

    material: Material

    def intersect(self, ray: Ray) -> tuple[float, ...]:
        """Return the 0, 1 or 2 parametric distances where the ray meets the shape."""
        ...

    def normal(self, surface_point: Vec3) -> Vec3:
        """Return the surface normal at a point (not necessarily unit length)."""
        ...
