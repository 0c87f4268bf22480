"""Sphere primitive with quadratic ray-sphere intersection.

The ray-sphere intersection is found by solving

    |ray_origin + t * ray_direction - center|^2 = radius^2

which expands to the quadratic a*t^2 + b*t + c = 0 with

    a = dot(direction, direction)
    b = 2 * dot(origin - center, direction)
    c = dot(origin - center, origin - center) - radius^2

Both roots are reported when the discriminant is non-negative; deciding
which of them is usable is left to the caller, which knows the valid range.

Example:
    >>> from src.whitted.geometry.sphere import Sphere
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.materials.material import Material
    >>> sphere = Sphere(center=(0.0, 0.0, 0.0), radius=1.0, material=Material((255, 0, 0)))
    >>> sphere.intersect(Ray((0.0, 0.0, -10.0), (0.0, 0.0, 1.0)))
    (11.0, 9.0)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from src.whitted.core.ray import Ray
from src.whitted.core.vector import Vec3, as_vec3, dot
from src.whitted.materials.material import Material

# Below this, a ray direction is treated as zero length
DEGENERATE_DIRECTION = 1e-12


@dataclass(frozen=True, eq=False)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: Surface material.
    """

    center: Vec3 | Sequence[float]
    radius: float
    material: Material

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius = {self.radius} must be positive")
        object.__setattr__(self, "center", as_vec3(self.center))

    def intersect(self, ray: Ray) -> tuple[float, ...]:
        """Solve the ray-sphere quadratic.

        Args:
            ray: The ray to test. A zero-length direction never hits.

        Returns:
            An empty tuple when the ray misses, otherwise both roots
            ((-b + sqrt(disc)) / 2a, (-b - sqrt(disc)) / 2a). A tangent ray
            reports the same distance twice.
        """
        c_p = ray.origin - self.center

        a = dot(ray.direction, ray.direction)
        if a < DEGENERATE_DIRECTION:
            return ()
        b = 2.0 * dot(c_p, ray.direction)
        c = dot(c_p, c_p) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return ()

        disc_root = math.sqrt(discriminant)
        return ((-b + disc_root) / (2.0 * a), (-b - disc_root) / (2.0 * a))

    def normal(self, surface_point: Vec3) -> Vec3:
        """Outward normal at a surface point (length equals the radius)."""
        return surface_point - self.center
