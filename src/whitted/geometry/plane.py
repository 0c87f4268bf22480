"""Infinite plane primitive.

A plane is a point Q on the surface and a normal N. A ray P + tD meets it at

    t = dot(Q - P, N) / dot(D, N)

Rays running (nearly) parallel to the surface never hit, and neither do
rays whose hit would lie behind their origin.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from src.whitted.core.ray import EPSILON, Ray
from src.whitted.core.vector import Vec3, as_vec3, dot
from src.whitted.materials.material import Material


@dataclass(frozen=True, eq=False)
class Plane:
    """An infinite plane.

    Attributes:
        point: Any point on the plane.
        normal_vector: The plane normal (non-zero; need not be unit length).
            Rays only hit the plane in front of their origin, from either side.
        material: Surface material.
    """

    point: Vec3 | Sequence[float]
    normal_vector: Vec3 | Sequence[float]
    material: Material

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", as_vec3(self.point))
        normal_vector = as_vec3(self.normal_vector)
        if not normal_vector.any():
            raise ValueError("Plane normal cannot be zero")
        object.__setattr__(self, "normal_vector", normal_vector)

    def intersect(self, ray: Ray) -> tuple[float, ...]:
        """Return the single hit distance, or nothing.

        Args:
            ray: The ray to test.

        Returns:
            An empty tuple if |D . N| < EPSILON (parallel) or the hit lies
            behind the ray origin, else a one-element tuple.
        """
        denominator = dot(ray.direction, self.normal_vector)
        if abs(denominator) < EPSILON:
            return ()

        t = dot(self.point - ray.origin, self.normal_vector) / denominator
        if t < 0.0:
            return ()
        return (t,)

    def normal(self, surface_point: Vec3) -> Vec3:
        """Constant plane normal; the surface point is not needed."""
        return self.normal_vector
