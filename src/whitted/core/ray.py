"""Ray data structure and direction utilities.

A ray is an origin point plus a direction vector. The direction is not
required to be unit length: intersection distances are expressed in units of
the direction's length, so callers that mix rays must keep the scaling
consistent (primary rays, for example, point at the viewport plane and a hit
at t < 1 lies in front of it).

Example:
    >>> from src.whitted.core.ray import Ray, ray_at
    >>> from src.whitted.core.vector import vec3
    >>> ray = Ray(origin=vec3(0.0, 0.0, 0.0), direction=vec3(0.0, 0.0, 2.0))
    >>> ray_at(ray, 1.5)  # doctest: +SKIP
    array([0., 0., 3.])
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.whitted.core.vector import Vec3, as_vec3, dot, normalize, reflect_across_normal

# Bias applied to secondary ray ranges so a ray does not re-hit its own surface
EPSILON = 0.001


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Need not be normalized.
    """

    origin: Vec3
    direction: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", as_vec3(self.origin))
        object.__setattr__(self, "direction", as_vec3(self.direction))


def ray_at(ray: Ray, t: float) -> Vec3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + t * ray.direction


def refract(direction: Vec3, normal: Vec3, refractivity: float) -> Vec3:
    """Bend a direction through a surface using Snell's law.

    The side of the surface is decided by the sign of normal . direction: a
    negative value means the ray is entering the material (ratio 1 / n), a
    non-negative value means it is leaving it (ratio n, normal flipped to
    face the incoming ray).

    Args:
        direction: The incoming ray direction (any length).
        normal: The outward surface normal (unit length).
        refractivity: Index of refraction of the material. Zero disables
            bending and the incoming direction is returned unchanged.

    Returns:
        The transmitted direction (unit length), or the mirror reflection of
        the incoming direction when total internal reflection occurs.
    """
    if refractivity <= 0.0:
        return direction

    incoming = normalize(direction)
    cos_i = -dot(incoming, normal)
    if cos_i >= 0.0:
        ratio = 1.0 / refractivity
        facing = normal
    else:
        ratio = refractivity
        facing = -normal
        cos_i = -cos_i

    radicand = 1.0 - ratio * ratio * (1.0 - cos_i * cos_i)
    if radicand < 0.0:
        # Total internal reflection
        return reflect_across_normal(-incoming, facing)

    return ratio * incoming + (ratio * cos_i - math.sqrt(radicand)) * facing
