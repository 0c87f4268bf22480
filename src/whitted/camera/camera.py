"""Camera placement and primary ray generation.

A camera is a rigid Transform: its linear part orients the view and its
translation is the eye position. Primary rays start at the eye and point at
a viewport point expressed in camera space, rotated into world space.

Example:
    >>> from src.whitted.camera.camera import Camera
    >>> from src.whitted.core.vector import rotation_y, vec3
    >>> camera = Camera.make(rotation_y(-30.0), vec3(3.0, 0.0, 1.0))
    >>> ray = camera.primary_ray(vec3(0.0, 0.0, 0.75))
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from src.whitted.core.ray import Ray
from src.whitted.core.vector import Mat3, Transform, Vec3, as_vec3


@dataclass(frozen=True, eq=False)
class Camera:
    """A positioned, oriented camera.

    Attributes:
        transform: Camera-to-world transform. The linear part is the
            orientation and the translation is the eye position.
    """

    transform: Transform = field(default_factory=Transform)

    @classmethod
    def make(
        cls,
        orientation: Mat3 | Sequence[Sequence[float]],
        position: Vec3 | Sequence[float],
    ) -> Camera:
        """Create a camera from an orientation matrix and a position."""
        return cls(
            transform=Transform(np.array(orientation, dtype=np.float64), as_vec3(position))
        )

    @property
    def position(self) -> Vec3:
        """Eye position in world space."""
        return self.transform.translation

    @property
    def orientation(self) -> Mat3:
        """Camera orientation (linear part of the transform)."""
        return self.transform.linear

    def primary_ray(self, viewport_point: Vec3) -> Ray:
        """Ray from the eye through a camera-space viewport point.

        The direction is left unnormalized so that t = 1 lands exactly on the
        viewport plane.
        """
        return Ray(origin=self.position, direction=self.transform.rotate(viewport_point))
