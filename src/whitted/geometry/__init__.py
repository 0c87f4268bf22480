"""Geometry module for analytic shape primitives.

This module provides the primitives a scene can contain:

Components:
    shape: The Shape protocol (intersect + normal capability set)
    sphere: Sphere primitive with quadratic ray-sphere intersection
    plane: Infinite plane primitive

Each primitive reports raw parametric hit distances for a ray:

    distances = shape.intersect(ray)   # 0, 1 or 2 values of t
    normal = shape.normal(point)       # not necessarily unit length

Range filtering and closest/any-hit selection live in the scene's
intersection engine, so adding a new primitive only means implementing
those two methods.
"""

from .plane import Plane
from .shape import Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
]
