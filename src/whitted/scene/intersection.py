"""Scene-level ray intersection queries.

This module tests a ray against every shape in a scene and reports either
the closest hit (primary visibility) or any hit at all (shadow occlusion).
A candidate distance t is valid only when t_min < t < t_max; both bounds are
exclusive.

Shapes are visited in the scene's default order (spheres, then planes)
unless a traversal callable supplies another order. The order never changes
which distance the closest-hit query reports, only which shape wins a tie.

Example:
    >>> from src.whitted.scene.intersection import IntersectMode, find_intersect
    >>> hit = find_intersect(scene, ray, 1.0, math.inf)  # doctest: +SKIP
    >>> if hit is not None:
    ...     print(hit.t, hit.shape.material)  # doctest: +SKIP
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from src.whitted.core.ray import Ray
from src.whitted.geometry.shape import Shape
from src.whitted.scene.scene import Scene

# Supplies the shapes to test, in order
Traversal = Callable[[Scene], Iterable[Shape]]


class IntersectMode(Enum):
    """Which hit an intersection query reports."""

    CLOSEST = "closest"
    ANY = "any"


@dataclass(frozen=True)
class SceneHit:
    """Record of a ray-scene intersection.

    Attributes:
        t: Parametric distance of the hit along the ray.
        shape: The shape that was hit. Borrowed from the scene.
    """

    t: float
    shape: Shape


def default_traversal(scene: Scene) -> Iterable[Shape]:
    """Spheres first, then planes."""
    return scene.shapes


def find_intersect(
    scene: Scene,
    ray: Ray,
    t_min: float,
    t_max: float,
    mode: IntersectMode = IntersectMode.CLOSEST,
    traversal: Traversal | None = None,
) -> SceneHit | None:
    """Test a ray against all shapes in the scene.

    Args:
        scene: The scene to query.
        ray: The ray to test.
        t_min: Exclusive lower bound for valid hits.
        t_max: Exclusive upper bound for valid hits.
        mode: CLOSEST tracks the smallest valid t; ANY returns on the first
            valid candidate found.
        traversal: Optional callable returning the shapes to test, in order.

    Returns:
        The hit, or None if no shape reports a distance inside the range.
    """
    shapes = (traversal or default_traversal)(scene)

    closest: SceneHit | None = None
    for shape in shapes:
        for t in shape.intersect(ray):
            if not t_min < t < t_max:
                continue
            if mode is IntersectMode.ANY:
                return SceneHit(t, shape)
            if closest is None or t < closest.t:
                closest = SceneHit(t, shape)

    return closest


def is_occluded(
    scene: Scene,
    ray: Ray,
    t_min: float,
    t_max: float,
    traversal: Traversal | None = None,
) -> bool:
    """Shadow query: does anything block the ray inside (t_min, t_max)?"""
    return find_intersect(scene, ray, t_min, t_max, IntersectMode.ANY, traversal) is not None
