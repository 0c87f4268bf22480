"""Recursive Whitted-style ray tracer.

trace_ray() finds the closest surface along a ray and shades it by blending
three colors:

    local      the material color, weighted by 1 - reflectivity - transparency
    reflected  the color traced along the mirror direction, weighted by
               reflectivity
    refracted  the color traced through the surface, weighted by transparency

and then multiplying the blend by the direct lighting intensity at the hit
point. Reflected and refracted rays recurse with depth - 1; at depth 0 only
the local term remains. Rays that escape the scene return the background.

Example:
    >>> import math
    >>> from src.whitted.core.tracer import trace_ray
    >>> from src.whitted.core.ray import Ray
    >>> color = trace_ray(scene, Ray(eye, direction), 1.0, math.inf)  # doctest: +SKIP
"""

from __future__ import annotations

import math

from src.whitted.core.lighting import compute_lighting
from src.whitted.core.ray import EPSILON, Ray, ray_at, refract
from src.whitted.core.settings import MAX_RECURSION_DEPTH
from src.whitted.core.vector import normalize, reflect_across_normal
from src.whitted.materials.color import BLACK, WHITE, Color, add_colors, scale_color
from src.whitted.scene.intersection import find_intersect
from src.whitted.scene.scene import Scene

BACKGROUND_COLOR: Color = WHITE


def trace_ray(
    scene: Scene,
    ray: Ray,
    t_min: float,
    t_max: float,
    depth: int = MAX_RECURSION_DEPTH,
) -> Color:
    """Trace a ray and compute the color it sees.

    Args:
        scene: The scene to render.
        ray: The ray to trace.
        t_min: Exclusive lower bound on hit distance.
        t_max: Exclusive upper bound on hit distance.
        depth: Remaining recursion budget for reflection and refraction.

    Returns:
        The saturated 8-bit color seen along the ray.

    Raises:
        ValueError: If depth is negative.
    """
    if depth < 0:
        raise ValueError(f"Recursion depth = {depth} cannot be negative")

    hit = find_intersect(scene, ray, t_min, t_max)
    if hit is None:
        return BACKGROUND_COLOR

    point = ray_at(ray, hit.t)
    normal = normalize(hit.shape.normal(point))
    material = hit.shape.material

    # Reflection: recurse along the mirrored ray, bias scaled by hit distance
    reflected_blend = BLACK
    if depth > 0 and material.reflectivity > 0.0:
        reflected_ray = Ray(point, reflect_across_normal(-ray.direction, normal))
        reflected_color = trace_ray(scene, reflected_ray, EPSILON * hit.t, math.inf, depth - 1)
        reflected_blend = scale_color(reflected_color, material.reflectivity)

    # Transparency: recurse through the surface
    refracted_blend = BLACK
    if depth > 0 and material.transparency > 0.0:
        refracted_ray = Ray(point, refract(ray.direction, normal, material.refractivity))
        refracted_color = trace_ray(scene, refracted_ray, EPSILON, math.inf, depth - 1)
        refracted_blend = scale_color(refracted_color, material.transparency)

    local_blend = scale_color(material.color, material.local_weight)
    blend = add_colors(local_blend, reflected_blend, refracted_blend)

    intensity = compute_lighting(scene, point, normal, ray.direction, material.specularity)
    return scale_color(blend, intensity)
