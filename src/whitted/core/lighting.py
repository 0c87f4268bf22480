"""Direct lighting model: ambient + diffuse + specular with hard shadows.

compute_lighting() returns a scalar intensity that the tracer multiplies
into a surface color. Each light contributes additively:

- Ambient lights add their intensity unconditionally.
- Point and directional lights first cast a shadow ray from the surface
  point toward the light. For point lights the direction is the unnormalized
  vector to the light, so the light itself sits at t = 1 and only occluders
  with t < 1 cast a shadow; directional lights are occluded by anything.
  An unoccluded light then adds a cosine-falloff diffuse term and, for
  specular materials, a Phong-style highlight cos(alpha)^specularity where
  alpha is the angle between the reflected light vector and the direction
  back toward the viewer.

The sum is not normalized and may exceed 1.0.
"""

from __future__ import annotations

import math

from src.whitted.core.ray import EPSILON, Ray
from src.whitted.core.vector import Vec3, dot, length, reflect_across_normal
from src.whitted.scene.intersection import is_occluded
from src.whitted.scene.lights import AmbientLight, PointLight
from src.whitted.scene.scene import Scene


def compute_lighting(
    scene: Scene,
    point: Vec3,
    normal: Vec3,
    view_direction: Vec3,
    specularity: float,
) -> float:
    """Compute the light intensity at a surface point.

    Args:
        scene: Provides the lights and the occluding shapes.
        point: The surface point being shaded.
        normal: The unit surface normal at the point.
        view_direction: Direction of the ray that reached the point.
        specularity: Specular exponent of the material; 0 disables highlights.

    Returns:
        The summed intensity over all lights (unbounded above).
    """
    intensity = 0.0

    for light in scene.lights:
        if isinstance(light, AmbientLight):
            intensity += light.intensity
            continue

        if isinstance(light, PointLight):
            direction = light.position - point
            max_t_occlusion = 1.0
        else:
            direction = light.direction
            max_t_occlusion = math.inf

        if is_occluded(scene, Ray(point, direction), EPSILON, max_t_occlusion):
            continue

        # Diffuse
        normal_dot_direction = dot(normal, direction)
        if normal_dot_direction > 0.0:
            intensity += light.intensity * normal_dot_direction / (length(normal) * length(direction))

        # Specular
        if specularity > 0.0:
            reflection = reflect_across_normal(direction, normal)
            reflection_dot_view = dot(reflection, -view_direction)
            if reflection_dot_view > 0.0:
                cos_alpha = reflection_dot_view / (length(reflection) * length(view_direction))
                intensity += light.intensity * cos_alpha**specularity

    return intensity
