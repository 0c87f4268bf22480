"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Vector helpers and rigid transforms
    ray: Ray data structure and refraction
    settings: Render configuration
    lighting: Ambient/diffuse/specular lighting with hard shadows
    tracer: Recursive ray tracing with reflection and refraction
    scheduler: Column-partitioned parallel render passes

The tracer implements classic Whitted-style recursion: each hit is shaded
with direct lighting, then blended with colors traced along the reflected
and refracted rays until the recursion depth runs out.
"""

from .ray import EPSILON, Ray, ray_at, refract
from .settings import MAX_RECURSION_DEPTH, RenderSettings
from .vector import (
    Transform,
    as_vec3,
    dot,
    is_orthonormal,
    length,
    normalize,
    project_onto_unit,
    reflect_across_normal,
    rotation_x,
    rotation_y,
    rotation_z,
    vec3,
)

# Note: lighting, tracer and scheduler are NOT imported here to avoid circular imports.
# Import directly from src.whitted.core.tracer or src.whitted.core.scheduler when needed.

__all__ = [
    "Ray",
    "ray_at",
    "refract",
    "EPSILON",
    "RenderSettings",
    "MAX_RECURSION_DEPTH",
    "vec3",
    "as_vec3",
    "dot",
    "length",
    "normalize",
    "project_onto_unit",
    "reflect_across_normal",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "is_orthonormal",
    "Transform",
]
