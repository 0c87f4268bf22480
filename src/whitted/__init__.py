"""Recursive Whitted-style ray tracer on the CPU.

This package renders static scenes of analytic primitives with:
- Closest-hit and any-hit ray/scene intersection (spheres, planes)
- Ambient, point and directional lights with hard shadows
- Phong-style specular highlights
- Recursive reflection and refraction with a bounded depth
- Column-partitioned multi-threaded render passes

Subpackages:
    core: Vector math, rays, lighting, tracer and scheduler
    geometry: Shape primitives and intersection algorithms
    materials: Colors and surface materials
    scene: Scene container, lights, intersection queries and loading
    camera: Camera placement and viewport mapping
    preview: Pixel sinks and preview utilities
"""

__version__ = "0.1.0"
