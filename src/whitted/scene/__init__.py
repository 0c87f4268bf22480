"""Scene module for scene data and ray-scene queries.

This module handles scene representation and ray-scene queries:

Components:
    lights: Ambient, point and directional light variants
    scene: Immutable Scene container (shapes, lights, cameras, materials)
    intersection: Closest-hit and any-hit queries over all shapes
    loader: Dictionary / JSON scene serialization
    default_scene: Built-in demo scene

A Scene is constructed once and never mutated during a render, so any
number of worker threads may query it concurrently.
"""

from .default_scene import default_materials, default_scene
from .intersection import (
    IntersectMode,
    SceneHit,
    default_traversal,
    find_intersect,
    is_occluded,
)
from .lights import (
    AmbientLight,
    DirectionalLight,
    Light,
    PointLight,
    light_from_dict,
    light_to_dict,
)
from .loader import load_scene, scene_from_dict, scene_to_dict
from .scene import Scene

__all__ = [
    # Scene container
    "Scene",
    # Lights
    "Light",
    "AmbientLight",
    "PointLight",
    "DirectionalLight",
    "light_from_dict",
    "light_to_dict",
    # Intersection
    "IntersectMode",
    "SceneHit",
    "find_intersect",
    "is_occluded",
    "default_traversal",
    # Loading
    "scene_from_dict",
    "scene_to_dict",
    "load_scene",
    # Demo scene
    "default_scene",
    "default_materials",
]
