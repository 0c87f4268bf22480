"""Scene serialization to and from plain dictionaries and JSON files.

The dictionary form keeps materials in a named table that shapes reference
by name, so one material can be shared by many shapes:

    {
        "materials": {
            "red": {"color": [255, 0, 0], "specularity": 500, "reflectivity": 0.2}
        },
        "spheres": [{"center": [0, -1, 3], "radius": 1, "material": "red"}],
        "planes": [{"point": [0, -1, 0], "normal": [0, 1, 0], "material": "red"}],
        "lights": [
            {"type": "ambient", "intensity": 0.2},
            {"type": "point", "intensity": 0.6, "position": [2, 1, 0]},
            {"type": "directional", "intensity": 0.2, "direction": [1, 4, 4]}
        ],
        "cameras": [
            {"position": [0, 0, 0]},
            {"position": [3, 0, 1], "rotation": {"y": -30}},
            {"position": [0, 2, 0], "orientation": [[1, 0, 0], [0, 1, 0], [0, 0, 1]]}
        ]
    }

A camera's orientation is either an explicit 3x3 matrix or a rotation given
as per-axis angles in degrees, applied x, then y, then z. A scene without
cameras gets a single camera at the origin looking down +z.

Example:
    >>> from src.whitted.scene.loader import load_scene
    >>> scene = load_scene("scenes/demo.json")  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

from src.whitted.camera.camera import Camera
from src.whitted.core.vector import Mat3, rotation_x, rotation_y, rotation_z
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.scene.lights import light_from_dict, light_to_dict
from src.whitted.scene.scene import Scene

logger = logging.getLogger(__name__)

_ROTATIONS = {"x": rotation_x, "y": rotation_y, "z": rotation_z}


def _lookup_material(materials: dict[str, Material], name: Any) -> Material:
    try:
        return materials[name]
    except KeyError:
        raise ValueError(f"Unknown material: {name}") from None


def _section(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    entries = data.get(key, [])
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise ValueError(f"Scene '{key}' must be a list of objects")
    return entries


def _orientation_from_dict(data: dict[str, Any]) -> Mat3:
    if "orientation" in data:
        return np.array(data["orientation"], dtype=np.float64)

    rotation = data.get("rotation", {})
    if not isinstance(rotation, dict):
        raise ValueError(f"Camera rotation must be an object, got {rotation!r}")
    angles = {str(axis).lower(): degrees for axis, degrees in rotation.items()}
    for axis in angles:
        if axis not in _ROTATIONS:
            raise ValueError(f"Unknown rotation axis: {axis}")

    # Always x, then y, then z, whatever order the keys were written in
    orientation = np.eye(3, dtype=np.float64)
    for axis, rotate in _ROTATIONS.items():
        if axis in angles:
            orientation = orientation @ rotate(float(angles[axis]))
    return orientation


def _camera_from_dict(data: dict[str, Any]) -> Camera:
    return Camera.make(_orientation_from_dict(data), data.get("position", [0.0, 0.0, 0.0]))


def scene_from_dict(data: dict[str, Any]) -> Scene:
    """Build a scene from its dictionary form.

    Args:
        data: Dictionary with optional 'materials', 'spheres', 'planes',
            'lights' and 'cameras' keys.

    Returns:
        The constructed scene.

    Raises:
        ValueError: If a material name, light type or rotation axis is
            unknown, a section or field has the wrong shape or type, or any
            value fails validation.
    """
    material_table = data.get("materials", {})
    if not isinstance(material_table, dict):
        raise ValueError("Scene 'materials' must be an object")
    materials = {
        str(name): Material.from_dict(fields) for name, fields in material_table.items()
    }

    try:
        spheres = tuple(
            Sphere(
                center=entry["center"],
                radius=float(entry["radius"]),
                material=_lookup_material(materials, entry["material"]),
            )
            for entry in _section(data, "spheres")
        )
        planes = tuple(
            Plane(
                point=entry["point"],
                normal_vector=entry["normal"],
                material=_lookup_material(materials, entry["material"]),
            )
            for entry in _section(data, "planes")
        )
    except KeyError as exc:
        raise ValueError(f"Shape definition is missing {exc.args[0]!r}") from None
    except TypeError as exc:
        raise ValueError(f"Invalid shape definition: {exc}") from None

    lights = tuple(light_from_dict(entry) for entry in _section(data, "lights"))
    try:
        cameras = tuple(_camera_from_dict(entry) for entry in _section(data, "cameras"))
    except TypeError as exc:
        raise ValueError(f"Invalid camera definition: {exc}") from None
    cameras = cameras or (Camera(),)

    logger.debug(
        "Loaded scene: %d material(s), %d sphere(s), %d plane(s), %d light(s), %d camera(s)",
        len(materials),
        len(spheres),
        len(planes),
        len(lights),
        len(cameras),
    )
    return Scene(
        spheres=spheres,
        planes=planes,
        lights=lights,
        cameras=cameras,
        materials=materials,
    )


def scene_to_dict(scene: Scene) -> dict[str, Any]:
    """Export a scene to its dictionary form (for JSON serialization).

    Materials from the scene's table keep their names; materials used by
    shapes but missing from the table are exported as 'material_<n>'.

    Returns:
        A dictionary that scene_from_dict() accepts.
    """
    names: dict[int, str] = {id(material): name for name, material in scene.materials.items()}
    table: dict[str, Any] = {name: material.to_dict() for name, material in scene.materials.items()}

    def material_name(material: Material) -> str:
        key = id(material)
        if key not in names:
            names[key] = f"material_{len(table)}"
            table[names[key]] = material.to_dict()
        return names[key]

    spheres = [
        {
            "center": sphere.center.tolist(),
            "radius": sphere.radius,
            "material": material_name(sphere.material),
        }
        for sphere in scene.spheres
    ]
    planes = [
        {
            "point": plane.point.tolist(),
            "normal": plane.normal_vector.tolist(),
            "material": material_name(plane.material),
        }
        for plane in scene.planes
    ]
    cameras = [
        {"position": camera.position.tolist(), "orientation": camera.orientation.tolist()}
        for camera in scene.cameras
    ]

    return {
        "materials": table,
        "spheres": spheres,
        "planes": planes,
        "lights": [light_to_dict(light) for light in scene.lights],
        "cameras": cameras,
    }


def load_scene(path: str | Path) -> Scene:
    """Load a scene from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the JSON is malformed or describes an invalid scene.
    """
    path = Path(path)
    logger.debug("Loading scene from %s", path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Scene file {path} must contain a JSON object")
    return scene_from_dict(data)
