"""Built-in demo scene.

Three glossy spheres (red, blue, green) resting on a huge yellow sphere that
acts as the floor, lit by an ambient, a point and a directional light. A
glass sphere in front and a mirror wall behind exercise refraction and
reflection. Two cameras are provided: one at the origin looking down +z and
one to the right, turned toward the spheres.

Scene layout (top view, +z away from the default camera):

    z=12  ===========  mirror wall  ===========
    z=4        green(-2)          blue(+2)
    z=3               red(0, -1)
    z=2.2               glass
    z=0        cam 0 (0, 0, 0)         cam 1 (3, 0, 1)
"""

from __future__ import annotations

from src.whitted.camera.camera import Camera
from src.whitted.core.vector import rotation_y, vec3
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.color import BLUE, GREEN, RED, YELLOW
from src.whitted.materials.material import Material
from src.whitted.scene.lights import AmbientLight, DirectionalLight, PointLight
from src.whitted.scene.scene import Scene

# Floor sphere is large enough to look flat from the cameras
FLOOR_RADIUS = 5000.0


def default_materials() -> dict[str, Material]:
    """Get the named material table of the demo scene."""
    return {
        "red": Material(RED, specularity=500.0, reflectivity=0.2),
        "blue": Material(BLUE, specularity=500.0, reflectivity=0.3),
        "green": Material(GREEN, specularity=10.0, reflectivity=0.3),
        "yellow": Material(YELLOW, specularity=1000.0, reflectivity=0.2),
        "glass": Material(
            (230, 240, 255),
            specularity=300.0,
            reflectivity=0.1,
            transparency=0.8,
            refractivity=1.5,
        ),
        "mirror": Material((200, 200, 200), specularity=0.0, reflectivity=0.6),
    }


def default_scene() -> Scene:
    """Create the demo scene.

    Returns:
        A Scene with five spheres, one plane, three lights and two cameras.
    """
    materials = default_materials()

    spheres = (
        Sphere(vec3(0.0, -1.0, 3.0), 1.0, materials["red"]),
        Sphere(vec3(2.0, 0.0, 4.0), 1.0, materials["blue"]),
        Sphere(vec3(-2.0, 0.0, 4.0), 1.0, materials["green"]),
        Sphere(vec3(0.0, -1.0 - FLOOR_RADIUS, 0.0), FLOOR_RADIUS, materials["yellow"]),
        Sphere(vec3(0.9, -0.6, 2.2), 0.4, materials["glass"]),
    )
    planes = (Plane(vec3(0.0, 0.0, 12.0), vec3(0.0, 0.0, -1.0), materials["mirror"]),)
    lights = (
        AmbientLight(0.2),
        PointLight(0.6, vec3(2.1, 1.0, 0.0)),
        DirectionalLight(0.2, vec3(1.0, 4.0, 4.0)),
    )
    cameras = (
        Camera.make(rotation_y(0.0), vec3(0.0, 0.0, 0.0)),
        Camera.make(rotation_y(-30.0), vec3(3.0, 0.0, 1.0)),
    )

    return Scene(
        spheres=spheres,
        planes=planes,
        lights=lights,
        cameras=cameras,
        materials=materials,
    )
