"""Immutable scene container.

A Scene is built once before the first render and passed by reference into
every render pass. All collections are tuples, so worker threads can share
the scene without locking.

Example:
    >>> from src.whitted.scene.scene import Scene
    >>> from src.whitted.scene.lights import AmbientLight
    >>> from src.whitted.geometry import Sphere
    >>> from src.whitted.materials import Material, RED
    >>> scene = Scene(
    ...     spheres=(Sphere((0.0, 0.0, 3.0), 1.0, Material(RED)),),
    ...     lights=(AmbientLight(1.0),),
    ... )
    >>> len(scene.shapes)
    1
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.whitted.camera.camera import Camera
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.shape import Shape
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.scene.lights import Light


@dataclass(frozen=True, eq=False)
class Scene:
    """Shapes, lights and cameras making up a renderable scene.

    Attributes:
        spheres: Spheres, in traversal order.
        planes: Planes, traversed after all spheres.
        lights: Light sources summed by the lighting model.
        cameras: Available viewpoints, selected by index.
        materials: Optional named material table the shapes were built from.
        shapes: Spheres followed by planes (derived, not passed in).
    """

    spheres: tuple[Sphere, ...] = ()
    planes: tuple[Plane, ...] = ()
    lights: tuple[Light, ...] = ()
    cameras: tuple[Camera, ...] = (Camera(),)
    materials: Mapping[str, Material] = field(default_factory=dict)
    shapes: tuple[Shape, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "spheres", tuple(self.spheres))
        object.__setattr__(self, "planes", tuple(self.planes))
        object.__setattr__(self, "lights", tuple(self.lights))
        object.__setattr__(self, "cameras", tuple(self.cameras))
        object.__setattr__(self, "materials", MappingProxyType(dict(self.materials)))
        # Default traversal order: spheres, then planes
        object.__setattr__(self, "shapes", (*self.spheres, *self.planes))

    def camera(self, index: int = 0) -> Camera:
        """Get a camera by index.

        Raises:
            ValueError: If the scene has no camera at that index.
        """
        if not 0 <= index < len(self.cameras):
            raise ValueError(
                f"Camera index {index} out of range; scene has {len(self.cameras)} camera(s)"
            )
        return self.cameras[index]

    def get_primitive_count(self) -> int:
        """Get the total number of shapes in the scene."""
        return len(self.spheres) + len(self.planes)
