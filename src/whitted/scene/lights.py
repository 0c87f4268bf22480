"""Light source variants.

Three kinds of light contribute to the lighting sum at a surface point:

    AmbientLight      adds its intensity everywhere, no direction, no shadows
    PointLight        radiates from a position; occluders must lie between the
                      point and the light
    DirectionalLight  arrives from a fixed direction at infinite distance

Intensities are conventionally in [0, 1] but are not clamped; the sum over
all lights may exceed 1 and is saturated when applied to a color.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from src.whitted.core.vector import Vec3, as_vec3


@dataclass(frozen=True)
class AmbientLight:
    """Uniform light reaching every surface."""

    intensity: float


@dataclass(frozen=True, eq=False)
class PointLight:
    """Light radiating from a single position."""

    intensity: float
    position: Vec3 | Sequence[float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", as_vec3(self.position))


@dataclass(frozen=True, eq=False)
class DirectionalLight:
    """Light arriving along a fixed direction.

    Attributes:
        intensity: Light intensity.
        direction: Vector pointing from the scene toward the light.
    """

    intensity: float
    direction: Vec3 | Sequence[float]

    def __post_init__(self) -> None:
        direction = as_vec3(self.direction)
        if not direction.any():
            raise ValueError("Directional light direction cannot be zero")
        object.__setattr__(self, "direction", direction)


Light = Union[AmbientLight, PointLight, DirectionalLight]


def light_from_dict(data: dict[str, Any]) -> Light:
    """Build a light from its tagged dictionary form.

    Args:
        data: Mapping with a 'type' of 'ambient', 'point' or 'directional',
            an 'intensity', and a 'position' or 'direction' as required.

    Returns:
        The light.

    Raises:
        ValueError: If the type is unknown, a required field is missing or a
            field has the wrong type.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Light definition must be an object, got {data!r}")
    light_type = str(data.get("type", "")).lower()
    try:
        intensity = float(data["intensity"])
        if light_type == "ambient":
            return AmbientLight(intensity)
        if light_type == "point":
            return PointLight(intensity, data["position"])
        if light_type == "directional":
            return DirectionalLight(intensity, data["direction"])
    except KeyError as exc:
        raise ValueError(f"Light definition is missing {exc.args[0]!r}") from None
    except TypeError as exc:
        raise ValueError(f"Invalid light definition: {exc}") from None
    raise ValueError(f"Unknown light type: {light_type}")


def light_to_dict(light: Light) -> dict[str, Any]:
    """Export a light to its tagged dictionary form."""
    if isinstance(light, AmbientLight):
        return {"type": "ambient", "intensity": light.intensity}
    if isinstance(light, PointLight):
        return {"type": "point", "intensity": light.intensity, "position": light.position.tolist()}
    return {
        "type": "directional",
        "intensity": light.intensity,
        "direction": light.direction.tolist(),
    }
