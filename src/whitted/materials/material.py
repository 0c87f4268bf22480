"""Surface material shared by all shape types.

A material blends three contributions at a hit point: its own (local) color,
the color seen along the reflected ray, and the color seen through the
surface. The weights are reflectivity and transparency, with the remaining
weight 1 - reflectivity - transparency going to the local color. That
remaining weight must not go negative, so the energy invariant

    reflectivity + transparency <= 1

is checked when the material is constructed rather than at render time.

Example:
    >>> from src.whitted.materials.material import Material
    >>> glass = Material(color=(230, 230, 255), specularity=300.0,
    ...                  reflectivity=0.1, transparency=0.8, refractivity=1.5)
    >>> glass.local_weight  # doctest: +SKIP
    0.1
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.whitted.materials.color import Color, parse_color

# Slack allowed on the energy invariant for values like 0.7 + 0.3
ENERGY_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Material:
    """Surface appearance parameters.

    Attributes:
        color: Local surface color as 8-bit RGB.
        specularity: Phong-style specular exponent. 0 disables the specular
            term; larger values give sharper highlights.
        reflectivity: Weight of the mirror-reflected color in [0, 1].
        transparency: Weight of the transmitted color in [0, 1].
        refractivity: Index of refraction used to bend transmitted rays.
            0 disables bending.
    """

    color: Color
    specularity: float = 0.0
    reflectivity: float = 0.0
    transparency: float = 0.0
    refractivity: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", parse_color(self.color))

        if self.specularity < 0.0:
            raise ValueError(
                f"Specularity = {self.specularity} is negative. Use 0.0 to disable highlights."
            )
        if not 0.0 <= self.reflectivity <= 1.0:
            raise ValueError(f"Reflectivity = {self.reflectivity} is outside [0, 1]")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"Transparency = {self.transparency} is outside [0, 1]")
        if self.reflectivity + self.transparency > 1.0 + ENERGY_TOLERANCE:
            raise ValueError(
                f"Reflectivity + transparency = {self.reflectivity + self.transparency} "
                "exceeds 1.0; the local color weight would be negative."
            )
        if self.refractivity < 0.0:
            raise ValueError(
                f"Refractivity = {self.refractivity} is negative. Use 0.0 to disable bending."
            )

    @property
    def local_weight(self) -> float:
        """Weight of the material's own color in the final blend."""
        return max(0.0, 1.0 - self.reflectivity - self.transparency)

    def to_dict(self) -> dict[str, Any]:
        """Export the material parameters (for JSON serialization)."""
        return {
            "color": list(self.color),
            "specularity": self.specularity,
            "reflectivity": self.reflectivity,
            "transparency": self.transparency,
            "refractivity": self.refractivity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Material:
        """Build a material from its dictionary form.

        Missing optional fields take their defaults; color is required.

        Raises:
            ValueError: If the color is missing or any field is invalid.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Material definition must be an object, got {data!r}")
        if "color" not in data:
            raise ValueError("Material definition is missing 'color'")
        try:
            return cls(
                color=parse_color(data["color"]),
                specularity=float(data.get("specularity", 0.0)),
                reflectivity=float(data.get("reflectivity", 0.0)),
                transparency=float(data.get("transparency", 0.0)),
                refractivity=float(data.get("refractivity", 0.0)),
            )
        except TypeError as exc:
            raise ValueError(f"Invalid material definition: {exc}") from None
