"""Materials module for surface appearance.

Components:
    color: 8-bit RGB colors with saturating arithmetic
    material: Material parameters (color, specularity, reflectivity,
        transparency, refractivity) with construction-time validation

All materials share a single model: a local Phong-lit color blended with
recursively traced reflected and transmitted colors.
"""

from .color import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    MAGENTA,
    NAMED_COLORS,
    RED,
    WHITE,
    YELLOW,
    Color,
    add_colors,
    parse_color,
    scale_color,
)
from .material import Material

__all__ = [
    "Color",
    "Material",
    "scale_color",
    "add_colors",
    "parse_color",
    "NAMED_COLORS",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "MAGENTA",
    "CYAN",
]
