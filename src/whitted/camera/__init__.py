"""Camera module for view placement and primary rays.

Components:
    camera: Camera (rigid transform) with primary ray generation
    viewport: Canvas-to-viewport mapping and signed canvas coordinates

Ray generation uses signed canvas coordinates:
    x in [-W/2, W/2): left to right across the image
    y in [-H/2, H/2): bottom to top across the image
"""

from .camera import Camera
from .viewport import canvas_range, canvas_to_viewport

__all__ = [
    "Camera",
    "canvas_range",
    "canvas_to_viewport",
]
