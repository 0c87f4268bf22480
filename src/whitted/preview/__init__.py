"""Preview module: pixel sinks and visualization.

Components:
    framebuffer: PixelSink protocol and the NumPy-backed Framebuffer
    display: Matplotlib-based preview of a published frame

The render kernel only ever calls put_pixel() and publish(); everything
else here belongs to the presentation side.

Example:
    >>> from src.whitted.preview import Framebuffer, show_preview
    >>> fb = Framebuffer(800, 600)
    >>> render(scene, fb, settings)  # doctest: +SKIP
    >>> show_preview(fb)  # doctest: +SKIP
"""

from src.whitted.preview.display import show_preview
from src.whitted.preview.framebuffer import Framebuffer, PixelSink

__all__ = [
    "Framebuffer",
    "PixelSink",
    "show_preview",
]
