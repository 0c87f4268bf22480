"""Pytest configuration for raytracer tests.

This module provides shared fixtures: simple materials, small scenes built
from them, and render settings sized for fast test passes.
"""

import pytest

from src.whitted.core.settings import RenderSettings
from src.whitted.geometry import Sphere
from src.whitted.materials import Material
from src.whitted.scene import AmbientLight, Scene


@pytest.fixture
def matte_red():
    """A plain red material with no highlights, reflection or transparency."""
    return Material(color=(255, 0, 0))


@pytest.fixture
def ambient_scene():
    """Factory for scenes lit by a single ambient light of the given intensity."""

    def _make(*shapes, intensity=1.0):
        spheres = tuple(shape for shape in shapes if isinstance(shape, Sphere))
        planes = tuple(shape for shape in shapes if not isinstance(shape, Sphere))
        return Scene(spheres=spheres, planes=planes, lights=(AmbientLight(intensity),))

    return _make


@pytest.fixture
def small_settings():
    """Render settings for a tiny canvas with the default viewport."""
    return RenderSettings(canvas_width=24, canvas_height=18, workers=4)


class RecordingSink:
    """PixelSink that records every write for later inspection."""

    def __init__(self):
        self.pixels = {}
        self.calls = []
        self.published = 0

    def put_pixel(self, x, y, color):
        self.pixels[(x, y)] = color
        self.calls.append((x, y))

    def publish(self):
        self.published += 1


@pytest.fixture
def recording_sink():
    """A fresh RecordingSink."""
    return RecordingSink()
