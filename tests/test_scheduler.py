"""Unit tests for column-partitioned rendering.

Tests cover:
- Column partitioning (coverage, remainder, clamping)
- One write per pixel and a single publish per pass
- Identical frames regardless of worker count
- Worker failures surfacing without publishing
- Renderer camera switching and pool lifecycle
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from src.whitted.camera import canvas_range
from src.whitted.core.scheduler import Renderer, partition_columns, render
from src.whitted.core.settings import RenderSettings
from src.whitted.core.vector import vec3
from src.whitted.geometry import Sphere
from src.whitted.preview import Framebuffer
from src.whitted.scene import Scene, default_scene


class TestPartitionColumns:
    """Tests for partition_columns()."""

    def test_remainder_goes_to_last_range(self):
        """Test 10 columns over 3 workers."""
        assert partition_columns(10, 3) == [range(-5, -2), range(-2, 1), range(1, 5)]

    def test_single_worker(self):
        """Test one worker owns the whole canvas."""
        assert partition_columns(7, 1) == [canvas_range(7)]

    def test_workers_clamped_to_width(self):
        """Test more workers than columns gives one column per range."""
        ranges = partition_columns(3, 8)
        assert len(ranges) == 3
        assert all(len(r) == 1 for r in ranges)

    @pytest.mark.parametrize("width,workers", [(800, 8), (801, 8), (5, 2), (1, 1)])
    def test_ranges_cover_canvas_once(self, width, workers):
        """Test ranges are contiguous, non-empty and cover every column once."""
        ranges = partition_columns(width, workers)
        columns = [x for r in ranges for x in r]

        assert columns == list(canvas_range(width))
        assert all(len(r) > 0 for r in ranges)

    @pytest.mark.parametrize("width,workers", [(0, 4), (10, 0)])
    def test_invalid_arguments(self, width, workers):
        """Test zero width or zero workers is rejected."""
        with pytest.raises(ValueError):
            partition_columns(width, workers)


@pytest.fixture
def sphere_scene(ambient_scene, matte_red):
    """A red sphere straight ahead under full ambient light."""
    return ambient_scene(Sphere(vec3(0.0, 0.0, 5.0), 1.0, matte_red))


class TestRender:
    """Tests for a single render() pass."""

    def test_every_pixel_written_once(self, sphere_scene, recording_sink, small_settings):
        """Test each pixel is written exactly once and the frame is published once."""
        render(sphere_scene, recording_sink, small_settings)

        expected = {
            (x, y)
            for x in canvas_range(small_settings.canvas_width)
            for y in canvas_range(small_settings.canvas_height)
        }
        assert len(recording_sink.calls) == len(expected)
        assert set(recording_sink.calls) == expected
        assert recording_sink.published == 1

    def test_center_and_corner(self, sphere_scene, small_settings):
        """Test the sphere fills the center and the background the corners."""
        framebuffer = Framebuffer(small_settings.canvas_width, small_settings.canvas_height)
        render(sphere_scene, framebuffer, small_settings)

        assert framebuffer.pixel(0, 0) == (255, 0, 0)
        assert framebuffer.pixel(-12, -9) == (255, 255, 255)

    def test_worker_count_does_not_change_frame(self):
        """Test 1 and 8 workers produce identical frames of the demo scene."""
        scene = default_scene()
        frames = []
        for workers in (1, 8):
            settings = RenderSettings(canvas_width=32, canvas_height=24, workers=workers)
            framebuffer = Framebuffer(32, 24)
            render(scene, framebuffer, settings)
            frames.append(framebuffer.snapshot())

        np.testing.assert_array_equal(frames[0], frames[1])

    def test_worker_failure_propagates(self, sphere_scene, small_settings):
        """Test an exception in a worker is raised and nothing is published."""

        class FailingSink:
            published = 0

            def put_pixel(self, x, y, color):
                if x == 3:
                    raise RuntimeError("sink rejected pixel")

            def publish(self):
                self.published += 1

        sink = FailingSink()
        with pytest.raises(RuntimeError, match="sink rejected pixel"):
            render(sphere_scene, sink, small_settings)
        assert sink.published == 0

    def test_invalid_camera_index(self, sphere_scene, recording_sink, small_settings):
        """Test an unknown camera index is rejected before any work."""
        with pytest.raises(ValueError):
            render(sphere_scene, recording_sink, small_settings, camera_index=5)
        assert recording_sink.calls == []

    def test_caller_executor_left_running(self, sphere_scene, recording_sink, small_settings):
        """Test a caller-supplied pool is reused and not shut down."""
        with ThreadPoolExecutor(max_workers=2) as pool:
            render(sphere_scene, recording_sink, small_settings, executor=pool)
            assert pool.submit(lambda: 42).result() == 42
        assert recording_sink.published == 1


class TestRenderer:
    """Tests for the Renderer driver."""

    def test_initial_state(self, small_settings, recording_sink):
        """Test the renderer starts on camera 0."""
        with Renderer(default_scene(), recording_sink, small_settings) as renderer:
            assert renderer.camera_index == 0
            assert "camera=0" in repr(renderer)

    def test_select_camera_rerenders(self, small_settings):
        """Test switching cameras re-renders the whole frame."""
        framebuffer = Framebuffer(small_settings.canvas_width, small_settings.canvas_height)
        with Renderer(default_scene(), framebuffer, small_settings) as renderer:
            renderer.render()
            first = framebuffer.snapshot()
            renderer.select_camera(1)
            second = framebuffer.snapshot()

        assert renderer.camera_index == 1
        assert framebuffer.publish_count == 2
        assert not np.array_equal(first, second)

    def test_invalid_camera_keeps_current(self, small_settings, recording_sink):
        """Test selecting a missing camera raises and leaves the state unchanged."""
        with Renderer(default_scene(), recording_sink, small_settings) as renderer:
            with pytest.raises(ValueError):
                renderer.select_camera(2)
            assert renderer.camera_index == 0
        assert recording_sink.published == 0

    def test_next_camera_wraps(self, small_settings, recording_sink):
        """Test cycling past the last camera returns to the first."""
        with Renderer(default_scene(), recording_sink, small_settings) as renderer:
            renderer.next_camera()
            assert renderer.camera_index == 1
            renderer.next_camera()
            assert renderer.camera_index == 0
        assert recording_sink.published == 2

    def test_scene_without_cameras(self, small_settings, recording_sink):
        """Test a scene with no cameras cannot be rendered."""
        with pytest.raises(ValueError):
            Renderer(Scene(cameras=()), recording_sink, small_settings)

    def test_closed_renderer_rejects_work(self, small_settings, recording_sink):
        """Test the pool is shut down when the context exits."""
        with Renderer(default_scene(), recording_sink, small_settings) as renderer:
            pass
        with pytest.raises(RuntimeError):
            renderer.render()
