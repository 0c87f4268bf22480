"""Column-partitioned parallel render pass.

A render pass splits the canvas columns into contiguous, non-overlapping
ranges, one per worker. Every worker traces all pixels in its columns and
writes them to the sink; the scene is shared read-only and no two workers
touch the same pixel, so nothing is locked. Once every worker has finished
the sink is asked to publish the frame.

Workers run on a concurrent.futures.ThreadPoolExecutor. render() creates a
fresh pool per pass by default, or reuses one supplied by the caller.
Renderer keeps a pool alive across passes and re-renders wholesale whenever
the active camera changes.

Example:
    >>> from src.whitted.core.scheduler import Renderer
    >>> from src.whitted.core.settings import RenderSettings
    >>> from src.whitted.preview.framebuffer import Framebuffer
    >>> from src.whitted.scene.default_scene import default_scene
    >>>
    >>> settings = RenderSettings(canvas_width=160, canvas_height=120, workers=4)
    >>> framebuffer = Framebuffer(160, 120)
    >>> with Renderer(default_scene(), framebuffer, settings) as renderer:
    ...     renderer.render()
    ...     renderer.select_camera(1)  # re-renders from the second camera
"""

from __future__ import annotations

import logging
import math
import time
from concurrent.futures import Executor, ThreadPoolExecutor

from src.whitted.camera.camera import Camera
from src.whitted.camera.viewport import canvas_range, canvas_to_viewport
from src.whitted.core.settings import RenderSettings
from src.whitted.core.tracer import trace_ray
from src.whitted.preview.framebuffer import PixelSink
from src.whitted.scene.scene import Scene

logger = logging.getLogger(__name__)

# Primary rays ignore everything between the eye and the viewport plane
PRIMARY_T_MIN = 1.0


def partition_columns(width: int, workers: int) -> list[range]:
    """Split the signed column coordinates of a canvas into worker ranges.

    Args:
        width: Canvas width in pixels.
        workers: Requested number of ranges. Clamped to the width so that no
            range is empty.

    Returns:
        Contiguous ranges covering canvas_range(width) exactly once, in
        left-to-right order. The last range absorbs the remainder.

    Raises:
        ValueError: If width or workers is less than 1.
    """
    if width < 1:
        raise ValueError(f"Canvas width = {width} must be at least 1")
    if workers < 1:
        raise ValueError(f"Worker count = {workers} must be at least 1")

    workers = min(workers, width)
    columns = canvas_range(width)
    segment = width // workers

    ranges = []
    for i in range(workers):
        start = columns.start + i * segment
        stop = columns.stop if i == workers - 1 else start + segment
        ranges.append(range(start, stop))
    return ranges


def render_columns(
    scene: Scene,
    camera: Camera,
    columns: range,
    sink: PixelSink,
    settings: RenderSettings,
) -> int:
    """Trace every pixel in a column range and write it to the sink.

    Args:
        scene: The scene to render (read-only).
        camera: The viewpoint.
        columns: Signed column coordinates owned by this worker.
        sink: Pixel destination.
        settings: Canvas, viewport and recursion configuration.

    Returns:
        The number of pixels written.
    """
    rows = canvas_range(settings.canvas_height)
    count = 0
    for x in columns:
        for y in rows:
            viewport_point = canvas_to_viewport(x, y, settings)
            ray = camera.primary_ray(viewport_point)
            color = trace_ray(scene, ray, PRIMARY_T_MIN, math.inf, settings.max_depth)
            sink.put_pixel(x, y, color)
            count += 1
    return count


def render(
    scene: Scene,
    sink: PixelSink,
    settings: RenderSettings,
    camera_index: int = 0,
    executor: Executor | None = None,
) -> None:
    """Run one complete render pass and publish the frame.

    Blocks until every pixel has been written. An exception raised by any
    worker propagates after all workers have stopped, and the frame is then
    not published.

    Args:
        scene: The scene to render.
        sink: Pixel destination; publish() is called once at the end.
        settings: Render configuration, including the worker count.
        camera_index: Index of the scene camera to render from.
        executor: Optional pool to run the workers on. When omitted a
            ThreadPoolExecutor with settings.workers threads is created for
            this pass and shut down afterwards.

    Raises:
        ValueError: If camera_index does not name a scene camera.
    """
    camera = scene.camera(camera_index)
    segments = partition_columns(settings.canvas_width, settings.workers)
    logger.debug(
        "Rendering %dx%d from camera %d with %d column segment(s)",
        settings.canvas_width,
        settings.canvas_height,
        camera_index,
        len(segments),
    )

    start_time = time.perf_counter()
    pool = executor
    created_pool = False
    if pool is None:
        pool = ThreadPoolExecutor(max_workers=len(segments), thread_name_prefix="render")
        created_pool = True

    try:
        futures = [
            pool.submit(render_columns, scene, camera, columns, sink, settings)
            for columns in segments
        ]
        # Wait for every worker before surfacing the first failure
        results = [future.exception() for future in futures]
        for error in results:
            if error is not None:
                raise error
        pixels = sum(future.result() for future in futures)
    finally:
        if created_pool:
            pool.shutdown(wait=True)

    sink.publish()
    logger.info(
        "Rendered %d pixels in %.2fs", pixels, time.perf_counter() - start_time
    )


class Renderer:
    """A reusable render driver bound to a scene and a sink.

    Keeps a worker pool alive across passes and tracks the active camera.
    Use as a context manager (or call close()) to shut the pool down.

    Attributes:
        scene: The scene being rendered.
        sink: The pixel destination.
        settings: The render configuration.
    """

    def __init__(self, scene: Scene, sink: PixelSink, settings: RenderSettings) -> None:
        """Initialize the renderer.

        Raises:
            ValueError: If the scene has no cameras.
        """
        if not scene.cameras:
            raise ValueError("Scene has no cameras to render from")
        self.scene = scene
        self.sink = sink
        self.settings = settings
        self._camera_index = 0
        self._pool = ThreadPoolExecutor(
            max_workers=min(settings.workers, settings.canvas_width),
            thread_name_prefix="render",
        )

    @property
    def camera_index(self) -> int:
        """Get the index of the active camera."""
        return self._camera_index

    def render(self) -> None:
        """Render the full frame from the active camera."""
        render(self.scene, self.sink, self.settings, self._camera_index, self._pool)

    def select_camera(self, index: int) -> None:
        """Switch the active camera and re-render.

        Raises:
            ValueError: If the scene has no camera at that index.
        """
        self.scene.camera(index)
        self._camera_index = index
        logger.debug("Switched to camera %d", index)
        self.render()

    def next_camera(self) -> None:
        """Cycle to the next camera (wrapping) and re-render."""
        self.select_camera((self._camera_index + 1) % len(self.scene.cameras))

    def close(self) -> None:
        """Shut down the worker pool."""
        self._pool.shutdown(wait=True)

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        """Return a string representation of the renderer state."""
        return (
            f"Renderer(width={self.settings.canvas_width}, "
            f"height={self.settings.canvas_height}, camera={self._camera_index})"
        )
