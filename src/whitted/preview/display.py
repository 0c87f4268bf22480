"""Matplotlib-based preview of a published framebuffer.

This is presentation code: it only reads the last published frame and never
touches the render kernel.

Example:
    >>> from src.whitted.preview.display import show_preview
    >>> show_preview(framebuffer, title="Camera 0")  # doctest: +SKIP
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.whitted.preview.framebuffer import Framebuffer


def show_preview(
    framebuffer: Framebuffer,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display the published frame as a Matplotlib figure.

    Args:
        framebuffer: The framebuffer to display.
        title: Custom title (default shows resolution and frame count).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)

    # uint8 RGB is displayed as-is, no normalization
    ax.imshow(framebuffer.snapshot(), interpolation="nearest")
    ax.axis("off")

    if title is None:
        title = (
            f"Render Preview - {framebuffer.width}x{framebuffer.height} "
            f"(frame {framebuffer.publish_count})"
        )
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
