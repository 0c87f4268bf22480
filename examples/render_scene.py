#!/usr/bin/env python3
"""Render a scene and show it in a preview window.

This script runs one full render pass of the demo scene (or a JSON scene
file) across a pool of worker threads and displays the result with
Matplotlib.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH       Canvas width in pixels (default: 800)
    --height HEIGHT     Canvas height in pixels (default: 600)
    --workers N         Number of column segments rendered in parallel (default: 8)
    --depth DEPTH       Recursion depth for reflection/refraction (default: 2)
    --scene PATH        JSON scene file (default: built-in demo scene)
    --camera INDEX      Camera to render from (default: 0)
    --log-level LEVEL   Logging level (default: INFO)
    --no-preview        Render without opening a preview window

Example:
    python -m examples.render_scene --width 320 --height 240 --camera 1
"""

from __future__ import annotations

import argparse
import logging
import sys


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene with the recursive ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=800,
        help="Canvas width in pixels (default: 800)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=600,
        help="Canvas height in pixels (default: 600)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=8,
        help="Number of column segments rendered in parallel (default: 8)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=2,
        help="Recursion depth for reflection/refraction (default: 2)",
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file (default: built-in demo scene)",
    )
    parser.add_argument(
        "--camera",
        type=int,
        default=0,
        help="Camera to render from (default: 0)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--no-preview",
        action="store_true",
        help="Render without opening a preview window",
    )
    return parser.parse_args()


def render_scene(args: argparse.Namespace) -> None:
    """Build the scene and settings from arguments, render, and preview."""
    # Lazy imports so --help works without the numeric stack
    from src.whitted.core.scheduler import Renderer
    from src.whitted.core.settings import RenderSettings
    from src.whitted.preview import Framebuffer, show_preview
    from src.whitted.scene import default_scene, load_scene

    scene = load_scene(args.scene) if args.scene else default_scene()
    settings = RenderSettings(
        canvas_width=args.width,
        canvas_height=args.height,
        workers=args.workers,
        max_depth=args.depth,
    )
    framebuffer = Framebuffer(settings.canvas_width, settings.canvas_height)

    with Renderer(scene, framebuffer, settings) as renderer:
        renderer.select_camera(args.camera)

    if not args.no_preview:
        show_preview(framebuffer, title=f"Raytracer View - camera {args.camera}")


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        render_scene(args)
        return 0
    except (OSError, ValueError) as e:
        logging.getLogger(__name__).error("Render failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
