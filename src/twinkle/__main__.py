#!/usr/bin/env python3
"""
Twinkle CLI Tool
================

Renders the rising, twinkling particle background to a video file or shows
it live in a preview window. It uses OpenCV for drawing and MoviePy for
encoding.

Features:
- Parcels of particles spawned once per second along the view's top band.
- Upward drift with randomised speeds; particles are removed as they exit.
- Opacity "twinkle" on every particle.
- Seeded randomness for reproducible renders.

Usage:
    python -m twinkle --output particles.mp4 --color "#ffd27f" --color "#7fd4ff"
    python -m twinkle --preview
    python -m twinkle -h (for help)
"""

import argparse
import logging
import sys
import time

import cv2
from moviepy import VideoClip

from twinkle.constants import (
    BACKGROUND_COLOR,
    DEFAULT_DURATION,
    DEFAULT_FPS,
    DEFAULT_OUTPUT,
    DEFAULT_RESOLUTION,
    EXIT_TIMING,
    MAX_RADIUS,
    MINIMUM_RADIUS,
    PARCEL_SIZE,
    SPAWN_BAND,
)
from twinkle.generator import ParticleGenerator
from twinkle.randomness import make_rng
from twinkle.renderer import ParticleRenderer
from twinkle.timing import TIMING_FUNCTIONS, timing_function
from twinkle.view import View

logger = logging.getLogger(__name__)

PREVIEW_WINDOW = "twinkle"


def parse_color(value):
    """Parse '#rrggbb' (or 'rrggbb') into an OpenCV BGR tuple."""
    text = value.strip().lstrip("#")
    if len(text) != 6:
        raise ValueError(f"expected #rrggbb, got {value!r}")
    r, g, b = (int(text[i : i + 2], 16) for i in (0, 2, 4))
    return (b, g, r)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Render a rising, twinkling particle background."
    )
    parser.add_argument(
        "--output", "-o", default=DEFAULT_OUTPUT, help="Path to output video file"
    )
    parser.add_argument("--width", type=int, default=DEFAULT_RESOLUTION[0], help="Video width")
    parser.add_argument("--height", type=int, default=DEFAULT_RESOLUTION[1], help="Video height")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Frames per second")
    parser.add_argument(
        "--duration", type=float, default=DEFAULT_DURATION, help="Length in seconds"
    )
    parser.add_argument(
        "--parcel-size", type=int, default=PARCEL_SIZE, help="Particles spawned per second"
    )
    parser.add_argument("--min-radius", type=float, default=MINIMUM_RADIUS, help="Minimum particle size")
    parser.add_argument("--max-radius", type=float, default=MAX_RADIUS, help="Maximum particle size")
    parser.add_argument(
        "--spawn-band",
        type=float,
        default=SPAWN_BAND,
        help="Height of the band particles are scattered over (0 = single line)",
    )
    parser.add_argument(
        "--exit-timing",
        choices=sorted(TIMING_FUNCTIONS),
        default=EXIT_TIMING,
        help="Pacing of the upward drift",
    )
    parser.add_argument(
        "--color",
        action="append",
        default=[],
        help="Particle color as #rrggbb (repeatable)",
    )
    parser.add_argument("--background", default=None, help="Background color as #rrggbb")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--preview", action="store_true", help="Show a live window instead of writing a file"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def validate(args):
    """Exit with a message on unusable arguments."""
    if args.width <= 0 or args.height <= 0:
        sys.exit(f"[!] Invalid resolution: {args.width}x{args.height}")
    if args.fps <= 0:
        sys.exit(f"[!] Invalid fps: {args.fps}")
    if args.duration <= 0:
        sys.exit(f"[!] Invalid duration: {args.duration}")
    if args.parcel_size < 0:
        sys.exit(f"[!] Invalid parcel size: {args.parcel_size}")
    if args.min_radius < 0 or args.max_radius < 0:
        sys.exit("[!] Radii must not be negative")
    if args.min_radius > args.max_radius:
        sys.exit(f"[!] Minimum radius {args.min_radius} exceeds maximum radius {args.max_radius}")
    if args.spawn_band < 0:
        sys.exit(f"[!] Invalid spawn band: {args.spawn_band}")

    try:
        colors = [parse_color(c) for c in args.color]
        background = parse_color(args.background) if args.background else BACKGROUND_COLOR
    except ValueError as e:
        sys.exit(f"[!] Invalid color: {e}")
    return colors, background


def build_scene(args, colors, background):
    """Wire a view, renderer and running generator together."""
    view = View(args.width, args.height)
    renderer = ParticleRenderer(view, args.fps, background=background)

    generator = ParticleGenerator(view, run_loop=renderer.run_loop, rng=make_rng(args.seed))
    generator.parcel_size = args.parcel_size
    generator.colors = colors
    generator.minimum_radius = args.min_radius
    generator.max_radius = args.max_radius
    generator.spawn_band = args.spawn_band
    generator.exit_timing = timing_function(args.exit_timing)
    generator.start()
    return view, renderer, generator


def run_preview(renderer, duration):
    """Plays the scene in real time until `duration` elapses or q/Esc is hit."""
    logger.info("[+] Previewing... press q or Esc to quit")
    frame_time = 1.0 / renderer.fps
    start = time.monotonic()
    try:
        while True:
            t = time.monotonic() - start
            if t >= duration:
                break
            cv2.imshow(PREVIEW_WINDOW, renderer.make_frame(t))
            delay = max(1, int((frame_time - (time.monotonic() - start - t)) * 1000))
            if (cv2.waitKey(delay) & 0xFF) in (ord("q"), 27):
                break
    finally:
        cv2.destroyWindow(PREVIEW_WINDOW)


def run_export(renderer, duration, output, fps):
    # MoviePy expects RGB, the renderer draws BGR for OpenCV
    def make_frame_wrapper(t):
        frame = renderer.make_frame(t)
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

    video_clip = VideoClip(make_frame_wrapper, duration=duration)

    logger.info("[+] Rendering video... (This may take a while)")
    video_clip.write_videofile(
        output,
        fps=fps,
        codec="libx264",
        audio=False,
        threads=4,
        preset="medium",
        logger="bar",
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    colors, background = validate(args)

    logger.info(f"[+] Preparing render: {args.width}x{args.height} @ {args.fps}fps")
    logger.info(f"[+] Duration: {args.duration:.2f} seconds")
    if not colors:
        logger.info("[i] No colors given, particles will use the default color.")

    _, renderer, generator = build_scene(args, colors, background)
    try:
        if args.preview:
            run_preview(renderer, args.duration)
        else:
            run_export(renderer, args.duration, args.output, args.fps)
    finally:
        generator.stop()

    logger.info(f"[+] Done! {renderer.frames_rendered} frames rendered.")
    if not args.preview:
        logger.info(f"[+] Saved to {args.output}")


if __name__ == "__main__":
    main()
