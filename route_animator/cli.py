"""
Route Animator command line

Loads GPX files (and/or the sample routes), plays the shared timeline with
synthetic ticks and writes one SVG per animation frame.

Usage:
    route-animator ride.gpx run.gpx --speed 2 --output-dir data/frames
    route-animator --samples --shared-frame
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .animation.session import Animator
from .config.config import get_config
from .errors import InvalidArgumentError
from .io.gpx_loader import load_gpx_files
from .visualization.frame_svg import FrameRenderer
from .visualization.projection import Viewport

logger = logging.getLogger("route_animator.cli")


def build_parser(config=None) -> argparse.ArgumentParser:
    config = config or get_config()
    parser = argparse.ArgumentParser(description="Animate GPS tracks on a shared timeline")
    parser.add_argument(
        "files",
        nargs="*",
        help="GPX files to animate"
    )
    parser.add_argument(
        "--samples",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include the built-in sample routes (default: LOAD_SAMPLES, only when no files are given)"
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=config.DEFAULT_SPEED,
        help=f"Playback speed multiplier ({config.MIN_SPEED:g} to {config.MAX_SPEED:g})"
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=config.TICK_INTERVAL_MS,
        help="Wall-clock milliseconds per frame"
    )
    parser.add_argument("--width", type=int, default=config.VIEWPORT_WIDTH, help="Viewport width (px)")
    parser.add_argument("--height", type=int, default=config.VIEWPORT_HEIGHT, help="Viewport height (px)")
    parser.add_argument("--padding", type=int, default=config.VIEWPORT_PADDING, help="Viewport padding (px)")
    parser.add_argument(
        "--shared-frame",
        action="store_true",
        default=config.SHARED_FRAME,
        help="Project all tracks into one geographic frame"
    )
    parser.add_argument(
        "--output-dir",
        default=config.OUTPUT_DIR,
        help="Directory for SVG frames"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=None,
        help="Stop after this many frames"
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Logging level"
    )
    return parser


def run(args: argparse.Namespace, config=None) -> int:
    """Play the animation described by parsed arguments, returning an exit code"""
    config = config or get_config()

    try:
        animator = Animator(config=config, shared_frame=args.shared_frame, speed_multiplier=args.speed)
    except InvalidArgumentError as e:
        logger.error(str(e))
        return 1

    animator.add_tracks(load_gpx_files(args.files, allowed_extensions=config.ALLOWED_EXTENSIONS))

    use_samples = args.samples
    if use_samples is None:
        use_samples = config.LOAD_SAMPLES and not args.files
    if use_samples:
        animator.load_samples()

    if len(animator.collection) == 0:
        logger.error("No tracks to animate")
        return 1

    viewport = Viewport(width=args.width, height=args.height, padding=args.padding)
    renderer = FrameRenderer()
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info(f"Animating {len(animator.collection)} track(s) over {animator.clock.max_duration_ms} ms")

    frame_count = 0
    animator.play()
    while True:
        frame = animator.frame(viewport)
        renderer.save_svg(str(output_dir / f"frame_{frame_count:05d}.svg"), frame)
        frame_count += 1

        if not animator.state.is_playing:
            break
        if args.max_frames is not None and frame_count >= args.max_frames:
            animator.pause()
            break
        animator.tick(args.tick_ms)

    logger.info(f"Wrote {frame_count} frame(s) to {output_dir}")
    summary = animator.summary_frame()
    logger.info("Final positions:\n" + summary.drop(columns=["id"]).to_string(index=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point"""
    config = get_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    return run(args, config)


if __name__ == "__main__":
    sys.exit(main())
