"""
Application entry point.

Usage:
    python -m helix [rectangle|formula] [options]

Options:
    --fps N           Target frame rate [default: 60]
    --max-frames N    Close the window after N frames
    --recompute       Re-derive the formula on every frame instead of once
    --verbose, -v     Enable debug logging

Examples:
    python -m helix
    python -m helix formula
    python -m helix formula --max-frames 120 --recompute
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

import pygame

from . import __version__
from .config import Config, RECTANGLE_CONFIG, FORMULA_CONFIG
from .core.app import Application

CONSOLE_HANDLER = "helix-console"

VARIANTS = {
    "rectangle": RECTANGLE_CONFIG,
    "formula": FORMULA_CONFIG,
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(level)

    # main() can run more than once per process; keep a single console handler
    for handler in root.handlers:
        if handler.get_name() == CONSOLE_HANDLER:
            handler.setLevel(level)
            return

    console = logging.StreamHandler(sys.stdout)
    console.set_name(CONSOLE_HANDLER)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)


def parse_args(argv: Optional[Sequence[str]] = None, variant: Optional[str] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description=f"Helix demo v{__version__}"
    )
    if variant is None:
        parser.add_argument(
            "variant",
            nargs="?",
            choices=sorted(VARIANTS),
            default="rectangle",
            help="Demo to run (default: rectangle)"
        )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Target frame rate, 0 for unpaced (default: 60)"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=None,
        help="Close the window after this many frames"
    )
    parser.add_argument(
        "--recompute",
        action="store_true",
        help="Parse and differentiate the formula on every frame"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)
    if variant is not None:
        args.variant = variant
    return args


def build_config(args: argparse.Namespace) -> Config:
    """Build the demo configuration from parsed arguments."""
    overrides = {}
    if args.fps is not None:
        overrides["target_fps"] = args.fps
    if args.max_frames is not None:
        overrides["max_frames"] = args.max_frames
    if args.recompute:
        overrides["cache_derivative"] = False
    return replace(VARIANTS[args.variant], **overrides)


def main(argv: Optional[Sequence[str]] = None, variant: Optional[str] = None) -> int:
    """Main entry point."""
    args = parse_args(argv, variant)

    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    logger.info(f"Starting {args.variant} demo: {config.window_width}x{config.window_height} @ {config.target_fps} fps")

    app = Application(config)
    try:
        app.run()
    except pygame.error as e:
        logger.error(f"Display error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")

    return 0


def rectangle_main() -> int:
    """Console script for the rectangle demo."""
    return main(variant="rectangle")


def formula_main() -> int:
    """Console script for the formula demo."""
    return main(variant="formula")


if __name__ == "__main__":
    sys.exit(main())
