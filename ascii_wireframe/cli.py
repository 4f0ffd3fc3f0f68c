#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import sys

from . import demo
from .config import RenderConfig
from .errors import InvalidGeometryError
from .logging_config import setup_logging
from .math_utils import Vec3
from .mesh import Mesh

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Command-line flags for the spinning-cube demo."""
    epilog = """\
examples:
  %(prog)s                                   Spinning cube in a curses window
  %(prog)s --plain                           Print frames to stdout with ANSI cursor-home
  %(prog)s --plain --frames 1 --no-ansi      Dump a single frame as plain text
  %(prog)s --fov 60 --distance 4 --size 8    Narrower lens, further away
  %(prog)s --log-file spin.log -v            Debug log to a file
"""
    parser = argparse.ArgumentParser(
        description="ASCII wireframe spinner",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=80,
                        help="Frame width in characters (default: 80)")
    parser.add_argument("--height", type=int, default=40,
                        help="Frame height in characters (default: 40)")
    parser.add_argument("--fov", type=float, default=90.0,
                        help="Field of view in degrees (default: 90)")
    parser.add_argument("--distance", type=float, default=3.0,
                        help="Camera distance along Z (default: 3.0)")
    parser.add_argument("--size", type=float, default=12.0,
                        help="Object projection scale (default: 12.0)")
    parser.add_argument("--scale", type=float, default=1.0,
                        help="Screen mapping scale (default: 1.0)")
    parser.add_argument("--x-step", type=float, default=5.7,
                        help="Degrees about X per frame (default: 5.7)")
    parser.add_argument("--y-step", type=float, default=11.5,
                        help="Degrees about Y per frame (default: 11.5)")
    parser.add_argument("--delay", type=float, default=0.1,
                        help="Seconds between frames (default: 0.1)")
    parser.add_argument("--char", default=".",
                        help="Character used for drawn cells (default: '.')")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames")
    parser.add_argument("--plain", action="store_true",
                        help="Write frames to stdout instead of using curses")
    parser.add_argument("--no-ansi", action="store_true",
                        help="Do not emit cursor escape sequences in --plain mode")
    parser.add_argument("--log-file", default=None,
                        help="Write log output to this file instead of stderr")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More log output (-v info, -vv debug)")
    return parser.parse_args(argv)


def config_from_args(args) -> RenderConfig:
    """Build a RenderConfig from parsed flags; ValueError on bad values."""
    overrides = dict(
        width=args.width,
        height=args.height,
        fov=args.fov,
        camera_distance=args.distance,
        mesh_size=args.size,
        screen_scale=args.scale,
        x_step=args.x_step,
        y_step=args.y_step,
        frame_delay=args.delay,
        mark_char=args.char,
    )
    if args.no_ansi:
        overrides['use_ansi'] = False
    return RenderConfig.detect_terminal(**overrides)


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(argv=None) -> int:
    args = parse_args(argv)
    # curses owns the terminal; stderr output would tear the frame
    setup_logging(_log_level(args.verbose), args.log_file, console=args.plain)

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    mesh = Mesh.cube(size=config.mesh_size, center=Vec3(0.0, 0.0, 0.0))
    logger.info("Rendering %r at %dx%d", mesh, config.width, config.height)

    try:
        if args.plain:
            demo.StreamApp(config, mesh).run(max_frames=args.frames)
        else:
            curses.wrapper(lambda s: demo.main(s, config, mesh, max_frames=args.frames))
    except KeyboardInterrupt:
        pass
    except InvalidGeometryError as e:
        logger.error("Invalid mesh: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run():
    sys.exit(main())
