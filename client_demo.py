#!/usr/bin/env python3
#
# PROJECT: painter3d
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import argparse
import curses
import logging
import sys

from painter3d.demo import main
from painter3d.logging_config import setup_logging


def parse_args(argv=None):
    """CLI argument parser for the terminal demo."""
    epilog = """\
examples:
  %(prog)s                                   Spinning cube scene
  %(prog)s cobra.obj                         Load OBJ model as the center piece
  %(prog)s --ascii --mono                    ASCII, monochrome
  %(prog)s --show-fills --opacity 0.4        Visible dim faces
  %(prog)s --line-color "#00ff88"           Green center piece
  %(prog)s --log-file demo.log --debug       Per-frame pipeline statistics
keys:
  arrows pan, +/- zoom, 0 reset camera, space add cube, p pause,
  c color, b braille, f facing test, q quit
"""
    parser = argparse.ArgumentParser(
        description="Painter's algorithm 3D terminal demo",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to .obj file")
    parser.add_argument("--mono", action="store_true",
                        help="Force monochrome output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--no-facing", action="store_true",
                        help="Draw planes facing away from the camera too")
    parser.add_argument("--show-fills", action="store_true",
                        help="Light filled plane areas instead of only hiding edges")
    parser.add_argument("--opacity", type=float, default=1.0,
                        help="Opacity of default styles, 0-1 (default: 1.0)")
    parser.add_argument("--interval", type=float, default=0.030,
                        help="Minimum seconds between frames (default: 0.030)")
    parser.add_argument("--scale", type=float, default=0.5,
                        help="Terminal pixels per world unit (default: 0.5)")
    parser.add_argument("--line-color", default=None,
                        help="Outline color of the center piece as #RRGGBB")
    parser.add_argument("--line-width", type=float, default=3.0,
                        help="Outline width before perspective thinning (default: 3.0)")
    parser.add_argument("--log-file", default=None,
                        help="Write log messages to this file")
    parser.add_argument("--debug", action="store_true",
                        help="Log at DEBUG level")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    # curses owns the terminal, so only log to a file
    setup_logging(logging.DEBUG if args.debug else logging.INFO,
                  log_file=args.log_file, console=False)
    try:
        curses.wrapper(lambda s: main(s, args))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.getLogger("painter3d").exception("Demo crashed")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
