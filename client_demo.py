#!/usr/bin/env python3
#
# PROJECT: donut-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from donut_cli_renderer.config import ConfigError, DEFAULT_RAMP
from donut_cli_renderer.demo import main as demo_main


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
commands (type while it spins, one per line):
  0.05            set both rotation speeds
  s1 0.02         rotation speed around X      s2 0.04   around Z
  k1 40           projection scale             k2 6      viewer distance
  l 0 1 -1        light direction (its length scales brightness)
  stop / start    pause / resume
  quit            exit

examples:
  %(prog)s                                   Fit the donut to the terminal
  %(prog)s --r1 0.5 --r2 3 --speed1 0.05     Thin ring, faster spin
  %(prog)s --scale-rows                      Rows follow K1, full-height donut
  %(prog)s --keep-backfaces --light 0 2 -2   Unculled back faces, brighter light
  %(prog)s --frames 1 --width 40 --height 20 < /dev/null   Print a single frame
"""
    parser = argparse.ArgumentParser(
        description="CLI ASCII Torus Renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--r1", type=float, default=1.0,
                        help="Tube radius (default: 1.0)")
    parser.add_argument("--r2", type=float, default=2.0,
                        help="Ring radius (default: 2.0)")
    parser.add_argument("--step-theta", type=float, default=0.07,
                        help="Angular step around the tube, radians (default: 0.07)")
    parser.add_argument("--step-phi", type=float, default=0.02,
                        help="Angular step around the ring, radians (default: 0.02)")
    parser.add_argument("--width", type=int, default=0,
                        help="Frame width in characters (default: terminal width)")
    parser.add_argument("--height", type=int, default=0,
                        help="Frame height in lines (default: terminal height - 1)")
    parser.add_argument("--k1", type=float, default=None,
                        help="Projection scale K1 (default: fit to screen)")
    parser.add_argument("--k2", type=float, default=5.0,
                        help="Viewer distance K2 (default: 5.0)")
    parser.add_argument("--speed1", type=float, default=0.01,
                        help="Rotation per frame around X, radians (default: 0.01)")
    parser.add_argument("--speed2", type=float, default=0.01,
                        help="Rotation per frame around Z, radians (default: 0.01)")
    parser.add_argument("--light", type=float, nargs=3, default=[0.0, 1.0, -1.0],
                        metavar=("X", "Y", "Z"),
                        help="Light direction, not normalized (default: 0 1 -1)")
    parser.add_argument("--ramp", default=DEFAULT_RAMP,
                        help=f"Glyphs from dimmest to brightest (default: {DEFAULT_RAMP!r})")
    parser.add_argument("--interval", type=float, default=0.05,
                        help="Seconds between frames (default: 0.05)")
    parser.add_argument("--frames", type=int, default=0,
                        help="Stop after this many frames, 0 = run forever (default: 0)")
    parser.add_argument("--keep-backfaces", action="store_true",
                        help="Let unlit samples take part in the depth test as blanks")
    parser.add_argument("--scale-rows", action="store_true",
                        help="Scale row offsets by K1 too, so the picture keeps its "
                             "proportions (default: rows are y / z / 2)")
    parser.add_argument("--paused", action="store_true",
                        help="Start paused")
    parser.add_argument("--exit-on-eof", action="store_true",
                        help="Exit when standard input is closed")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging (INFO level)")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging (DEBUG level)")
    parser.add_argument("--log-file", default=None,
                        help="Write log messages to this file instead of stderr")
    return parser.parse_args(argv)


def setup_logging(verbose=False, debug=False, log_file=None):
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, filename=log_file,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def run(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose, args.debug, args.log_file)
    try:
        demo_main(args)
    except KeyboardInterrupt:
        pass
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(run())
