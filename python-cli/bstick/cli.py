"""
BlinkStick - CLI entry point (argparse).
"""

import argparse
import logging

DEFAULT_COLOR = "black"
DEFAULT_LIGHTTYPE = "static"
DEFAULT_DURATION_MS = 300
DEFAULT_TIMES = 5
DEFAULT_STEPS = 15

USAGE = """\
The tool 'bstick' provides simple functions to play with colors for the first found BlinkStick device

Usage:
  bstick -color <colorname>
  bstick -color <colorname> -lighttype blink
Example:
  bstick -color blue -lighttype blink -duration 100 -times 10
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bstick",
        description=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-color", default=DEFAULT_COLOR,
                        help="color (for example, red, lime, white, etc. or off)")
    parser.add_argument("-lighttype", default=DEFAULT_LIGHTTYPE,
                        help="lighttype (static, blink or pulse)")
    parser.add_argument("-duration", type=int, default=DEFAULT_DURATION_MS,
                        help="time between blinks in ms (default: %(default)s)")
    parser.add_argument("-times", type=int, default=DEFAULT_TIMES,
                        help="how many times it should blink or pulse (default: %(default)s)")
    parser.add_argument("-steps", type=int, default=DEFAULT_STEPS,
                        help="steps between pulse color and black (default: %(default)s)")
    parser.add_argument("-list", action="store_true",
                        help="list color names and exit")
    parser.add_argument("-scan", action="store_true",
                        help="list attached BlinkStick devices and exit")
    parser.add_argument("-v", "-verbose", dest="verbose", action="store_true",
                        help="debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    from bstick.commands import cmd_light, cmd_list, cmd_scan

    if args.list:
        return cmd_list()
    if args.scan:
        return cmd_scan()
    return cmd_light(args.color, args.lighttype, args.duration,
                     args.times, args.steps)
