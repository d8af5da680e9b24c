#!/usr/bin/env python3
"""
BlinkStick - Python CLI

Light the first attached BlinkStick with a named color and a pattern.

Usage:
    python bstick_cli.py -color <name> [-lighttype static|blink|pulse]
                         [-duration ms] [-times n] [-steps n]

Flags:
    -color <name>        CSS/X11 color name or 'off' (default: black)
    -lighttype <kind>    static, blink or pulse (default: static)
    -list                Show known color names
    -scan                Show attached BlinkStick devices
"""

import sys
from bstick.cli import main

if __name__ == "__main__":
    sys.exit(main())
