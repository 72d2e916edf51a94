#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/subcommands/mix.py

import argparse
import sys

from huslab.core import config as c
from huslab.shared.logger import HuslabArgumentParser
from huslab.shared.sanitizer import INPUT_HANDLERS, HuslTripleAction
from huslab.logic.mix.engine import run


def get_mix_parser() -> argparse.ArgumentParser:
    """Create argument parser for mix command."""
    parser = HuslabArgumentParser(
        prog="huslab mix",
        description="huslab mix: blend two HUSL colors channel by channel",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-c1",
        "--first",
        nargs=3,
        required=True,
        metavar=("H", "S", "L"),
        action=HuslTripleAction,
        help="first color: hue in degrees, saturation and lightness in percent",
    )
    parser.add_argument(
        "-c2",
        "--second",
        nargs=3,
        required=True,
        metavar=("H", "S", "L"),
        action=HuslTripleAction,
        help="second color: hue in degrees, saturation and lightness in percent",
    )
    parser.add_argument(
        "-a1",
        "--alpha1",
        type=INPUT_HANDLERS["alpha"],
        default=1.0,
        help="alpha of the first color (default: 1.0)",
    )
    parser.add_argument(
        "-a2",
        "--alpha2",
        type=INPUT_HANDLERS["alpha"],
        default=1.0,
        help="alpha of the second color (default: 1.0)",
    )
    parser.add_argument(
        "-R",
        "--ratio",
        type=INPUT_HANDLERS["ratio"],
        default=c.DEFAULT_MIX_RATIO,
        help=f"weight of the first color, 0.0 to 1.0 (default: {c.DEFAULT_MIX_RATIO})",
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["steps"],
        default=c.DEFAULT_MIX_STEPS,
        help=(
            "number of colors from first to second; overrides --ratio when above 1\n"
            f"(default: {c.DEFAULT_MIX_STEPS}, max: {c.MAX_STEPS})"
        ),
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="log the hue distance between the two colors",
    )
    return parser


def main() -> None:
    """Main entry point for mix command."""
    parser = get_mix_parser()
    args = parser.parse_args(sys.argv[1:])
    run(args)


if __name__ == "__main__":
    main()
