#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/subcommands/convert.py

import argparse
import sys

from huslab.shared.formatting import format_colorspace
from huslab.shared.logger import HuslabArgumentParser
from huslab.shared.sanitizer import INPUT_HANDLERS, HuslTripleAction
from huslab.logic.convert.engine import run


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = HuslabArgumentParser(
        prog="huslab convert",
        description="huslab convert: convert a color between RGB and HUSL",
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

    ex_rgb = format_colorspace("rgb", 255, 0, 0)
    ex_husl = format_colorspace("husl", 0.0339, 1.0, 0.5324).replace("%", "%%")

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-rgb",
        "--rgb",
        nargs=3,
        metavar=("R", "G", "B"),
        type=INPUT_HANDLERS["byte"],
        help=f"RGB bytes 0-255 to convert to HUSL\nexample: --rgb 255 0 0  ({ex_rgb})",
    )
    input_group.add_argument(
        "-husl",
        "--husl",
        nargs=3,
        metavar=("H", "S", "L"),
        action=HuslTripleAction,
        help=(
            "HUSL hue in degrees, saturation and lightness in percent\n"
            f"example: --husl 12.2 100 53.2  ({ex_husl})"
        ),
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="convert a random RGB color",
    )
    parser.add_argument(
        "-a",
        "--alpha",
        type=INPUT_HANDLERS["alpha"],
        default=1.0,
        help="alpha from 0.0 (transparent) to 1.0 (opaque), default: 1.0",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="print a color swatch of the result",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    run(args)


if __name__ == "__main__":
    main()
