#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/main.py

import argparse
import sys

from huslab import __version__
from huslab.subcommands.command_registry import SUBCOMMANDS
from huslab.shared.logger import log, HuslabArgumentParser
from huslab.shared.truecolor import ensure_truecolor


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the bare huslab command."""
    parser = HuslabArgumentParser(
        prog="huslab",
        description=(
            "huslab: convert colors between RGB and HUSL (human-friendly HSL)\n"
            f"commands: {', '.join(SUBCOMMANDS)}"
        ),
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
        "-v",
        "--version",
        action="version",
        version=f"huslab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace) -> None:
    """Entry point when no subcommand was routed."""
    parser = get_main_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    parser.print_help()


def main() -> None:
    """Main entry point for huslab CLI"""
    # Subcommand Routing
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()
    handle_main_command(args)


if __name__ == "__main__":
    main()
