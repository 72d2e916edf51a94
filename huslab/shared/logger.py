#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/shared/logger.py

import sys
import argparse

from huslab.core import config as c

# levels that belong with the command's normal output
STDOUT_LEVELS = ("info", "success")


def log(level: str, message: str) -> None:
    """
    Print ``[level] message`` with the level's ANSI colors.

    ``info`` and ``success`` lines (stage values from ``convert -V``, the hue
    distance from ``mix -V``) share stdout with the converted colors, so they
    stay in piped output. Warnings about clamped or rounded input and argument
    errors go to stderr.
    """
    level = str(level).lower()
    stream = sys.stdout if level in STDOUT_LEVELS else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class HuslabArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors print as ``[error]`` log lines."""

    def error(self, message):
        log('error', message)
        sys.exit(2)
