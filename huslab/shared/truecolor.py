#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """
    Advertise 24-bit color support before a subcommand runs.

    Swatches from ``convert -p`` and ``mix`` are drawn with ``48;2;R;G;B``
    escapes, which need a truecolor terminal to show the exact RGB bytes.
    """
    if sys.platform == "win32":
        return
    os.environ.setdefault("COLORTERM", "truecolor")
    if os.environ["COLORTERM"] not in ("truecolor", "24bit"):
        os.environ["COLORTERM"] = "truecolor"
