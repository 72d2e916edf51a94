#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/logic/convert/resolver.py

import argparse
import random
from typing import Tuple

from huslab.core import config as c
from huslab.core import conversions as conv
from huslab.core.color import HuslColor
from huslab.core.types import RgbBytes


def resolve_convert_input(args: argparse.Namespace) -> Tuple[str, RgbBytes, HuslColor]:
    """Resolves the command line input into (source format, RGB bytes, HUSL color)."""
    alpha = args.alpha

    if args.husl is not None:
        h, s, l = args.husl
        color = HuslColor(h / c.HUE_MAX, s / c.PERCENT, l / c.PERCENT, alpha)
        return "husl", color.to_rgb(), color

    if args.random:
        r, g, b = (random.randint(0, c.BYTE_MAX) for _ in range(3))
    else:
        r, g, b = args.rgb

    rgb = RgbBytes(r, g, b, conv.to_byte(alpha))
    color = HuslColor(*conv.rgb_to_husl(conv.from_byte(r), conv.from_byte(g), conv.from_byte(b), alpha))
    return "rgb", rgb, color
