#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/logic/convert/engine.py

import argparse
import random

from huslab.core import config as c
from huslab.core import conversions as conv
from huslab.core.types import Rgb
from huslab.shared.formatting import format_colorspace
from huslab.shared.logger import log
from huslab.shared.preview import print_color_block
from .resolver import resolve_convert_input
from .renderer import render_html, render_husl, render_rgb


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    if args.seed is not None:
        random.seed(args.seed)

    source, rgb, color = resolve_convert_input(args)

    if source == "rgb":
        out = render_husl(color)
        src = render_rgb(rgb, args.alpha)
    else:
        out = render_html(color)
        src = render_husl(color)

    if args.verbose:
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
        channels = Rgb(conv.from_byte(rgb.r), conv.from_byte(rgb.g), conv.from_byte(rgb.b))
        xyz = conv.linear_to_xyz(conv.rgb_to_linear(channels))
        luv = conv.xyz_to_luv(xyz)
        lch = conv.luv_to_lch(luv)
        log("info", f"via {format_colorspace('xyz', *xyz)}")
        log("info", f"via {format_colorspace('luv', *luv)}")
        log("info", f"via {format_colorspace('lch', *lch)}")
        if source == "rgb" and color.saturation == 0 and color.hue == 0:
            log("info", "achromatic color, hue reported as 0")
    else:
        print(out)

    if args.preview:
        print_color_block(rgb, color.to_html_color())
