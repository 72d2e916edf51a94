#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/logic/mix/engine.py

import argparse
from typing import List

from huslab.core import config as c
from huslab.core.color import HuslColor
from huslab.shared.logger import log
from .renderer import render_mix


def get_mix_ratios(ratio: float, steps: int) -> List[float]:
    """Weights of the first color for each output step."""
    if steps <= 1:
        return [ratio]
    return [c.UNIT - i / (steps - 1) for i in range(steps)]


def blend(first: HuslColor, second: HuslColor, ratio: float, steps: int) -> List[HuslColor]:
    """Blend two HUSL colors once, or in evenly spaced steps from first to second."""
    return [HuslColor.mix(first, second, t) for t in get_mix_ratios(ratio, steps)]


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the mix command"""
    h1, s1, l1 = args.first
    h2, s2, l2 = args.second
    first = HuslColor(h1 / c.HUE_MAX, s1 / c.PERCENT, l1 / c.PERCENT, args.alpha1)
    second = HuslColor(h2 / c.HUE_MAX, s2 / c.PERCENT, l2 / c.PERCENT, args.alpha2)

    if args.verbose:
        distance = HuslColor.hue_distance(first, second) * c.HUE_MAX
        log("info", f"hue distance {distance:.2f}deg")

    render_mix(blend(first, second, args.ratio, args.steps))
