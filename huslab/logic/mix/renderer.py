#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/logic/mix/renderer.py

from typing import List

from huslab.core import config as c
from huslab.core.color import HuslColor
from huslab.shared.formatting import format_colorspace
from huslab.shared.preview import print_color_block


def render_mix(colors: List[HuslColor]) -> None:
    """Print every blended color as a swatch with its HUSL value."""
    print()
    for i, color in enumerate(colors):
        label = f"{c.MSG_BOLD_COLORS['info']}step{f'{i + 1}':>11}{c.RESET}"
        husl = format_colorspace("husl", color.hue, color.saturation, color.lightness)
        print_color_block(color.to_rgb(), f"{color.to_html_color()}  {husl}", label)
    print()
