#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/logic/convert/renderer.py

from huslab.core import config as c
from huslab.core.color import HuslColor
from huslab.core.types import RgbBytes
from huslab.shared.formatting import format_colorspace


def bold(t) -> str:
    return f"{c.BOLD_WHITE}{t}{c.RESET}"


def render_husl(color: HuslColor) -> str:
    """Composes a HUSL color into a formatted output string."""
    if color.alpha < c.UNIT:
        return bold(format_colorspace("husla", color.hue, color.saturation, color.lightness, color.alpha))
    return bold(format_colorspace("husl", color.hue, color.saturation, color.lightness))


def render_rgb(rgb: RgbBytes, alpha: float = 1.0) -> str:
    """Composes packed bytes into an rgb()/rgba() string."""
    if alpha < c.UNIT:
        return bold(format_colorspace("rgba", rgb.r, rgb.g, rgb.b, alpha))
    return bold(format_colorspace("rgb", rgb.r, rgb.g, rgb.b))


def render_html(color: HuslColor) -> str:
    return bold(color.to_html_color())
