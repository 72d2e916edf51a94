#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/__init__.py

"""huslab: convert colors between sRGB and HUSL (human-friendly HSL)."""

__version__ = "0.1.0"

from huslab.core.color import HuslColor
from huslab.core.conversions import husl_to_rgb, rgb_to_husl
from huslab.core.types import Husl, Lch, LinearRgb, Luv, Rgb, RgbBytes, Xyz

__all__ = [
    "HuslColor",
    "husl_to_rgb",
    "rgb_to_husl",
    "Husl",
    "Lch",
    "LinearRgb",
    "Luv",
    "Rgb",
    "RgbBytes",
    "Xyz",
]
