#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/core/gamut.py

"""
Gamut normalization between LCH and HUSL.

HUSL saturation is chroma expressed as a percentage of the largest chroma
that stays inside the sRGB cube for the same lightness and hue. That
largest chroma is found by walking a ray of constant hue out from the
neutral axis and stopping at the first of the six cube faces
(R, G, B = 0 or 1) it crosses.
"""

import math

from . import config as c
from .types import Husl, Lch


def max_chroma(L: float, H: float) -> float:
    """
    Largest in-gamut chroma for lightness L (0-100) and hue H (degrees).

    Returns ``math.inf`` when no face of the cube is crossed, which only
    happens at L == 0.
    """
    hrad = math.radians(H)
    sin_h = math.sin(hrad)
    cos_h = math.cos(hrad)

    sub1 = (L + c.LAB_L_SUB) ** 3 / c.GAMUT_LUM_CUBE_DIV
    sub2 = sub1 if sub1 > c.LAB_E else L / c.LAB_K

    result = math.inf
    for m1, m2, m3 in c.M_XYZ_RGB:
        top = (c.GAMUT_TOP_M1 * m1 + c.GAMUT_TOP_M2 * m2 + c.GAMUT_TOP_M3 * m3) * sub2
        rbottom = c.GAMUT_RBOTTOM_M3 * m3 - c.GAMUT_RBOTTOM_M2 * m2
        lbottom = c.GAMUT_LBOTTOM_M3 * m3 - c.GAMUT_LBOTTOM_M1 * m1
        bottom = (rbottom * sin_h + lbottom * cos_h) * sub2

        for t in c.GAMUT_LIMITS:
            denom = bottom + c.GAMUT_RBOTTOM_M2 * sin_h * t
            if denom == 0:
                continue
            chroma = L * (top - c.GAMUT_TOP_M2 * t) / denom
            if 0 < chroma < result:
                result = chroma
    return result


def husl_to_lch(husl: Husl) -> Lch:
    """Scale saturation (percent of the gamut boundary) into absolute chroma."""
    H, S, L = husl
    if L > c.LIGHTNESS_WHITE_TH:
        return Lch(c.PERCENT, 0.0, H)
    if L < c.LIGHTNESS_BLACK_TH:
        return Lch(0.0, 0.0, H)
    return Lch(L, max_chroma(L, H) / c.PERCENT * S, H)


def lch_to_husl(lch: Lch) -> Husl:
    """Express chroma as a percentage of the gamut boundary."""
    L, C, H = lch
    # white and black have no hue
    if L > c.LIGHTNESS_WHITE_TH:
        return Husl(0.0, 0.0, c.PERCENT)
    if L < c.LIGHTNESS_BLACK_TH:
        return Husl(0.0, 0.0, 0.0)
    return Husl(H, C / max_chroma(L, H) * c.PERCENT, L)
