#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/core/types.py

"""
Named triples for every stage of the HUSL pipeline.

Each stage function takes and returns its own type, so an XYZ value
cannot be handed to a LUV-stage function by position alone.
"""

from typing import NamedTuple


class Rgb(NamedTuple):
    """Gamma-encoded sRGB, nominally in [0, 1]."""
    r: float
    g: float
    b: float


class LinearRgb(NamedTuple):
    """Linear-light sRGB."""
    r: float
    g: float
    b: float


class Xyz(NamedTuple):
    """CIE 1931 XYZ, Y of the reference white is 1.0."""
    x: float
    y: float
    z: float


class Luv(NamedTuple):
    """CIE 1976 LUV, L in [0, 100]."""
    l: float
    u: float
    v: float


class Lch(NamedTuple):
    """LUV in polar form, H in degrees [0, 360)."""
    l: float
    c: float
    h: float


class Husl(NamedTuple):
    """HUSL as used inside the pipeline: H in degrees, S and L in [0, 100]."""
    h: float
    s: float
    l: float


class RgbBytes(NamedTuple):
    """Packed 8-bit color, every channel an int in [0, 255]."""
    r: int
    g: int
    b: int
    a: int
