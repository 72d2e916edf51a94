#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/shared/clamping.py

from huslab.core import config as c


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(c.UNIT, v))


def _clamp_byte(v: int) -> int:
    return max(0, min(c.BYTE_MAX, v))


def _nan_to_zero(v: float) -> float:
    """Replace NaN with 0; achromatic colors have no defined hue."""
    return 0.0 if v != v else v
