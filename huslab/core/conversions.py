#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from .gamut import husl_to_lch, lch_to_husl
from .types import Husl, Lch, LinearRgb, Luv, Rgb, RgbBytes, Xyz
from huslab.shared.clamping import _clamp01, _clamp_byte, _nan_to_zero


# ==========================================
# sRGB Transfer Stage
# ==========================================


def to_linear(color_comp: float) -> float:
    """Linearize an sRGB component."""
    if color_comp > c.SRGB_TO_LINEAR_TH:
        return ((color_comp + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA
    return color_comp / c.SRGB_SLOPE


def from_linear(l_val: float) -> float:
    """Apply sRGB gamma to a linear component."""
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def rgb_to_linear(rgb: Rgb) -> LinearRgb:
    """Convert gamma-encoded RGB to linear RGB."""
    return LinearRgb(to_linear(rgb.r), to_linear(rgb.g), to_linear(rgb.b))


def linear_to_rgb(lin: LinearRgb) -> Rgb:
    """Convert linear RGB to gamma-encoded RGB."""
    return Rgb(from_linear(lin.r), from_linear(lin.g), from_linear(lin.b))


# ==========================================
# Matrix Stage
# ==========================================


def _dot(row: Tuple[float, float, float], vec: Tuple[float, float, float]) -> float:
    return row[0] * vec[0] + row[1] * vec[1] + row[2] * vec[2]


def linear_to_xyz(lin: LinearRgb) -> Xyz:
    """Convert linear RGB to CIE XYZ."""
    m = c.M_RGB_XYZ
    return Xyz(_dot(m[0], lin), _dot(m[1], lin), _dot(m[2], lin))


def xyz_to_linear(xyz: Xyz) -> LinearRgb:
    """Convert CIE XYZ to linear RGB."""
    m = c.M_XYZ_RGB
    return LinearRgb(_dot(m[0], xyz), _dot(m[1], xyz), _dot(m[2], xyz))


# ==========================================
# Luminance-Chrominance Stage
# ==========================================


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LUV."""
    return t**c.LAB_POW if t > c.LAB_E else (c.LAB_LINEAR_SLOPE * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LUV to XYZ."""
    cube = t**3
    return cube if cube > c.LAB_E else (c.LAB_L_MULT * t - c.LAB_L_SUB) / c.LAB_K


def xyz_to_luv(xyz: Xyz) -> Luv:
    """Convert CIE XYZ to CIE LUV."""
    X, Y, Z = xyz
    denom = X + c.LUV_DENOM_Y * Y + c.LUV_DENOM_Z * Z
    if denom == 0:
        return Luv(0.0, 0.0, 0.0)

    u_prime = (c.LUV_U_NUM * X) / denom
    v_prime = (c.LUV_V_NUM * Y) / denom
    L = c.LAB_L_MULT * _xyz_f(Y / c.REF_Y) - c.LAB_L_SUB
    u = c.LUV_U_V_MULT * L * (u_prime - c.REF_U)
    v = c.LUV_U_V_MULT * L * (v_prime - c.REF_V)
    return Luv(L, u, v)


def luv_to_xyz(luv: Luv) -> Xyz:
    """Convert CIE LUV to CIE XYZ."""
    L, u, v = luv
    if L == 0:
        return Xyz(0.0, 0.0, 0.0)

    Y = c.REF_Y * _xyz_f_inv((L + c.LAB_L_SUB) / c.LAB_L_MULT)
    u_prime = u / (c.LUV_U_V_MULT * L) + c.REF_U
    v_prime = v / (c.LUV_U_V_MULT * L) + c.REF_V

    if v_prime == 0:
        return Xyz(0.0, Y, 0.0)

    X = Y * (c.LUV_V_NUM * u_prime) / (c.LUV_U_NUM * v_prime)
    Z = (c.LUV_V_NUM * Y - c.LUV_DENOM_Y * v_prime * Y - v_prime * X) / (c.LUV_DENOM_Z * v_prime)
    return Xyz(X, Y, Z)


# ==========================================
# Polar Stage
# ==========================================


def luv_to_lch(luv: Luv) -> Lch:
    """Convert LUV to LCH."""
    L, u, v = luv
    chroma = math.hypot(u, v)
    hue = math.degrees(math.atan2(v, u))
    if hue < 0:
        hue += c.HUE_MAX
    return Lch(L, chroma, hue)


def lch_to_luv(lch: Lch) -> Luv:
    """Convert LCH to LUV."""
    L, chroma, hue = lch
    hrad = math.radians(hue)
    return Luv(L, chroma * math.cos(hrad), chroma * math.sin(hrad))


# ==========================================
# Byte Packing
# ==========================================


def to_byte(value: float) -> int:
    """Pack a [0, 1] channel into a byte, clamping on the way."""
    v = _clamp01(round(value, c.RGB_ROUND_PLACES))
    return _clamp_byte(int(round(v * c.RGB_MAX)))


def from_byte(value: int) -> float:
    """Unpack a byte into a [0, 1] channel."""
    return value / c.RGB_MAX


# ==========================================
# Direct Conversion Wrappers
# ==========================================


def rgb_to_lch(r: float, g: float, b: float) -> Lch:
    """Direct RGB to LCH conversion."""
    rgb = Rgb(_clamp01(r), _clamp01(g), _clamp01(b))
    return luv_to_lch(xyz_to_luv(linear_to_xyz(rgb_to_linear(rgb))))


def lch_to_rgb(L: float, chroma: float, hue: float) -> Rgb:
    """Direct LCH to RGB conversion, unclamped."""
    return linear_to_rgb(xyz_to_linear(luv_to_xyz(lch_to_luv(Lch(L, chroma, hue)))))


def rgb_to_husl(r: float, g: float, b: float, a: float = 1.0) -> Tuple[float, float, float, float]:
    """
    Convert RGB fractions to HUSL fractions.

    Inputs are clamped to [0, 1]. The result is (hue, saturation, lightness,
    alpha) with hue as degrees/360; black and white come out with hue and
    saturation 0.
    """
    H, S, L = lch_to_husl(rgb_to_lch(r, g, b))
    return (
        _nan_to_zero(H / c.HUE_MAX),
        _nan_to_zero(S / c.PERCENT),
        _nan_to_zero(L / c.PERCENT),
        _clamp01(a),
    )


def husl_to_rgb(hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> RgbBytes:
    """
    Convert HUSL fractions to packed RGB bytes.

    No normalization happens here; callers holding values outside [0, 1]
    should clamp first (see ``HuslColor.to_rgb``).
    """
    husl = Husl(hue * c.HUE_MAX, saturation * c.PERCENT, lightness * c.PERCENT)
    rgb = lch_to_rgb(*husl_to_lch(husl))
    return RgbBytes(to_byte(rgb.r), to_byte(rgb.g), to_byte(rgb.b), to_byte(alpha))


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
