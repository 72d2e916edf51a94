#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
BYTE_MAX = 255                     # Largest packed channel value
HUE_MAX = 360.0                    # Full circle degrees
PERCENT = 100.0                    # HUSL saturation/lightness scale inside the pipeline
RGB_ROUND_PLACES = 3               # Decimal places kept before byte packing

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ to linear sRGB Matrix (Source: HUSL reference implementation, 4 decimals)
M_XYZ_RGB = (
    (3.2406, -1.5372, -0.4986),    # Coefficients for linear Red component calculation
    (-0.9689, 1.8758, 0.0415),     # Coefficients for linear Green component calculation
    (0.0557, -0.2040, 1.0570),     # Coefficients for linear Blue component calculation
)

# Linear sRGB to XYZ Matrix (Source: HUSL reference implementation, 4 decimals)
M_RGB_XYZ = (
    (0.4124, 0.3576, 0.1805),      # Coefficients for X coordinate calculation
    (0.2126, 0.7152, 0.0722),      # Coefficients for Y (Luminance) calculation
    (0.0193, 0.1192, 0.9505),      # Coefficients for Z coordinate calculation
)

# D65 Reference White in LUV chromaticity (Source: HUSL reference implementation)
REF_Y = 1.0                        # Y coordinate (Luminance) of the reference white
REF_U = 0.19784                    # u' chromaticity of the reference white
REF_V = 0.46834                    # v' chromaticity of the reference white

# CIELUV Constants (Source: CIELUV 1976 / CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 903.3                      # Slope of the linear L* segment for low luminance values
LAB_LINEAR_SLOPE = 7.787           # Slope of the linear segment of f(t)
LAB_OFFSET = 16.0 / 116.0          # Constant offset of the linear segment of f(t)
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_POW = 1.0 / 3.0                # Cube root exponent of f(t)
LUV_U_V_MULT = 13.0                # Multiplier for 'u' and 'v' chromaticity coordinates
LUV_U_NUM = 4.0                    # Numerator coefficient for u' chromaticity calculation
LUV_V_NUM = 9.0                    # Numerator coefficient for v' chromaticity calculation
LUV_DENOM_Y = 15.0                 # Y-coefficient for the denominator in chromaticity formulas
LUV_DENOM_Z = 3.0                  # Z-coefficient for the denominator in chromaticity formulas

# Gamut boundary coefficients (Source: HUSL reference implementation)
# XYZ->RGB rows folded with the LUV reference white; reproduced verbatim.
GAMUT_LUM_CUBE_DIV = 1560896.0     # (L + 16)^3 divisor giving the luminance ratio
GAMUT_TOP_M1 = 0.99915             # Weight of m1 in the boundary intercept
GAMUT_TOP_M2 = 1.05122             # Weight of m2 in the boundary intercept (also the limit slope)
GAMUT_TOP_M3 = 1.14460             # Weight of m3 in the boundary intercept
GAMUT_RBOTTOM_M3 = 0.86330         # Weight of m3 in the sin(H) boundary slope
GAMUT_RBOTTOM_M2 = 0.17266         # Weight of m2 in the sin(H) boundary slope (also the limit term)
GAMUT_LBOTTOM_M3 = 0.12949         # Weight of m3 in the cos(H) boundary slope
GAMUT_LBOTTOM_M1 = 0.38848         # Weight of m1 in the cos(H) boundary slope
GAMUT_LIMITS = (0.0, 1.0)          # RGB channel limits intersected by the constant hue ray

# Achromatic extremes (Source: hsluv reference implementation)
LIGHTNESS_WHITE_TH = 99.9999999    # Above this lightness the color is white
LIGHTNESS_BLACK_TH = 0.00000001    # Below this lightness the color is black

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_STEPS = 100                    # Upper bound for mix steps
DEFAULT_MIX_STEPS = 1              # Single blended color unless asked otherwise
DEFAULT_MIX_RATIO = 0.5            # Weight of the first color when mixing

# ==========================================
# CLI UI & Data Structures
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
