#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/shared/formatting.py


def format_alpha(alpha: float) -> str:
    """Plain decimal alpha: no exponent, no trailing zeros, no rounding."""
    s = repr(float(alpha))
    if "e" in s:
        s = f"{alpha:.20f}".rstrip("0")
    if s.endswith(".0"):
        s = s[:-2]
    return s.rstrip(".")


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'rgba':
        return f"rgba({args[0]}, {args[1]}, {args[2]}, {format_alpha(args[3])})"
    elif fmt == 'husl':
        h, s, l = args[:3]
        return f"husl({h * 360:.2f}deg, {s * 100:.2f}%, {l * 100:.2f}%)"
    elif fmt == 'husla':
        h, s, l, a = args
        return f"husla({h * 360:.2f}deg, {s * 100:.2f}%, {l * 100:.2f}%, {format_alpha(a)})"
    elif fmt == 'lch':
        return f"lch({args[0]:.4f} {args[1]:.4f} {args[2]:.4f}deg)"
    elif fmt == 'luv':
        return f"luv({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"
    elif fmt == 'xyz':
        return f"xyz({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"

    return ""
