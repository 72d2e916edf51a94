#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/shared/sanitizer.py

import argparse
import math
from typing import Optional

from huslab.core import config as c
from .logger import log


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _parse_number(value: str) -> Optional[float]:
    """
    Parses the whole string as a number, including signs, exponents and
    surrounding whitespace. Returns None for anything else, NaN included.
    """
    if value is None:
        return None

    try:
        val = float(str(value).strip())
    except ValueError:
        return None

    if math.isnan(val):
        return None
    return val


def _clamp_with_warning(val, min_v, max_v, raw: str):
    if min_v <= val <= max_v:
        return val
    clamped = min_v if val < min_v else max_v
    log('warning', f"value '{raw}' out of range, clamped to '{clamped}'")
    return clamped


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        raw = _sanitize_for_log(v)
        # exact for integers beyond float precision, like large seeds
        try:
            val = int(raw)
        except ValueError:
            val = _parse_number(v)

        if val is None:
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")
        val = _clamp_with_warning(val, min_v, max_v, raw)
        rounded = int(round(val))
        if rounded != val:
            log('warning', f"value '{raw}' is not a whole number, rounded to '{rounded}'")
        return rounded
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _parse_number(v)
        raw = _sanitize_for_log(v)

        if val is None:
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")
        return _clamp_with_warning(val, min_v, max_v, raw)
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# Maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "byte": handle_int_range(0, c.BYTE_MAX),
    "alpha": handle_float_range(0.0, 1.0),
    "ratio": handle_float_range(0.0, 1.0),
    "hue": handle_float_range(0.0, c.HUE_MAX),
    "percent": handle_float_range(0.0, c.PERCENT),
    "steps": handle_int_range(1, c.MAX_STEPS),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
}


class HuslTripleAction(argparse.Action):
    """Validates an H S L triple as degrees, percent, percent."""

    def __call__(self, parser, namespace, values, option_string=None):
        h, s, l = values
        try:
            triple = (
                INPUT_HANDLERS["hue"](h),
                INPUT_HANDLERS["percent"](s),
                INPUT_HANDLERS["percent"](l),
            )
        except argparse.ArgumentTypeError as e:
            raise argparse.ArgumentError(self, str(e))
        setattr(namespace, self.dest, triple)
