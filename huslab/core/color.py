#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huslab/core/color.py

from dataclasses import dataclass, replace
from typing import ClassVar

from . import config as c
from .conversions import from_byte, husl_to_rgb, rgb_to_husl
from .types import RgbBytes
from huslab.shared.clamping import _clamp01
from huslab.shared.formatting import format_alpha


@dataclass(frozen=True)
class HuslColor:
    """
    A color in the HUSL space.

    All channels are fractions: hue is degrees/360, saturation runs from gray
    (0.0) to fully saturated (1.0), lightness from black (0.0) to white (1.0),
    alpha from transparent (0.0) to opaque (1.0). Values are stored as given;
    use ``normalized()`` to clamp them.

    Equality compares the four floats exactly.
    """

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    TRANSPARENT: ClassVar["HuslColor"]
    BLACK: ClassVar["HuslColor"]
    WHITE: ClassVar["HuslColor"]

    def __str__(self) -> str:
        return f"({self.hue:.2f}, {self.saturation:.2f}, {self.lightness:.2f}, {self.alpha:.2f})"

    def with_hue(self, hue: float) -> "HuslColor":
        return replace(self, hue=hue)

    def with_saturation(self, saturation: float) -> "HuslColor":
        return replace(self, saturation=saturation)

    def with_lightness(self, lightness: float) -> "HuslColor":
        return replace(self, lightness=lightness)

    def with_alpha(self, alpha: float) -> "HuslColor":
        return replace(self, alpha=alpha)

    def normalized(self) -> "HuslColor":
        """Clamp every channel to [0, 1]."""
        return HuslColor(
            _clamp01(self.hue),
            _clamp01(self.saturation),
            _clamp01(self.lightness),
            _clamp01(self.alpha),
        )

    def to_rgb(self) -> RgbBytes:
        """Normalize, then convert to packed RGB bytes."""
        n = self.normalized()
        return husl_to_rgb(n.hue, n.saturation, n.lightness, n.alpha)

    def to_html_color(self) -> str:
        """``#RRGGBB`` when opaque, ``rgba(R, G, B, A)`` otherwise."""
        alpha = _clamp01(self.alpha)
        r, g, b, _ = self.to_rgb()
        if alpha < c.UNIT:
            return f"rgba({r}, {g}, {b}, {format_alpha(alpha)})"
        return f"#{r:02X}{g:02X}{b:02X}"

    @classmethod
    def from_rgb(cls, rgb: RgbBytes) -> "HuslColor":
        """Build a color from packed RGB bytes."""
        return cls(*rgb_to_husl(from_byte(rgb.r), from_byte(rgb.g), from_byte(rgb.b), from_byte(rgb.a)))

    @staticmethod
    def mix(first: "HuslColor", second: "HuslColor", first_ratio: float) -> "HuslColor":
        """Blend channel by channel; ``first_ratio`` is the weight of ``first``."""
        rest = c.UNIT - first_ratio
        return HuslColor(
            first.hue * first_ratio + second.hue * rest,
            first.saturation * first_ratio + second.saturation * rest,
            first.lightness * first_ratio + second.lightness * rest,
            first.alpha * first_ratio + second.alpha * rest,
        )

    @staticmethod
    def hue_distance(first: "HuslColor", second: "HuslColor") -> float:
        """Shortest distance between two hues on the unit hue circle."""
        h1 = min(first.hue, second.hue)
        h2 = max(first.hue, second.hue)
        return min(h2 - h1, h1 + (c.UNIT - h2))


HuslColor.TRANSPARENT = HuslColor(0.0, 0.0, 0.0, 0.0)
HuslColor.BLACK = HuslColor(0.0, 0.0, 0.0, 1.0)
HuslColor.WHITE = HuslColor(0.0, 0.0, 1.0, 1.0)
