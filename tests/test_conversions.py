"""
Tests for the RGB <-> HUSL conversion pipeline.

Covers every stage in isolation, then the two top-level conversions.
"""

import math

import pytest

from huslab.core import conversions as conv
from huslab.core.gamut import husl_to_lch
from huslab.core.types import Husl, Lch, LinearRgb, Luv, RgbBytes, Xyz


class TestTransferStage:
    """sRGB gamma encode/decode."""

    def test_endpoints(self):
        assert conv.to_linear(0.0) == 0.0
        assert conv.to_linear(1.0) == pytest.approx(1.0)
        assert conv.from_linear(0.0) == 0.0
        assert conv.from_linear(1.0) == pytest.approx(1.0)

    def test_linear_segment_below_threshold(self):
        assert conv.to_linear(0.04045) == 0.04045 / 12.92
        assert conv.from_linear(0.0031308) == 12.92 * 0.0031308

    def test_no_clamping(self):
        """Out-of-range values pass through for callers to clamp."""
        assert conv.to_linear(-0.1) == -0.1 / 12.92
        assert conv.from_linear(-0.01) == 12.92 * -0.01
        assert conv.from_linear(1.2) > 1.0

    @pytest.mark.parametrize("value", [0.01, 0.2, 0.5, 0.75, 0.99])
    def test_inverse(self, value):
        assert conv.from_linear(conv.to_linear(value)) == pytest.approx(value, abs=1e-9)


class TestMatrixStage:
    """Linear RGB <-> XYZ."""

    def test_white_maps_to_reference_white(self):
        xyz = conv.linear_to_xyz(LinearRgb(1.0, 1.0, 1.0))

        assert isinstance(xyz, Xyz)
        assert xyz.x == pytest.approx(0.9505)
        assert xyz.y == pytest.approx(1.0)
        assert xyz.z == pytest.approx(1.089)

    def test_matrices_are_near_inverse(self):
        lin = LinearRgb(0.2, 0.5, 0.8)
        back = conv.xyz_to_linear(conv.linear_to_xyz(lin))

        assert isinstance(back, LinearRgb)
        assert back == pytest.approx(lin, abs=1e-3)


class TestLuvStage:
    """XYZ <-> LUV."""

    def test_black_forward_is_exact_zero(self):
        assert conv.xyz_to_luv(Xyz(0.0, 0.0, 0.0)) == Luv(0.0, 0.0, 0.0)

    def test_zero_lightness_inverse_is_exact_zero(self):
        assert conv.luv_to_xyz(Luv(0.0, 12.0, -7.0)) == Xyz(0.0, 0.0, 0.0)

    def test_red_lightness(self):
        luv = conv.xyz_to_luv(Xyz(0.4124, 0.2126, 0.0193))

        assert luv.l == pytest.approx(53.23, abs=0.01)
        assert luv.u > 0
        assert luv.v > 0

    @pytest.mark.parametrize("xyz", [
        Xyz(0.4124, 0.2126, 0.0193),
        Xyz(0.3576, 0.7152, 0.1192),
        Xyz(0.5, 0.4, 0.9),
    ])
    def test_inverse(self, xyz):
        back = conv.luv_to_xyz(conv.xyz_to_luv(xyz))
        assert back == pytest.approx(xyz, rel=1e-9)

    def test_inverse_dark(self):
        """Low luminance goes through the linear segment both ways."""
        xyz = Xyz(0.002, 0.003, 0.004)
        back = conv.luv_to_xyz(conv.xyz_to_luv(xyz))
        assert back == pytest.approx(xyz, rel=1e-4)


class TestPolarStage:
    """LUV <-> LCH."""

    def test_negative_angle_wraps(self):
        lch = conv.luv_to_lch(Luv(50.0, 0.0, -10.0))

        assert isinstance(lch, Lch)
        assert lch.c == pytest.approx(10.0)
        assert lch.h == pytest.approx(270.0)

    def test_hue_range(self):
        for u, v in [(1, 0), (0, 1), (-1, 0), (-1, -1), (1, -0.001)]:
            h = conv.luv_to_lch(Luv(50.0, u, v)).h
            assert 0.0 <= h < 360.0

    def test_inverse(self):
        luv = conv.lch_to_luv(Lch(50.0, 10.0, 90.0))
        assert luv == pytest.approx((50.0, 0.0, 10.0), abs=1e-12)

        original = Luv(61.0, -23.5, 40.25)
        assert conv.lch_to_luv(conv.luv_to_lch(original)) == pytest.approx(original, abs=1e-9)


class TestBytePacking:
    """Float channel <-> byte."""

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0),
        (1.0, 255),
        (-0.2, 0),
        (1.3, 255),
        (0.5, 128),
        (0.9996, 255),
        (0.0004, 0),
        (float("nan"), 0),
    ])
    def test_to_byte(self, value, expected):
        assert conv.to_byte(value) == expected

    def test_from_byte(self):
        assert conv.from_byte(0) == 0.0
        assert conv.from_byte(255) == 1.0
        assert conv.from_byte(51) == pytest.approx(0.2)


class TestRgbToHusl:
    """Top-level RGB -> HUSL conversion."""

    def test_pure_red(self):
        h, s, l, a = conv.rgb_to_husl(1.0, 0.0, 0.0, 1.0)

        assert h == pytest.approx(12.17 / 360, abs=1e-3)
        assert s == pytest.approx(1.0, abs=1e-2)
        assert l == pytest.approx(0.5324, abs=1e-3)
        assert a == 1.0

    def test_black(self):
        assert conv.rgb_to_husl(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0, 1.0)

    def test_white(self):
        assert conv.rgb_to_husl(1.0, 1.0, 1.0) == (0.0, 0.0, 1.0, 1.0)

    def test_inputs_are_clamped(self):
        assert conv.rgb_to_husl(2.0, -1.0, 0.0, 3.0) == conv.rgb_to_husl(1.0, 0.0, 0.0, 1.0)

    def test_alpha_passes_through(self):
        assert conv.rgb_to_husl(0.2, 0.4, 0.6, 0.5)[3] == 0.5

    def test_nan_input_never_leaks(self):
        result = conv.rgb_to_husl(float("nan"), 0.0, 0.0)
        assert not any(math.isnan(v) for v in result)

    @pytest.mark.parametrize("gray", [0.1, 0.5, 0.9])
    def test_grays_are_nearly_unsaturated(self, gray):
        _, s, _, _ = conv.rgb_to_husl(gray, gray, gray)
        assert s < 0.01


class TestHuslToRgb:
    """Top-level HUSL -> RGB conversion."""

    def test_black(self):
        assert conv.husl_to_rgb(0.0, 0.0, 0.0) == RgbBytes(0, 0, 0, 255)

    def test_white(self):
        assert conv.husl_to_rgb(0.3, 1.0, 1.0) == RgbBytes(255, 255, 255, 255)

    def test_alpha_is_packed(self):
        assert conv.husl_to_rgb(0.0, 0.0, 0.5, 0.5).a == 128
        assert conv.husl_to_rgb(0.0, 0.0, 0.5, 0.0).a == 0

    def test_pure_red(self):
        h, s, l, _ = conv.rgb_to_husl(1.0, 0.0, 0.0)
        r, g, b, _ = conv.husl_to_rgb(h, s, l)

        assert r >= 254
        assert g <= 1
        assert b <= 1

    @pytest.mark.parametrize("r", range(0, 256, 51))
    def test_round_trip(self, r):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                husl = conv.rgb_to_husl(r / 255, g / 255, b / 255, 1.0)
                back = conv.husl_to_rgb(*husl)

                assert abs(back.r - r) <= 1, (r, g, b, back)
                assert abs(back.g - g) <= 1, (r, g, b, back)
                assert abs(back.b - b) <= 1, (r, g, b, back)
                assert back.a == 255

    @pytest.mark.parametrize("rgb", [
        (1, 2, 3), (254, 255, 255), (17, 200, 99), (128, 128, 129), (250, 5, 130),
    ])
    def test_round_trip_odd_values(self, rgb):
        r, g, b = rgb
        back = conv.husl_to_rgb(*conv.rgb_to_husl(r / 255, g / 255, b / 255))
        assert all(abs(x - y) <= 1 for x, y in zip(back[:3], rgb))

    @pytest.mark.parametrize("lightness", [5, 20, 35, 50, 65, 80, 95])
    def test_full_saturation_lies_on_gamut_boundary(self, lightness):
        for hue in range(0, 360, 15):
            rgb = conv.husl_to_rgb(hue / 360, 1.0, lightness / 100)
            assert any(ch <= 1 or ch >= 254 for ch in rgb[:3]), (hue, lightness, rgb)

    def test_saturation_increases_chroma(self):
        chromas = [husl_to_lch(Husl(200.0, s, 60.0)).c for s in range(0, 101, 10)]

        assert chromas[0] == 0.0
        assert all(b > a for a, b in zip(chromas, chromas[1:]))
