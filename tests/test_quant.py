"""Tests for the integer/real quantization helpers (fixednorm/quant.py)."""

import numpy as np
import pytest

from fixednorm.quant import (
    real_bound,
    rescale,
    round_half_away,
    saturate,
    trunc_div,
    trunc_mod,
    wrap,
)


class TestRoundHalfAway:
    def test_exact_value(self) -> None:
        assert round_half_away(1.5, 16, np.float32) == 24

    def test_rounds_down_below_half(self) -> None:
        # 1.53 * 16 = 24.48
        assert round_half_away(1.53, 16, np.float32) == 24

    def test_negative_mirrors_positive(self) -> None:
        assert round_half_away(-1.53, 16, np.float32) == -24

    @pytest.mark.parametrize("value, expected", [(0.03125, 1), (-0.03125, -1), (0.09375, 2), (-0.09375, -2)])
    def test_halfway_goes_away_from_zero(self, value, expected) -> None:
        assert round_half_away(value, 16, np.float64) == expected

    def test_integers_scale_exactly(self) -> None:
        assert round_half_away(3, 1 << 32, np.float64) == 3 << 32
        assert round_half_away(np.int16(-2), 16, np.float32) == -32

    def test_nan_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            round_half_away(float("nan"), 16, np.float32)

    def test_infinity_is_rejected(self) -> None:
        with pytest.raises(OverflowError):
            round_half_away(float("inf"), 16, np.float64)

    def test_beyond_float_range_scales_exactly(self) -> None:
        assert round_half_away(1e38, 256, np.float32) == int(1e38) * 256
        assert round_half_away(-1e38, 256, np.float32) == -int(1e38) * 256
        assert round_half_away(1e300, 1 << 32, np.float64) == int(1e300) << 32


class TestWrap:
    @pytest.mark.parametrize(
        "value, bits, signed, expected",
        [
            (127, 8, True, 127),
            (128, 8, True, -128),
            (200, 8, True, -56),
            (-129, 8, True, 127),
            (256, 8, False, 0),
            (-24, 8, False, 232),
            (1 << 64, 64, False, 0),
        ],
    )
    def test_two_complement(self, value, bits, signed, expected) -> None:
        assert wrap(value, bits, signed) == expected


class TestSaturate:
    def test_inside(self) -> None:
        assert saturate(5, -127, 127) == 5

    def test_clamps_both_ends(self) -> None:
        assert saturate(200, -127, 127) == 127
        assert saturate(-200, -127, 127) == -127


class TestTruncatingDivision:
    @pytest.mark.parametrize(
        "a, b, q, r",
        [(7, 2, 3, 1), (-7, 2, -3, -1), (7, -2, -3, 1), (-7, -2, 3, -1), (-16, 32, 0, -16)],
    )
    def test_c_semantics(self, a, b, q, r) -> None:
        assert trunc_div(a, b) == q
        assert trunc_mod(a, b) == r

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_div(0, 0)
        with pytest.raises(ZeroDivisionError):
            trunc_mod(5, 0)


class TestRescale:
    def test_exact(self) -> None:
        assert rescale(24, 16, 256) == 384

    def test_rounds_half_away(self) -> None:
        # 3 * 16 / 32 = 1.5
        assert rescale(3, 32, 16) == 2
        assert rescale(-3, 32, 16) == -2

    def test_norm_to_fixed(self) -> None:
        # 64 / 127 of one, in 1/16 steps
        assert rescale(64, 127, 16) == 8


class TestRealBound:
    def test_in_range_passes(self) -> None:
        assert real_bound(0.5, -1.0, 1.0, -127, 127) is None
        assert real_bound(1.0, -1.0, 1.0, -127, 127) is None
        assert real_bound(3, -1.0, 1.0, -127, 127) is None

    def test_nan_passes(self) -> None:
        assert real_bound(float("nan"), -1.0, 1.0, -127, 127) is None

    def test_finite_out_of_range_maps_to_bounds(self) -> None:
        assert real_bound(1e37, -1.0, 1.0, -127, 127) == 127
        assert real_bound(-1e300, -1.0, 1.0, -127, 127) == -127
        assert real_bound(-0.25, 0.0, 1.0, 0, 255) == 0

    def test_infinities_map_to_bounds(self) -> None:
        assert real_bound(float("inf"), -1.0, 1.0, -127, 127) == 127
        assert real_bound(float("-inf"), -1.0, 1.0, -127, 127) == -127
