import numbers
from fractions import Fraction

import numpy as np


def bias(value):
    return 0.5 if value >= 0 else -0.5


def round_half_away(value, correction, float_type):
    """Scales a real value by correction and rounds half away from zero.

    Integral values are scaled exactly. Real values are scaled in float_type,
    biased by +/-0.5 and truncated, so 1.53 * 16 = 24.48 gives 24. A finite
    real whose product would overflow float_type is scaled exactly instead.
    """
    if isinstance(value, numbers.Integral):
        return int(value) * correction
    real = float(value)
    if abs(real) * correction > np.finfo(float_type).max:
        # Fraction(inf) raises OverflowError
        scaled = int(abs(Fraction(real)) * correction + Fraction(1, 2))
        return scaled if real >= 0 else -scaled
    scaled = float_type(value) * float_type(correction) + float_type(bias(value))
    return int(scaled)


def wrap(value, bits, signed):
    mask = (1 << bits) - 1
    value &= mask
    if signed and value >= (1 << (bits - 1)):
        value -= (1 << bits)
    return value


def saturate(value, min_value, max_value):
    return min(max(value, min_value), max_value)


def trunc_div(a, b):
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a, b):
    """Remainder carrying the sign of the dividend."""
    return a - b * trunc_div(a, b)


def rescale(base, source, target):
    """Moves base from a source correction to a target one, exactly.

    The quotient base * target / source is rounded half away from zero.
    """
    num = base * target
    q, r = divmod(abs(num), source)
    if 2 * r >= source:
        q += 1
    return q if num >= 0 else -q


def real_bound(value, min_value, max_value, min_base, max_base):
    """Maps a real outside [min_value, max_value] onto the base bounds.

    Returns None for integers, NaN and reals inside the range.
    """
    if isinstance(value, numbers.Integral):
        return None
    real = float(value)
    if real > max_value:
        return max_base
    if real < min_value:
        return min_base
    return None
