"""Normalized fixed-point numbers.

The full range of the storage integer maps linearly onto [-1, 1] for signed
storage and [0, 1] for unsigned storage. The most negative signed value is
never used, so int8 covers [-127, 127] and the range stays symmetric.

Every result is saturated into [min_base, max_base]. Intermediates are plain
Python integers, so nothing can overflow before the clamp.
"""

import functools
import logging

import numpy as np

from fixednorm.family import FixedFamily
from fixednorm.quant import real_bound, round_half_away, saturate, trunc_div, trunc_mod
from fixednorm.traits import (
    float_type_for,
    is_signed,
    signed_type,
    storage_bits,
    storage_type,
    wide_type,
)

logger = logging.getLogger(__name__)


class Norm(FixedFamily):
    __slots__ = ()

    @classmethod
    def _store(cls, value):
        return cls.base_type(saturate(value, int(cls.min_base), int(cls.max_base)))

    @classmethod
    def _encode(cls, value):
        bound = real_bound(
            value, float(cls.min_value), float(cls.max_value), int(cls.min_base), int(cls.max_base)
        )
        if bound is not None:
            return bound
        return round_half_away(value, cls.correction, cls.float_type)

    @classmethod
    def widen(cls):
        return norm_type(wide_type(cls.base_type))

    @classmethod
    def _add(cls, a, b):
        return a + b

    @classmethod
    def _sub(cls, a, b):
        return a - b

    @classmethod
    def _mul(cls, a, b):
        return (a * b) >> cls.offset

    @classmethod
    def _div(cls, a, b):
        return trunc_div(a << cls.offset, b)

    @classmethod
    def _mod(cls, a, b):
        return trunc_mod(a, b)

    def __neg__(self):
        """Negates exactly for signed storage.

        Unsigned storage has no negative encodings, so the negated real value
        is returned as a float_type scalar instead of an instance.
        """
        if self.signed:
            return type(self).from_base(-self._raw)
        return -self.to_real()


def norm_type(base_type):
    """Returns the Norm instantiation for a storage type (cached)."""
    return _build(storage_type(base_type))


@functools.lru_cache(maxsize=None)
def _build(base_type):
    bits = storage_bits(base_type)
    signed = is_signed(base_type)
    wide = signed_type(wide_type(base_type))
    float_t = float_type_for(wide)
    offset = bits - 1 if signed else bits
    correction = (1 << offset) - 1
    info = np.iinfo(base_type)
    max_base = int(info.max)
    min_base = int(info.min) + 1 if signed else int(info.min)

    name = ("" if signed else "U") + f"Norm{bits}"
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "base_type": base_type,
        "bits": bits,
        "signed": signed,
        "offset": offset,
        "correction": correction,
        "epsilon": float_t(1 / correction),
        "max_base": base_type(max_base),
        "min_base": base_type(min_base),
        "max_value": float_t(max_base / correction),
        "min_value": float_t(min_base / correction),
        "wide_type": wide,
        "float_type": float_t,
    }
    cls = type(name, (Norm,), namespace)
    logger.debug(
        "Built %s: range=[%d, %d] correction=%d wide=%s float=%s",
        name, min_base, max_base, correction, np.dtype(wide).name, np.dtype(float_t).name,
    )
    return cls
