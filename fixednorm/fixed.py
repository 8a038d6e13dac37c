"""Fixed-point numbers: base / 2**offset over a numpy integer storage type.

Results that leave the storage range wrap like the storage integer itself;
nothing here saturates.
"""

import functools
import logging
import operator

import numpy as np

from fixednorm.family import FixedFamily
from fixednorm.quant import trunc_div, trunc_mod, wrap
from fixednorm.traits import (
    float_type_for,
    is_signed,
    storage_bits,
    storage_type,
    wide_type,
)

logger = logging.getLogger(__name__)


class Fixed(FixedFamily):
    __slots__ = ()

    wide_bits = None
    wide_signed = None

    @classmethod
    def _store(cls, value):
        return cls.base_type(wrap(value, cls.bits, cls.signed))

    @classmethod
    def _narrow(cls, value):
        # 64-bit storage has no wider integer, so the product wraps here
        return wrap(value, cls.wide_bits, cls.wide_signed)

    @classmethod
    def widen(cls):
        return fixed_type(wide_type(cls.base_type), cls.offset)

    @classmethod
    def _add(cls, a, b):
        return a + b

    @classmethod
    def _sub(cls, a, b):
        return a - b

    @classmethod
    def _mul(cls, a, b):
        return cls._narrow(a * b) >> cls.offset

    @classmethod
    def _div(cls, a, b):
        return trunc_div(cls._narrow(a << cls.offset), b)

    @classmethod
    def _mod(cls, a, b):
        return trunc_mod(a, b)

    def __neg__(self):
        return type(self).from_base(-self._raw)


def fixed_type(base_type, offset=None):
    """Returns the Fixed instantiation for a storage type and fraction width.

    offset defaults to half the storage width. Calls with equal arguments
    return the same class.
    """
    base_type = storage_type(base_type)
    bits = storage_bits(base_type)
    if offset is None:
        offset = bits // 2
    offset = operator.index(offset)
    if not 0 <= offset <= bits:
        raise ValueError(f"Fixed offset must be within [0, {bits}] for {np.dtype(base_type).name}, got {offset}")
    return _build(base_type, offset)


@functools.lru_cache(maxsize=None)
def _build(base_type, offset):
    bits = storage_bits(base_type)
    signed = is_signed(base_type)
    wide = wide_type(base_type)
    float_t = float_type_for(wide)
    correction = 1 << offset
    info = np.iinfo(base_type)

    name = ("" if signed else "U") + f"Fixed{bits}"
    if offset != bits // 2:
        name += f"q{offset}"

    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "base_type": base_type,
        "bits": bits,
        "signed": signed,
        "offset": offset,
        "correction": correction,
        "epsilon": float_t(1 / correction),
        "max_base": base_type(info.max),
        "min_base": base_type(info.min),
        "max_value": float_t(int(info.max) / correction),
        "min_value": float_t(int(info.min) / correction),
        "wide_type": wide,
        "wide_bits": storage_bits(wide),
        "wide_signed": is_signed(wide),
        "float_type": float_t,
    }
    cls = type(name, (Fixed,), namespace)
    logger.debug(
        "Built %s: offset=%d correction=%d wide=%s float=%s",
        name, offset, correction, np.dtype(wide).name, np.dtype(float_t).name,
    )
    return cls
