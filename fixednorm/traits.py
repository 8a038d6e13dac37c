"""Storage introspection, the wide-type resolver and classification traits."""

import numbers

import numpy as np

from fixednorm.family import FixedFamily

# Each storage type maps to one with at least double the range. The widest
# integers map to themselves, so their multiply/divide can still wrap.
WIDE_TYPES = {
    np.int8: np.int16,
    np.int16: np.int32,
    np.int32: np.int64,
    np.int64: np.int64,
    np.uint8: np.uint16,
    np.uint16: np.uint32,
    np.uint32: np.uint64,
    np.uint64: np.uint64,
    np.float32: np.float64,
    np.float64: np.longdouble,
    np.longdouble: np.longdouble,
}


def _canonical(dtype_like):
    # np.longlong and friends collapse onto their sized names
    dt = np.dtype(dtype_like)
    if dt.kind in "iuf":
        return np.dtype(f"{dt.kind}{dt.itemsize}").type
    return dt.type


def storage_type(dtype_like):
    """Normalizes int, 'int16', np.dtype('u1') etc. to a numpy integer type."""
    try:
        scalar = _canonical(dtype_like)
    except TypeError as e:
        raise TypeError(f"Unsupported storage type: {dtype_like!r}") from e
    if not issubclass(scalar, np.integer):
        raise TypeError(f"Storage type must be an integer type, got {dtype_like!r}")
    return scalar


def storage_bits(base_type):
    return np.dtype(base_type).itemsize * 8


def is_signed(base_type):
    return issubclass(np.dtype(base_type).type, np.signedinteger)


def signed_type(base_type):
    return np.dtype(f"int{storage_bits(base_type)}").type


def float_type_for(wide):
    return np.float32 if np.dtype(wide).itemsize < 8 else np.float64


def is_fixed_point(obj):
    """True for Fixed/Norm classes and their instances."""
    if isinstance(obj, type):
        return issubclass(obj, FixedFamily)
    return isinstance(obj, FixedFamily)


def is_integral(obj):
    """True for integral-like types: plain integers and both fixed families."""
    if is_fixed_point(obj):
        return True
    if isinstance(obj, type):
        return issubclass(obj, (numbers.Integral, np.integer))
    return isinstance(obj, (numbers.Integral, np.integer))


def wide_type(t):
    """Returns the promotion type used for overflow-free multiply/divide.

    Family classes resolve recursively into the same family over the
    widened storage type.
    """
    if is_fixed_point(t):
        if not isinstance(t, type):
            t = type(t)
        return t.widen()
    try:
        key = _canonical(t)
    except TypeError as e:
        raise TypeError(f"No wide type for {t!r}") from e
    try:
        return WIDE_TYPES[key]
    except KeyError:
        raise TypeError(f"No wide type for {t!r}") from None
