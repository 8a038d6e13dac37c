"""Shared machinery of the fixed-point family.

A concrete instantiation is a subclass carrying its constants as class
attributes (see ``fixed_type`` and ``norm_type``). Instances store a single
numpy scalar of ``base_type``.
"""

import numbers

from fixednorm.quant import rescale, round_half_away


class FixedFamily:
    __slots__ = ("_base",)

    # numpy binary ops defer to the reflected methods below
    __array_ufunc__ = None
    __hash__ = None

    base_type = None
    bits = None
    signed = None
    offset = None
    correction = None
    epsilon = None
    max_base = None
    min_base = None
    max_value = None
    min_value = None
    wide_type = None
    float_type = None

    def __init__(self, value=0):
        cls = type(self)
        if cls.base_type is None:
            raise TypeError(f"{cls.__name__} is generic; build an instantiation first")
        if type(value) is cls:
            self._base = value._base
        elif isinstance(value, FixedFamily):
            self._base = cls._store(rescale(int(value._base), value.correction, cls.correction))
        elif isinstance(value, numbers.Real):
            self._base = cls._store(cls._encode(value))
        else:
            raise TypeError(f"Cannot convert {type(value).__name__} to {cls.__name__}")

    # Hooks for the concrete families

    @classmethod
    def _store(cls, value):
        raise NotImplementedError

    @classmethod
    def _encode(cls, value):
        return round_half_away(value, cls.correction, cls.float_type)

    @classmethod
    def widen(cls):
        raise NotImplementedError

    # Raw access

    @classmethod
    def from_base(cls, base):
        obj = cls.__new__(cls)
        obj._base = cls._store(int(base))
        return obj

    @property
    def base(self):
        return self._base

    @base.setter
    def base(self, value):
        self._base = self._store(int(value))

    @property
    def _raw(self):
        return int(self._base)

    def to_base(self):
        return self._base

    # Conversions

    def to_real(self):
        return self.float_type(self._raw / self.correction)

    def to(self, target):
        """Converts to target: a family class, a real type or an integral type.

        Converting to the own class is an exact copy of base.
        """
        if target is type(self):
            return type(self).from_base(self._base)
        if isinstance(target, type) and issubclass(target, FixedFamily):
            return target(self)
        if isinstance(target, type) and issubclass(target, numbers.Integral):
            return target(int(self.to_real()))
        return target(self.to_real())

    def __float__(self):
        return float(self.to_real())

    def __int__(self):
        return int(self.to_real())

    def __bool__(self):
        return self._raw != 0

    def __pos__(self):
        return type(self).from_base(self._base)

    def __repr__(self):
        return f"<{type(self).__name__} base={self._raw} ({float(self):.6f})>"

    def __str__(self):
        return str(float(self))

    # Operands are brought into this instantiation before they meet base

    def _operand(self, other):
        if type(other) is type(self):
            return other._raw
        if isinstance(other, (FixedFamily, numbers.Real)):
            return type(self)(other)._raw
        return None

    def __eq__(self, other):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return self._raw == b

    def __ne__(self, other):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return self._raw != b

    def __lt__(self, other):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return self._raw < b

    def __le__(self, other):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return self._raw <= b

    def __gt__(self, other):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return self._raw > b

    def __ge__(self, other):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return self._raw >= b

    # Arithmetic; concrete families provide the _add/_sub/... kernels over
    # raw integers and this layer handles dispatch and in-place updates

    def _binary(self, other, kernel):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return type(self).from_base(kernel(self._raw, b))

    def _reflected(self, other, kernel):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        return type(self).from_base(kernel(b, self._raw))

    def _inplace(self, other, kernel):
        b = self._operand(other)
        if b is None:
            return NotImplemented
        self._base = self._store(kernel(self._raw, b))
        return self

    def __add__(self, other):
        return self._binary(other, self._add)

    def __radd__(self, other):
        return self._reflected(other, self._add)

    def __iadd__(self, other):
        return self._inplace(other, self._add)

    def __sub__(self, other):
        return self._binary(other, self._sub)

    def __rsub__(self, other):
        return self._reflected(other, self._sub)

    def __isub__(self, other):
        return self._inplace(other, self._sub)

    def __mul__(self, other):
        return self._binary(other, self._mul)

    def __rmul__(self, other):
        return self._reflected(other, self._mul)

    def __imul__(self, other):
        return self._inplace(other, self._mul)

    def __truediv__(self, other):
        return self._binary(other, self._div)

    def __rtruediv__(self, other):
        return self._reflected(other, self._div)

    def __itruediv__(self, other):
        return self._inplace(other, self._div)

    def __mod__(self, other):
        return self._binary(other, self._mod)

    def __rmod__(self, other):
        return self._reflected(other, self._mod)

    def __imod__(self, other):
        return self._inplace(other, self._mod)
