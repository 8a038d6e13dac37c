"""Fixed-point and normalized fixed-point value types over numpy integers."""

import numpy as np

from fixednorm.family import FixedFamily
from fixednorm.fixed import Fixed, fixed_type
from fixednorm.norm import Norm, norm_type
from fixednorm.traits import is_fixed_point, is_integral, wide_type

Fixed8 = fixed_type(np.int8)
Fixed16 = fixed_type(np.int16)
Fixed32 = fixed_type(np.int32)
Fixed64 = fixed_type(np.int64)
UFixed8 = fixed_type(np.uint8)
UFixed16 = fixed_type(np.uint16)
UFixed32 = fixed_type(np.uint32)
UFixed64 = fixed_type(np.uint64)

Norm8 = norm_type(np.int8)
Norm16 = norm_type(np.int16)
Norm32 = norm_type(np.int32)
Norm64 = norm_type(np.int64)
UNorm8 = norm_type(np.uint8)
UNorm16 = norm_type(np.uint16)
UNorm32 = norm_type(np.uint32)
UNorm64 = norm_type(np.uint64)

__all__ = [
    "FixedFamily",
    "Fixed",
    "Norm",
    "fixed_type",
    "norm_type",
    "wide_type",
    "is_fixed_point",
    "is_integral",
    "Fixed8",
    "Fixed16",
    "Fixed32",
    "Fixed64",
    "UFixed8",
    "UFixed16",
    "UFixed32",
    "UFixed64",
    "Norm8",
    "Norm16",
    "Norm32",
    "Norm64",
    "UNorm8",
    "UNorm16",
    "UNorm32",
    "UNorm64",
]
