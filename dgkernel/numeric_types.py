"""Groupings of numeric types and tools for working with them"""

from typing import *
import numpy as np

__all__ = [
    "BOUNDED_SIGNED_INTEGER_TYPES",
    "BOUNDED_UNSIGNED_INTEGER_TYPES",
    "FLOATING_TYPES",
    "FloatLike",
    "IntegerLike",
    "NumberLike",
    ]


FloatLike = Union[float, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]

# Fixed-width integer types, paired positionally: the i-th signed type has the i-th unsigned type as counterpart.
BOUNDED_SIGNED_INTEGER_TYPES: tuple[type[np.signedinteger], ...] = (np.int8, np.int16, np.int32, np.int64)
BOUNDED_UNSIGNED_INTEGER_TYPES: tuple[type[np.unsignedinteger], ...] = (np.uint8, np.uint16, np.uint32, np.uint64)

FLOATING_TYPES: tuple[type, ...] = (np.float32, np.float64, float)
