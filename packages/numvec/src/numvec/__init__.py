"""
numvec — Fixed-Type Numeric Vectors
===================================

One container, NumericVector, over a single numpy dtype:

    NumericVector(values, dtype) / .zeros(n) / .from_buffer(buf, n)
        → owned copy, never aliases its input.

    a + b, a - b, a * b, a / b, NumericVector.distance_l1(a, b)
        → new vector, equal lengths required.

    a.max() a.min() a.argmax() a.argmin() a.sum() a.average()
    a.norm_l0() a.norm_l1() a.norm_l2() a.norm_max() a.norm_l1_avg()
        → scalars of the element type.

    a.render(count) / a.dump(count, stream)
        → '[ 1 2 3 ]'

Errors (numvec.errors): SizeMismatchError, DivisionByZeroError,
IndexOutOfRangeError, EmptyVectorError, ElementTypeError.
All derive from VectorError.
"""

__version__ = '0.1.0'

from numvec.errors import (
    VectorError,
    SizeMismatchError,
    DivisionByZeroError,
    IndexOutOfRangeError,
    EmptyVectorError,
    ElementTypeError,
)
from numvec.vector import NumericVector, add, subtract, multiply, divide, distance_l1
from numvec import config
from numvec import norms

__all__ = [
    'NumericVector',
    'add',
    'subtract',
    'multiply',
    'divide',
    'distance_l1',
    'config',
    'norms',
    'VectorError',
    'SizeMismatchError',
    'DivisionByZeroError',
    'IndexOutOfRangeError',
    'EmptyVectorError',
    'ElementTypeError',
]
