"""
Elementwise kernels.

Pure functions over two equal-length 1-D arrays of one dtype. Each returns
a new array of that dtype; the inputs are never modified. NumericVector's
operators delegate here.

    add(a, b)          a[i] + b[i]
    subtract(a, b)     a[i] - b[i]
    multiply(a, b)     a[i] * b[i]
    divide(a, b)       a[i] / b[i], truncated toward zero for integer dtypes
    distance_l1(a, b)  |a[i] - b[i]|
"""

import logging

import numpy as np

from numvec.dtypes import is_integer, narrow, truncating_divide, working
from numvec.errors import DivisionByZeroError, ElementTypeError, SizeMismatchError

logger = logging.getLogger(__name__)


def check_operands(operation: str, left: np.ndarray, right: np.ndarray) -> None:
    """Both operands must share dtype and length."""
    if left.dtype != right.dtype:
        logger.debug("%s rejected: dtypes %s and %s", operation, left.dtype, right.dtype)
        raise ElementTypeError(
            operation,
            f"operands must share an element type (got {left.dtype} and {right.dtype})",
            dtype=str(left.dtype),
        )
    if len(left) != len(right):
        logger.debug("%s rejected: lengths %d and %d", operation, len(left), len(right))
        raise SizeMismatchError(operation, len(left), len(right))


def _apply(operation: str, func, left: np.ndarray, right: np.ndarray) -> np.ndarray:
    check_operands(operation, left, right)
    dtype = left.dtype
    wide = working(dtype)
    result = func(left.astype(wide, copy=False), right.astype(wide, copy=False))
    return narrow(result, dtype, operation)


def add(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    return _apply('add', np.add, left, right)


def subtract(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    return _apply('subtract', np.subtract, left, right)


def multiply(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    return _apply('multiply', np.multiply, left, right)


def divide(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """
    Elementwise division. Any zero in `right` is an error, for float
    dtypes as well: no inf/nan is ever produced from a zero divisor.
    """
    check_operands('divide', left, right)
    zeros = np.flatnonzero(right == 0)
    if zeros.size:
        logger.debug("divide rejected: zero divisor at index %d", zeros[0])
        raise DivisionByZeroError('divide', int(zeros[0]))

    if is_integer(left.dtype):
        return _apply('divide', truncating_divide, left, right)
    return np.divide(left, right)


def distance_l1(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """Elementwise absolute difference, range-checked like the other operators."""
    return _apply('distance_l1', lambda l, r: np.abs(l - r), left, right)
