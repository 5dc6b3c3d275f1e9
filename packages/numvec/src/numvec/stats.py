"""Order statistics and sums over a 1-D numeric array."""

import logging

import numpy as np

from numvec.dtypes import exact_sum, is_integer, to_element, truncating_mean
from numvec.errors import EmptyVectorError

logger = logging.getLogger(__name__)


def require_nonempty(y: np.ndarray, operation: str) -> None:
    if len(y) == 0:
        logger.debug("%s rejected: empty vector", operation)
        raise EmptyVectorError(operation)


def maximum(y: np.ndarray):
    require_nonempty(y, 'max')
    return y.max()


def minimum(y: np.ndarray):
    require_nonempty(y, 'min')
    return y.min()


def argmax(y: np.ndarray) -> int:
    """Index of the largest element. Ties go to the lowest index."""
    require_nonempty(y, 'argmax')
    return int(np.argmax(y))


def argmin(y: np.ndarray) -> int:
    """Index of the smallest element. Ties go to the lowest index."""
    require_nonempty(y, 'argmin')
    return int(np.argmin(y))


def total(y: np.ndarray, operation: str = 'sum'):
    require_nonempty(y, operation)
    acc = exact_sum(y, y.dtype)
    return to_element(acc, y.dtype, operation)


def average(y: np.ndarray):
    """
    Mean of the elements, returned as the vector's element type.
    Integer dtypes truncate toward zero: average([1, 2]) == 1,
    average([-1, -2]) == -1.
    """
    require_nonempty(y, 'average')
    acc = exact_sum(y, y.dtype)
    if is_integer(y.dtype):
        return to_element(truncating_mean(int(acc), len(y)), y.dtype, 'average')
    return to_element(acc / len(y), y.dtype, 'average')
