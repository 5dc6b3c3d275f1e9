"""
Norms
=====
Norms of a 1-D numeric array. Each returns the array's element type,
except l0 which is a count.

    l0(y, threshold)   number of |y[i]| > threshold
    l1(y)              sum |y[i]|
    l2(y)              sqrt(sum y[i]^2), truncated for integer dtypes
    max_norm(y)        max |y[i]|
    l1_avg(y)          l1(y) / len(y), truncated for integer dtypes

l0, l1, l2 and max_norm of an empty array are 0. l1_avg of an empty array
raises EmptyVectorError.

compute(y) bundles all five into a namespaced dict of floats.
"""

import math
from typing import Dict, Optional

import numpy as np

from numvec import config
from numvec.dtypes import exact_sum, is_integer, to_element, truncating_mean, working
from numvec.stats import require_nonempty


def _magnitudes(y: np.ndarray) -> np.ndarray:
    # widened first: abs(int8(-128)) does not fit int8, abs(int64 min) does not fit int64
    return np.abs(y.astype(working(y.dtype), copy=False))


def l0(y: np.ndarray, threshold: Optional[float] = None) -> int:
    if threshold is None:
        threshold = config.get('norms.l0_threshold', 0)
    if len(y) == 0:
        return 0
    return int(np.count_nonzero(_magnitudes(y) > threshold))


def _l1_accumulated(y: np.ndarray):
    return exact_sum(_magnitudes(y), y.dtype)


def l1(y: np.ndarray):
    return to_element(_l1_accumulated(y), y.dtype, 'norm_l1')


def l2(y: np.ndarray):
    root = math.sqrt(float(np.sum(np.square(y.astype(np.float64)))))
    if is_integer(y.dtype):
        root = math.floor(root)
    return to_element(root, y.dtype, 'norm_l2')


def max_norm(y: np.ndarray):
    if len(y) == 0:
        return y.dtype.type(0)
    return to_element(_magnitudes(y).max(), y.dtype, 'norm_max')


def l1_avg(y: np.ndarray):
    require_nonempty(y, 'norm_l1_avg')
    acc = _l1_accumulated(y)
    if is_integer(y.dtype):
        return to_element(truncating_mean(int(acc), len(y)), y.dtype, 'norm_l1_avg')
    return to_element(acc / len(y), y.dtype, 'norm_l1_avg')


def compute(y: np.ndarray, threshold: Optional[float] = None) -> Dict[str, float]:
    """
    All norms of y as plain floats.

    Returns:
        {norm_l0, norm_l1, norm_l2, norm_max, norm_l1_avg}
        norm_l1_avg is NaN for an empty array.
    """
    if len(y) == 0:
        return {'norm_l0': 0.0, 'norm_l1': 0.0, 'norm_l2': 0.0,
                'norm_max': 0.0, 'norm_l1_avg': np.nan}

    return {
        'norm_l0': float(l0(y, threshold)),
        'norm_l1': float(l1(y)),
        'norm_l2': float(l2(y)),
        'norm_max': float(max_norm(y)),
        'norm_l1_avg': float(l1_avg(y)),
    }
