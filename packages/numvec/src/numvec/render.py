"""Bracketed, space-separated listing of leading elements. Diagnostic only."""

from typing import Optional

import numpy as np

from numvec import config
from numvec.dtypes import is_integer


def format_element(value, dtype: np.dtype) -> str:
    if is_integer(dtype):
        return str(int(value))
    return config.get('render.float_format', '{:g}').format(float(value))


def render(y: np.ndarray, count: Optional[int] = None) -> str:
    """
    '[ 1 2 3 ]' for the first `count` elements (default from config).
    All elements are listed when count >= len(y).
    """
    if count is None:
        count = config.get('render.default_count', 10)
    if count < 0:
        raise ValueError(f"render: count must be >= 0, got {count}")

    parts = [format_element(v, y.dtype) for v in y[:count]]
    return '[ ' + ''.join(p + ' ' for p in parts) + ']'
