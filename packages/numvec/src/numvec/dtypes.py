"""
Element types.

A vector's element type is a numpy dtype of kind signed int ('i'),
unsigned int ('u') or real float ('f'). Everything else is rejected.

Values entering a vector are cast with `coerce` / `as_elements`, which
refuse lossy integer casts. Values leaving an accumulator are cast back
with `to_element`, which refuses to wrap around.
"""

import math
import numbers
from typing import Iterable, Optional

import numpy as np

from numvec import config
from numvec.errors import ElementTypeError

NUMERIC_KINDS = 'iuf'


def resolve_dtype(dtype=None, operation: str = 'dtype') -> np.dtype:
    """Resolve a dtype argument (None → configured default) and check it is numeric."""
    if dtype is None:
        dtype = config.get('dtype.default', 'float64')
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise ElementTypeError(operation, f"not a dtype: {dtype!r}") from exc
    if resolved.kind not in NUMERIC_KINDS:
        raise ElementTypeError(
            operation,
            f"element type must be an integer or real float dtype, got {resolved}",
            dtype=str(resolved),
        )
    return resolved


def is_integer(dtype: np.dtype) -> bool:
    return dtype.kind in 'iu'


def exact_sum(values: np.ndarray, dtype: np.dtype):
    """
    Sum without wraparound. Integer kinds sum as Python ints, so the result
    is exact whatever its size; floats accumulate in float64.
    """
    if is_integer(dtype):
        return sum(int(v) for v in values.tolist())
    return np.sum(values, dtype=np.float64)


def coerce(value, dtype: np.dtype, operation: str):
    """Cast one incoming value to dtype. Lossy integer casts are refused."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (numbers.Real, np.number)):
        raise ElementTypeError(
            operation, f"value {value!r} is not a real number", dtype=str(dtype),
        )

    if not is_integer(dtype):
        try:
            cast = dtype.type(value)
        except OverflowError as exc:
            raise ElementTypeError(
                operation, f"value {value!r} outside the range of {dtype}", dtype=str(dtype),
            ) from exc
        if not np.isfinite(cast) and math.isfinite(float(value)):
            raise ElementTypeError(
                operation, f"value {value!r} outside the range of {dtype}", dtype=str(dtype),
            )
        return cast

    if isinstance(value, (float, np.floating)):
        if not np.isfinite(value) or not float(value).is_integer():
            raise ElementTypeError(
                operation, f"value {value!r} is not integral for {dtype}", dtype=str(dtype),
            )
        value = int(value)

    info = np.iinfo(dtype)
    if not info.min <= int(value) <= info.max:
        raise ElementTypeError(
            operation,
            f"value {value!r} outside [{info.min}, {info.max}] for {dtype}",
            dtype=str(dtype),
        )
    return dtype.type(int(value))


def as_elements(values: Iterable, dtype: Optional[np.dtype], operation: str) -> np.ndarray:
    """
    Copy values into a fresh 1-D array of a numeric dtype.

    With dtype None the type is inferred the way numpy infers it
    (ints → int64, anything with a float → float64).
    """
    if isinstance(values, np.ndarray):
        source = values
    else:
        source = np.asarray(list(values))

    if source.ndim != 1:
        raise ElementTypeError(operation, f"expected a 1-D sequence, got {source.ndim}-D")
    if source.size and source.dtype.kind not in NUMERIC_KINDS:
        raise ElementTypeError(
            operation, f"values are not real numbers (inferred {source.dtype})",
            dtype=str(source.dtype),
        )

    if dtype is None:
        dtype = resolve_dtype(source.dtype if source.size else None, operation)

    if source.dtype == dtype or np.can_cast(source.dtype, dtype, casting='safe'):
        return np.array(source, dtype=dtype, copy=True)

    return np.array([coerce(v.item() if isinstance(v, np.generic) else v, dtype, operation)
                     for v in source], dtype=dtype)


def working(dtype: np.dtype) -> np.dtype:
    """
    Dtype for elementwise integer arithmetic, wide enough that no result
    wraps before `narrow` checks it. Narrow ints widen to int64; 64-bit
    ints go to object so numpy works on exact Python ints.
    """
    if is_integer(dtype):
        return np.dtype(np.int64) if dtype.itemsize < 8 else np.dtype(object)
    return dtype


def narrow(values: np.ndarray, dtype: np.dtype, operation: str) -> np.ndarray:
    """Cast a working array back to dtype, refusing to wrap."""
    if is_integer(dtype) and values.size and values.dtype != dtype:
        info = np.iinfo(dtype)
        lo, hi = int(values.min()), int(values.max())
        if lo < info.min or hi > info.max:
            raise OverflowError(
                f"{operation}: result range [{lo}, {hi}] does not fit {dtype}"
            )
    return values.astype(dtype)


def to_element(value, dtype: np.dtype, operation: str):
    """Cast an accumulated result back to dtype, refusing to wrap."""
    if is_integer(dtype):
        info = np.iinfo(dtype)
        if not info.min <= int(value) <= info.max:
            raise OverflowError(
                f"{operation}: result {int(value)} does not fit {dtype}"
            )
        return dtype.type(int(value))
    return dtype.type(value)


def truncating_divide(num: np.ndarray, den: np.ndarray) -> np.ndarray:
    """Integer division rounding toward zero. Denominators must be non-zero."""
    q = num // den
    if num.dtype.kind in "iO":
        # floor division rounds negative inexact quotients down; pull them back up
        q = np.where((q < 0) & (q * den != num), q + 1, q)
    return q


def truncating_mean(total: int, n: int) -> int:
    """Exact integer mean rounded toward zero."""
    q = abs(total) // n
    return q if total >= 0 else -q
