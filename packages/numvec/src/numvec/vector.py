"""
NumericVector
=============
Dense ordered sequence of numbers of one fixed element type (a numpy dtype).

Usage:
    from numvec import NumericVector

    a = NumericVector.zeros(4, dtype='int64')      # [ 0 0 0 0 ]
    b = NumericVector.from_buffer([0, 1, 2, 3], 4)  # copy of the buffer
    c = a + b                                      # elementwise
    b.max()                                        → 3
    NumericVector.distance_l1(a, b)                → [ 0 1 2 3 ]

Every failure raises a numvec.errors.VectorError subclass.
"""

import logging
import sys
from typing import Any, Dict, Iterable, Iterator, List, Optional, TextIO

import numpy as np

from numvec import norms, ops, stats
from numvec.dtypes import as_elements, coerce, resolve_dtype
from numvec.errors import EmptyVectorError, IndexOutOfRangeError, SizeMismatchError
from numvec.render import render

logger = logging.getLogger(__name__)


class NumericVector:
    """
    Mutable numeric vector with value semantics.

    Each instance owns its storage exclusively: constructors copy their
    input, assign() copies its source, and to_numpy()/to_list() return
    copies. Not thread-safe; concurrent mutation of one instance needs
    external locking.

    Indices are plain ints in [0, length). Negative indices and slices
    are rejected.
    """

    __hash__ = None  # mutable

    def __init__(self, values: Optional[Iterable] = None, dtype=None):
        if values is None:
            self._data = np.empty(0, dtype=resolve_dtype(dtype, 'NumericVector'))
        else:
            resolved = None if dtype is None else resolve_dtype(dtype, 'NumericVector')
            self._data = as_elements(values, resolved, 'NumericVector')

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, n: int, dtype=None) -> 'NumericVector':
        """n zero-valued elements."""
        if n < 0:
            raise ValueError(f"zeros: length must be >= 0, got {n}")
        return cls._wrap(np.zeros(n, dtype=resolve_dtype(dtype, 'zeros')))

    @classmethod
    def from_buffer(cls, buffer, length: int, dtype=None) -> 'NumericVector':
        """
        Copy the first `length` elements of an external buffer.

        The buffer must hold at least `length` elements; it is never
        retained or modified.
        """
        if length < 0:
            raise ValueError(f"from_buffer: length must be >= 0, got {length}")
        available = len(buffer)
        if length > available:
            logger.debug("from_buffer rejected: length %d, buffer holds %d", length, available)
            raise SizeMismatchError('from_buffer', length, available)

        resolved = None if dtype is None else resolve_dtype(dtype, 'from_buffer')
        if isinstance(buffer, np.ndarray):
            head = buffer[:length]
        else:
            head = [buffer[i] for i in range(length)]
        if resolved is None and length == 0 and isinstance(buffer, np.ndarray):
            resolved = resolve_dtype(buffer.dtype, 'from_buffer')
        return cls._wrap(as_elements(head, resolved, 'from_buffer'))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> 'NumericVector':
        # takes ownership of a freshly built array
        vec = cls.__new__(cls)
        vec._data = data
        return vec

    def copy(self) -> 'NumericVector':
        return self._wrap(self._data.copy())

    # ------------------------------------------------------------------
    # Size, type, conversion
    # ------------------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def length(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data.copy())

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def to_list(self) -> List:
        return self._data.tolist()

    def __eq__(self, other) -> bool:
        if isinstance(other, NumericVector):
            other_data = other._data
        else:
            try:
                other_data = np.asarray(list(other))
            except TypeError:
                return NotImplemented
        if len(other_data) != len(self._data):
            return False
        return bool(np.array_equal(self._data, other_data))

    def __repr__(self) -> str:
        return f"NumericVector({self.to_list()!r}, dtype='{self.dtype}')"

    def __str__(self) -> str:
        return self.render()

    # ------------------------------------------------------------------
    # Elementwise operators
    # ------------------------------------------------------------------

    def add(self, other: 'NumericVector') -> 'NumericVector':
        return self._wrap(ops.add(self._data, _operand(other, 'add')))

    def subtract(self, other: 'NumericVector') -> 'NumericVector':
        return self._wrap(ops.subtract(self._data, _operand(other, 'subtract')))

    def multiply(self, other: 'NumericVector') -> 'NumericVector':
        return self._wrap(ops.multiply(self._data, _operand(other, 'multiply')))

    def divide(self, other: 'NumericVector') -> 'NumericVector':
        return self._wrap(ops.divide(self._data, _operand(other, 'divide')))

    def __add__(self, other):
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.divide(other)

    @staticmethod
    def distance_l1(a: 'NumericVector', b: 'NumericVector') -> 'NumericVector':
        """New vector with |a[i] - b[i]| at each index."""
        return NumericVector._wrap(
            ops.distance_l1(_operand(a, 'distance_l1'), _operand(b, 'distance_l1'))
        )

    # ------------------------------------------------------------------
    # Assignment, indexing, mutators
    # ------------------------------------------------------------------

    def assign(self, other: 'NumericVector') -> 'NumericVector':
        """
        Replace all elements with a copy of other's. The element type
        becomes other's element type. Returns self.
        """
        self._data = _operand(other, 'assign').copy()
        return self

    def _check_index(self, index, operation: str) -> int:
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"{operation}: index must be an int, got {type(index).__name__}")
        if not 0 <= index < len(self._data):
            logger.debug("%s rejected: index %s, length %d", operation, index, len(self._data))
            raise IndexOutOfRangeError(operation, index, len(self._data))
        return int(index)

    def __getitem__(self, index):
        return self._data[self._check_index(index, 'getitem')]

    def __setitem__(self, index, value) -> None:
        i = self._check_index(index, 'setitem')
        self._data[i] = coerce(value, self.dtype, 'setitem')

    def append(self, value) -> None:
        element = coerce(value, self.dtype, 'append')
        self._data = np.append(self._data, element).astype(self.dtype, copy=False)

    def remove_last(self):
        """Remove and return the last element."""
        if len(self._data) == 0:
            logger.debug("remove_last rejected: empty vector")
            raise EmptyVectorError('remove_last')
        last = self._data[-1]
        self._data = self._data[:-1].copy()
        return last

    def remove_at(self, index: int):
        """Remove and return the element at index; later elements shift down."""
        i = self._check_index(index, 'remove_at')
        removed = self._data[i]
        self._data = np.delete(self._data, i)
        return removed

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def max(self):
        return stats.maximum(self._data)

    def min(self):
        return stats.minimum(self._data)

    def argmax(self) -> int:
        return stats.argmax(self._data)

    def argmin(self) -> int:
        return stats.argmin(self._data)

    def sum(self):
        return stats.total(self._data)

    def average(self):
        return stats.average(self._data)

    # ------------------------------------------------------------------
    # Norms
    # ------------------------------------------------------------------

    def norm_l0(self, threshold: Optional[float] = None) -> int:
        return norms.l0(self._data, threshold)

    def norm_l1(self):
        return norms.l1(self._data)

    def norm_l2(self):
        return norms.l2(self._data)

    def norm_max(self):
        return norms.max_norm(self._data)

    def norm_l1_avg(self):
        return norms.l1_avg(self._data)

    def norm_summary(self, threshold: Optional[float] = None) -> Dict[str, Any]:
        return norms.compute(self._data, threshold)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, count: Optional[int] = None) -> str:
        return render(self._data, count)

    def dump(self, count: Optional[int] = None, stream: Optional[TextIO] = None) -> None:
        """Write render(count) to stream (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        stream.write(self.render(count))


def _operand(vec, operation: str) -> np.ndarray:
    if not isinstance(vec, NumericVector):
        raise TypeError(f"{operation}: expected NumericVector, got {type(vec).__name__}")
    return vec._data


def add(a: NumericVector, b: NumericVector) -> NumericVector:
    return a.add(b)


def subtract(a: NumericVector, b: NumericVector) -> NumericVector:
    return a.subtract(b)


def multiply(a: NumericVector, b: NumericVector) -> NumericVector:
    return a.multiply(b)


def divide(a: NumericVector, b: NumericVector) -> NumericVector:
    return a.divide(b)


distance_l1 = NumericVector.distance_l1
