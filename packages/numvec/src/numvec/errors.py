"""
Vector errors.

Every failing operation raises one of these. Each error carries the name
of the operation that rejected the call so the call site can be found from
the message alone.
"""

from typing import Optional


class VectorError(Exception):
    """Base class for every error raised by numvec."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation}: {message}")


class SizeMismatchError(VectorError, ValueError):
    """Operands of an elementwise operation have different lengths."""

    def __init__(self, operation: str, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(
            operation,
            f"lengths differ ({left} vs {right})",
        )


class DivisionByZeroError(VectorError, ZeroDivisionError):
    """An element of the divisor vector is zero."""

    def __init__(self, operation: str, index: int):
        self.index = index
        super().__init__(operation, f"divisor element at index {index} is zero")


class IndexOutOfRangeError(VectorError, IndexError):
    """Index outside [0, length)."""

    def __init__(self, operation: str, index, length: int):
        self.index = index
        self.length = length
        super().__init__(
            operation,
            f"index {index!r} out of range for vector of length {length}",
        )


class EmptyVectorError(VectorError, ValueError):
    """Aggregate queried on a zero-length vector."""

    def __init__(self, operation: str):
        super().__init__(operation, "vector is empty")


class ElementTypeError(VectorError, TypeError):
    """Value or dtype does not satisfy the numeric element contract."""

    def __init__(self, operation: str, message: str, dtype: Optional[str] = None):
        self.dtype = dtype
        super().__init__(operation, message)
