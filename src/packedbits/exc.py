from __future__ import annotations

__all__ = (
    "BitVectorError",
    "OutOfRangeError",
    "SizeMismatchError",
    "UnsupportedOperationError",
    "DecodeError",
)


class BitVectorError(Exception):
    """
    Base class exception for all bit vector errors.
    """

    __slots__ = ()


class OutOfRangeError(BitVectorError, IndexError):
    """
    Thrown when an index or a scan start falls outside of a vector's valid range.
    """

    __slots__ = ("index", "size")

    def __init__(self, index: int, size: int, *, inclusive: bool = False):
        #: The offending index.
        self.index: int = index
        #: The size of the vector that was indexed.
        self.size: int = size

        upper = "]" if inclusive else ")"
        super().__init__(f"index {index} out of range [0, {size}{upper}")


class SizeMismatchError(BitVectorError, ValueError):
    """
    Thrown when a bulk operator is applied between two vectors of differing size.
    """

    __slots__ = ("expected", "actual")

    def __init__(self, expected: int, actual: int):
        #: The size of the vector the operator was applied to.
        self.expected: int = expected
        #: The size of the other operand.
        self.actual: int = actual

        super().__init__(f"Expected an operand of size {expected}, got one of size {actual}")


class UnsupportedOperationError(BitVectorError, TypeError):
    """
    Thrown when attempting an operation that a fixed-size vector cannot perform, such as
    removing an index.
    """

    __slots__ = ("operation",)

    def __init__(self, operation: str):
        #: The name of the rejected operation.
        self.operation: str = operation

        super().__init__(f"{operation} is not supported, bit vectors have a fixed size")


class DecodeError(BitVectorError, ValueError):
    """
    Thrown when a textual or JSON representation cannot be decoded into a vector.
    """

    __slots__ = ("reason",)

    def __init__(self, reason: str):
        #: Why decoding failed.
        self.reason: str = reason

        super().__init__(f"Cannot decode bit vector: {reason}")
