"""
densemat capability protocols.

The containers share a contract, not an implementation. Any object providing
dimension query, deep copy and indexed get/set can stand in for a DenseMatrix,
RowVector or ColVector:

    >>> from densemat import RowVector
    >>> from densemat._typing import MatrixLike
    >>> isinstance(RowVector(2, [1.0, 2.0]), MatrixLike)
    True
"""

from __future__ import annotations

from typing import Protocol, Tuple, TypeVar, runtime_checkable


MatrixT = TypeVar("MatrixT", bound="MatrixLike")


@runtime_checkable
class Dimension(Protocol):
    """Objects reporting their (rows, cols) extent."""

    def dimensions(self) -> Tuple[int, int]:
        ...


@runtime_checkable
class Copyable(Protocol):
    """Objects producing storage-independent duplicates of themselves."""

    def copy(self):
        ...


@runtime_checkable
class Access(Protocol):
    """Objects with coordinate-based element access.

    ``get`` raises IndexOutOfBoundsError outside the extent; ``set`` ignores
    writes outside the extent.
    """

    def get(self, row: int, col: int) -> float:
        ...

    def set(self, row: int, col: int, value: float) -> None:
        ...


@runtime_checkable
class MatrixLike(Dimension, Copyable, Access, Protocol):
    """Full container contract: Dimension + Copyable + Access."""
    pass
