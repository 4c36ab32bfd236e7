"""
Row and column vectors.

Each vector owns exactly one DenseMatrix fixed to a single row (RowVector) or
a single column (ColVector) and forwards every operation to it. Bounds and the
get/set policy are those of the inner matrix.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Tuple

import numpy as np

from .dense import DenseMatrix
from .error import require


class _Vector(ABC):
    """Delegation shared by RowVector and ColVector."""

    __slots__ = ("_matrix",)

    @staticmethod
    @abstractmethod
    def _shape_for(size: int) -> Tuple[int, int]:
        """Matrix (rows, cols) holding ``size`` elements along the vector axis."""
        ...

    def __init__(self, size: int, data: Iterable[float]):
        if not isinstance(data, np.ndarray):
            data = list(data)
        require(len(data) == size, "Data length must match the specified size.")
        rows, cols = self._shape_for(size)
        self._matrix = DenseMatrix(rows, cols, data)

    @classmethod
    def _wrap(cls, matrix: DenseMatrix):
        obj = cls.__new__(cls)
        obj._matrix = matrix
        return obj

    @property
    def size(self) -> int:
        return self._matrix.size

    @property
    def shape(self) -> Tuple[int, int]:
        return self._matrix.shape

    @property
    def dtype(self) -> np.dtype:
        return self._matrix.dtype

    def dimensions(self) -> Tuple[int, int]:
        return self._matrix.dimensions()

    def copy(self):
        """Deep copy, rewrapped in the same vector type."""
        return self._wrap(self._matrix.copy())

    def get(self, row: int, col: int) -> float:
        return self._matrix.get(row, col)

    def set(self, row: int, col: int, value: float) -> None:
        self._matrix.set(row, col, value)

    def __getitem__(self, key) -> float:
        return self._matrix[key]

    def __setitem__(self, key, value: float) -> None:
        self._matrix[key] = value

    def to_matrix(self) -> DenseMatrix:
        """Return a deep copy of the underlying matrix."""
        return self._matrix.copy()

    def to_numpy(self) -> np.ndarray:
        """Return the values as an independent 1D array."""
        return self._matrix.to_numpy().reshape(-1)

    def render(self) -> str:
        return f"{type(self).__name__}: {self._matrix.render()}"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._matrix == other._matrix

    __hash__ = None

    def __len__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} size={self.size}>"


class RowVector(_Vector):
    """
    A 1 x size matrix.

    Valid coordinates are (0, col) for 0 <= col < size.

    Example:
        >>> v = RowVector(3, [1.0, 2.0, 3.0])
        >>> v.dimensions()
        (1, 3)
    """

    __slots__ = ()

    @staticmethod
    def _shape_for(size: int) -> Tuple[int, int]:
        return (1, size)


class ColVector(_Vector):
    """
    A size x 1 matrix.

    Valid coordinates are (row, 0) for 0 <= row < size.
    """

    __slots__ = ()

    @staticmethod
    def _shape_for(size: int) -> Tuple[int, int]:
        return (size, 1)
