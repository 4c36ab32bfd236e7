"""
DenseMatrix - row-major dense matrix container.

Storage is a flat, owned NumPy buffer. The element at logical coordinate
(row, col) lives at offset ``row * stride + col``. Construction always sets
``stride == cols``; the stride is kept as a separate field so row sub-views
can later share a buffer without changing the addressing formula.

Access policy:
    - get() outside the extent raises IndexOutOfBoundsError
    - set() outside the extent is a silent no-op

Typical usage:
    >>> m = DenseMatrix(2, 3, [1, 2, 3, 4, 5, 6])
    >>> m.get(1, 2)
    6.0
    >>> m.set(5, 5, 0.0)    # ignored
    >>> print(m.render())
    Matrix (2x3):
    [ 1, 2, 3 ]
    [ 4, 5, 6 ]
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Iterable, Tuple

import numpy as np

from .config import STORAGE_DTYPE
from .error import DM_ERROR_INVALID_ARGUMENT, IndexOutOfBoundsError, require

logger = logging.getLogger("densemat.dense")


def format_real(value: Any) -> str:
    """
    Render one stored value in its default textual form.

    Shortest positional decimal, integral values without a fractional part
    (``1``, ``2.5``, ``-0``, ``inf``, ``NaN``).
    """
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


class DenseMatrix:
    """
    Row-major dense matrix of real values.

    Attributes:
        rows (int): Number of rows
        cols (int): Number of columns
        stride (int): Elements to advance one row (== cols for owned matrices)
        dtype (np.dtype): Storage dtype (always float64)
    """

    __slots__ = ("_rows", "_cols", "_stride", "_data")

    def __init__(self, rows: int, cols: int, data: Iterable[float]):
        """
        Build a matrix from dimensions and a flat row-major value sequence.

        The values are copied into float64 storage; the matrix never aliases
        the caller's buffer.

        Args:
            rows: Number of rows
            cols: Number of columns
            data: Flat sequence of exactly rows * cols values

        Raises:
            ContractViolation: If a dimension is negative or data is not flat
                (DM_ERROR_INVALID_ARGUMENT), or len(data) != rows * cols
                (DM_ERROR_DIMENSION_MISMATCH)
        """
        rows = operator.index(rows)
        cols = operator.index(cols)
        require(
            rows >= 0 and cols >= 0,
            f"Dimensions must be non-negative, got {rows}x{cols}.",
            code=DM_ERROR_INVALID_ARGUMENT,
        )

        if not isinstance(data, np.ndarray):
            data = list(data)
        buffer = np.array(data, dtype=STORAGE_DTYPE)

        require(buffer.ndim == 1, "Data must be a flat sequence.", code=DM_ERROR_INVALID_ARGUMENT)
        require(buffer.size == rows * cols, "Data length must match dimensions.")

        self._rows = rows
        self._cols = cols
        self._stride = cols
        self._data = buffer
        logger.debug("Constructed %dx%d matrix (dtype=%s)", rows, cols, buffer.dtype)

    @classmethod
    def _from_buffer(cls, rows: int, cols: int, stride: int, buffer: np.ndarray) -> "DenseMatrix":
        """Internal: adopt an already validated buffer without copying."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._stride = stride
        obj._data = buffer
        return obj

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "DenseMatrix":
        """
        Copy a NumPy array into a new matrix.

        1D arrays become (n, 1) column matrices; 2D arrays keep their shape.

        Raises:
            ValueError: If the array is not 1D or 2D
        """
        arr = np.asarray(arr)
        if arr.ndim == 1:
            rows, cols = arr.shape[0], 1
        elif arr.ndim == 2:
            rows, cols = arr.shape
        else:
            raise ValueError(f"Expected 1D or 2D array, got {arr.ndim}D")
        return cls(rows, cols, arr.reshape(-1))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Matrix shape (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def stride(self) -> int:
        """Row stride in elements."""
        return self._stride

    @property
    def size(self) -> int:
        """Total number of logical elements."""
        return self._rows * self._cols

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def is_contiguous(self) -> bool:
        """Check if rows are packed back to back (stride == cols)."""
        return self._stride == self._cols

    # =========================================================================
    # Dimension / Copy / Access
    # =========================================================================

    def dimensions(self) -> Tuple[int, int]:
        """Return (rows, cols)."""
        return (self._rows, self._cols)

    def copy(self) -> "DenseMatrix":
        """Deep copy: same rows, cols and stride over a fresh buffer."""
        logger.debug("Copying %dx%d matrix", self._rows, self._cols)
        return DenseMatrix._from_buffer(self._rows, self._cols, self._stride, self._data.copy())

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get(self, row: int, col: int) -> float:
        """
        Get element at (row, col).

        Raises:
            IndexOutOfBoundsError: If the coordinate is outside the matrix
        """
        row = operator.index(row)
        col = operator.index(col)
        if not self._in_bounds(row, col):
            raise IndexOutOfBoundsError(
                f"there is no element with index ({row}, {col}) "
                f"in a {self._rows}x{self._cols} matrix"
            )
        return float(self._data[row * self._stride + col])

    def set(self, row: int, col: int, value: float) -> None:
        """
        Set element at (row, col).

        Writes outside the matrix are discarded without error.
        """
        row = operator.index(row)
        col = operator.index(col)
        if not self._in_bounds(row, col):
            logger.debug(
                "Discarded write to (%d, %d) outside %dx%d matrix",
                row, col, self._rows, self._cols,
            )
            return
        self._data[row * self._stride + col] = float(value)

    def __getitem__(self, key) -> float:
        """Get element at (row, col)."""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Index must be (row, col) tuple")
        return self.get(key[0], key[1])

    def __setitem__(self, key, value: float) -> None:
        """Set element at (row, col)."""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Index must be (row, col) tuple")
        self.set(key[0], key[1], value)

    # =========================================================================
    # Conversion
    # =========================================================================

    def _row(self, row: int) -> np.ndarray:
        start = row * self._stride
        return self._data[start:start + self._cols]

    def to_numpy(self) -> np.ndarray:
        """Return an independent (rows, cols) copy of the values."""
        view = self._data[: self._rows * self._stride].reshape(self._rows, self._stride)
        return view[:, : self._cols].copy()

    def render(self) -> str:
        """Debug text: ``Matrix (RxC):`` header and one bracketed line per row."""
        lines = [f"Matrix ({self._rows}x{self._cols}):"]
        for r in range(self._rows):
            cells = ",".join(f" {format_real(v)}" for v in self._row(r))
            lines.append(f"[{cells} ]")
        return "\n".join(lines) + "\n"

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.to_numpy(), other.to_numpy())

    __hash__ = None

    def __len__(self) -> int:
        return self._rows

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<DenseMatrix {self._rows}x{self._cols} stride={self._stride}>"
