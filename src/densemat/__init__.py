"""
densemat - Dense matrix container

Row-major dense matrix storage with stride-based addressing, plus row and
column vector specializations.

Modules:
- dense: DenseMatrix (storage, get/set, copy, debug rendering)
- vector: RowVector / ColVector wrappers
- error: Exception hierarchy and error codes
- config: Storage dtype and default log level

Example:
    >>> import densemat
    >>> m = densemat.DenseMatrix(2, 3, [1, 2, 3, 4, 5, 6])
    >>> m.dimensions()
    (2, 3)
    >>> m.get(0, 2)
    3.0
    >>> m.get(2, 0)
    Traceback (most recent call last):
        ...
    densemat.error.IndexOutOfBoundsError: ...
"""

__version__ = '0.1.0'

from .error import (
    DenseMatError,
    IndexOutOfBoundsError,
    ContractViolation,
    DM_OK,
    DM_ERROR_INVALID_ARGUMENT,
    DM_ERROR_DIMENSION_MISMATCH,
    DM_ERROR_INDEX_OUT_OF_BOUNDS,
)

from .config import (
    STORAGE_DTYPE,
    set_log_level,
    get_log_level,
)

from ._typing import (
    Dimension,
    Copyable,
    Access,
    MatrixLike,
)

from .dense import DenseMatrix
from .vector import RowVector, ColVector

__all__ = [
    "__version__",
    # Error handling
    "DenseMatError",
    "IndexOutOfBoundsError",
    "ContractViolation",
    "DM_OK",
    "DM_ERROR_INVALID_ARGUMENT",
    "DM_ERROR_DIMENSION_MISMATCH",
    "DM_ERROR_INDEX_OUT_OF_BOUNDS",
    # Configuration
    "STORAGE_DTYPE",
    "set_log_level",
    "get_log_level",
    # Protocols
    "Dimension",
    "Copyable",
    "Access",
    "MatrixLike",
    # Containers
    "DenseMatrix",
    "RowVector",
    "ColVector",
]
