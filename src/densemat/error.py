"""
Error handling for densemat.

Two failure classes exist:

- ContractViolation: a construction precondition was broken (data length does
  not match the requested dimensions). This is a programmer error and is never
  caught inside the library.
- IndexOutOfBoundsError: a read addressed an element that does not exist.
  Callers are expected to handle or propagate it.

Out-of-bounds writes are not errors; ``set`` silently drops them.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
DM_OK = 0

# Argument errors (10-19)
DM_ERROR_INVALID_ARGUMENT = 10
DM_ERROR_DIMENSION_MISMATCH = 11
DM_ERROR_INDEX_OUT_OF_BOUNDS = 14


_ERROR_MESSAGES = {
    DM_OK: "Success",
    DM_ERROR_INVALID_ARGUMENT: "Invalid argument",
    DM_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    DM_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
}


# =============================================================================
# Exception Classes
# =============================================================================

class DenseMatError(Exception):
    """
    Base exception for all densemat errors.

    Carries a numeric ``code`` and a human readable ``message``.
    """

    OK = DM_OK
    ERROR_INVALID_ARGUMENT = DM_ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = DM_ERROR_DIMENSION_MISMATCH
    ERROR_INDEX_OUT_OF_BOUNDS = DM_ERROR_INDEX_OUT_OF_BOUNDS

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(f"densemat error {code}: {message}")


class IndexOutOfBoundsError(DenseMatError, IndexError):
    """Raised by ``get`` when no element exists at the requested coordinate."""

    def __init__(self, message: Optional[str] = None):
        if message is None:
            message = "there is no element with this index"
        super().__init__(DM_ERROR_INDEX_OUT_OF_BOUNDS, message)


class ContractViolation(DenseMatError, AssertionError):
    """
    Raised when a constructor precondition is broken.

    Subclasses AssertionError because it signals a bug in the caller, not a
    runtime data condition. It is raised explicitly rather than through an
    ``assert`` statement so it survives ``python -O``.

    The code names the broken condition: DM_ERROR_DIMENSION_MISMATCH for a
    data length that does not match the requested extent,
    DM_ERROR_INVALID_ARGUMENT for negative dimensions or non-flat data.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        code: int = DM_ERROR_DIMENSION_MISMATCH,
    ):
        super().__init__(code, message)


def require(condition: bool, message: str, code: int = DM_ERROR_DIMENSION_MISMATCH) -> None:
    """
    Enforce a construction contract.

    Raises:
        ContractViolation: If ``condition`` is false
    """
    if not condition:
        raise ContractViolation(message, code=code)
