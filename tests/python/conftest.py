"""
Pytest configuration and shared fixtures for densemat tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import densemat
from densemat import DenseMatrix, RowVector, ColVector


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_log_level():
    """Restore the default log level after every test."""
    saved = densemat.get_log_level()
    yield
    densemat.set_log_level(saved)


@pytest.fixture
def matrix_2x3():
    """A 2x3 matrix.

    Matrix:
    [[1, 2, 3],
     [4, 5, 6]]
    """
    return DenseMatrix(2, 3, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])


@pytest.fixture
def row_vector():
    return RowVector(3, [1.0, 2.0, 3.0])


@pytest.fixture
def col_vector():
    return ColVector(3, [4.0, 5.0, 6.0])


# =============================================================================
# Helper Functions
# =============================================================================

def snapshot(container):
    """All logical values of a container, row by row."""
    rows, cols = container.dimensions()
    return [[container.get(r, c) for c in range(cols)] for r in range(rows)]
