"""
Tests for the demo CLI.
"""

import io
import logging

import pytest

import densemat
from densemat import DenseMatrix
from densemat.cli import describe, main, run_demo


EXPECTED_OUTPUT = (
    "RowVector: Matrix (1x3):\n"
    "[ 1, 2, 3 ]\n"
    "1 3\n"
    "ColVector: Matrix (3x1):\n"
    "[ 4 ]\n"
    "[ 5 ]\n"
    "[ 6 ]\n"
    "3 1\n"
    "Matrix (2x3):\n"
    "[ 1, 2, 3 ]\n"
    "[ 4, 5, 6 ]\n"
    "2 3\n"
)


class TestDemo:

    def test_run_demo(self):
        out = io.StringIO()
        assert run_demo(out) == 0
        assert out.getvalue() == EXPECTED_OUTPUT

    def test_describe(self):
        out = io.StringIO()
        describe(DenseMatrix(1, 1, [2.5]), out)
        assert out.getvalue() == "Matrix (1x1):\n[ 2.5 ]\n1 1\n"

    def test_main(self, capsys):
        assert main([]) == 0
        assert capsys.readouterr().out == EXPECTED_OUTPUT

    def test_main_verbose(self, capsys):
        assert main(["-v"]) == 0
        assert densemat.get_log_level() == logging.DEBUG
        assert capsys.readouterr().out == EXPECTED_OUTPUT

    def test_main_log_level(self, capsys):
        assert main(["--log-level", "info"]) == 0
        assert densemat.get_log_level() == logging.INFO
        assert capsys.readouterr().out == EXPECTED_OUTPUT

    def test_precision_flag_removed(self, capsys):
        with pytest.raises(SystemExit):
            main(["--precision", "f32"])
