"""
Tests for configuration.
"""

import logging

import numpy as np
import pytest

import densemat
from densemat import DenseMatrix, RowVector, ColVector, STORAGE_DTYPE
from densemat.config import _Config, get_config, parse_log_level, ENV_LOG_LEVEL


class TestStorageDtype:
    """Storage is always float64."""

    def test_storage_dtype(self):
        assert STORAGE_DTYPE == np.float64
        assert get_config().storage_dtype == np.float64

    def test_storage_dtype_is_read_only(self):
        with pytest.raises(AttributeError):
            get_config().storage_dtype = np.float32

    def test_containers_use_storage_dtype(self):
        assert DenseMatrix(1, 1, [1.0]).dtype == np.float64
        assert RowVector(1, [1.0]).dtype == np.float64
        assert ColVector(1, [1.0]).dtype == np.float64

    def test_environment_cannot_change_storage(self, monkeypatch):
        monkeypatch.setenv("DENSEMAT_REAL", "f32")
        assert _Config().storage_dtype == np.float64
        assert DenseMatrix(1, 1, [0.1]).get(0, 0) == 0.1


class TestLogLevel:

    def test_default_log_level(self, monkeypatch):
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        assert _Config().log_level == logging.WARNING

    @pytest.mark.parametrize("spec,expected", [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" error ", logging.ERROR),
        (logging.CRITICAL, logging.CRITICAL),
    ])
    def test_set_log_level(self, spec, expected):
        densemat.set_log_level(spec)
        assert densemat.get_log_level() == expected

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="Unsupported log level"):
            densemat.set_log_level("verbose")

    def test_parse_rejects_garbage_with_value_error(self):
        with pytest.raises(ValueError):
            parse_log_level("garbage")


class TestEnvironment:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
        assert _Config().log_level == logging.DEBUG

    def test_bad_env_value_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv(ENV_LOG_LEVEL, "loud")
        assert _Config().log_level == logging.WARNING
        assert ENV_LOG_LEVEL in caplog.text
