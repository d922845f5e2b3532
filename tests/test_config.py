"""Tests for configuration and logging setup."""

import logging

import pytest

from macconv import __version__
from macconv.config import AppConfig, load_env_file
from macconv.errors import ValidationError
from macconv.logging_config import resolve_level, setup_logging


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()
        assert config.log_level == "WARNING"
        assert config.tcp_timeout == 2.0
        assert config.tcp_interval == 1.0
        assert config.tcp_max_attempts == 10
        assert config.tcp_required_successes == 5
        assert config.version == __version__

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MACCONV_LOG_LEVEL", "debug")
        monkeypatch.setenv("MACCONV_TCP_TIMEOUT", "0.5")
        monkeypatch.setenv("MACCONV_TCP_INTERVAL", "0")
        monkeypatch.setenv("MACCONV_TCP_MAX_ATTEMPTS", "3")
        monkeypatch.setenv("MACCONV_TCP_REQUIRED_SUCCESSES", "2")
        monkeypatch.setenv("MACCONV_BUILD_DATE", "2025-06-01")
        monkeypatch.delenv("MACCONV_LOG_FILE", raising=False)

        config = AppConfig.from_env(load_file=False)
        assert config.log_level == "debug"
        assert config.log_file is None
        assert config.tcp_timeout == 0.5
        assert config.tcp_interval == 0.0
        assert config.tcp_max_attempts == 3
        assert config.tcp_required_successes == 2
        assert config.build_date == "2025-06-01"

    @pytest.mark.parametrize("name,value", [
        ("MACCONV_TCP_MAX_ATTEMPTS", "ten"),
        ("MACCONV_TCP_REQUIRED_SUCCESSES", "2.5"),
        ("MACCONV_TCP_TIMEOUT", "fast"),
        ("MACCONV_TCP_INTERVAL", "1s"),
    ])
    def test_from_env_rejects_bad_numbers(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError, match=name) as exc_info:
            AppConfig.from_env(load_file=False)
        assert isinstance(exc_info.value.cause, ValueError)

    def test_load_env_file(self, tmp_path, monkeypatch):
        # recorded so the value loaded below is undone at teardown
        monkeypatch.setenv("MACCONV_TCP_MAX_ATTEMPTS", "")
        monkeypatch.delenv("MACCONV_TCP_MAX_ATTEMPTS")
        env_file = tmp_path / ".env"
        env_file.write_text("MACCONV_TCP_MAX_ATTEMPTS=7\n", encoding="utf-8")

        assert load_env_file([tmp_path / "missing.env", env_file]) == env_file
        assert AppConfig.from_env(load_file=False).tcp_max_attempts == 7

    def test_load_env_file_none_found(self, tmp_path):
        assert load_env_file([tmp_path / "missing.env"]) is None


class TestLogging:
    """Tests for setup_logging."""

    def test_resolve_level(self):
        assert resolve_level("debug") == "DEBUG"
        assert resolve_level("warn") == "WARNING"
        assert resolve_level("ERROR") == "ERROR"
        assert resolve_level("verbose") is None

    def test_setup_sets_level(self):
        logger = setup_logging(level="debug", enable_console=False)
        assert logger.name == "macconv"
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_unknown_level_falls_back_to_warning(self):
        logger = setup_logging(level="chatty", enable_console=False)
        assert logger.level == logging.WARNING

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "macconv.log"
        logger = setup_logging(level="info", log_file=str(log_file), enable_console=False)
        logger.info("hello from test")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
