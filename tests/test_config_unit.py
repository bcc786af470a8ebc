"""Unit tests for configuration management."""

import logging
import os
from unittest.mock import patch

import pytest

from atomfeed.config import Config, LoggingConfig, configure_logging
from atomfeed.logging_config import StructuredFormatter


class TestConfigUnit:
    """Unit tests for Config class."""

    def test_defaults_when_no_env_var(self):
        """Without environment variables logging defaults to WARNING, JSON."""
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        assert config.get_logging_config() == LoggingConfig(
            level="WARNING", structured=True
        )

    def test_env_vars_are_read(self):
        """Level is normalized to upper case; structured can be disabled."""
        env = {"ATOMFEED_LOG_LEVEL": " debug ", "ATOMFEED_STRUCTURED_LOGS": "false"}
        with patch.dict(os.environ, env, clear=True):
            config = Config()

        assert config.get_logging_config() == LoggingConfig(
            level="DEBUG", structured=False
        )

    def test_invalid_level_rejected(self):
        """Unknown log levels raise ValueError."""
        with patch.dict(os.environ, {"ATOMFEED_LOG_LEVEL": "VERBOSE"}, clear=True):
            config = Config()

        with pytest.raises(ValueError, match="ATOMFEED_LOG_LEVEL"):
            config.get_logging_config()

    def test_configure_logging_installs_structured_handler(self):
        """configure_logging applies the level and the JSON formatter."""
        root_logger = logging.getLogger()
        original_level = root_logger.level
        original_handlers = root_logger.handlers[:]

        try:
            with patch.dict(os.environ, {"ATOMFEED_LOG_LEVEL": "INFO"}, clear=True):
                applied = configure_logging()

            assert applied.level == "INFO"
            assert root_logger.level == logging.INFO
            assert len(root_logger.handlers) == 1
            assert isinstance(root_logger.handlers[0].formatter, StructuredFormatter)
            assert logging.getLogger("atomfeed.serializer").level == logging.INFO
        finally:
            root_logger.handlers.clear()
            root_logger.handlers.extend(original_handlers)
            root_logger.setLevel(original_level)
            for name in ("atomfeed", "atomfeed.serializer", "atomfeed.config"):
                logging.getLogger(name).setLevel(logging.NOTSET)
