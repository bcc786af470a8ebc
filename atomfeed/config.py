"""Configuration management for atomfeed."""

import os
from dataclasses import dataclass

from .logging_config import setup_structured_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Configuration for library logging."""

    level: str = "WARNING"
    structured: bool = True


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.log_level = os.getenv("ATOMFEED_LOG_LEVEL", "WARNING").strip().upper()
        self.structured_logs = os.getenv(
            "ATOMFEED_STRUCTURED_LOGS", "true"
        ).strip().lower() not in ("0", "false", "no", "off")

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration.

        Raises:
            ValueError: If ATOMFEED_LOG_LEVEL is not a known level
        """
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid ATOMFEED_LOG_LEVEL {self.log_level!r}, "
                f"expected one of {', '.join(LOG_LEVELS)}"
            )
        return LoggingConfig(level=self.log_level, structured=self.structured_logs)


def configure_logging(config: Config | None = None) -> LoggingConfig:
    """Apply the environment driven logging configuration.

    Returns:
        The LoggingConfig that was applied
    """
    logging_config = (config or Config()).get_logging_config()
    setup_structured_logging(logging_config.level, logging_config.structured)
    return logging_config
