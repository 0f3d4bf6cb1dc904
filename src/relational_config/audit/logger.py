"""
Connector configuration logger.

This module provides logging functionality for the configuration layer of
relational connectors, with text and structured JSON output.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from relational_config.config.models import LoggingConfig, ValidationProblem


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record):
        """Format log record as JSON."""
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields from record
        for attr_name in [
            "connector",
            "field",
            "table_name",
        ]:
            if hasattr(record, attr_name):
                log_entry[attr_name] = getattr(record, attr_name)

        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Text formatter for human-readable logging."""

    def __init__(self):
        """Initialize text formatter."""
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


class ConnectorConfigLogger:
    """Logger for connector configuration resolution."""

    def __init__(self, name: str = "relational_config"):
        """
        Initialize the logger.

        Handlers are only installed by ``setup_logging``; until then records
        propagate to the root logger.

        Args:
            name: Logger name
        """
        self.logger = logging.getLogger(name)

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Setup logging based on configuration.

        Args:
            config: Logging configuration
        """
        self.logger.handlers.clear()
        self.logger.propagate = False
        self.logger.setLevel(getattr(logging, config.level.upper()))

        # Choose formatter
        if config.format == "json":
            formatter = JSONFormatter()
        else:
            formatter = TextFormatter()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if config.log_to_file and config.log_file_path:
            log_path = Path(config.log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.logger.error(message, extra=kwargs)

    def log_validation_problems(
        self, connector: str, problems: Iterable[ValidationProblem]
    ) -> None:
        """Log each validation problem at warning level."""
        for problem in problems:
            self.logger.warning(
                f"Invalid value for {problem.field}: {problem.message}",
                extra={"connector": connector, "field": problem.field},
            )

    def log_missing_override(self, connector: Optional[str], table_name: str, key: str) -> None:
        """Log a table listed for snapshot override without a select statement."""
        self.logger.warning(
            f"Table {table_name} is listed for a snapshot select override but '{key}' is not set",
            extra={"connector": connector, "table_name": table_name},
        )

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance."""
        return self.logger


def get_logger(name: str = "relational_config") -> ConnectorConfigLogger:
    """Get a logger instance."""
    return ConnectorConfigLogger(name)
