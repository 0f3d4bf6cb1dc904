"""
Logging module for relational connector configuration.
"""

from relational_config.audit.logger import ConnectorConfigLogger, get_logger

__all__ = [
    "ConnectorConfigLogger",
    "get_logger",
]
