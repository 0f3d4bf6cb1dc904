"""
Core exceptions for the relational connector configuration.

This module defines custom exception classes used throughout
the configuration resolution layer.
"""


class RelationalConfigError(Exception):
    """Base exception for relational connector configuration errors."""


class ConfigurationError(RelationalConfigError):
    """Raised when there are configuration-related errors."""


class TableIdParseError(RelationalConfigError, ValueError):
    """Raised when a qualified table name cannot be parsed."""


class ValidationError(RelationalConfigError):
    """Raised when a configuration has validation problems and the caller treats them as fatal."""

    def __init__(self, problems):
        self.problems = list(problems)
        details = "; ".join(
            f"{problem.field}: {problem.message}" for problem in self.problems
        )
        super().__init__(
            f"Configuration has {len(self.problems)} validation problem(s): {details}"
        )
