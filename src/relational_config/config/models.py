"""
Configuration models for the relational connector using Pydantic.

This module defines the enumerations, validation records and settings
models that describe how a relational CDC connector is configured.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DecimalMode(str, Enum):
    """Representation used by the value converters for DECIMAL and NUMERIC columns."""

    PRECISE = "precise"
    STRING = "string"
    DOUBLE = "double"


class DecimalHandlingMode(str, Enum):
    """
    The set of predefined decimal handling options or aliases.

    PRECISE represents values as exact decimals, encoded in change events in a
    binary form. STRING represents values as strings, which keeps precision but
    loses the type information. DOUBLE represents values as floating point
    numbers, which may lose precision but is far easier to consume.
    """

    PRECISE = "precise"
    STRING = "string"
    DOUBLE = "double"

    def as_decimal_mode(self) -> DecimalMode:
        """Return the value converter mode for this option."""
        if self is DecimalHandlingMode.DOUBLE:
            return DecimalMode.DOUBLE
        if self is DecimalHandlingMode.STRING:
            return DecimalMode.STRING
        return DecimalMode.PRECISE

    @classmethod
    def options(cls):
        """Return the options in declaration order."""
        return (cls.PRECISE, cls.STRING, cls.DOUBLE)

    @classmethod
    def parse(
        cls, value: Optional[str], default_value: Optional[str] = None
    ) -> Optional["DecimalHandlingMode"]:
        """
        Determine if the supplied value is one of the predefined options.

        Args:
            value: The configuration property value; may be None
            default_value: The default value, tried when value does not match;
                may be None

        Returns:
            The matching option, or None if neither the value nor the
            non-null default matches
        """
        mode = cls._match(value)
        if mode is None and default_value is not None:
            mode = cls._match(default_value)
        return mode

    @classmethod
    def _match(cls, value: Optional[str]) -> Optional["DecimalHandlingMode"]:
        if value is None:
            return None
        value = value.strip().lower()
        for option in cls.options():
            if option.value == value:
                return option
        return None


class FieldType(str, Enum):
    """Enumeration of configuration value types."""

    STRING = "string"
    LIST = "list"
    BOOLEAN = "boolean"
    INT = "int"


class Width(str, Enum):
    """Display width hint for a configuration field."""

    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class Importance(str, Enum):
    """Importance of a configuration field."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ValidationProblem(BaseModel):
    """A problem found while validating a single configuration field."""

    model_config = ConfigDict(frozen=True)

    field: str
    value: Optional[str] = None
    message: str

    def __str__(self) -> str:
        return f"{self.field}={self.value!r}: {self.message}"


class LoggingConfig(BaseModel):
    """Configuration for logging settings."""

    level: str = Field(default="INFO", validate_default=True)
    format: str = Field(default="text", validate_default=True)  # "text" or "json"
    log_to_file: bool = Field(default=False)
    log_file_path: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        """Validate logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(
                f"Invalid logging level: {v}. Must be one of {valid_levels}"
            )
        return v.lower()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v):
        """Validate logging format."""
        valid_formats = ["text", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(
                f"Invalid logging format: {v}. Must be one of {valid_formats}"
            )
        return v.lower()


class ConnectorSettings(BaseModel):
    """Root model of a connector configuration file."""

    properties: Dict[str, str] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("properties", mode="before")
    @classmethod
    def normalize_properties(cls, v):
        """Flatten scalar property values to strings and drop null entries."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("properties must be a mapping of option names to values")
        normalized = {}
        for key, value in v.items():
            if value is None:
                continue
            if isinstance(value, (dict, list)):
                raise ValueError(
                    f"Property '{key}' must be a scalar value, got {type(value).__name__}"
                )
            if isinstance(value, bool):
                value = "true" if value else "false"
            normalized[str(key)] = str(value)
        return normalized
