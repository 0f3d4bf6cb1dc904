"""
Configuration module for relational connectors.

This module provides the configuration store, field schema, validators
and loading functionality using Pydantic models.
"""

from relational_config.config.fields import (ConfigField, ConfigSchema,
                                             build_relational_schema)
from relational_config.config.loader import ConfigLoader
from relational_config.config.models import (ConnectorSettings,
                                             DecimalHandlingMode, DecimalMode,
                                             LoggingConfig, ValidationProblem)
from relational_config.config.store import Configuration
from relational_config.config.validators import (validate_schema_blacklist,
                                                 validate_table_blacklist)

__all__ = [
    "ConfigField",
    "ConfigLoader",
    "ConfigSchema",
    "Configuration",
    "ConnectorSettings",
    "DecimalHandlingMode",
    "DecimalMode",
    "LoggingConfig",
    "ValidationProblem",
    "build_relational_schema",
    "validate_schema_blacklist",
    "validate_table_blacklist",
]
