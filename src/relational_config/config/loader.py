"""
Configuration loader for relational connectors.

This module handles loading and validating YAML configuration files
using Pydantic models.
"""

from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import ValidationError

from relational_config.config.models import ConnectorSettings
from relational_config.config.store import Configuration
from relational_config.exceptions import ConfigurationError


class ConfigLoader:
    """Configuration loader for relational connectors."""

    @staticmethod
    def load_from_file(
        config_path: Union[str, Path],
        properties_override: Optional[Dict[str, str]] = None,
        logging_level_override: Optional[str] = None,
    ) -> ConnectorSettings:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file
            properties_override: Option values that replace those of the file
                (e.g., {"decimal.handling.mode": "double"})
            logging_level_override: Logging level to override in config
                (e.g., "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

        Returns:
            Validated ConnectorSettings instance

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML configuration: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file: {e}") from e

        if config_data is None:
            raise ConfigurationError(f"Configuration file is empty: {config_path}")

        return ConfigLoader.load_from_dict(
            config_data,
            properties_override=properties_override,
            logging_level_override=logging_level_override,
        )

    @staticmethod
    def load_from_dict(
        config_data: dict,
        properties_override: Optional[Dict[str, str]] = None,
        logging_level_override: Optional[str] = None,
    ) -> ConnectorSettings:
        """
        Validate already-parsed configuration data.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration must be a mapping with 'properties' and optional 'logging' sections"
            )

        config_data = dict(config_data)

        if properties_override:
            properties = dict(config_data.get("properties") or {})
            properties.update(properties_override)
            config_data["properties"] = properties

        if logging_level_override:
            logging_section = dict(config_data.get("logging") or {})
            logging_section["level"] = logging_level_override
            config_data["logging"] = logging_section

        try:
            return ConnectorSettings(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def load_configuration(
        config_path: Union[str, Path],
        properties_override: Optional[Dict[str, str]] = None,
    ) -> Configuration:
        """Load a file and return only its option values."""
        settings = ConfigLoader.load_from_file(
            config_path, properties_override=properties_override
        )
        return Configuration(settings.properties)
