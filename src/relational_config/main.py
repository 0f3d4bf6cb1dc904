#!/usr/bin/env python3
"""
Main entry point for relational connector configuration checks.

Loads a connector configuration file, reports validation problems and
optionally prints the resolved settings.
"""

import json
import sys

from relational_config import constants
from relational_config.audit.logger import ConnectorConfigLogger
from relational_config.cli.args import parse_and_validate_args
from relational_config.config.loader import ConfigLoader
from relational_config.config.store import Configuration
from relational_config.connector_config import RelationalDatabaseConnectorConfig
from relational_config.exceptions import ConfigurationError, TableIdParseError
from relational_config.table_id import table_id_to_string


def create_logger(settings) -> ConnectorConfigLogger:
    """Create logger instance from configuration."""
    logger = ConnectorConfigLogger("relational_config")
    if settings.logging:
        logger.setup_logging(settings.logging)
    return logger


def no_system_tables(table_id) -> bool:
    """System table predicate for connectors without built-in tables."""
    return False


def describe_resolved(connector_config: RelationalDatabaseConnectorConfig) -> dict:
    """Collect the resolved settings of a connector configuration."""
    overrides = connector_config.get_snapshot_select_overrides_by_table()
    table_filters = connector_config.get_table_filters()
    return {
        "connector": connector_config.logical_name,
        "decimal_mode": connector_config.get_decimal_mode().value,
        "snapshot_fetch_size": connector_config.get_snapshot_fetch_size(),
        "snapshot_select_overrides": {
            table_id.identifier(): statement for table_id, statement in overrides.items()
        },
        "table_filters": table_filters.to_dict() if table_filters else None,
    }


def main(argv=None):
    """Main entry point for the configuration checker."""
    try:
        args, overrides, config_path = parse_and_validate_args(argv)
    except (ValueError, FileNotFoundError) as e:
        print(f"Argument validation error: {e}", file=sys.stderr)
        return 1

    try:
        settings = ConfigLoader.load_from_file(
            config_path=config_path,
            properties_override=overrides,
            logging_level_override=args.logging_level,
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logger = create_logger(settings)
    logger.info(f"Loaded configuration from {config_path}")

    config = Configuration(settings.properties)
    logical_name = config.get_string(constants.SERVER_NAME) or config_path.stem

    try:
        connector_config = RelationalDatabaseConnectorConfig(
            config,
            logical_name,
            system_tables_filter=no_system_tables,
            table_id_mapper=table_id_to_string,
            logger=logger,
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    problems = connector_config.validate()
    for problem in problems:
        print(str(problem))

    if problems:
        logger.error(f"Configuration has {len(problems)} validation problem(s)")
        return 1

    logger.info("Configuration validation completed successfully")

    if args.show_resolved:
        try:
            print(json.dumps(describe_resolved(connector_config), indent=2))
        except (ConfigurationError, TableIdParseError) as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
