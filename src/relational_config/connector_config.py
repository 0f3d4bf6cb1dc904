"""
Configuration shared across the relational CDC connectors.

Accessors re-read the underlying configuration on every call and never
cache their result, so a reloaded configuration is picked up immediately.
Callers that need a stable view keep the returned value themselves.
"""

from typing import List, Mapping, Optional

from relational_config import constants
from relational_config.audit.logger import ConnectorConfigLogger, get_logger
from relational_config.config.fields import ConfigSchema, build_relational_schema
from relational_config.config.models import DecimalHandlingMode, DecimalMode, ValidationProblem
from relational_config.config.store import Configuration
from relational_config.exceptions import ConfigurationError
from relational_config.filters import RelationalTableFilters
from relational_config.snapshot import resolve_snapshot_select_overrides
from relational_config.table_id import TableFilter, TableId, TableIdToStringMapper


class RelationalDatabaseConnectorConfig:
    """Resolved view over the configuration of a relational connector."""

    def __init__(
        self,
        config: Configuration,
        logical_name: str,
        system_tables_filter: Optional[TableFilter] = None,
        table_id_mapper: Optional[TableIdToStringMapper] = None,
        default_snapshot_fetch_size: int = constants.DEFAULT_SNAPSHOT_FETCH_SIZE,
        schema: Optional[ConfigSchema] = None,
        logger: Optional[ConnectorConfigLogger] = None,
    ):
        """
        Initialize the connector configuration.

        Table filters are only built when both ``system_tables_filter`` and
        ``table_id_mapper`` are given; otherwise they are left to the
        concrete connector.

        Args:
            config: Raw connector configuration
            logical_name: Logical name of the connector
            system_tables_filter: Predicate identifying built-in tables
            table_id_mapper: Maps a table identifier to the name matched by
                the table patterns
            default_snapshot_fetch_size: Fetch size used when none is configured
            schema: Field schema of the connector; the relational schema by default
            logger: Logger instance
        """
        self.config = config
        self.logical_name = logical_name
        self.default_snapshot_fetch_size = default_snapshot_fetch_size
        self.schema = schema or build_relational_schema()
        self.logger = logger or get_logger()

        if system_tables_filter is not None and table_id_mapper is not None:
            self.table_filters = RelationalTableFilters(
                config, system_tables_filter, table_id_mapper, logger=self.logger
            )
        else:
            self.table_filters = None

    def get_table_filters(self) -> Optional[RelationalTableFilters]:
        return self.table_filters

    def get_decimal_mode(self) -> DecimalMode:
        """
        Returns the decimal mode for ``decimal.handling.mode``.

        Falls back to the field default (``precise``) when the configured
        value is missing or not recognized.

        Raises:
            ConfigurationError: If neither the value nor the default names
                a decimal handling mode
        """
        field = self.schema.field(constants.DECIMAL_HANDLING_MODE)
        value = self.config.get_string(field)
        mode = DecimalHandlingMode.parse(value, field.default_value)
        if mode is None:
            raise ConfigurationError(
                f"Cannot resolve '{field.name}' from value '{value}' "
                f"or default '{field.default_value}'"
            )
        return mode.as_decimal_mode()

    def get_snapshot_select_overrides_by_table(self) -> Mapping[TableId, Optional[str]]:
        """Returns any SELECT overrides, if present."""
        return resolve_snapshot_select_overrides(
            self.config,
            self.schema.field(constants.SNAPSHOT_SELECT_STATEMENT_OVERRIDES).name,
            logger=self.logger,
            connector=self.logical_name,
        )

    def get_snapshot_fetch_size(self) -> int:
        return self.config.get_integer(
            self.schema.field(constants.SNAPSHOT_FETCH_SIZE),
            self.default_snapshot_fetch_size,
        )

    def validate(self) -> List[ValidationProblem]:
        """Validate the configuration against the schema and log any problem."""
        problems = self.schema.validate(self.config)
        self.logger.log_validation_problems(self.logical_name, problems)
        return problems
