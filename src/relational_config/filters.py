"""
Table, schema and column filters built from the include/exclude options.
"""

from typing import Optional

from relational_config import constants
from relational_config.audit.logger import ConnectorConfigLogger, get_logger
from relational_config.exceptions import ConfigurationError
from relational_config.table_id import TableFilter, TableId, TableIdToStringMapper
from relational_config.utils import compile_regex_list, matches_any


class RelationalTableFilters:
    """
    Filters deciding which tables and columns a connector captures.

    Whitelists take precedence over blacklists: when a whitelist is set the
    corresponding blacklist is ignored.
    """

    def __init__(
        self,
        config,
        system_tables_filter: TableFilter,
        table_id_mapper: TableIdToStringMapper,
        logger: Optional[ConnectorConfigLogger] = None,
    ):
        self.system_tables_filter = system_tables_filter
        self.table_id_mapper = table_id_mapper
        logger = logger or get_logger()
        try:
            self.ignore_builtin = config.get_boolean(constants.TABLE_IGNORE_BUILTIN, True)
        except ConfigurationError as e:
            logger.warning(f"{e}; built-in tables are ignored")
            self.ignore_builtin = True

        self.table_whitelist = compile_regex_list(config.get_string(constants.TABLE_WHITELIST))
        self.table_blacklist = compile_regex_list(config.get_string(constants.TABLE_BLACKLIST))
        self.schema_whitelist = compile_regex_list(config.get_string(constants.SCHEMA_WHITELIST))
        self.schema_blacklist = compile_regex_list(config.get_string(constants.SCHEMA_BLACKLIST))
        self.column_blacklist = compile_regex_list(config.get_string(constants.COLUMN_BLACKLIST))

        logger.debug(
            f"Built table filters with {len(self.table_whitelist)} included and "
            f"{len(self.table_blacklist)} excluded table pattern(s)"
        )

    def eligible_table_filter(self, table_id: TableId) -> bool:
        """Return False for built-in tables when they are ignored."""
        return not (self.ignore_builtin and self.system_tables_filter(table_id))

    def schema_filter(self, schema_name: Optional[str]) -> bool:
        if schema_name is None:
            return True
        if self.schema_whitelist:
            return matches_any(self.schema_whitelist, schema_name)
        return not matches_any(self.schema_blacklist, schema_name)

    def table_filter(self, table_id: TableId) -> bool:
        """Return True if changes of the table are captured."""
        if not self.eligible_table_filter(table_id):
            return False
        if not self.schema_filter(table_id.schema_name):
            return False
        name = self.table_id_mapper(table_id)
        if self.table_whitelist:
            return matches_any(self.table_whitelist, name)
        return not matches_any(self.table_blacklist, name)

    def column_filter(self, table_id: TableId, column_name: str) -> bool:
        """Return False if the column is excluded from change messages."""
        full_name = f"{self.table_id_mapper(table_id)}.{column_name}"
        return not matches_any(self.column_blacklist, full_name)

    def to_dict(self) -> dict:
        """Describe the compiled patterns."""
        return {
            "ignore_builtin": self.ignore_builtin,
            "table_whitelist": [p.pattern for p in self.table_whitelist],
            "table_blacklist": [p.pattern for p in self.table_blacklist],
            "schema_whitelist": [p.pattern for p in self.schema_whitelist],
            "schema_blacklist": [p.pattern for p in self.schema_blacklist],
            "column_blacklist": [p.pattern for p in self.column_blacklist],
        }
