"""
Resolution of per-table snapshot SELECT overrides.

The option ``snapshot.select.statement.overrides`` lists qualified table
names separated by commas. The statement for each listed table is stored
under ``snapshot.select.statement.overrides.<table>``, where ``<table>`` is
the list entry exactly as written.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from relational_config import constants
from relational_config.audit.logger import ConnectorConfigLogger, get_logger
from relational_config.table_id import TableId


def resolve_snapshot_select_overrides(
    config,
    base_key: str = constants.SNAPSHOT_SELECT_STATEMENT_OVERRIDES,
    logger: Optional[ConnectorConfigLogger] = None,
    connector: Optional[str] = None,
) -> Mapping[TableId, Optional[str]]:
    """
    Build the mapping from table to override statement.

    Entries are not trimmed, so ``"db.t1, db.t2"`` looks up the statement of
    the second table under ``<base_key>. db.t2``. A listed table without a
    statement maps to None. When a table is listed twice the last entry wins.

    Args:
        config: Configuration to read from
        base_key: Option holding the list of tables
        logger: Logger used to report tables without a statement
        connector: Logical connector name attached to log records

    Returns:
        Read-only mapping, empty when the list option is absent or blank

    Raises:
        TableIdParseError: If a list entry is not a valid qualified table name
    """
    table_list = config.get_string(base_key)

    if not table_list:
        return MappingProxyType({})

    logger = logger or get_logger()
    overrides_by_table: Dict[TableId, Optional[str]] = {}

    tables = table_list.split(",")
    # trailing empty entries are ignored, interior ones still reach the parser
    while tables and tables[-1] == "":
        tables.pop()

    for table in tables:
        table_id = TableId.parse(table)
        key = f"{base_key}.{table}"
        statement = config.get_string(key)
        if statement is None:
            logger.log_missing_override(connector, table, key)
        overrides_by_table[table_id] = statement

    logger.debug(
        f"Resolved snapshot select overrides for {len(overrides_by_table)} table(s)",
        connector=connector,
    )
    return MappingProxyType(overrides_by_table)
