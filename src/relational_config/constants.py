"""
global constants
"""

DATABASE_CONFIG_PREFIX = "database."

SERVER_NAME = DATABASE_CONFIG_PREFIX + "server.name"
SNAPSHOT_FETCH_SIZE = "snapshot.fetch.size"

TABLE_WHITELIST = "table.whitelist"
TABLE_BLACKLIST = "table.blacklist"
TABLE_IGNORE_BUILTIN = "table.ignore.builtin"
COLUMN_BLACKLIST = "column.blacklist"
SCHEMA_WHITELIST = "schema.whitelist"
SCHEMA_BLACKLIST = "schema.blacklist"
DECIMAL_HANDLING_MODE = "decimal.handling.mode"
SNAPSHOT_SELECT_STATEMENT_OVERRIDES = "snapshot.select.statement.overrides"

DEFAULT_SNAPSHOT_FETCH_SIZE = 2000

TABLE_WHITELIST_ALREADY_SPECIFIED = "Table whitelist is already specified"
SCHEMA_WHITELIST_ALREADY_SPECIFIED = "Schema whitelist is already specified"
