"""
Relational connector configuration.

Resolves the tables, schemas and columns a change-data-capture connector
monitors, the decimal handling mode, and per-table snapshot select
overrides from raw connector options.
"""

from relational_config.config import Configuration, DecimalHandlingMode, DecimalMode
from relational_config.connector_config import RelationalDatabaseConnectorConfig
from relational_config.table_id import TableId

__version__ = "1.0.0"

__all__ = [
    "Configuration",
    "DecimalHandlingMode",
    "DecimalMode",
    "RelationalDatabaseConnectorConfig",
    "TableId",
]
