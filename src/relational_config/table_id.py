"""
Fully-qualified table identifiers.

Qualified names take the form ``<database>.<table>`` or
``<database>.<schema>.<table>``.
"""

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict

from relational_config.exceptions import TableIdParseError


class TableId(BaseModel):
    """Identifier of a single table."""

    model_config = ConfigDict(frozen=True)

    catalog_name: Optional[str] = None
    schema_name: Optional[str] = None
    table_name: str

    @classmethod
    def parse(cls, text: str) -> "TableId":
        """
        Parse a qualified table name.

        Whitespace around each dotted part is ignored.

        Raises:
            TableIdParseError: If the name is empty, has an empty part, or
                has more than three parts
        """
        if text is None or not text.strip():
            raise TableIdParseError("Table name must not be empty")
        parts = [part.strip() for part in text.split(".")]
        if any(not part for part in parts):
            raise TableIdParseError(f"Invalid qualified table name: '{text}'")
        if len(parts) == 1:
            return cls(table_name=parts[0])
        if len(parts) == 2:
            return cls(catalog_name=parts[0], table_name=parts[1])
        if len(parts) == 3:
            return cls(catalog_name=parts[0], schema_name=parts[1], table_name=parts[2])
        raise TableIdParseError(
            f"Qualified table name must have at most 3 parts, got {len(parts)}: '{text}'"
        )

    def identifier(self) -> str:
        """Return the dotted form of this identifier."""
        return ".".join(
            part
            for part in (self.catalog_name, self.schema_name, self.table_name)
            if part is not None
        )

    def __str__(self) -> str:
        return self.identifier()


TableFilter = Callable[[TableId], bool]
TableIdToStringMapper = Callable[[TableId], str]


def table_id_to_string(table_id: TableId) -> str:
    """Default mapper, returning the dotted identifier."""
    return table_id.identifier()


def schema_table_mapper(table_id: TableId) -> str:
    """Mapper for connectors that name tables as ``<schema>.<table>``."""
    if table_id.schema_name is None:
        return table_id.table_name
    return f"{table_id.schema_name}.{table_id.table_name}"
