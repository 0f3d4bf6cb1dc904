"""
Field metadata and the schema that groups the fields of a connector.

A connector builds its ``ConfigSchema`` once and passes it to the
accessors and validators that need field metadata.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from relational_config import constants
from relational_config.config import validators
from relational_config.config.models import FieldType, Importance, ValidationProblem, Width
from relational_config.exceptions import ConfigurationError, ValidationError


class ConfigField(BaseModel):
    """Metadata describing one configuration option."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    type: FieldType = FieldType.STRING
    width: Width = Width.NONE
    importance: Importance = Importance.MEDIUM
    default_value: Optional[str] = None
    description: str = ""
    dependents: Tuple[str, ...] = ()
    validators: Tuple[Callable, ...] = Field(default=(), repr=False)

    def validate_value(self, config, schema) -> List[ValidationProblem]:
        """Run this field's validators against the configuration."""
        problems = []
        for validator in self.validators:
            problems.extend(validator(config, self, schema))
        return problems


class ConfigSchema:
    """Ordered mapping from option name to field metadata."""

    def __init__(self, fields: Iterable[ConfigField] = ()):
        self._fields: Dict[str, ConfigField] = {}
        for field in fields:
            self._add(field)

    def _add(self, field: ConfigField) -> None:
        if field.name in self._fields:
            raise ConfigurationError(f"Field '{field.name}' is already defined")
        self._fields[field.name] = field

    def extend(self, fields: Iterable[ConfigField]) -> "ConfigSchema":
        """Return a new schema with the given fields appended."""
        return ConfigSchema([*self._fields.values(), *fields])

    def field(self, name: str) -> ConfigField:
        """Return the field with the given name."""
        try:
            return self._fields[name]
        except KeyError as e:
            raise ConfigurationError(f"Unknown configuration field: {name}") from e

    def names(self) -> List[str]:
        return list(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[ConfigField]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def validate(self, config) -> List[ValidationProblem]:
        """Validate every field in declaration order and collect the problems."""
        problems = []
        for field in self._fields.values():
            problems.extend(field.validate_value(config, self))
        return problems

    def validate_or_raise(self, config) -> None:
        """
        Validate the configuration, treating any problem as fatal.

        Raises:
            ValidationError: If at least one problem was found
        """
        problems = self.validate(config)
        if problems:
            raise ValidationError(problems)


SERVER_NAME = ConfigField(
    name=constants.SERVER_NAME,
    display_name="Namespace",
    type=FieldType.STRING,
    width=Width.MEDIUM,
    importance=Importance.HIGH,
    validators=(validators.is_required,),
    description="Unique name that identifies the database server and all recorded offsets, "
    "and that is used as a prefix for all schemas and topics. Each distinct installation "
    "should have a separate namespace and be monitored by at most one connector.",
)

SNAPSHOT_FETCH_SIZE = ConfigField(
    name=constants.SNAPSHOT_FETCH_SIZE,
    display_name="Snapshot fetch size",
    type=FieldType.INT,
    width=Width.SHORT,
    importance=Importance.MEDIUM,
    validators=(validators.is_positive_integer,),
    description="The maximum number of records that should be loaded into memory while performing a snapshot.",
)

TABLE_WHITELIST = ConfigField(
    name=constants.TABLE_WHITELIST,
    display_name="Included tables",
    type=FieldType.LIST,
    width=Width.LONG,
    importance=Importance.HIGH,
    validators=(validators.is_list_of_regex,),
    description="The tables for which changes are to be captured. A comma-separated list of "
    "regular expressions matching fully-qualified table names of the form "
    "<databaseName>.<tableName> or <databaseName>.<schemaName>.<tableName>. "
    "May not be used with the table blacklist.",
)

TABLE_BLACKLIST = ConfigField(
    name=constants.TABLE_BLACKLIST,
    display_name="Excluded tables",
    type=FieldType.STRING,
    width=Width.LONG,
    importance=Importance.MEDIUM,
    validators=(validators.is_list_of_regex, validators.validate_table_blacklist),
    description="A comma-separated list of regular expressions matching fully-qualified names "
    "of tables to be excluded from monitoring. May not be used with the table whitelist.",
)

TABLE_IGNORE_BUILTIN = ConfigField(
    name=constants.TABLE_IGNORE_BUILTIN,
    display_name="Ignore system databases",
    type=FieldType.BOOLEAN,
    width=Width.SHORT,
    importance=Importance.LOW,
    default_value="true",
    validators=(validators.is_boolean,),
    description="Flag specifying whether built-in tables should be ignored.",
)

COLUMN_BLACKLIST = ConfigField(
    name=constants.COLUMN_BLACKLIST,
    display_name="Exclude Columns",
    type=FieldType.STRING,
    width=Width.LONG,
    importance=Importance.MEDIUM,
    validators=(validators.is_list_of_regex,),
    description="A comma-separated list of regular expressions matching fully-qualified names "
    "of columns to be excluded from monitoring and change messages.",
)

DECIMAL_HANDLING_MODE = ConfigField(
    name=constants.DECIMAL_HANDLING_MODE,
    display_name="Decimal Handling",
    type=FieldType.STRING,
    width=Width.SHORT,
    importance=Importance.MEDIUM,
    default_value="precise",
    validators=(validators.is_decimal_handling_mode,),
    description="Specify how DECIMAL and NUMERIC columns should be represented in change events: "
    "'precise' (the default) uses exact decimals encoded in a binary representation; "
    "'string' uses strings; 'double' uses floating point numbers, which may lose precision "
    "but are far easier to use in consumers.",
)

SNAPSHOT_SELECT_STATEMENT_OVERRIDES_BY_TABLE = ConfigField(
    name=constants.SNAPSHOT_SELECT_STATEMENT_OVERRIDES,
    display_name="List of tables where the default select statement used during snapshotting should be overridden.",
    type=FieldType.STRING,
    width=Width.LONG,
    importance=Importance.MEDIUM,
    description="A comma-separated list of fully-qualified tables (DB_NAME.TABLE_NAME or "
    "SCHEMA_NAME.TABLE_NAME, depending on the connector). The select statement for each table "
    "is given in a further property named 'snapshot.select.statement.overrides.<table>'. "
    "A possible use case for large append-only tables is setting a point where to resume "
    "snapshotting after an interrupted snapshot.",
)

SCHEMA_WHITELIST = ConfigField(
    name=constants.SCHEMA_WHITELIST,
    display_name="Schemas",
    type=FieldType.LIST,
    width=Width.LONG,
    importance=Importance.HIGH,
    dependents=(constants.TABLE_WHITELIST,),
    validators=(validators.is_list_of_regex,),
    description="The schemas for which events should be captured",
)

SCHEMA_BLACKLIST = ConfigField(
    name=constants.SCHEMA_BLACKLIST,
    display_name="Exclude Schemas",
    type=FieldType.STRING,
    width=Width.LONG,
    importance=Importance.MEDIUM,
    validators=(validators.is_list_of_regex, validators.validate_schema_blacklist),
    description="The schemas for which events must not be captured",
)

RELATIONAL_FIELDS = (
    SERVER_NAME,
    SNAPSHOT_FETCH_SIZE,
    TABLE_WHITELIST,
    TABLE_BLACKLIST,
    TABLE_IGNORE_BUILTIN,
    COLUMN_BLACKLIST,
    DECIMAL_HANDLING_MODE,
    SNAPSHOT_SELECT_STATEMENT_OVERRIDES_BY_TABLE,
    SCHEMA_WHITELIST,
    SCHEMA_BLACKLIST,
)


def build_relational_schema(extra_fields: Iterable[ConfigField] = ()) -> ConfigSchema:
    """Build the schema shared by relational connectors, plus any connector-specific fields."""
    return ConfigSchema([*RELATIONAL_FIELDS, *extra_fields])
