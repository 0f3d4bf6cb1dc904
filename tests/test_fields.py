"""Tests for field metadata and the configuration schema."""

import pytest

from relational_config import constants
from relational_config.config.fields import (
    ConfigField,
    ConfigSchema,
    build_relational_schema,
)
from relational_config.config.models import FieldType
from relational_config.config.store import Configuration
from relational_config.config.validators import is_required
from relational_config.exceptions import ConfigurationError, ValidationError


def test_relational_schema_contains_all_options():
    schema = build_relational_schema()
    assert schema.names() == [
        constants.SERVER_NAME,
        constants.SNAPSHOT_FETCH_SIZE,
        constants.TABLE_WHITELIST,
        constants.TABLE_BLACKLIST,
        constants.TABLE_IGNORE_BUILTIN,
        constants.COLUMN_BLACKLIST,
        constants.DECIMAL_HANDLING_MODE,
        constants.SNAPSHOT_SELECT_STATEMENT_OVERRIDES,
        constants.SCHEMA_WHITELIST,
        constants.SCHEMA_BLACKLIST,
    ]
    assert schema.field(constants.DECIMAL_HANDLING_MODE).default_value == "precise"
    assert schema.field(constants.TABLE_IGNORE_BUILTIN).type is FieldType.BOOLEAN
    assert schema.field(constants.SCHEMA_WHITELIST).dependents == (constants.TABLE_WHITELIST,)


def test_unknown_field_raises():
    with pytest.raises(ConfigurationError):
        build_relational_schema().field("no.such.option")


def test_duplicate_field_raises():
    with pytest.raises(ConfigurationError):
        build_relational_schema([ConfigField(name=constants.TABLE_WHITELIST, display_name="Again")])


def test_extra_fields_are_appended():
    extra = ConfigField(name="database.hostname", display_name="Hostname", validators=(is_required,))
    schema = build_relational_schema([extra])

    assert "database.hostname" in schema
    assert schema.names()[-1] == "database.hostname"
    assert len(schema) == 11


def test_extend_returns_new_schema():
    schema = ConfigSchema()
    extended = schema.extend([ConfigField(name="a", display_name="A")])
    assert len(schema) == 0
    assert [field.name for field in extended] == ["a"]


def test_validate_collects_problems_in_declaration_order():
    config = Configuration(
        {
            constants.TABLE_WHITELIST: "db.orders",
            constants.TABLE_BLACKLIST: "db.audit",
            constants.SCHEMA_WHITELIST: "public",
            constants.SCHEMA_BLACKLIST: "audit",
            constants.DECIMAL_HANDLING_MODE: "float",
        }
    )

    problems = build_relational_schema().validate(config)

    assert [p.field for p in problems] == [
        constants.SERVER_NAME,
        constants.TABLE_BLACKLIST,
        constants.DECIMAL_HANDLING_MODE,
        constants.SCHEMA_BLACKLIST,
    ]


def test_valid_configuration_has_no_problems():
    config = Configuration(
        {
            constants.SERVER_NAME: "inventory",
            constants.TABLE_WHITELIST: "inventory\\.orders",
            constants.SCHEMA_BLACKLIST: "audit",
        }
    )
    assert build_relational_schema().validate(config) == []


def test_validate_or_raise():
    schema = build_relational_schema()
    with pytest.raises(ValidationError) as excinfo:
        schema.validate_or_raise(Configuration({}))

    assert [p.field for p in excinfo.value.problems] == [constants.SERVER_NAME]
    assert constants.SERVER_NAME in str(excinfo.value)

    schema.validate_or_raise(Configuration({constants.SERVER_NAME: "inventory"}))
