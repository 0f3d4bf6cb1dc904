"""Tests for the configuration store."""

import pytest

from relational_config import constants
from relational_config.config.fields import DECIMAL_HANDLING_MODE, TABLE_IGNORE_BUILTIN
from relational_config.config.store import Configuration
from relational_config.exceptions import ConfigurationError


def test_get_string_returns_value_or_none():
    config = Configuration({constants.TABLE_WHITELIST: "db.orders"})
    assert config.get_string(constants.TABLE_WHITELIST) == "db.orders"
    assert config.get_string(constants.TABLE_BLACKLIST) is None
    assert config.get_string(constants.TABLE_BLACKLIST, "fallback") == "fallback"


def test_empty_string_counts_as_present():
    config = Configuration({constants.TABLE_BLACKLIST: ""})
    assert config.get_string(constants.TABLE_BLACKLIST) == ""


def test_field_default_is_used_when_key_is_absent():
    assert Configuration({}).get_string(DECIMAL_HANDLING_MODE) == "precise"
    config = Configuration({constants.DECIMAL_HANDLING_MODE: "double"})
    assert config.get_string(DECIMAL_HANDLING_MODE) == "double"


def test_get_boolean():
    assert Configuration({}).get_boolean(TABLE_IGNORE_BUILTIN) is True
    assert Configuration({constants.TABLE_IGNORE_BUILTIN: " False"}).get_boolean(TABLE_IGNORE_BUILTIN) is False
    assert Configuration({}).get_boolean("missing.flag") is None
    with pytest.raises(ConfigurationError):
        Configuration({constants.TABLE_IGNORE_BUILTIN: "maybe"}).get_boolean(TABLE_IGNORE_BUILTIN)


def test_get_integer():
    config = Configuration({constants.SNAPSHOT_FETCH_SIZE: " 512 "})
    assert config.get_integer(constants.SNAPSHOT_FETCH_SIZE) == 512
    assert Configuration({}).get_integer(constants.SNAPSHOT_FETCH_SIZE, 2000) == 2000
    with pytest.raises(ConfigurationError):
        Configuration({constants.SNAPSHOT_FETCH_SIZE: "lots"}).get_integer(constants.SNAPSHOT_FETCH_SIZE)


def test_store_is_read_only():
    values = {"a": "1"}
    config = Configuration(values)
    values["a"] = "2"

    assert config["a"] == "1"
    with pytest.raises(TypeError):
        config["a"] = "3"


def test_from_dict_converts_scalars():
    config = Configuration.from_dict({"flag": True, "size": 10, "skip": None, "name": "x"})
    assert dict(config) == {"flag": "true", "size": "10", "name": "x"}


def test_with_values_returns_new_store():
    config = Configuration({"a": "1"})
    updated = config.with_values({"b": "2"})
    assert dict(updated) == {"a": "1", "b": "2"}
    assert "b" not in config
