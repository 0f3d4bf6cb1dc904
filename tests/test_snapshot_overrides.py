"""Tests for snapshot select override resolution."""

import logging

import pytest

from relational_config import constants
from relational_config.config.store import Configuration
from relational_config.exceptions import TableIdParseError
from relational_config.snapshot import resolve_snapshot_select_overrides
from relational_config.table_id import TableId

BASE = constants.SNAPSHOT_SELECT_STATEMENT_OVERRIDES


def test_listed_table_without_statement_maps_to_none():
    config = Configuration({BASE: "db.t1,db.t2", f"{BASE}.db.t1": "SELECT 1"})

    overrides = resolve_snapshot_select_overrides(config)

    assert dict(overrides) == {
        TableId.parse("db.t1"): "SELECT 1",
        TableId.parse("db.t2"): None,
    }


@pytest.mark.parametrize("values", [{}, {BASE: ""}])
def test_absent_or_empty_list_gives_empty_mapping(values):
    overrides = resolve_snapshot_select_overrides(Configuration(values))
    assert overrides is not None
    assert len(overrides) == 0


def test_duplicate_entries_keep_a_single_entry():
    config = Configuration({BASE: "db.t1,db.t1", f"{BASE}.db.t1": "SELECT 1"})

    overrides = resolve_snapshot_select_overrides(config)

    assert dict(overrides) == {TableId.parse("db.t1"): "SELECT 1"}


def test_duplicate_identifiers_last_token_wins():
    config = Configuration(
        {
            BASE: "db.t1,db.t1 ",
            f"{BASE}.db.t1": "SELECT 1",
            f"{BASE}.db.t1 ": "SELECT 2",
        }
    )

    overrides = resolve_snapshot_select_overrides(config)

    assert dict(overrides) == {TableId.parse("db.t1"): "SELECT 2"}


def test_tokens_are_not_trimmed_when_building_the_lookup_key():
    config = Configuration(
        {
            BASE: "db.t1, db.t2",
            f"{BASE}.db.t1": "SELECT 1",
            f"{BASE}.db.t2": "SELECT 2",
            f"{BASE}. db.t2": "SELECT 3",
        }
    )

    overrides = resolve_snapshot_select_overrides(config)

    assert overrides[TableId.parse("db.t2")] == "SELECT 3"


def test_untrimmed_token_without_matching_key_maps_to_none():
    config = Configuration(
        {BASE: "db.t1, db.t2", f"{BASE}.db.t1": "SELECT 1", f"{BASE}.db.t2": "SELECT 2"}
    )

    overrides = resolve_snapshot_select_overrides(config)

    assert overrides[TableId.parse("db.t1")] == "SELECT 1"
    assert overrides[TableId.parse("db.t2")] is None


def test_three_part_names():
    config = Configuration(
        {BASE: "db.public.orders", f"{BASE}.db.public.orders": "SELECT * FROM orders"}
    )

    overrides = resolve_snapshot_select_overrides(config)

    assert dict(overrides) == {
        TableId(catalog_name="db", schema_name="public", table_name="orders"): "SELECT * FROM orders"
    }


def test_result_is_read_only():
    config = Configuration({BASE: "db.t1", f"{BASE}.db.t1": "SELECT 1"})

    overrides = resolve_snapshot_select_overrides(config)

    with pytest.raises(TypeError):
        overrides[TableId.parse("db.t2")] = "SELECT 2"


def test_malformed_table_name_propagates():
    config = Configuration({BASE: "db.t1,,db.t2"})

    with pytest.raises(TableIdParseError):
        resolve_snapshot_select_overrides(config)


def test_missing_statement_is_logged(caplog):
    config = Configuration({BASE: "db.t1"})

    with caplog.at_level(logging.WARNING, logger="relational_config"):
        resolve_snapshot_select_overrides(config, connector="inventory")

    assert f"'{BASE}.db.t1' is not set" in caplog.text
    assert caplog.records[0].connector == "inventory"
    assert caplog.records[0].table_name == "db.t1"


@pytest.mark.parametrize("table_list", ["db.t1,db.t2,", "db.t1,db.t2,,,"])
def test_trailing_empty_entries_are_ignored(table_list):
    config = Configuration({BASE: table_list, f"{BASE}.db.t1": "SELECT 1"})

    overrides = resolve_snapshot_select_overrides(config)

    assert dict(overrides) == {
        TableId.parse("db.t1"): "SELECT 1",
        TableId.parse("db.t2"): None,
    }


def test_only_separators_gives_empty_mapping():
    assert len(resolve_snapshot_select_overrides(Configuration({BASE: ",,"}))) == 0
