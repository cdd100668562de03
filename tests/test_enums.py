"""Tests for enumerated API constants."""

import json

from betfair import (
    MarketProjection,
    MatchProjection,
    OrderProjection,
    OrderStatus,
    PersistenceType,
    PriceData,
    RunnerStatus,
    Side,
)
from betfair.enums import label, parse_enum


def test_side_literals():
    assert Side.BACK == "BACK"
    assert Side.LAY == "LAY"
    assert json.dumps([Side.BACK, Side.LAY]) == '["BACK", "LAY"]'


def test_projection_literals_serialize_exactly():
    assert json.dumps(OrderProjection.ALL) == '"ALL"'
    assert json.dumps(MatchProjection.ROLLED_UP_BY_AVG_PRICE) == '"ROLLED_UP_BY_AVG_PRICE"'
    assert json.dumps(MarketProjection.RUNNER_METADATA) == '"RUNNER_METADATA"'
    assert json.dumps(PriceData.EX_BEST_OFFERS) == '"EX_BEST_OFFERS"'


def test_order_status_shares_order_projection_literals():
    assert OrderStatus.EXECUTABLE.value == OrderProjection.EXECUTABLE.value
    assert OrderStatus.EXECUTION_COMPLETE.value == OrderProjection.EXECUTION_COMPLETE.value


def test_persistence_type_values():
    assert [p.value for p in PersistenceType] == ["LAPSE", "PERSIST", "MARKET_ON_CLOSE"]


def test_parse_enum_known_value():
    assert parse_enum(RunnerStatus, "REMOVED_VACANT") is RunnerStatus.REMOVED_VACANT


def test_parse_enum_unknown_value_kept_as_string():
    """New values added by the exchange must not break parsing."""
    assert parse_enum(RunnerStatus, "PLACED") == "PLACED"
    assert parse_enum(RunnerStatus, None) is None


def test_label():
    assert label(RunnerStatus.WINNER) == "WINNER"
    assert label("PLACED") == "PLACED"
    assert label(None) == "N/A"
    assert label(None, "-") == "-"
