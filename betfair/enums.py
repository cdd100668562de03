"""Enumerated string constants used by the betting API.

Members subclass ``str`` so they compare equal to, and JSON-encode as,
their wire literal (``Side.BACK == "BACK"``).
"""

from __future__ import annotations

from enum import Enum


class Side(str, Enum):
    """Side of a bet."""

    BACK = "BACK"
    LAY = "LAY"


class OrderProjection(str, Enum):
    """Which orders to return in a market book."""

    ALL = "ALL"
    EXECUTABLE = "EXECUTABLE"
    EXECUTION_COMPLETE = "EXECUTION_COMPLETE"


class OrderStatus(str, Enum):
    """Current status of an order (same literals as OrderProjection)."""

    EXECUTION_COMPLETE = OrderProjection.EXECUTION_COMPLETE.value
    EXECUTABLE = OrderProjection.EXECUTABLE.value


class MatchProjection(str, Enum):
    """How matches are rolled up in a market book."""

    NO_ROLLUP = "NO_ROLLUP"
    ROLLED_UP_BY_PRICE = "ROLLED_UP_BY_PRICE"
    ROLLED_UP_BY_AVG_PRICE = "ROLLED_UP_BY_AVG_PRICE"


class MarketProjection(str, Enum):
    """Optional sections of a market catalogue."""

    COMPETITION = "COMPETITION"
    EVENT = "EVENT"
    EVENT_TYPE = "EVENT_TYPE"
    MARKET_START_TIME = "MARKET_START_TIME"
    MARKET_DESCRIPTION = "MARKET_DESCRIPTION"
    RUNNER_DESCRIPTION = "RUNNER_DESCRIPTION"
    RUNNER_METADATA = "RUNNER_METADATA"


class PriceData(str, Enum):
    """Price data to include in a market book."""

    SP_AVAILABLE = "SP_AVAILABLE"
    SP_TRADED = "SP_TRADED"
    EX_BEST_OFFERS = "EX_BEST_OFFERS"
    EX_ALL_OFFERS = "EX_ALL_OFFERS"
    EX_TRADED = "EX_TRADED"


class RunnerStatus(str, Enum):
    ACTIVE = "ACTIVE"
    WINNER = "WINNER"
    LOSER = "LOSER"
    REMOVED_VACANT = "REMOVED_VACANT"
    REMOVED = "REMOVED"
    HIDDEN = "HIDDEN"


class PersistenceType(str, Enum):
    """What happens to an unmatched order when the market turns in-play."""

    LAPSE = "LAPSE"
    PERSIST = "PERSIST"
    MARKET_ON_CLOSE = "MARKET_ON_CLOSE"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    LIMIT_ON_CLOSE = "LIMIT_ON_CLOSE"
    MARKET_ON_CLOSE = "MARKET_ON_CLOSE"


class MarketStatus(str, Enum):
    INACTIVE = "INACTIVE"
    OPEN = "OPEN"
    SUSPENDED = "SUSPENDED"
    CLOSED = "CLOSED"


class MarketSort(str, Enum):
    """Ordering of listMarketCatalogue results."""

    MINIMUM_TRADED = "MINIMUM_TRADED"
    MAXIMUM_TRADED = "MAXIMUM_TRADED"
    MINIMUM_AVAILABLE = "MINIMUM_AVAILABLE"
    MAXIMUM_AVAILABLE = "MAXIMUM_AVAILABLE"
    FIRST_TO_START = "FIRST_TO_START"
    LAST_TO_START = "LAST_TO_START"


class MarketBettingType(str, Enum):
    ODDS = "ODDS"
    LINE = "LINE"
    RANGE = "RANGE"
    ASIAN_HANDICAP_DOUBLE_LINE = "ASIAN_HANDICAP_DOUBLE_LINE"
    ASIAN_HANDICAP_SINGLE_LINE = "ASIAN_HANDICAP_SINGLE_LINE"
    FIXED_ODDS = "FIXED_ODDS"


def parse_enum(enum_cls: type[Enum], value: str | None):
    """Map a wire literal to ``enum_cls``.

    Unknown literals are returned unchanged so new values added by the
    exchange don't break parsing.
    """
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return value


def label(value, default: str = "N/A") -> str:
    """Display text for an enum-typed field (member, raw literal or None)."""
    if isinstance(value, Enum):
        return value.value
    return value or default
