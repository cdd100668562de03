"""Request-side structures: market filter, projections and the params envelope."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .enums import (
    MarketBettingType,
    MarketProjection,
    MarketSort,
    MatchProjection,
    OrderProjection,
    OrderStatus,
    PriceData,
)
from .serialize import to_wire, wire


@dataclass
class TimeRange:
    """Inclusive time window; either end may be left open."""

    from_: Optional[datetime] = wire("from", default=None)
    to: Optional[datetime] = wire("to", default=None)


@dataclass
class MarketFilter:
    """Criteria narrowing which markets a query applies to.

    Every field is optional and omitted from the request when unset.
    """

    text_query: str = wire("textQuery", default="")
    exchange_ids: list[str] = wire("exchangeIds", default_factory=list)
    event_type_ids: list[str] = wire("eventTypeIds", default_factory=list)
    event_ids: list[str] = wire("eventIds", default_factory=list)
    competition_ids: list[str] = wire("competitionIds", default_factory=list)
    market_countries: list[str] = wire("marketCountries", default_factory=list)
    market_ids: list[str] = wire("marketIds", default_factory=list)
    market_type_codes: list[str] = wire("marketTypeCodes", default_factory=list)
    venues: list[str] = wire("venues", default_factory=list)
    market_betting_types: list[MarketBettingType] = wire(
        "marketBettingTypes", default_factory=list
    )
    market_start_time: Optional[TimeRange] = wire("marketStartTime", default=None)
    bsp_only: Optional[bool] = wire("bspOnly", default=None)
    turn_in_play_enabled: Optional[bool] = wire("turnInPlayEnabled", default=None)
    in_play_only: Optional[bool] = wire("inPlayOnly", default=None)
    with_orders: list[OrderStatus] = wire("withOrders", default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


@dataclass
class PriceProjection:
    """Selects which price data a market book includes."""

    price_data: list[PriceData] = wire("priceData", default_factory=list)
    virtualise: Optional[bool] = wire("virtualise", default=None)
    rollover_stakes: Optional[bool] = wire("rolloverStakes", default=None)

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


@dataclass
class ProjectionParams:
    """Caller-side bundle of projections, applied to a request via
    ``Params.set_projections``. Never serialized itself."""

    market_projection: list[MarketProjection] = field(default_factory=list)
    price_projection: Optional[PriceProjection] = None
    order_projection: Optional[OrderProjection] = None
    match_projection: Optional[MatchProjection] = None


@dataclass
class Params:
    """Shared parameter envelope sent as the body of every betting request."""

    filter: Optional[MarketFilter] = wire("filter", default=None)
    market_ids: list[str] = wire("marketIds", default_factory=list)
    price_projection: Optional[PriceProjection] = wire("priceProjection", default=None)
    market_projection: list[MarketProjection] = wire(
        "marketProjection", default_factory=list
    )
    order_projection: Optional[OrderProjection] = wire("orderProjection", default=None)
    match_projection: Optional[MatchProjection] = wire("matchProjection", default=None)
    sort: Optional[MarketSort] = wire("sort", default=None)
    max_results: Optional[int] = wire("maxResults", default=None)
    locale: str = wire("locale", default="")

    def set_projections(self, params: Optional[ProjectionParams]) -> None:
        """Copy all four projections from ``params`` onto this envelope."""
        if params is None:
            return
        self.price_projection = params.price_projection
        self.market_projection = list(params.market_projection or [])
        self.order_projection = params.order_projection
        self.match_projection = params.match_projection

    def to_dict(self) -> dict[str, Any]:
        data = to_wire(self)
        # maxResults of 0 means "not set"
        if not self.max_results:
            data.pop("maxResults", None)
        return data
