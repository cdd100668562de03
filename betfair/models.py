"""Response models mirroring the betting API schema.

Each model parses from the API's camelCase JSON with ``from_dict`` and
re-emits the same shape with ``to_dict`` (empty fields omitted).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from .enums import (
    MarketStatus,
    OrderStatus,
    OrderType,
    PersistenceType,
    RunnerStatus,
    Side,
    label,
    parse_enum,
)
from .serialize import parse_timestamp, to_wire, wire


def _float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def _int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


class _WireModel:
    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


# -----------------------------
# Discovery results
# -----------------------------


@dataclass
class EventType(_WireModel):
    """A sport, e.g. Soccer or Horse Racing."""

    id: str = wire("id", default="")
    name: str = wire("name", default="")

    @classmethod
    def from_dict(cls, d: dict) -> EventType:
        return cls(id=d.get("id", ""), name=d.get("name", ""))


@dataclass
class EventTypeResult(_WireModel):
    event_type: Optional[EventType] = wire("eventType", default=None)
    market_count: Optional[int] = wire("marketCount", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> EventTypeResult:
        et = d.get("eventType")
        return cls(
            event_type=EventType.from_dict(et) if et is not None else None,
            market_count=_int(d.get("marketCount")),
        )


@dataclass
class Competition(_WireModel):
    """A competition, e.g. World Cup 2013."""

    id: str = wire("id", default="")
    name: str = wire("name", default="")

    @classmethod
    def from_dict(cls, d: dict) -> Competition:
        return cls(id=d.get("id", ""), name=d.get("name", ""))


@dataclass
class CompetitionResult(_WireModel):
    competition: Optional[Competition] = wire("competition", default=None)
    market_count: Optional[int] = wire("marketCount", default=None)
    competition_region: str = wire("competitionRegion", default="")

    @classmethod
    def from_dict(cls, d: dict) -> CompetitionResult:
        c = d.get("competition")
        return cls(
            competition=Competition.from_dict(c) if c is not None else None,
            market_count=_int(d.get("marketCount")),
            competition_region=d.get("competitionRegion", ""),
        )


@dataclass
class CountryCodeResult(_WireModel):
    country_code: str = wire("countryCode", default="")
    market_count: Optional[int] = wire("marketCount", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> CountryCodeResult:
        return cls(
            country_code=d.get("countryCode", ""),
            market_count=_int(d.get("marketCount")),
        )


@dataclass
class Event(_WireModel):
    """A sporting event, e.g. Reading vs. Man United."""

    id: str = wire("id", default="")
    name: str = wire("name", default="")
    country_code: str = wire("countryCode", default="")
    timezone: str = wire("timezone", default="")
    venue: str = wire("venue", default="")
    open_date: Optional[datetime] = wire("openDate", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> Event:
        return cls(
            id=d.get("id", ""),
            name=d.get("name", ""),
            country_code=d.get("countryCode", ""),
            timezone=d.get("timezone", ""),
            venue=d.get("venue", ""),
            open_date=parse_timestamp(d.get("openDate")),
        )


@dataclass
class EventResult(_WireModel):
    event: Optional[Event] = wire("event", default=None)
    market_count: Optional[int] = wire("marketCount", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> EventResult:
        e = d.get("event")
        return cls(
            event=Event.from_dict(e) if e is not None else None,
            market_count=_int(d.get("marketCount")),
        )


@dataclass
class MarketTypeResult(_WireModel):
    market_type: str = wire("marketType", default="")
    market_count: Optional[int] = wire("marketCount", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> MarketTypeResult:
        return cls(
            market_type=d.get("marketType", ""),
            market_count=_int(d.get("marketCount")),
        )


# -----------------------------
# Prices, orders and matches
# -----------------------------


@dataclass(repr=False)
class PriceSize(_WireModel):
    """A price (decimal odds) and the stake available or traded at it."""

    price: Optional[float] = wire("price", default=None)
    size: Optional[float] = wire("size", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> PriceSize:
        return cls(price=_float(d.get("price")), size=_float(d.get("size")))

    def __str__(self) -> str:
        return f"{self.price or 0:.2f} x {self.size or 0:,.2f}"

    def __repr__(self) -> str:
        return self.__str__()


def _price_sizes(items: Optional[list]) -> list[PriceSize]:
    return [PriceSize.from_dict(p) for p in items or []]


@dataclass
class StartingPrices(_WireModel):
    """Betfair Starting Price information. Only present on BSP markets."""

    near_price: Optional[float] = wire("nearPrice", default=None)
    far_price: Optional[float] = wire("farPrice", default=None)
    back_stake_taken: list[PriceSize] = wire("backStakeTaken", default_factory=list)
    lay_liability_taken: list[PriceSize] = wire(
        "layLiabilityTaken", default_factory=list
    )
    actual_sp: Optional[float] = wire("actualSP", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> StartingPrices:
        return cls(
            near_price=_float(d.get("nearPrice")),
            far_price=_float(d.get("farPrice")),
            back_stake_taken=_price_sizes(d.get("backStakeTaken")),
            lay_liability_taken=_price_sizes(d.get("layLiabilityTaken")),
            actual_sp=_float(d.get("actualSP")),
        )


@dataclass
class ExchangePrices(_WireModel):
    """Prices available to back and lay, with volume."""

    available_to_back: list[PriceSize] = wire("availableToBack", default_factory=list)
    available_to_lay: list[PriceSize] = wire("availableToLay", default_factory=list)
    traded_volume: list[PriceSize] = wire("tradedVolume", default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> ExchangePrices:
        return cls(
            available_to_back=_price_sizes(d.get("availableToBack")),
            available_to_lay=_price_sizes(d.get("availableToLay")),
            traded_volume=_price_sizes(d.get("tradedVolume")),
        )


@dataclass
class Order(_WireModel):
    """One of the caller's orders on a runner."""

    bet_id: str = wire("betId", default="")
    order_type: Optional[OrderType] = wire("orderType", default=None)
    status: Optional[OrderStatus] = wire("status", default=None)
    persistence_type: Optional[PersistenceType] = wire("persistenceType", default=None)
    side: Optional[Side] = wire("side", default=None)
    price: Optional[float] = wire("price", default=None)
    size: Optional[float] = wire("size", default=None)
    bsp_liability: Optional[float] = wire("bspLiability", default=None)
    placed_date: Optional[datetime] = wire("placedDate", default=None)
    avg_price_matched: Optional[float] = wire("avgPriceMatched", default=None)
    size_matched: Optional[float] = wire("sizeMatched", default=None)
    size_remaining: Optional[float] = wire("sizeRemaining", default=None)
    size_lapsed: Optional[float] = wire("sizeLapsed", default=None)
    size_cancelled: Optional[float] = wire("sizeCancelled", default=None)
    size_voided: Optional[float] = wire("sizeVoided", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> Order:
        return cls(
            bet_id=d.get("betId", ""),
            order_type=parse_enum(OrderType, d.get("orderType")),
            status=parse_enum(OrderStatus, d.get("status")),
            persistence_type=parse_enum(PersistenceType, d.get("persistenceType")),
            side=parse_enum(Side, d.get("side")),
            price=_float(d.get("price")),
            size=_float(d.get("size")),
            bsp_liability=_float(d.get("bspLiability")),
            placed_date=parse_timestamp(d.get("placedDate")),
            avg_price_matched=_float(d.get("avgPriceMatched")),
            size_matched=_float(d.get("sizeMatched")),
            size_remaining=_float(d.get("sizeRemaining")),
            size_lapsed=_float(d.get("sizeLapsed")),
            size_cancelled=_float(d.get("sizeCancelled")),
            size_voided=_float(d.get("sizeVoided")),
        )


@dataclass
class Match(_WireModel):
    """An individual bet match, or a rollup by price or average price.

    Which one depends on the MatchProjection of the request.
    """

    bet_id: str = wire("betId", default="")
    match_id: str = wire("matchId", default="")
    side: Optional[Side] = wire("side", default=None)
    price: Optional[float] = wire("price", default=None)
    size: Optional[float] = wire("size", default=None)
    match_date: Optional[datetime] = wire("matchDate", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> Match:
        return cls(
            bet_id=d.get("betId", ""),
            match_id=d.get("matchId", ""),
            side=parse_enum(Side, d.get("side")),
            price=_float(d.get("price")),
            size=_float(d.get("size")),
            match_date=parse_timestamp(d.get("matchDate")),
        )


# -----------------------------
# Market book
# -----------------------------


@dataclass(repr=False)
class Runner(_WireModel):
    """Dynamic data for one selection in a market book."""

    selection_id: Optional[int] = wire("selectionId", default=None)
    handicap: Optional[float] = wire("handicap", default=None)
    status: Optional[RunnerStatus] = wire("status", default=None)
    adjustment_factor: Optional[float] = wire("adjustmentFactor", default=None)
    last_price_traded: Optional[float] = wire("lastPriceTraded", default=None)
    total_matched: Optional[float] = wire("totalMatched", default=None)
    removal_date: Optional[datetime] = wire("removalDate", default=None)
    sp: Optional[StartingPrices] = wire("sp", default=None)
    ex: Optional[ExchangePrices] = wire("ex", default=None)
    orders: list[Order] = wire("orders", default_factory=list)
    matches: list[Match] = wire("matches", default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> Runner:
        sp = d.get("sp")
        ex = d.get("ex")
        return cls(
            selection_id=_int(d.get("selectionId")),
            handicap=_float(d.get("handicap")),
            status=parse_enum(RunnerStatus, d.get("status")),
            adjustment_factor=_float(d.get("adjustmentFactor")),
            last_price_traded=_float(d.get("lastPriceTraded")),
            total_matched=_float(d.get("totalMatched")),
            removal_date=parse_timestamp(d.get("removalDate")),
            sp=StartingPrices.from_dict(sp) if sp is not None else None,
            ex=ExchangePrices.from_dict(ex) if ex is not None else None,
            orders=[Order.from_dict(o) for o in d.get("orders") or []],
            matches=[Match.from_dict(m) for m in d.get("matches") or []],
        )

    def best_back(self) -> Optional[PriceSize]:
        """Best price available to back, if any."""
        if self.ex and self.ex.available_to_back:
            return self.ex.available_to_back[0]
        return None

    def best_lay(self) -> Optional[PriceSize]:
        """Best price available to lay, if any."""
        if self.ex and self.ex.available_to_lay:
            return self.ex.available_to_lay[0]
        return None

    def __str__(self) -> str:
        back = self.best_back()
        lay = self.best_lay()
        return (
            f"    [{self.selection_id}] {label(self.status)}"
            f" | back {back or '-'} | lay {lay or '-'}"
        )

    def __repr__(self) -> str:
        return self.__str__()


@dataclass(repr=False)
class MarketBook(_WireModel):
    """Dynamic data about a market: prices, status, traded volume, orders."""

    market_id: str = wire("marketId", default="")
    is_market_data_delayed: Optional[bool] = wire("isMarketDataDelayed", default=None)
    status: Optional[MarketStatus] = wire("status", default=None)
    bet_delay: Optional[int] = wire("betDelay", default=None)
    bsp_reconciled: Optional[bool] = wire("bspReconciled", default=None)
    complete: Optional[bool] = wire("complete", default=None)
    inplay: Optional[bool] = wire("inplay", default=None)
    number_of_winners: Optional[int] = wire("numberOfWinners", default=None)
    number_of_runners: Optional[int] = wire("numberOfRunners", default=None)
    number_of_active_runners: Optional[int] = wire(
        "numberOfActiveRunners", default=None
    )
    last_match_time: Optional[datetime] = wire("lastMatchTime", default=None)
    total_matched: Optional[float] = wire("totalMatched", default=None)
    total_available: Optional[float] = wire("totalAvailable", default=None)
    cross_matching: Optional[bool] = wire("crossMatching", default=None)
    runners_voidable: Optional[bool] = wire("runnersVoidable", default=None)
    version: Optional[int] = wire("version", default=None)
    runners: list[Runner] = wire("runners", default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> MarketBook:
        return cls(
            market_id=d.get("marketId", ""),
            is_market_data_delayed=d.get("isMarketDataDelayed"),
            status=parse_enum(MarketStatus, d.get("status")),
            bet_delay=_int(d.get("betDelay")),
            bsp_reconciled=d.get("bspReconciled"),
            complete=d.get("complete"),
            inplay=d.get("inplay"),
            number_of_winners=_int(d.get("numberOfWinners")),
            number_of_runners=_int(d.get("numberOfRunners")),
            number_of_active_runners=_int(d.get("numberOfActiveRunners")),
            last_match_time=parse_timestamp(d.get("lastMatchTime")),
            total_matched=_float(d.get("totalMatched")),
            total_available=_float(d.get("totalAvailable")),
            cross_matching=d.get("crossMatching"),
            runners_voidable=d.get("runnersVoidable"),
            version=_int(d.get("version")),
            runners=[Runner.from_dict(r) for r in d.get("runners") or []],
        )

    def __str__(self) -> str:
        lines = [
            f"\n  📖 {self.market_id} ({label(self.status)})",
            f"     Matched: {self.total_matched or 0:,.2f} | In-play: {bool(self.inplay)}",
        ]
        lines.extend(str(r) for r in self.runners)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.__str__()


# -----------------------------
# Market catalogue
# -----------------------------


@dataclass
class RunnerCatalog(_WireModel):
    """Static information about a runner (selection) in a market."""

    selection_id: Optional[int] = wire("selectionId", default=None)
    runner_name: str = wire("runnerName", default="")
    handicap: Optional[float] = wire("handicap", default=None)
    sort_priority: Optional[int] = wire("sortPriority", default=None)
    metadata: dict[str, Optional[str]] = wire("metadata", default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> RunnerCatalog:
        return cls(
            selection_id=_int(d.get("selectionId")),
            runner_name=d.get("runnerName", ""),
            handicap=_float(d.get("handicap")),
            sort_priority=_int(d.get("sortPriority")),
            metadata=dict(d.get("metadata") or {}),
        )


@dataclass
class MarketDescription(_WireModel):
    """Market definition."""

    persistence_enabled: Optional[bool] = wire("persistenceEnabled", default=None)
    bsp_market: Optional[bool] = wire("bspMarket", default=None)
    market_time: Optional[datetime] = wire("marketTime", default=None)
    suspend_time: Optional[datetime] = wire("suspendTime", default=None)
    settle_time: Optional[datetime] = wire("settleTime", default=None)
    betting_type: str = wire("bettingType", default="")
    turn_in_play_enabled: Optional[bool] = wire("turnInPlayEnabled", default=None)
    market_type: str = wire("marketType", default="")
    regulator: str = wire("regulator", default="")
    market_base_rate: Optional[float] = wire("marketBaseRate", default=None)
    discount_allowed: Optional[bool] = wire("discountAllowed", default=None)
    wallet: str = wire("wallet", default="")
    rules: str = wire("rules", default="")
    rules_has_date: Optional[bool] = wire("rulesHasDate", default=None)
    clarifications: str = wire("clarifications", default="")

    @classmethod
    def from_dict(cls, d: dict) -> MarketDescription:
        return cls(
            persistence_enabled=d.get("persistenceEnabled"),
            bsp_market=d.get("bspMarket"),
            market_time=parse_timestamp(d.get("marketTime")),
            suspend_time=parse_timestamp(d.get("suspendTime")),
            settle_time=parse_timestamp(d.get("settleTime")),
            betting_type=d.get("bettingType", ""),
            turn_in_play_enabled=d.get("turnInPlayEnabled"),
            market_type=d.get("marketType", ""),
            regulator=d.get("regulator", ""),
            market_base_rate=_float(d.get("marketBaseRate")),
            discount_allowed=d.get("discountAllowed"),
            wallet=d.get("wallet", ""),
            rules=d.get("rules", ""),
            rules_has_date=d.get("rulesHasDate"),
            clarifications=d.get("clarifications", ""),
        )


@dataclass(repr=False)
class MarketCatalogue(_WireModel):
    """Information about a market that does not change (or rarely does)."""

    market_id: str = wire("marketId", default="")
    market_name: str = wire("marketName", default="")
    market_start_time: Optional[datetime] = wire("marketStartTime", default=None)
    description: Optional[MarketDescription] = wire("description", default=None)
    total_matched: Optional[float] = wire("totalMatched", default=None)
    runners: list[RunnerCatalog] = wire("runners", default_factory=list)
    event_type: Optional[EventType] = wire("eventType", default=None)
    competition: Optional[Competition] = wire("competition", default=None)
    event: Optional[Event] = wire("event", default=None)

    @classmethod
    def from_dict(cls, d: dict) -> MarketCatalogue:
        desc = d.get("description")
        et = d.get("eventType")
        comp = d.get("competition")
        ev = d.get("event")
        return cls(
            market_id=d.get("marketId", ""),
            market_name=d.get("marketName", ""),
            market_start_time=parse_timestamp(d.get("marketStartTime")),
            description=MarketDescription.from_dict(desc) if desc is not None else None,
            total_matched=_float(d.get("totalMatched")),
            runners=[RunnerCatalog.from_dict(r) for r in d.get("runners") or []],
            event_type=EventType.from_dict(et) if et is not None else None,
            competition=Competition.from_dict(comp) if comp is not None else None,
            event=Event.from_dict(ev) if ev is not None else None,
        )

    def __str__(self) -> str:
        name = self.market_name[:60]
        if len(self.market_name) > 60:
            name += "..."

        lines = [f"\n  • {name} [{self.market_id}]"]
        if self.event:
            lines.append(f"    Event: {self.event.name}")
        if self.market_start_time:
            lines.append(f"    Starts: {self.market_start_time:%Y-%m-%d %H:%M} UTC")
        lines.extend(f"    - {r.runner_name} ({r.selection_id})" for r in self.runners)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.__str__()
