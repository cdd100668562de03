"""Betfair Exchange API-NG betting client.

Thin wrappers around the betting endpoint:
- Discovery: event types, competitions, countries, events, market types
- Market data: market catalogue (static) and market book (prices, orders)
"""

from .client import Betfair, create_client
from .config import BETTING_URL, IDENTITY_URL, Config
from .enums import (
    MarketBettingType,
    MarketProjection,
    MarketSort,
    MarketStatus,
    MatchProjection,
    OrderProjection,
    OrderStatus,
    OrderType,
    PersistenceType,
    PriceData,
    RunnerStatus,
    Side,
)
from .exceptions import BetfairError, LoginError, NotLoggedInError
from .filters import MarketFilter, Params, PriceProjection, ProjectionParams, TimeRange
from .models import (
    Competition,
    CompetitionResult,
    CountryCodeResult,
    Event,
    EventResult,
    EventType,
    EventTypeResult,
    ExchangePrices,
    Match,
    MarketBook,
    MarketCatalogue,
    MarketDescription,
    MarketTypeResult,
    Order,
    PriceSize,
    Runner,
    RunnerCatalog,
    StartingPrices,
)

__all__ = [
    # Client
    "Betfair",
    "create_client",
    # Config
    "BETTING_URL",
    "IDENTITY_URL",
    "Config",
    # Errors
    "BetfairError",
    "LoginError",
    "NotLoggedInError",
    # Enums
    "MarketBettingType",
    "MarketProjection",
    "MarketSort",
    "MarketStatus",
    "MatchProjection",
    "OrderProjection",
    "OrderStatus",
    "OrderType",
    "PersistenceType",
    "PriceData",
    "RunnerStatus",
    "Side",
    # Request types
    "MarketFilter",
    "Params",
    "PriceProjection",
    "ProjectionParams",
    "TimeRange",
    # Response types
    "Competition",
    "CompetitionResult",
    "CountryCodeResult",
    "Event",
    "EventResult",
    "EventType",
    "EventTypeResult",
    "ExchangePrices",
    "Match",
    "MarketBook",
    "MarketCatalogue",
    "MarketDescription",
    "MarketTypeResult",
    "Order",
    "PriceSize",
    "Runner",
    "RunnerCatalog",
    "StartingPrices",
]

__version__ = "0.1.0"
