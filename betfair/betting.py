"""Betting API methods."""

import logging
from typing import Any, Callable, Optional, TypeVar

from .base import BaseClient
from .enums import MarketSort
from .exceptions import NotLoggedInError
from .filters import MarketFilter, Params, ProjectionParams
from .models import (
    CompetitionResult,
    CountryCodeResult,
    EventResult,
    EventTypeResult,
    MarketBook,
    MarketCatalogue,
    MarketTypeResult,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BettingMixin:
    """Betting API methods mixin."""

    def list_competitions(
        self, filter: Optional[MarketFilter] = None
    ) -> list[CompetitionResult]:
        """
        List Competitions (i.e., World Cup 2013) associated with the markets
        selected by the filter.
        """
        params = Params(filter=filter or MarketFilter())
        return self._betting_request("listCompetitions", params, CompetitionResult.from_dict)

    def list_countries(
        self, filter: Optional[MarketFilter] = None
    ) -> list[CountryCodeResult]:
        """List Countries associated with the markets selected by the filter."""
        params = Params(filter=filter or MarketFilter())
        return self._betting_request("listCountries", params, CountryCodeResult.from_dict)

    def list_events(self, filter: Optional[MarketFilter] = None) -> list[EventResult]:
        """
        List Events (i.e., Reading vs. Man United) associated with the markets
        selected by the filter.
        """
        params = Params(filter=filter or MarketFilter())
        return self._betting_request("listEvents", params, EventResult.from_dict)

    def list_event_types(
        self, filter: Optional[MarketFilter] = None
    ) -> list[EventTypeResult]:
        """List Event Types (i.e. Sports) associated with the markets selected by the filter."""
        params = Params(filter=filter or MarketFilter())
        return self._betting_request("listEventTypes", params, EventTypeResult.from_dict)

    def list_market_types(
        self, filter: Optional[MarketFilter] = None
    ) -> list[MarketTypeResult]:
        """
        List market types (i.e. MATCH_ODDS, NEXT_GOAL) associated with the
        markets selected by the filter. Market types are the same regardless
        of locale.
        """
        params = Params(filter=filter or MarketFilter())
        return self._betting_request("listMarketTypes", params, MarketTypeResult.from_dict)

    def list_market_book(
        self,
        market_ids: list[str],
        projections: Optional[ProjectionParams] = None,
    ) -> list[MarketBook]:
        """
        Get dynamic data about markets: prices, market and selection status,
        traded volume and the status of any orders placed in the market.

        Args:
            market_ids: Markets to fetch
            projections: Price, order and match projections to apply

        Returns:
            One MarketBook per market found
        """
        params = Params(market_ids=list(market_ids))
        params.set_projections(projections)
        return self._betting_request("listMarketBook", params, MarketBook.from_dict)

    def list_market_catalogue(
        self,
        filter: Optional[MarketFilter] = None,
        max_results: int = 100,
        projections: Optional[ProjectionParams] = None,
        *,
        sort: Optional[MarketSort] = None,
    ) -> list[MarketCatalogue]:
        """
        Get information about markets that does not change (or changes very
        rarely): market name, selection names and so on. Market Data Request
        Limits apply.

        Args:
            filter: Markets to select
            max_results: Limit on the number of results (1-1000)
            projections: Market projections to include
            sort: Result ordering
        """
        params = Params(filter=filter or MarketFilter(), max_results=max_results, sort=sort)
        params.set_projections(projections)
        return self._betting_request("listMarketCatalogue", params, MarketCatalogue.from_dict)

    def _betting_request(
        self, method: str, params: Params, parse: Callable[[dict[str, Any]], T]
    ) -> list[T]:
        """
        Send ``params`` to a betting operation and parse the JSON array reply.

        Serialization, transport, status and decoding errors propagate unchanged.
        """
        self: BaseClient
        if not self.session_token:
            raise NotLoggedInError()

        params.locale = self.config.locale
        body = params.to_dict()
        logger.debug("%s %s", method, body)

        resp = self._post(f"{self.config.betting_url}/{method}/", json=body)
        resp.raise_for_status()
        data = resp.json()

        results = [parse(item) for item in data]
        logger.debug("%s returned %d results", method, len(results))
        return results
