"""Main Betfair client combining the session and betting methods."""

from typing import Optional

import httpx

from .base import BaseClient
from .betting import BettingMixin
from .config import DEFAULT_TIMEOUT


class Betfair(BaseClient, BettingMixin):
    """
    HTTP client for the Betfair Exchange betting API.

    Example:
        client = Betfair(app_key, session_token=token, locale="en")
        event_types = client.list_event_types()

        soccer = MarketFilter(event_type_ids=["1"], market_countries=["GB"])
        catalogue = client.list_market_catalogue(
            soccer,
            max_results=10,
            projections=ProjectionParams(
                market_projection=[MarketProjection.EVENT, MarketProjection.RUNNER_DESCRIPTION]
            ),
        )

        books = client.list_market_book(
            [m.market_id for m in catalogue],
            ProjectionParams(price_projection=PriceProjection([PriceData.EX_BEST_OFFERS])),
        )

    Environment Variables:
        BETFAIR_BETTING_URL: Betting endpoint (e.g. the .es / .it exchanges)
        BETFAIR_IDENTITY_URL: Identity (login) endpoint
    """

    def __init__(
        self,
        app_key: str,
        *,
        session_token: Optional[str] = None,
        locale: str = "",
        betting_url: Optional[str] = None,
        identity_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(
            app_key,
            session_token=session_token,
            locale=locale,
            betting_url=betting_url,
            identity_url=identity_url,
            timeout=timeout,
            transport=transport,
        )


def create_client() -> Optional[Betfair]:
    """Create a client from environment variables.

    Requires:
    - BF_APP_KEY
    Optional:
    - BF_SESSION_TOKEN (otherwise BF_USERNAME + BF_PASSWORD are used to log in)
    - BF_LOCALE
    """
    from env import BF_APP_KEY, BF_LOCALE, BF_PASSWORD, BF_SESSION_TOKEN, BF_USERNAME

    if not BF_APP_KEY:
        return None

    client = Betfair(BF_APP_KEY, session_token=BF_SESSION_TOKEN, locale=BF_LOCALE)
    if not client.logged_in and BF_USERNAME and BF_PASSWORD:
        client.login(BF_USERNAME, BF_PASSWORD)
    return client
