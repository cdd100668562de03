"""Configuration for the betting client."""

import os
from dataclasses import dataclass

# Betfair API-NG endpoints - override via environment for other jurisdictions
BETTING_URL = os.environ.get(
    "BETFAIR_BETTING_URL", "https://api.betfair.com/exchange/betting/rest/v1.0"
)
IDENTITY_URL = os.environ.get("BETFAIR_IDENTITY_URL", "https://identitysso.betfair.com/api")

DEFAULT_TIMEOUT = 30.0


@dataclass
class Config:
    """Per-client settings.

    ``locale`` is injected into every betting request; an empty locale is
    left off the wire and the exchange falls back to the account's locale.
    """

    app_key: str
    locale: str = ""
    timeout: float = DEFAULT_TIMEOUT
    betting_url: str = BETTING_URL
    identity_url: str = IDENTITY_URL
