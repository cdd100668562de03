"""Tests for the betting operations against a mocked HTTP transport."""

import json

import httpx
import pytest

from betfair import (
    CompetitionResult,
    MarketBook,
    MarketCatalogue,
    MarketFilter,
    MarketProjection,
    MarketSort,
    NotLoggedInError,
    OrderProjection,
    PriceData,
    PriceProjection,
    ProjectionParams,
)
from betfair.config import BETTING_URL
from conftest import APP_KEY, SESSION_TOKEN, load_fixture


def ok(fixture: str) -> httpx.Response:
    return httpx.Response(200, json=load_fixture(fixture))


@pytest.mark.parametrize(
    "operation,method,fixture",
    [
        ("list_competitions", "listCompetitions", "list_competitions.json"),
        ("list_countries", "listCountries", "list_countries.json"),
        ("list_events", "listEvents", "list_events.json"),
        ("list_event_types", "listEventTypes", "list_event_types.json"),
        ("list_market_types", "listMarketTypes", "list_market_types.json"),
    ],
)
def test_discovery_operations(make_client, operation, method, fixture):
    client, recorder = make_client(ok(fixture))

    results = getattr(client, operation)(MarketFilter(event_type_ids=["1"]))

    assert len(results) == len(load_fixture(fixture))
    assert recorder.last.method == "POST"
    assert str(recorder.last.url) == f"{BETTING_URL}/{method}/"
    assert recorder.last_json() == {"filter": {"eventTypeIds": ["1"]}}


def test_discovery_without_filter_sends_empty_filter(make_client):
    client, recorder = make_client(ok("list_competitions.json"))

    results = client.list_competitions()

    assert recorder.last_json() == {"filter": {}}
    assert isinstance(results[0], CompetitionResult)
    assert results[0].competition.name == "English Premier League"


def test_request_headers(make_client):
    client, recorder = make_client(ok("list_event_types.json"))

    client.list_event_types()

    headers = recorder.last.headers
    assert headers["X-Application"] == APP_KEY
    assert headers["X-Authentication"] == SESSION_TOKEN
    assert headers["Accept"] == "application/json"
    assert headers["Content-Type"] == "application/json"


def test_locale_is_injected(make_client):
    client, recorder = make_client(ok("list_countries.json"), locale="es")

    client.list_countries(MarketFilter(text_query="football"))

    assert recorder.last_json() == {"filter": {"textQuery": "football"}, "locale": "es"}


def test_list_market_book(make_client):
    client, recorder = make_client(ok("list_market_book.json"))

    books = client.list_market_book(
        ["1.114363660"],
        ProjectionParams(
            price_projection=PriceProjection(price_data=[PriceData.EX_BEST_OFFERS]),
            order_projection=OrderProjection.EXECUTABLE,
        ),
    )

    assert str(recorder.last.url) == f"{BETTING_URL}/listMarketBook/"
    assert recorder.last_json() == {
        "marketIds": ["1.114363660"],
        "priceProjection": {"priceData": ["EX_BEST_OFFERS"]},
        "orderProjection": "EXECUTABLE",
    }
    assert isinstance(books[0], MarketBook)
    assert books[0].runners[0].best_back().price == 4.3


def test_list_market_book_without_projections(make_client):
    client, recorder = make_client(httpx.Response(200, json=[]))

    assert client.list_market_book(["1.1", "1.2"]) == []
    assert recorder.last_json() == {"marketIds": ["1.1", "1.2"]}


def test_list_market_catalogue(make_client):
    client, recorder = make_client(ok("list_market_catalogue.json"))

    markets = client.list_market_catalogue(
        MarketFilter(event_type_ids=["1"], market_countries=["GB"]),
        10,
        ProjectionParams(
            market_projection=[MarketProjection.EVENT, MarketProjection.RUNNER_DESCRIPTION]
        ),
        sort=MarketSort.FIRST_TO_START,
    )

    assert str(recorder.last.url) == f"{BETTING_URL}/listMarketCatalogue/"
    assert recorder.last_json() == {
        "filter": {"eventTypeIds": ["1"], "marketCountries": ["GB"]},
        "marketProjection": ["EVENT", "RUNNER_DESCRIPTION"],
        "sort": "FIRST_TO_START",
        "maxResults": 10,
    }
    assert all(isinstance(m, MarketCatalogue) for m in markets)
    assert markets[0].market_name == "Match Odds"


def test_custom_betting_url(make_client):
    client, recorder = make_client(
        ok("list_event_types.json"),
        betting_url="https://api.betfair.es/exchange/betting/rest/v1.0/",
    )

    client.list_event_types()

    assert str(recorder.last.url) == "https://api.betfair.es/exchange/betting/rest/v1.0/listEventTypes/"


def test_not_logged_in_sends_nothing(make_client):
    client, recorder = make_client(ok("list_event_types.json"), session_token=None)

    with pytest.raises(NotLoggedInError):
        client.list_event_types()

    assert recorder.requests == []


def test_http_error_status_propagates(make_client):
    error_body = {
        "faultcode": "Client",
        "faultstring": "ANGX-0003",
        "detail": {"APINGException": {"errorCode": "INVALID_SESSION_INFORMATION"}},
    }
    client, _ = make_client(httpx.Response(400, json=error_body))

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        client.list_events()

    assert exc_info.value.response.status_code == 400


def test_invalid_json_propagates(make_client):
    client, _ = make_client(httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(json.JSONDecodeError):
        client.list_market_types()


def test_transport_error_propagates():
    from betfair import Betfair

    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    with Betfair(APP_KEY, session_token=SESSION_TOKEN, transport=httpx.MockTransport(fail)) as client:
        with pytest.raises(httpx.ConnectError):
            client.list_event_types()
