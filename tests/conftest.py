"""Pytest configuration and fixtures."""

import json
import os

import httpx
import pytest

from betfair import Betfair

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")

APP_KEY = "test-app-key"
SESSION_TOKEN = "test-session-token"


def load_fixture(name: str):
    """Load a saved API response from tests/fixtures."""
    with open(os.path.join(FIXTURES_DIR, name)) as f:
        return json.load(f)


class Recorder:
    """Mock transport handler that records requests and replays a response."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def make_client():
    """Build a client whose HTTP calls are answered by a Recorder."""
    clients = []

    def _make(response: httpx.Response, **kwargs) -> tuple[Betfair, Recorder]:
        recorder = Recorder(response)
        kwargs.setdefault("session_token", SESSION_TOKEN)
        client = Betfair(APP_KEY, transport=httpx.MockTransport(recorder), **kwargs)
        clients.append(client)
        return client, recorder

    yield _make

    for c in clients:
        c.close()
