"""Tests for client configuration and the identity (login) calls."""

from urllib.parse import parse_qs

import httpx
import pytest

from betfair import Betfair, LoginError
from betfair.config import IDENTITY_URL
from conftest import APP_KEY, SESSION_TOKEN


class TestConfig:
    """Test client configuration."""

    def test_defaults(self):
        client = Betfair(APP_KEY)
        assert client.config.app_key == APP_KEY
        assert client.config.locale == ""
        assert client.session_token is None
        assert client.logged_in is False
        client.close()

    def test_custom_urls_strip_trailing_slash(self):
        client = Betfair(APP_KEY, betting_url="http://local:8080/", identity_url="http://id/")
        assert client.config.betting_url == "http://local:8080"
        assert client.config.identity_url == "http://id"
        client.close()

    def test_context_manager_closes(self):
        with Betfair(APP_KEY) as client:
            assert client.config.timeout == 30.0
        assert client._client.is_closed


class TestLogin:
    """Test interactive login, keep-alive and logout."""

    def test_login_stores_token(self, make_client):
        client, recorder = make_client(
            httpx.Response(
                200,
                json={"token": "new-token", "product": APP_KEY, "status": "SUCCESS", "error": ""},
            ),
            session_token=None,
        )

        token = client.login("user", "secret")

        assert token == "new-token"
        assert client.session_token == "new-token"
        assert client.logged_in
        assert str(recorder.last.url) == f"{IDENTITY_URL}/login"
        assert parse_qs(recorder.last.content.decode()) == {
            "username": ["user"],
            "password": ["secret"],
        }
        assert recorder.last.headers["X-Application"] == APP_KEY
        assert "X-Authentication" not in recorder.last.headers

    def test_login_failure(self, make_client):
        client, _ = make_client(
            httpx.Response(
                200,
                json={"token": "", "product": APP_KEY, "status": "FAIL", "error": "INVALID_USERNAME_OR_PASSWORD"},
            ),
            session_token=None,
        )

        with pytest.raises(LoginError) as exc_info:
            client.login("user", "wrong")

        assert exc_info.value.status == "FAIL"
        assert exc_info.value.error == "INVALID_USERNAME_OR_PASSWORD"
        assert client.session_token is None

    def test_keep_alive(self, make_client):
        client, recorder = make_client(
            httpx.Response(200, json={"token": SESSION_TOKEN, "status": "SUCCESS", "error": ""})
        )

        assert client.keep_alive() == SESSION_TOKEN
        assert str(recorder.last.url) == f"{IDENTITY_URL}/keepAlive"
        assert recorder.last.headers["X-Authentication"] == SESSION_TOKEN

    def test_keep_alive_expired_session(self, make_client):
        client, _ = make_client(
            httpx.Response(200, json={"token": "", "status": "FAIL", "error": "NO_SESSION"})
        )

        with pytest.raises(LoginError, match="NO_SESSION"):
            client.keep_alive()

    def test_logout_clears_token(self, make_client):
        client, recorder = make_client(
            httpx.Response(200, json={"token": "", "status": "SUCCESS", "error": ""})
        )

        client.logout()

        assert client.session_token is None
        assert str(recorder.last.url) == f"{IDENTITY_URL}/logout"


class TestCreateClient:
    """Test building a client from env.py."""

    def test_no_app_key(self, monkeypatch):
        import env

        monkeypatch.setattr(env, "BF_APP_KEY", None)
        from betfair import create_client

        assert create_client() is None

    def test_with_session_token(self, monkeypatch):
        import env

        monkeypatch.setattr(env, "BF_APP_KEY", APP_KEY)
        monkeypatch.setattr(env, "BF_SESSION_TOKEN", SESSION_TOKEN)
        monkeypatch.setattr(env, "BF_LOCALE", "en")
        from betfair import create_client

        client = create_client()
        assert client.session_token == SESSION_TOKEN
        assert client.config.locale == "en"
        client.close()
