"""
Unit tests for the HTTP client: headers, error mapping and no-retry behavior.
"""

import httpx
import pytest

from apiaxle import AxleClient, get_keyring
from apiaxle.core.constants import USER_AGENT
from apiaxle.core.interfaces.base_api_client import RequestMethod
from apiaxle.shared.exceptions import (
    APIClientError,
    APIConflictError,
    APINotFoundError,
    APIRateLimitError,
    APIServerError,
    NetworkError,
)

AXLE_ADDRESS = "http://axle.test:3000"


def make_client(handler, settings):
    return AxleClient(AXLE_ADDRESS, transport=httpx.MockTransport(handler), settings=settings)


@pytest.mark.unit
class TestRequests:

    def test_url_helper(self, client):
        assert client.url("keyring", "a b/c") == "http://axle.test:3000/v1/keyring/a%20b%2Fc"

    def test_escaped_identifier_reaches_server(self, client, fake_axle):
        with pytest.raises(APINotFoundError):
            get_keyring(client, "a b/c")
        assert fake_axle.last_request.url.raw_path == b"/v1/keyring/a%20b%2Fc"

    def test_default_headers(self, client, fake_axle):
        fake_axle.reply("PUT", "/v1/keyring/r/linkkey/k", {"results": {}})

        client.do_http_request(RequestMethod.PUT, client.url("keyring", "r", "linkkey", "k"), b"{}")

        headers = fake_axle.last_request.headers
        assert headers["user-agent"] == USER_AGENT
        assert headers["accept"] == "application/json"
        assert headers["content-type"] == "application/json"

    def test_returns_raw_body(self, client, fake_axle):
        fake_axle.reply("GET", "/v1/keyrings", b'{"results": {}}')
        body = client.do_http_request(RequestMethod.GET, client.url("keyrings"))
        assert body == b'{"results": {}}'

    def test_closed_client(self, settings):
        client = make_client(lambda request: httpx.Response(200, json={}), settings)
        client.close()
        with pytest.raises(APIClientError):
            client.do_http_request(RequestMethod.GET, client.url("keyrings"))

    def test_address_falls_back_to_settings(self, settings):
        with AxleClient(settings=settings) as client:
            assert client.address == AXLE_ADDRESS
            assert client.timeout == 5


@pytest.mark.unit
class TestErrorMapping:
    """HTTP failures become typed exceptions carrying the server's message"""

    def test_not_found_uses_envelope_message(self, client, fake_axle):
        fake_axle.reply(
            "GET", "/v1/keyring/missing",
            {"meta": {"status_code": 404}, "results": {"error": {"type": "KeyringNotFoundError", "message": "Keyring 'missing' not found."}}},
            status=404
        )

        with pytest.raises(APINotFoundError) as exc_info:
            get_keyring(client, "missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.error_code == "KeyringNotFoundError"
        assert "Keyring 'missing' not found." in str(exc_info.value)

    def test_conflict(self, client, fake_axle):
        fake_axle.reply("GET", "/v1/keyring/dup", {"results": {"error": {"type": "AlreadyExists", "message": "dup"}}}, status=409)
        with pytest.raises(APIConflictError):
            get_keyring(client, "dup")

    def test_rate_limited(self, client, fake_axle):
        fake_axle.reply("GET", "/v1/keyring/busy", "slow down", status=429)
        with pytest.raises(APIRateLimitError) as exc_info:
            get_keyring(client, "busy")
        assert "slow down" in str(exc_info.value)

    def test_server_error_is_not_retried(self, settings):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, text="unavailable")

        with make_client(handler, settings) as client:
            with pytest.raises(APIServerError) as exc_info:
                get_keyring(client, "r")

        assert exc_info.value.status_code == 503
        assert len(calls) == 1

    def test_transport_failure(self, settings):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with make_client(handler, settings) as client:
            with pytest.raises(NetworkError) as exc_info:
                get_keyring(client, "r")

        assert isinstance(exc_info.value.original_exception, httpx.ConnectError)
        assert "Connection failed" in str(exc_info.value)

    def test_timeout(self, settings):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with make_client(handler, settings) as client:
            with pytest.raises(NetworkError) as exc_info:
                get_keyring(client, "r")

        assert "Read timeout" in str(exc_info.value)
