"""Unit tests for the management API transport client.

HTTP traffic is served by ``httpx.MockTransport`` so request shaping,
status handling and error wrapping can be checked without a broker.
"""

import base64
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from rabbitmq_management_api.config.settings import BrokerConfig
from rabbitmq_management_api.exceptions import (
    ConfigError,
    HTTPStatusError,
    TransportError,
    ValidationError,
)
from rabbitmq_management_api.utils.http import (
    ManagementAPIClient,
    create_client,
    create_timeout,
)


def _client(handler, **overrides):
    config = {
        "host": "http://broker",
        "port": 15672,
        "user": "guest",
        "password": "guest",
        **overrides,
    }
    return create_client(config, transport=httpx.MockTransport(handler))


class TestConstruction:
    """Client construction and configuration."""

    def test_create_client_from_mapping(self, broker_config):
        with create_client(broker_config) as client:
            assert isinstance(client, ManagementAPIClient)
            assert client.config.port == 15672

    def test_create_client_from_config(self, broker_config):
        config = BrokerConfig.from_mapping(broker_config)
        with create_client(config) as client:
            assert client.config is config

    def test_create_client_missing_key(self, broker_config):
        del broker_config["password"]
        with pytest.raises(ConfigError, match="password"):
            create_client(broker_config)

    def test_default_timeout_applied_to_transport(self, broker_config):
        with create_client(broker_config) as client:
            assert client._http.timeout.connect == 30.0
            assert client._http.timeout.read == 30.0

    def test_configured_timeout_applied_to_transport(self, broker_config):
        broker_config["timeout"] = 250
        with create_client(broker_config) as client:
            assert client._http.timeout.read == 0.25

    def test_create_timeout(self):
        timeout = create_timeout(1500)
        assert timeout.connect == 1.5
        assert timeout.write == 1.5
        assert timeout.pool == 1.5

    def test_url_for(self, client):
        assert client.url_for("api/overview") == "http://broker:15672/api/overview"


class TestRequestShaping:
    """What goes over the wire."""

    def test_get_sends_auth_and_content_type(self, client, recorder):
        client.get("/api/overview")

        request = recorder.last
        expected = base64.b64encode(b"guest:guest").decode()
        assert request.method == "GET"
        assert str(request.url) == "http://broker:15672/api/overview"
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["Content-Type"] == "application/json"
        assert request.content == b""

    def test_body_is_sent_verbatim(self, client, recorder):
        client.put("/api/vhosts/orders", '{"description": "orders"}')

        assert recorder.last.method == "PUT"
        assert recorder.last.content == b'{"description": "orders"}'

    def test_empty_body_sends_no_payload(self, client, recorder):
        client.post("/api/definitions", "")
        assert recorder.last.content == b""

    @pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "POST", "DELETE"])
    def test_all_verbs(self, client, recorder, method):
        client.execute(method, "api/x")
        assert recorder.last.method == method
        assert recorder.last_path == "/api/x"

    def test_lowercase_method_is_accepted(self, client, recorder):
        client.execute("patch", "/api/x", "{}")
        assert recorder.last.method == "PATCH"

    def test_unsupported_method_never_sent(self, client, recorder):
        with pytest.raises(ValidationError, match="HEAD"):
            client.execute("HEAD", "/api/x")
        assert recorder.requests == []

    def test_escaped_segments_preserved(self, client, recorder):
        client.get("/api/vhosts/%2F")
        assert recorder.last_path == "/api/vhosts/%2F"

    def test_non_ascii_body_encoded_as_utf8(self, client, recorder):
        client.post("/api/x", '{"name": "café"}')
        assert recorder.last.content == '{"name": "café"}'.encode("utf-8")


class TestResponseHandling:
    """Status-code policy and error wrapping."""

    def test_200_returns_body_unmodified(self):
        client = _client(lambda request: httpx.Response(200, text='{"ok":true}'))
        assert client.get("/api/x") == '{"ok":true}'

    def test_200_with_empty_body(self):
        client = _client(lambda request: httpx.Response(200))
        assert client.delete("/api/x") == ""

    def test_404_raises_with_status(self):
        client = _client(lambda request: httpx.Response(404, text='{"error":"Object Not Found"}'))
        with pytest.raises(HTTPStatusError) as exc_info:
            client.get("/api/queues/%2F/missing")

        err = exc_info.value
        assert err.status_code == 404
        assert err.status_text == "Not Found"
        assert "404" in str(err)
        assert "Object Not Found" not in str(err)
        assert "response_body" not in err.details

    @pytest.mark.parametrize("status", [201, 204, 301, 400, 401, 500, 503])
    def test_any_non_200_status_is_an_error(self, status):
        client = _client(
            lambda request: httpx.Response(
                status, headers={"Location": "http://broker:15672/elsewhere"}
            )
        )
        with pytest.raises(HTTPStatusError) as exc_info:
            client.post("/api/x", "{}")
        assert exc_info.value.status_code == status

    def test_connect_error_wrapped(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(refuse)
        with pytest.raises(TransportError) as exc_info:
            client.get("/api/overview")

        err = exc_info.value
        assert isinstance(err.__cause__, httpx.ConnectError)
        assert err.original_error is err.__cause__
        assert err.url == "http://broker:15672/api/overview"
        assert err.details["error_type"] == "ConnectError"

    def test_timeout_wrapped(self):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = _client(slow)
        with pytest.raises(TransportError, match="timed out"):
            client.get("/api/overview")

    def test_read_error_wrapped(self):
        def broken(request):
            raise httpx.ReadError("connection reset", request=request)

        with pytest.raises(TransportError):
            _client(broken).get("/api/overview")

    def test_no_retry_after_failure(self):
        calls = {"n": 0}

        def fail(request):
            calls["n"] += 1
            raise httpx.ConnectError("down", request=request)

        with pytest.raises(TransportError):
            _client(fail).get("/api/overview")
        assert calls["n"] == 1


class TestConcurrency:
    """One client shared between threads."""

    def test_concurrent_calls_are_paired(self):
        def echo(request):
            token = request.url.raw_path.decode().rsplit("/", 1)[-1]
            return httpx.Response(200, text=token)

        client = _client(echo)
        tokens = [f"token-{i}" for i in range(64)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda t: client.get(f"/api/echo/{t}"), tokens))

        assert results == tokens
        client.close()

    def test_concurrent_failures_do_not_leak(self):
        def handler(request):
            n = int(request.url.raw_path.decode().rsplit("/", 1)[-1])
            if n % 2:
                return httpx.Response(500)
            return httpx.Response(200, text=str(n))

        client = _client(handler)

        def call(n):
            try:
                return client.get(f"/api/n/{n}")
            except HTTPStatusError as e:
                return e.status_code

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(call, range(40)))

        assert results == [str(n) if n % 2 == 0 else 500 for n in range(40)]
