"""Authenticated HTTP client for the RabbitMQ management API.

This module provides the transport client every resource module is built
on. It owns a validated :class:`BrokerConfig` and one reusable
``httpx.Client`` bound to the configured timeout and Basic credentials,
and performs exactly one synchronous request per call.

Response policy:

- Exactly HTTP 200 is a success and the body is returned as text,
  unmodified.
- Any other status, other 2xx codes included, raises
  :class:`HTTPStatusError`; the body is discarded.
- Network, timeout and read failures raise :class:`TransportError`.
- Nothing is retried.

The client keeps no per-call state, so one instance can be shared by
many threads; ``httpx.Client`` manages its own connection pool.

Examples:
    >>> client = create_client({"host": "http://localhost", "port": 15672,
    ...                         "user": "guest", "password": "guest"})
    >>> client.get("/api/overview")
"""

import logging
from typing import Any, Mapping, Optional, Union

import httpx

from ...config.settings import BrokerConfig
from ...exceptions import HTTPStatusError, TransportError, ValidationError
from .url import compose_url

logger = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset({"GET", "PUT", "PATCH", "POST", "DELETE"})
JSON_HEADERS = {"Content-Type": "application/json"}


def create_timeout(timeout_ms: int) -> httpx.Timeout:
    """Create a timeout applying ``timeout_ms`` to every phase of a request.

    :param timeout_ms: Timeout in milliseconds
    :type timeout_ms: int
    :return: Configured timeout object
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(timeout_ms / 1000.0)


class ManagementAPIClient:
    """HTTP client that executes management API requests for one broker.

    :param config: Validated broker configuration
    :type config: BrokerConfig
    :param transport: Optional ``httpx`` transport, mainly for tests
    :type transport: Optional[httpx.BaseTransport]
    """

    def __init__(
        self,
        config: BrokerConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._config = config
        self._http = httpx.Client(
            auth=httpx.BasicAuth(config.user, config.password),
            timeout=create_timeout(config.timeout),
            follow_redirects=False,
            transport=transport,
        )

    @property
    def config(self) -> BrokerConfig:
        """Configuration this client was built with."""
        return self._config

    def url_for(self, path: str) -> str:
        """Compose the absolute URL for a resource path."""
        return compose_url(self._config.host, self._config.port, path)

    def execute(self, method: str, path: str, body: Optional[str] = None) -> str:
        """Perform one HTTP exchange with the management API.

        :param method: One of GET, PUT, PATCH, POST, DELETE
        :type method: str
        :param path: Resource path relative to the broker root
        :type path: str
        :param body: Optional pre-serialized JSON body; empty means no payload
        :type body: Optional[str]
        :return: Response body text
        :rtype: str
        :raises ValidationError: If the method is not supported
        :raises TransportError: On network, timeout or read failure
        :raises HTTPStatusError: If the response status is not 200
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValidationError(f"unsupported HTTP method '{method}'", field="method")

        url = self.url_for(path)
        content = body.encode("utf-8") if body else None

        logger.debug("%s %s", method, url)
        try:
            # request() reads the whole body and releases the connection
            response = self._http.request(
                method, url, content=content, headers=JSON_HEADERS
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(
                f"HTTP request {method} {url} failed: {e}",
                url=url,
                original_error=e,
            ) from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if response.status_code != httpx.codes.OK:
            status = f"{response.status_code} {response.reason_phrase}".strip()
            raise HTTPStatusError(
                f"HTTP request failed with status: '{status}'",
                status_code=response.status_code,
                status_text=response.reason_phrase,
            )

        return response.text

    def get(self, path: str) -> str:
        """Send a GET request."""
        return self.execute("GET", path)

    def put(self, path: str, body: Optional[str] = None) -> str:
        """Send a PUT request with an optional body."""
        return self.execute("PUT", path, body)

    def patch(self, path: str, body: Optional[str] = None) -> str:
        """Send a PATCH request with an optional body."""
        return self.execute("PATCH", path, body)

    def post(self, path: str, body: Optional[str] = None) -> str:
        """Send a POST request with an optional body."""
        return self.execute("POST", path, body)

    def delete(self, path: str) -> str:
        """Send a DELETE request."""
        return self.execute("DELETE", path)

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._http.close()

    def __enter__(self) -> "ManagementAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def create_client(
    config: Union[BrokerConfig, Mapping[str, Any]],
    transport: Optional[httpx.BaseTransport] = None,
) -> ManagementAPIClient:
    """Validate a configuration and construct a client for it.

    :param config: A :class:`BrokerConfig` or a configuration mapping
    :type config: Union[BrokerConfig, Mapping[str, Any]]
    :param transport: Optional ``httpx`` transport, mainly for tests
    :type transport: Optional[httpx.BaseTransport]
    :return: Ready-to-use client
    :rtype: ManagementAPIClient
    :raises ConfigError: If the configuration is incomplete or invalid
    """
    if not isinstance(config, BrokerConfig):
        config = BrokerConfig.from_mapping(config)
    return ManagementAPIClient(config, transport=transport)
