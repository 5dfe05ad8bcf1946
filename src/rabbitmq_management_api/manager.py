"""Entry point aggregating every resource module for one broker.

All resources share a single :class:`ManagementAPIClient`, so they share
its configuration and connection pool.

Examples:
    >>> with RabbitMQManager({"host": "http://localhost", "port": 15672,
    ...                       "user": "guest", "password": "guest"}) as mq:
    ...     vhosts = mq.vhost.list_vhosts()
    ...     mq.queue.get_queue("/", "invoices")

Only a 200 answer counts as success. The broker answers creation
requests with 201, so those raise :class:`HTTPStatusError` even though
the object now exists:

    >>> try:
    ...     mq.vhost.create_vhost("orders")
    ... except HTTPStatusError as e:
    ...     assert e.status_code == 201
"""

import logging
from typing import Any, Mapping, Optional, Union

import httpx

from .config.settings import BrokerConfig, load_config_from_env
from .resources import (
    BindingResource,
    ChannelResource,
    ClusterResource,
    ConnectionResource,
    ConsumerResource,
    DefinitionResource,
    ExchangeResource,
    NodeResource,
    QueueResource,
    VhostResource,
)
from .utils.http.client import ManagementAPIClient, create_client

logger = logging.getLogger(__name__)


class RabbitMQManager:
    """Typed access to a broker's management API.

    :param config: A :class:`BrokerConfig` or a configuration mapping
    :type config: Union[BrokerConfig, Mapping[str, Any]]
    :param transport: Optional ``httpx`` transport, mainly for tests
    :type transport: Optional[httpx.BaseTransport]
    :raises ConfigError: If the configuration is incomplete or invalid
    """

    def __init__(
        self,
        config: Union[BrokerConfig, Mapping[str, Any]],
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.client: ManagementAPIClient = create_client(config, transport=transport)
        self.vhost = VhostResource(self.client)
        self.exchange = ExchangeResource(self.client)
        self.queue = QueueResource(self.client)
        self.binding = BindingResource(self.client)
        self.channel = ChannelResource(self.client)
        self.connection = ConnectionResource(self.client)
        self.consumer = ConsumerResource(self.client)
        self.cluster = ClusterResource(self.client)
        self.definition = DefinitionResource(self.client)
        self.node = NodeResource(self.client)
        logger.debug(
            "Management client ready for %s:%s",
            self.client.config.host,
            self.client.config.port,
        )

    @classmethod
    def from_env(
        cls, transport: Optional[httpx.BaseTransport] = None
    ) -> "RabbitMQManager":
        """Build a manager from ``RABBITMQ_*`` environment variables."""
        return cls(load_config_from_env(), transport=transport)

    def close(self) -> None:
        """Release the shared connection pool."""
        self.client.close()

    def __enter__(self) -> "RabbitMQManager":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
