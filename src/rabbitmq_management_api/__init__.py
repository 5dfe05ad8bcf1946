"""RabbitMQ management HTTP API client package.

This package provides a synchronous client for the RabbitMQ management
plugin's HTTP API: a validated connection configuration, an
authenticated transport client, and one resource module per broker
entity (virtual hosts, exchanges, queues, bindings, channels,
connections, consumers, nodes, cluster name and definitions).

:var __version__: Current package version
:type __version__: str
"""

import logging

from .config.settings import BrokerConfig, BrokerSettings, DEFAULT_TIMEOUT_MS
from .exceptions import (
    ConfigError,
    HTTPStatusError,
    RabbitMQManagementError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .manager import RabbitMQManager
from .utils.http import ManagementAPIClient, compose_url, create_client
from .utils.query import build_pagination_query
from .utils.validation import validate_required, validate_required_all

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BrokerConfig",
    "BrokerSettings",
    "DEFAULT_TIMEOUT_MS",
    "ConfigError",
    "HTTPStatusError",
    "RabbitMQManagementError",
    "SerializationError",
    "TransportError",
    "ValidationError",
    "RabbitMQManager",
    "ManagementAPIClient",
    "compose_url",
    "create_client",
    "build_pagination_query",
    "validate_required",
    "validate_required_all",
]
