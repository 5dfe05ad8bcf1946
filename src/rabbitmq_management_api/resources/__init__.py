"""Resource modules, one per broker entity type."""

from .base import BaseResource
from .binding import BindingResource
from .channel import ChannelResource
from .cluster import ClusterResource
from .connection import ConnectionResource
from .consumer import ConsumerResource
from .definition import DefinitionResource
from .exchange import ExchangeResource
from .node import NodeResource
from .queue import QueueResource
from .vhost import VhostResource

__all__ = [
    "BaseResource",
    "BindingResource",
    "ChannelResource",
    "ClusterResource",
    "ConnectionResource",
    "ConsumerResource",
    "DefinitionResource",
    "ExchangeResource",
    "NodeResource",
    "QueueResource",
    "VhostResource",
]
