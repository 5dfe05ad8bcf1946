"""Request body models for the RabbitMQ management client."""

from .requests import (
    BindingOptions,
    ExchangeOptions,
    GetMessagesRequest,
    PublishMessageRequest,
    QueueOptions,
    RequestModel,
    VhostOptions,
)

__all__ = [
    "RequestModel",
    "VhostOptions",
    "ExchangeOptions",
    "QueueOptions",
    "BindingOptions",
    "PublishMessageRequest",
    "GetMessagesRequest",
]
