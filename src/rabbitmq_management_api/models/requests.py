"""Request body models for the management API.

Resource methods accept either one of these models or a plain mapping
for their request bodies. Models are dumped without ``None`` fields, so
only what the caller set is sent to the broker. Extra fields are allowed
and passed through, since the broker accepts keys that vary by version
and plugin.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class RequestModel(BaseModel):
    """Base class for request bodies."""

    model_config = ConfigDict(extra="allow")

    def to_body(self) -> Dict[str, Any]:
        """Dump the model to a JSON-ready dictionary without unset values.

        :return: Request body
        :rtype: Dict[str, Any]
        """
        return self.model_dump(exclude_none=True)


class VhostOptions(RequestModel):
    """Options for creating a virtual host.

    :param description: Free-form description
    :type description: Optional[str]
    :param tags: Comma-separated tags
    :type tags: Optional[str]
    :param default_queue_type: Queue type used when none is declared
    :type default_queue_type: Optional[str]
    :param tracing: Enable message tracing
    :type tracing: Optional[bool]
    """

    description: Optional[str] = None
    tags: Optional[str] = None
    default_queue_type: Optional[str] = None
    tracing: Optional[bool] = None


class ExchangeOptions(RequestModel):
    """Options for declaring an exchange. ``type`` is set by the call."""

    durable: Optional[bool] = None
    auto_delete: Optional[bool] = None
    internal: Optional[bool] = None
    arguments: Optional[Dict[str, Any]] = None


class QueueOptions(RequestModel):
    """Options for declaring a queue.

    :param durable: Survive broker restarts
    :type durable: Optional[bool]
    :param auto_delete: Delete when the last consumer goes away
    :type auto_delete: Optional[bool]
    :param arguments: Optional queue arguments (``x-queue-type``, TTLs...)
    :type arguments: Optional[Dict[str, Any]]
    :param node: Node to place the queue on
    :type node: Optional[str]
    """

    durable: Optional[bool] = None
    auto_delete: Optional[bool] = None
    arguments: Optional[Dict[str, Any]] = None
    node: Optional[str] = None


class BindingOptions(RequestModel):
    """Routing key and arguments of a new binding. All keys are optional."""

    routing_key: Optional[str] = None
    arguments: Optional[Dict[str, Any]] = None


class PublishMessageRequest(RequestModel):
    """Message published through an exchange.

    :param properties: AMQP basic properties (may be empty)
    :type properties: Dict[str, Any]
    :param routing_key: Routing key
    :type routing_key: str
    :param payload: Message payload
    :type payload: str
    :param payload_encoding: ``string`` or ``base64``
    :type payload_encoding: str
    """

    properties: Optional[Dict[str, Any]] = Field(default_factory=dict)
    routing_key: Optional[str] = None
    payload: Optional[str] = None
    payload_encoding: Optional[str] = "string"


class GetMessagesRequest(RequestModel):
    """Request for fetching messages from a queue.

    Newer brokers expect ``ackmode``; older ones take ``requeue``.

    :param count: Maximum number of messages to fetch
    :type count: int
    :param ackmode: e.g. ``ack_requeue_true`` or ``reject_requeue_false``
    :type ackmode: Optional[str]
    :param requeue: Legacy requeue flag
    :type requeue: Optional[bool]
    :param encoding: ``auto`` or ``base64``
    :type encoding: str
    :param truncate: Truncate payloads longer than this many bytes
    :type truncate: Optional[int]
    """

    count: Optional[int] = None
    ackmode: Optional[
        Literal[
            "ack_requeue_true",
            "ack_requeue_false",
            "reject_requeue_true",
            "reject_requeue_false",
        ]
    ] = None
    requeue: Optional[bool] = None
    encoding: Optional[Literal["auto", "base64"]] = "auto"
    truncate: Optional[int] = None
