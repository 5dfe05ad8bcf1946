"""Queue operations."""

from typing import Any, Mapping, Optional, Union

from ..exceptions import ValidationError
from ..models.requests import GetMessagesRequest, QueueOptions
from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required, validate_required_all
from .base import BaseResource

QUEUE_ACTIONS = frozenset({"sync", "cancel_sync"})


class QueueResource(BaseResource):
    """Operations on ``/api/queues``."""

    def _queue_path(self, vhost: str, queue: str) -> str:
        validate_required_all({"vhost": vhost, "queue": queue})
        return f"/api/queues/{q(vhost)}/{q(queue)}"

    def list_queues(self, pagination: Optional[Mapping[str, Any]] = None) -> str:
        """List all queues."""
        return self._client.get(self._with_query("/api/queues", pagination))

    def list_queues_for_vhost(
        self, vhost: str, pagination: Optional[Mapping[str, Any]] = None
    ) -> str:
        """List the queues of one virtual host."""
        validate_required(vhost, "vhost")
        return self._client.get(self._with_query(f"/api/queues/{q(vhost)}", pagination))

    def get_queue(self, vhost: str, queue: str) -> str:
        """Get one queue."""
        return self._client.get(self._queue_path(vhost, queue))

    def create_queue(
        self,
        vhost: str,
        queue: str,
        options: Optional[Union[QueueOptions, Mapping[str, Any]]] = None,
    ) -> str:
        """Declare a queue."""
        path = self._queue_path(vhost, queue)
        body = self._serialize(self._coerce(QueueOptions, options))
        return self._client.put(path, body)

    def delete_queue(self, vhost: str, queue: str) -> str:
        """Delete a queue."""
        return self._client.delete(self._queue_path(vhost, queue))

    def get_queue_bindings(self, vhost: str, queue: str) -> str:
        """List the bindings of a queue."""
        return self._client.get(self._queue_path(vhost, queue) + "/bindings")

    def purge_queue(self, vhost: str, queue: str) -> str:
        """Remove every ready message from a queue."""
        return self._client.delete(self._queue_path(vhost, queue) + "/contents")

    def set_queue_action(self, vhost: str, queue: str, action: str) -> str:
        """Trigger a queue action such as ``sync`` or ``cancel_sync``."""
        path = self._queue_path(vhost, queue)
        validate_required(action, "action")
        if action not in QUEUE_ACTIONS:
            raise ValidationError(f"invalid action '{action}'", field="action", value=action)
        return self._client.post(path + "/actions", self._serialize({"action": action}))

    def get_messages(
        self,
        vhost: str,
        queue: str,
        request: Union[GetMessagesRequest, Mapping[str, Any]],
    ) -> str:
        """Fetch messages from a queue.

        This is a diagnostic operation: depending on ``ackmode`` the
        messages are requeued or removed.

        :param vhost: Virtual host name
        :type vhost: str
        :param queue: Queue name
        :type queue: str
        :param request: ``count``, ``encoding`` and one of ``ackmode`` or
            ``requeue``
        :type request: Union[GetMessagesRequest, Mapping[str, Any]]
        :return: Raw response body
        :rtype: str
        """
        path = self._queue_path(vhost, queue)
        params = self._coerce(GetMessagesRequest, request)
        validate_required_all({"count": params.count, "encoding": params.encoding})
        if params.ackmode is None and params.requeue is None:
            raise ValidationError("missing ackmode parameter", field="ackmode")
        return self._client.post(path + "/get", self._serialize(params))
