"""Binding operations.

A binding is addressed by its source exchange, its destination (a queue,
``q``, or another exchange, ``e``) and a ``props`` key: the
``properties_key`` field of a bindings listing, derived from the routing
key and a hash of the arguments.

The broker answers binding creation with ``201 Created`` and a
``Location`` header. The client only accepts 200, so callers creating
bindings should expect :class:`HTTPStatusError` with ``status_code``
201 on success.
"""

from typing import Any, Mapping, Optional, Union

from ..models.requests import BindingOptions
from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required, validate_required_all
from .base import BaseResource


class BindingResource(BaseResource):
    """Operations on ``/api/bindings``."""

    @staticmethod
    def _queue_binding_path(vhost: str, exchange: str, queue: str) -> str:
        return f"/api/bindings/{q(vhost)}/e/{q(exchange)}/q/{q(queue)}"

    @staticmethod
    def _exchange_binding_path(vhost: str, source: str, destination: str) -> str:
        return f"/api/bindings/{q(vhost)}/e/{q(source)}/e/{q(destination)}"

    def list_bindings(self) -> str:
        """List all bindings."""
        return self._client.get("/api/bindings")

    def list_bindings_for_vhost(self, vhost: str) -> str:
        """List the bindings of one virtual host."""
        validate_required(vhost, "vhost")
        return self._client.get(f"/api/bindings/{q(vhost)}")

    # exchange -> queue

    def list_queue_bindings(self, vhost: str, exchange: str, queue: str) -> str:
        """List bindings between an exchange and a queue."""
        validate_required_all({"vhost": vhost, "exchange": exchange, "queue": queue})
        return self._client.get(self._queue_binding_path(vhost, exchange, queue))

    def create_queue_binding(
        self,
        vhost: str,
        exchange: str,
        queue: str,
        options: Optional[Union[BindingOptions, Mapping[str, Any]]] = None,
    ) -> str:
        """Bind a queue to an exchange with an optional routing key and arguments."""
        validate_required_all({"vhost": vhost, "exchange": exchange, "queue": queue})
        body = self._serialize(self._coerce(BindingOptions, options))
        return self._client.post(self._queue_binding_path(vhost, exchange, queue), body)

    def get_queue_binding(self, vhost: str, exchange: str, queue: str, props: str) -> str:
        """Get one binding between an exchange and a queue."""
        validate_required_all(
            {"vhost": vhost, "exchange": exchange, "queue": queue, "props": props}
        )
        path = self._queue_binding_path(vhost, exchange, queue)
        return self._client.get(f"{path}/{q(props)}")

    def delete_queue_binding(
        self, vhost: str, exchange: str, queue: str, props: str
    ) -> str:
        """Delete one binding between an exchange and a queue."""
        validate_required_all(
            {"vhost": vhost, "exchange": exchange, "queue": queue, "props": props}
        )
        path = self._queue_binding_path(vhost, exchange, queue)
        return self._client.delete(f"{path}/{q(props)}")

    # exchange -> exchange

    def list_exchange_bindings(self, vhost: str, source: str, destination: str) -> str:
        """List bindings between two exchanges."""
        validate_required_all(
            {"vhost": vhost, "source": source, "destination": destination}
        )
        return self._client.get(self._exchange_binding_path(vhost, source, destination))

    def create_exchange_binding(
        self,
        vhost: str,
        source: str,
        destination: str,
        options: Optional[Union[BindingOptions, Mapping[str, Any]]] = None,
    ) -> str:
        """Bind a destination exchange to a source exchange."""
        validate_required_all(
            {"vhost": vhost, "source": source, "destination": destination}
        )
        body = self._serialize(self._coerce(BindingOptions, options))
        return self._client.post(
            self._exchange_binding_path(vhost, source, destination), body
        )

    def get_exchange_binding(
        self, vhost: str, source: str, destination: str, props: str
    ) -> str:
        """Get one binding between two exchanges."""
        validate_required_all(
            {"vhost": vhost, "source": source, "destination": destination, "props": props}
        )
        path = self._exchange_binding_path(vhost, source, destination)
        return self._client.get(f"{path}/{q(props)}")

    def delete_exchange_binding(
        self, vhost: str, source: str, destination: str, props: str
    ) -> str:
        """Delete one binding between two exchanges."""
        validate_required_all(
            {"vhost": vhost, "source": source, "destination": destination, "props": props}
        )
        path = self._exchange_binding_path(vhost, source, destination)
        return self._client.delete(f"{path}/{q(props)}")
