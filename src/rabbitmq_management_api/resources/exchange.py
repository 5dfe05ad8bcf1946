"""Exchange operations."""

from typing import Any, Mapping, Optional, Union

from ..models.requests import ExchangeOptions, PublishMessageRequest
from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required, validate_required_all
from .base import BaseResource


class ExchangeResource(BaseResource):
    """Operations on ``/api/exchanges``."""

    def list_exchanges(self, pagination: Optional[Mapping[str, Any]] = None) -> str:
        """List all exchanges."""
        return self._client.get(self._with_query("/api/exchanges", pagination))

    def list_exchanges_for_vhost(
        self, vhost: str, pagination: Optional[Mapping[str, Any]] = None
    ) -> str:
        """List the exchanges of one virtual host."""
        validate_required(vhost, "vhost")
        return self._client.get(self._with_query(f"/api/exchanges/{q(vhost)}", pagination))

    def get_exchange(self, vhost: str, exchange: str) -> str:
        """Get one exchange."""
        validate_required_all({"vhost": vhost, "exchange": exchange})
        return self._client.get(f"/api/exchanges/{q(vhost)}/{q(exchange)}")

    def create_exchange(
        self,
        vhost: str,
        exchange: str,
        exchange_type: str,
        options: Optional[Union[ExchangeOptions, Mapping[str, Any]]] = None,
    ) -> str:
        """Declare an exchange of the given type.

        :param vhost: Virtual host name
        :type vhost: str
        :param exchange: Exchange name
        :type exchange: str
        :param exchange_type: ``direct``, ``fanout``, ``topic``, ``headers``...
        :type exchange_type: str
        :param options: Durability flags and arguments
        :type options: Optional[Union[ExchangeOptions, Mapping[str, Any]]]
        :return: Raw response body
        :rtype: str
        """
        validate_required_all(
            {"vhost": vhost, "exchange": exchange, "exchange type": exchange_type}
        )
        body = self._coerce(ExchangeOptions, options).to_body()
        body["type"] = exchange_type
        return self._client.put(
            f"/api/exchanges/{q(vhost)}/{q(exchange)}", self._serialize(body)
        )

    def delete_exchange(self, vhost: str, exchange: str) -> str:
        """Delete an exchange."""
        validate_required_all({"vhost": vhost, "exchange": exchange})
        return self._client.delete(f"/api/exchanges/{q(vhost)}/{q(exchange)}")

    def get_bindings_for_source(self, vhost: str, exchange: str) -> str:
        """List bindings in which the exchange is the source."""
        validate_required_all({"vhost": vhost, "exchange": exchange})
        return self._client.get(
            f"/api/exchanges/{q(vhost)}/{q(exchange)}/bindings/source"
        )

    def get_bindings_for_destination(self, vhost: str, exchange: str) -> str:
        """List bindings in which the exchange is the destination."""
        validate_required_all({"vhost": vhost, "exchange": exchange})
        return self._client.get(
            f"/api/exchanges/{q(vhost)}/{q(exchange)}/bindings/destination"
        )

    def publish_message(
        self,
        vhost: str,
        exchange: str,
        message: Union[PublishMessageRequest, Mapping[str, Any]],
    ) -> str:
        """Publish a message through an exchange.

        The response body tells whether the message was routed.

        :param vhost: Virtual host name
        :type vhost: str
        :param exchange: Exchange name
        :type exchange: str
        :param message: ``properties``, ``routing_key``, ``payload`` and
            ``payload_encoding`` of the message
        :type message: Union[PublishMessageRequest, Mapping[str, Any]]
        :return: Raw response body
        :rtype: str
        """
        validate_required_all({"vhost": vhost, "exchange": exchange})
        request = self._coerce(PublishMessageRequest, message)
        validate_required_all(
            {
                "properties": request.properties,
                "routing_key": request.routing_key,
                "payload": request.payload,
                "payload_encoding": request.payload_encoding,
            }
        )
        return self._client.post(
            f"/api/exchanges/{q(vhost)}/{q(exchange)}/publish",
            self._serialize(request),
        )
