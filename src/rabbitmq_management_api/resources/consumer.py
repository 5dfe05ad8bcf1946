"""Consumer operations."""

from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required
from .base import BaseResource


class ConsumerResource(BaseResource):
    """Operations on ``/api/consumers``."""

    def list_consumers(self) -> str:
        """List all consumers."""
        return self._client.get("/api/consumers")

    def list_consumers_for_vhost(self, vhost: str) -> str:
        """List the consumers of one virtual host."""
        validate_required(vhost, "vhost")
        return self._client.get(f"/api/consumers/{q(vhost)}")
