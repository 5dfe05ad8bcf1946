"""Channel operations."""

from typing import Any, Mapping, Optional

from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required
from .base import BaseResource


class ChannelResource(BaseResource):
    """Operations on ``/api/channels``."""

    def list_channels(self, pagination: Optional[Mapping[str, Any]] = None) -> str:
        """List all open channels."""
        return self._client.get(self._with_query("/api/channels", pagination))

    def get_channel(self, channel: str) -> str:
        """Get one channel by its name."""
        validate_required(channel, "channel")
        return self._client.get(f"/api/channels/{q(channel)}")

    def list_channels_for_vhost(self, vhost: str) -> str:
        """List the channels of one virtual host."""
        validate_required(vhost, "vhost")
        return self._client.get(f"/api/vhosts/{q(vhost)}/channels")

    def list_channels_for_connection(self, connection: str) -> str:
        """List the channels of one connection."""
        validate_required(connection, "connection")
        return self._client.get(f"/api/connections/{q(connection)}/channels")
