"""Client connection operations."""

from typing import Any, Mapping, Optional

from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required
from .base import BaseResource


class ConnectionResource(BaseResource):
    """Operations on ``/api/connections``."""

    def list_connections(self, pagination: Optional[Mapping[str, Any]] = None) -> str:
        """List all open connections."""
        return self._client.get(self._with_query("/api/connections", pagination))

    def get_connection(self, connection: str) -> str:
        """Get one connection by its name."""
        validate_required(connection, "connection")
        return self._client.get(f"/api/connections/{q(connection)}")

    def close_connection(self, connection: str) -> str:
        """Force-close a connection."""
        validate_required(connection, "connection")
        return self._client.delete(f"/api/connections/{q(connection)}")
