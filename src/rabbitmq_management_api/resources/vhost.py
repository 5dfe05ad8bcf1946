"""Virtual host operations."""

from typing import Any, Mapping, Optional, Union

from ..models.requests import VhostOptions
from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required
from .base import BaseResource


class VhostResource(BaseResource):
    """Operations on ``/api/vhosts``."""

    def list_vhosts(self, pagination: Optional[Mapping[str, Any]] = None) -> str:
        """List all virtual hosts."""
        return self._client.get(self._with_query("/api/vhosts", pagination))

    def get_vhost(self, vhost: str) -> str:
        """Get one virtual host."""
        validate_required(vhost, "vhost")
        return self._client.get(f"/api/vhosts/{q(vhost)}")

    def create_vhost(
        self,
        vhost: str,
        options: Optional[Union[VhostOptions, Mapping[str, Any]]] = None,
    ) -> str:
        """Create a virtual host; the request has no body unless options are given."""
        validate_required(vhost, "vhost")
        body = self._serialize(self._coerce(VhostOptions, options)) if options else None
        return self._client.put(f"/api/vhosts/{q(vhost)}", body)

    def get_vhost_permissions(self, vhost: str) -> str:
        """List the user permissions granted on a virtual host."""
        validate_required(vhost, "vhost")
        return self._client.get(f"/api/vhosts/{q(vhost)}/permissions")

    def delete_vhost(self, vhost: str) -> str:
        """Delete a virtual host and everything in it."""
        validate_required(vhost, "vhost")
        return self._client.delete(f"/api/vhosts/{q(vhost)}")
