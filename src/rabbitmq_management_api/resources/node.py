"""Cluster node operations."""

from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required
from .base import BaseResource


class NodeResource(BaseResource):
    """Operations on ``/api/nodes``."""

    def list_nodes(self) -> str:
        """List the nodes of the cluster."""
        return self._client.get("/api/nodes")

    def get_node(self, node: str) -> str:
        """Get one node, e.g. ``rabbit@host``."""
        validate_required(node, "node")
        return self._client.get(f"/api/nodes/{q(node)}")
