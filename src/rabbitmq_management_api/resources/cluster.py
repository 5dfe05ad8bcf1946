"""Cluster identity operations."""

from ..utils.validation import validate_required
from .base import BaseResource


class ClusterResource(BaseResource):
    """Operations on ``/api/cluster-name``."""

    def get_cluster_name(self) -> str:
        """Get the cluster name."""
        return self._client.get("/api/cluster-name")

    def set_cluster_name(self, name: str) -> str:
        """Rename the cluster."""
        validate_required(name, "cluster name")
        return self._client.put("/api/cluster-name", self._serialize({"name": name}))
