"""Definitions export and import.

Definitions are the broker's schema: exchanges, queues, bindings, users,
virtual hosts, permissions, topic permissions and parameters. Importing
merges the uploaded document into the existing definitions.
"""

import json
import logging
from typing import Any, Mapping, Union

from ..exceptions import SerializationError
from ..utils.http.url import quote_segment as q
from ..utils.validation import validate_required
from .base import BaseResource

logger = logging.getLogger(__name__)

Definitions = Union[str, Mapping[str, Any]]


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


class DefinitionResource(BaseResource):
    """Operations on ``/api/definitions``."""

    def _document(self, definitions: Definitions) -> str:
        validate_required(definitions, "definition")
        if not isinstance(definitions, str):
            return self._serialize(definitions)
        try:
            json.loads(definitions, parse_constant=_reject_constant)
        except ValueError as e:
            raise SerializationError(
                f"definitions document is not valid JSON: {e}", original_error=e
            ) from e
        return definitions

    def list_definitions(self) -> str:
        """Export the definitions of the whole broker."""
        return self._client.get("/api/definitions")

    def list_definitions_for_vhost(self, vhost: str) -> str:
        """Export the definitions of one virtual host."""
        validate_required(vhost, "vhost")
        return self._client.get(f"/api/definitions/{q(vhost)}")

    def set_definitions(self, definitions: Definitions) -> str:
        """Import a definitions document into the broker.

        :param definitions: JSON document, as text or as a mapping
        :type definitions: Union[str, Mapping[str, Any]]
        :return: Raw response body
        :rtype: str
        :raises ValidationError: If the document is empty
        :raises SerializationError: If the document is not valid JSON
        """
        body = self._document(definitions)
        logger.debug("Importing %d bytes of definitions", len(body))
        return self._client.post("/api/definitions", body)

    def set_definitions_for_vhost(self, vhost: str, definitions: Definitions) -> str:
        """Import a definitions document into one virtual host."""
        validate_required(vhost, "vhost")
        body = self._document(definitions)
        logger.debug("Importing %d bytes of definitions into vhost %s", len(body), vhost)
        return self._client.post(f"/api/definitions/{q(vhost)}", body)
