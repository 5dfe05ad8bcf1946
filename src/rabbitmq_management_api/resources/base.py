"""Shared plumbing for resource modules."""

import json
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import SerializationError, ValidationError
from ..models.requests import RequestModel
from ..utils.http.client import ManagementAPIClient
from ..utils.query import build_pagination_query


M = TypeVar("M", bound=RequestModel)

Body = Union[RequestModel, Mapping[str, Any]]


class BaseResource:
    """Base class for resource modules built on a shared transport client.

    :param client: Transport client used for every request
    :type client: ManagementAPIClient
    """

    def __init__(self, client: ManagementAPIClient):
        self._client = client

    @property
    def client(self) -> ManagementAPIClient:
        return self._client

    @staticmethod
    def _as_dict(value: Any) -> dict:
        if not isinstance(value, Mapping):
            raise ValidationError(
                f"request body must be a mapping, got {type(value).__name__}",
                field="body",
            )
        return dict(value)

    @staticmethod
    def _coerce(model_cls: Type[M], value: Optional[Body]) -> M:
        """Turn a mapping (or ``None``) into ``model_cls``."""
        if isinstance(value, model_cls):
            return value
        try:
            return model_cls.model_validate(BaseResource._as_dict(value or {}))
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or None
            raise ValidationError(
                f"invalid {field} parameter: {first['msg']}", field=field
            ) from e

    @staticmethod
    def _serialize(body: Optional[Body]) -> Optional[str]:
        """Serialize a request body to JSON, or ``None`` when there is none."""
        if body is None:
            return None
        data = body.to_body() if isinstance(body, RequestModel) else BaseResource._as_dict(body)
        try:
            # NaN and Infinity are not JSON
            return json.dumps(data, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(
                f"request body is not JSON serializable: {e}", original_error=e
            ) from e

    @staticmethod
    def _with_query(path: str, pagination: Optional[Mapping[str, Any]]) -> str:
        return path + build_pagination_query(pagination)
