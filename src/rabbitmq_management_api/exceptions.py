"""Structured exception classes for the RabbitMQ management client."""

import json
from typing import Any, Dict, Optional


class RabbitMQManagementError(Exception):
    """Root of every error raised by the management client.

    Catching this one class covers a bad configuration, a rejected call
    parameter, an unreachable broker and a non-200 answer alike. Each
    subclass fixes ``code`` and fills ``details`` with the context it
    knows about (the setting, the field, the URL or the status line).

    :param message: Text shown by ``str(error)``
    :param code: Stable identifier such as ``HTTP_STATUS_ERROR``
    :param details: Extra context, safe to log (never credentials)
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Return the error as ``{"error": code, "message": ..., "details": ...}``."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Same shape as :meth:`to_dict`, encoded as JSON text."""
        return json.dumps(self.to_dict())


class ConfigError(RabbitMQManagementError):
    """Raised when the client configuration is missing or invalid.

    No client is produced when this is raised.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIG_ERROR", details=details)
        self.setting = setting


class ValidationError(RabbitMQManagementError):
    """Raised when a call parameter fails validation.

    Raised before any request is built, so an invalid call never
    reaches the network.

    :param message: Description of the validation error
    :param field: Optional name of the field that failed validation
    :param value: Optional value that caused the validation failure
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        """Initialize validation error with message and optional field/value."""
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message=message, code="VALIDATION_ERROR", details=details)
        self.field = field


class SerializationError(RabbitMQManagementError):
    """Raised when a request body cannot be serialized to JSON.

    :param message: Description of the serialization failure
    :param original_error: Optional exception raised by the encoder
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """Initialize serialization error with message and optional cause."""
        details = {}
        if original_error:
            details["original_error"] = str(original_error)
            details["error_type"] = type(original_error).__name__
        super().__init__(message=message, code="SERIALIZATION_ERROR", details=details)
        self.original_error = original_error


class TransportError(RabbitMQManagementError):
    """Raised when the HTTP exchange itself fails.

    Covers DNS resolution, connection, timeout and response read
    failures. The underlying ``httpx`` exception is chained as
    ``__cause__`` and kept on ``original_error``.

    :param message: Description of the transport failure
    :param url: Optional URL of the failed request
    :param original_error: Optional underlying transport exception
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize transport error with message and optional context."""
        details: Dict[str, Any] = {}
        if url:
            details["url"] = url
        if original_error:
            details["original_error"] = str(original_error)
            details["error_type"] = type(original_error).__name__
        super().__init__(message=message, code="TRANSPORT_ERROR", details=details)
        self.url = url
        self.original_error = original_error


class HTTPStatusError(RabbitMQManagementError):
    """Raised when the broker answers with any status other than 200.

    The response body is intentionally not carried.

    :param message: Description of the failed request
    :param status_code: HTTP status code of the response
    :param status_text: Reason phrase of the response
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        status_text: Optional[str] = None,
    ):
        """Initialize HTTP status error with message and status line."""
        details: Dict[str, Any] = {"status_code": status_code}
        if status_text:
            details["status_text"] = status_text
        super().__init__(message=message, code="HTTP_STATUS_ERROR", details=details)
        self.status_code = status_code
        self.status_text = status_text
