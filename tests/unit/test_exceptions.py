"""Unit tests for the structured exception hierarchy."""

import json

import pytest

from rabbitmq_management_api.exceptions import (
    ConfigError,
    HTTPStatusError,
    RabbitMQManagementError,
    SerializationError,
    TransportError,
    ValidationError,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "error,code",
    [
        (ConfigError("config key 'host' is missing", setting="host"), "CONFIG_ERROR"),
        (ValidationError("missing vhost parameter", field="vhost"), "VALIDATION_ERROR"),
        (SerializationError("bad body"), "SERIALIZATION_ERROR"),
        (TransportError("down"), "TRANSPORT_ERROR"),
        (HTTPStatusError("failed", status_code=500), "HTTP_STATUS_ERROR"),
    ],
)
def test_errors_share_base_and_codes(error, code):
    assert isinstance(error, RabbitMQManagementError)
    assert error.code == code


@pytest.mark.unit
def test_to_dict_and_json():
    err = HTTPStatusError(
        "HTTP request failed with status: '404 Not Found'",
        status_code=404,
        status_text="Not Found",
    )
    expected = {
        "error": "HTTP_STATUS_ERROR",
        "message": "HTTP request failed with status: '404 Not Found'",
        "details": {"status_code": 404, "status_text": "Not Found"},
    }
    assert err.to_dict() == expected
    assert json.loads(err.to_json()) == expected


@pytest.mark.unit
def test_config_error_details():
    err = ConfigError("config key 'port' is missing", setting="port")
    assert err.details == {"setting": "port"}
    assert str(err) == "config key 'port' is missing"


@pytest.mark.unit
def test_serialization_error_records_cause():
    cause = TypeError("Object of type object is not JSON serializable")
    err = SerializationError("request body is not JSON serializable", original_error=cause)
    assert err.details["error_type"] == "TypeError"
    assert err.original_error is cause
