"""Guards for required call parameters.

Resource modules run these before composing a path or a body, so a call
with an empty required parameter never reaches the network.
"""

from typing import Any, Mapping

from ..exceptions import ValidationError


def validate_required(value: Any, name: str) -> None:
    """Ensure a required parameter is not empty.

    :param value: Parameter value
    :type value: Any
    :param name: Human-readable parameter name used in the error message
    :type name: str
    :raises ValidationError: If ``value`` is ``None`` or the empty string
    """
    if value is None or (isinstance(value, str) and value == ""):
        raise ValidationError(f"missing {name} parameter", field=name)


def validate_required_all(params: Mapping[str, Any]) -> None:
    """Ensure every parameter in a mapping is non-empty.

    Parameters are checked in mapping order and the first empty one is
    reported.

    :param params: Mapping of parameter name to value
    :type params: Mapping[str, Any]
    :raises ValidationError: For the first empty parameter
    """
    for name, value in params.items():
        validate_required(value, name)
