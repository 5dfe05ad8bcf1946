"""Configuration for the RabbitMQ management client.

This module defines the validated connection configuration used by the
transport client, and an environment-backed settings class that can
produce one. Configuration may be supplied either as a plain mapping
(``host``, ``port``, ``user``/``username``, ``password``, ``timeout``)
or through ``RABBITMQ_*`` environment variables and ``.env`` files.
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000
"""Request timeout, in milliseconds, used when none (or a non-positive one) is configured."""

REQUIRED_KEYS = ("host", "port", "user", "password")


def resolve_timeout(value: Any) -> int:
    """Resolve a configured timeout to milliseconds.

    :param value: Raw timeout value from the configuration
    :type value: Any
    :return: ``value`` when it is a positive integer, else ``DEFAULT_TIMEOUT_MS``
    :rtype: int
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_TIMEOUT_MS
    return value


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


class BrokerConfig(BaseModel):
    """Validated, immutable connection configuration for one broker.

    :param host: Broker host including scheme, e.g. ``http://localhost``
    :type host: str
    :param port: Management API port
    :type port: int
    :param user: Username for HTTP Basic authentication
    :type user: str
    :param password: Password for HTTP Basic authentication
    :type password: str
    :param timeout: Request timeout in milliseconds
    :type timeout: int
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: StrictStr = Field(..., min_length=1, description="Broker host with scheme")
    port: StrictInt = Field(..., description="Management API port")
    user: StrictStr = Field(..., min_length=1, description="Basic auth username")
    password: StrictStr = Field(
        ..., min_length=1, repr=False, description="Basic auth password"
    )
    timeout: int = Field(DEFAULT_TIMEOUT_MS, description="Request timeout (ms)")

    @field_validator("timeout", mode="before")
    @classmethod
    def default_timeout(cls, v: Any) -> int:
        """Fall back to the default timeout for absent or non-positive values."""
        return resolve_timeout(v)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "BrokerConfig":
        """Build a config from a loosely-typed mapping.

        Required keys are checked in the fixed order host, port, user,
        password, and the first one that is absent, ``None`` or empty is
        reported. ``username`` is accepted in place of ``user``. Unknown
        keys and mistyped values are rejected.

        :param config: Configuration mapping
        :type config: Mapping[str, Any]
        :return: Validated configuration
        :rtype: BrokerConfig
        :raises ConfigError: If a required key is missing or a value is invalid
        """
        data = dict(config)
        username = data.pop("username", None)
        if _is_missing(data.get("user")) and not _is_missing(username):
            data["user"] = username

        for key in REQUIRED_KEYS:
            if _is_missing(data.get(key)):
                raise ConfigError(f"config key '{key}' is missing", setting=key)

        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            first = e.errors()[0]
            setting = str(first["loc"][0]) if first["loc"] else None
            raise ConfigError(
                f"config key '{setting}' is invalid: {first['msg']}",
                setting=setting,
            ) from e

    @property
    def timeout_seconds(self) -> float:
        """Request timeout in seconds, as the HTTP transport expects it."""
        return self.timeout / 1000.0


class BrokerSettings(BaseSettings):
    """Broker settings loaded from environment variables.

    Every field maps to a ``RABBITMQ_``-prefixed variable, and
    ``RABBITMQ_USERNAME`` is accepted as an alternative to
    ``RABBITMQ_USER``. Values may also come from a ``.env`` file.
    Nothing is validated for completeness here; :meth:`to_config` does
    that.

    :param host: Broker host including scheme
    :type host: Optional[str]
    :param port: Management API port
    :type port: Optional[int]
    :param user: Basic auth username
    :type user: Optional[str]
    :param password: Basic auth password
    :type password: Optional[str]
    :param timeout: Request timeout in milliseconds
    :type timeout: Optional[int]
    """

    model_config = SettingsConfigDict(
        env_prefix="RABBITMQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: Optional[str] = Field(None, description="Broker host with scheme")
    port: Optional[int] = Field(None, description="Management API port")
    user: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("RABBITMQ_USER", "RABBITMQ_USERNAME"),
        description="Basic auth username",
    )
    password: Optional[str] = Field(None, repr=False, description="Basic auth password")
    timeout: Optional[int] = Field(None, description="Request timeout (ms)")

    @field_validator("timeout", mode="before")
    @classmethod
    def drop_unparseable_timeout(cls, v: Any) -> Optional[int]:
        """Treat a timeout that is not an integer as unset.

        :class:`BrokerConfig` then falls back to ``DEFAULT_TIMEOUT_MS``.
        """
        if v is None or isinstance(v, int):
            return v
        try:
            return int(str(v).strip())
        except ValueError:
            logger.debug("Ignoring non-integer timeout setting %r", v)
            return None

    def to_config(self) -> BrokerConfig:
        """Convert the loaded settings into a validated :class:`BrokerConfig`.

        :return: Validated configuration
        :rtype: BrokerConfig
        :raises ConfigError: If a required setting is missing
        """
        return BrokerConfig.from_mapping(self.model_dump(exclude_none=True))


def load_config_from_env() -> BrokerConfig:
    """Load and validate the broker configuration from the environment.

    :return: Validated configuration
    :rtype: BrokerConfig
    :raises ConfigError: If a variable is missing or cannot be parsed
    """
    try:
        settings = BrokerSettings()
    except PydanticValidationError as e:
        first = e.errors()[0]
        setting = str(first["loc"][0]) if first["loc"] else None
        raise ConfigError(
            f"environment setting '{setting}' is invalid: {first['msg']}",
            setting=setting,
        ) from e
    config = settings.to_config()
    logger.debug("Loaded broker configuration for %s:%s", config.host, config.port)
    return config
