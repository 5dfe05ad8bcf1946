"""HTTP utilities public API (barrel module).

This package provides:
- The authenticated management API client
- URL composition and path-segment escaping

Recommended import pattern for consumers:
    from rabbitmq_management_api.utils.http import ManagementAPIClient, create_client
"""

from .client import (
    ALLOWED_METHODS,
    ManagementAPIClient,
    create_client,
    create_timeout,
)
from .url import compose_url, quote_segment

__all__ = [
    "ALLOWED_METHODS",
    "ManagementAPIClient",
    "create_client",
    "create_timeout",
    "compose_url",
    "quote_segment",
]
