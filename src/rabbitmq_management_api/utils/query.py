"""Pagination query-string builder for list endpoints.

The management API paginates list responses (queues, exchanges,
connections, channels, vhosts) when ``pagination=true`` is passed along
with any of the recognized filter keys.
"""

from typing import Any, Mapping, Optional
from urllib.parse import quote_plus

from ..exceptions import ValidationError

PAGINATION_KEYS = frozenset({"page", "pageSize", "name", "use_regex"})


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_pagination_query(options: Optional[Mapping[str, Any]] = None) -> str:
    """Build a pagination query string.

    Keys keep the mapping's iteration order and ``pagination=true`` is
    always appended last.

    :param options: Optional mapping of pagination/filter options
    :type options: Optional[Mapping[str, Any]]
    :return: ``""`` when no options are given, else ``?k=v&...&pagination=true``
    :rtype: str
    :raises ValidationError: If any key is not a recognized pagination key

    .. example::
       >>> build_pagination_query({"page": 2, "name": "orders"})
       '?page=2&name=orders&pagination=true'
    """
    if not options:
        return ""

    for key in options:
        if key not in PAGINATION_KEYS:
            raise ValidationError(f"invalid key '{key}' in pagination", field=key)

    pairs = [
        f"{quote_plus(key)}={quote_plus(_to_text(value))}"
        for key, value in options.items()
    ]
    pairs.append("pagination=true")
    return "?" + "&".join(pairs)
