"""URL helpers for the management API.

Paths handed to the transport client are relative to the broker's
``host:port`` root. User-supplied segments (vhost names, queue names,
binding property keys...) must be escaped with :func:`quote_segment`
before they are inserted into a path, since the default vhost ``/``
would otherwise split the path.
"""

from urllib.parse import quote


def compose_url(host: str, port: int, path: str) -> str:
    """Join host, port and a resource path into one absolute URL.

    A single leading ``/`` is prepended when ``path`` lacks one; no other
    normalization is applied, and the result is not checked for
    well-formedness.

    :param host: Broker host including scheme, e.g. ``http://localhost``
    :type host: str
    :param port: Management API port
    :type port: int
    :param path: Resource path, with user-supplied segments already escaped
    :type path: str
    :return: Absolute URL ``<host>:<port><path>``
    :rtype: str
    """
    if not path.startswith("/"):
        path = "/" + path
    return f"{host}:{port}{path}"


def quote_segment(value: str) -> str:
    """Percent-encode one path segment, including any ``/``."""
    return quote(value, safe="")
