"""Build request descriptors from method, path and params."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from clever.auth.guard import ensure_authorized, has_authorization_header
from clever.config import Configuration, get_default_configuration
from clever.request.descriptor import RequestDescriptor
from clever.request.encoding import merge_query, objects_to_ids

# Methods whose params travel in the query string instead of the body
QUERY_METHODS: frozenset[str] = frozenset(["GET", "HEAD", "DELETE"])


def build_request(
    method: str,
    path: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    config: Configuration | None = None,
) -> RequestDescriptor:
    """Create the descriptor for one API call.

    Args:
        method: HTTP method, any case.
        path: Path relative to the API root, an absolute path or a full URL.
        params: Query params (GET/HEAD/DELETE) or body (other methods).
            Resource objects anywhere inside are replaced by their ids.
        headers: Extra headers. An ``Authorization`` header here overrides
            the configured credentials for this call.
        config: Configuration to use; defaults to the process-wide one.

    Returns:
        The request descriptor.

    Raises:
        ConfigurationError: If no credential is available.
    """
    config = config or get_default_configuration()
    headers = dict(headers or {})
    ensure_authorized(config, headers)

    method = method.upper()
    params = objects_to_ids(params) if params is not None else None
    url = config.api_url(path)

    if method in QUERY_METHODS:
        url = _with_query(url, params)
        body = None
    else:
        body = params

    api_key = None
    if not has_authorization_header(headers):
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"
        elif config.api_key:
            api_key = config.api_key

    return RequestDescriptor(
        method=method,
        url=url,
        headers=headers,
        body=body,
        timeout=config.timeout,
        open_timeout=config.open_timeout,
        api_key=api_key,
    )


def _with_query(url: str, params: Mapping[str, Any] | None) -> str:
    parts = urlsplit(url)
    query = merge_query(parts.query, params)
    return urlunsplit(parts._replace(query=query))
