"""The fully specified request handed to an HTTP executor."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from clever.auth.masking import is_sensitive_header, mask_sensitive


@dataclass(frozen=True)
class RequestDescriptor:
    """A single API request, built once and consumed by one executor call.

    Attributes:
        method: Upper-case HTTP method.
        url: Absolute URL, query string included for GET/HEAD/DELETE.
        headers: Request headers, credentials included.
        body: Structured body for non-GET methods; serialized by the executor.
        timeout: Per-operation (read, write, pool) timeout in seconds.
        open_timeout: Connection timeout in seconds.
        api_key: Username for HTTP basic auth, when authenticating with an api key.

    ``str()`` and ``repr()`` mask credentials, so a descriptor can be logged.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    timeout: float | None = None
    open_timeout: float | None = None
    api_key: str | None = None

    @property
    def basic_auth(self) -> tuple[str, str] | None:
        """Basic auth credentials: the api key with an empty password."""
        if self.api_key is None:
            return None
        return (self.api_key, "")

    def to_log_dict(self) -> dict[str, Any]:
        """Request options with credentials masked, in a stable order."""
        opts: dict[str, Any] = {
            "method": self.method,
            "url": self.url,
            "headers": [self._format_header(name, value) for name, value in self.headers.items()],
            "open_timeout": self.open_timeout,
            "payload": self.body,
            "timeout": self.timeout,
        }
        if self.api_key is not None:
            opts["user"] = mask_sensitive(self.api_key)
            opts["password"] = ""
        return opts

    @staticmethod
    def _format_header(name: str, value: str) -> str:
        shown = mask_sensitive(value) if is_sensitive_header(name) else value
        return f"{name}: {shown}"

    def __str__(self) -> str:
        return str(self.to_log_dict())

    def __repr__(self) -> str:
        return f"RequestDescriptor({self.to_log_dict()!r})"
