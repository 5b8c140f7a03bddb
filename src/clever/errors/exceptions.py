"""Structured exceptions for Clever API errors."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from clever.request.descriptor import RequestDescriptor


class CleverError(Exception):
    """Base exception for Clever API errors.

    Attributes:
        http_status: HTTP status code of the response, if one was received.
        http_body: Raw response body, if one was received.
        json_body: Decoded response body, if it could be decoded.
        request: The request that failed. Its string form masks credentials,
            so it is safe to log.
    """

    def __init__(
        self,
        message: str,
        http_status: int | None = None,
        http_body: str | None = None,
        json_body: Any = None,
        request: "RequestDescriptor | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.http_body = http_body
        self.json_body = json_body
        self.request = request


class APIConnectionError(CleverError):
    """The transport never produced an HTTP response."""

    pass


class APIError(CleverError):
    """Non-2xx response carrying an error body not covered by a narrower class."""

    pass


class MalformedResponseError(APIError):
    """A response was received but its body is not a valid API object."""

    pass


class InvalidRequestError(CleverError):
    """400 Bad Request or 404 Not Found."""

    def __init__(self, message: str, param: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.param = param


class AuthenticationError(CleverError):
    """401 Unauthorized."""

    pass


class ConfigurationError(AuthenticationError):
    """No credentials are available to authenticate a request.

    Raised locally, before any network activity.
    """

    pass
