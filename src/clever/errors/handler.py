"""Translate executor outcomes into decoded bodies or Clever exceptions."""

from typing import TYPE_CHECKING, Any

from clever.errors.exceptions import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    CleverError,
    InvalidRequestError,
    MalformedResponseError,
)
from clever.errors.models import ErrorDetail
from clever.transport.codec import DecodeError, JSONCodec
from clever.transport.executor import ExecutorResponse, TransportError

if TYPE_CHECKING:
    from clever.config import Configuration
    from clever.request.descriptor import RequestDescriptor


STATUS_EXCEPTIONS: dict[int, type[CleverError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    404: InvalidRequestError,
}


def translate_response(
    response: ExecutorResponse,
    request: "RequestDescriptor | None" = None,
    codec: JSONCodec | None = None,
) -> Any:
    """Decode a response, raising the matching exception for failures.

    Args:
        response: Status and raw body returned by the executor
        request: The request that produced the response, kept on errors
        codec: Codec used to decode the body

    Returns:
        The decoded body of a 2xx response

    Raises:
        MalformedResponseError: If the body cannot be decoded, or a non-2xx
            body carries no ``error`` member
        InvalidRequestError: For 400 and 404
        AuthenticationError: For 401
        APIError: For any other non-2xx status
    """
    codec = codec or JSONCodec()
    status = response.status
    body = response.body

    try:
        decoded = codec.decode(body)
    except DecodeError:
        raise _malformed(response, request) from None

    if response.is_success:
        return decoded

    detail = ErrorDetail.from_body(decoded)
    if detail is None:
        raise _malformed(response, request, decoded)

    exc_class = STATUS_EXCEPTIONS.get(status, APIError)
    message = detail.to_exception_message(status)
    common = {
        "http_status": status,
        "http_body": body,
        "json_body": decoded,
        "request": request,
    }

    if exc_class is InvalidRequestError:
        raise InvalidRequestError(message, param=detail.param, **common)

    raise exc_class(message, **common)


def translate_transport_error(
    error: TransportError,
    config: "Configuration",
    request: "RequestDescriptor | None" = None,
) -> APIConnectionError:
    """Build the APIConnectionError for a request that got no response."""
    if error.kind in ("connect", "timeout"):
        message = (
            f"Could not connect to Clever ({config.api_base}). "
            "Please check your internet connection and try again."
        )
    else:
        message = f"Unexpected error communicating with Clever ({config.api_base})."
    message += f"\n\n(Network error: {error})"
    return APIConnectionError(message, request=request)


def _malformed(
    response: ExecutorResponse,
    request: "RequestDescriptor | None",
    decoded: Any = None,
) -> MalformedResponseError:
    return MalformedResponseError(
        f"Invalid response object from API: {response.body!r} (HTTP response code was {response.status})",
        http_status=response.status,
        http_body=response.body,
        json_body=decoded,
        request=request,
    )
