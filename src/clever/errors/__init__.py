"""Error hierarchy and response translation for the Clever client."""

from clever.errors.exceptions import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    CleverError,
    ConfigurationError,
    InvalidRequestError,
    MalformedResponseError,
)
from clever.errors.models import ErrorDetail
from clever.errors.handler import translate_response, translate_transport_error

__all__ = [
    "APIConnectionError",
    "APIError",
    "AuthenticationError",
    "CleverError",
    "ConfigurationError",
    "ErrorDetail",
    "InvalidRequestError",
    "MalformedResponseError",
    "translate_response",
    "translate_transport_error",
]
