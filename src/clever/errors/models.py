"""Models for Clever error envelopes."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorDetail:
    """The ``error`` member of a Clever error response.

    The API sends either a plain string (``{"error": "Resource not found"}``)
    or an object (``{"error": {"message": "...", "param": "id"}}``).
    """

    message: str | None = None
    param: str | None = None

    # The error value exactly as decoded
    raw: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "ErrorDetail | None":
        """Extract the error detail from a decoded response body.

        Args:
            body: Decoded response body

        Returns:
            ErrorDetail, or None if the body has no usable ``error`` member
        """
        if not isinstance(body, Mapping):
            return None

        error = body.get("error")
        if error is None:
            return None

        if isinstance(error, Mapping):
            message = error.get("message")
            param = error.get("param")
            return cls(
                message=str(message) if message is not None else None,
                param=str(param) if param is not None else None,
                raw=error,
            )

        if isinstance(error, str):
            return cls(message=error, param="", raw=error)

        return None

    def to_exception_message(self, status: int | None = None) -> str:
        """Convert the error detail to an exception message."""
        if self.message:
            return self.message
        return f"HTTP {status}" if status is not None else "Unknown API error"
