"""JSON codec for request and response bodies."""

import json
from typing import Any


class DecodeError(ValueError):
    """Raised when a response body is not valid JSON."""

    pass


class JSONCodec:
    """Encode request bodies and decode response bodies as JSON."""

    content_type = "application/json"

    def decode(self, text: str | bytes) -> Any:
        if not text or not text.strip():
            raise DecodeError("Empty response body")
        try:
            return json.loads(text)
        except (ValueError, TypeError) as e:
            raise DecodeError(str(e)) from e

    def encode(self, value: Any) -> str:
        return json.dumps(value)
