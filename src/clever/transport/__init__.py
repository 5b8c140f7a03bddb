"""Transport components: the HTTP executor boundary and the body codec.

Modules:
    executor: Executor protocol, the httpx-backed executor and its result types
    codec: JSON encoding and decoding of bodies
"""

from clever.transport.codec import DecodeError, JSONCodec
from clever.transport.executor import ExecutorResponse, HTTPExecutor, HttpxExecutor, TransportError

__all__ = [
    "DecodeError",
    "ExecutorResponse",
    "HTTPExecutor",
    "HttpxExecutor",
    "JSONCodec",
    "TransportError",
]
