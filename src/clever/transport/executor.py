"""HTTP executors: the boundary between the client and the network.

An executor takes a ``RequestDescriptor``, performs exactly one HTTP call,
and returns the status and raw body. It never interprets the body and never
retries. Failures that produce no HTTP response raise ``TransportError``.

Example:
    ```python
    import httpx

    from clever.transport import HttpxExecutor

    # Any httpx transport can be plugged in, e.g. a mock in tests
    executor = HttpxExecutor(transport=httpx.MockTransport(handler))
    response = executor.execute(request)
    ```
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import httpx

from clever.transport.codec import JSONCodec

if TYPE_CHECKING:
    from clever.request.descriptor import RequestDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutorResponse:
    """Status code and raw body of an HTTP response."""

    status: int
    body: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


class TransportError(Exception):
    """No HTTP response was received.

    Attributes:
        kind: "connect" (connection could not be established), "timeout"
            (no response in time) or "network" (anything else).
    """

    def __init__(self, message: str, kind: str = "network"):
        super().__init__(message)
        self.kind = kind


class HTTPExecutor(Protocol):
    """Anything that can carry out a request descriptor."""

    def execute(self, request: "RequestDescriptor") -> ExecutorResponse: ...


class HttpxExecutor:
    """Executor backed by a synchronous ``httpx.Client``.

    Args:
        client: Client to send requests with. Not closed by ``close()``.
        transport: Transport for an internally created client; ignored
            when ``client`` is given.
        codec: Codec used to serialize request bodies.
    """

    def __init__(
        self,
        *,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
        codec: JSONCodec | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(transport=transport)
        self.codec = codec or JSONCodec()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def execute(self, request: "RequestDescriptor") -> ExecutorResponse:
        """Send the request and return the raw response.

        Args:
            request: The request to send

        Returns:
            Status code and body, whatever the status

        Raises:
            TransportError: If no HTTP response was received
        """
        headers = dict(request.headers)
        content = None
        if request.body is not None:
            content = self.codec.encode(request.body)
            headers.setdefault("Content-Type", self.codec.content_type)

        timeout = httpx.Timeout(request.timeout, connect=request.open_timeout)

        try:
            response = self._client.request(
                request.method,
                request.url,
                headers=headers,
                content=content,
                auth=request.basic_auth,
                timeout=timeout,
            )
        except httpx.ConnectError as e:
            raise TransportError(str(e) or e.__class__.__name__, kind="connect") from e
        except httpx.TimeoutException as e:
            raise TransportError(str(e) or e.__class__.__name__, kind="timeout") from e
        except httpx.TransportError as e:
            raise TransportError(str(e) or e.__class__.__name__, kind="network") from e

        logger.debug(f"{request.method} {request.url} returned {response.status_code}")
        return ExecutorResponse(status=response.status_code, body=response.text)
