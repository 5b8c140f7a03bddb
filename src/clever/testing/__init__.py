"""Testing utilities for code built on the Clever client.

Example:
    ```python
    from clever import CleverClient, Configuration
    from clever.testing import StubExecutor, create_mock_response


    def test_retrieve_student():
        executor = StubExecutor([create_mock_response({"id": "abc123"})])
        client = CleverClient(Configuration(api_key="DEMO_KEY"), executor=executor)

        assert client.students.retrieve("abc123").id == "abc123"
        assert executor.requests[0].url.endswith("/students/abc123")
    ```
"""

import json
from collections.abc import Iterable
from typing import Any

from clever.request.descriptor import RequestDescriptor
from clever.transport.executor import ExecutorResponse


class StubExecutor:
    """Executor that replays canned outcomes and records every request.

    Args:
        responses: Outcomes returned in order. An exception instance is
            raised instead of returned.
    """

    def __init__(self, responses: Iterable[ExecutorResponse | Exception] = ()) -> None:
        self._responses = list(responses)
        self.requests: list[RequestDescriptor] = []

    def queue(self, *responses: ExecutorResponse | Exception) -> None:
        self._responses.extend(responses)

    def execute(self, request: RequestDescriptor) -> ExecutorResponse:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request}")
        outcome = self._responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        pass


def create_mock_response(data: Any, status: int = 200) -> ExecutorResponse:
    """A single-record response: ``{"data": data}``."""
    return ExecutorResponse(status=status, body=json.dumps({"data": data}))


def create_list_response(items: list[dict[str, Any]], next_page: str | None = None) -> ExecutorResponse:
    """A list envelope with each record wrapped, linking to ``next_page`` if given."""
    links = [{"rel": "next", "uri": next_page}] if next_page else []
    body = {
        "data": [{"data": item, "uri": f"/v1.1/records/{item.get('id')}"} for item in items],
        "links": links,
    }
    return ExecutorResponse(status=200, body=json.dumps(body))


def create_error_response(status: int, message: str, param: str | None = None) -> ExecutorResponse:
    """An error envelope ``{"error": {"message": ..., "param": ...}}``."""
    error: dict[str, Any] = {"message": message}
    if param is not None:
        error["param"] = param
    return ExecutorResponse(status=status, body=json.dumps({"error": error}))


__all__ = [
    "StubExecutor",
    "create_error_response",
    "create_list_response",
    "create_mock_response",
]
