"""The Clever API client: request pipeline and resource facades."""

import logging
from collections.abc import Mapping
from typing import Any

from clever.config import Configuration, get_default_configuration
from clever.errors.handler import translate_response, translate_transport_error
from clever.request.builder import build_request
from clever.resources.descriptors import (
    DISTRICT,
    EVENT,
    SCHOOL,
    SCHOOL_ADMIN,
    SECTION,
    STUDENT,
    TEACHER,
    get_descriptor,
)
from clever.resources.facade import ResourceFacade
from clever.transport.codec import JSONCodec
from clever.transport.executor import HTTPExecutor, HttpxExecutor, TransportError

logger = logging.getLogger(__name__)


class CleverClient:
    """Client for the Clever API.

    Every call builds one request, checks that it can be authenticated,
    sends it once through the executor and translates the outcome. Failures
    are raised as ``CleverError`` subclasses and are never retried.

    Args:
        config: Credentials and timeouts. Defaults to the process-wide
            configuration, read at each call.
        executor: Performs HTTP calls. Defaults to an ``HttpxExecutor``.
        codec: Decodes response bodies. Defaults to ``JSONCodec``.

    Example:
        ```python
        from clever import CleverClient, Configuration

        with CleverClient(Configuration(token="DISTRICT_TOKEN")) as client:
            student = client.students.retrieve("530e595026403103360ff9fd")
            for section in client.students.list_linked(student, "sections"):
                print(section.name)
        ```
    """

    def __init__(
        self,
        config: Configuration | None = None,
        executor: HTTPExecutor | None = None,
        codec: JSONCodec | None = None,
    ) -> None:
        self._config = config
        self._owns_executor = executor is None
        self.executor = executor or HttpxExecutor(codec=codec)
        self.codec = codec or JSONCodec()

        self.districts = ResourceFacade(self, DISTRICT)
        self.schools = ResourceFacade(self, SCHOOL)
        self.students = ResourceFacade(self, STUDENT)
        self.teachers = ResourceFacade(self, TEACHER)
        self.sections = ResourceFacade(self, SECTION)
        self.events = ResourceFacade(self, EVENT)
        self.school_admins = ResourceFacade(self, SCHOOL_ADMIN)

    @property
    def config(self) -> Configuration:
        return self._config or get_default_configuration()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_executor:
            self.executor.close()

    def resource(self, name: str) -> ResourceFacade:
        """Facade for a resource type given its singular or plural name."""
        return ResourceFacade(self, get_descriptor(name))

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one API request and return the decoded body.

        Args:
            method: HTTP method
            path: Path relative to the API root, absolute path, or full URL
            params: Query params or body, depending on the method
            headers: Extra request headers

        Returns:
            Decoded JSON body of the 2xx response

        Raises:
            ConfigurationError: If no credentials are available
            APIConnectionError: If no response was received
            MalformedResponseError: If the response is not a valid API object
            InvalidRequestError: On 400 or 404
            AuthenticationError: On 401
            APIError: On any other error status
        """
        config = self.config
        descriptor = build_request(method, path, params, headers, config)
        logger.debug(f"Sending request: {descriptor}")

        try:
            response = self.executor.execute(descriptor)
        except TransportError as e:
            raise translate_transport_error(e, config, descriptor) from e

        logger.debug(f"Received HTTP {response.status} for {descriptor.method} {descriptor.url}")
        return translate_response(response, descriptor, self.codec)
