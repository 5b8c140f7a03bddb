"""Lazy iteration over paged collection endpoints.

A list call returns a ``ResourceList``. Nothing is fetched until it is
iterated; each iteration starts a new ``PageCursor`` at page one, which
fetches the next page only when the current one is used up.

List envelopes look like::

    {
        "data": [{"data": {"id": "1", ...}, "uri": "/v1.1/students/1"}, ...],
        "paging": {"current": 1, "total": 3, "count": 5},
        "links": [{"rel": "next", "uri": "/v1.1/students?starting_after=2"}]
    }

A page is the last one when its envelope carries no ``next`` link.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from clever.errors.exceptions import MalformedResponseError
from clever.resources.descriptors import ResourceDescriptor
from clever.resources.models import Resource

if TYPE_CHECKING:
    from clever.client import CleverClient

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """One page of a collection, in server order."""

    items: list[Resource] = field(default_factory=list)
    next_page_url: str | None = None

    @property
    def is_last(self) -> bool:
        return self.next_page_url is None

    @classmethod
    def from_envelope(cls, body: Any, descriptor: ResourceDescriptor) -> "Page":
        """Decode a list envelope.

        A ``data`` member holding a single record (as linked singular
        resources such as a student's school return) yields a one-item page.

        Raises:
            MalformedResponseError: If the envelope has no usable ``data`` member.
        """
        if not isinstance(body, Mapping) or "data" not in body:
            raise MalformedResponseError(f"Invalid list response from API: {body!r}", json_body=body)

        data = body["data"]
        if isinstance(data, Mapping):
            items = [Resource.from_payload(descriptor, body)]
        elif isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            items = [Resource.from_payload(descriptor, item) for item in data]
        else:
            raise MalformedResponseError(f"Invalid list response from API: {body!r}", json_body=body)

        return cls(items=items, next_page_url=_next_link(body))


def _next_link(body: Mapping) -> str | None:
    for link in body.get("links") or []:
        if isinstance(link, Mapping) and link.get("rel") == "next" and link.get("uri"):
            return str(link["uri"])
    for key in ("next", "nextPage"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


class PageCursor(Iterator[Resource]):
    """Iterator over the records of a collection, one page buffered at a time.

    Attributes:
        fetch_count: Number of pages requested so far.
    """

    def __init__(
        self,
        client: "CleverClient",
        descriptor: ResourceDescriptor,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._client = client
        self._descriptor = descriptor
        self._headers = dict(headers or {})
        self._buffer: list[Resource] = []
        self._position = 0
        self.fetch_count = 0

        # The first request carries the caller's filters; continuation
        # links are self-contained and are fetched without params
        self._next_path: str | None = path
        self._next_params = params

    def __iter__(self) -> "PageCursor":
        return self

    def __next__(self) -> Resource:
        while self._position >= len(self._buffer):
            if self._next_path is None:
                raise StopIteration
            self._load(self.fetch_page())
        item = self._buffer[self._position]
        self._position += 1
        return item

    def fetch_page(self) -> Page:
        """Request the next page and advance the continuation link.

        Raises:
            StopIteration: If the last page was already fetched.
        """
        if self._next_path is None:
            raise StopIteration
        body = self._client.request("GET", self._next_path, self._next_params, self._headers)
        self.fetch_count += 1
        page = Page.from_envelope(body, self._descriptor)
        logger.debug(
            f"Fetched page {self.fetch_count} of {self._descriptor.plural} "
            f"({len(page.items)} items, last={page.is_last})"
        )
        self._next_path = page.next_page_url
        self._next_params = None
        return page

    def _load(self, page: Page) -> None:
        self._buffer = page.items
        self._position = 0


class ResourceList:
    """Restartable lazy sequence of the records behind a collection path.

    Example:
        ```python
        students = client.students.list({"where": {"grade": "5"}})
        for student in students:  # pages are fetched as needed
            print(student.id)
        ```
    """

    def __init__(
        self,
        client: "CleverClient",
        descriptor: ResourceDescriptor,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.client = client
        self.descriptor = descriptor
        self.path = path
        self.params = params
        self.headers = dict(headers or {})

    def __iter__(self) -> PageCursor:
        return self.cursor()

    def cursor(self) -> PageCursor:
        """A fresh cursor positioned before the first page."""
        return PageCursor(self.client, self.descriptor, self.path, self.params, self.headers)

    def pages(self) -> Iterator[Page]:
        """Iterate over whole pages instead of records."""
        cursor = self.cursor()
        while True:
            try:
                yield cursor.fetch_page()
            except StopIteration:
                return

    def __repr__(self) -> str:
        return f"<ResourceList {self.descriptor.plural} path={self.path!r}>"
