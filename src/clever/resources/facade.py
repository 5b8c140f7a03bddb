"""Per-resource-type operations: retrieve, list and linked lists."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from clever.errors.exceptions import InvalidRequestError, MalformedResponseError
from clever.pagination import Page, ResourceList
from clever.resources.descriptors import ResourceDescriptor, descriptor_for_link
from clever.resources.models import Resource

if TYPE_CHECKING:
    from clever.client import CleverClient


class ResourceFacade:
    """Operations on one resource type, e.g. ``client.students``.

    Args:
        client: Client that performs the requests.
        descriptor: The resource type.
    """

    def __init__(self, client: "CleverClient", descriptor: ResourceDescriptor) -> None:
        self._client = client
        self.descriptor = descriptor

    def retrieve(self, id: Any, token: str | None = None) -> Resource:
        """Fetch one record by id.

        Args:
            id: Record id, or a resource whose id to use.
            token: Bearer token for this call only, e.g. a district token.

        Raises:
            InvalidRequestError: If the record does not exist (404).
            MalformedResponseError: If the response holds no record.
        """
        id = _as_id(id)
        body = self._client.request("GET", self.descriptor.record_path(id), headers=_token_headers(token))
        page = Page.from_envelope(body, self.descriptor)
        if not page.items:
            raise MalformedResponseError(
                f"Invalid response object from API: expected a {self.descriptor.name} record, got {body!r}",
                json_body=body,
            )
        return page.items[0]

    def list(self, filters: Mapping[str, Any] | None = None, token: str | None = None) -> ResourceList:
        """Lazily iterate over all records matching ``filters``."""
        return ResourceList(
            self._client,
            self.descriptor,
            self.descriptor.collection_path(),
            filters,
            _token_headers(token),
        )

    def list_linked(
        self,
        id: Any,
        link_name: str,
        filters: Mapping[str, Any] | None = None,
        token: str | None = None,
    ) -> ResourceList:
        """Lazily iterate over a record's linked collection.

        Example:
            ```python
            for school in client.districts.list_linked(district_id, "schools"):
                print(school.name)
            ```

        Raises:
            InvalidRequestError: If this resource type has no such link.
        """
        if link_name not in self.descriptor.linked_resources:
            raise InvalidRequestError(
                f"{self.descriptor.name} has no linked resource {link_name!r} "
                f"(available: {', '.join(self.descriptor.linked_resources) or 'none'})",
                param=link_name,
            )
        return ResourceList(
            self._client,
            descriptor_for_link(link_name),
            self.descriptor.linked_path(_as_id(id), link_name),
            filters,
            _token_headers(token),
        )

    def __repr__(self) -> str:
        return f"<ResourceFacade {self.descriptor.plural}>"


def _as_id(value: Any) -> str:
    if isinstance(value, Resource):
        return str(value.id)
    return str(value)


def _token_headers(token: str | None) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token else {}
