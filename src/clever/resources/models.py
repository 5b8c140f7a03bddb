"""Decoded Clever records."""

from collections.abc import Mapping
from typing import Any

from clever.errors.exceptions import MalformedResponseError
from clever.resources.descriptors import ResourceDescriptor


class Resource:
    """A record returned by the API, e.g. a student or a school.

    Every attribute from the payload is kept, declared or not. Declared
    optional attributes read as ``None`` when the payload omits them; any
    other missing attribute raises ``AttributeError``.

    Example:
        ```python
        student = client.students.retrieve("abc123")
        student.id  # "abc123"
        student.email  # None if the district does not share emails
        student["name"]  # mapping-style access works too
        ```
    """

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        attributes: Mapping[str, Any],
        links: list[dict[str, Any]] | None = None,
    ):
        if "id" not in attributes:
            raise MalformedResponseError(f"{descriptor.name} record has no id: {dict(attributes)!r}")
        self._descriptor = descriptor
        self._attributes = dict(attributes)
        self._links = list(links or [])

    @classmethod
    def from_payload(cls, descriptor: ResourceDescriptor, payload: Any) -> "Resource":
        """Build a resource from a list item or ``data`` member.

        Accepts either the bare record or the ``{"data": {...}, "links": [...]}``
        wrapper the API puts around each record.
        """
        if not isinstance(payload, Mapping):
            raise MalformedResponseError(f"Expected a {descriptor.name} record, got {payload!r}")
        if isinstance(payload.get("data"), Mapping):
            return cls(descriptor, payload["data"], payload.get("links"))
        return cls(descriptor, payload)

    @property
    def id(self) -> Any:
        return self._attributes["id"]

    @property
    def descriptor(self) -> ResourceDescriptor:
        return self._descriptor

    @property
    def links(self) -> list[dict[str, Any]]:
        return list(self._links)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._attributes)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        attributes = self.__dict__.get("_attributes", {})
        if name in attributes:
            return attributes[name]
        if name in self._descriptor.optional_attributes:
            return None
        raise AttributeError(f"{self._descriptor.name} has no attribute {name!r}")

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __contains__(self, key: str) -> bool:
        return key in self._attributes

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self._descriptor == other._descriptor and self.id == other.id

    def __hash__(self) -> int:
        return hash((self._descriptor.name, self.id))

    def __repr__(self) -> str:
        return f"<{self._descriptor.name} id={self.id!r}>"
