"""Query-string encoding and resource reference flattening.

Nested parameters are flattened with bracket notation so the server can
rebuild the structure:

    {"where": {"grade": "5", "school": ["a", "b"]}}
    -> where[grade]=5&where[school][0]=a&where[school][1]=b

Pairs come out in the iteration order of the input, so the same mapping
always produces the same query string.
"""

from collections.abc import Iterator, Mapping, Sequence
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote, unquote


@runtime_checkable
class HasId(Protocol):
    """Anything that can stand in for a reference to an API record."""

    id: Any


@singledispatch
def objects_to_ids(value: Any) -> Any:
    """Replace resource references with their ids, recursively.

    Mappings and sequences are walked; any other object exposing an ``id``
    attribute is reduced to that id. Plain mappings are never reduced, even
    when they carry an ``"id"`` key.
    """
    if isinstance(value, HasId):
        return value.id
    return value


@objects_to_ids.register
def _(value: str) -> Any:
    return value


@objects_to_ids.register
def _(value: bytes) -> Any:
    return value


@objects_to_ids.register
def _(value: Mapping) -> Any:
    return {key: objects_to_ids(item) for key, item in value.items()}


@objects_to_ids.register
def _(value: list) -> Any:
    return [objects_to_ids(item) for item in value]


@objects_to_ids.register
def _(value: tuple) -> Any:
    return tuple(objects_to_ids(item) for item in value)


def flatten_params(params: Mapping[str, Any], parent_key: str | None = None) -> list[tuple[str, str]]:
    """Flatten nested params into ``(key, value)`` string pairs.

    Key segments come back percent-encoded and joined with literal
    brackets; values are plain, unencoded strings.
    """
    return list(_flatten(params, parent_key))


def _flatten(value: Any, key: str | None) -> Iterator[tuple[str, str]]:
    if isinstance(value, Mapping):
        for sub_key, item in value.items():
            yield from _flatten(item, _child_key(key, str(sub_key)))
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        for index, item in enumerate(value):
            yield from _flatten(item, _child_key(key, str(index)))
    elif key is not None:
        yield key, _stringify(value)


def _child_key(parent: str | None, child: str) -> str:
    # Segments are percent-encoded individually; brackets stay literal
    child = quote(child, safe="")
    return child if parent is None else f"{parent}[{child}]"


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode()
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Encode params as a query string, without the leading ``?``.

    Args:
        params: Possibly nested mapping of query parameters.

    Returns:
        Encoded query string; empty for None or empty params.
    """
    if not params:
        return ""
    return "&".join(f"{key}={quote(value, safe='')}" for key, value in flatten_params(params))


def merge_query(query: str, params: Mapping[str, Any] | None) -> str:
    """Merge params into an existing query string.

    Existing keys keep their position; a key present in both takes the
    value from ``params``; new keys are appended in ``params`` order. When
    the existing query repeats a key, its first value is kept.
    """
    merged: dict[str, str] = {}
    for pair in query.lstrip("?").split("&"):
        if not pair:
            continue
        raw_key, _, raw_value = pair.partition("=")
        key = _join_key([quote(segment, safe="") for segment in _split_key(raw_key)])
        merged.setdefault(key, quote(unquote(raw_value), safe=""))
    for key, value in flatten_params(params or {}):
        merged[key] = quote(value, safe="")
    return "&".join(f"{key}={value}" for key, value in merged.items())


def _join_key(segments: list[str]) -> str:
    head, *rest = segments
    return head + "".join(f"[{segment}]" for segment in rest)


def decode_query(query: str) -> dict[str, Any]:
    """Rebuild nested params from a query string produced by ``encode_query``.

    Leaf values come back as strings. Containers whose keys are exactly
    ``0..n-1`` are turned back into lists. Empty containers are not
    encoded at all, so they do not come back.
    """
    result: dict[str, Any] = {}
    for pair in query.lstrip("?").split("&"):
        if not pair:
            continue
        raw_key, _, raw_value = pair.partition("=")
        segments = _split_encoded_key(raw_key)
        node = result
        for segment in segments[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = node[segment] = {}
            node = child
        node[segments[-1]] = unquote(raw_value)
    return {key: _restore_lists(value) for key, value in result.items()}


def _split_key(key: str) -> list[str]:
    # Servers decode the key before reading its brackets, so do the same
    head, bracket, rest = unquote(key).partition("[")
    segments = [head]
    if bracket:
        segments.extend(rest.rstrip("]").split("]["))
    return segments


def _split_encoded_key(key: str) -> list[str]:
    # Structural brackets are literal, brackets inside segments are encoded
    head, bracket, rest = key.partition("[")
    segments = [head]
    if bracket:
        if rest.endswith("]"):
            rest = rest[:-1]
        segments.extend(rest.split("]["))
    return [unquote(segment) for segment in segments]


def _restore_lists(node: Any) -> Any:
    if not isinstance(node, dict):
        return node
    restored = {key: _restore_lists(value) for key, value in node.items()}
    if restored and list(restored) == [str(i) for i in range(len(restored))]:
        return list(restored.values())
    return restored
