"""Request construction: query encoding, descriptors and the request builder."""

from clever.request.builder import build_request
from clever.request.descriptor import RequestDescriptor
from clever.request.encoding import decode_query, encode_query, merge_query, objects_to_ids

__all__ = [
    "RequestDescriptor",
    "build_request",
    "decode_query",
    "encode_query",
    "merge_query",
    "objects_to_ids",
]
