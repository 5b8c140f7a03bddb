"""Clever resource types, decoded records and per-type facades."""

from clever.resources.descriptors import (
    ALL_DESCRIPTORS,
    DISTRICT,
    EVENT,
    SCHOOL,
    SCHOOL_ADMIN,
    SECTION,
    STUDENT,
    TEACHER,
    ResourceDescriptor,
    descriptor_for_link,
    get_descriptor,
)
from clever.resources.facade import ResourceFacade
from clever.resources.models import Resource

__all__ = [
    "ALL_DESCRIPTORS",
    "DISTRICT",
    "EVENT",
    "SCHOOL",
    "SCHOOL_ADMIN",
    "SECTION",
    "STUDENT",
    "TEACHER",
    "Resource",
    "ResourceDescriptor",
    "ResourceFacade",
    "descriptor_for_link",
    "get_descriptor",
]
