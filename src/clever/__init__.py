"""Clever - Python client for the Clever district data API.

This library provides:
- Resource facades for districts, schools, students, teachers, sections,
  events and school admins
- Lazy, restartable iteration over paged collections
- A typed error hierarchy with credential-masked request diagnostics
- Pluggable HTTP executors (httpx by default) and configuration from
  the environment or .env files

Example:
    ```python
    import clever

    clever.configure(token="DISTRICT_TOKEN")
    client = clever.CleverClient()

    for school in client.schools.list():
        print(school.id, school.name)
    ```
"""

__version__ = "0.1.0"

from clever.config import Configuration, configure, get_default_configuration
from clever.errors import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    CleverError,
    ConfigurationError,
    InvalidRequestError,
    MalformedResponseError,
)
from clever.resources import Resource, ResourceDescriptor, ResourceFacade
from clever.pagination import Page, PageCursor, ResourceList
from clever.client import CleverClient

__all__ = [
    "APIConnectionError",
    "APIError",
    "AuthenticationError",
    "CleverClient",
    "CleverError",
    "Configuration",
    "ConfigurationError",
    "InvalidRequestError",
    "MalformedResponseError",
    "Page",
    "PageCursor",
    "Resource",
    "ResourceDescriptor",
    "ResourceFacade",
    "ResourceList",
    "__version__",
    "configure",
    "get_default_configuration",
]
