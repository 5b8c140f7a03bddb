"""Authentication components for the Clever client.

This module provides:
- Multi-source credential resolution (value → env → .env → default)
- The pre-flight credential guard run before every request
- Masking of credentials for logs and error messages

Example:
    ```python
    from clever.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="CLEVER_API_KEY")
    ```
"""

from clever.auth.credentials import CredentialResolver
from clever.auth.exceptions import CredentialNotFoundError
from clever.auth.guard import ensure_authorized
from clever.auth.masking import mask_sensitive

__all__ = [
    "CredentialNotFoundError",
    "CredentialResolver",
    "ensure_authorized",
    "mask_sensitive",
]
