"""Exceptions for credential resolution.

Example:
    ```python
    from clever.auth.exceptions import CredentialNotFoundError

    if not api_key:
        raise CredentialNotFoundError("API key not found", env_var_name="CLEVER_API_KEY")
    ```
"""

from clever.errors.exceptions import ConfigurationError


class CredentialNotFoundError(ConfigurationError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).

    Example:
        ```python
        try:
            token = resolver.resolve(env_var_name="CLEVER_TOKEN", required=True)
        except CredentialNotFoundError as e:
            print(f"Missing credential: {e.env_var_name}")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name
