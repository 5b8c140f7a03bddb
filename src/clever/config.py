"""Configuration for the Clever client.

A ``Configuration`` holds credentials, the API root and timeouts. Pass one
explicitly to ``CleverClient``; a process-wide default instance exists for
convenience and is used when no configuration is given.

Example:
    ```python
    import clever

    clever.configure(token="DISTRICT_TOKEN")

    # or, isolated from the process-wide default
    config = clever.Configuration(api_key="DEMO_KEY", timeout=60)
    client = clever.CleverClient(config=config)
    ```
"""

from dataclasses import dataclass, fields

import httpx

from clever.auth.credentials import CredentialResolver
from clever.auth.masking import mask_sensitive
from clever.errors.exceptions import ConfigurationError

DEFAULT_API_BASE = "https://api.clever.com/v1.1/"

# Time allowed for each read, write and connection-pool wait, in seconds;
# not a limit on the whole call
DEFAULT_TIMEOUT = 120.0

# Time allowed to establish a connection, in seconds
DEFAULT_OPEN_TIMEOUT = 30.0

ENV_API_KEY = "CLEVER_API_KEY"
ENV_TOKEN = "CLEVER_TOKEN"
ENV_API_BASE = "CLEVER_API_BASE"
ENV_TIMEOUT = "CLEVER_TIMEOUT"
ENV_OPEN_TIMEOUT = "CLEVER_OPEN_TIMEOUT"


@dataclass
class Configuration:
    """Credentials and connection settings for Clever API calls.

    Exactly one of ``api_key`` or ``token`` is normally set. When both are,
    the token wins. Missing credentials are only reported when a request
    is made.

    Attributes:
        timeout: Seconds allowed for each read, write and connection-pool
            wait. It applies to every operation separately, so a slow
            response that keeps sending data can take longer in total.
        open_timeout: Seconds allowed to establish the connection.
    """

    api_key: str | None = None
    token: str | None = None
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT
    open_timeout: float = DEFAULT_OPEN_TIMEOUT

    def __repr__(self) -> str:
        api_key = mask_sensitive(self.api_key) if self.api_key else None
        token = mask_sensitive(self.token) if self.token else None
        return (
            f"Configuration(api_key={api_key!r}, token={token!r}, api_base={self.api_base!r}, "
            f"timeout={self.timeout!r}, open_timeout={self.open_timeout!r})"
        )

    def api_url(self, path: str = "") -> str:
        """Resolve ``path`` against ``api_base``.

        Relative paths are appended to the API root, absolute paths
        (``/v1.1/students?starting_after=...``) replace its path and full
        URLs are returned unchanged.
        """
        return str(httpx.URL(self.api_base).join(path))

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None) -> "Configuration":
        """Build a configuration from ``CLEVER_*`` environment variables.

        Args:
            resolver: Resolver to use. Defaults to one that also loads .env.

        Raises:
            ConfigurationError: If a timeout variable is not a number.
        """
        resolver = resolver or CredentialResolver()
        return cls(
            api_key=resolver.resolve(env_var_name=ENV_API_KEY),
            token=resolver.resolve(env_var_name=ENV_TOKEN),
            api_base=resolver.resolve(env_var_name=ENV_API_BASE, default=DEFAULT_API_BASE, mask_in_logs=False),
            timeout=_parse_seconds(resolver, ENV_TIMEOUT, DEFAULT_TIMEOUT),
            open_timeout=_parse_seconds(resolver, ENV_OPEN_TIMEOUT, DEFAULT_OPEN_TIMEOUT),
        )


def _parse_seconds(resolver: CredentialResolver, env_var_name: str, default: float) -> float:
    raw = resolver.resolve(env_var_name=env_var_name, default=str(default), mask_in_logs=False)
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{env_var_name} must be a number of seconds, got {raw!r}") from None


_default_configuration = Configuration()


def get_default_configuration() -> Configuration:
    """Return the process-wide default configuration."""
    return _default_configuration


def configure(**changes) -> Configuration:
    """Update the process-wide default configuration.

    Args:
        **changes: Any ``Configuration`` field, e.g. ``api_key`` or ``timeout``.

    Returns:
        The updated default configuration.

    Raises:
        TypeError: If a keyword is not a configuration field.
    """
    known = {f.name for f in fields(Configuration)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")
    for name, value in changes.items():
        setattr(_default_configuration, name, value)
    return _default_configuration
