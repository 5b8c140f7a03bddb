"""Pre-flight check that a request can be authenticated."""

from collections.abc import Mapping

from clever.errors.exceptions import ConfigurationError

NO_CREDENTIALS_MESSAGE = (
    "No API key provided. (HINT: set your API key using "
    '"clever.configure(api_key=<API-KEY>)" or your token using '
    '"clever.configure(token=<TOKEN>)", set CLEVER_API_KEY or CLEVER_TOKEN '
    "in the environment, or pass a district token to the call)"
)


def has_authorization_header(headers: Mapping[str, str] | None) -> bool:
    if not headers:
        return False
    return any(name.lower() == "authorization" for name in headers)


def ensure_authorized(config, headers: Mapping[str, str] | None = None) -> None:
    """Raise ConfigurationError unless some credential is available.

    Any one of the configured api key, the configured token, or an
    ``Authorization`` header supplied by the caller is enough.

    Args:
        config: The Configuration used for the request.
        headers: Headers supplied by the caller for this request.

    Raises:
        ConfigurationError: If no credential is available.
    """
    if config.api_key or config.token or has_authorization_header(headers):
        return
    raise ConfigurationError(NO_CREDENTIALS_MESSAGE)
