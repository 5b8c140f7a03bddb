"""Credential resolution for the Clever client.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Example:
    ```python
    from clever.auth import CredentialResolver

    resolver = CredentialResolver()
    token = resolver.resolve(env_var_name="CLEVER_TOKEN")
    ```

Resolved values are only logged masked, with the source they came from.
"""

import logging
import os
from threading import Lock

from dotenv import load_dotenv

from clever.auth.exceptions import CredentialNotFoundError
from clever.auth.masking import mask_sensitive

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve credentials from explicit values, the environment and .env files.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock guarding the one-time .env load.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a credential from multiple sources.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable to check.
            default: Default value if not found elsewhere.
            required: Raise CredentialNotFoundError when nothing resolves.
            mask_in_logs: Mask the value in debug logs. Disable for
                non-sensitive settings such as timeouts.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required=True and no source provides a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = mask_sensitive(result) if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result
