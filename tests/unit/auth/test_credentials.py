"""Tests for credential resolution.

The CredentialResolver feeds ``Configuration.from_env`` with Clever
credentials from explicit values, the environment, .env files and defaults.
"""

import logging

import pytest

from clever.auth import CredentialResolver
from clever.auth.exceptions import CredentialNotFoundError
from clever.errors.exceptions import ConfigurationError


class TestCredentialResolverInit:
    """Test CredentialResolver initialization."""

    def test_init_default(self):
        """Test default initialization loads .env."""
        resolver = CredentialResolver()
        assert resolver._dotenv_loaded

    def test_init_skip_dotenv(self):
        """Test initialization with dotenv loading disabled."""
        resolver = CredentialResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_init_with_custom_dotenv_path(self, tmp_path):
        """Test initialization with custom dotenv path."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("UNRELATED_SETTING=1\n")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        assert resolver._dotenv_loaded


class TestCredentialResolverResolve:
    """Test basic credential resolution."""

    def test_resolve_from_explicit_value(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert resolver.resolve(value="explicit-token") == "explicit-token"

    def test_resolve_from_environment_variable(self, monkeypatch):
        monkeypatch.setenv("CLEVER_TOKEN", "env-token")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="CLEVER_TOKEN") == "env-token"

    def test_resolve_from_dotenv_file(self, tmp_path, monkeypatch):
        """Values from the .env file are visible through the environment."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("CLEVER_API_KEY=dotenv-key\n")

        # Make monkeypatch restore the variable to "unset" after the test
        monkeypatch.setenv("CLEVER_API_KEY", "placeholder")
        monkeypatch.delenv("CLEVER_API_KEY")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))

        assert resolver.resolve(env_var_name="CLEVER_API_KEY") == "dotenv-key"

    def test_resolve_with_default_value(self):
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(env_var_name="CLEVER_API_BASE", default="https://example.test/")

        assert result == "https://example.test/"

    def test_resolve_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert resolver.resolve(env_var_name="CLEVER_TOKEN") is None

    def test_resolve_raises_when_required_and_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve(env_var_name="CLEVER_TOKEN", required=True)

        assert "Required credential not found" in str(exc_info.value)
        assert exc_info.value.env_var_name == "CLEVER_TOKEN"

    def test_missing_required_credential_is_a_configuration_error(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(ConfigurationError):
            resolver.resolve(env_var_name="CLEVER_TOKEN", required=True)


class TestCredentialResolverPriority:
    """Test credential resolution priority ordering."""

    def test_explicit_value_overrides_all(self, monkeypatch):
        monkeypatch.setenv("CLEVER_TOKEN", "env-token")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(value="explicit-token", env_var_name="CLEVER_TOKEN", default="default-token")

        assert result == "explicit-token"

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("CLEVER_TOKEN", "env-token")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="CLEVER_TOKEN", default="default-token") == "env-token"


class TestCredentialMasking:
    """Test credential masking in logs."""

    def test_credential_value_is_masked_in_debug_logs(self, caplog):
        caplog.set_level(logging.DEBUG)

        resolver = CredentialResolver(load_dotenv=False)
        resolver.resolve(value="super-secret-key-123")

        assert "super-secret-key-123" not in caplog.text
        assert "****************-123" in caplog.text

    def test_credential_masking_can_be_disabled(self, caplog):
        caplog.set_level(logging.DEBUG)

        resolver = CredentialResolver(load_dotenv=False)
        resolver.resolve(value="https://api.clever.com/v1.1/", mask_in_logs=False)

        assert "https://api.clever.com/v1.1/" in caplog.text

    def test_source_is_logged(self, caplog, monkeypatch):
        caplog.set_level(logging.DEBUG)
        monkeypatch.setenv("CLEVER_TOKEN", "env-token-value")

        CredentialResolver(load_dotenv=False).resolve(env_var_name="CLEVER_TOKEN")

        assert "environment variable 'CLEVER_TOKEN'" in caplog.text
        assert "env-token-value" not in caplog.text


class TestDotenvLoading:
    """Test one-time dotenv loading."""

    def test_dotenv_loaded_only_once(self, tmp_path):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("UNRELATED_SETTING=1\n")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        resolver._ensure_dotenv_loaded()
        resolver._ensure_dotenv_loaded()

        assert resolver._dotenv_loaded is True

    def test_dotenv_loading_error_handled_gracefully(self, tmp_path):
        """A .env path that cannot be read does not break resolution."""
        dotenv_path = tmp_path / "not_a_file"
        dotenv_path.mkdir()

        resolver = CredentialResolver(dotenv_path=str(dotenv_path))

        assert resolver._dotenv_loaded is True
        assert resolver.resolve(value="works") == "works"
