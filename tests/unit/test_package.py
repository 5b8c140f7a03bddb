"""Tests for the public package surface."""

import pytest

import clever


@pytest.mark.unit
def test_version():
    assert clever.__version__ == "0.1.0"


@pytest.mark.unit
def test_every_exported_name_resolves():
    for name in clever.__all__:
        assert hasattr(clever, name), name


@pytest.mark.unit
def test_error_hierarchy_is_exported():
    for exc_class in (
        clever.APIConnectionError,
        clever.APIError,
        clever.AuthenticationError,
        clever.ConfigurationError,
        clever.InvalidRequestError,
        clever.MalformedResponseError,
    ):
        assert issubclass(exc_class, clever.CleverError)


@pytest.mark.unit
def test_default_configuration_points_at_clever():
    config = clever.get_default_configuration()

    assert isinstance(config, clever.Configuration)
    assert config.api_base == "https://api.clever.com/v1.1/"
