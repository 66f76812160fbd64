"""Pytest configuration and fixtures."""

import pytest

from hexaurl_validate import Composition, create_allowed_delimiter_rules, create_config


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test so env overrides don't leak."""
    from hexaurl_validate.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def permissive_config():
    """Config allowing hyphens and underscores anywhere."""
    return create_config(
        composition=Composition.ALPHANUMERIC_HYPHEN_UNDERSCORE,
        delimiter=create_allowed_delimiter_rules(),
    )


@pytest.fixture
def underscore_config():
    """Config allowing both delimiters with strict delimiter rules."""
    return create_config(composition=Composition.ALPHANUMERIC_HYPHEN_UNDERSCORE)
