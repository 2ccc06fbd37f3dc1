"""Shared test fixtures and utilities for countryidentity tests."""

import pytest

from countryidentity.codes.codetable import CodeTable, clear_cache
from countryidentity.locales import localeregistry
from countryidentity.locales.localeregistry import LocaleRegistry


@pytest.fixture
def registry():
    """Fixture providing an empty, isolated LocaleRegistry."""
    return LocaleRegistry()


@pytest.fixture
def default_registry(monkeypatch):
    """Fixture replacing the process-wide registry with a fresh one.

    Use for tests that exercise the module-level API without passing
    ``registry=``, so registrations do not leak between tests.
    """
    fresh = LocaleRegistry()
    monkeypatch.setattr(localeregistry, "_DEFAULT_REGISTRY", fresh)
    return fresh


@pytest.fixture
def spain_locale():
    """Fixture providing Spanish locale data with a multi-name entry."""
    return {
        "locale": "es",
        "countries": {
            "ES": ["España", "Reino de España"],
            "US": "Estados Unidos",
            "MX": "México",
            "AR": "Argentina",
        },
    }


@pytest.fixture
def small_table():
    """Fixture providing a three-country CodeTable."""
    return CodeTable.from_triples([
        ("US", "USA", "840"),
        ("ES", "ESP", "724"),
        ("AF", "AFG", "004"),
    ])


@pytest.fixture
def fresh_code_cache():
    """Fixture clearing the code table cache before and after a test."""
    clear_cache()
    yield
    clear_cache()
