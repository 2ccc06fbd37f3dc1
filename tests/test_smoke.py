"""Smoke tests - fast, lightweight tests for basic functionality.

These tests verify that the package imports successfully and core functions
are available. They run quickly (<1 second) and are suitable for CI/CD.

Run with: pytest tests/test_smoke.py
"""

import pytest


class TestPackageBasics:
    """Test basic package functionality"""

    def test_version_exists(self):
        """Test that package version is defined"""
        from countryidentity import __version__

        assert __version__ is not None
        assert isinstance(__version__, str)
        assert len(__version__) > 0

    def test_package_imports(self):
        """Test that package imports successfully"""
        import countryidentity
        assert countryidentity is not None

    def test_all_exports_resolve(self):
        """Test that every name in __all__ exists"""
        import countryidentity

        for name in countryidentity.__all__:
            assert hasattr(countryidentity, name), name


class TestAPIImports:
    """Test that all primary API functions can be imported"""

    def test_code_api_imports(self):
        """Test code API imports"""
        from countryidentity import (
            alpha2_to_alpha3,
            alpha3_to_alpha2,
            alpha2_to_numeric,
            alpha3_to_numeric,
            numeric_to_alpha2,
            numeric_to_alpha3,
            to_alpha2,
            to_alpha3,
            is_valid,
        )

        for func in (alpha2_to_alpha3, alpha3_to_alpha2, alpha2_to_numeric, alpha3_to_numeric,
                     numeric_to_alpha2, numeric_to_alpha3, to_alpha2, to_alpha3, is_valid):
            assert callable(func)

    def test_name_api_imports(self):
        """Test name and locale API imports"""
        from countryidentity import (
            register_locale,
            langs,
            get_supported_languages,
            get_name,
            get_code,
            load_locale,
        )

        assert callable(register_locale)
        assert callable(langs)
        assert callable(get_supported_languages)
        assert callable(get_name)
        assert callable(get_code)
        assert callable(load_locale)


class TestBasicFunctionality:
    """Test basic functionality without heavy operations"""

    def test_code_conversion(self):
        """Test a simple conversion"""
        from countryidentity import to_alpha3

        assert to_alpha3("ES") == "ESP"

    def test_load_and_lookup(self, default_registry):
        """Test the load -> lookup flow on the default registry"""
        from countryidentity import load_locale, get_code, get_name, langs

        load_locale("es")
        assert langs() == ["es"]
        assert get_code("Argentina", "es", type="alpha3") == "ARG"
        assert get_name("ES", "es") == "España"

    def test_register_invalid_raises(self, default_registry):
        """Test that invalid registration raises and changes nothing"""
        from countryidentity import register_locale, langs, LocaleValidationError

        with pytest.raises(LocaleValidationError):
            register_locale({})
        assert langs() == []
