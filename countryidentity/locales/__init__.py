"""Localized country-name registry and locale data loading."""

from countryidentity.locales.localeregistry import (
    CountryName,
    LocaleValidationError,
    LocaleRecord,
    LocaleRegistry,
    validate_locale_record,
    default_registry,
    register_locale,
    langs,
)
from countryidentity.locales.localeloader import (
    UnsupportedLocaleError,
    get_supported_languages,
    import_locale,
    load_locale,
    load_locales,
)

__all__ = [
    "CountryName",
    "LocaleValidationError",
    "LocaleRecord",
    "LocaleRegistry",
    "validate_locale_record",
    "default_registry",
    "register_locale",
    "langs",
    "UnsupportedLocaleError",
    "get_supported_languages",
    "import_locale",
    "load_locale",
    "load_locales",
]
