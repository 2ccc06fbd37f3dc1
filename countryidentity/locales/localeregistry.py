"""Registry of localized country names.

A LocaleRegistry maps lower-cased language tags to a read-only snapshot of
the country names registered for that language. Registration is the only
mutation: it validates the record, copies it, and swaps in a rebuilt map in
a single assignment so readers never observe a partial update.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

logger = logging.getLogger(__name__)

CountryName = Union[str, Sequence[str]]
CountryNames = Mapping[str, CountryName]


class LocaleValidationError(TypeError):
    """Raised when a locale record is structurally invalid."""


@dataclass(frozen=True)
class LocaleRecord:
    """Validated locale data: a language tag and its country-name mapping."""

    locale: str
    countries: CountryNames


def _freeze_name(value: Any) -> Any:
    # Lists and tuples become tuples; other values are kept as given
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return value


def _snapshot(countries: Mapping) -> CountryNames:
    return MappingProxyType({code: _freeze_name(value) for code, value in countries.items()})


def validate_locale_record(record: Any) -> LocaleRecord:
    """Parse raw locale data into a LocaleRecord.

    Accepts a mapping with 'locale' and 'countries' keys, or a LocaleRecord.

    Args:
        record: e.g. {"locale": "es", "countries": {"ES": "España"}}

    Returns:
        LocaleRecord holding a private, read-only copy of the countries

    Raises:
        LocaleValidationError: If record is not a mapping, locale is not a
            non-empty string, or countries is not a mapping
    """
    if isinstance(record, LocaleRecord):
        locale, countries = record.locale, record.countries
    elif isinstance(record, Mapping):
        locale, countries = record.get("locale"), record.get("countries")
    else:
        raise LocaleValidationError("locale data must be a mapping")

    if not locale or not isinstance(locale, str):
        raise LocaleValidationError("Missing or invalid locale data 'locale'")

    if countries is None or not isinstance(countries, Mapping):
        raise LocaleValidationError("Missing or invalid locale data 'countries'")

    return LocaleRecord(locale=locale, countries=_snapshot(countries))


class LocaleRegistry:
    """Process-local store of registered country-name locales.

    Examples:
        >>> registry = LocaleRegistry()
        >>> registry.register_locale({"locale": "ES", "countries": {"ES": "España"}})
        >>> registry.langs()
        ['es']
        >>> registry.get("Es")["ES"]
        'España'
    """

    def __init__(self):
        self._locales: Mapping[str, CountryNames] = MappingProxyType({})

    def register_locale(self, record: Any) -> None:
        """Register (or replace) the country names for one language.

        Re-registering a tag replaces its previous names entirely; other
        tags are unaffected. On validation failure nothing changes.

        Raises:
            LocaleValidationError: If record is invalid
        """
        parsed = validate_locale_record(record)
        key = parsed.locale.lower()

        locales: Dict[str, CountryNames] = dict(self._locales)
        replaced = key in locales
        locales[key] = parsed.countries
        self._locales = MappingProxyType(locales)

        logger.info(
            f"{'Replaced' if replaced else 'Registered'} locale '{key}' "
            f"with {len(parsed.countries)} countries"
        )

    def get(self, lang: str) -> Optional[CountryNames]:
        """Return the registered names for a language, or None."""
        if not isinstance(lang, str) or not lang:
            return None
        return self._locales.get(lang.lower())

    def langs(self) -> List[str]:
        """Return registered language tags in registration order."""
        return list(self._locales)

    def __contains__(self, lang) -> bool:
        return self.get(lang) is not None

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return f"LocaleRegistry(langs={self.langs()})"


_DEFAULT_REGISTRY = LocaleRegistry()


def default_registry() -> LocaleRegistry:
    """Return the process-wide registry used when no registry is passed."""
    return _DEFAULT_REGISTRY


def _registry(registry: Optional[LocaleRegistry]) -> LocaleRegistry:
    return registry if registry is not None else _DEFAULT_REGISTRY


def register_locale(record: Any, *, registry: Optional[LocaleRegistry] = None) -> None:
    """Register locale data with the default (or given) registry.

    Examples:
        >>> register_locale({
        ...     "locale": "es",
        ...     "countries": {"ES": "España", "US": "Estados Unidos"},
        ... })
    """
    _registry(registry).register_locale(record)


def langs(*, registry: Optional[LocaleRegistry] = None) -> List[str]:
    """Return all currently registered language tags.

    Examples:
        >>> langs()
        ['es', 'en']
    """
    return _registry(registry).langs()


__all__ = [
    "CountryName",
    "CountryNames",
    "LocaleValidationError",
    "LocaleRecord",
    "LocaleRegistry",
    "validate_locale_record",
    "default_registry",
    "register_locale",
    "langs",
]
