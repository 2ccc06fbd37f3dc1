"""Country name API.

Public API for looking up localized country names by code, and country codes
by localized name. Both read from a LocaleRegistry (the process-wide default
unless one is passed) that has been populated with register_locale() or
load_locale().
"""

from typing import Dict, List, Optional, Union

from countryidentity.codes.codetable import CodeTable
from countryidentity.codes.codenormalize import to_alpha2, to_alpha3
from countryidentity.locales.localeregistry import LocaleRegistry, default_registry
from countryidentity.names.nameidentity import filter_name_by, search_country_by_name
from countryidentity.utils.normalize import normalize_name, simplify_name

CODE_TYPES = ("alpha2", "alpha3")


def _registry(registry: Optional[LocaleRegistry]) -> LocaleRegistry:
    return registry if registry is not None else default_registry()


def get_name(
    code: Union[str, int],
    lang: str,
    *,
    select: str = "official",
    registry: Optional[LocaleRegistry] = None,
    table: Optional[CodeTable] = None,
) -> Optional[Union[str, List[str]]]:
    """Get the country name in a specific language.

    Args:
        code: Country code in any format (Alpha-2, Alpha-3 or numeric)
        lang: Language tag (case-insensitive), e.g. 'es', 'en'
        select: 'official' (default), 'all' or 'alias'
        registry: Optional LocaleRegistry (default: process-wide registry)
        table: Optional CodeTable (default: packaged table)

    Returns:
        Name (or list of names for select='all'), or None if the language is
        not registered or the code is unknown

    Examples:
        >>> get_name("ES", "es")
        'España'
        >>> get_name("ES", "es", select="all")
        ['España', 'Reino de España']
        >>> get_name(724, "en")
        'Spain'
        >>> get_name("XX", "es") is None
        True
    """
    countries = _registry(registry).get(lang)
    if countries is None:
        return None

    alpha2 = to_alpha2(code, table)
    if not alpha2:
        return None

    names = countries.get(alpha2)
    if names is None:
        return None

    return filter_name_by(select, names)


def get_names(
    lang: str,
    *,
    select: str = "official",
    registry: Optional[LocaleRegistry] = None,
) -> Dict[str, Union[str, List[str]]]:
    """Get every country name registered for a language.

    Returns:
        Dict of Alpha-2 code -> selected name(s); empty if the language is
        not registered

    Examples:
        >>> get_names("es")["AR"]
        'Argentina'
    """
    countries = _registry(registry).get(lang)
    if countries is None:
        return {}

    return {code: filter_name_by(select, names) for code, names in countries.items()}


def get_code(
    name: str,
    lang: str,
    *,
    type: str = "alpha2",
    simple: bool = False,
    registry: Optional[LocaleRegistry] = None,
    table: Optional[CodeTable] = None,
) -> Optional[str]:
    """Search for a country code by its name in a specific language.

    Comparison is case-insensitive exact matching; no fuzzy matching.

    Args:
        name: Country name to search for
        lang: Language tag to search in (case-insensitive)
        type: Return format: 'alpha2' (default) or 'alpha3'
        simple: If True, ignore diacritics/accents when comparing
        registry: Optional LocaleRegistry (default: process-wide registry)
        table: Optional CodeTable (default: packaged table)

    Returns:
        Country code, or None if not found or the language is not registered

    Raises:
        ValueError: If type is not 'alpha2' or 'alpha3'

    Examples:
        >>> get_code("España", "es")
        'ES'
        >>> get_code("España", "es", type="alpha3")
        'ESP'
        >>> get_code("espana", "es", simple=True)
        'ES'
        >>> get_code("espana", "es") is None
        True
    """
    if type not in CODE_TYPES:
        raise ValueError(f"Unknown type: {type}. Use 'alpha2' or 'alpha3'")

    normalize = simplify_name if simple else normalize_name

    if not name or not isinstance(name, str):
        return None

    countries = _registry(registry).get(lang)
    if countries is None:
        return None

    alpha2 = search_country_by_name(name, countries, normalize)
    if not alpha2:
        return None

    return alpha2 if type == "alpha2" else to_alpha3(alpha2, table)


__all__ = [
    "get_name",
    "get_names",
    "get_code",
]
