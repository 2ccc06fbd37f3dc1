"""
Country name selection and search
---------------------------------

Internals behind get_name / get_code:

  filter_name_by(select, names)     pick official / alias / all from an entry
  search_country_by_name(...)       first Alpha-2 whose names match exactly

A stored entry is either a single string or a sequence where index 0 is the
official name and index 1 the alias.
"""

from typing import Callable, List, Optional, Union

from countryidentity.locales.localeregistry import CountryName, CountryNames

SELECT_OPTIONS = ("official", "all", "alias")


def filter_name_by(select: str, names: CountryName) -> Union[str, List[str]]:
    """Pick names from a stored entry.

    Args:
        select: 'official', 'all' or 'alias'
        names: A string or a sequence of strings

    Returns:
        official -> first element ('' for an empty sequence), or the string
        all      -> every element as a list ([string] for a plain string)
        alias    -> second element, else first, else ''; or the string

    Raises:
        ValueError: If select is not one of the options

    Examples:
        >>> filter_name_by("alias", ("España", "Reino de España"))
        'Reino de España'
        >>> filter_name_by("all", "España")
        ['España']
    """
    if select not in SELECT_OPTIONS:
        raise ValueError(f"Unknown select: {select}. Use 'official', 'all', or 'alias'")

    is_sequence = isinstance(names, (list, tuple))

    if select == "official":
        if is_sequence:
            return names[0] if len(names) > 0 else ""
        return names

    if select == "all":
        return list(names) if is_sequence else [names]

    # alias
    if is_sequence:
        if len(names) > 1:
            return names[1]
        return names[0] if len(names) > 0 else ""
    return names


def _matches(names: CountryName, target: str, normalize: Callable[[str], str]) -> bool:
    if isinstance(names, str):
        return normalize(names) == target
    if isinstance(names, (list, tuple)):
        return any(isinstance(n, str) and normalize(n) == target for n in names)
    return False


def search_country_by_name(
    name: str,
    countries: CountryNames,
    normalize: Callable[[str], str],
) -> Optional[str]:
    """Return the Alpha-2 key of the first entry with a matching name.

    Entries are scanned in insertion order; every name of a multi-name entry
    is compared. Matching is exact equality after ``normalize``.
    """
    target = normalize(name)

    for code, names in countries.items():
        if _matches(names, target, normalize):
            return code

    return None


__all__ = [
    "SELECT_OPTIONS",
    "filter_name_by",
    "search_country_by_name",
]
