"""ISO 3166-1 country code table and conversions."""

from countryidentity.codes.codetable import (
    CodeEntry,
    CodeTable,
    load_codes,
    clear_cache,
)
from countryidentity.codes.codeapi import (
    alpha2_to_alpha3,
    alpha3_to_alpha2,
    alpha2_to_numeric,
    alpha3_to_numeric,
    numeric_to_alpha2,
    numeric_to_alpha3,
    to_alpha2,
    to_alpha3,
    is_valid,
    get_alpha2_codes,
    get_alpha3_codes,
    get_numeric_codes,
    list_countries,
)

__all__ = [
    "CodeEntry",
    "CodeTable",
    "load_codes",
    "clear_cache",
    "alpha2_to_alpha3",
    "alpha3_to_alpha2",
    "alpha2_to_numeric",
    "alpha3_to_numeric",
    "numeric_to_alpha2",
    "numeric_to_alpha3",
    "to_alpha2",
    "to_alpha3",
    "is_valid",
    "get_alpha2_codes",
    "get_alpha3_codes",
    "get_numeric_codes",
    "list_countries",
]
