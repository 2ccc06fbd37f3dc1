"""Country code API.

Public API for converting between ISO 3166-1 Alpha-2, Alpha-3 and numeric
codes, plus enumeration of the code table.
"""

from typing import Dict, Optional

import pandas as pd

from countryidentity.codes.codetable import CodeTable, load_codes
from countryidentity.codes.codenormalize import (
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


def get_alpha2_codes(table: Optional[CodeTable] = None) -> Dict[str, str]:
    """Map every Alpha-2 code to its Alpha-3 code.

    Examples:
        >>> get_alpha2_codes()["ES"]
        'ESP'
    """
    table = table if table is not None else load_codes()
    return {entry.alpha2: entry.alpha3 for entry in table}


def get_alpha3_codes(table: Optional[CodeTable] = None) -> Dict[str, str]:
    """Map every Alpha-3 code to its Alpha-2 code.

    Examples:
        >>> get_alpha3_codes()["ESP"]
        'ES'
    """
    table = table if table is not None else load_codes()
    return {entry.alpha3: entry.alpha2 for entry in table}


def get_numeric_codes(table: Optional[CodeTable] = None) -> Dict[str, str]:
    """Map every zero-padded numeric code to its Alpha-2 code.

    Examples:
        >>> get_numeric_codes()["004"]
        'AF'
    """
    table = table if table is not None else load_codes()
    return {entry.numeric: entry.alpha2 for entry in table}


def list_countries(table: Optional[CodeTable] = None) -> pd.DataFrame:
    """List the code table as a DataFrame.

    Returns a copy with string columns alpha2, alpha3, numeric; mutating it
    does not affect lookups.

    Examples:
        >>> df = list_countries()
        >>> df[df["alpha2"] == "US"].values.tolist()
        [['US', 'USA', '840']]
    """
    table = table if table is not None else load_codes()
    return table.to_dataframe()


__all__ = [
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
