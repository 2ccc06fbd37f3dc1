"""Conversion between ISO 3166-1 code representations.

Every function returns None for unrecognized or malformed input and never
raises. Each accepts an optional ``table`` (a CodeTable); by default the
packaged table from load_codes() is used.

Format auto-detection (to_alpha2 / to_alpha3) classifies the input first:

    numeric  -> int, or a string of ASCII digits
    alpha2   -> any other string of length 2
    alpha3   -> any other string of length 3
    invalid  -> everything else (None, "", other lengths, other types)

When the input format already matches the output format, the upper-cased
input is returned without consulting the table. Cross-format conversions
always require a table hit.
"""

import numbers
import re
from enum import Enum
from typing import Optional, Union

from countryidentity.codes.codetable import CodeTable, load_codes

Code = Union[str, int]

_DIGITS_RE = re.compile(r"[0-9]+")


class CodeFormat(Enum):
    NUMERIC = "numeric"
    ALPHA2 = "alpha2"
    ALPHA3 = "alpha3"
    INVALID = "invalid"


def _table(table: Optional[CodeTable]) -> CodeTable:
    return table if table is not None else load_codes()


def _as_number(code) -> Optional[int]:
    # bool is an int subclass but never a country code
    if isinstance(code, bool):
        return None
    if isinstance(code, numbers.Integral):
        return int(code)
    if isinstance(code, float) and code.is_integer():
        return int(code)
    return None


def classify_code(code) -> CodeFormat:
    """Detect which code representation an input uses.

    Examples:
        >>> classify_code(724)
        <CodeFormat.NUMERIC: 'numeric'>
        >>> classify_code("es")
        <CodeFormat.ALPHA2: 'alpha2'>
        >>> classify_code("ESP")
        <CodeFormat.ALPHA3: 'alpha3'>
        >>> classify_code("Spain")
        <CodeFormat.INVALID: 'invalid'>
    """
    if code is None or code == "":
        return CodeFormat.INVALID

    if isinstance(code, str):
        if _DIGITS_RE.fullmatch(code):
            return CodeFormat.NUMERIC
        if len(code) == 2:
            return CodeFormat.ALPHA2
        if len(code) == 3:
            return CodeFormat.ALPHA3
        return CodeFormat.INVALID

    if _as_number(code) is not None:
        return CodeFormat.NUMERIC

    return CodeFormat.INVALID


def format_numeric_code(code) -> Optional[str]:
    """Render a numeric code as the 3-character key used by the table.

    Shorter values are left-padded with '0'; longer values keep their last
    three characters.

    Examples:
        >>> format_numeric_code(9)
        '009'
        >>> format_numeric_code("724")
        '724'
    """
    number = _as_number(code)
    if number is not None:
        code = str(number)
    elif not isinstance(code, str):
        return None

    return ("000" + code)[-3:]


def alpha2_to_alpha3(code: str, table: Optional[CodeTable] = None) -> Optional[str]:
    """Convert an Alpha-2 code (case-insensitive) to Alpha-3.

    Examples:
        >>> alpha2_to_alpha3("es")
        'ESP'
        >>> alpha2_to_alpha3("XX") is None
        True
    """
    if not isinstance(code, str):
        return None
    entry = _table(table).by_alpha2.get(code.upper())
    return entry.alpha3 if entry else None


def alpha3_to_alpha2(code: str, table: Optional[CodeTable] = None) -> Optional[str]:
    """Convert an Alpha-3 code (case-insensitive) to Alpha-2."""
    if not isinstance(code, str):
        return None
    entry = _table(table).by_alpha3.get(code.upper())
    return entry.alpha2 if entry else None


def alpha2_to_numeric(code: str, table: Optional[CodeTable] = None) -> Optional[str]:
    """Convert an Alpha-2 code to its zero-padded numeric code.

    Examples:
        >>> alpha2_to_numeric("us")
        '840'
    """
    if not isinstance(code, str):
        return None
    entry = _table(table).by_alpha2.get(code.upper())
    return entry.numeric if entry else None


def alpha3_to_numeric(code: str, table: Optional[CodeTable] = None) -> Optional[str]:
    """Convert an Alpha-3 code to its zero-padded numeric code."""
    a2 = alpha3_to_alpha2(code, table)
    return alpha2_to_numeric(a2, table) if a2 else None


def numeric_to_alpha2(code: Code, table: Optional[CodeTable] = None) -> Optional[str]:
    """Convert a numeric code (string or int) to Alpha-2.

    Examples:
        >>> numeric_to_alpha2(724)
        'ES'
        >>> numeric_to_alpha2("9") == numeric_to_alpha2("009")
        True
    """
    padded = format_numeric_code(code)
    if padded is None:
        return None
    entry = _table(table).by_numeric.get(padded)
    return entry.alpha2 if entry else None


def numeric_to_alpha3(code: Code, table: Optional[CodeTable] = None) -> Optional[str]:
    """Convert a numeric code (string or int) to Alpha-3."""
    a2 = numeric_to_alpha2(code, table)
    return alpha2_to_alpha3(a2, table) if a2 else None


def to_alpha2(code: Code, table: Optional[CodeTable] = None) -> Optional[str]:
    """Normalize a code in any format to Alpha-2.

    A 2-letter input is upper-cased and returned as-is, without checking
    that it exists in the table. Use is_valid() or alpha2_to_alpha3() when
    existence matters.

    Examples:
        >>> to_alpha2("ES")
        'ES'
        >>> to_alpha2("esp")
        'ES'
        >>> to_alpha2(724)
        'ES'
        >>> to_alpha2("724")
        'ES'
    """
    fmt = classify_code(code)

    if fmt is CodeFormat.NUMERIC:
        return numeric_to_alpha2(code, table)
    if fmt is CodeFormat.ALPHA2:
        return code.upper()
    if fmt is CodeFormat.ALPHA3:
        return alpha3_to_alpha2(code, table)
    return None


def to_alpha3(code: Code, table: Optional[CodeTable] = None) -> Optional[str]:
    """Normalize a code in any format to Alpha-3.

    A 3-letter input is upper-cased and returned as-is, without checking
    that it exists in the table.

    Examples:
        >>> to_alpha3("ES")
        'ESP'
        >>> to_alpha3("esp")
        'ESP'
        >>> to_alpha3(840)
        'USA'
    """
    fmt = classify_code(code)

    if fmt is CodeFormat.NUMERIC:
        return numeric_to_alpha3(code, table)
    if fmt is CodeFormat.ALPHA2:
        return alpha2_to_alpha3(code, table)
    if fmt is CodeFormat.ALPHA3:
        return code.upper()
    return None


def is_valid(code: Code, table: Optional[CodeTable] = None) -> bool:
    """Return True if the code normalizes in any supported format.

    Examples:
        >>> is_valid("ES"), is_valid("ESP"), is_valid(724)
        (True, True, True)
        >>> is_valid(""), is_valid(None), is_valid("Spain")
        (False, False, False)
    """
    if code is None or code == "":
        return False

    return bool(
        to_alpha2(code, table)
        or to_alpha3(code, table)
        or numeric_to_alpha2(code, table)
    )


__all__ = [
    "CodeFormat",
    "classify_code",
    "format_numeric_code",
    "alpha2_to_alpha3",
    "alpha3_to_alpha2",
    "alpha2_to_numeric",
    "alpha3_to_numeric",
    "numeric_to_alpha2",
    "numeric_to_alpha3",
    "to_alpha2",
    "to_alpha3",
    "is_valid",
]
