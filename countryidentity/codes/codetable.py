"""ISO 3166-1 code table.

Loads the fixed table of (alpha2, alpha3, numeric) triples and indexes it by
each code kind. The table is built once and never mutated.
"""

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

import pandas as pd

from countryidentity.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)

logger = logging.getLogger(__name__)

CODES_PATH_ENV = "COUNTRYIDENTITY_CODES_PATH"
CODE_COLUMNS = ["alpha2", "alpha3", "numeric"]

_ALPHA2_RE = re.compile(r"[A-Z]{2}")
_ALPHA3_RE = re.compile(r"[A-Z]{3}")
_NUMERIC_RE = re.compile(r"[0-9]{3}")


@dataclass(frozen=True)
class CodeEntry:
    """One recognized country: its Alpha-2, Alpha-3 and numeric codes."""

    alpha2: str
    alpha3: str
    numeric: str


class CodeTable:
    """Immutable collection of CodeEntry rows, indexed by every code kind.

    Raises ValueError at construction if a row is malformed or if two rows
    share an alpha2, alpha3 or numeric value.
    """

    def __init__(self, entries: Iterable[CodeEntry]):
        by_alpha2 = {}
        by_alpha3 = {}
        by_numeric = {}

        for entry in entries:
            if not (
                _ALPHA2_RE.fullmatch(entry.alpha2 or "")
                and _ALPHA3_RE.fullmatch(entry.alpha3 or "")
                and _NUMERIC_RE.fullmatch(entry.numeric or "")
            ):
                raise ValueError(f"Malformed code table row: {entry}")

            for index, key in (
                (by_alpha2, entry.alpha2),
                (by_alpha3, entry.alpha3),
                (by_numeric, entry.numeric),
            ):
                if key in index:
                    raise ValueError(f"Duplicate code '{key}' in code table: {index[key]} and {entry}")
                index[key] = entry

        self._entries = tuple(by_alpha2.values())
        self._by_alpha2 = MappingProxyType(by_alpha2)
        self._by_alpha3 = MappingProxyType(by_alpha3)
        self._by_numeric = MappingProxyType(by_numeric)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "CodeTable":
        """Build a table from a DataFrame with alpha2/alpha3/numeric columns."""
        missing = [col for col in CODE_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(f"Missing required columns: {missing}")

        return cls(
            CodeEntry(
                alpha2=str(row.alpha2).strip().upper(),
                alpha3=str(row.alpha3).strip().upper(),
                numeric=str(row.numeric).strip().zfill(3),
            )
            for row in df[CODE_COLUMNS].itertuples(index=False)
        )

    @classmethod
    def from_triples(cls, triples: Iterable) -> "CodeTable":
        """Build a table from [alpha2, alpha3, numeric] triples."""
        return cls(CodeEntry(*triple) for triple in triples)

    @property
    def by_alpha2(self) -> Mapping[str, CodeEntry]:
        return self._by_alpha2

    @property
    def by_alpha3(self) -> Mapping[str, CodeEntry]:
        return self._by_alpha3

    @property
    def by_numeric(self) -> Mapping[str, CodeEntry]:
        return self._by_numeric

    def to_dataframe(self) -> pd.DataFrame:
        """Return a fresh DataFrame copy of the table."""
        return pd.DataFrame(
            [(e.alpha2, e.alpha3, e.numeric) for e in self._entries],
            columns=CODE_COLUMNS,
        )

    def __iter__(self) -> Iterator[CodeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CodeTable({len(self)} entries)"


@lru_cache(maxsize=1)
def load_codes(path: Optional[Union[str, Path]] = None) -> CodeTable:
    """Load the ISO 3166-1 code table into memory.

    Uses LRU cache to load the table once and reuse it.

    Loading priority:
    1. Explicit path if provided
    2. COUNTRYIDENTITY_CODES_PATH environment variable
    3. Module-local data (codes/data/codes.parquet or codes.csv)

    Args:
        path: Optional path to a .csv or .parquet file with columns
              alpha2, alpha3, numeric

    Returns:
        CodeTable indexed by alpha2, alpha3 and numeric code

    Raises:
        FileNotFoundError: If no code table is available
        ValueError: If the file format is unsupported or the table is malformed

    Examples:
        >>> table = load_codes()
        >>> table.by_alpha2["ES"]
        CodeEntry(alpha2='ES', alpha3='ESP', numeric='724')
    """
    if path is None:
        path = os.environ.get(CODES_PATH_ENV) or None

    if path is None:
        found_path = find_data_file(
            module_file=__file__,
            subdirectory="codes",
            filenames=["codes.parquet", "codes.csv"],
            search_dev_tables=False,
        )

        if found_path is None:
            codes_dir = Path(__file__).parent / "data"
            error_msg = format_not_found_error(
                subdirectory="codes",
                searched_locations=[
                    ("Environment variable", os.environ.get(CODES_PATH_ENV, "Not set")),
                    ("Module-local data", codes_dir),
                ],
                fix_instructions=[
                    "Run countryidentity/codes/data/build_codes.py to generate it.",
                    f"Or set {CODES_PATH_ENV} to point to a codes.csv file.",
                ],
            )
            raise FileNotFoundError(error_msg)

        path = found_path

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Code table not found: {path}")

    table = CodeTable.from_dataframe(load_parquet_or_csv(path))
    logger.info(f"Loaded {len(table)} country codes from {path}")
    return table


def clear_cache():
    """Clear the LRU cache for load_codes.

    Useful for testing or when the code table needs to be reloaded.
    """
    load_codes.cache_clear()
    logger.info("Cleared code table cache")


__all__ = [
    "CodeEntry",
    "CodeTable",
    "load_codes",
    "clear_cache",
]
