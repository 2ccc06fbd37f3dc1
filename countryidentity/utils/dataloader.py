"""Shared data loading utilities for the codes and locales modules.

This module provides common data loading patterns with fallback search
across module-local data and development directories.
"""

import json
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd


def find_data_file(
    module_file: str,
    subdirectory: str,
    filenames: List[str],
    search_dev_tables: bool = True,
    module_local_data: bool = True,
) -> Optional[Path]:
    """Find data file by searching standard locations.

    Search priority:
    1. Module-local data: {module_dir}/data/ (if module_local_data=True)
    2. Development data: tables/{subdirectory}/ (if search_dev_tables=True)

    Args:
        module_file: __file__ from the calling module (e.g., __file__)
        subdirectory: Subdirectory name (e.g., 'codes', 'locales')
        filenames: List of candidate filenames to search for (e.g., ['codes.parquet', 'codes.csv'])
        search_dev_tables: Whether to search tables/ directory for dev data
        module_local_data: If True, search module_dir/data/ first

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From codes/codetable.py (data is in codes/data/)
        >>> path = find_data_file(__file__, 'codes', ['codes.parquet', 'codes.csv'])
    """
    # Priority 0: Module-local data (e.g., countryidentity/codes/data/)
    if module_local_data:
        data_dir = Path(module_file).parent / "data"
        for filename in filenames:
            p = data_dir / filename
            if p.exists():
                return p

    # Priority 1: Development data (built locally)
    if search_dev_tables:
        pkg_dir = Path(module_file).parent.parent
        tables_dir = pkg_dir.parent / "tables" / subdirectory
        for filename in filenames:
            p = tables_dir / filename
            if p.exists():
                return p

    return None


def load_parquet_or_csv(file_path: Path) -> pd.DataFrame:
    """Load DataFrame from parquet or CSV file based on extension.

    CSV columns are read as strings with NA detection disabled, so codes
    like Namibia's ``NA`` or ``004`` survive untouched.

    Args:
        file_path: Path to parquet or CSV file

    Returns:
        Loaded DataFrame

    Raises:
        ValueError: If file extension is not .parquet or .csv
    """
    if file_path.suffix == ".parquet":
        return pd.read_parquet(file_path).astype(str)
    elif file_path.suffix == ".csv":
        return pd.read_csv(file_path, dtype=str, keep_default_na=False)
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .parquet or .csv")


def load_json_file(path: Path):
    """Load and parse a UTF-8 JSON file.

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subdirectory: Data subdirectory name (e.g., 'codes', 'locales')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_parquet_or_csv",
    "load_json_file",
    "format_not_found_error",
]
