"""Shared utilities for countryidentity package."""

from countryidentity.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    load_json_file,
    format_not_found_error,
)
from countryidentity.utils.normalize import (
    remove_diacritics,
    normalize_name,
    simplify_name,
)
from countryidentity.utils.build_utils import (
    load_yaml_file,
    write_json_file,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_parquet_or_csv",
    "load_json_file",
    "format_not_found_error",
    # Normalization
    "remove_diacritics",
    "normalize_name",
    "simplify_name",
    # Build utilities
    "load_yaml_file",
    "write_json_file",
]
