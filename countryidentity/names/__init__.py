"""Localized country name lookup and search."""

from countryidentity.names.nameapi import (
    get_name,
    get_names,
    get_code,
)

__all__ = [
    "get_name",
    "get_names",
    "get_code",
]
