"""Locale data loader.

Finds per-language JSON name files and registers them. Files are looked up
as ``<locales dir>/<lang>.json`` where the directory is, in order:

1. The explicit ``locales_dir`` argument
2. The COUNTRYIDENTITY_LOCALES_DIR environment variable
3. Package data (countryidentity/locales/data/langs/)
"""

import json
import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Union

from countryidentity.locales.localeregistry import (
    LocaleRecord,
    LocaleRegistry,
    LocaleValidationError,
    register_locale,
    validate_locale_record,
)
from countryidentity.utils.build_utils import load_yaml_file
from countryidentity.utils.dataloader import load_json_file

logger = logging.getLogger(__name__)

LOCALES_DIR_ENV = "COUNTRYIDENTITY_LOCALES_DIR"

_DATA_DIR = Path(__file__).parent / "data"
_SUPPORTED_LOCALES_FILE = _DATA_DIR / "supported_locales.yaml"

# Language tags are used as file names; keep them to tag-like characters
_LANG_RE = re.compile(r"[A-Za-z0-9_-]+")


class UnsupportedLocaleError(LookupError):
    """Raised when no name file exists for a requested language."""


def resolve_locales_dir(path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the directory holding <lang>.json files."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(LOCALES_DIR_ENV)
    if env_path:
        return Path(env_path)

    return _DATA_DIR / "langs"


@lru_cache(maxsize=1)
def _supported_languages() -> tuple:
    data = load_yaml_file(_SUPPORTED_LOCALES_FILE) or {}
    return tuple(data.get("locales", []))


def get_supported_languages() -> List[str]:
    """Return the language tags this distribution ships name files for.

    Static configuration, independent of what has been registered.

    Examples:
        >>> get_supported_languages()
        ['de', 'en', 'es', 'fr']
    """
    return list(_supported_languages())


def import_locale(
    lang: str,
    *,
    locales_dir: Optional[Union[str, Path]] = None,
) -> LocaleRecord:
    """Read the name file for one language without registering it.

    Args:
        lang: Language tag, e.g. 'es'
        locales_dir: Optional directory overriding the default search

    Returns:
        Validated LocaleRecord

    Raises:
        UnsupportedLocaleError: If no <lang>.json file exists
        LocaleValidationError: If the file is not valid locale data
    """
    if not isinstance(lang, str) or not _LANG_RE.fullmatch(lang):
        raise UnsupportedLocaleError(f"Unsupported locale: {lang}")

    directory = resolve_locales_dir(locales_dir)
    path = directory / f"{lang}.json"
    if not path.exists():
        # Shipped files are named in lower case
        path = directory / f"{lang.lower()}.json"
    if not path.exists():
        raise UnsupportedLocaleError(f"Unsupported locale: {lang}")

    try:
        data = load_json_file(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise LocaleValidationError(f"Invalid JSON in {path}: {e}") from e

    record = validate_locale_record(data)
    logger.debug(f"Read locale '{record.locale}' from {path}")
    return record


def load_locale(
    lang: str,
    *,
    registry: Optional[LocaleRegistry] = None,
    locales_dir: Optional[Union[str, Path]] = None,
) -> LocaleRecord:
    """Read the name file for a language and register it.

    Examples:
        >>> record = load_locale("es")
        >>> get_code("Argentina", "es", type="alpha3")
        'ARG'

    Raises:
        UnsupportedLocaleError: If no <lang>.json file exists
        LocaleValidationError: If the file is not valid locale data
    """
    record = import_locale(lang, locales_dir=locales_dir)
    register_locale(record, registry=registry)
    return record


def load_locales(
    langs: Optional[Iterable[str]] = None,
    *,
    registry: Optional[LocaleRegistry] = None,
    locales_dir: Optional[Union[str, Path]] = None,
) -> List[str]:
    """Load and register several languages (default: every supported one).

    Returns:
        The registry keys of the loaded languages, in load order
    """
    if langs is None:
        langs = get_supported_languages()

    loaded = []
    for lang in langs:
        record = load_locale(lang, registry=registry, locales_dir=locales_dir)
        loaded.append(record.locale.lower())

    logger.info(f"Loaded {len(loaded)} locales: {', '.join(loaded)}")
    return loaded


__all__ = [
    "UnsupportedLocaleError",
    "resolve_locales_dir",
    "get_supported_languages",
    "import_locale",
    "load_locale",
    "load_locales",
]
