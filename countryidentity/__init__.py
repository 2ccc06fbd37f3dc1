"""Country Identity - ISO 3166-1 codes and localized country names

Public API for converting between country code formats and for looking up
country names in registered languages.

Usage:
    from countryidentity import load_locale, get_name, get_code, to_alpha3

    # Register shipped name data for a language
    load_locale("es")

    # Resolve names
    get_name("ES", "es")                      # Returns: 'España'
    get_name(724, "es", select="all")         # Returns: ['España', ...]
    get_code("Argentina", "es", type="alpha3")  # Returns: 'ARG'
    get_code("Mexico", "es", simple=True)     # Returns: 'MX' (accent-insensitive)

    # Normalize codes
    to_alpha2("USA")                          # Returns: 'US'
    to_alpha3(840)                            # Returns: 'USA'
    alpha2_to_numeric("af")                   # Returns: '004'

Custom name data can be registered directly:

    register_locale({"locale": "xx", "countries": {"ES": ["Name", "Alias"]}})
"""

__version__ = "0.0.1"

# ============================================================================
# Code Table & Conversion API
# ============================================================================

from .codes.codetable import (
    CodeEntry,               # One (alpha2, alpha3, numeric) triple
    CodeTable,               # Immutable indexed code table
    load_codes,              # Load (cached) code table
)

from .codes.codeapi import (
    alpha2_to_alpha3,        # 'ES' -> 'ESP'
    alpha3_to_alpha2,        # 'ESP' -> 'ES'
    alpha2_to_numeric,       # 'ES' -> '724'
    alpha3_to_numeric,       # 'ESP' -> '724'
    numeric_to_alpha2,       # 724 / '724' -> 'ES'
    numeric_to_alpha3,       # 724 / '724' -> 'ESP'
    to_alpha2,               # Any format -> Alpha-2
    to_alpha3,               # Any format -> Alpha-3
    is_valid,                # Does the code normalize in any format?
    get_alpha2_codes,        # {alpha2: alpha3}
    get_alpha3_codes,        # {alpha3: alpha2}
    get_numeric_codes,       # {numeric: alpha2}
    list_countries,          # Code table as a DataFrame
)

# ============================================================================
# Locale Registry & Loading API
# ============================================================================

from .locales.localeregistry import (
    LocaleValidationError,   # Invalid locale data
    LocaleRecord,            # Validated locale data
    LocaleRegistry,          # Injectable registry container
    default_registry,        # Process-wide registry
    register_locale,         # Register/replace names for a language
    langs,                   # Registered language tags
)

from .locales.localeloader import (
    UnsupportedLocaleError,  # No shipped data for a language
    get_supported_languages, # Language tags shipped with the package
    import_locale,           # Read shipped data without registering
    load_locale,             # Read shipped data and register it
    load_locales,            # Load several (default: all) languages
)

# ============================================================================
# Name Lookup API
# ============================================================================

from .names.nameapi import (
    get_name,                # Code -> localized name
    get_names,               # All names for a language
    get_code,                # Localized name -> code
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "get_name",             # Code -> localized name
    "get_code",             # Localized name -> code
    "to_alpha2",            # Normalize any code to Alpha-2
    "to_alpha3",            # Normalize any code to Alpha-3
    "register_locale",      # Register names for a language
    "load_locale",          # Register shipped names for a language

    # ========================================================================
    # Code Conversion
    # ========================================================================
    "CodeEntry",
    "CodeTable",
    "load_codes",
    "alpha2_to_alpha3",
    "alpha3_to_alpha2",
    "alpha2_to_numeric",
    "alpha3_to_numeric",
    "numeric_to_alpha2",
    "numeric_to_alpha3",
    "is_valid",
    "get_alpha2_codes",
    "get_alpha3_codes",
    "get_numeric_codes",
    "list_countries",

    # ========================================================================
    # Locales
    # ========================================================================
    "LocaleValidationError",
    "LocaleRecord",
    "LocaleRegistry",
    "default_registry",
    "langs",
    "UnsupportedLocaleError",
    "get_supported_languages",
    "import_locale",
    "load_locales",

    # ========================================================================
    # Names
    # ========================================================================
    "get_names",
]
