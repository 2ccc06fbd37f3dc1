#!/usr/bin/env python3
"""
Build langs/<lang>.json name files from pycountry's ISO 3166-1 translations.

This script:
1. Loads the supported language list from supported_locales.yaml
2. Translates every country name in codes.csv through pycountry's gettext
   catalogue for each language
3. Keeps curated multi-name entries (lists) already present in the file
4. Writes langs/<lang>.json and reports untranslated countries

Usage:
    python countryidentity/locales/data/build_locales.py [lang ...]
"""

import gettext
import sys
from pathlib import Path
from typing import Dict, List

from countryidentity.codes.codetable import load_codes
from countryidentity.utils.build_utils import load_yaml_file, write_json_file
from countryidentity.utils.dataloader import load_json_file

DATA_DIR = Path(__file__).parent
LANGS_DIR = DATA_DIR / "langs"

# Names pycountry does not carry
EXTRA_NAMES = {
    "XK": "Kosovo",
}


def translate_countries(lang: str) -> Dict[str, str]:
    """Return Alpha-2 -> country name translated into ``lang``."""
    import pycountry

    if lang == "en":
        translate = lambda s: s  # noqa: E731
    else:
        catalogue = gettext.translation("iso3166-1", pycountry.LOCALES_DIR, languages=[lang])
        translate = catalogue.gettext

    names = {}
    for c in pycountry.countries:
        names[c.alpha_2] = translate(getattr(c, "common_name", None) or c.name)
    return names


def build_locale(lang: str) -> List[str]:
    """Write langs/<lang>.json; return the codes left without a name."""
    path = LANGS_DIR / f"{lang}.json"
    existing = load_json_file(path)["countries"] if path.exists() else {}
    translated = translate_countries(lang)

    countries = {}
    missing = []
    for entry in load_codes():
        curated = existing.get(entry.alpha2)
        if isinstance(curated, list):
            countries[entry.alpha2] = curated
        elif entry.alpha2 in translated:
            countries[entry.alpha2] = translated[entry.alpha2]
        elif entry.alpha2 in EXTRA_NAMES:
            countries[entry.alpha2] = EXTRA_NAMES[entry.alpha2]
        elif curated:
            countries[entry.alpha2] = curated
        else:
            missing.append(entry.alpha2)

    write_json_file(path, {"locale": lang, "countries": countries})
    print(f"Wrote {len(countries)} names to {path}")
    return missing


def main(argv: List[str]) -> int:
    langs = argv or load_yaml_file(DATA_DIR / "supported_locales.yaml")["locales"]

    issues = {}
    for lang in langs:
        missing = build_locale(lang)
        if missing:
            issues[lang] = missing

    if issues:
        print("\n⚠️  Untranslated countries:")
        for lang, codes in issues.items():
            print(f"  - {lang}: {', '.join(codes)}")
        return 1

    print("✅ All locales complete")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
