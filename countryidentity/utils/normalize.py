"""Shared text normalization utilities.

Country-name comparison is exact string equality after one of two
normalizations: lower-casing only, or lower-casing followed by diacritic
removal ("simple" matching).
"""

import unicodedata

# Latin letters that carry a diacritic or ligature but have no Unicode
# decomposition, so NFKD alone leaves them untouched.
_TRANSLITERATIONS = {
    "ß": "ss",
    "ẞ": "SS",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "ł": "l",
    "Ł": "L",
    "đ": "d",
    "Đ": "D",
    "ð": "d",
    "Ð": "D",
    "þ": "th",
    "Þ": "TH",
    "ħ": "h",
    "Ħ": "H",
    "ı": "i",
    "ŀ": "l",
    "Ŀ": "L",
    "ŧ": "t",
    "Ŧ": "T",
}
_TRANSLITERATION_TABLE = str.maketrans(_TRANSLITERATIONS)


def _is_latin(ch: str) -> bool:
    return unicodedata.name(ch, "").startswith("LATIN")


def remove_diacritics(s: str) -> str:
    """Strip accents and other diacritical marks from text.

    Transformations:
      1. Transliterate letters with no decomposition (ß, æ, ø, ł, ...)
      2. Unicode normalization (NFKD)
      3. Drop combining marks that follow a Latin letter
      4. Recompose (NFC)

    Unlike an ASCII round-trip, characters from non-Latin scripts are kept,
    including their own marks (Cyrillic breve, kana voicing).

    Examples:
        >>> remove_diacritics("España")
        'Espana'

        >>> remove_diacritics("Côte d'Ivoire")
        "Cote d'Ivoire"

        >>> remove_diacritics("Österreich")
        'Osterreich'
    """
    if not s:
        return ""

    s = s.translate(_TRANSLITERATION_TABLE)
    s = unicodedata.normalize("NFKD", s)
    kept = []
    base = ""
    for ch in s:
        if not unicodedata.combining(ch):
            base = ch
        elif _is_latin(base):
            continue
        kept.append(ch)
    s = "".join(kept)
    return unicodedata.normalize("NFC", s)


def normalize_name(s: str) -> str:
    """Lower-case a name for exact comparison.

    Examples:
        >>> normalize_name("España")
        'españa'
    """
    return s.lower()


def simplify_name(s: str) -> str:
    """Lower-case a name and strip its diacritics.

    Examples:
        >>> simplify_name("España")
        'espana'

        >>> simplify_name("ESPAÑA")
        'espana'
    """
    return remove_diacritics(s.lower())


__all__ = [
    "remove_diacritics",
    "normalize_name",
    "simplify_name",
]
