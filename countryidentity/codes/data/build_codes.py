#!/usr/bin/env python3
"""
Build codes.csv from pycountry's ISO 3166-1 data.

This script:
1. Reads every country from pycountry (alpha_2, alpha_3, numeric)
2. Appends the user-assigned Kosovo code (XK / XKX / 383)
3. Validates that every code is well-formed and unique
4. Writes codes.csv sorted by country name, all columns as strings
"""

import sys
from pathlib import Path
from typing import List

import pandas as pd

from countryidentity.codes.codetable import CODE_COLUMNS, CodeTable

# User-assigned codes that are in common use but absent from ISO 3166-1
EXTRA_CODES = [
    {"alpha2": "XK", "alpha3": "XKX", "numeric": "383", "name": "Kosovo"},
]


def collect_rows() -> List[dict]:
    """Collect one row per country from pycountry plus EXTRA_CODES."""
    import pycountry

    rows = []
    for c in pycountry.countries:
        alpha2 = getattr(c, "alpha_2", None)
        alpha3 = getattr(c, "alpha_3", None)
        numeric = getattr(c, "numeric", None)
        if not (alpha2 and alpha3 and numeric):
            continue
        rows.append({
            "alpha2": alpha2,
            "alpha3": alpha3,
            "numeric": f"{int(numeric):03d}",
            "name": c.name,
        })

    known = {row["alpha2"] for row in rows}
    rows.extend(row for row in EXTRA_CODES if row["alpha2"] not in known)
    return rows


def main() -> int:
    output_csv = Path(__file__).parent / "codes.csv"

    rows = collect_rows()
    print(f"Processing {len(rows)} countries...")

    df = pd.DataFrame(rows).sort_values("name").reset_index(drop=True)

    # Validate data
    print("\nValidating data...")
    try:
        table = CodeTable.from_dataframe(df)
    except ValueError as e:
        print(f"\n⚠️  Validation failed: {e}")
        return 1
    print("✅ All validations passed")

    print(f"\nWriting {len(table)} codes to {output_csv}")
    df[CODE_COLUMNS].astype(str).to_csv(output_csv, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
