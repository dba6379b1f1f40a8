from __future__ import annotations

"""
Solar term (二十四节气) check script.

Uses:
- nongli.core.solar_terms.solar_term_days
- nongli.features.config.solar_term_name
"""

import argparse
from datetime import date

from nongli.core.config import DEFAULT_TABLE
from nongli.core.solar_terms import solar_term_days, solar_term_month
from nongli.features.config import solar_term_name

from tools.common import dump_json, skip


def main() -> None:
    parser = argparse.ArgumentParser(description="Solar terms (二十四节气) check")
    parser.add_argument("--year", type=int, required=True)
    parser.add_argument("--json", action="store_true")
    args = parser.parse_args()

    if not DEFAULT_TABLE.contains_year(args.year):
        skip(f"year outside {DEFAULT_TABLE.first_year}..{DEFAULT_TABLE.last_year}: {args.year}")

    rows = []
    for n, day in enumerate(solar_term_days(args.year), start=1):
        d = date(args.year, solar_term_month(n), day)
        rows.append({"n": n, "name": solar_term_name(n), "date": d.isoformat()})

    if args.json:
        dump_json({"year": args.year, "terms": rows})
        return

    for r in rows:
        print(f"{r['date']}  {r['n']:02d}  {r['name']}")


if __name__ == "__main__":
    main()
