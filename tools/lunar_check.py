from __future__ import annotations

"""
Lunar conversion check script.

Uses:
- nongli.core.converter.lunar_dates_between
- nongli.features.lunar_data.format_lunar_date
"""

import argparse

from nongli.core.converter import lunar_dates_between
from nongli.features.lunar_data import format_lunar_date, render_lunar_text

from tools.common import add_date_args, resolve_date_range, dump_json


def _format_label(month: int, day: int, is_leap: bool) -> str:
    return f"{'闰' if is_leap else ''}{month:02d}/{day:02d}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Lunar (农历) check")
    add_date_args(parser)
    args = parser.parse_args()

    start, stop = resolve_date_range(parser, args)

    rows = []
    for cur, ld in lunar_dates_between(start, stop):
        res = None if ld is None else format_lunar_date(ld, cur.year, cur.month, cur.day)

        if args.json:
            rows.append(
                {
                    "date": cur.isoformat(),
                    "lunar": None if res is None else res.as_dict(),
                    "text": render_lunar_text(res),
                }
            )
            continue

        if res is None:
            print(f"{cur.isoformat()}  -")
            continue

        # blank line between lunar months
        sep = "\n" if res.lunar_day == 1 and cur != start else ""
        if args.verbose:
            print(
                f"{sep}{cur.isoformat()}  L={_format_label(res.lunar_month, res.lunar_day, res.is_leap)}  "
                f"{render_lunar_text(res)}  "
                f"gz={res.gz_year}/{res.gz_month}/{res.gz_day}  "
                f"zodiac={res.zodiac} sign={res.zodiac_sign} term={res.solar_term or '-'}"
            )
        else:
            print(f"{sep}{cur.isoformat()}  {render_lunar_text(res)}")

    if args.json:
        dump_json({"rows": rows})


if __name__ == "__main__":
    main()
