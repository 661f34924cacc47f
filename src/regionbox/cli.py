"""
cli.py — консольный доступ к справочнику регионов.

Запуск:
  regionbox list [--lang en|ru] [--csv]
  regionbox lookup europa "North America" Азия [--lang ru]
  regionbox info 150 2 0

Параметры:
  list     весь справочник в фиксированном порядке
  lookup   код и название по произвольному названию/алиасу; код возврата 1, если хоть одно не найдено
  info     название по числовому коду
  --lang   язык названий (en по умолчанию)
  --csv    для list: вывод в CSV вместо таблицы
"""

from __future__ import annotations

import argparse
import sys

from regionbox.registries.m49_regions import (
    RegionCode,
    code_by_name,
    is_valid,
    name_en,
    name_ru,
    regions_frame,
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="regionbox", description="UN M.49 macro-regions registry")
    sub = p.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="All regions in registry order")
    p_list.add_argument("--lang", dest="lang", default="en", choices=["en", "ru"], help="Names language")
    p_list.add_argument("--csv", dest="as_csv", action="store_true", help="Print CSV instead of a table")

    p_lookup = sub.add_parser("lookup", help="Region code by name or alias")
    p_lookup.add_argument("names", nargs="+", help="Region names/aliases (case-insensitive)")
    p_lookup.add_argument("--lang", dest="lang", default="en", choices=["en", "ru"], help="Names language")

    p_info = sub.add_parser("info", help="Region name by numeric code")
    p_info.add_argument("codes", nargs="+", type=int, help="UN M.49 codes")
    p_info.add_argument("--lang", dest="lang", default="en", choices=["en", "ru"], help="Names language")

    return p.parse_args(argv)


def _name(code, lang: str) -> str:
    return name_ru(code) if lang == "ru" else name_en(code)


def _cmd_list(args: argparse.Namespace) -> int:
    df = regions_frame()
    df = df[["code", f"name_{args.lang}", "aliases"]].rename(columns={f"name_{args.lang}": "name"})
    if args.as_csv:
        print(df.to_csv(index=False), end="")
    else:
        print(df.to_string(index=False))
    return 0


def _cmd_lookup(args: argparse.Namespace) -> int:
    missing = 0
    for name in args.names:
        code = code_by_name(name)
        if code == RegionCode.UNKNOWN:
            missing += 1
        print(f"{name}\t{int(code)}\t{_name(code, args.lang)}")
    return 1 if missing else 0


def _cmd_info(args: argparse.Namespace) -> int:
    for code in args.codes:
        mark = "" if is_valid(code) else "\t(invalid)"
        print(f"{code}\t{_name(code, args.lang)}{mark}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.command == "list":
        return _cmd_list(args)
    if args.command == "lookup":
        return _cmd_lookup(args)
    return _cmd_info(args)


if __name__ == "__main__":
    sys.exit(main())
