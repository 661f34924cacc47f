"""
Пример: проставить коды макрорегионов для колонки с "кривыми" названиями.

Назначение:
- показать, как code_by_name работает сразу по pandas Series
- входной CSV может содержать любые варианты: "EU", "europe", "Европа", "north-america"

Запуск:
  python scripts/map_region_column_example.py --path "data/input.csv" --column region --out "data/output.csv"
"""

from __future__ import annotations

import argparse

import pandas as pd

from regionbox import RegionCode, code_by_name, name_en


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--path", required=True, help="Path to .csv file (local).")
    parser.add_argument("--column", required=True, help="Column with region names.")
    parser.add_argument("--out", required=True, help="Output .csv path.")
    args = parser.parse_args()

    df = pd.read_csv(args.path, dtype=str, encoding="utf-8-sig", keep_default_na=False)
    df["region_code"] = code_by_name(df[args.column]).astype(int)
    df["region_name"] = df["region_code"].map(name_en)

    unknown = int((df["region_code"] == int(RegionCode.UNKNOWN)).sum())
    print(f"INFO: mapped rows={len(df)} unknown={unknown}")
    if unknown:
        print("WARN: unknown names:")
        print(df.loc[df["region_code"] == 0, args.column].drop_duplicates().head(20).to_string(index=False))

    df.to_csv(args.out, index=False, encoding="utf-8-sig")
    print(f"INFO: saved {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
