"""
regions.py — нормализация названий макрорегионов перед поиском по алиасам.

Цель normalize_region_name:
- привести "кривые" входные названия к ключу, по которому ищется алиас
- регистр, пробелы, дефисы, точки, кавычки и скобки на ключ не влияют

Примеры:
  "north-america"  -> "NORTHAMERICA"
  " Europe. "      -> "EUROPE"
  "Южная Америка"  -> "ЮЖНАЯАМЕРИКА"

Сами алиасы в коде не хранятся; они лежат в CSV реестра
(registries/_resources/m49_regions) и прогоняются через эту же функцию.
"""

from __future__ import annotations

import re

import pandas as pd

# Всё, что не буква и не цифра (подчёркивание \w пропускает, поэтому отдельно)
_JUNK_RE = re.compile(r"[\W_]+", flags=re.U)


def _one(x) -> str | None:
    # None, NaN, pd.NA, NaT: иначе str(pd.NA) == "<NA>" совпадёт с алиасом "NA"
    if x is None or (pd.api.types.is_scalar(x) and pd.isna(x)):
        return None
    s = str(x)
    s = s.replace("Ё", "Е").replace("ё", "е")
    s = _JUNK_RE.sub("", s.upper())
    return s or None


def normalize_region_name(name):
    """
    Нормализует название региона в ключ для поиска алиаса.

    Поддерживает скаляр, list/tuple и pandas Series/Index.
    Для пустых значений возвращает None.
    """
    if isinstance(name, pd.Series):
        return name.map(_one)
    if isinstance(name, pd.Index):
        return pd.Index([_one(v) for v in name], name=name.name)
    if isinstance(name, (list, tuple)):
        return [_one(v) for v in name]
    return _one(name)
