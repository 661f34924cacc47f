"""
m49_regions.py — справочник макрорегионов мира (числовые коды UN M.49).

Состав фиксирован: 7 регионов + код 0 ("неизвестный регион").

Что есть:
- код -> название (англ./рус.), для неизвестного кода — "Unknown"
- название -> код (без учёта регистра, по набору алиасов)
- Region: пара (название, код) с хуками сохранения в БД (value/scan)
- regions_frame(): весь справочник как DataFrame

Алиасы в коде не хранятся:
- базовый список лежит в src/regionbox/registries/_resources/m49_regions/m49_regions_aliases.csv
- дополнительный CSV можно подключить через REGIONBOX_EXTRA_ALIASES
"""

from __future__ import annotations

import json
import numbers
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from importlib import resources
from io import BytesIO
from pathlib import Path
from typing import Any

import pandas as pd

from regionbox.base.runtime import get_settings
from regionbox.errors import NilTargetError, ScanError, UnsupportedTypeError
from regionbox.text.regions import normalize_region_name


_PACKAGE = "regionbox.registries"
_ALIASES_RESOURCE = "_resources/m49_regions/m49_regions_aliases.csv"

TYPE_REGION_CODE = "countries.RegionCode"
TYPE_REGION = "countries.Region"

UNKNOWN_MSG = "Unknown"

_SCAN_ERR = "regionbox::scan: Region scan err:"


class RegionCode(IntEnum):
    """Код макрорегиона UN M.49."""

    UNKNOWN = 0
    AF = 2
    NA = 3
    SA = 5
    OC = 9
    AN = 999
    AS = 142
    EU = 150

    # длинные имена (алиасы тех же значений)
    AFRICA = 2
    NORTH_AMERICA = 3
    SOUTH_AMERICA = 5
    OCEANIA = 9
    ANTARCTICA = 999
    ASIA = 142
    EUROPE = 150

    def __str__(self) -> str:
        return name_en(self)

    def __format__(self, format_spec: str) -> str:
        # числовой формат ("d", "03d", "x" ...) — как у int, иначе название
        if format_spec and format_spec[-1] in "bcdoxXneEfFgG%":
            return int.__format__(int(self), format_spec)
        return format(str(self), format_spec)

    @staticmethod
    def type() -> str:
        return TYPE_REGION_CODE


_NAMES_EN: dict[int, str] = {
    RegionCode.AF: "Africa",
    RegionCode.NA: "North America",
    RegionCode.OC: "Oceania",
    RegionCode.AN: "Antarctica",
    RegionCode.AS: "Asia",
    RegionCode.EU: "Europe",
    RegionCode.SA: "South America",
}

_NAMES_RU: dict[int, str] = {
    RegionCode.AF: "Африка",
    RegionCode.NA: "Северная Америка",
    RegionCode.OC: "Океания",
    RegionCode.AN: "Антарктика",
    RegionCode.AS: "Азия",
    RegionCode.EU: "Европа",
    RegionCode.SA: "Южная Америка",
}

# Порядок — часть контракта (на него опирается отображение у потребителей)
_ALL_CODES: tuple[RegionCode, ...] = (
    RegionCode.AF,
    RegionCode.NA,
    RegionCode.OC,
    RegionCode.AN,
    RegionCode.AS,
    RegionCode.EU,
    RegionCode.SA,
)


def _is_code(code) -> bool:
    # только целые (включая numpy), bool и float кодом не считаются
    return isinstance(code, numbers.Integral) and not isinstance(code, bool)


def _lookup(table: dict[int, str], code) -> str:
    if not _is_code(code):
        return UNKNOWN_MSG
    return table.get(int(code), UNKNOWN_MSG)


def _coerce(code) -> int:
    """
    Известный код -> RegionCode, прочее целое -> int как есть.

    Не целое значение -> RegionCode.UNKNOWN (чтобы Region всегда можно было сохранить).
    """
    if not _is_code(code):
        return RegionCode.UNKNOWN
    try:
        return RegionCode(int(code))
    except ValueError:
        return int(code)


def name_en(code) -> str:
    """Английское название региона или "Unknown"."""
    return _lookup(_NAMES_EN, code)


def name_ru(code) -> str:
    """Русское название региона или "Unknown"."""
    return _lookup(_NAMES_RU, code)


def is_valid(code) -> bool:
    return name_en(code) != UNKNOWN_MSG


def total_count() -> int:
    return len(_ALL_CODES)


def all_codes() -> list[RegionCode]:
    return list(_ALL_CODES)


@dataclass(slots=True)
class Region:
    """
    Регион: название + код.

    Обычно строится через info(code). Из БД может прийти несогласованная пара —
    это не проверяется.
    """

    name: str
    code: int

    @staticmethod
    def type() -> str:
        return TYPE_REGION

    def value(self) -> str:
        """Значение для записи в БД: JSON вида {"Name": ..., "Code": ...}."""
        return json.dumps({"Name": self.name, "Code": int(self.code)}, ensure_ascii=False)

    def scan(self, src: Any) -> None:
        """Заполняет регион из значения, прочитанного из БД (см. scan_region)."""
        scan_region(self, src)

    @classmethod
    def from_value(cls, src: Any) -> Region | None:
        """Строит новый Region из значения БД; для None возвращает None."""
        if src is None:
            return None
        region = cls(name=UNKNOWN_MSG, code=RegionCode.UNKNOWN)
        region.scan(src)
        return region


def info(code) -> Region:
    return Region(name=name_en(code), code=_coerce(code))


def all_regions() -> list[Region]:
    return [info(c) for c in _ALL_CODES]


def _decode_mapping(src: dict) -> tuple[str, int]:
    name = src.get("Name", src.get("name"))
    code = src.get("Code", src.get("code"))
    if name is None or code is None:
        raise ScanError(f"{_SCAN_ERR} value must have Name and Code, got keys {list(src)}")
    if not isinstance(name, str):
        raise ScanError(f"{_SCAN_ERR} Name must be str, got {type(name).__name__}")
    if isinstance(code, bool) or not isinstance(code, int):
        raise ScanError(f"{_SCAN_ERR} Code must be int, got {type(code).__name__}")
    return name, _coerce(code)


def _decode(src: Any) -> tuple[str, int]:
    if isinstance(src, Region):
        return src.name, src.code

    if isinstance(src, (bytes, bytearray, memoryview)):
        try:
            src = bytes(src).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ScanError(f"{_SCAN_ERR} value is not utf-8: {e}") from e

    if isinstance(src, str):
        try:
            payload = json.loads(src)
        except json.JSONDecodeError as e:
            raise ScanError(f"{_SCAN_ERR} invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise ScanError(f"{_SCAN_ERR} JSON object expected, got {type(payload).__name__}")
        return _decode_mapping(payload)

    if isinstance(src, dict):
        return _decode_mapping(src)

    raise UnsupportedTypeError(f"{_SCAN_ERR} unexpected value of type {type(src).__name__} for Region")


def scan_region(dest: Region | None, src: Any) -> None:
    """
    Восстанавливает Region из значения БД (паттерн scanner).

    Поддерживается:
    - Region (копируются поля)
    - dict с ключами Name/Code (или name/code)
    - str/bytes с JSON-объектом (то, что пишет Region.value())
    - None — ничего не делает, dest остаётся как был

    Ошибки:
    - dest is None — NilTargetError
    - неподдерживаемый тип src — UnsupportedTypeError
    - битый JSON / нет полей — ScanError

    При ошибке dest не меняется.
    """
    if dest is None:
        raise NilTargetError(f"{_SCAN_ERR} region is None")
    if src is None:
        return
    name, code = _decode(src)
    dest.name = name
    dest.code = code


def _read_alias_csv(src) -> pd.DataFrame:
    # keep_default_na=False: алиас "NA" (Северная Америка) не должен стать NaN
    return pd.read_csv(src, dtype=str, encoding="utf-8-sig", keep_default_na=False)


def _parse_alias_rows(df: pd.DataFrame, source: str) -> list[tuple[str, RegionCode]]:
    """
    Превращает таблицу (code, alias) в пары (нормализованный алиас, код).

    Пустые алиасы пропускаются. Код вне справочника — ошибка.
    """
    cols = {str(c).strip().lower(): c for c in df.columns}
    if not {"code", "alias"}.issubset(cols.keys()):
        raise ValueError(f"{source} must have columns: code, alias")

    out: list[tuple[str, RegionCode]] = []
    for raw_code, raw_alias in zip(df[cols["code"]], df[cols["alias"]]):
        key = normalize_region_name(raw_alias)
        if key is None:
            continue
        try:
            code = RegionCode(int(str(raw_code).strip()))
        except ValueError:
            code = RegionCode.UNKNOWN
        if not is_valid(code):
            raise ValueError(f'{source}: unknown region code "{raw_code}" for alias "{raw_alias}"')
        out.append((key, code))
    return out


def _merge_aliases(index: dict[str, RegionCode], rows: list[tuple[str, RegionCode]], source: str) -> None:
    for key, code in rows:
        prev = index.get(key)
        if prev is not None and prev != code:
            raise ValueError(f'{source}: alias "{key}" maps to both {prev.name} and {code.name}')
        index[key] = code


def _read_packaged_aliases() -> bytes:
    """
    Читает CSV алиасов, встроенный в пакет.

    Через importlib.resources, чтобы работало и из исходников, и из установленного пакета.
    """
    res = resources.files(_PACKAGE).joinpath(_ALIASES_RESOURCE)
    if not res.is_file():
        raise FileNotFoundError(f'Registry resource not found: package="{_PACKAGE}", path="{_ALIASES_RESOURCE}"')
    return res.read_bytes()


@lru_cache(maxsize=1)
def _alias_index() -> dict[str, RegionCode]:
    """
    Словарь нормализованный алиас -> RegionCode.

    Строится один раз на процесс; после смены настроек — reload_aliases().
    """
    settings = get_settings()

    raw = _read_packaged_aliases()

    index: dict[str, RegionCode] = {}
    _merge_aliases(index, _parse_alias_rows(_read_alias_csv(BytesIO(raw)), _ALIASES_RESOURCE), _ALIASES_RESOURCE)
    if settings.debug:
        print(f"DEBUG: {len(index)} region aliases from {_ALIASES_RESOURCE}")

    extra = settings.extra_aliases_path
    if extra:
        if not Path(extra).is_file():
            raise FileNotFoundError(f'Extra region aliases not found: "{extra}"')
        rows = _parse_alias_rows(_read_alias_csv(extra), extra)
        _merge_aliases(index, rows, extra)
        print(f"INFO: Extra region aliases loaded: {len(rows)} from {extra}")

    return index


def reload_aliases() -> None:
    """Сбрасывает кэш алиасов (следующий поиск перечитает CSV)."""
    _alias_index.cache_clear()


def _code_one(key: str | None) -> RegionCode:
    # пропуски из pandas (pd.NA, NaN) приходят сюда не строкой
    if not isinstance(key, str) or not key:
        return RegionCode.UNKNOWN
    return _alias_index().get(key, RegionCode.UNKNOWN)


def code_by_name(name):
    """
    Код региона по названию, без учёта регистра и пунктуации.

    Примеры: "eu", "EU", "Europe", "europa", "Европа" -> RegionCode.EU.
    Не найдено -> RegionCode.UNKNOWN.

    list/tuple -> list, pandas Series/Index -> Series/Index.
    """
    keys = normalize_region_name(name)
    if isinstance(keys, pd.Series):
        return keys.map(_code_one)
    if isinstance(keys, pd.Index):
        return pd.Index([_code_one(k) for k in keys], name=keys.name)
    if isinstance(keys, list):
        return [_code_one(k) for k in keys]
    return _code_one(keys)


def regions_frame() -> pd.DataFrame:
    """
    Весь справочник как DataFrame (порядок как в all_codes()).

    Колонки: code, name_en, name_ru, aliases (нормализованные, через запятую).
    """
    index = _alias_index()
    rows = []
    for code in _ALL_CODES:
        rows.append(
            {
                "code": int(code),
                "name_en": name_en(code),
                "name_ru": name_ru(code),
                "aliases": ", ".join(k for k, v in index.items() if v == code),
            }
        )
    return pd.DataFrame(rows, columns=["code", "name_en", "name_ru", "aliases"])
