"""
types — типы колонок SQLAlchemy для справочника регионов.

RegionType:
- в БД: TEXT с JSON {"Name": ..., "Code": ...} (Region.value())
- из БД: Region через Region.from_value(); NULL -> None

RegionCodeType:
- в БД: INTEGER
- из БД: RegionCode для известного кода, иначе int как есть
"""

from __future__ import annotations

from sqlalchemy.types import Integer, Text, TypeDecorator

from regionbox.errors import UnsupportedTypeError
from regionbox.registries.m49_regions import Region, RegionCode, info


class RegionType(TypeDecorator):
    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, Region):
            return value.value()
        # голый код (RegionCode или int) сохраняем как info(code)
        if isinstance(value, int) and not isinstance(value, bool):
            return info(value).value()
        raise UnsupportedTypeError(f"RegionType: unexpected value of type {type(value).__name__} for Region")

    def process_result_value(self, value, dialect):
        return Region.from_value(value)


class RegionCodeType(TypeDecorator):
    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            return RegionCode(value)
        except ValueError:
            return value
