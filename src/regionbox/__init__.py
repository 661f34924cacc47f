"""
regionbox — справочник макрорегионов мира (коды UN M.49).

Быстрый старт:
    from regionbox import RegionCode, code_by_name, name_ru

    code_by_name("europa")    # RegionCode.EU
    name_ru(RegionCode.EU)    # "Европа"
"""

from regionbox.errors import NilTargetError, ScanError, UnsupportedTypeError
from regionbox.registries.m49_regions import (
    TYPE_REGION,
    TYPE_REGION_CODE,
    UNKNOWN_MSG,
    Region,
    RegionCode,
    all_codes,
    all_regions,
    code_by_name,
    info,
    is_valid,
    name_en,
    name_ru,
    regions_frame,
    reload_aliases,
    scan_region,
    total_count,
)

__version__ = "0.1.0"

__all__ = [
    "TYPE_REGION",
    "TYPE_REGION_CODE",
    "UNKNOWN_MSG",
    "Region",
    "RegionCode",
    "all_codes",
    "all_regions",
    "code_by_name",
    "info",
    "is_valid",
    "name_en",
    "name_ru",
    "regions_frame",
    "reload_aliases",
    "scan_region",
    "total_count",
    "ScanError",
    "NilTargetError",
    "UnsupportedTypeError",
]
