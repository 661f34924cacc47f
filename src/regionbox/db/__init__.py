from regionbox.db.types import RegionCodeType, RegionType

__all__ = ["RegionType", "RegionCodeType"]
