import pytest

from regionbox import (
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
    total_count,
)

EXPECTED = [
    (RegionCode.AF, 2, "Africa", "Африка"),
    (RegionCode.NA, 3, "North America", "Северная Америка"),
    (RegionCode.OC, 9, "Oceania", "Океания"),
    (RegionCode.AN, 999, "Antarctica", "Антарктика"),
    (RegionCode.AS, 142, "Asia", "Азия"),
    (RegionCode.EU, 150, "Europe", "Европа"),
    (RegionCode.SA, 5, "South America", "Южная Америка"),
]


@pytest.mark.parametrize("code,value,en,ru", EXPECTED)
def test_known_codes(code, value, en, ru):
    assert int(code) == value
    assert is_valid(code)
    assert is_valid(value)
    assert name_en(code) == en
    assert name_ru(code) == ru
    assert name_en(value) == en
    assert str(code) == en


@pytest.mark.parametrize("value", [0, -1, -150, 1, 4, 143, 151, 1000, 2**40])
def test_unknown_codes(value):
    assert not is_valid(value)
    assert name_en(value) == UNKNOWN_MSG
    assert name_ru(value) == UNKNOWN_MSG


def test_unknown_sentinel_code():
    assert RegionCode.UNKNOWN == 0
    assert not is_valid(RegionCode.UNKNOWN)
    assert str(RegionCode.UNKNOWN) == UNKNOWN_MSG


def test_non_code_values_degrade_to_unknown():
    assert name_en("150") == UNKNOWN_MSG
    assert name_en(None) == UNKNOWN_MSG
    assert name_en([150]) == UNKNOWN_MSG
    assert not is_valid([150])


def test_long_aliases_are_same_members():
    assert RegionCode.EUROPE is RegionCode.EU
    assert RegionCode.AFRICA is RegionCode.AF
    assert RegionCode.NORTH_AMERICA is RegionCode.NA
    assert RegionCode.SOUTH_AMERICA is RegionCode.SA
    assert RegionCode.OCEANIA is RegionCode.OC
    assert RegionCode.ANTARCTICA is RegionCode.AN
    assert RegionCode.ASIA is RegionCode.AS


def test_order_and_counts():
    assert all_codes() == [c for c, *_ in EXPECTED]
    assert total_count() == len(all_codes()) == len(all_regions()) == 7
    assert [r.code for r in all_regions()] == all_codes()


def test_all_codes_returns_fresh_list():
    codes = all_codes()
    codes.clear()
    assert len(all_codes()) == 7


@pytest.mark.parametrize("code", [c for c, *_ in EXPECTED])
def test_info_projection(code):
    region = info(code)
    assert region.code == code
    assert region.name == name_en(code)


def test_info_coerces_known_ints():
    region = info(150)
    assert region.code is RegionCode.EU
    assert region == Region(name="Europe", code=RegionCode.EU)


def test_info_unknown():
    assert info(0) == Region(name=UNKNOWN_MSG, code=RegionCode.UNKNOWN)
    region = info(-7)
    assert region.name == UNKNOWN_MSG
    assert region.code == -7


def test_type_discriminators():
    assert TYPE_REGION_CODE == "countries.RegionCode"
    assert TYPE_REGION == "countries.Region"
    assert RegionCode.EU.type() == TYPE_REGION_CODE
    assert info(150).type() == TYPE_REGION
    assert Region.type() == TYPE_REGION


def test_code_by_name_case_and_aliases():
    assert code_by_name("eu") == code_by_name("EU") == code_by_name("Europe") == code_by_name("europa") == RegionCode.EU
    assert code_by_name("EVROPA") is RegionCode.EU


@pytest.mark.parametrize(
    "name,code",
    [
        ("Africa", RegionCode.AF),
        ("afrika", RegionCode.AF),
        ("north america", RegionCode.NA),
        ("North-America", RegionCode.NA),
        ("NORTHAMERIC", RegionCode.NA),
        ("na", RegionCode.NA),
        ("south_america", RegionCode.SA),
        ("Okeaniya", RegionCode.OC),
        ("oceania", RegionCode.OC),
        ("Antarktica", RegionCode.AN),
        ("antarctic", RegionCode.AN),
        ("  Asia. ", RegionCode.AS),
        ("Европа", RegionCode.EU),
        ("южная америка", RegionCode.SA),
        ("Северная  Америка", RegionCode.NA),
    ],
)
def test_code_by_name_variants(name, code):
    assert code_by_name(name) is code


@pytest.mark.parametrize("name", ["not-a-region", "", "   ", None, "Eurasia", "150"])
def test_code_by_name_unknown(name):
    assert code_by_name(name) is RegionCode.UNKNOWN


def test_code_by_name_list():
    assert code_by_name(["eu", "nowhere", "Asia"]) == [RegionCode.EU, RegionCode.UNKNOWN, RegionCode.AS]
    assert code_by_name(("af",)) == [RegionCode.AF]


def test_code_by_name_series():
    import pandas as pd

    s = pd.Series(["Europe", "Азия", None, "xx"], name="region")
    out = code_by_name(s)
    assert isinstance(out, pd.Series)
    assert out.name == "region"
    assert out.tolist() == [150, 142, 0, 0]


def test_code_by_name_index():
    import pandas as pd

    idx = pd.Index(["eu", "sa"], name="r")
    out = code_by_name(idx)
    assert isinstance(out, pd.Index)
    assert out.name == "r"
    assert list(out) == [RegionCode.EU, RegionCode.SA]


def test_regions_frame():
    df = regions_frame()
    assert list(df.columns) == ["code", "name_en", "name_ru", "aliases"]
    assert df["code"].tolist() == [int(c) for c in all_codes()]
    assert df["name_en"].tolist() == [name_en(c) for c in all_codes()]
    eu = df.loc[df["code"] == 150, "aliases"].iloc[0].split(", ")
    assert {"EU", "EUROPE", "EUROPA", "EVROPA", "ЕВРОПА"} <= set(eu)


def test_code_by_name_pandas_missing_is_unknown():
    import pandas as pd

    assert code_by_name(pd.NA) is RegionCode.UNKNOWN
    assert code_by_name(pd.Series(["EU", None], dtype="string")).tolist() == [150, 0]
    assert code_by_name(pd.Series(["EU", pd.NA], dtype=object)).tolist() == [150, 0]
    assert code_by_name(pd.Series(["na", pd.NA, float("nan")])).tolist() == [3, 0, 0]


@pytest.mark.parametrize("value", [2.0, 150.0, True, False, "2", b"2"])
def test_non_integer_values_are_not_codes(value):
    assert not is_valid(value)
    assert name_en(value) == UNKNOWN_MSG
    assert name_ru(value) == UNKNOWN_MSG


def test_numpy_integers_are_codes():
    import numpy as np

    assert name_en(np.int64(150)) == "Europe"
    assert is_valid(np.int32(2))
    assert info(np.int64(142)).code is RegionCode.AS


@pytest.mark.parametrize("value", ["x", "150", 2.0, None, [150]])
def test_info_non_integer_is_unknown_region(value):
    region = info(value)
    assert region == Region(name=UNKNOWN_MSG, code=RegionCode.UNKNOWN)
    assert region.value() == '{"Name": "Unknown", "Code": 0}'


def test_format_uses_name():
    assert f"{RegionCode.EU}" == "Europe"
    assert f"{RegionCode.AS:>6}" == "  Asia"
    assert f"{RegionCode.UNKNOWN}" == UNKNOWN_MSG
    assert "{}".format(RegionCode.NA) == "North America"


def test_format_numeric_spec_stays_numeric():
    assert f"{RegionCode.EU:d}" == "150"
    assert f"{RegionCode.AF:03d}" == "002"
    assert f"{RegionCode.AN:x}" == "3e7"
