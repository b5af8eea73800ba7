"""Tests for the nutrient code table."""

from usda_importer.domain.nutrients import (
    NUTRIENT_TABLE,
    default_nutrient_values,
    lookup_nutrient,
)


def test_lookup_known_codes() -> None:
    assert lookup_nutrient(1008).attribute == "calories"
    assert lookup_nutrient(1093).attribute == "sodium_mg"
    assert lookup_nutrient(2000).attribute == "total_sugars_g"
    assert lookup_nutrient(1114).unit == "mcg"


def test_lookup_unknown_code_returns_none() -> None:
    assert lookup_nutrient(9999) is None
    assert lookup_nutrient(None) is None


def test_only_trans_fat_is_nullable() -> None:
    nullable = [field.code for field in NUTRIENT_TABLE.values() if field.nullable]
    assert nullable == [1257]
    assert len(NUTRIENT_TABLE) == 14


def test_default_values_distinguish_trans_fat() -> None:
    defaults = default_nutrient_values()
    assert defaults["trans_fat_g"] is None
    assert defaults["calories"] == 0.0
    assert defaults["potassium_mg"] == 0.0
