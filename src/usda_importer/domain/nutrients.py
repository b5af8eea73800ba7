"""USDA nutrient code table."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutrientField:
    """Normalized nutrition facts field for a USDA nutrient id."""

    code: int
    attribute: str
    unit: str
    nullable: bool = False


_FIELDS = (
    NutrientField(1008, "calories", "kcal"),
    NutrientField(1003, "protein_g", "g"),
    NutrientField(1004, "total_fat_g", "g"),
    NutrientField(1258, "saturated_fat_g", "g"),
    NutrientField(1257, "trans_fat_g", "g", nullable=True),
    NutrientField(1253, "cholesterol_mg", "mg"),
    NutrientField(1093, "sodium_mg", "mg"),
    NutrientField(1005, "total_carbohydrate_g", "g"),
    NutrientField(1079, "dietary_fiber_g", "g"),
    NutrientField(2000, "total_sugars_g", "g"),
    NutrientField(1114, "vitamin_d_mcg", "mcg"),
    NutrientField(1087, "calcium_mg", "mg"),
    NutrientField(1089, "iron_mg", "mg"),
    NutrientField(1092, "potassium_mg", "mg"),
)

NUTRIENT_TABLE: dict[int, NutrientField] = {field.code: field for field in _FIELDS}


def lookup_nutrient(code: int | None) -> NutrientField | None:
    """Return the field for a nutrient id, or None when it is not tracked."""
    if code is None:
        return None
    return NUTRIENT_TABLE.get(code)


def default_nutrient_values() -> dict[str, float | None]:
    """Return the starting value for every tracked nutrient attribute."""
    return {
        field.attribute: None if field.nullable else 0.0 for field in _FIELDS
    }
