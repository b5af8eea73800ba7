"""Map USDA source records to normalized food records."""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, date, datetime

from usda_importer.domain.foods import (
    DATA_SOURCE_BRANDED,
    DATA_SOURCE_SURVEY,
    FOOD_TYPE_BRAND,
    FOOD_TYPE_WHOLE,
    VERIFIED_TYPE_USDA_BRAND,
    VERIFIED_TYPE_USDA_SURVEY,
    BrandInfo,
    FoodRecord,
    NutritionFacts,
)
from usda_importer.domain.nutrients import default_nutrient_values, lookup_nutrient
from usda_importer.domain.usda import BrandedFood, FoodNutrient, SurveyFood
from usda_importer.services.normalization import (
    normalize,
    normalize_survey,
    per_100g_factor,
    serving_size_multiplicand,
    usable_serving_size,
)

PUBLICATION_DATE_FORMAT = "%m/%d/%Y"
PRIMARY_PORTION_SEQUENCE = 1

_logger = logging.getLogger(__name__)


def map_survey_food(
    food: SurveyFood, food_id: int, now: datetime | None = None
) -> FoodRecord:
    """Convert a survey food to a food record with the given id."""
    serving_size_g = 0.0
    serving_size_household = ""
    for portion in food.food_portions:
        if portion.sequence_number == PRIMARY_PORTION_SEQUENCE:
            serving_size_g = portion.gram_weight
            serving_size_household = portion.portion_description
            break

    nutrition_facts = NutritionFacts(
        food_name=food.description,
        serving_size_household=serving_size_household,
        serving_size_g=serving_size_g,
        servings_per_container=1,
        ingredients=[],
        **_map_nutrients(food.food_nutrients, normalize_survey),
    )
    return FoodRecord(
        id=food_id,
        description=food.description,
        food_request_type=FOOD_TYPE_WHOLE,
        nutrition_facts=nutrition_facts,
        serving_size_multiplicand=1.0,
        data_source=DATA_SOURCE_SURVEY,
        enhanced_at=now or datetime.now(tz=UTC),
        verified_type=VERIFIED_TYPE_USDA_SURVEY,
        verified_date=parse_publication_date(food.publication_date),
        fdc_id=food.fdc_id,
    )


def map_branded_food(
    food: BrandedFood, food_id: int, now: datetime | None = None
) -> FoodRecord:
    """Convert a branded food to a food record with the given id.

    Branded nutrient amounts are reported per serving and are rescaled to
    100 g using the record's own serving size. Records without a usable
    serving size keep default nutrient values.
    """
    serving_size = food.serving_size

    def to_per_100g(amount: float) -> float | None:
        return normalize(amount, serving_size)

    nutrients = _map_nutrients(food.food_nutrients, to_per_100g)
    if food.food_nutrients and per_100g_factor(serving_size) is None:
        _logger.debug(
            "Branded food %s has no usable serving size (%s); nutrients not mapped",
            food.fdc_id,
            serving_size,
        )

    nutrition_facts = NutritionFacts(
        food_name=food.description,
        serving_size_household=food.household_serving_full_text,
        serving_size_g=usable_serving_size(serving_size),
        servings_per_container=1,
        ingredients=[food.ingredients] if food.ingredients else [],
        **nutrients,
    )
    brand_info = BrandInfo(manufacturer=food.brand_owner) if food.brand_owner else None
    return FoodRecord(
        id=food_id,
        description=food.description,
        food_request_type=FOOD_TYPE_BRAND,
        nutrition_facts=nutrition_facts,
        serving_size_multiplicand=serving_size_multiplicand(serving_size),
        data_source=DATA_SOURCE_BRANDED,
        enhanced_at=now or datetime.now(tz=UTC),
        verified_type=VERIFIED_TYPE_USDA_BRAND,
        verified_date=parse_publication_date(food.publication_date),
        brand_info=brand_info,
        fdc_id=food.fdc_id,
    )


def parse_publication_date(value: str | None) -> date | None:
    """Parse a USDA publication date such as "10/31/2024"."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), PUBLICATION_DATE_FORMAT).date()
    except ValueError:
        return None


def _map_nutrients(
    food_nutrients: Iterable[FoodNutrient],
    convert: Callable[[float], float | None],
) -> dict[str, float | None]:
    """Route nutrient amounts into nutrition facts attributes by nutrient id."""
    values = default_nutrient_values()
    for entry in food_nutrients:
        field = lookup_nutrient(entry.nutrient_id)
        if field is None:
            continue
        amount = convert(entry.amount)
        if amount is None:
            continue
        values[field.attribute] = amount
    return values
