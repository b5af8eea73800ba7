"""Pydantic models for USDA FoodData Central source documents."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _UsdaDocument(BaseModel):
    """Base model that treats explicit nulls as missing fields."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Nutrient(_UsdaDocument):
    """Nutrient definition embedded in a food nutrient entry."""

    id: int | None = None
    number: str = ""
    name: str = ""
    rank: int | None = None
    unit_name: str = Field(default="", alias="unitName")


class FoodNutrient(_UsdaDocument):
    """A single (nutrient, amount) pair reported for a food."""

    type: str = ""
    id: int | None = None
    nutrient: Nutrient | None = None
    flat_nutrient_id: int | None = Field(default=None, alias="nutrientId")
    amount: float = 0.0

    @property
    def nutrient_id(self) -> int | None:
        """Return the nutrient id from the nested or abridged layout."""
        if self.nutrient is not None and self.nutrient.id is not None:
            return self.nutrient.id
        return self.flat_nutrient_id


class FoodPortion(_UsdaDocument):
    """Household portion with its gram weight."""

    id: int | None = None
    gram_weight: float = Field(default=0.0, alias="gramWeight")
    portion_description: str = Field(default="", alias="portionDescription")
    sequence_number: int | None = Field(default=None, alias="sequenceNumber")


class SurveyFood(_UsdaDocument):
    """FNDDS survey food; nutrient amounts are per 100 g."""

    fdc_id: int | None = Field(default=None, alias="fdcId")
    description: str = ""
    food_class: str = Field(default="", alias="foodClass")
    data_type: str = Field(default="", alias="dataType")
    food_code: str = Field(default="", alias="foodCode")
    publication_date: str = Field(default="", alias="publicationDate")
    food_nutrients: list[FoodNutrient] = Field(
        default_factory=list, alias="foodNutrients"
    )
    food_portions: list[FoodPortion] = Field(default_factory=list, alias="foodPortions")


class BrandedFood(_UsdaDocument):
    """Branded food; nutrient amounts are per stated serving size."""

    fdc_id: int | None = Field(default=None, alias="fdcId")
    description: str = ""
    food_class: str = Field(default="", alias="foodClass")
    data_type: str = Field(default="", alias="dataType")
    publication_date: str = Field(default="", alias="publicationDate")
    brand_owner: str = Field(default="", alias="brandOwner")
    gtin_upc: str = Field(default="", alias="gtinUpc")
    ingredients: str = ""
    serving_size: float | None = Field(default=None, alias="servingSize")
    serving_size_unit: str = Field(default="", alias="servingSizeUnit")
    household_serving_full_text: str = Field(
        default="", alias="householdServingFullText"
    )
    branded_food_category: str = Field(default="", alias="brandedFoodCategory")
    food_nutrients: list[FoodNutrient] = Field(
        default_factory=list, alias="foodNutrients"
    )
