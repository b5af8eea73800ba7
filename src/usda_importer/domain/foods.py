"""Domain models for normalized food records."""

from dataclasses import dataclass, field
from datetime import date, datetime

FOOD_TYPE_WHOLE = "whole"
FOOD_TYPE_BRAND = "brand"

VERIFIED_TYPE_USDA_SURVEY = "USDA-survey"
VERIFIED_TYPE_USDA_BRAND = "USDA-brand"
VERIFIED_BY_IMPORT = "USDA-Import"

DATA_SOURCE_SURVEY = "USDA-FNDDS"
DATA_SOURCE_BRANDED = "USDA-Branded"

NUTRITION_FACTS_STATUS_COMPLETED = "completed"


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition facts normalized to a 100 g basis."""

    food_name: str
    serving_size_household: str = ""
    serving_size_g: float = 0.0
    servings_per_container: int = 1
    calories: float = 0.0
    protein_g: float = 0.0
    total_fat_g: float = 0.0
    saturated_fat_g: float = 0.0
    trans_fat_g: float | None = None
    cholesterol_mg: float = 0.0
    sodium_mg: float = 0.0
    total_carbohydrate_g: float = 0.0
    dietary_fiber_g: float = 0.0
    total_sugars_g: float = 0.0
    added_sugars_g: float | None = None
    vitamin_d_mcg: float = 0.0
    calcium_mg: float = 0.0
    iron_mg: float = 0.0
    potassium_mg: float = 0.0
    ingredients: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class BrandInfo:
    """Manufacturer details for branded foods."""

    manufacturer: str
    parent_company: str = ""
    official_sites: list[str] = field(default_factory=list)
    nutrition_site_candidates: list[str] = field(default_factory=list)
    product_image_site_candidates: list[str] = field(default_factory=list)
    product_line: str = ""


@dataclass(frozen=True)
class FoodRecord:
    """Food document in the application's canonical schema."""

    id: int
    description: str
    food_request_type: str
    nutrition_facts: NutritionFacts
    serving_size_multiplicand: float
    data_source: str
    enhanced_at: datetime
    verified_type: str
    verified_date: date | None
    verified_by: str = VERIFIED_BY_IMPORT
    fdc_id: int | None = None
    andi_score: float = 0.0
    glycemic_index: float = 0.0
    food_image: str = ""
    food_image_thumbnail: str = ""
    nutrition_facts_image: str = ""
    nutrition_facts_image_pending: str = ""
    nutrition_facts_status: str = NUTRITION_FACTS_STATUS_COMPLETED
    tokens_used: int | None = None
    estimated_cost: float | None = None
    brand_info: BrandInfo | None = None
    recipe: dict[str, object] | None = None
