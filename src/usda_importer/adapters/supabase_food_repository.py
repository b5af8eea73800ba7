"""Supabase repository for normalized food records."""

from dataclasses import dataclass

from supabase import Client

from usda_importer.domain.foods import BrandInfo, FoodRecord, NutritionFacts
from usda_importer.services.importer import FoodSink


@dataclass
class SupabaseFoodRepository(FoodSink):
    """Supabase implementation of the food sink."""

    client: Client
    table: str = "foods"

    def insert_foods(self, foods: list[FoodRecord]) -> None:
        """Insert food rows in a single bulk request."""
        if not foods:
            return
        self.client.table(self.table).insert(
            [food_to_row(food) for food in foods]
        ).execute()


def food_to_row(food: FoodRecord) -> dict[str, object]:
    """Serialize a food record to the application's document shape."""
    return {
        "id": food.id,
        "fdcId": food.fdc_id,
        "description": food.description,
        "foodRequestType": food.food_request_type,
        "ANDIscore": food.andi_score,
        "GlycemicIndex": food.glycemic_index,
        "nutritionFacts": _nutrition_facts_to_row(food.nutrition_facts),
        "servingSizeMultiplicand": food.serving_size_multiplicand,
        "dataSource": food.data_source,
        "enhancedAt": food.enhanced_at.isoformat(),
        "verifiedType": food.verified_type,
        "verifiedDate": food.verified_date.isoformat() if food.verified_date else None,
        "verifiedBy": food.verified_by,
        "foodImage": food.food_image,
        "foodImageThumbnail": food.food_image_thumbnail,
        "nutritionFactsImage": food.nutrition_facts_image,
        "nutritionFactsImagePending": food.nutrition_facts_image_pending,
        "nutritionFactsStatus": food.nutrition_facts_status,
        "tokensUsed": food.tokens_used,
        "estimatedCost": food.estimated_cost,
        "brandInfo": _brand_info_to_row(food.brand_info) if food.brand_info else None,
        "recipe": food.recipe,
    }


def _nutrition_facts_to_row(facts: NutritionFacts) -> dict[str, object]:
    return {
        "foodName": facts.food_name,
        "servingSizeHousehold": facts.serving_size_household,
        "servingSizeG": facts.serving_size_g,
        "servingsPerContainer": facts.servings_per_container,
        "calories": facts.calories,
        "totalFatG": facts.total_fat_g,
        "saturatedFatG": facts.saturated_fat_g,
        "transFatG": facts.trans_fat_g,
        "cholesterolMG": facts.cholesterol_mg,
        "sodiumMG": facts.sodium_mg,
        "totalCarbohydrateG": facts.total_carbohydrate_g,
        "dietaryFiberG": facts.dietary_fiber_g,
        "totalSugarsG": facts.total_sugars_g,
        "addedSugarsG": facts.added_sugars_g,
        "proteinG": facts.protein_g,
        "vitaminDMcg": facts.vitamin_d_mcg,
        "calciumMG": facts.calcium_mg,
        "ironMG": facts.iron_mg,
        "potassiumMG": facts.potassium_mg,
        "ingredients": list(facts.ingredients),
    }


def _brand_info_to_row(brand: BrandInfo) -> dict[str, object]:
    return {
        "manufacturer": brand.manufacturer,
        "parentCompany": brand.parent_company,
        "officialSites": list(brand.official_sites),
        "nutritionSiteCandidates": list(brand.nutrition_site_candidates),
        "productImageSiteCandidates": list(brand.product_image_site_candidates),
        "productLine": brand.product_line,
    }
