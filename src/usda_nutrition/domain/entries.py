"""Boundary schema for scaled nutrition entries sent back by clients."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from usda_nutrition.domain.nutrition import NutritionEntry, ScaledNutrition, parse_amount

NutrientValue = str | float | None


class CalculatedNutritionPayload(BaseModel):
    """Scaled nutrients rendered as ``"<number> <unit>"`` strings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    calories: NutrientValue = None
    protein: NutrientValue = None
    fat: NutrientValue = None
    carbohydrates: NutrientValue = None
    sugar: NutrientValue = None
    fiber: NutrientValue = None
    calcium: NutrientValue = None
    iron: NutrientValue = None
    sodium: NutrientValue = None

    def to_domain(self) -> ScaledNutrition:
        """Parse display strings into structured amounts."""
        return ScaledNutrition(
            calories=parse_amount(self.calories),
            protein=parse_amount(self.protein),
            fat=parse_amount(self.fat),
            carbohydrates=parse_amount(self.carbohydrates),
            sugar=parse_amount(self.sugar),
            fiber=parse_amount(self.fiber),
            calcium=parse_amount(self.calcium),
            iron=parse_amount(self.iron),
            sodium=parse_amount(self.sodium),
        )


class NutritionPayload(BaseModel):
    """Ingest record produced by the nutrition endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    original_input: str = Field(min_length=1)
    parsed_food: str = Field(min_length=1)
    input_quantity: str | None = None
    calculation_quantity: str | None = None
    food_name: str | None = None
    calculated_nutrition: CalculatedNutritionPayload

    def to_entry(self) -> NutritionEntry:
        """Convert the validated payload into a domain entry."""
        return NutritionEntry(
            original_input=self.original_input,
            parsed_food=self.parsed_food,
            input_quantity=self.input_quantity or "",
            calculation_quantity=self.calculation_quantity or "",
            food_name=self.food_name or "",
            nutrition=self.calculated_nutrition.to_domain(),
        )
