"""Scale per-100g nutrient profiles to a consumed quantity."""

import math
from dataclasses import dataclass, field

from usda_nutrition.domain.nutrition import (
    MISSING_UNIT,
    NutrientAmount,
    NutrientProfile,
    ScaledNutrition,
    format_number,
)
from usda_nutrition.domain.quantities import CalculationUnit, ParsedQuantity

# FDC nutrient names are matched by case-insensitive substring, first match wins.
_PROFILE_SEARCH_TERMS = {
    "energy": "Energy",
    "protein": "Protein",
    "fat": "Total lipid",
    "carbohydrate": "Carbohydrate",
    "sugar": "Sugars",
    "fiber": "Fiber",
    "calcium": "Calcium",
    "iron": "Iron",
    "sodium": "Sodium",
}

# Average single-unit weights in grams, keyed by lower-cased food name.
AVERAGE_PIECE_WEIGHTS_G: dict[str, float] = {
    "apple": 182,
    "banana": 118,
    "orange": 154,
    "egg": 50,
    "slice of bread": 25,
    "bread": 25,
    "chicken breast": 174,
    "potato": 173,
}
DEFAULT_PIECE_WEIGHT_G = 100.0


def build_profile(food_nutrients: list[dict[str, object]]) -> NutrientProfile:
    """Build a per-100g profile from FDC ``foodNutrients`` records."""
    values = {
        key: _find_nutrient(food_nutrients, term)
        for key, term in _PROFILE_SEARCH_TERMS.items()
    }
    return NutrientProfile(**values)


def _find_nutrient(food_nutrients: list[dict[str, object]], term: str) -> NutrientAmount:
    needle = term.lower()
    for record in food_nutrients:
        if not isinstance(record, dict):
            continue
        info = record.get("nutrient")
        nutrient_info = info if isinstance(info, dict) else {}
        name = nutrient_info.get("name") or record.get("nutrientName")
        if not isinstance(name, str) or needle not in name.lower():
            continue
        unit = nutrient_info.get("unitName") or record.get("unitName")
        return NutrientAmount(
            amount=_to_float(record.get("amount") or record.get("value")),
            unit=str(unit) if unit else MISSING_UNIT,
        )
    return NutrientAmount(amount=0.0, unit=MISSING_UNIT)


@dataclass
class NutrientScaler:
    """Pure scaler from a per-100g profile to a stated quantity."""

    piece_weights_g: dict[str, float] = field(
        default_factory=lambda: dict(AVERAGE_PIECE_WEIGHTS_G)
    )
    default_piece_weight_g: float = DEFAULT_PIECE_WEIGHT_G

    def scale(
        self,
        profile: NutrientProfile,
        quantity: float,
        unit: CalculationUnit,
        food_name: str,
    ) -> ScaledNutrition:
        """Scale every nutrient of ``profile`` to ``quantity`` of ``unit``."""
        factor = self.factor(quantity, unit, food_name)
        return ScaledNutrition(
            calories=_scaled(profile.energy, factor, 0),
            protein=_scaled(profile.protein, factor, 1),
            fat=_scaled(profile.fat, factor, 1),
            carbohydrates=_scaled(profile.carbohydrate, factor, 1),
            sugar=_scaled(profile.sugar, factor, 1),
            fiber=_scaled(profile.fiber, factor, 1),
            calcium=_scaled(profile.calcium, factor, 0),
            iron=_scaled(profile.iron, factor, 2),
            sodium=_scaled(profile.sodium, factor, 0),
        )

    def factor(self, quantity: float, unit: CalculationUnit, food_name: str) -> float:
        """Return the multiplier applied to per-100g values."""
        if unit == "grams":
            return quantity / 100
        return (quantity * self.piece_weight(food_name)) / 100

    def piece_weight(self, food_name: str) -> float:
        """Return the average weight of one piece of a food, in grams."""
        return self.piece_weights_g.get(food_name.lower(), self.default_piece_weight_g)


def describe_calculation(parsed: ParsedQuantity) -> tuple[str, str]:
    """Return the human-readable calculation method and note."""
    quantity = format_number(parsed.quantity)
    if parsed.original_unit == "kg":
        original = format_number(parsed.original_quantity)
        return (
            f"{original}kg → {quantity}g ÷ 100g × base nutrition",
            f"Converted {original}kg to {quantity}g for calculation",
        )
    if parsed.unit == "grams":
        return f"{quantity}g ÷ 100g × base nutrition", "Weight-based calculation"
    return (
        f"{quantity} pieces × estimated weight × base nutrition",
        f"Estimated average weight used for {parsed.food}",
    )


def round_half_up(value: float, digits: int) -> float:
    """Round halves away from negative infinity, matching client-side rounding."""
    factor = 10**digits
    if not math.isfinite(value * factor):
        return 0.0
    return math.floor(value * factor + 0.5) / factor


def _scaled(base: NutrientAmount, factor: float, digits: int) -> NutrientAmount:
    return NutrientAmount(
        amount=round_half_up(base.amount * factor, digits), unit=base.unit
    )


def _to_float(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0
