"""Nutrition domain models."""

import math
import re
from dataclasses import dataclass, field, fields

from usda_nutrition.domain.quantities import ParsedQuantity

_LEADING_NUMBER = re.compile(r"^(\d+(?:\.\d+)?)")
_TRAILING_UNIT = re.compile(r"^[\d.]+\s*(.+)$")

MISSING_UNIT = "N/A"


@dataclass(frozen=True)
class NutrientAmount:
    """A nutrient magnitude with its unit."""

    amount: float
    unit: str

    def render(self) -> str:
        """Render as the ``"<number> <unit>"`` string used at the API boundary."""
        return f"{format_number(self.amount)} {self.unit}"


def _missing() -> NutrientAmount:
    return NutrientAmount(amount=0.0, unit=MISSING_UNIT)


@dataclass(frozen=True)
class NutrientProfile:
    """Base nutrient values of a food, per 100 g."""

    energy: NutrientAmount = field(default_factory=_missing)
    protein: NutrientAmount = field(default_factory=_missing)
    fat: NutrientAmount = field(default_factory=_missing)
    carbohydrate: NutrientAmount = field(default_factory=_missing)
    sugar: NutrientAmount = field(default_factory=_missing)
    fiber: NutrientAmount = field(default_factory=_missing)
    calcium: NutrientAmount = field(default_factory=_missing)
    iron: NutrientAmount = field(default_factory=_missing)
    sodium: NutrientAmount = field(default_factory=_missing)


@dataclass(frozen=True)
class ScaledNutrition:
    """Nutrient amounts for a consumed quantity of a food."""

    calories: NutrientAmount
    protein: NutrientAmount
    fat: NutrientAmount
    carbohydrates: NutrientAmount
    sugar: NutrientAmount
    fiber: NutrientAmount
    calcium: NutrientAmount
    iron: NutrientAmount
    sodium: NutrientAmount

    def as_dict(self) -> dict[str, NutrientAmount]:
        """Return nutrients keyed by field name, in declaration order."""
        return {item.name: getattr(self, item.name) for item in fields(self)}

    def render(self) -> dict[str, str]:
        """Render every nutrient as a display string."""
        return {name: amount.render() for name, amount in self.as_dict().items()}


NUTRIENT_KEYS: tuple[str, ...] = tuple(item.name for item in fields(ScaledNutrition))


@dataclass(frozen=True)
class FoodSummary:
    """Summary information about a food from FDC."""

    fdc_id: int
    description: str


@dataclass(frozen=True)
class FoodDetails:
    """Full food details with the per-100g nutrient profile."""

    summary: FoodSummary
    profile: NutrientProfile


@dataclass(frozen=True)
class NutritionEntry:
    """A scaled food entry as ingested by the cart and the daily log."""

    original_input: str
    parsed_food: str
    input_quantity: str
    calculation_quantity: str
    food_name: str
    nutrition: ScaledNutrition


@dataclass(frozen=True)
class FoodAnalysis:
    """Result of turning a food description into scaled nutrition."""

    parsed: ParsedQuantity
    food: FoodSummary
    nutrition: ScaledNutrition
    method: str
    note: str

    def to_entry(self) -> NutritionEntry:
        """Return the ingest record for this analysis."""
        return NutritionEntry(
            original_input=self.parsed.original_text,
            parsed_food=self.parsed.food,
            input_quantity=(
                f"{format_number(self.parsed.original_quantity)} "
                f"{self.parsed.original_unit}"
            ),
            calculation_quantity=(
                f"{format_number(self.parsed.quantity)} {self.parsed.unit}"
            ),
            food_name=self.food.description,
            nutrition=self.nutrition,
        )


def format_number(value: float) -> str:
    """Format a number without trailing zeros (``189.0`` -> ``"189"``)."""
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return text or "0"


def parse_magnitude(value: object) -> float:
    """Return the leading number of a nutrient string, or 0 if there is none."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        try:
            magnitude = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        magnitude = float(match.group(1)) if match else 0.0
    else:
        return 0.0
    # Same domain as the string form: finite and non-negative.
    if not math.isfinite(magnitude) or magnitude < 0:
        return 0.0
    return magnitude


def parse_unit(value: object) -> str:
    """Return the unit suffix of a nutrient string, or an empty string.

    An absent nutrient has the ``N/A`` unit.
    """
    if value is None:
        return MISSING_UNIT
    if not isinstance(value, str):
        return ""
    match = _TRAILING_UNIT.match(value)
    return match.group(1).strip() if match else ""


def parse_amount(value: object) -> NutrientAmount:
    """Parse a ``"<number> <unit>"`` string into a NutrientAmount."""
    return NutrientAmount(amount=parse_magnitude(value), unit=parse_unit(value))
