"""Domain models for the session cart."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from uuid import UUID

from usda_nutrition.domain.nutrition import ScaledNutrition

CartAction = Literal["added", "updated"]


@dataclass(frozen=True)
class CartItem:
    """A food in the cart, unique by normalized name."""

    id: UUID
    normalized_name: str
    original_inputs: tuple[str, ...]
    parsed_food: str
    food_name: str
    input_quantity: str
    calculation_quantity: str
    nutrition: ScaledNutrition
    added_at: datetime
    last_updated: datetime


@dataclass(frozen=True)
class CartAddResult:
    """Outcome of adding one entry to the cart."""

    action: CartAction
    item: CartItem


@dataclass(frozen=True)
class CartSummary:
    """Cart-wide totals."""

    total_items: int
    total_calories: float
    total_protein: float
    last_updated: datetime | None
