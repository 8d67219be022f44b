"""Session cart that merges repeated foods into one item."""

import logging
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from usda_nutrition.domain.cart import CartAddResult, CartItem, CartSummary
from usda_nutrition.domain.nutrition import (
    MISSING_UNIT,
    NutrientAmount,
    NutritionEntry,
    ScaledNutrition,
)
from usda_nutrition.services.scaler import round_half_up

_logger = logging.getLogger(__name__)

_QUANTITY_SEPARATOR = " + "


@dataclass
class CartStore:
    """In-memory cart keyed by normalized food name."""

    _items: list[CartItem] = field(default_factory=list)

    def add_item(self, entry: NutritionEntry) -> CartAddResult:
        """Add an entry, merging it into an existing item with the same name."""
        normalized_name = normalize_name(entry.parsed_food)
        now = datetime.now(tz=UTC)
        for index, existing in enumerate(self._items):
            if existing.normalized_name != normalized_name:
                continue
            updated = replace(
                existing,
                original_inputs=(*existing.original_inputs, entry.original_input),
                input_quantity=_join(existing.input_quantity, entry.input_quantity),
                calculation_quantity=_join(
                    existing.calculation_quantity, entry.calculation_quantity
                ),
                nutrition=combine_nutrition(existing.nutrition, entry.nutrition),
                last_updated=now,
            )
            self._items[index] = updated
            _logger.info("Updated %s in cart", normalized_name)
            return CartAddResult(action="updated", item=updated)

        item = CartItem(
            id=uuid4(),
            normalized_name=normalized_name,
            original_inputs=(entry.original_input,),
            parsed_food=entry.parsed_food,
            food_name=entry.food_name,
            input_quantity=entry.input_quantity,
            calculation_quantity=entry.calculation_quantity,
            nutrition=entry.nutrition,
            added_at=now,
            last_updated=now,
        )
        self._items.append(item)
        _logger.info("Added %s to cart", normalized_name)
        return CartAddResult(action="added", item=item)

    def items(self) -> list[CartItem]:
        """Return cart items in insertion order."""
        return list(self._items)

    def get(self, item_id: UUID) -> CartItem | None:
        """Return a cart item by id."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def remove(self, item_id: UUID) -> CartItem | None:
        """Remove and return a cart item, or None if it is not in the cart."""
        item = self.get(item_id)
        if item is not None:
            self._items.remove(item)
        return item

    def clear(self) -> int:
        """Empty the cart and return how many items were removed."""
        count = len(self._items)
        self._items.clear()
        return count

    def summary(self) -> CartSummary:
        """Return cart-wide calorie and protein totals."""
        total_calories = sum(item.nutrition.calories.amount for item in self._items)
        total_protein = sum(item.nutrition.protein.amount for item in self._items)
        return CartSummary(
            total_items=len(self._items),
            total_calories=round_half_up(total_calories, 0),
            total_protein=round_half_up(total_protein, 1),
            last_updated=max(
                (item.last_updated for item in self._items), default=None
            ),
        )

    def __len__(self) -> int:
        return len(self._items)


def normalize_name(food: str) -> str:
    """Return the cart deduplication key for a food name."""
    return food.lower().strip()


def combine_nutrition(
    existing: ScaledNutrition, additional: ScaledNutrition
) -> ScaledNutrition:
    """Sum two nutrition records nutrient by nutrient."""
    incoming = additional.as_dict()
    return ScaledNutrition(
        **{
            name: _combine(amount, incoming[name])
            for name, amount in existing.as_dict().items()
        }
    )


def _combine(existing: NutrientAmount, additional: NutrientAmount) -> NutrientAmount:
    # Units are assumed identical; the existing one wins when present.
    unit = existing.unit
    if unit in ("", MISSING_UNIT) and additional.unit:
        unit = additional.unit
    return NutrientAmount(
        amount=round_half_up(existing.amount + additional.amount, 2),
        unit=unit,
    )


def _join(existing: str, additional: str) -> str:
    return f"{existing}{_QUANTITY_SEPARATOR}{additional}"
