"""Add-to-cart use case: cart, daily log and streak in one pass."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from pydantic import ValidationError

from usda_nutrition.domain.cart import CartAction, CartItem
from usda_nutrition.domain.daily_log import DailyRecord
from usda_nutrition.domain.entries import NutritionPayload
from usda_nutrition.domain.streaks import StreakUpdate
from usda_nutrition.services.cart import CartStore
from usda_nutrition.services.clock import utc_today
from usda_nutrition.services.daily_log import DailyLog
from usda_nutrition.services.streaks import StreakTracker

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemResult:
    """A batch item that reached the cart."""

    index: int
    action: CartAction
    item: CartItem

    @property
    def message(self) -> str:
        if self.action == "updated":
            return f"Updated existing {self.item.normalized_name} in cart"
        return f"Added {self.item.normalized_name} to cart"


@dataclass(frozen=True)
class ItemError:
    """A batch item rejected during validation or processing."""

    index: int
    original_input: str
    error: str


@dataclass(frozen=True)
class BatchResult:
    """Per-item outcome of an add-to-cart batch."""

    day: date
    results: list[ItemResult]
    errors: list[ItemError]
    streak: StreakUpdate
    daily_record: DailyRecord | None

    @property
    def total(self) -> int:
        return len(self.results) + len(self.errors)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def partial_success(self) -> bool:
        return bool(self.results) and bool(self.errors)

    @property
    def message(self) -> str:
        return (
            f"Processed {self.total} item(s): {len(self.results)} successful, "
            f"{len(self.errors)} failed"
        )


@dataclass
class TrackingService:
    """Validate ingest records and feed the cart, daily log and streak."""

    cart: CartStore
    daily_log: DailyLog
    streaks: StreakTracker
    today: Callable[[], date] = utc_today

    def add_entries(self, items: list[object]) -> BatchResult:
        """Process items in order; invalid items are reported, not fatal."""
        day = self.today()
        results: list[ItemResult] = []
        errors: list[ItemError] = []
        for index, raw in enumerate(items, start=1):
            try:
                payload = NutritionPayload.model_validate(raw)
            except ValidationError as exc:
                error = ItemError(
                    index=index,
                    original_input=_original_input(raw),
                    error=describe_validation_error(exc),
                )
                _logger.warning("Rejected cart item %s: %s", index, error.error)
                errors.append(error)
                continue
            entry = payload.to_entry()
            self.daily_log.record(day, entry)
            added = self.cart.add_item(entry)
            results.append(ItemResult(index=index, action=added.action, item=added.item))

        if results:
            streak = self.streaks.log_day(day)
        else:
            streak = StreakUpdate(
                streak_updated=False,
                reason="No items were logged",
                current_streak=self.streaks.state.current_streak,
            )
        return BatchResult(
            day=day,
            results=results,
            errors=errors,
            streak=streak,
            daily_record=self.daily_log.get(day),
        )


def describe_validation_error(exc: ValidationError) -> str:
    """Summarize a pydantic validation error on one line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def _original_input(raw: object) -> str:
    if isinstance(raw, dict):
        value = raw.get("originalInput")
        if isinstance(value, str) and value:
            return value
    return "Unknown"
