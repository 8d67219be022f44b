"""Domain models for the daily nutrition log."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from usda_nutrition.domain.nutrition import NutritionEntry


@dataclass(frozen=True)
class DailyFoodEntry:
    """A food logged on a given day."""

    id: UUID
    entry: NutritionEntry
    added_at: datetime


@dataclass
class DailyRecord:
    """All foods logged on one calendar date with running totals."""

    date: date
    added_at: datetime
    foods: list[DailyFoodEntry] = field(default_factory=list)
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_fat: float = 0.0
    total_carbs: float = 0.0
