"""Per-day nutrition log with running totals."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import uuid4

from usda_nutrition.domain.daily_log import DailyFoodEntry, DailyRecord
from usda_nutrition.domain.nutrition import NutritionEntry


@dataclass
class DailyLog:
    """In-memory store of daily records, one per calendar date."""

    _records: dict[date, DailyRecord] = field(default_factory=dict)

    def record(self, day: date, entry: NutritionEntry) -> DailyRecord:
        """Append an entry to the day's record and bump its totals."""
        now = datetime.now(tz=UTC)
        record = self._records.get(day)
        if record is None:
            record = DailyRecord(date=day, added_at=now)
            self._records[day] = record
        record.foods.append(DailyFoodEntry(id=uuid4(), entry=entry, added_at=now))
        nutrition = entry.nutrition
        record.total_calories += nutrition.calories.amount
        record.total_protein += nutrition.protein.amount
        record.total_fat += nutrition.fat.amount
        record.total_carbs += nutrition.carbohydrates.amount
        return record

    def get(self, day: date) -> DailyRecord | None:
        """Return the record for a date, if anything was logged."""
        return self._records.get(day)

    def range(self, start: date, end: date) -> dict[date, DailyRecord]:
        """Return records for every logged date in ``[start, end]``, in order."""
        return {
            day: self._records[day]
            for day in sorted(self._records)
            if start <= day <= end
        }

    def dates(self) -> list[date]:
        """Return every date with data, ascending."""
        return sorted(self._records)

    def __len__(self) -> int:
        return len(self._records)
