"""Tests for the daily nutrition log."""

from datetime import date

from usda_nutrition.domain.entries import NutritionPayload
from usda_nutrition.domain.nutrition import NutritionEntry
from usda_nutrition.services.daily_log import DailyLog
from tests.conftest import nutrition_payload


def _entry(**kwargs: object) -> NutritionEntry:
    return NutritionPayload.model_validate(nutrition_payload(**kwargs)).to_entry()


def test_record_creates_day_and_accumulates_totals() -> None:
    log = DailyLog()
    day = date(2024, 1, 15)

    log.record(day, _entry(food="apple", calories="95 kcal", protein="0.5 g"))
    record = log.record(day, _entry(food="rice", calories="260 kcal", protein="5.4 g"))

    assert record.date == day
    assert [food.entry.parsed_food for food in record.foods] == ["apple", "rice"]
    assert record.total_calories == 355
    assert round(record.total_protein, 1) == 5.9
    assert round(record.total_carbs, 1) == 50.2
    assert log.get(day) is record


def test_totals_do_not_depend_on_insertion_order() -> None:
    day = date(2024, 1, 15)
    entries = [_entry(calories="95 kcal"), _entry(calories="130.5 kcal")]
    forward = DailyLog()
    backward = DailyLog()

    for entry in entries:
        forward.record(day, entry)
    for entry in reversed(entries):
        backward.record(day, entry)

    assert forward.get(day).total_calories == backward.get(day).total_calories == 225.5


def test_malformed_values_contribute_zero() -> None:
    log = DailyLog()
    day = date(2024, 1, 15)

    record = log.record(day, _entry(calories="about 95 kcal", protein="-3 g"))

    assert record.total_calories == 0
    assert record.total_protein == 1.0


def test_get_missing_day_returns_none() -> None:
    assert DailyLog().get(date(2024, 1, 1)) is None


def test_range_is_inclusive_and_skips_empty_days() -> None:
    log = DailyLog()
    for day in (date(2024, 1, 10), date(2024, 1, 12), date(2024, 1, 20)):
        log.record(day, _entry())

    records = log.range(date(2024, 1, 10), date(2024, 1, 12))

    assert list(records) == [date(2024, 1, 10), date(2024, 1, 12)]
    assert log.range(date(2024, 1, 21), date(2024, 1, 10)) == {}
    assert log.dates() == [date(2024, 1, 10), date(2024, 1, 12), date(2024, 1, 20)]
    assert len(log) == 3


def test_negative_and_non_finite_numbers_contribute_zero() -> None:
    log = DailyLog()
    day = date(2024, 1, 15)

    log.record(day, _entry(calories="200 kcal"))
    log.record(day, _entry(calories=-500, protein=float("inf")))
    log.record(day, _entry(calories="-500 kcal", protein=float("nan")))
    record = log.record(day, _entry(calories="9" * 400 + " kcal"))

    assert record.total_calories == 200
    assert record.total_protein == 1.0
