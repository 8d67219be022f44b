"""JSON rendering of domain objects for the HTTP API."""

from datetime import date, datetime

from usda_nutrition.domain.cart import CartItem, CartSummary
from usda_nutrition.domain.daily_log import DailyFoodEntry, DailyRecord
from usda_nutrition.domain.nutrition import FoodAnalysis, NutritionEntry
from usda_nutrition.domain.quantities import ParsedQuantity
from usda_nutrition.domain.streaks import StreakPeriod, StreakState, StreakUpdate
from usda_nutrition.services.clock import days_ago
from usda_nutrition.services.scaler import round_half_up
from usda_nutrition.services.streaks import StreakTracker
from usda_nutrition.services.tracking import BatchResult

USAGE_EXAMPLES = {
    "simple": "apple",
    "pieces": "2 apples",
    "grams": "I had 200 grams of rice",
    "kilograms": "I ate 1.5 kg chicken",
}


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def serialize_parsed(parsed: ParsedQuantity) -> dict[str, object]:
    return {
        "food": parsed.food,
        "quantity": parsed.quantity,
        "unit": parsed.unit,
        "originalQuantity": parsed.original_quantity,
        "originalUnit": parsed.original_unit,
        "originalText": parsed.original_text,
    }


def serialize_analysis(analysis: FoodAnalysis) -> dict[str, object]:
    """Render an analysis in the ingest-record shape the cart accepts."""
    entry = analysis.to_entry()
    return {
        **_entry_fields(entry),
        "nutritionPer100g": {
            "note": "Base nutrition values from USDA (typically per 100g)"
        },
        "calculation": {"method": analysis.method, "note": analysis.note},
    }


def _entry_fields(entry: NutritionEntry) -> dict[str, object]:
    return {
        "originalInput": entry.original_input,
        "parsedFood": entry.parsed_food,
        "inputQuantity": entry.input_quantity,
        "calculationQuantity": entry.calculation_quantity,
        "foodName": entry.food_name,
        "calculatedNutrition": entry.nutrition.render(),
    }


def serialize_cart_item(item: CartItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "normalizedName": item.normalized_name,
        "originalInputs": list(item.original_inputs),
        "parsedFood": item.parsed_food,
        "foodName": item.food_name,
        "inputQuantity": item.input_quantity,
        "calculationQuantity": item.calculation_quantity,
        "calculatedNutrition": item.nutrition.render(),
        "addedAt": _iso(item.added_at),
        "lastUpdated": _iso(item.last_updated),
    }


def serialize_cart_summary(summary: CartSummary) -> dict[str, object]:
    return {
        "totalItems": summary.total_items,
        "totalCalories": summary.total_calories,
        "totalProtein": summary.total_protein,
        "lastUpdated": _iso(summary.last_updated),
    }


def _serialize_daily_food(food: DailyFoodEntry) -> dict[str, object]:
    return {
        "id": str(food.id),
        **_entry_fields(food.entry),
        "addedAt": _iso(food.added_at),
    }


def serialize_daily_record(record: DailyRecord) -> dict[str, object]:
    return {
        "date": record.date.isoformat(),
        "foods": [_serialize_daily_food(food) for food in record.foods],
        "totalCalories": record.total_calories,
        "totalProtein": record.total_protein,
        "totalFat": record.total_fat,
        "totalCarbs": record.total_carbs,
        "addedAt": _iso(record.added_at),
    }


def serialize_day_summary(record: DailyRecord | None, day: date) -> dict[str, object]:
    """Rounded totals for one day; zeros when nothing was logged."""
    if record is None:
        return {
            "date": day.isoformat(),
            "totalFoods": 0,
            "totalCalories": 0,
            "totalProtein": 0,
            "totalFat": 0,
            "totalCarbs": 0,
        }
    return {
        "date": day.isoformat(),
        "totalFoods": len(record.foods),
        "totalCalories": round_half_up(record.total_calories, 0),
        "totalProtein": round_half_up(record.total_protein, 1),
        "totalFat": round_half_up(record.total_fat, 1),
        "totalCarbs": round_half_up(record.total_carbs, 1),
    }


def serialize_streak_summary(state: StreakState) -> dict[str, object]:
    return {
        "currentStreak": state.current_streak,
        "longestStreak": state.longest_streak,
        "totalDaysLogged": state.total_days_logged,
        "streakStartDate": _iso(state.streak_start_date),
        "lastActiveDate": _iso(state.last_active_date),
    }


def serialize_streak_info(tracker: StreakTracker, today: date) -> dict[str, object]:
    """Full streak view including the recent week and achievements."""
    status = tracker.status(today)
    achievements = tracker.achievements()
    return {
        **serialize_streak_summary(tracker.state),
        "todayLogged": tracker.is_logged(today),
        "yesterdayLogged": tracker.is_logged(days_ago(today, 1)),
        "recentWeek": [
            {
                "date": day.date.isoformat(),
                "logged": day.logged,
                "isToday": day.is_today,
            }
            for day in tracker.recent_days(today)
        ],
        "streakStatus": {
            "canLogToday": status.can_log_today,
            "streakAtRisk": status.streak_at_risk,
            "message": status.message,
        },
        "achievements": {
            "firstDay": achievements.first_day,
            "weekStreak": achievements.week_streak,
            "monthStreak": achievements.month_streak,
            "hundredDays": achievements.hundred_days,
        },
    }


def serialize_streak_period(period: StreakPeriod) -> dict[str, object]:
    return {
        "startDate": period.start_date.isoformat(),
        "endDate": period.end_date.isoformat(),
        "days": period.days,
    }


def _serialize_streak_update(
    update: StreakUpdate, state: StreakState
) -> dict[str, object]:
    return {
        "currentStreak": state.current_streak,
        "longestStreak": state.longest_streak,
        "lastActiveDate": _iso(state.last_active_date),
        "streakUpdated": update.streak_updated,
        "streakMessage": update.reason,
        "isNewRecord": update.is_new_record,
        "totalDaysLogged": state.total_days_logged,
    }


def serialize_batch(
    result: BatchResult, cart_summary: CartSummary, tracker: StreakTracker
) -> dict[str, object]:
    """Render an add-to-cart batch with cart, day and streak summaries."""
    record = result.daily_record
    return {
        "success": result.success,
        "partialSuccess": result.partial_success,
        "message": result.message,
        "results": [
            {
                "item": item.item.normalized_name,
                "id": str(item.item.id),
                "action": item.action,
                "message": item.message,
            }
            for item in result.results
        ],
        "errors": [
            {
                "item": error.index,
                "originalInput": error.original_input,
                "error": error.error,
            }
            for error in result.errors
        ],
        "cartSummary": {
            "totalItems": cart_summary.total_items,
            "totalCalories": cart_summary.total_calories,
            "totalProtein": cart_summary.total_protein,
        },
        "todayNutrition": {
            **serialize_day_summary(record, result.day),
            "foods": (
                [_serialize_daily_food(food) for food in record.foods] if record else []
            ),
        },
        "streakInfo": _serialize_streak_update(result.streak, tracker.state),
    }
