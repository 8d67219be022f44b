"""Streak endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from usda_nutrition.api.serializers import (
    serialize_day_summary,
    serialize_streak_info,
    serialize_streak_period,
    serialize_streak_summary,
)

if TYPE_CHECKING:
    from usda_nutrition.containers import AppContainer

router = APIRouter(prefix="/api/streak", tags=["streak"])


@router.get("")
async def streak_info(request: Request) -> dict[str, object]:
    """Return the current streak with recent activity and achievements."""
    container: AppContainer = request.app.state.container
    return serialize_streak_info(container.streaks, container.today())


@router.post("/reset")
async def reset_streak(request: Request) -> dict[str, object]:
    """Reset the streak while keeping nutrition history."""
    container: AppContainer = request.app.state.container
    previous = container.streaks.reset()
    return {
        "success": True,
        "message": "Streak data has been reset but nutrition history preserved",
        "previousData": {
            "currentStreak": previous.current_streak,
            "longestStreak": previous.longest_streak,
            "totalDaysLogged": previous.total_days_logged,
        },
        "newData": {
            **serialize_streak_summary(container.streaks.state),
            "streakLog": [],
            "nutritionHistoryPreserved": True,
            "daysWithData": len(container.daily_log),
        },
    }


@router.get("/history")
async def streak_history(request: Request) -> dict[str, object]:
    """Return streak periods alongside a per-day nutrition summary."""
    container: AppContainer = request.app.state.container
    streaks = container.streaks
    dates_with_data = container.daily_log.dates()
    nutrition_history = []
    for day in dates_with_data:
        record = container.daily_log.get(day)
        nutrition_history.append(
            {
                **serialize_day_summary(record, day),
                "logged": streaks.is_logged(day),
                "foods": [
                    {
                        "name": food.entry.parsed_food,
                        "quantity": food.entry.input_quantity,
                        "calories": food.entry.nutrition.calories.amount,
                    }
                    for food in (record.foods if record else [])
                ],
            }
        )
    return {
        "streakSummary": serialize_streak_summary(streaks.state),
        "streakPeriods": [serialize_streak_period(p) for p in streaks.periods()],
        "nutritionHistory": nutrition_history,
        "datesWithData": [day.isoformat() for day in dates_with_data],
        "streakLog": [day.isoformat() for day in streaks.logged_dates()],
    }
