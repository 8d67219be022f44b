"""Food analysis and nutrition history endpoints."""

from __future__ import annotations

import logging
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, Body, HTTPException, Query, Request, status

from usda_nutrition.api.serializers import (
    USAGE_EXAMPLES,
    serialize_analysis,
    serialize_daily_record,
    serialize_day_summary,
    serialize_parsed,
)
from usda_nutrition.services.clock import days_ago

if TYPE_CHECKING:
    from usda_nutrition.containers import AppContainer

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])

_logger = logging.getLogger(__name__)

HISTORY_DEFAULT_DAYS = 7


@router.get("")
async def nutrition_usage() -> dict[str, object]:
    """Describe how to call the analysis endpoint."""
    return {
        "message": "Use POST method to search for nutrition data",
        "usage": 'POST /api/nutrition with JSON body: {"foodName": "apple"}',
        "examples": USAGE_EXAMPLES,
    }


@router.post("")
async def analyze_food(
    request: Request, payload: dict[str, object] | None = Body(default=None)
) -> dict[str, object]:
    """Parse a food description, look it up in FDC and scale its nutrients."""
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Request body is missing. Please send JSON data with "
                "Content-Type: application/json"
            },
        )
    food_name = payload.get("foodName")
    if not isinstance(food_name, str) or not food_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Please provide a valid food description",
                "received": payload,
                "examples": USAGE_EXAMPLES,
            },
        )

    container: AppContainer = request.app.state.container
    try:
        parsed, analysis = await container.analysis_service.analyze(food_name)
    except httpx.HTTPStatusError as exc:
        _logger.exception("FDC lookup failed for %r", food_name)
        if exc.response.status_code == status.HTTP_403_FORBIDDEN:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail={
                    "error": "USDA API authentication failed",
                    "details": "Check your USDA API key",
                },
            ) from exc
        raise _internal_error(exc) from exc
    except Exception as exc:
        _logger.exception("Nutrition analysis failed for %r", food_name)
        raise _internal_error(exc) from exc

    if analysis is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": f"Food '{parsed.food}' not found in USDA database",
                "parsedInput": serialize_parsed(parsed),
            },
        )
    return serialize_analysis(analysis)


@router.get("/history")
async def nutrition_history(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
) -> dict[str, object]:
    """Return one day, a date range, or the last week of daily records."""
    container: AppContainer = request.app.state.container
    daily_log = container.daily_log

    if day is not None:
        record = daily_log.get(day)
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={
                    "error": f"No nutrition data found for {day.isoformat()}",
                    "date": day.isoformat(),
                },
            )
        return {"date": day.isoformat(), "data": serialize_daily_record(record)}

    if start_date is not None and end_date is not None:
        records = daily_log.range(start_date, end_date)
        return {
            "startDate": start_date.isoformat(),
            "endDate": end_date.isoformat(),
            "data": {
                key.isoformat(): serialize_daily_record(record)
                for key, record in records.items()
            },
            "totalDays": len(records),
        }

    today = container.today()
    week_ago = days_ago(today, HISTORY_DEFAULT_DAYS)
    records = daily_log.range(week_ago, today)
    return {
        "message": "Last 7 days nutrition history",
        "startDate": week_ago.isoformat(),
        "endDate": today.isoformat(),
        "data": {
            key.isoformat(): serialize_daily_record(record)
            for key, record in records.items()
        },
        "totalDays": len(records),
        "usage": {
            "specificDate": "/api/nutrition/history?date=2024-01-17",
            "dateRange": "/api/nutrition/history?startDate=2024-01-15&endDate=2024-01-20",
        },
    }


@router.get("/today")
async def nutrition_today(request: Request) -> dict[str, object]:
    """Return today's daily record, or an empty one."""
    container: AppContainer = request.app.state.container
    today = container.today()
    record = container.daily_log.get(today)
    if record is None:
        return {
            "date": today.isoformat(),
            "message": "No nutrition data logged today",
            "data": {
                "date": today.isoformat(),
                "foods": [],
                "totalCalories": 0,
                "totalProtein": 0,
                "totalFat": 0,
                "totalCarbs": 0,
            },
        }
    return {
        "date": today.isoformat(),
        "data": serialize_daily_record(record),
        "summary": serialize_day_summary(record, today),
    }


def _internal_error(exc: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "Internal server error", "details": str(exc)},
    )
