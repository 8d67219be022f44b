"""Cart endpoints backed by the tracking service."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Body, HTTPException, Request, status

from usda_nutrition.api.serializers import (
    serialize_batch,
    serialize_cart_item,
    serialize_cart_summary,
    serialize_streak_info,
)

if TYPE_CHECKING:
    from usda_nutrition.containers import AppContainer

router = APIRouter(prefix="/api", tags=["cart"])

_logger = logging.getLogger(__name__)


@router.get("/addtocart")
async def add_to_cart_query(request: Request) -> dict[str, object]:
    """Add one or more entries passed as a JSON ``data`` query parameter."""
    params = request.query_params
    if not params:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Query parameters are missing"},
        )
    raw_data = params.get("data")
    if raw_data is None:
        items: list[object] = [dict(params)]
    else:
        try:
            items = _as_items(json.loads(raw_data))
        except json.JSONDecodeError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"error": "Invalid JSON in data parameter"},
            ) from exc
    return _add_items(request, items)


@router.post("/cart")
async def add_to_cart(
    request: Request, payload: dict[str, object] | list[object] = Body(...)
) -> dict[str, object]:
    """Add one entry or a list of entries sent as the JSON body."""
    return _add_items(request, _as_items(payload))


@router.get("/cart")
async def view_cart(request: Request) -> dict[str, object]:
    """Return cart items, totals and streak info."""
    container: AppContainer = request.app.state.container
    return {
        "cart": [serialize_cart_item(item) for item in container.cart.items()],
        "summary": serialize_cart_summary(container.cart.summary()),
        "streakInfo": serialize_streak_info(container.streaks, container.today()),
    }


@router.delete("/cart")
async def clear_cart(request: Request) -> dict[str, object]:
    """Empty the cart; the daily log and streak are untouched."""
    container: AppContainer = request.app.state.container
    removed = container.cart.clear()
    _logger.info("Cleared %s item(s) from cart", removed)
    return {
        "success": True,
        "message": f"Cleared {removed} item(s) from cart",
        "cart": [],
    }


@router.delete("/cart/{item_id}")
async def remove_cart_item(item_id: str, request: Request) -> dict[str, object]:
    """Remove a single cart item by id."""
    container: AppContainer = request.app.state.container
    try:
        removed = container.cart.remove(UUID(item_id))
    except ValueError:
        removed = None
    if removed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Item not found in cart"},
        )
    summary = container.cart.summary()
    return {
        "success": True,
        "message": "Item removed from cart",
        "removedItem": serialize_cart_item(removed),
        "cartSummary": {
            "totalItems": summary.total_items,
            "totalCalories": summary.total_calories,
        },
    }


def _add_items(request: Request, items: list[object]) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = container.tracking_service.add_entries(items)
    _logger.info("Add to cart: %s", result.message)
    return serialize_batch(result, container.cart.summary(), container.streaks)


def _as_items(payload: object) -> list[object]:
    if isinstance(payload, list):
        return payload
    return [payload]
