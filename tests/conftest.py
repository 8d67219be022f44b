"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, timedelta

import pytest

from usda_nutrition.adapters.fdc_client import FdcClient
from usda_nutrition.config import Settings
from usda_nutrition.containers import AppContainer
from usda_nutrition.services.analysis import AnalysisService
from usda_nutrition.services.cache import InMemoryCache
from usda_nutrition.services.cart import CartStore
from usda_nutrition.services.daily_log import DailyLog
from usda_nutrition.services.nutrition import NutritionService
from usda_nutrition.services.parser import QuantityParser
from usda_nutrition.services.scaler import NutrientScaler
from usda_nutrition.services.streaks import StreakTracker
from usda_nutrition.services.tracking import TrackingService

APPLE_NUTRIENTS: list[dict[str, object]] = [
    {"nutrient": {"id": 1008, "name": "Energy", "unitName": "kcal"}, "amount": 52},
    {"nutrient": {"id": 1003, "name": "Protein", "unitName": "g"}, "amount": 0.26},
    {
        "nutrient": {"id": 1004, "name": "Total lipid (fat)", "unitName": "g"},
        "amount": 0.17,
    },
    {
        "nutrient": {
            "id": 1005,
            "name": "Carbohydrate, by difference",
            "unitName": "g",
        },
        "amount": 13.81,
    },
    {
        "nutrient": {"id": 2000, "name": "Sugars, total", "unitName": "g"},
        "amount": 10.39,
    },
    {
        "nutrient": {"id": 1079, "name": "Fiber, total dietary", "unitName": "g"},
        "amount": 2.4,
    },
    {"nutrient": {"id": 1087, "name": "Calcium, Ca", "unitName": "mg"}, "amount": 6},
    {"nutrient": {"id": 1089, "name": "Iron, Fe", "unitName": "mg"}, "amount": 0.12},
    {"nutrient": {"id": 1093, "name": "Sodium, Na", "unitName": "mg"}, "amount": 1},
]


def nutrition_payload(
    food: str = "apple",
    original_input: str | None = None,
    calories: str = "95 kcal",
    protein: str = "0.5 g",
    **overrides: object,
) -> dict[str, object]:
    """Build an ingest record like the one the analysis endpoint returns."""
    payload: dict[str, object] = {
        "originalInput": original_input or f"1 {food}",
        "parsedFood": food,
        "inputQuantity": "1 pieces",
        "calculationQuantity": "1 pieces",
        "foodName": f"{food.title()}, raw",
        "calculatedNutrition": {
            "calories": calories,
            "protein": protein,
            "fat": "0.3 g",
            "carbohydrates": "25.1 g",
            "sugar": "18.9 g",
            "fiber": "4.4 g",
            "calcium": "11 mg",
            "iron": "0.22 mg",
            "sodium": "2 mg",
        },
    }
    payload.update(overrides)
    return payload


@dataclass
class FixedClock:
    """Controllable replacement for the UTC date clock."""

    day: date = date(2024, 1, 15)

    def __call__(self) -> date:
        return self.day

    def advance(self, days: int = 1) -> None:
        self.day += timedelta(days=days)


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "fdcId": 171688,
                    "description": "Apples, fuji, with skin, raw",
                    "dataType": "SR Legacy",
                }
            ]
        }
    )
    food_payload: dict[str, object] = field(
        default_factory=lambda: {
            "fdcId": 171688,
            "description": "Apples, fuji, with skin, raw",
            "dataType": "SR Legacy",
            "foodNutrients": APPLE_NUTRIENTS,
        }
    )
    error: Exception | None = None
    search_queries: list[str] = field(default_factory=list)

    async def search_foods(self, query: str, page_size: int = 1) -> dict[str, object]:
        self.search_queries.append(query)
        if self.error is not None:
            raise self.error
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        if self.error is not None:
            raise self.error
        return self.food_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(fdc_api_key="fdc-key", _env_file=None)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def container(
    settings: Settings, clock: FixedClock, fdc_client: FakeFdcClient
) -> AppContainer:
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        retry_delay_seconds=0,
    )
    analysis_service = AnalysisService(
        parser=QuantityParser(),
        scaler=NutrientScaler(),
        nutrition_service=nutrition_service,
    )
    cart = CartStore()
    daily_log = DailyLog()
    streaks = StreakTracker()
    tracking_service = TrackingService(
        cart=cart, daily_log=daily_log, streaks=streaks, today=clock
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=nutrition_service,
        analysis_service=analysis_service,
        cart=cart,
        daily_log=daily_log,
        streaks=streaks,
        tracking_service=tracking_service,
        today=clock,
        close_resources=close_resources,
    )
