"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date

from usda_nutrition.adapters.fdc_client import HttpxFdcClient
from usda_nutrition.config import Settings
from usda_nutrition.services.analysis import AnalysisService
from usda_nutrition.services.cache import InMemoryCache
from usda_nutrition.services.cart import CartStore
from usda_nutrition.services.clock import utc_today
from usda_nutrition.services.daily_log import DailyLog
from usda_nutrition.services.nutrition import NutritionService
from usda_nutrition.services.parser import QuantityParser
from usda_nutrition.services.scaler import NutrientScaler
from usda_nutrition.services.streaks import StreakTracker
from usda_nutrition.services.tracking import TrackingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies and the process-lifetime stores."""

    settings: Settings
    nutrition_service: NutritionService
    analysis_service: AnalysisService
    cart: CartStore
    daily_log: DailyLog
    streaks: StreakTracker
    tracking_service: TrackingService
    today: Callable[[], date]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        debug=resolved_settings.nutrition_debug,
    )
    analysis_service = AnalysisService(
        parser=QuantityParser(scan_whole_input=resolved_settings.unit_scan_whole_input),
        scaler=NutrientScaler(),
        nutrition_service=nutrition_service,
    )
    cart = CartStore()
    daily_log = DailyLog()
    streaks = StreakTracker()
    tracking_service = TrackingService(
        cart=cart,
        daily_log=daily_log,
        streaks=streaks,
        today=utc_today,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        analysis_service=analysis_service,
        cart=cart,
        daily_log=daily_log,
        streaks=streaks,
        tracking_service=tracking_service,
        today=utc_today,
        close_resources=close_resources,
    )
