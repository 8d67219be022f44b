"""Turn a food description into scaled nutrition."""

import logging
from dataclasses import dataclass

from usda_nutrition.domain.nutrition import FoodAnalysis
from usda_nutrition.domain.quantities import ParsedQuantity
from usda_nutrition.services.nutrition import NutritionService
from usda_nutrition.services.parser import QuantityParser
from usda_nutrition.services.scaler import NutrientScaler, describe_calculation

_logger = logging.getLogger(__name__)


@dataclass
class AnalysisService:
    """Parse, look up and scale a single food description."""

    parser: QuantityParser
    scaler: NutrientScaler
    nutrition_service: NutritionService

    async def analyze(self, text: str) -> tuple[ParsedQuantity, FoodAnalysis | None]:
        """Return the parsed input and its analysis, or None when FDC has no match.

        Lookup failures propagate to the caller.
        """
        parsed = self.parser.parse(text)
        _logger.info(
            "Parsed input: food=%s quantity=%s %s",
            parsed.food,
            parsed.quantity,
            parsed.unit,
        )
        results = await self.nutrition_service.search(parsed.food, limit=1)
        if not results:
            return parsed, None
        details = await self.nutrition_service.get_food(results[0].fdc_id)
        nutrition = self.scaler.scale(
            details.profile, parsed.quantity, parsed.unit, parsed.food
        )
        method, note = describe_calculation(parsed)
        return parsed, FoodAnalysis(
            parsed=parsed,
            food=details.summary,
            nutrition=nutrition,
            method=method,
            note=note,
        )
