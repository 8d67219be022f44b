"""Free-text quantity parsing for food descriptions."""

import logging
import re
from dataclasses import dataclass

from usda_nutrition.domain.quantities import CalculationUnit, InputUnit, ParsedQuantity

_logger = logging.getLogger(__name__)

_PREFIX = r"(?:i\s+(?:had|ate|consumed)\s+)?"
_NUMBER = r"(?P<quantity>\d+(?:\.\d+)?)"
_FOOD = r"(?P<food>[a-zA-Z\s]+?)"
_KILOGRAMS = r"\s*(?P<unit>kilograms?|kg)\s+(?:of\s+)?"
_GRAMS = r"\s*(?P<unit>grams?|g)\s+(?:of\s+)?"
_COUNT = r"\s+"

_KILOGRAM_TOKEN = re.compile(r"kilograms?|kg")
_GRAM_TOKEN = re.compile(r"grams?|g")
_LEADING_VERB = re.compile(r"^" + _PREFIX)

GRAMS_PER_KILOGRAM = 1000


@dataclass(frozen=True)
class _Match:
    quantity: float
    food: str
    unit_token: str | None


@dataclass(frozen=True)
class _Matcher:
    """One quantity pattern; returns None when the text does not match."""

    name: str
    pattern: re.Pattern[str]

    def match(self, text: str) -> _Match | None:
        found = self.pattern.search(text)
        if found is None:
            return None
        groups = found.groupdict()
        return _Match(
            quantity=float(groups["quantity"]),
            food=groups["food"].strip(),
            unit_token=groups.get("unit"),
        )


# Most specific first; the first matcher that matches wins.
MATCHERS: tuple[_Matcher, ...] = (
    _Matcher("kilograms", re.compile(_NUMBER + _KILOGRAMS + _FOOD + "$")),
    _Matcher("grams", re.compile(_NUMBER + _GRAMS + _FOOD + "$")),
    _Matcher("verb_kilograms", re.compile(_PREFIX + _NUMBER + _KILOGRAMS + _FOOD + "$")),
    _Matcher("verb_grams", re.compile(_PREFIX + _NUMBER + _GRAMS + _FOOD + "$")),
    _Matcher("count", re.compile(_NUMBER + _COUNT + _FOOD + "s?$")),
    _Matcher("verb_count", re.compile(_PREFIX + _NUMBER + _COUNT + _FOOD + "s?$")),
)


@dataclass
class QuantityParser:
    """Extract a food name, quantity and unit from a food description.

    With ``scan_whole_input`` on, the unit is classified by searching the whole
    description for a kilogram or gram token, so a food name containing a
    ``g`` ("2 eggs") is treated as grams. Turning it off classifies only the
    unit token captured by the matching pattern.
    """

    scan_whole_input: bool = True

    def parse(self, text: str) -> ParsedQuantity:
        """Parse a description; falls back to one piece of the whole input."""
        normalized = text.lower().strip()
        for matcher in MATCHERS:
            found = matcher.match(normalized)
            if found is None:
                continue
            original_unit = self._classify_unit(normalized, found.unit_token)
            quantity = found.quantity
            unit: CalculationUnit = "pieces"
            if original_unit == "kg":
                quantity = found.quantity * GRAMS_PER_KILOGRAM
                unit = "grams"
            elif original_unit == "grams":
                unit = "grams"
            parsed = ParsedQuantity(
                food=found.food,
                quantity=quantity,
                unit=unit,
                original_quantity=found.quantity,
                original_unit=original_unit,
                original_text=text,
            )
            _logger.debug("Parsed %r with %s matcher: %s", text, matcher.name, parsed)
            return parsed

        return ParsedQuantity(
            food=_LEADING_VERB.sub("", normalized),
            quantity=1.0,
            unit="pieces",
            original_quantity=1.0,
            original_unit="pieces",
            original_text=text,
        )

    def _classify_unit(self, normalized: str, unit_token: str | None) -> InputUnit:
        haystack = normalized if self.scan_whole_input else (unit_token or "")
        if _KILOGRAM_TOKEN.search(haystack):
            return "kg"
        if _GRAM_TOKEN.search(haystack):
            return "grams"
        return "pieces"
