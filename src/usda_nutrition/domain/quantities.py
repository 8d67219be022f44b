"""Domain models for parsed food quantities."""

from dataclasses import dataclass
from typing import Literal

CalculationUnit = Literal["grams", "pieces"]
InputUnit = Literal["kg", "grams", "pieces"]


@dataclass(frozen=True)
class ParsedQuantity:
    """Food name and quantity extracted from a free-text description.

    ``quantity`` is always expressed in ``unit``. Kilogram inputs are converted
    to grams, with the stated amount kept in ``original_quantity``.
    """

    food: str
    quantity: float
    unit: CalculationUnit
    original_quantity: float
    original_unit: InputUnit
    original_text: str
