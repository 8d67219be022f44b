"""Tests for nutrient profile building and scaling."""

from usda_nutrition.domain.quantities import ParsedQuantity
from usda_nutrition.services.scaler import (
    NutrientScaler,
    build_profile,
    describe_calculation,
    round_half_up,
)
from tests.conftest import APPLE_NUTRIENTS


def test_build_profile_matches_names_by_substring() -> None:
    profile = build_profile(APPLE_NUTRIENTS)

    assert profile.energy.amount == 52
    assert profile.energy.unit == "kcal"
    assert profile.fat.amount == 0.17
    assert profile.carbohydrate.amount == 13.81
    assert profile.sodium.unit == "mg"


def test_build_profile_first_match_wins() -> None:
    profile = build_profile(
        [
            {"nutrient": {"name": "Energy", "unitName": "kJ"}, "amount": 218},
            {"nutrient": {"name": "ENERGY", "unitName": "kcal"}, "amount": 52},
        ]
    )

    assert profile.energy.amount == 218
    assert profile.energy.unit == "kJ"


def test_build_profile_tolerates_malformed_records() -> None:
    profile = build_profile(
        [
            {"nutrient": None, "amount": 5},
            {"nutrient": {"name": "Protein"}, "amount": None},
            "not-a-record",
        ]
    )

    assert profile.protein.amount == 0
    assert profile.protein.unit == "N/A"
    assert profile.iron.unit == "N/A"


def test_scale_at_100_grams_returns_base_values() -> None:
    profile = build_profile(APPLE_NUTRIENTS)

    scaled = NutrientScaler().scale(profile, 100, "grams", "apple")

    assert scaled.calories.amount == profile.energy.amount
    assert scaled.calories.unit == "kcal"
    assert scaled.iron.amount == 0.12


def test_scale_pieces_uses_average_weight() -> None:
    profile = build_profile(APPLE_NUTRIENTS)

    scaled = NutrientScaler().scale(profile, 2, "pieces", "Apple")

    assert scaled.calories.amount == 189
    assert scaled.protein.amount == 0.9
    assert scaled.carbohydrates.amount == 50.3
    assert scaled.calcium.amount == 22
    assert scaled.iron.amount == 0.44
    assert scaled.sodium.amount == 4


def test_unknown_food_defaults_to_100_grams_per_piece() -> None:
    scaler = NutrientScaler()

    assert scaler.piece_weight("mango") == 100
    assert scaler.factor(3, "pieces", "mango") == 3


def test_missing_nutrients_scale_to_zero() -> None:
    scaled = NutrientScaler().scale(build_profile([]), 250, "grams", "rice")

    for amount in scaled.as_dict().values():
        assert amount.amount == 0
        assert amount.unit == "N/A"


def test_scale_is_pure() -> None:
    profile = build_profile(APPLE_NUTRIENTS)
    scaler = NutrientScaler()

    first = scaler.scale(profile, 150, "grams", "apple")
    second = scaler.scale(profile, 150, "grams", "apple")

    assert first == second


def test_round_half_up() -> None:
    assert round_half_up(2.5, 0) == 3
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(float("inf"), 1) == 0


def test_describe_calculation_for_kilograms() -> None:
    parsed = ParsedQuantity(
        food="chicken",
        quantity=1500,
        unit="grams",
        original_quantity=1.5,
        original_unit="kg",
        original_text="1.5 kg chicken",
    )

    method, note = describe_calculation(parsed)

    assert method == "1.5kg → 1500g ÷ 100g × base nutrition"
    assert note == "Converted 1.5kg to 1500g for calculation"


def test_describe_calculation_for_pieces() -> None:
    parsed = ParsedQuantity(
        food="apple",
        quantity=2,
        unit="pieces",
        original_quantity=2,
        original_unit="pieces",
        original_text="2 apples",
    )

    method, note = describe_calculation(parsed)

    assert method == "2 pieces × estimated weight × base nutrition"
    assert note == "Estimated average weight used for apple"
