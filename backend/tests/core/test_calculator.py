"""Unit tests for the calculator workflow - pure functions, no mocks needed."""

import pytest

from macrocook.core.calculator import calculate_results, can_calculate, empty_food
from macrocook.core.constants import INVALID_NUMBER
from macrocook.core.models import FoodData, MacroData, ValidationErrors, WeightUnit
from macrocook.core.validation import validate_food_data


def make_food(**overrides) -> FoodData:
    data = {
        "name": "Chicken breast",
        "raw_weight": 200,
        "cooked_weight": 150,
        "raw_macros": MacroData(calories=220, protein=41, carbohydrates=0, fat=5, fiber=0),
    }
    data.update(overrides)
    return FoodData(**data)


class TestEmptyFood:
    """Tests for empty_food."""

    def test_defaults(self):
        """A blank food has zero weights in grams and zero macros."""
        food = empty_food()

        assert food.name == ""
        assert food.raw_weight == 0
        assert food.cooked_weight == 0
        assert food.raw_weight_unit == WeightUnit.GRAM
        assert food.cooked_weight_unit == WeightUnit.GRAM
        assert food.raw_macros == MacroData()

    def test_blank_food_cannot_calculate(self):
        """The starting state shows no results."""
        assert can_calculate(empty_food()) is False
        assert calculate_results(empty_food()) is None


class TestCanCalculate:
    """Tests for can_calculate."""

    def test_complete_food(self):
        """A complete valid food can be calculated."""
        assert can_calculate(make_food()) is True

    def test_uses_given_errors(self):
        """Precomputed errors are respected."""
        food = make_food()
        assert can_calculate(food, ValidationErrors(fat="bad")) is False
        assert can_calculate(food, validate_food_data(food)) is True

    def test_blank_name(self):
        """A name is required."""
        assert can_calculate(make_food(name="  ")) is False

    def test_zero_weights(self):
        """Both weights must be positive."""
        assert can_calculate(make_food(raw_weight=0)) is False
        assert can_calculate(make_food(cooked_weight=0)) is False

    def test_cooked_heavier_than_raw(self):
        """Cooked cannot outweigh raw."""
        assert can_calculate(make_food(raw_weight=100, cooked_weight=150)) is False

    def test_equal_weights(self):
        """No loss is still calculable."""
        assert can_calculate(make_food(raw_weight=150, cooked_weight=150)) is True

    def test_needs_some_macro(self):
        """At least one macro must be above zero."""
        assert can_calculate(make_food(raw_macros=MacroData())) is False
        assert can_calculate(make_food(raw_macros=MacroData(fiber=0.1))) is True

    def test_mixed_units(self):
        """Raw and cooked in different units are compared in grams."""
        food = make_food(raw_weight=1, raw_weight_unit="kg", cooked_weight=700, cooked_weight_unit="g")
        assert can_calculate(food) is True

    def test_overflowing_weight(self):
        """A weight that overflows when converted to grams is not calculable."""
        food = make_food(raw_weight=1e306, raw_weight_unit="kg", cooked_weight=1)
        assert can_calculate(food) is False
        assert can_calculate(food, ValidationErrors()) is False


class TestCalculateResults:
    """Tests for calculate_results."""

    def test_chicken_breast(self):
        """200g raw to 150g cooked."""
        results = calculate_results(make_food())

        assert results is not None
        assert results.cooking_loss_percentage == 25
        assert results.adjusted_macros == MacroData(calories=165, protein=30.75, carbohydrates=0, fat=3.75, fiber=0)
        assert results.raw_density_per_100g == MacroData(calories=110, protein=20.5, carbohydrates=0, fat=2.5, fiber=0)
        assert results.cooked_density_per_100g == results.raw_density_per_100g

    def test_weight_conversions(self):
        """Both weights are expressed in every unit, rounded."""
        results = calculate_results(make_food())

        raw = results.weight_conversions.raw
        assert raw.grams == 200
        assert raw.ounces == 7.05
        assert raw.pounds == 0.44
        assert raw.kilograms == 0.2

        cooked = results.weight_conversions.cooked
        assert cooked.grams == 150
        assert cooked.ounces == 5.29
        assert cooked.pounds == 0.33
        assert cooked.kilograms == 0.15

    def test_mixed_units(self):
        """Loss uses gram-normalized weights."""
        food = make_food(raw_weight=1, raw_weight_unit="lb", cooked_weight=8, cooked_weight_unit="oz")
        results = calculate_results(food)

        # 1lb = 453.592g, 8oz = 226.796g
        assert results.cooking_loss_percentage == 50
        assert results.adjusted_macros.calories == 110
        assert results.weight_conversions.raw.grams == 453.59
        assert results.weight_conversions.cooked.grams == 226.8

    def test_rounded_to_hundredths(self):
        """Every number comes back with at most 2 decimals."""
        food = make_food(
            raw_weight=333,
            cooked_weight=217,
            raw_macros=MacroData(calories=389, protein=16.9, carbohydrates=66.3, fat=6.9, fiber=10.6),
        )
        results = calculate_results(food)

        assert results.cooking_loss_percentage == 34.83
        for macros in (results.adjusted_macros, results.raw_density_per_100g, results.cooked_density_per_100g):
            for value in macros.model_dump().values():
                assert round(value, 2) == pytest.approx(value)

    def test_invalid_food_gives_none(self):
        """Invalid input suppresses results entirely."""
        assert calculate_results(make_food(raw_weight=float("nan"))) is None
        assert calculate_results(make_food(raw_macros=MacroData(calories=-1, protein=10))) is None

    def test_overflowing_weight_gives_none(self):
        """Weights that overflow in grams give no results instead of raising."""
        food = make_food(raw_weight=1e306, raw_weight_unit="kg", cooked_weight=1)

        assert calculate_results(food) is None
        assert validate_food_data(food).cooking_ratio == INVALID_NUMBER

    def test_deterministic(self):
        """Same food gives identical results."""
        food = make_food(raw_weight=7.05, raw_weight_unit="oz", cooked_weight=149, cooked_weight_unit="g")
        assert calculate_results(food) == calculate_results(food)

    def test_serializes_for_display(self):
        """Results dump with the display layer's field names."""
        data = calculate_results(make_food()).model_dump(by_alias=True)

        assert set(data) == {
            "cookingLossPercentage",
            "adjustedMacros",
            "rawDensityPer100g",
            "cookedDensityPer100g",
            "weightConversions",
        }
        assert set(data["weightConversions"]) == {"raw", "cooked"}
