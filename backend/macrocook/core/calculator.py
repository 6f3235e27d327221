"""Calculator - Pure orchestration of validation and the calculation engine.

All functions are pure: same input always produces same output, no side effects.
"""

import logging
import math

from .calculations import (
    adjust_macros_for_cooking,
    calculate_cooking_loss,
    calculate_nutrient_density,
    format_macro_data,
    format_macro_value,
)
from .models import (
    CalculationResults,
    FoodData,
    ValidationErrors,
    WeightConversionPair,
    WeightConversions,
    WeightUnit,
)
from .validation import has_validation_errors, validate_food_data
from .weights import format_weight, get_all_weight_conversions, to_grams


logger = logging.getLogger(__name__)


def can_calculate(food: FoodData, errors: ValidationErrors | None = None) -> bool:
    """Decide whether a food record is complete enough to calculate.

    Args:
        food: The food record
        errors: Validation result for food (computed when omitted)

    Returns:
        True if results can be shown
    """
    if errors is None:
        errors = validate_food_data(food)

    if has_validation_errors(errors):
        return False

    raw_grams = to_grams(food.raw_weight, food.raw_weight_unit)
    cooked_grams = to_grams(food.cooked_weight, food.cooked_weight_unit)
    has_required_data = (
        food.name.strip() != ""
        and food.raw_weight > 0
        and food.cooked_weight > 0
        and math.isfinite(raw_grams)
        and math.isfinite(cooked_grams)
        and cooked_grams <= raw_grams
    )
    has_macro_data = any(value > 0 for value in food.raw_macros.model_dump().values())

    return has_required_data and has_macro_data


def _format_conversions(conversions: WeightConversions) -> WeightConversions:
    return WeightConversions(
        grams=format_weight(conversions.grams),
        ounces=format_weight(conversions.ounces),
        pounds=format_weight(conversions.pounds),
        kilograms=format_weight(conversions.kilograms),
    )


def calculate_results(food: FoodData) -> CalculationResults | None:
    """Run the full calculation for a food record.

    Cooked density is taken from the unrounded adjusted macros, so it
    matches the raw density up to rounding.

    Args:
        food: The food record

    Returns:
        CalculationResults with every number rounded to 2 decimals,
        or None if the record cannot be calculated yet
    """
    if not can_calculate(food):
        logger.debug("Skipping calculation for incomplete food: %r", food.name)
        return None

    raw_grams = to_grams(food.raw_weight, food.raw_weight_unit)
    cooked_grams = to_grams(food.cooked_weight, food.cooked_weight_unit)
    cooking_loss = calculate_cooking_loss(raw_grams, cooked_grams)

    adjusted_macros = adjust_macros_for_cooking(
        food.raw_macros,
        food.raw_weight,
        food.raw_weight_unit,
        food.cooked_weight,
        food.cooked_weight_unit,
    )
    raw_density = calculate_nutrient_density(food.raw_macros, food.raw_weight, food.raw_weight_unit)
    cooked_density = calculate_nutrient_density(adjusted_macros, food.cooked_weight, food.cooked_weight_unit)

    logger.debug("Calculated %r: %.2f%% cooking loss", food.name, cooking_loss)

    return CalculationResults(
        cooking_loss_percentage=format_macro_value(cooking_loss),
        adjusted_macros=format_macro_data(adjusted_macros),
        raw_density_per_100g=format_macro_data(raw_density),
        cooked_density_per_100g=format_macro_data(cooked_density),
        weight_conversions=WeightConversionPair(
            raw=_format_conversions(get_all_weight_conversions(food.raw_weight, food.raw_weight_unit)),
            cooked=_format_conversions(get_all_weight_conversions(food.cooked_weight, food.cooked_weight_unit)),
        ),
    )


def empty_food() -> FoodData:
    """A blank food record with zero weights in grams."""
    return FoodData(
        name="",
        raw_weight=0,
        raw_weight_unit=WeightUnit.GRAM,
        cooked_weight=0,
        cooked_weight_unit=WeightUnit.GRAM,
    )
