"""Macro Calculations - Pure functions for cooking math.

All functions are pure: same input always produces same output, no side effects.
They expect validated input and raise CalculationError subclasses otherwise.
"""

from .errors import (
    CookedExceedsRawError,
    InvalidRawWeightError,
    InvalidWeightError,
    NegativeCookedWeightError,
)
from .models import MacroData, WeightUnit
from .weights import round_to_hundredths, to_grams


def scale_macros(macros: MacroData, factor: float) -> MacroData:
    """Multiply every macronutrient field by factor."""
    return MacroData(
        calories=macros.calories * factor,
        protein=macros.protein * factor,
        carbohydrates=macros.carbohydrates * factor,
        fat=macros.fat * factor,
        fiber=macros.fiber * factor,
    )


def calculate_cooking_loss(raw_weight: float, cooked_weight: float) -> float:
    """Calculate the percentage of weight lost during cooking.

    Formula: ((raw - cooked) / raw) * 100. Both weights must already be in
    the same unit.

    Args:
        raw_weight: Weight before cooking
        cooked_weight: Weight after cooking

    Returns:
        Loss percentage between 0 and 100, unrounded

    Raises:
        InvalidRawWeightError: If raw_weight <= 0
        NegativeCookedWeightError: If cooked_weight < 0
        CookedExceedsRawError: If cooked_weight > raw_weight
    """
    if raw_weight <= 0:
        raise InvalidRawWeightError()
    if cooked_weight < 0:
        raise NegativeCookedWeightError()
    if cooked_weight > raw_weight:
        raise CookedExceedsRawError()

    return ((raw_weight - cooked_weight) / raw_weight) * 100


def adjust_macros_for_cooking(
    raw_macros: MacroData,
    raw_weight: float,
    raw_weight_unit: WeightUnit | str,
    cooked_weight: float,
    cooked_weight_unit: WeightUnit | str,
) -> MacroData:
    """Scale raw macros to the cooked portion.

    Formula: raw value * (cooked grams / raw grams). Cooked heavier than raw
    is not rejected here; the ratio is simply above 1.

    Args:
        raw_macros: Macros measured against the raw weight
        raw_weight: Weight before cooking
        raw_weight_unit: Unit of raw_weight
        cooked_weight: Weight after cooking
        cooked_weight_unit: Unit of cooked_weight

    Returns:
        New MacroData for the cooked portion

    Raises:
        InvalidRawWeightError: If the raw weight is <= 0 grams
        NegativeCookedWeightError: If the cooked weight is < 0 grams
    """
    raw_grams = to_grams(raw_weight, raw_weight_unit)
    cooked_grams = to_grams(cooked_weight, cooked_weight_unit)

    if raw_grams <= 0:
        raise InvalidRawWeightError()
    if cooked_grams < 0:
        raise NegativeCookedWeightError()

    return scale_macros(raw_macros, cooked_grams / raw_grams)


def calculate_nutrient_density(macros: MacroData, weight: float, weight_unit: WeightUnit | str) -> MacroData:
    """Normalize macros to 100 grams of food.

    Args:
        macros: Macros measured against weight
        weight: The weight the macros belong to
        weight_unit: Unit of weight

    Returns:
        New MacroData per 100g

    Raises:
        InvalidWeightError: If the weight is <= 0 grams
    """
    grams = to_grams(weight, weight_unit)

    if grams <= 0:
        raise InvalidWeightError()

    return scale_macros(macros, 100 / grams)


def format_macro_value(value: float) -> float:
    """Round a macro value to 2 decimal places."""
    return round_to_hundredths(value)


def format_macro_data(macros: MacroData) -> MacroData:
    """Round every field of a MacroData to 2 decimal places."""
    return MacroData(
        calories=format_macro_value(macros.calories),
        protein=format_macro_value(macros.protein),
        carbohydrates=format_macro_value(macros.carbohydrates),
        fat=format_macro_value(macros.fat),
        fiber=format_macro_value(macros.fiber),
    )
