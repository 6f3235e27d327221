"""Weight Conversion - Pure functions for mass unit arithmetic.

Conversions always go through grams: value -> grams -> target unit. The
two-hop path is kept even though pairwise factors would round differently.
"""

import math

from .constants import (
    GRAMS_TO_KILOGRAMS,
    GRAMS_TO_OUNCES,
    GRAMS_TO_POUNDS,
    KILOGRAMS_TO_GRAMS,
    OUNCES_TO_GRAMS,
    POUNDS_TO_GRAMS,
)
from .errors import UnsupportedUnitError
from .models import WeightConversions, WeightUnit


# WeightUnit is a str enum, so plain codes like "oz" hit the same keys
_TO_GRAMS = {
    WeightUnit.GRAM: 1,
    WeightUnit.OUNCE: OUNCES_TO_GRAMS,
    WeightUnit.POUND: POUNDS_TO_GRAMS,
    WeightUnit.KILOGRAM: KILOGRAMS_TO_GRAMS,
}

_FROM_GRAMS = {
    WeightUnit.GRAM: 1,
    WeightUnit.OUNCE: GRAMS_TO_OUNCES,
    WeightUnit.POUND: GRAMS_TO_POUNDS,
    WeightUnit.KILOGRAM: GRAMS_TO_KILOGRAMS,
}


def _factor(table: dict[WeightUnit, float], unit: WeightUnit | str) -> float:
    try:
        return table[unit]
    except (KeyError, TypeError):
        raise UnsupportedUnitError(unit) from None


def convert_weight(value: float, from_unit: WeightUnit | str, to_unit: WeightUnit | str) -> float:
    """Convert a weight from one unit to another.

    Args:
        value: Weight expressed in from_unit
        from_unit: Source unit (WeightUnit or its code)
        to_unit: Target unit (WeightUnit or its code)

    Returns:
        The weight in to_unit. Same-unit calls return value untouched.

    Raises:
        UnsupportedUnitError: If either unit is not g, oz, lb or kg
    """
    if from_unit == to_unit:
        _factor(_TO_GRAMS, from_unit)
        return value

    grams = value if from_unit == WeightUnit.GRAM else value * _factor(_TO_GRAMS, from_unit)

    if to_unit == WeightUnit.GRAM:
        return grams
    return grams * _factor(_FROM_GRAMS, to_unit)


def to_grams(value: float, unit: WeightUnit | str) -> float:
    """Convert a weight to grams."""
    return convert_weight(value, unit, WeightUnit.GRAM)


def get_all_weight_conversions(weight: float, unit: WeightUnit | str) -> WeightConversions:
    """Express a weight in every supported unit.

    Args:
        weight: The weight value
        unit: Unit the weight is expressed in

    Returns:
        WeightConversions with grams, ounces, pounds and kilograms
    """
    return WeightConversions(
        grams=convert_weight(weight, unit, WeightUnit.GRAM),
        ounces=convert_weight(weight, unit, WeightUnit.OUNCE),
        pounds=convert_weight(weight, unit, WeightUnit.POUND),
        kilograms=convert_weight(weight, unit, WeightUnit.KILOGRAM),
    )


def round_to_hundredths(value: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    Negative values mirror positive ones: -3.14159 -> -3.14.
    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) * 100 + 0.5), value) / 100


def format_weight(weight: float) -> float:
    """Format a weight for display (2 decimal places)."""
    return round_to_hundredths(weight)
