"""Input Validation - Pure predicates and message producers.

Nothing here raises. Validators return a message (or None) so every field
error can be shown at once.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .constants import (
    COOKED_EXCEEDS_RAW,
    INVALID_NUMBER,
    POSITIVE_NUMBER_ONLY,
    REQUIRED_FIELD,
)
from .models import FoodData, MacroData, MacroValidationErrors, ValidationErrors, WeightUnit
from .weights import to_grams


_MACRO_FIELDS = ("calories", "protein", "carbohydrates", "fat", "fiber")

# Leading numeric prefix, the way a form field parses "12.5g"
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|\d+(?:\.\d*)?(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_positive_number(value: Any) -> bool:
    """True if value is a finite number greater than zero."""
    return _is_number(value) and math.isfinite(value) and value > 0


def is_valid_number(value: Any) -> bool:
    """True if value is a number that is neither NaN nor infinite (zero included)."""
    return _is_number(value) and math.isfinite(value)


def is_non_empty_string(value: Any) -> bool:
    """True if value is a string with something left after trimming."""
    return isinstance(value, str) and len(value.strip()) > 0


def validate_weight(weight: Any) -> str | None:
    """Validate a weight. Weights must be strictly positive.

    Args:
        weight: The weight to check

    Returns:
        Error message, or None if valid
    """
    if not is_valid_number(weight):
        return INVALID_NUMBER
    if not is_positive_number(weight):
        return POSITIVE_NUMBER_ONLY
    return None


def validate_macro_value(value: Any) -> str | None:
    """Validate a macronutrient amount. Zero is allowed.

    Args:
        value: The amount to check

    Returns:
        Error message, or None if valid
    """
    if not is_valid_number(value):
        return INVALID_NUMBER
    if value < 0:
        return POSITIVE_NUMBER_ONLY
    return None


def validate_cooking_ratio(
    raw_weight: Any,
    cooked_weight: Any,
    raw_weight_unit: WeightUnit | str = WeightUnit.GRAM,
    cooked_weight_unit: WeightUnit | str = WeightUnit.GRAM,
) -> str | None:
    """Validate that cooking did not add weight.

    Each weight is checked on its own first (raw before cooked). Only when
    both pass are they compared, in grams. A weight too large to express
    in grams is an invalid number.

    Args:
        raw_weight: Weight before cooking
        cooked_weight: Weight after cooking
        raw_weight_unit: Unit of raw_weight
        cooked_weight_unit: Unit of cooked_weight

    Returns:
        Error message, or None if valid
    """
    raw_error = validate_weight(raw_weight)
    if raw_error:
        return raw_error

    cooked_error = validate_weight(cooked_weight)
    if cooked_error:
        return cooked_error

    raw_grams = to_grams(raw_weight, raw_weight_unit)
    cooked_grams = to_grams(cooked_weight, cooked_weight_unit)

    # Finite weights can still overflow once converted to grams
    if not (math.isfinite(raw_grams) and math.isfinite(cooked_grams)):
        return INVALID_NUMBER

    if cooked_grams > raw_grams:
        return COOKED_EXCEEDS_RAW

    return None


def validate_food_name(name: Any) -> str | None:
    """Validate a food name (required, not just whitespace)."""
    if not is_non_empty_string(name):
        return REQUIRED_FIELD
    return None


def validate_macro_data(macros: MacroData) -> MacroValidationErrors:
    """Validate every macronutrient field independently.

    Args:
        macros: The macros to check

    Returns:
        MacroValidationErrors with a message for each invalid field
    """
    errors = {}
    for field in _MACRO_FIELDS:
        error = validate_macro_value(getattr(macros, field))
        if error:
            errors[field] = error
    return MacroValidationErrors(**errors)


def validate_food_data(data: FoodData) -> ValidationErrors:
    """Validate a complete food record.

    The cooking_ratio check only runs when both weights are individually
    valid, so a bad weight is reported once, on its own field.

    Args:
        data: The food record to check

    Returns:
        ValidationErrors with a message for each invalid field
    """
    errors: dict[str, str] = {}

    name_error = validate_food_name(data.name)
    if name_error:
        errors["name"] = name_error

    raw_weight_error = validate_weight(data.raw_weight)
    if raw_weight_error:
        errors["raw_weight"] = raw_weight_error

    cooked_weight_error = validate_weight(data.cooked_weight)
    if cooked_weight_error:
        errors["cooked_weight"] = cooked_weight_error

    if not raw_weight_error and not cooked_weight_error:
        cooking_ratio_error = validate_cooking_ratio(
            data.raw_weight,
            data.cooked_weight,
            data.raw_weight_unit,
            data.cooked_weight_unit,
        )
        if cooking_ratio_error:
            errors["cooking_ratio"] = cooking_ratio_error

    macro_errors = validate_macro_data(data.raw_macros)
    errors.update(macro_errors.model_dump(exclude_none=True))

    return ValidationErrors(**errors)


def _messages(errors: BaseModel | Mapping[str, str | None]) -> list[str | None]:
    if isinstance(errors, BaseModel):
        return list(errors.model_dump().values())
    return list(errors.values())


def has_validation_errors(errors: BaseModel | Mapping[str, str | None]) -> bool:
    """True if any field carries a message.

    Accepts an error model or a plain mapping; missing keys and None values
    both mean "no error".
    """
    return any(message is not None for message in _messages(errors))


def get_first_validation_error(errors: BaseModel | Mapping[str, str | None]) -> str | None:
    """Return the first message in field order, or None."""
    first = next((message for message in _messages(errors) if message is not None), None)
    return first or None


def validate_weight_unit(unit: Any) -> bool:
    """True if unit is exactly one of the codes g, oz, lb, kg."""
    return isinstance(unit, str) and unit in {member.value for member in WeightUnit}


def sanitize_string_input(value: str) -> str:
    """Trim surrounding whitespace."""
    return value.strip()


def sanitize_numeric_input(value: str | float) -> float:
    """Turn form input into a number.

    Numbers pass through. Strings are read from their leading numeric prefix
    ("12.5g" -> 12.5). Anything unparsable becomes 0.
    """
    if _is_number(value):
        return value

    match = _NUMERIC_PREFIX.match(value) if isinstance(value, str) else None
    if match is None:
        return 0
    return float(match.group(1).replace("Infinity", "inf"))
