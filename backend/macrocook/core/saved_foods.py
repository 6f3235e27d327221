"""Saved Foods - Pure functions for the list of saved cooking ratios.

All functions are pure and return new lists or records; inputs are never mutated.
"""

from .errors import InvalidRawWeightError, NegativeCookedWeightError
from .models import FoodData, SavedFood
from .weights import to_grams


def create_saved_food(food: FoodData) -> SavedFood:
    """Capture the cooking ratio of a food record.

    The ratio is taken in grams so it does not depend on the units entered.

    Args:
        food: The food record to save

    Returns:
        A new SavedFood with a fresh id and timestamp

    Raises:
        InvalidRawWeightError: If the raw weight is <= 0 grams
        NegativeCookedWeightError: If the cooked weight is < 0 grams
    """
    raw_grams = to_grams(food.raw_weight, food.raw_weight_unit)
    cooked_grams = to_grams(food.cooked_weight, food.cooked_weight_unit)

    if raw_grams <= 0:
        raise InvalidRawWeightError()
    if cooked_grams < 0:
        raise NegativeCookedWeightError()

    return SavedFood(name=food.name.strip(), cooking_ratio=cooked_grams / raw_grams)


def add_saved_food(foods: list[SavedFood], food: SavedFood) -> list[SavedFood]:
    """Append a saved food unless one with the same name already exists."""
    if any(existing.name == food.name for existing in foods):
        return list(foods)
    return [*foods, food]


def remove_saved_food(foods: list[SavedFood], food_id: str) -> list[SavedFood]:
    """Drop the saved food with the given id."""
    return [f for f in foods if f.id != food_id]


def find_saved_food(foods: list[SavedFood], name: str) -> SavedFood | None:
    """Look up a saved food by exact name."""
    return next((f for f in foods if f.name == name), None)


def apply_saved_food(food: FoodData, saved: SavedFood) -> FoodData:
    """Fill a food record from a saved cooking ratio.

    The raw weight and macros stay as entered. The cooked weight becomes
    raw weight * ratio, in the raw weight's unit.

    Args:
        food: The current food record
        saved: The saved food to apply

    Returns:
        A new FoodData; food itself is unchanged
    """
    return food.model_copy(
        update={
            "name": saved.name,
            "cooked_weight": food.raw_weight * saved.cooking_ratio,
            "cooked_weight_unit": food.raw_weight_unit,
        }
    )
