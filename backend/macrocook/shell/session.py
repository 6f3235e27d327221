"""Calculator Session - Holds the current food and recomputes on every change.

The session owns the only mutable state: the food being edited. Validation
and results are rebuilt from scratch after each change.
"""

import logging
from typing import Any

from ..core.calculator import calculate_results, can_calculate, empty_food
from ..core.models import CalculationResults, FoodData, MacroData, SavedFood, ValidationErrors
from ..core.saved_foods import apply_saved_food, create_saved_food
from ..core.validation import validate_food_data
from .storage import SavedFoodStore


logger = logging.getLogger(__name__)


class CalculatorSession:
    """State holder wiring the pure core to saved-food storage."""

    def __init__(self, store: SavedFoodStore) -> None:
        """Initialize with a blank food.

        Args:
            store: Where saved foods are kept
        """
        self._store = store
        self._food = empty_food()
        self._errors = ValidationErrors()
        self._results: CalculationResults | None = None
        self._recompute(self._food)

    @property
    def food(self) -> FoodData:
        return self._food

    @property
    def errors(self) -> ValidationErrors:
        return self._errors

    @property
    def results(self) -> CalculationResults | None:
        return self._results

    @property
    def is_calculation_valid(self) -> bool:
        return can_calculate(self._food, self._errors)

    def _recompute(self, food: FoodData) -> None:
        # Nothing is assigned until both steps succeed
        errors = validate_food_data(food)
        results = calculate_results(food)
        self._food = food
        self._errors = errors
        self._results = results

    # ==================== Food Editing ====================

    def set_food(self, food: FoodData) -> None:
        """Replace the current food record."""
        self._recompute(food.model_copy(deep=True))

    def update_food(self, updates: dict[str, Any]) -> None:
        """Change some fields of the current food.

        Args:
            updates: FoodData fields to replace; macro fields (calories,
                protein, ...) are applied to raw_macros

        Raises:
            ValueError: If a key is not a food or macro field
        """
        macro_fields = set(MacroData.model_fields)
        unknown = sorted(set(updates) - macro_fields - set(FoodData.model_fields))
        if unknown:
            raise ValueError(f"Unknown food fields: {', '.join(unknown)}")

        macro_updates = {k: v for k, v in updates.items() if k in macro_fields}
        food_updates = {k: v for k, v in updates.items() if k not in macro_fields}

        data = self._food.model_dump()
        data.update(food_updates)
        data["raw_macros"] = {**data["raw_macros"], **macro_updates}
        self._recompute(FoodData.model_validate(data))

    def reset(self) -> None:
        """Start over with a blank food."""
        self._recompute(empty_food())

    # ==================== Saved Foods ====================

    def saved_foods(self) -> list[SavedFood]:
        return self._store.list_foods()

    def save_current_food(self) -> SavedFood | None:
        """Save the cooking ratio of the current food.

        Returns:
            The saved food, or None if the food is not valid, the name is
            taken, or storage failed
        """
        if not self.is_calculation_valid:
            logger.warning("Refusing to save incomplete food: %r", self._food.name)
            return None

        saved = create_saved_food(self._food)
        if not self._store.add(saved):
            return None
        return saved

    def load_saved_food(self, name: str) -> SavedFood | None:
        """Apply a saved cooking ratio to the current raw weight.

        Args:
            name: Name of the saved food

        Returns:
            The applied saved food, or None if not found
        """
        saved = self._store.get_by_name(name)
        if saved is None:
            logger.warning("Saved food not found: %s", name)
            return None

        logger.info("Loading saved food: %s", name)
        self._recompute(apply_saved_food(self._food, saved))
        return saved

    def delete_saved_food(self, food_id: str) -> bool:
        return self._store.delete(food_id)
