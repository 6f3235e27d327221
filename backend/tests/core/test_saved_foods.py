"""Unit tests for saved-food list operations - pure functions, no mocks needed."""

import pytest

from macrocook.core.errors import InvalidRawWeightError, NegativeCookedWeightError
from macrocook.core.models import FoodData, MacroData, SavedFood, WeightUnit
from macrocook.core.saved_foods import (
    add_saved_food,
    apply_saved_food,
    create_saved_food,
    find_saved_food,
    remove_saved_food,
)


def make_food(**overrides) -> FoodData:
    data = {
        "name": "Chicken breast",
        "raw_weight": 200,
        "cooked_weight": 150,
        "raw_macros": MacroData(calories=220, protein=41, fat=5),
    }
    data.update(overrides)
    return FoodData(**data)


class TestCreateSavedFood:
    """Tests for create_saved_food."""

    def test_ratio_from_weights(self):
        """Ratio is cooked / raw."""
        saved = create_saved_food(make_food())

        assert saved.name == "Chicken breast"
        assert saved.cooking_ratio == 0.75
        assert saved.id

    def test_ratio_in_grams(self):
        """Mixed units give a unit-free ratio."""
        saved = create_saved_food(make_food(raw_weight=1, raw_weight_unit="kg", cooked_weight=600))
        assert saved.cooking_ratio == pytest.approx(0.6)

    def test_name_trimmed(self):
        """Surrounding whitespace is dropped from the name."""
        assert create_saved_food(make_food(name="  Rice ")).name == "Rice"

    def test_unique_ids(self):
        """Each saved food gets its own id."""
        food = make_food()
        assert create_saved_food(food).id != create_saved_food(food).id

    def test_invalid_raw_weight(self):
        """Zero raw weight has no ratio."""
        with pytest.raises(InvalidRawWeightError):
            create_saved_food(make_food(raw_weight=0))

    def test_negative_cooked_weight(self):
        """Negative cooked weight has no ratio."""
        with pytest.raises(NegativeCookedWeightError):
            create_saved_food(make_food(cooked_weight=-1))


class TestAddSavedFood:
    """Tests for add_saved_food."""

    def test_appends(self):
        """New names are appended."""
        first = SavedFood(name="Rice", cooking_ratio=2.5)
        second = SavedFood(name="Beef", cooking_ratio=0.7)

        foods = add_saved_food(add_saved_food([], first), second)
        assert [f.name for f in foods] == ["Rice", "Beef"]

    def test_duplicate_name_ignored(self):
        """A second food with the same name is not added."""
        foods = [SavedFood(name="Rice", cooking_ratio=2.5)]
        updated = add_saved_food(foods, SavedFood(name="Rice", cooking_ratio=3.0))

        assert len(updated) == 1
        assert updated[0].cooking_ratio == 2.5

    def test_input_not_mutated(self):
        """The original list is unchanged."""
        foods: list[SavedFood] = []
        add_saved_food(foods, SavedFood(name="Rice", cooking_ratio=2.5))
        assert foods == []


class TestRemoveSavedFood:
    """Tests for remove_saved_food."""

    def test_removes_by_id(self):
        """Only the matching id is removed."""
        rice = SavedFood(name="Rice", cooking_ratio=2.5)
        beef = SavedFood(name="Beef", cooking_ratio=0.7)

        assert remove_saved_food([rice, beef], rice.id) == [beef]

    def test_unknown_id(self):
        """Unknown ids leave the list as it was."""
        rice = SavedFood(name="Rice", cooking_ratio=2.5)
        assert remove_saved_food([rice], "missing") == [rice]


class TestFindSavedFood:
    """Tests for find_saved_food."""

    def test_exact_name(self):
        """Names match exactly."""
        rice = SavedFood(name="Rice", cooking_ratio=2.5)

        assert find_saved_food([rice], "Rice") == rice
        assert find_saved_food([rice], "rice") is None
        assert find_saved_food([], "Rice") is None


class TestApplySavedFood:
    """Tests for apply_saved_food."""

    def test_cooked_weight_from_ratio(self):
        """Cooked weight is raw weight times the ratio."""
        saved = SavedFood(name="Chicken breast", cooking_ratio=0.75)
        food = apply_saved_food(make_food(name="", raw_weight=200, cooked_weight=0), saved)

        assert food.name == "Chicken breast"
        assert food.cooked_weight == 150
        assert food.raw_weight == 200

    def test_uses_raw_unit(self):
        """The cooked weight is expressed in the raw weight's unit."""
        saved = SavedFood(name="Rice", cooking_ratio=2.5)
        food = apply_saved_food(make_food(raw_weight=2, raw_weight_unit="oz", cooked_weight_unit="kg"), saved)

        assert food.cooked_weight == 5
        assert food.cooked_weight_unit == WeightUnit.OUNCE

    def test_macros_kept(self):
        """Raw macros are not touched."""
        original = make_food()
        food = apply_saved_food(original, SavedFood(name="X", cooking_ratio=0.5))
        assert food.raw_macros == original.raw_macros

    def test_input_not_mutated(self):
        """The original record is unchanged."""
        original = make_food()
        apply_saved_food(original, SavedFood(name="Other", cooking_ratio=0.5))

        assert original.name == "Chicken breast"
        assert original.cooked_weight == 150
