"""MCP Server - Tool definitions for the cooking macro calculator.

Defines the MCP tools an assistant uses to enter a food, read the cooked
macros and manage saved cooking ratios. Served over stdio only.
"""

import logging

from mcp.server.fastmcp import FastMCP

from ..core.constants import EMPTY_RESULTS_MESSAGE, STORAGE_ERROR, WEIGHT_UNIT_LABELS
from ..core.models import FoodData, MacroData, WeightUnit
from ..core.validation import (
    get_first_validation_error,
    sanitize_numeric_input,
    sanitize_string_input,
    validate_weight_unit,
)
from ..core.weights import format_weight, get_all_weight_conversions
from .session import CalculatorSession
from .storage import SavedFoodStore, StorageConfig


logger = logging.getLogger(__name__)

# Amounts may arrive as form text such as "150g"
Amount = float | str

_AMOUNT_FIELDS = ("raw_weight", "cooked_weight", "calories", "protein", "carbohydrates", "fat", "fiber")

mcp = FastMCP(
    "macrocook",
    instructions="""Macro Cooking Calculator - cooked-portion nutrition from raw label data.

Enter a food with set_food: raw weight, cooked weight (any of g, oz, lb, kg)
and the macros printed for the raw weight. The response contains the cooking
loss, macros for the cooked portion and density per 100g, or the field errors
to fix. Use update_food to change single fields.

Save a food's cooking ratio with save_food, then reuse it later with
load_saved_food after entering a new raw weight.""",
)

# Lazy-initialized state
_store: SavedFoodStore | None = None
_session: CalculatorSession | None = None


def get_store() -> SavedFoodStore:
    """Get or create the saved-food store."""
    global _store
    if _store is None:
        _store = SavedFoodStore(StorageConfig())
    return _store


def get_session() -> CalculatorSession:
    """Get or create the calculator session."""
    global _session
    if _session is None:
        _session = CalculatorSession(get_store())
    return _session


def _session_state(session: CalculatorSession) -> dict:
    """Current food with either its results or its errors."""
    state: dict = {"food": session.food.model_dump(mode="json", by_alias=True)}

    errors = session.errors.model_dump(by_alias=True, exclude_none=True)
    if errors:
        state["errors"] = errors
        state["first_error"] = get_first_validation_error(session.errors)

    if session.results is None:
        state["message"] = EMPTY_RESULTS_MESSAGE
    else:
        state["results"] = session.results.model_dump(by_alias=True)
    return state


def _recalculate(action) -> dict:
    """Run a session change, turning engine and input errors into an error response.

    CalculationError and pydantic ValidationError are both ValueErrors.
    """
    session = get_session()
    try:
        action(session)
    except ValueError as e:
        logger.error("Calculation failed: %s", str(e))
        return {"error": str(e)}
    return _session_state(session)


def _check_units(*units: str) -> dict | None:
    for unit in units:
        if unit is not None and not validate_weight_unit(unit):
            return {"error": f"Unsupported weight unit: {unit}. Use one of: g, oz, lb, kg."}
    return None


# ==================== Food Tools ====================


@mcp.tool()
def set_food(
    name: str,
    raw_weight: Amount,
    cooked_weight: Amount,
    calories: Amount,
    protein: Amount = 0,
    carbohydrates: Amount = 0,
    fat: Amount = 0,
    fiber: Amount = 0,
    raw_weight_unit: str = "g",
    cooked_weight_unit: str = "g",
) -> dict:
    """Enter a food and calculate its cooked-portion macros.

    Amounts can be numbers or text with a leading number ("150g").

    Args:
        name: Name of the food (e.g., "Chicken breast")
        raw_weight: Weight before cooking
        cooked_weight: Weight after cooking
        calories: Calories in the raw weight
        protein: Protein in grams in the raw weight
        carbohydrates: Carbohydrates in grams in the raw weight
        fat: Fat in grams in the raw weight
        fiber: Fiber in grams in the raw weight
        raw_weight_unit: One of g, oz, lb, kg
        cooked_weight_unit: One of g, oz, lb, kg

    Returns:
        The food with results, or with field errors to fix
    """
    unit_error = _check_units(raw_weight_unit, cooked_weight_unit)
    if unit_error:
        return unit_error

    food = FoodData(
        name=sanitize_string_input(name),
        raw_weight=sanitize_numeric_input(raw_weight),
        raw_weight_unit=WeightUnit(raw_weight_unit),
        cooked_weight=sanitize_numeric_input(cooked_weight),
        cooked_weight_unit=WeightUnit(cooked_weight_unit),
        raw_macros=MacroData(
            calories=sanitize_numeric_input(calories),
            protein=sanitize_numeric_input(protein),
            carbohydrates=sanitize_numeric_input(carbohydrates),
            fat=sanitize_numeric_input(fat),
            fiber=sanitize_numeric_input(fiber),
        ),
    )
    return _recalculate(lambda session: session.set_food(food))


@mcp.tool()
def update_food(
    name: str | None = None,
    raw_weight: Amount | None = None,
    raw_weight_unit: str | None = None,
    cooked_weight: Amount | None = None,
    cooked_weight_unit: str | None = None,
    calories: Amount | None = None,
    protein: Amount | None = None,
    carbohydrates: Amount | None = None,
    fat: Amount | None = None,
    fiber: Amount | None = None,
) -> dict:
    """Update fields of the current food. Only provided fields are updated.

    Args:
        name: New name (optional)
        raw_weight: New raw weight (optional)
        raw_weight_unit: New raw weight unit (optional)
        cooked_weight: New cooked weight (optional)
        cooked_weight_unit: New cooked weight unit (optional)
        calories: New calories (optional)
        protein: New protein (optional)
        carbohydrates: New carbohydrates (optional)
        fat: New fat (optional)
        fiber: New fiber (optional)

    Returns:
        The food with results, or with field errors to fix
    """
    unit_error = _check_units(raw_weight_unit, cooked_weight_unit)
    if unit_error:
        return unit_error

    updates = {}
    if name is not None:
        updates["name"] = sanitize_string_input(name)
    if raw_weight is not None:
        updates["raw_weight"] = raw_weight
    if raw_weight_unit is not None:
        updates["raw_weight_unit"] = raw_weight_unit
    if cooked_weight is not None:
        updates["cooked_weight"] = cooked_weight
    if cooked_weight_unit is not None:
        updates["cooked_weight_unit"] = cooked_weight_unit
    if calories is not None:
        updates["calories"] = calories
    if protein is not None:
        updates["protein"] = protein
    if carbohydrates is not None:
        updates["carbohydrates"] = carbohydrates
    if fat is not None:
        updates["fat"] = fat
    if fiber is not None:
        updates["fiber"] = fiber

    for field in _AMOUNT_FIELDS:
        if field in updates:
            updates[field] = sanitize_numeric_input(updates[field])

    if not updates:
        return {"error": "No updates provided."}

    return _recalculate(lambda session: session.update_food(updates))


@mcp.tool()
def get_results() -> dict:
    """Get the current food with its results or field errors."""
    return _session_state(get_session())


@mcp.tool()
def reset_food() -> dict:
    """Clear the current food and start over."""
    return _recalculate(lambda session: session.reset())


@mcp.tool()
def convert_weight(value: float, unit: str = "g") -> dict:
    """Express a weight in grams, ounces, pounds and kilograms.

    Args:
        value: The weight
        unit: One of g, oz, lb, kg

    Returns:
        Dictionary keyed by unit label, rounded to 2 decimals
    """
    unit_error = _check_units(unit)
    if unit_error:
        return unit_error

    conversions = get_all_weight_conversions(value, unit)
    return {
        "input": f"{value} {WEIGHT_UNIT_LABELS[unit]}",
        "grams": format_weight(conversions.grams),
        "ounces": format_weight(conversions.ounces),
        "pounds": format_weight(conversions.pounds),
        "kilograms": format_weight(conversions.kilograms),
    }


# ==================== Saved Food Tools ====================


@mcp.tool()
def save_food() -> dict:
    """Save the current food's cooking ratio under its name.

    Returns:
        The saved food, or an error if the food is incomplete or the name is taken
    """
    session = get_session()

    if not session.is_calculation_valid:
        return {"error": get_first_validation_error(session.errors) or EMPTY_RESULTS_MESSAGE}

    name = session.food.name.strip()
    if get_store().get_by_name(name) is not None:
        return {"error": f"A saved food named '{name}' already exists."}

    saved = session.save_current_food()
    if saved is None:
        return {"error": STORAGE_ERROR}

    return {"saved": saved.model_dump(mode="json", by_alias=True)}


@mcp.tool()
def list_saved_foods() -> list[dict]:
    """List saved foods with their cooking ratios."""
    return [f.model_dump(mode="json", by_alias=True) for f in get_session().saved_foods()]


@mcp.tool()
def load_saved_food(name: str) -> dict:
    """Apply a saved cooking ratio to the current raw weight.

    Enter the raw weight first; the cooked weight is filled in from the ratio.

    Args:
        name: Exact name of the saved food

    Returns:
        The food with recalculated results
    """
    loaded = None

    def action(session: CalculatorSession) -> None:
        nonlocal loaded
        loaded = session.load_saved_food(name)

    state = _recalculate(action)
    if "error" not in state and loaded is None:
        return {"error": f"No saved food named '{name}'."}
    return state


@mcp.tool()
def delete_saved_food(food_id: str) -> dict:
    """Delete a saved food by ID.

    Args:
        food_id: ID of the saved food

    Returns:
        Confirmation and the number of saved foods left
    """
    session = get_session()
    if not session.delete_saved_food(food_id):
        return {"error": "Saved food not found or delete failed."}
    return {"success": True, "saved_foods_remaining": len(session.saved_foods())}
