"""Core Data Models - Pydantic models for type safety.

Derived models (results, conversions, error records) are immutable value
objects. FoodData is the one caller-owned record that changes field by field.
All models read and write camelCase aliases for the display layer.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
import uuid


class WeightUnit(str, Enum):
    """Supported mass units."""

    GRAM = "g"
    OUNCE = "oz"
    POUND = "lb"
    KILOGRAM = "kg"


class MacroData(BaseModel):
    """Macronutrient amounts for some weight of food.

    No unit is attached: values belong to whichever weight they were measured
    against. Ranges are not enforced here so validation can report bad input.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    calories: float = Field(default=0, description="Energy in kcal")
    protein: float = Field(default=0, description="Protein in grams")
    carbohydrates: float = Field(default=0, description="Carbohydrates in grams")
    fat: float = Field(default=0, description="Fat in grams")
    fiber: float = Field(default=0, description="Fiber in grams")


class FoodData(BaseModel):
    """A single food as entered by the user, macros measured against the raw weight."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    raw_weight: float = 0
    raw_weight_unit: WeightUnit = WeightUnit.GRAM
    cooked_weight: float = 0
    cooked_weight_unit: WeightUnit = WeightUnit.GRAM
    raw_macros: MacroData = Field(default_factory=MacroData)


class WeightConversions(BaseModel):
    """One weight expressed in every supported unit."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    grams: float
    ounces: float
    pounds: float
    kilograms: float


class WeightConversionPair(BaseModel):
    """Conversions for the raw and cooked weights."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    raw: WeightConversions
    cooked: WeightConversions


class CalculationResults(BaseModel):
    """Everything derived from a valid FoodData, rounded to 2 decimals."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    cooking_loss_percentage: float = Field(ge=0, le=100)
    adjusted_macros: MacroData = Field(description="Macros of the cooked portion")
    raw_density_per_100g: MacroData = Field(alias="rawDensityPer100g")
    cooked_density_per_100g: MacroData = Field(alias="cookedDensityPer100g")
    weight_conversions: WeightConversionPair


class MacroValidationErrors(BaseModel):
    """Per-field messages for a MacroData. None means the field is valid."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    calories: Optional[str] = None
    protein: Optional[str] = None
    carbohydrates: Optional[str] = None
    fat: Optional[str] = None
    fiber: Optional[str] = None


class ValidationErrors(BaseModel):
    """Per-field messages for a FoodData.

    Field order is the order messages are reported in. cooking_ratio holds
    the cross-field raw/cooked check.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    raw_weight: Optional[str] = None
    cooked_weight: Optional[str] = None
    cooking_ratio: Optional[str] = None
    calories: Optional[str] = None
    protein: Optional[str] = None
    carbohydrates: Optional[str] = None
    fat: Optional[str] = None
    fiber: Optional[str] = None


class SavedFood(BaseModel):
    """A named cooking ratio saved for reuse."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(min_length=1, description="Name of the food (unique in the list)")
    cooking_ratio: float = Field(ge=0, description="Cooked weight / raw weight, both in grams")
    date_added: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
