"""Calculation errors raised when the engine is called with out-of-domain input.

The engine assumes validated input. Reaching one of these means the caller
skipped the validation gate.
"""


class CalculationError(ValueError):
    """Base class for engine contract violations."""


class InvalidRawWeightError(CalculationError):
    """Raised when the raw weight is zero or negative."""

    def __init__(self) -> None:
        super().__init__("Raw weight must be greater than 0")


class NegativeCookedWeightError(CalculationError):
    """Raised when the cooked weight is negative."""

    def __init__(self) -> None:
        super().__init__("Cooked weight cannot be negative")


class CookedExceedsRawError(CalculationError):
    """Raised when the cooked weight is greater than the raw weight."""

    def __init__(self) -> None:
        super().__init__("Cooked weight cannot be greater than raw weight")


class InvalidWeightError(CalculationError):
    """Raised when a reference weight is zero or negative."""

    def __init__(self) -> None:
        super().__init__("Weight must be greater than 0")


class UnsupportedUnitError(CalculationError):
    """Raised when a weight unit is outside g, oz, lb and kg."""

    def __init__(self, unit: object):
        """Initialize exception with the offending unit.

        Args:
            unit: The unit value that could not be converted
        """
        self.unit = unit
        super().__init__(f"Unsupported weight unit: {unit}")
