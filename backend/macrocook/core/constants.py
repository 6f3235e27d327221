"""Shared constants - conversion factors, messages, labels and storage keys."""

# Mass conversion factors. Every conversion goes through grams.
OUNCES_TO_GRAMS = 28.3495
GRAMS_TO_OUNCES = 0.035274
POUNDS_TO_GRAMS = 453.592
GRAMS_TO_POUNDS = 0.00220462
KILOGRAMS_TO_GRAMS = 1000
GRAMS_TO_KILOGRAMS = 0.001

# Validation messages shown verbatim by the display layer
REQUIRED_FIELD = "This field is required"
POSITIVE_NUMBER_ONLY = "Please enter a positive number"
COOKED_EXCEEDS_RAW = "Cooked weight cannot be greater than raw weight"
INVALID_NUMBER = "Please enter a valid number"
STORAGE_ERROR = "Unable to save data. Please try again."

EMPTY_RESULTS_MESSAGE = "Enter food details to see calculation results"

WEIGHT_UNIT_LABELS = {
    "g": "grams",
    "oz": "ounces",
    "lb": "pounds",
    "kg": "kilograms",
}

# Key of the saved-foods slot in the key-value document
SAVED_FOODS_STORAGE_KEY = "macro-calculator-saved-foods"
