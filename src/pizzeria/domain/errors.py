"""
Domain exceptions for the pizzeria core.

The core only raises these when it is handed a construction command it cannot
honour. The interactive shell validates input before calling in, so in normal
operation none of these surface to the user.

Exception hierarchy:
    PizzeriaError
    ├── UnknownVariantError     (also ValueError)
    ├── InvalidSizeError        (also ValueError)
    ├── InvalidQuantityError    (also ValueError)
    └── UnknownIngredientError  (also LookupError)
"""


class PizzeriaError(Exception):
    """Base exception for all pizzeria domain errors."""

    pass


class UnknownVariantError(PizzeriaError, ValueError):
    """Raised when a pizza variant tag cannot be resolved."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown pizza variant: {value!r}")


class InvalidSizeError(PizzeriaError, ValueError):
    """Raised when a pizza size cannot be resolved."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid pizza size: {value!r}")


class InvalidQuantityError(PizzeriaError, ValueError):
    """Raised when an ingredient repeat count is negative."""

    def __init__(self, times: int):
        self.times = times
        super().__init__(f"Ingredient count must be non-negative, got {times}")


class UnknownIngredientError(PizzeriaError, LookupError):
    """Raised when a catalog index does not name an available ingredient."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"No ingredient at catalog index {index}")
