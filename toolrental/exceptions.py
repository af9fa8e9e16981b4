"""
Custom exception classes for the tool rental checkout.

Each class is one failure kind of the checkout. The checkout service hands
them back inside a CheckoutResult so callers can branch on the type and show
the message instead of a traceback.
"""


class CheckoutError(Exception):
    """Base class for every checkout failure."""

    def __init__(self, message: str = "Error: checkout failed") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class ToolNotFoundError(CheckoutError):
    """Raised when a tool code cannot be found in the inventory."""

    def __init__(self, message: str = "Error: tool not found") -> None:
        super().__init__(message)


class InvalidRentalDayCountError(CheckoutError):
    """Raised when the rental day count is not an integer of 1 or greater."""

    def __init__(self, message: str = "Error: rental day count must be 1 or greater") -> None:
        super().__init__(message)


class InvalidDiscountPercentError(CheckoutError):
    """Raised when the discount percent is not a whole number in the range 0-100."""

    def __init__(self, message: str = "Error: discount percent must be between 0 and 100") -> None:
        super().__init__(message)


class InvalidCheckoutDateError(CheckoutError):
    """Raised when the checkout date cannot be read as a calendar date."""

    def __init__(self, message: str = "Error: invalid checkout date") -> None:
        super().__init__(message)


class UnknownCategoryError(CheckoutError):
    """Raised when a tool category has no charge policy registered."""

    def __init__(self, message: str = "Error: unknown tool category") -> None:
        super().__init__(message)
