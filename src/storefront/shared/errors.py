"""Error taxonomy shared across the storefront domain.

Field-level problems on catalog records and cart lines use Protean's own
``ValidationError``; a missing record is Protean's ``ObjectNotFoundError``.
Order submission failures are ``ValidationError`` subclasses so callers that
only care about "bad input" can catch the base class, while each one still
carries a stable ``code`` and a per-field message map for rendering.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError

NotFound = ObjectNotFoundError


class OrderSubmissionError(ValidationError):
    """A cart plus contact details could not be turned into an order."""

    code = "order_submission"
    field = "cart"
    default_message = "Order cannot be submitted"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__({self.field: [self.message]})


class EmptyCartError(OrderSubmissionError):
    code = "empty_cart"
    field = "cart"
    default_message = "Cart is empty"


class PhoneFormatError(OrderSubmissionError):
    code = "phone_format"
    field = "phone"
    default_message = "Enter a valid phone number"


class MissingAddressError(OrderSubmissionError):
    code = "missing_address"
    field = "address"
    default_message = "Delivery address is required"


class WeightLimitError(OrderSubmissionError):
    code = "weight_limit"
    field = "cart"
    default_message = "Order exceeds the maximum total quantity"


class QuantityIncrementError(OrderSubmissionError):
    code = "quantity_increment"
    field = "quantity"
    default_message = "Quantity must be a multiple of the minimum order increment"


class AuthError(Exception):
    """An administrative operation was attempted without a valid admin identity."""

    code = "auth"

    def __init__(self, message: str = "Administrator authentication required"):
        self.message = message
        super().__init__(message)
