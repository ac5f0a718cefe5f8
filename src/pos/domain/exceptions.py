"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class NotEnoughStockError(ValidationError):
    """A cart addition asked for more units than the product has in stock."""


class CheckoutError(DomainException):
    """Base class for failures raised by the checkout procedure."""


class EmptyCartError(CheckoutError):
    """Checkout was attempted with no lines in the cart."""


class ProductExpiredError(CheckoutError):
    """A cart line refers to a product past its expiry instant."""


class OutOfStockError(CheckoutError):
    """A cart line asks for more units than are in stock at checkout time."""


class InsufficientBalanceError(CheckoutError):
    """The customer cannot cover subtotal plus shipping fee."""
