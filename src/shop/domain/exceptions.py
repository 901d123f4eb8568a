"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Every check runs before any mutation, so an aggregate that raised one of
these is left exactly as it was.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Identifiers --------------------------------------------------------------


class InvalidIdentifierError(ValidationError):
    """An identifier is blank or malformed."""


class InvalidUserIdError(InvalidIdentifierError):
    pass


class InvalidProductIdError(InvalidIdentifierError):
    pass


# --- Scalars ------------------------------------------------------------------


class InvalidQuantityError(ValidationError):
    """Quantities must be positive integers."""


class InvalidPriceError(ValidationError):
    """Prices must be positive, finite amounts."""


# --- Order details ------------------------------------------------------------


class InvalidAddressError(ValidationError):
    pass


class InvalidShippingAddressError(InvalidAddressError):
    pass


class InvalidBillingAddressError(InvalidAddressError):
    pass


class InvalidPaymentMethodError(ValidationError):
    pass


class InvalidStatusError(ValidationError):
    """The requested status is not one of the recognized order statuses."""


class OrderNotModifiableError(ValidationError):
    """Order lines can only change while the order is pending."""


# --- Stock --------------------------------------------------------------------


class InsufficientStockError(ValidationError):
    pass


# --- Lookups ------------------------------------------------------------------


class ItemNotFoundError(EntityNotFoundError):
    """No line item in the cart or order matches the given key."""
