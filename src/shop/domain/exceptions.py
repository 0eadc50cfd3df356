"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the session loop can catch them uniformly and display user-friendly
messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EntryNotFoundError(EntityNotFoundError):
    """No catalog entry exists for the given product ID."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID '{product_id}' not found")
        self.product_id = product_id


class DuplicateIdentityError(ValidationError):
    """A catalog entry with the same product ID is already registered."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID '{product_id}' already exists")
        self.product_id = product_id


class InvalidQuantityError(ValidationError):
    """A quantity was zero, negative or not an integer."""


class NullPolicyError(ValidationError):
    """A missing or invalid discount policy was attached to an entry."""


class CartEmptyError(ValidationError):
    """Checkout was attempted on a cart with no items."""
