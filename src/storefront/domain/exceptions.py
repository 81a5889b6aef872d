"""Domain-level exceptions.

Every rule violation is a subclass of DomainException so the CLI and the
HTTP boundary can catch them uniformly. Repositories never raise these for
a missing record; they return ``None`` or ``False`` instead.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is malformed or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidStatusTransitionError(ValidationError):
    """An order status change is not in the transition table."""

    def __init__(self, order_id: str, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot move order {order_id} from '{current}' to '{requested}'"
        )
        self.order_id = order_id
        self.current = current
        self.requested = requested


class TotalMismatchError(ValidationError):
    """The submitted order total does not match its line items."""
