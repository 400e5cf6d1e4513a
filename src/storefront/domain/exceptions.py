"""Domain-level exceptions.

Every failure the order core can report has its own class and a stable
``code`` string, so callers (the CLI, an HTTP layer) can tell them apart
without parsing messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "domain_error"


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    code = "validation_error"


class InvalidLineCount(ValidationError):
    code = "invalid_line_count"


class InvalidQuantity(ValidationError):
    code = "invalid_quantity"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "not_found"


class ProductNotFound(EntityNotFoundError):
    code = "product_not_found"


class OrderNotFound(EntityNotFoundError):
    code = "order_not_found"


class ProductInactive(DomainException):
    code = "product_inactive"


class Forbidden(DomainException):
    """The requester does not own the order."""

    code = "forbidden"


class InvalidTransition(DomainException):
    """The order's current status does not allow the requested change."""

    code = "invalid_transition"


class InfrastructureError(Exception):
    """Base class for storage and transport failures."""

    code = "infrastructure_error"


class PersistenceFailure(InfrastructureError):
    code = "persistence_failure"
