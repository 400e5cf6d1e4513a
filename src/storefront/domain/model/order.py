"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines. Lines and the order
are created together and persisted as one unit; afterwards only the
status may change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import (
    Forbidden,
    InvalidLineCount,
    InvalidTransition,
    ValidationError,
)
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    CREATED = "created"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderLine:
    """One product line with the unit price captured at order-creation time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # never re-read from the product

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_ORDER_LINES = 1
MAX_ORDER_LINES = 5


def check_line_count(count: int) -> None:
    """Raise InvalidLineCount unless ``count`` is within the allowed range."""
    if count < MIN_ORDER_LINES or count > MAX_ORDER_LINES:
        raise InvalidLineCount(
            f"Order must have between {MIN_ORDER_LINES} and {MAX_ORDER_LINES} "
            f"lines, got {count}"
        )


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders; it enforces the
    creation invariants. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    code: str
    owner_id: str
    lines: tuple[OrderLine, ...]
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(owner_id: str, code: str, lines: list[OrderLine]) -> Order:
        """Create a new order in the ``created`` state."""
        if not owner_id or not owner_id.strip():
            raise ValidationError("Order owner is required")
        if not code:
            raise ValidationError("Order code is required")
        check_line_count(len(lines))

        return Order(id=None, code=code, owner_id=owner_id, lines=tuple(lines))

    # --- State transitions ----------------------------------------------------

    def cancel(self, requester_id: str) -> None:
        """Transition CREATED -> CANCELLED on behalf of ``requester_id``."""
        if not self.is_owned_by(requester_id):
            raise Forbidden(f"Order #{self.id} does not belong to the requester")
        if self.status != OrderStatus.CREATED:
            raise InvalidTransition(
                f"Cannot cancel order #{self.id}: current status is "
                f"{self.status.value}, expected {OrderStatus.CREATED.value}"
            )
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id
