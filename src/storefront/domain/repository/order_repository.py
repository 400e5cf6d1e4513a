"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.order import Order, OrderStatus


@dataclass(frozen=True)
class OrderFilter:
    """Optional criteria for listing a user's orders. ``None`` means any."""

    code: str | None = None
    status: OrderStatus | None = None

    def matches(self, order: Order) -> bool:
        if self.code is not None and order.code != self.code:
            return False
        if self.status is not None and order.status != self.status:
            return False
        return True


class OrderRepository(ABC):

    @abstractmethod
    def create_atomic(self, order: Order) -> Order:
        """Persist a new order together with all of its lines.

        Either the whole aggregate is stored or nothing is. Assigns
        ``order.id`` and returns the order. Raises PersistenceFailure on
        storage errors or when the order code is already taken.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its lines, or None if not found."""

    @abstractmethod
    def update_status_conditional(
        self,
        order_id: int,
        expected: OrderStatus,
        new: OrderStatus,
    ) -> bool:
        """Set the status to ``new`` only if it is currently ``expected``.

        Returns False when the order is missing or its status differs.
        """

    @abstractmethod
    def list_by_owner(self, owner_id: str, order_filter: OrderFilter) -> list[Order]:
        """Return the owner's orders matching ``order_filter``, newest first."""
