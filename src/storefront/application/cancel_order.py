"""Application service: Cancel Order use case.

The aggregate checks ownership and the current status; the repository
then applies the change only if the stored status is still ``created``.
Of two concurrent cancellations exactly one wins; the other is reported
as an invalid transition.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import InvalidTransition, OrderNotFound
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, requester_id: str, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order #{order_id} not found")

        previous = order.status
        order.cancel(requester_id)

        applied = self._order_repo.update_status_conditional(
            order_id, previous, OrderStatus.CANCELLED
        )
        if not applied:
            raise InvalidTransition(
                f"Order #{order_id} changed status concurrently; cancellation not applied"
            )

        logger.info("Order cancelled", order_id=order_id, requester_id=requester_id)
