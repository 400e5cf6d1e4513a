"""Application service: Get Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import OrderNotFound
from storefront.domain.repository.order_repository import OrderRepository


class GetOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, requester_id: str, order_id: int) -> OrderDTO:
        """Return the requester's order.

        Someone else's order is reported exactly like a missing one.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None or not order.is_owned_by(requester_id):
            raise OrderNotFound(f"Order #{order_id} not found")
        return order_to_dto(order)
