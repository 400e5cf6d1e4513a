"""Application service: List Orders use case (query)."""

from __future__ import annotations

import math

from storefront.application.dto import OrderPageDTO, PaginationDTO, order_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderFilter, OrderRepository

DEFAULT_PAGE_SIZE = 20


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        requester_id: str,
        code: str | None = None,
        status: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> OrderPageDTO:
        """List the requester's orders, newest first.

        Args:
            requester_id: Only orders owned by this user are returned.
            code: Exact order code to match, if given.
            status: Status value (``created`` / ``cancelled``), if given.
            page: 1-based page number.
            limit: Page size.
        """
        if page < 1:
            raise ValidationError("Page must be 1 or greater")
        if limit < 1:
            raise ValidationError("Limit must be 1 or greater")

        order_filter = OrderFilter(code=code or None, status=self._parse_status(status))
        orders = self._order_repo.list_by_owner(requester_id, order_filter)

        skip = (page - 1) * limit
        total = len(orders)
        return OrderPageDTO(
            orders=[order_to_dto(o) for o in orders[skip:skip + limit]],
            pagination=PaginationDTO(
                current_page=page,
                limit=limit,
                skip=skip,
                total=total,
                total_page=math.ceil(total / limit),
            ),
        )

    @staticmethod
    def _parse_status(raw: str | None) -> OrderStatus | None:
        if not raw:
            return None
        try:
            return OrderStatus(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status '{raw}'. Expected one of: {allowed}"
            )
