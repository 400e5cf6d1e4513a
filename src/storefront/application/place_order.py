"""Application service: Place Order use case.

Orchestrates the flow between the product lookup and the order
repository. Request-shape errors are raised before the catalog is
touched; product errors abort before anything is written.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, OrderLineSpec, order_to_dto
from storefront.domain.exceptions import (
    DomainException,
    ProductInactive,
    ProductNotFound,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLine, check_line_count
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductLookup
from storefront.domain.service.order_codes import (
    OrderCodeGenerator,
    generate_order_code,
)

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_lookup: ProductLookup,
        code_generator: OrderCodeGenerator = generate_order_code,
    ) -> None:
        self._order_repo = order_repo
        self._product_lookup = product_lookup
        self._code_generator = code_generator

    def handle(self, owner_id: str, line_specs: list[OrderLineSpec]) -> OrderDTO:
        """Place a new order for ``owner_id``.

        Steps:
        1. Validate owner, line count and quantities (no lookups yet).
        2. Resolve every distinct product ID in a single lookup.
        3. Build OrderLines with *current* prices (snapshot). Repeated
           product IDs stay separate lines.
        4. Persist order and lines atomically and return a DTO.
        """
        try:
            order = self._build(owner_id, line_specs)
        except DomainException as exc:
            logger.info(
                "Order rejected",
                owner_id=owner_id,
                error=exc.code,
                reason=str(exc),
            )
            raise

        self._order_repo.create_atomic(order)

        logger.info(
            "Order placed",
            order_id=order.id,
            code=order.code,
            owner_id=order.owner_id,
            total=str(order.total.amount),
            line_count=len(order.lines),
        )
        return order_to_dto(order)

    def _build(self, owner_id: str, line_specs: list[OrderLineSpec]) -> Order:
        if not owner_id or not owner_id.strip():
            raise ValidationError("Order owner is required")
        check_line_count(len(line_specs))
        quantities = [Quantity(spec.quantity) for spec in line_specs]

        products = self._product_lookup.get_by_ids(
            {spec.product_id for spec in line_specs}
        )

        lines: list[OrderLine] = []
        for spec, quantity in zip(line_specs, quantities):
            product = products.get(spec.product_id)
            if product is None:
                raise ProductNotFound(f"Product not found: '{spec.product_id}'")
            if not product.active:
                raise ProductInactive(
                    f"Product '{product.name}' ({product.id}) is not available"
                )

            lines.append(
                OrderLine(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=quantity,
                    unit_price=product.price,  # <-- price snapshot
                )
            )

        return Order.create(
            owner_id=owner_id,
            code=self._code_generator(),
            lines=lines,
        )
