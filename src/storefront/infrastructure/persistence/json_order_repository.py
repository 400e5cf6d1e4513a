"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

import structlog

from storefront.domain.exceptions import PersistenceFailure
from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderFilter, OrderRepository
from storefront.infrastructure.persistence.json_files import (
    decoding,
    ensure_file,
    load_records,
    locked,
    write_records,
)

logger = structlog.get_logger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- OrderRepository interface --------------------------------------------

    def create_atomic(self, order: Order) -> Order:
        with locked(self._file_path):
            records = load_records(self._file_path)
            with decoding(self._file_path):
                taken = any(raw["code"] == order.code for raw in records)
                new_id = max((int(raw["id"]) for raw in records), default=0) + 1
            if taken:
                raise PersistenceFailure(f"Order code '{order.code}' already exists")

            records.append(self._to_raw(order, new_id))
            write_records(self._file_path, records)
            order.id = new_id

        logger.debug("Order record written", order_id=new_id, code=order.code)
        return order

    def get_by_id(self, order_id: int) -> Order | None:
        with decoding(self._file_path):
            for raw in load_records(self._file_path):
                if raw["id"] == order_id:
                    return self._to_domain(raw)
        return None

    def update_status_conditional(
        self,
        order_id: int,
        expected: OrderStatus,
        new: OrderStatus,
    ) -> bool:
        with locked(self._file_path), decoding(self._file_path):
            records = load_records(self._file_path)
            for raw in records:
                if raw["id"] != order_id:
                    continue
                if raw["status"] != expected.value:
                    logger.debug(
                        "Status update skipped",
                        order_id=order_id,
                        expected=expected.value,
                        actual=raw["status"],
                    )
                    return False
                raw["status"] = new.value
                write_records(self._file_path, records)
                return True
        return False

    def list_by_owner(self, owner_id: str, order_filter: OrderFilter) -> list[Order]:
        with decoding(self._file_path):
            orders = [
                self._to_domain(raw)
                for raw in load_records(self._file_path)
                if raw["owner_id"] == owner_id
            ]
        matching = [o for o in orders if order_filter.matches(o)]
        matching.sort(key=lambda o: (o.created_at, o.id), reverse=True)
        return matching

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order, order_id: int) -> dict:
        return {
            "id": order_id,
            "code": order.code,
            "owner_id": order.owner_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            # Informational only; recomputed from the lines on load.
            "total_price": str(order.total.amount),
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = tuple(
            OrderLine(
                product_id=line["product_id"],
                product_name=line["product_name"],
                quantity=Quantity(line["quantity"]),
                unit_price=Money(Decimal(line["unit_price"])),
            )
            for line in raw["lines"]
        )
        return Order(
            id=raw["id"],
            code=raw["code"],
            owner_id=raw["owner_id"],
            lines=lines,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
