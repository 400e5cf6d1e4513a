"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy

from storefront.domain.exceptions import PersistenceFailure
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.repository.order_repository import OrderFilter, OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self, fail_on_create: bool = False) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.fail_on_create = fail_on_create

    def create_atomic(self, order: Order) -> Order:
        if self.fail_on_create:
            raise PersistenceFailure("storage unavailable")
        if any(o.code == order.code for o in self._store.values()):
            raise PersistenceFailure(f"Order code '{order.code}' already exists")
        order.id = self._next_id
        self._next_id += 1
        self._store[order.id] = copy.deepcopy(order)
        return order

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def update_status_conditional(
        self,
        order_id: int,
        expected: OrderStatus,
        new: OrderStatus,
    ) -> bool:
        order = self._store.get(order_id)
        if order is None or order.status != expected:
            return False
        order.status = new
        return True

    def list_by_owner(self, owner_id: str, order_filter: OrderFilter) -> list[Order]:
        orders = [
            copy.deepcopy(o)
            for o in self._store.values()
            if o.owner_id == owner_id and order_filter.matches(o)
        ]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    # --- Test helpers ---------------------------------------------------------

    def count(self) -> int:
        return len(self._store)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.lookup_calls: list[set[str]] = []

    def get_by_ids(self, product_ids: set[str]) -> dict[str, Product]:
        self.lookup_calls.append(set(product_ids))
        return {pid: self._store[pid] for pid in product_ids if pid in self._store}

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class SequentialCodes:
    """Deterministic order-code generator."""

    def __init__(self, prefix: str = "SO-TEST-") -> None:
        self._prefix = prefix
        self._n = 0

    def __call__(self) -> str:
        self._n += 1
        return f"{self._prefix}{self._n:04d}"
